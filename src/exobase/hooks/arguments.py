"""Hooks that validate request data into args with pydantic models."""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from exobase.entities import Props
from exobase.errors import ValidationError
from exobase.protocols import Handler


def _describe(err: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in e['loc']) or '<root>'}: {e['msg']}" for e in err.errors()
    )


class _ModelArgsHook:
    source = ""

    def __init__(self, model: type[BaseModel]) -> None:
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            raise TypeError(f"Expected a pydantic model class, got {model!r}")
        self.model = model

    def extract(self, props: Props) -> Any:
        raise NotImplementedError

    def validate(self, data: Any) -> dict[str, Any]:
        try:
            parsed = self.model.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                "Validation Failed",
                key=f"exo.err.{self.source}.invalid",
                info=_describe(e),
            ) from e
        return parsed.model_dump()

    def wrap(self, func: Handler) -> Handler:
        async def handler(props: Props) -> Any:
            args = self.validate(self.extract(props))
            return await func(props.merge(args=args))

        return handler


class JsonBodyHook(_ModelArgsHook):
    """Validates the JSON request body."""

    source = "json-body"

    def extract(self, props: Props) -> Any:
        body = props.request.body
        if body is None or body == b"" or body == "":
            return {}
        if isinstance(body, (bytes, str)):
            try:
                return json.loads(body)
            except ValueError as e:
                raise ValidationError(
                    "Invalid JSON body",
                    key="exo.err.json-body.malformed",
                    info=str(e),
                ) from e
        return body


class QueryArgsHook(_ModelArgsHook):
    """Validates the query string parameters."""

    source = "query-args"

    def extract(self, props: Props) -> Any:
        query = props.request.query
        return dict(query) if isinstance(query, Mapping) else {}


def use_json_body(model: type[BaseModel]) -> JsonBodyHook:
    """Validate the request body against ``model`` and merge it into args.

    Example:
        ```python
        class CreateTimeout(BaseModel):
            callback_url: str
            seconds: int

        use_json_body(CreateTimeout)
        ```
    """
    return JsonBodyHook(model)


def use_query_args(model: type[BaseModel]) -> QueryArgsHook:
    """Validate the query string against ``model`` and merge it into args."""
    return QueryArgsHook(model)
