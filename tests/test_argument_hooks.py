"""
Tests for the path params, json body and query args hooks.
"""

import pytest
from pydantic import BaseModel

from conftest import CountingHandler
from exobase import Pipeline, RouteMismatchError, ValidationError
from exobase.hooks import use_json_body, use_path_params, use_query_args


class Item(BaseModel):
    id: int
    name: str


class Page(BaseModel):
    page: int = 1
    size: int = 20


@pytest.mark.asyncio
async def test_path_params_merge_into_args(make_props):
    handler = CountingHandler()
    func = use_path_params("/v1/timeout/{id}/clear").wrap(handler)
    await func(make_props(path="/v1/timeout/t_9/clear", args={"existing": True}))
    assert handler.calls[0].args == {"existing": True, "id": "t_9"}


@pytest.mark.asyncio
async def test_path_params_mismatch_is_404(make_props):
    func = use_path_params("/v1/timeout/{id}").wrap(CountingHandler())
    with pytest.raises(RouteMismatchError):
        await func(make_props(path="/v1/timeout"))
    response = await Pipeline([use_path_params("/v1/timeout/{id}")], CountingHandler())(
        make_props(path="/v1/other/1")
    )
    assert response.status == 404


@pytest.mark.asyncio
async def test_json_body_parses_and_applies_values(make_props):
    handler = CountingHandler()
    func = use_json_body(Item).wrap(handler)
    await func(make_props(method="POST", body={"id": 22, "name": "mock-name"}))
    assert handler.calls[0].args == {"id": 22, "name": "mock-name"}


@pytest.mark.asyncio
async def test_json_body_accepts_raw_json(make_props):
    handler = CountingHandler()
    func = use_json_body(Item).wrap(handler)
    await func(make_props(method="POST", body=b'{"id": 1, "name": "x"}'))
    assert handler.calls[0].args["id"] == 1


@pytest.mark.asyncio
async def test_json_body_validation_failure(make_props):
    handler = CountingHandler()
    func = use_json_body(Item).wrap(handler)
    with pytest.raises(ValidationError) as exc:
        await func(make_props(method="POST", body={"id": 22}))
    assert exc.value.status == 400
    assert exc.value.key == "exo.err.json-body.invalid"
    assert "name" in exc.value.info
    assert handler.calls == []


@pytest.mark.asyncio
async def test_json_body_malformed(make_props):
    func = use_json_body(Item).wrap(CountingHandler())
    with pytest.raises(ValidationError) as exc:
        await func(make_props(method="POST", body="{not json"))
    assert exc.value.key == "exo.err.json-body.malformed"


@pytest.mark.asyncio
async def test_query_args_with_defaults_and_coercion(make_props):
    handler = CountingHandler()
    func = use_query_args(Page).wrap(handler)
    await func(make_props(query={"page": "3"}))
    assert handler.calls[0].args == {"page": 3, "size": 20}


@pytest.mark.asyncio
async def test_query_args_invalid(make_props):
    response = await Pipeline([use_query_args(Page)], CountingHandler())(make_props(query={"page": "x"}))
    assert response.status == 400
    assert response.body["key"] == "exo.err.query-args.invalid"


def test_model_required():
    with pytest.raises(TypeError):
        use_json_body(dict)
