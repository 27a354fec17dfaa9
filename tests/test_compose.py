"""
Tests for hook composition and the pipeline boundary.
"""

import pytest

from conftest import CountingHandler
from exobase import Pipeline, Props, Response, compose, error, hook


def tracing(name, trail):
    def wrap(func):
        async def handler(props):
            trail.append(f"{name}:in")
            result = await func(props)
            trail.append(f"{name}:out")
            return result

        return handler

    return wrap


class AddArg:
    def __init__(self, **args):
        self.args = args

    def wrap(self, func):
        async def handler(props):
            return await func(props.merge(args=self.args))

        return handler


@pytest.mark.asyncio
async def test_outermost_hook_runs_first_and_last(make_props):
    trail = []

    async def endpoint(props):
        trail.append("handler")
        return "done"

    composed = compose(tracing("a", trail), tracing("b", trail), endpoint)
    assert await composed(make_props()) == "done"
    assert trail == ["a:in", "b:in", "handler", "b:out", "a:out"]


@pytest.mark.asyncio
async def test_compose_with_only_handler(make_props):
    handler = CountingHandler()
    assert compose(handler) is handler


def test_compose_requires_a_handler():
    with pytest.raises(TypeError):
        compose()


def test_compose_rejects_non_hooks():
    with pytest.raises(TypeError):
        compose(42, CountingHandler())


@pytest.mark.asyncio
async def test_hook_objects_and_plain_functions_mix(make_props):
    handler = CountingHandler()
    composed = compose(AddArg(a=1), tracing("t", []), AddArg(b=2), handler)
    await composed(make_props())
    assert handler.calls[0].args == {"a": 1, "b": 2}


@pytest.mark.asyncio
async def test_hook_can_short_circuit(make_props):
    handler = CountingHandler()

    @hook
    async def deny(func, props):
        return Response(status=403, body={"message": "no"})

    response = await Pipeline([deny], handler)(make_props())
    assert response.status == 403
    assert handler.calls == []


@pytest.mark.asyncio
async def test_merge_keeps_prior_fields(make_props):
    handler = CountingHandler()
    props = make_props(services={"db": "db-handle"}, auth={"api_key": "k"})
    await compose(AddArg(a=1), AddArg(b=2), handler)(props)
    seen = handler.calls[0]
    assert seen.request is props.request
    assert seen.services == {"db": "db-handle"}
    assert seen.auth == {"api_key": "k"}
    assert seen.args == {"a": 1, "b": 2}
    assert props.args == {}


@pytest.mark.asyncio
async def test_pipeline_wraps_results(make_props):
    response = await Pipeline([], CountingHandler({"message": "pong"}))(make_props())
    assert response == Response(status=200, body={"message": "pong"})


@pytest.mark.asyncio
async def test_pipeline_normalizes_unknown_error_from_handler(make_props):
    async def endpoint(props):
        raise RuntimeError("secret details")

    response = await Pipeline([AddArg(a=1)], endpoint)(make_props())
    assert response.status == 500
    assert response.body == {"message": "Unknown Error"}


@pytest.mark.asyncio
async def test_pipeline_normalizes_error_from_hook(make_props):
    handler = CountingHandler()

    @hook
    async def reject(func, props):
        raise error("Gone", status=410, key="exo.err.gone")

    response = await Pipeline([AddArg(a=1), reject], handler)(make_props())
    assert response.status == 410
    assert response.body["key"] == "exo.err.gone"
    assert handler.calls == []


@pytest.mark.asyncio
async def test_pipeline_same_rule_at_any_depth(make_props):
    async def endpoint(props):
        raise error("Gone", status=410, key="exo.err.gone")

    @hook
    async def reject(func, props):
        raise error("Gone", status=410, key="exo.err.gone")

    from_handler = await Pipeline([AddArg(a=1)], endpoint)(make_props())
    from_hook = await Pipeline([reject], endpoint)(make_props())
    assert from_handler == from_hook


@pytest.mark.asyncio
async def test_pipeline_handler_property_propagates(make_props):
    async def endpoint(props):
        raise ValueError("boom")

    pipeline = Pipeline([], endpoint)
    with pytest.raises(ValueError):
        await pipeline.handler(make_props())


def test_props_merge_does_not_mutate():
    props = Props(args={"a": 1})
    merged = props.merge(args={"b": 2})
    assert props.args == {"a": 1}
    assert merged.args == {"a": 1, "b": 2}


@pytest.mark.asyncio
async def test_pipeline_answers_error_with_invalid_status(make_props):
    async def endpoint(props):
        raise error("bad", status=999)

    response = await Pipeline([], endpoint)(make_props())
    assert response.status == 500
    assert response.body == {"message": "Unknown Error"}
