"""VertexAIProvider: initialization and candidate extraction."""

import httpx
import pytest
from google.genai import types

from chat_proxy.infrastructure.llm.base import ProviderKind
from chat_proxy.infrastructure.llm.errors import (
    GenerationError,
    MalformedResponseError,
    MissingProjectError,
    ProviderNotInitializedError,
)
from chat_proxy.infrastructure.llm.vertex import VertexAIProvider

from .fakes import FakeClientFactory, FakeModels, make_response


def _provider(models: FakeModels, project_id: str | None = "proj-1"):
    factory = FakeClientFactory(models)
    provider = VertexAIProvider(
        model_name="gemini-2.0-flash-lite",
        project_id=project_id,
        region="us-central1",
        client_factory=factory,
    )
    return provider, factory


async def test_initialize_builds_vertex_client():
    provider, factory = _provider(FakeModels(make_response("hi")))

    await provider.initialize()

    assert provider.is_initialized
    assert provider.kind is ProviderKind.VERTEX_AI
    assert factory.calls == [{"vertexai": True, "project": "proj-1", "location": "us-central1"}]


async def test_initialize_without_project_fails():
    provider, factory = _provider(FakeModels(), project_id=None)

    with pytest.raises(MissingProjectError):
        await provider.initialize()

    assert factory.calls == []
    assert not provider.is_initialized


async def test_generate_sends_single_user_turn():
    models = FakeModels(make_response("Hello there"))
    provider, _ = _provider(models)
    await provider.initialize()

    reply = await provider.generate("Hello")

    assert reply == "Hello there"
    assert len(models.calls) == 1
    call = models.calls[0]
    assert call["model"] == "gemini-2.0-flash-lite"
    (content,) = call["contents"]
    assert content.role == "user"
    assert [part.text for part in content.parts] == ["Hello"]


async def test_generate_takes_first_candidate():
    provider, _ = _provider(FakeModels(make_response("first", "second")))
    await provider.initialize()

    assert await provider.generate("pick one") == "first"


async def test_generate_is_stateless_across_calls():
    models = FakeModels(make_response("same answer"))
    provider, _ = _provider(models)
    await provider.initialize()

    first = await provider.generate("question")
    second = await provider.generate("question")

    assert first == second == "same answer"
    assert len(models.calls) == 2


@pytest.mark.parametrize(
    "response",
    [
        types.GenerateContentResponse(candidates=[]),
        types.GenerateContentResponse(),
        types.GenerateContentResponse(candidates=[types.Candidate()]),
        types.GenerateContentResponse(
            candidates=[types.Candidate(content=types.Content(role="model", parts=[]))]
        ),
        types.GenerateContentResponse(
            candidates=[types.Candidate(content=types.Content(role="model", parts=[types.Part()]))]
        ),
    ],
    ids=["no-candidates", "candidates-unset", "no-content", "no-parts", "no-text"],
)
async def test_generate_malformed_response(response):
    provider, _ = _provider(FakeModels(response))
    await provider.initialize()

    with pytest.raises(MalformedResponseError):
        await provider.generate("Hello")


async def test_generate_wraps_transport_error():
    provider, _ = _provider(FakeModels(error=httpx.ConnectError("connection refused")))
    await provider.initialize()

    with pytest.raises(GenerationError, match="connection refused"):
        await provider.generate("Hello")


async def test_generate_before_initialize_fails():
    provider, _ = _provider(FakeModels(make_response("hi")))

    with pytest.raises(ProviderNotInitializedError):
        await provider.generate("Hello")
