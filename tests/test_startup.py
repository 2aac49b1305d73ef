"""Startup ordering: the server is never built unless the provider initializes."""

import pytest

from chat_proxy import main as main_module
from chat_proxy.infrastructure.llm.errors import SecretResolutionError

from .fakes import FakeSecretAccessor, StubProvider, make_settings


class FakeServer:
    instances: list["FakeServer"] = []

    def __init__(self, config):
        self.config = config
        self.served = False
        FakeServer.instances.append(self)

    async def serve(self):
        self.served = True


@pytest.fixture(autouse=True)
def fake_uvicorn(monkeypatch):
    FakeServer.instances = []
    monkeypatch.setattr(main_module.uvicorn, "Server", FakeServer)
    monkeypatch.setattr(main_module, "setup_logging", lambda *_args, **_kwargs: None)
    monkeypatch.setattr(main_module, "load_dotenv", lambda *_args, **_kwargs: False)
    return FakeServer


async def test_serve_initializes_before_binding(settings):
    provider = StubProvider()

    await main_module.serve(settings, provider=provider)

    assert provider.initialize_calls == 1
    (server,) = FakeServer.instances
    assert server.served
    assert server.config.port == 8080
    assert server.config.app.state.provider is provider


async def test_serve_stops_when_initialize_fails(settings):
    class FailingProvider(StubProvider):
        async def initialize(self):
            raise SecretResolutionError("Secret not found")

    with pytest.raises(SecretResolutionError):
        await main_module.serve(settings, provider=FailingProvider())

    assert FakeServer.instances == []


@pytest.mark.parametrize(
    "overrides",
    [
        {"model_provider": "google-vertexai"},
        {"model_provider": "google-ai-studio", "GOOGLE_AI_STUDIO_API_SECRET": ""},
        {"model_provider": "google-ai-studio", "GOOGLE_AI_STUDIO_API_SECRET": "bare-name"},
        {"model_provider": "openai"},
    ],
    ids=["vertex-no-project", "ai-studio-no-secret", "ai-studio-bare-name-no-project", "unknown-kind"],
)
def test_main_exits_on_configuration_error(overrides):
    with pytest.raises(SystemExit) as exc_info:
        main_module.main(make_settings(**overrides))

    assert exc_info.value.code == 1
    assert FakeServer.instances == []


def test_main_exits_when_secret_cannot_be_read(monkeypatch):
    accessor = FakeSecretAccessor(error=SecretResolutionError("Permission denied"))
    monkeypatch.setattr(
        "chat_proxy.infrastructure.llm.ai_studio.SecretManagerAccessor",
        lambda: accessor,
    )

    with pytest.raises(SystemExit) as exc_info:
        main_module.main(make_settings(GOOGLE_CLOUD_PROJECT="proj-1"))

    assert exc_info.value.code == 1
    assert accessor.names == ["projects/proj-1/secrets/gemini-api-key-secret/versions/latest"]
    assert FakeServer.instances == []
