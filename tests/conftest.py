"""Shared fixtures for chat proxy tests."""

import pytest

from chat_proxy.config.settings import Settings, get_settings

from .fakes import make_settings

CONFIG_ENV_VARS = [
    "MODEL_NAME",
    "MODEL_PROVIDER",
    "GOOGLE_CLOUD_PROJECT",
    "GCP_PROJECT",
    "GOOGLE_CLOUD_REGION",
    "GCP_REGION",
    "GOOGLE_AI_STUDIO_API_SECRET",
    "CORS_ALLOWED_ORIGIN",
    "EXPOSE_DEBUG_INFO",
    "HOST",
    "PORT",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_config_env(monkeypatch):
    """Keep host environment variables out of Settings."""
    for name in CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return make_settings(GOOGLE_CLOUD_PROJECT="proj-1")
