"""
FastAPI Dependency Injection Configuration.

The provider and settings are built once during startup and stored on
``app.state``; these dependencies hand them to the route handlers.
"""

from typing import TYPE_CHECKING

from fastapi import Request

from .settings import Settings

if TYPE_CHECKING:
    from chat_proxy.infrastructure.llm.base import BaseModelProvider


def get_provider(request: Request) -> "BaseModelProvider":
    """Get the initialized model provider for this process."""
    return request.app.state.provider


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings
