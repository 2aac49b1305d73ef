"""
Provider selection.

Runs once at process start. Unset MODEL_PROVIDER selects Google AI Studio;
any value that is not a known kind is fatal.
"""

import logging

from chat_proxy.config.settings import Settings

from .ai_studio import AIStudioProvider
from .base import BaseModelProvider, ProviderKind
from .errors import UnknownProviderKindError
from .vertex import VertexAIProvider

logger = logging.getLogger(__name__)


def create_provider(settings: Settings) -> BaseModelProvider:
    """Build the provider named by settings.model_provider.

    Raises:
        UnknownProviderKindError: If the value matches neither kind.
    """
    try:
        kind = ProviderKind(settings.model_provider)
    except ValueError:
        raise UnknownProviderKindError(settings.model_provider) from None

    if kind is ProviderKind.VERTEX_AI:
        logger.info(
            f"Using Vertex AI with model: {settings.model_name} (service account authentication)"
        )
        return VertexAIProvider(
            model_name=settings.model_name,
            project_id=settings.project_id,
            region=settings.region,
        )

    logger.info(f"Using Google AI Studio with model: {settings.model_name} (API key authentication)")
    return AIStudioProvider(
        model_name=settings.model_name,
        secret_ref=settings.ai_studio_api_secret,
        project_id=settings.project_id,
    )
