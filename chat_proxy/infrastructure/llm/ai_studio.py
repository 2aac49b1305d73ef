"""
Google AI Studio Model Provider Implementation.

Authenticates with an API key that is read from Secret Manager at startup.
"""

import logging
from collections.abc import Callable

import httpx
from google import genai
from google.genai import errors

from chat_proxy.infrastructure.secrets.secret_manager import (
    SecretAccessor,
    SecretManagerAccessor,
    read_secret_text,
    resolve_secret_version_path,
)

from .base import BaseModelProvider, ProviderKind
from .errors import GenerationError, MalformedResponseError

logger = logging.getLogger(__name__)


class AIStudioProvider(BaseModelProvider):
    """Gemini on Google AI Studio (API key authentication)."""

    def __init__(
        self,
        model_name: str,
        secret_ref: str | None,
        project_id: str | None = None,
        secret_accessor: SecretAccessor | None = None,
        client_factory: Callable[..., genai.Client] = genai.Client,
    ):
        """Initialize Google AI Studio provider.

        Args:
            model_name: Gemini model name.
            secret_ref: Secret name, or a ``projects/.../secrets/...`` path.
            project_id: Project used to qualify a bare secret name.
            secret_accessor: Reads the secret payload (Secret Manager by default).
            client_factory: Builds the genai client (replaced in tests).
        """
        super().__init__(model_name)
        self.secret_ref = secret_ref
        self.project_id = project_id
        self._secret_accessor = secret_accessor or SecretManagerAccessor()
        self._client_factory = client_factory
        self.secret_version_path: str | None = None

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.AI_STUDIO

    async def initialize(self) -> None:
        self.secret_version_path = resolve_secret_version_path(self.secret_ref, self.project_id)
        api_key = await read_secret_text(self._secret_accessor, self.secret_version_path)

        self._client = self._client_factory(api_key=api_key)
        logger.info(
            f"AIStudioProvider initialized with model: {self._model_name} "
            f"(secret={self.secret_version_path})"
        )

    async def generate(self, message: str) -> str:
        try:
            response = await self.client.aio.models.generate_content(
                model=self._model_name,
                contents=message,
            )
        except (errors.APIError, httpx.HTTPError) as e:
            raise GenerationError(str(e)) from e

        # response.text is None when there are no candidates or no text parts
        text = response.text
        if not text:
            raise MalformedResponseError("Model response contained no text")
        return text
