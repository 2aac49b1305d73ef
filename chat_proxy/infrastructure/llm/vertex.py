"""
Vertex AI Model Provider Implementation.

Authenticates with ambient service-account credentials (ADC) and calls
Gemini through the Vertex AI endpoint of google-genai.
"""

import logging
from collections.abc import Callable

import httpx
from google import genai
from google.genai import errors, types

from .base import BaseModelProvider, ProviderKind
from .errors import GenerationError, MalformedResponseError, MissingProjectError

logger = logging.getLogger(__name__)


class VertexAIProvider(BaseModelProvider):
    """Gemini on Vertex AI (service account authentication)."""

    def __init__(
        self,
        model_name: str,
        project_id: str | None,
        region: str = "us-central1",
        client_factory: Callable[..., genai.Client] = genai.Client,
    ):
        """Initialize Vertex AI provider.

        Args:
            model_name: Gemini model name.
            project_id: Google Cloud project the model is billed to.
            region: Vertex AI location.
            client_factory: Builds the genai client (replaced in tests).
        """
        super().__init__(model_name)
        self.project_id = project_id
        self.region = region
        self._client_factory = client_factory

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.VERTEX_AI

    async def initialize(self) -> None:
        if not self.project_id:
            raise MissingProjectError(
                "GOOGLE_CLOUD_PROJECT environment variable is required for Vertex AI"
            )

        self._client = self._client_factory(
            vertexai=True,
            project=self.project_id,
            location=self.region,
        )
        logger.info(
            f"VertexAIProvider initialized with model: {self._model_name} "
            f"(project={self.project_id}, location={self.region})"
        )

    async def generate(self, message: str) -> str:
        contents = [
            types.Content(
                role="user",
                parts=[types.Part.from_text(text=message)],
            )
        ]

        try:
            response = await self.client.aio.models.generate_content(
                model=self._model_name,
                contents=contents,
            )
        except (errors.APIError, httpx.HTTPError) as e:
            raise GenerationError(str(e)) from e

        return self._first_candidate_text(response)

    @staticmethod
    def _first_candidate_text(response: types.GenerateContentResponse) -> str:
        """Extract candidates[0].content.parts[0].text.

        Raises:
            MalformedResponseError: If any level of the path is missing.
        """
        if not response.candidates:
            raise MalformedResponseError("Model response contained no candidates")

        content = response.candidates[0].content
        if content is None or not content.parts:
            raise MalformedResponseError("First candidate has no content parts")

        text = content.parts[0].text
        if text is None:
            raise MalformedResponseError("First content part has no text")
        return text
