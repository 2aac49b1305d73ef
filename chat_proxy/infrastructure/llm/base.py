"""
Abstract Base Class for Model Providers.

Defines the interface shared by the Vertex AI and Google AI Studio providers.
"""

from abc import ABC, abstractmethod
from enum import Enum

from google import genai

from .errors import ProviderNotInitializedError


class ProviderKind(str, Enum):
    """Supported model backends (MODEL_PROVIDER values)."""

    VERTEX_AI = "google-vertexai"
    AI_STUDIO = "google-ai-studio"


class BaseModelProvider(ABC):
    """Abstract base class for model providers.

    A provider is built from settings at startup, initialized exactly once,
    then shared read-only by every request for the life of the process.
    """

    def __init__(self, model_name: str):
        self._model_name = model_name
        self._client: genai.Client | None = None

    @abstractmethod
    async def initialize(self) -> None:
        """Perform one-time setup before requests are served.

        Raises:
            ProviderInitError: If required configuration is missing or the
                client cannot be constructed.
        """
        pass

    @abstractmethod
    async def generate(self, message: str) -> str:
        """Send a single-turn user prompt and return the reply text.

        Args:
            message: User message, already validated as non-blank.

        Returns:
            Text of the first response candidate.

        Raises:
            GenerationError: If the backend call fails or the response has
                no usable text.
        """
        pass

    @property
    def model_name(self) -> str:
        """Get the model name."""
        return self._model_name

    @property
    @abstractmethod
    def kind(self) -> ProviderKind:
        """Get the provider kind."""
        pass

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> genai.Client:
        """Get the initialized genai client."""
        if self._client is None:
            raise ProviderNotInitializedError(
                f"{type(self).__name__} used before initialize() completed"
            )
        return self._client
