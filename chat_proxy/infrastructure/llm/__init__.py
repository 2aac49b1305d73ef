"""LLM infrastructure - model provider adapters."""

from .base import BaseModelProvider, ProviderKind
from .errors import GenerationError, MalformedResponseError, ProviderInitError

__all__ = [
    "BaseModelProvider",
    "GenerationError",
    "MalformedResponseError",
    "ProviderInitError",
    "ProviderKind",
]
