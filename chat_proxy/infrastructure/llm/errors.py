"""Errors raised by model providers.

Init errors are fatal at startup. Generation errors are recovered per request.
"""


class ProviderInitError(Exception):
    """Base class for failures while selecting or initializing a provider."""


class MissingProjectError(ProviderInitError):
    """A Google Cloud project ID is required but not configured."""


class MissingSecretReferenceError(ProviderInitError):
    """The AI Studio API key secret reference is not configured."""


class UnknownProviderKindError(ProviderInitError):
    """MODEL_PROVIDER names neither known backend."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid model provider: {value}")


class SecretResolutionError(ProviderInitError):
    """The API key could not be read from Secret Manager."""


class GenerationError(Exception):
    """Base class for failures while generating a reply."""


class MalformedResponseError(GenerationError):
    """The backend answered without usable candidate text."""


class ProviderNotInitializedError(GenerationError):
    """generate() was called before initialize() completed."""
