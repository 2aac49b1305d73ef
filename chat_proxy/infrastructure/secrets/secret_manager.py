"""
Google Secret Manager access.

Resolves a configured secret reference to its "latest" version path and
reads the raw payload bytes.
"""

import logging
from abc import ABC, abstractmethod

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import DefaultCredentialsError
from google.cloud import secretmanager

from chat_proxy.infrastructure.llm.errors import (
    MissingProjectError,
    MissingSecretReferenceError,
    SecretResolutionError,
)

logger = logging.getLogger(__name__)

QUALIFIED_PREFIX = "projects/"


def resolve_secret_version_path(secret_ref: str | None, project_id: str | None) -> str:
    """Build the fully-qualified path of the latest version of a secret.

    Args:
        secret_ref: Bare secret name (``my-secret``) or a resource path
            (``projects/p/secrets/my-secret``).
        project_id: Project used to qualify a bare name.

    Returns:
        ``projects/{project}/secrets/{name}/versions/latest``

    Raises:
        MissingSecretReferenceError: If no secret reference is configured.
        MissingProjectError: If a bare name is given without a project.
    """
    if not secret_ref:
        raise MissingSecretReferenceError(
            "GOOGLE_AI_STUDIO_API_SECRET environment variable is required for Google AI Studio"
        )

    if secret_ref.startswith(QUALIFIED_PREFIX):
        return f"{secret_ref}/versions/latest"

    if not project_id:
        raise MissingProjectError(
            "GOOGLE_CLOUD_PROJECT environment variable is required to resolve Secret Manager secrets"
        )

    return f"projects/{project_id}/secrets/{secret_ref}/versions/latest"


class SecretAccessor(ABC):
    """Reads raw secret payloads by version path."""

    @abstractmethod
    async def access_secret_version(self, name: str) -> bytes:
        """Return the payload of the secret version at ``name``.

        Raises:
            SecretResolutionError: If the secret cannot be read.
        """
        pass


class SecretManagerAccessor(SecretAccessor):
    """SecretAccessor backed by the Secret Manager async client."""

    async def access_secret_version(self, name: str) -> bytes:
        try:
            # The async client must be created inside the running event loop
            async with secretmanager.SecretManagerServiceAsyncClient() as client:
                response = await client.access_secret_version(name=name)
        except (GoogleAPIError, DefaultCredentialsError) as e:
            raise SecretResolutionError(f"Failed to access secret version {name}: {e}") from e

        logger.info(f"Secret version accessed: {response.name}")
        return response.payload.data


async def read_secret_text(accessor: SecretAccessor, name: str) -> str:
    """Fetch a secret version and decode it as trimmed UTF-8 text."""
    payload = await accessor.access_secret_version(name)
    try:
        value = payload.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise SecretResolutionError(f"Secret payload at {name} is not valid UTF-8") from e

    if not value:
        raise SecretResolutionError(f"Secret payload at {name} is empty")
    return value
