"""Secret storage adapters."""

from .secret_manager import (
    SecretAccessor,
    SecretManagerAccessor,
    read_secret_text,
    resolve_secret_version_path,
)

__all__ = [
    "SecretAccessor",
    "SecretManagerAccessor",
    "read_secret_text",
    "resolve_secret_version_path",
]
