"""
Application Settings using Pydantic Settings.

Centralized configuration management with environment variable support.
Values are read once at process start.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MODEL_PROVIDER = "google-ai-studio"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
        protected_namespaces=(),
    )

    # ============================================
    # Server
    # ============================================
    host: str = Field(default="0.0.0.0", description="Listen host")
    port: int = Field(default=8080, description="Listen port (Cloud Run injects PORT)")
    log_level: str = Field(default="INFO", description="Logging level")
    cors_allowed_origin: str = Field(
        default="*",
        description="Allowed CORS origin, or a comma-separated list of origins",
    )
    expose_debug_info: bool = Field(
        default=True,
        description="Include resolved model configuration in chat replies",
    )

    # ============================================
    # Model Provider
    # ============================================
    model_name: str = Field(
        default="gemini-2.0-flash-lite",
        description="Gemini model name",
    )
    model_provider: str = Field(
        default=DEFAULT_MODEL_PROVIDER,
        description="google-vertexai or google-ai-studio",
    )

    # ============================================
    # Google Cloud
    # ============================================
    project_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GOOGLE_CLOUD_PROJECT", "GCP_PROJECT"),
        description="Google Cloud project ID",
    )
    region: str = Field(
        default="us-central1",
        validation_alias=AliasChoices("GOOGLE_CLOUD_REGION", "GCP_REGION"),
        description="Vertex AI location",
    )
    ai_studio_api_secret: str | None = Field(
        default="gemini-api-key-secret",
        validation_alias=AliasChoices("GOOGLE_AI_STUDIO_API_SECRET"),
        description="Secret Manager secret name or projects/... path holding the AI Studio key",
    )

    @field_validator("model_provider", mode="before")
    @classmethod
    def _default_empty_provider(cls, value):
        # Only unset or empty means the default; anything else is kept verbatim for selection
        if value is None or value == "":
            return DEFAULT_MODEL_PROVIDER
        return value

    @field_validator("project_id", "ai_studio_api_secret", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    # ============================================
    # Computed Properties
    # ============================================
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS_ALLOWED_ORIGIN into a list for CORSMiddleware."""
        origins = [origin.strip() for origin in self.cors_allowed_origin.split(",")]
        return [origin for origin in origins if origin] or ["*"]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
