"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @app.get("/")
    def read_root(settings: Settings = Depends(get_settings)):
        return {"environment": settings.environment}

    # Direct access (module-level)
    settings = get_settings()
    print(settings.firestore_project_id)
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Document Store - Firestore
    # -------------------------------------------------------------------------
    firestore_project_id: Optional[str] = Field(
        default=None,
        description="Google Cloud project hosting the Firestore database",
    )
    firestore_database: str = Field(
        default="(default)",
        description="Firestore database ID",
    )
    use_in_memory_store: bool = Field(
        default=False,
        description="Serve from a process-local in-memory store (local development only)",
    )

    # -------------------------------------------------------------------------
    # Blob Storage - Supabase
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Supabase anonymous key (limited access)",
    )
    storage_bucket: str = Field(
        default="photos",
        description="Public Supabase Storage bucket holding post and profile photos",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------
    jwt_secret: Optional[str] = Field(
        default=None,
        description="Shared secret for HS256 tokens issued by trusted services",
    )
    jwt_audience: Optional[str] = Field(
        default=None,
        description="Expected audience of HS256 tokens (not checked when unset)",
    )
    firebase_project_id: Optional[str] = Field(
        default=None,
        description="Firebase project whose ID tokens are accepted (RS256 via JWKS)",
    )

    # -------------------------------------------------------------------------
    # Paging
    # -------------------------------------------------------------------------
    feed_page_size: int = Field(
        default=50,
        ge=1,
        description="Default number of posts returned by the home feed",
    )
    profile_posts_page_size: int = Field(
        default=50,
        ge=1,
        description="Default number of posts returned for a user's profile",
    )

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------
    host: str = Field(default="0.0.0.0", description="Bind address for `python -m backend`")
    port: int = Field(default=8001, description="Bind port for `python -m backend`")
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated origins allowed in addition to localhost",
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parsed CORS_ALLOWED_ORIGINS, blanks dropped."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    # -------------------------------------------------------------------------
    # Observability - Logging & Sentry
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Root log level: DEBUG, INFO, WARNING, ERROR",
    )
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level '{v}'")
        return level

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
