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
    print(settings.supabase_url)
"""

from functools import lru_cache
from typing import Optional

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
    # Supabase Database
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

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # Authentication - Supabase JWT / API keys
    # -------------------------------------------------------------------------
    supabase_jwt_secret: str = Field(
        default="",
        description="HS256 secret used to verify Supabase access tokens",
    )
    supabase_jwt_audience: str = Field(
        default="authenticated",
        description="Expected 'aud' claim of Supabase access tokens",
    )
    api_keys: str = Field(
        default="",
        description="Comma-separated list of valid API keys",
    )

    @property
    def api_keys_list(self) -> list[str]:
        """Parse API keys into a list."""
        return [k.strip() for k in self.api_keys.split(",") if k.strip()]

    # -------------------------------------------------------------------------
    # HTTP
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated list of origins allowed by CORS",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    # -------------------------------------------------------------------------
    # Workout History
    # -------------------------------------------------------------------------
    history_days_per_week: int = Field(
        default=7,
        ge=1,
        le=7,
        description="Maximum sessions returned by the weekly history view",
    )
    recent_workouts_limit: int = Field(
        default=3,
        ge=1,
        le=20,
        description="Default number of workouts returned by the recent view",
    )

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
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
