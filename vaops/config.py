"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")

    # API Configuration
    api_title: str = Field(default="VA Operations Portal")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api/v1")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Database (Supabase Postgres in production)
    database_url: str = Field(
        default=f"sqlite:///{BASE_DIR / 'vaops.db'}",
        description="SQLAlchemy database URL"
    )

    # Supabase Configuration
    supabase_url: Optional[str] = Field(default=None, description="Supabase project URL")
    supabase_anon_key: Optional[str] = Field(default=None, description="Supabase anonymous key")
    supabase_jwt_secret: Optional[str] = Field(default=None, description="Supabase JWT secret")

    # CORS
    cors_origins: str | List[str] = Field(default=",".join(DEFAULT_CORS_ORIGINS))
    cors_allow_credentials: bool = Field(default=True)

    # Time reports
    timezone: str = Field(default="UTC", description="Display timezone for report date ranges")

    # Sentry (Optional)
    sentry_dsn: Optional[str] = Field(default=None)
    sentry_traces_sample_rate: float = Field(default=0.1)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if v is None:
            return list(DEFAULT_CORS_ORIGINS)
        if isinstance(v, str):
            if not v.strip():
                return list(DEFAULT_CORS_ORIGINS)
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Reject unknown IANA timezone names early."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def validate_environment(self) -> None:
        """Validate that all required environment variables are set."""
        required_vars = ["database_url", "supabase_url"]

        missing_vars = [var.upper() for var in required_vars if not getattr(self, var, None)]
        if not self.supabase_jwt_secret and not self.supabase_anon_key:
            missing_vars.append("SUPABASE_JWT_SECRET or SUPABASE_ANON_KEY")

        if missing_vars:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing_vars)}"
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    settings = Settings()

    # Validate environment in production
    if settings.is_production:
        settings.validate_environment()

    return settings
