"""Configuration management for the application."""

from functools import lru_cache

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

DEFAULT_JWT_SECRET = "change-me-in-production"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str | None = Field(default=None)
    pghost: str | None = Field(default=None)
    pgdatabase: str | None = Field(default=None)
    pguser: str | None = Field(default=None)
    pgpassword: str | None = Field(default=None)
    pgport: int = Field(default=5432)
    sqlite_fallback_url: str = Field(default="sqlite:///./todogenie.db")

    # JWT
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=10080)  # 7 days

    # Server
    host: str = Field(default="0.0.0.0")  # noqa: S104
    port: int = Field(default=3000)
    allowed_origins: str = Field(default="http://localhost:5173")
    log_level: str = Field(default="INFO")

    # API
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
    )

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production" and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def has_postgres_config(self) -> bool:
        return all([self.pghost, self.pgdatabase, self.pguser, self.pgpassword])

    @property
    def sqlalchemy_database_url(self) -> str:
        """Resolve the connection string.

        An explicit DATABASE_URL wins, then the discrete PG* variables, and
        finally a local SQLite file so the API runs without a server.
        """
        if self.database_url:
            return self.database_url
        if self.has_postgres_config:
            return URL.create(
                "postgresql",
                username=self.pguser,
                password=self.pgpassword,
                host=self.pghost,
                port=self.pgport,
                database=self.pgdatabase,
            ).render_as_string(hide_password=False)
        return self.sqlite_fallback_url

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
