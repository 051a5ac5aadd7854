"""
Blog Article Store - Configuration Management

Centralized configuration using Pydantic Settings for type-safe environment variable handling.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

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

    # ===========================================
    # Database Configuration
    # ===========================================
    blog_env: Literal["development", "production"] = Field(
        default="development",
        description="Deployment environment; development stores articles in a local SQLite file",
    )
    blog_sqlite_path: str = Field(
        default="./data/blog.db",
        description="SQLite file used for articles and categories in development",
    )
    postgres_user: str = Field(default="blog", description="PostgreSQL username")
    postgres_password: str = Field(default="blogpass", description="PostgreSQL password")
    postgres_db: str = Field(default="blog", description="PostgreSQL database name")
    postgres_host: str = Field(default="localhost", description="PostgreSQL host")
    postgres_port: int = Field(default=5432, description="PostgreSQL port")
    database_url_override: str = Field(
        default="",
        description="Full SQLAlchemy URL, takes precedence over blog_env when set",
    )

    @property
    def sqlite_path(self) -> Path:
        """Get the development SQLite file as Path object."""
        return Path(self.blog_sqlite_path)

    @property
    def database_url(self) -> str:
        """
        Resolve the article store URL.

        An explicit override wins; otherwise development uses the local
        SQLite file and production the PostgreSQL components.
        """
        if self.database_url_override:
            return self.database_url_override
        if self.blog_env == "development":
            return f"sqlite:///{self.sqlite_path}"
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def uses_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    # ===========================================
    # Application Settings
    # ===========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is uppercase."""
        return v.upper() if isinstance(v, str) else v

    @property
    def sql_echo(self) -> bool:
        """Echo SQL statements when running at DEBUG level."""
        return self.log_level == "DEBUG"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses lru_cache to ensure settings are loaded only once.

    Returns:
        Settings instance with loaded configuration.
    """
    return Settings()
