"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables (prefixed with SHOLIST_) or .env file.
    """

    # Application settings
    app_name: str = Field(default="Sholist", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Embedded database settings - SQLite
    database_path: str = Field(
        default="sholist.db",
        description="SQLite database file (':memory:' for a transient store)",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_busy_timeout_sec: float = Field(
        default=5.0, ge=0, description="Seconds SQLite waits on a locked database"
    )

    # Legacy key-value storage migrated on first run
    legacy_storage_path: Optional[str] = Field(
        default=None, description="JSON file holding pre-SQLite key-value data"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(default="Sholist API", description="API documentation title")
    api_description: str = Field(
        default="Local-first shopping list storage with one-time legacy migration",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_prefix="SHOLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("database_path")
    @classmethod
    def validate_database_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("database_path must not be empty")
        return v.strip()

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
