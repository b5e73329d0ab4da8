"""Application settings and configuration.

This module defines all configuration options for the Gitter forum.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Gitter", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # HTTP listener
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")

    # Database configuration
    database_url: str = Field(default="sqlite:///./gitter.db", alias="DATABASE_URL")
    # Maximum wait for a contended write lock before the statement fails.
    busy_timeout_seconds: float = Field(default=5.0, alias="BUSY_TIMEOUT_SECONDS")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    auto_create_tables: bool = Field(default=True, alias="AUTO_CREATE_TABLES")

    # Feed pagination
    page_size: int = Field(default=10, ge=1, alias="PAGE_SIZE")

    # Argon2id cost parameters for password hashing
    argon2_time_cost: int = Field(default=1, ge=1, alias="ARGON2_TIME_COST")
    argon2_memory_cost_kib: int = Field(default=64 * 1024, ge=8, alias="ARGON2_MEMORY_COST_KIB")
    argon2_parallelism: int = Field(default=4, ge=1, alias="ARGON2_PARALLELISM")
    argon2_hash_length: int = Field(default=32, ge=4, alias="ARGON2_HASH_LENGTH")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def is_sqlite(self) -> bool:
        """Return True when the configured database is SQLite."""
        return self.database_url.startswith("sqlite")


settings = Settings()
