"""Application settings for SeriesIndex.

Settings are read from the environment (prefix ``SERIESINDEX_``) and an
optional ``.env`` file. Nested groups use ``__`` as delimiter, e.g.
``SERIESINDEX_DATABASE__URL=postgresql+asyncpg://user:pw@host/catalog``.
"""

from functools import lru_cache

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Hey future me - only async drivers work here! The Database class uses
# create_async_engine, so "sqlite://" or "postgresql://" without a driver
# suffix would blow up at first connect with a confusing greenlet error.
SUPPORTED_URL_PREFIXES: tuple[str, ...] = (
    "sqlite+aiosqlite://",
    "postgresql+asyncpg://",
)


class DatabaseSettings(BaseModel):
    """Database connection settings."""

    url: str = Field(
        default="sqlite+aiosqlite:///./seriesindex.db",
        description="SQLAlchemy async database URL",
    )
    echo: bool = Field(default=False, description="Log every SQL statement")
    pool_pre_ping: bool = Field(default=True)
    # Pool settings only apply to PostgreSQL (SQLite has no real pool)
    pool_size: int = Field(default=5, ge=1)
    max_overflow: int = Field(default=10, ge=0)
    pool_timeout: int = Field(default=30, ge=1)
    pool_recycle: int = Field(default=3600, ge=-1)

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        """Reject URLs without an async driver."""
        if not value.startswith(SUPPORTED_URL_PREFIXES):
            raise ValueError(
                f"Unsupported database URL '{value}'. "
                f"Expected one of: {', '.join(SUPPORTED_URL_PREFIXES)}"
            )
        return value


class LoggingSettings(BaseModel):
    """Logging settings."""

    level: str = Field(default="INFO")
    json_format: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Normalize and validate log level name."""
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return level


class Settings(BaseSettings):
    """Main application settings."""

    app_name: str = Field(default="seriesindex")
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_prefix="SERIESINDEX_",
        env_nested_delimiter="__",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
