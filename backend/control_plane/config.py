"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - CONTROL_DB_URL is required and non-empty; Settings() raises otherwise,
      which aborts startup
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings (PORT=8080, 5s lookup timeout)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Control database (cities table)
    control_db_url: str

    @field_validator("control_db_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Supabase/Neon hand out postgres:// URLs; asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            v = v.strip()
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    @field_validator("control_db_url")
    @classmethod
    def require_control_db_url(cls, v: str) -> str:
        if not v:
            raise ValueError("CONTROL_DB_URL is required")
        return v

    database_pool_size: int = Field(10, ge=1)
    database_max_overflow: int = Field(5, ge=0)

    # Theme lookup
    theme_lookup_timeout_seconds: float = Field(5.0, gt=0)

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8080, ge=1, le=65535)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
