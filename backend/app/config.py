"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - STORE_URL and STORE_KEY have no defaults: a missing secret fails at startup
    - get_settings() is cached (lru_cache) — single instance per process
    - Services never read settings; they receive what they need at construction
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    store_url: str
    store_key: str

    @field_validator("store_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    @field_validator("store_url", "store_key")
    @classmethod
    def require_non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    store_pool_size: int = 20
    store_max_overflow: int = 10

    # Demo latency for the revenue query, in seconds (0 disables it)
    revenue_delay_seconds: float = 0.0

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def store_dsn(self) -> str:
        """Connection URL with STORE_KEY injected as the password for networked stores."""
        url = make_url(self.store_url)
        if url.host:
            url = url.set(password=self.store_key)
        return url.render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
