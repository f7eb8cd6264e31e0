"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets (api_tokens, database credentials) come from environment variables
    - get_settings() is cached (lru_cache) - single instance per process
    - default_page_size never exceeds max_page_size
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://customer:customer@db:5432/customer"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Paging
    max_page_size: int = 100
    default_page_size: int = 10

    # Validation
    max_customer_age_years: int = 150

    # Auth
    api_tokens: list[str] = []

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def check_paging_bounds(self):
        if self.max_page_size < 1:
            raise ValueError("max_page_size must be at least 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError("default_page_size must be between 1 and max_page_size")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
