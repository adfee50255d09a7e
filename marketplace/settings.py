from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Postgres
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USERNAME: str = "postgres"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DATABASE: str = "marketplace"

    # Connection pool (bounded: exhaustion queues, then times out)
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 0
    DB_POOL_TIMEOUT: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"

    # Our own API Key (admin endpoints)
    MARKETPLACE_API_KEY: str = ""

    # Search
    SEARCH_RESULT_LIMIT: int = 100
    FEATURED_LIMIT: int = 6
    CATEGORY_LIMIT: int = 20
    CATEGORY_CACHE_TTL_SECONDS: int = 7200
    RECOMMENDATION_LIMIT: int = 10

    @property
    def postgres_url(self) -> str:
        return f"postgresql://{self.POSTGRES_USERNAME}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DATABASE}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
