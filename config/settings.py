"""
Application settings module.

Manages all configuration via environment variables using pydantic-settings.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class PostgresSettings(BaseSettings):
    """PostgreSQL connection settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PG_", extra="ignore")

    host: str = "localhost"
    port: int = 5432
    user: str = "admin"
    password: str = "1234"
    database: str = "roommatch_dev"
    pool_max: int = 10

    @property
    def dsn(self) -> str:
        """Generate PostgreSQL DSN."""
        return (
            f"postgresql://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class RedisSettings(BaseSettings):
    """Redis connection settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="REDIS_", extra="ignore")

    host: str = "localhost"
    port: int = 6379
    db: int = 0
    password: str = ""

    @property
    def url(self) -> str:
        """Generate Redis URL."""
        if self.password:
            return f"redis://:{self.password}@{self.host}:{self.port}/{self.db}"
        return f"redis://{self.host}:{self.port}/{self.db}"


class MatchingSettings(BaseSettings):
    """Recommendation settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="MATCHING_", extra="ignore")

    default_page_size: int = 20
    max_page_size: int = 100

    # Upper bound of candidate listings loaded per request
    candidate_limit: int = 1000

    cache_enabled: bool = True
    cache_ttl_seconds: int = 60 * 60 * 24  # 1 day


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    jwt_secret: str = "change_me_in_production_roommatch_jwt_secret"
    jwt_algorithm: str = "HS256"
    cors_origins: str = "*"

    postgres: PostgresSettings = PostgresSettings()
    redis: RedisSettings = RedisSettings()
    matching: MatchingSettings = MatchingSettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
