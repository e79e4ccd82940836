"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Core never reads Settings; the shell converts them into core values

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lifedeck.core.scoring import ScoringRules


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://lifedeck:lifedeck@db:5432/lifedeck"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Deck
    deck_max_size: int = Field(5, ge=0)
    swipe_threshold: float = Field(100.0, ge=0)
    card_ttl_days: int = Field(7, ge=1)

    # Scoring
    score_increment: float = Field(2.0, ge=0)
    completion_points: int = Field(10, ge=0)
    achievements_enabled: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def card_ttl(self) -> timedelta:
        return timedelta(days=self.card_ttl_days)

    def scoring_rules(self) -> ScoringRules:
        return ScoringRules(
            score_increment=self.score_increment,
            completion_points=self.completion_points,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
