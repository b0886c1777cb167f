"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - to_policy() is the only bridge from settings into the core

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with SQLite
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from ignite.core.ledger_policy import LedgerPolicy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database (best-effort snapshots)
    database_url: str = "sqlite+aiosqlite:///ignite.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 5
    snapshot_enabled: bool = True
    snapshot_keep_last: int = 20

    # Ledger policy
    initial_balance: int = 10
    ignite_quorum: int = 3
    goal_min: int = 5
    goal_max: int = 100
    pledge_min: int = 1
    pledge_max: int = 10
    token_usd_rate: float = 1.0

    # Feed
    feed_default_limit: int = 20
    feed_max_limit: int = 200

    # Insights (advisory heuristics)
    insight_limit: int = 5
    momentum_active_bonus: int = 10
    trend_rising_above: int = 5
    trend_stable_above: int = 2

    # Real-time stream
    sse_heartbeat_seconds: float = 30.0

    # Demo fixtures
    seed_demo_data: bool = True

    # Outbound SMS (Twilio)
    twilio_account_sid: str = ""
    twilio_api_key: str = ""
    twilio_api_secret: str = ""
    twilio_phone_number: str = ""
    public_app_url: str = "http://localhost:3000"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sms_configured(self) -> bool:
        return all((
            self.twilio_account_sid, self.twilio_api_key,
            self.twilio_api_secret, self.twilio_phone_number,
        ))

    def to_policy(self) -> LedgerPolicy:
        return LedgerPolicy(
            initial_balance=self.initial_balance,
            ignite_quorum=self.ignite_quorum,
            goal_min=self.goal_min,
            goal_max=self.goal_max,
            pledge_min=self.pledge_min,
            pledge_max=self.pledge_max,
            token_usd_rate=self.token_usd_rate,
            insight_limit=self.insight_limit,
            momentum_active_bonus=self.momentum_active_bonus,
            trend_rising_above=self.trend_rising_above,
            trend_stable_above=self.trend_stable_above,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
