import os
from functools import lru_cache

from pydantic import BaseModel

from dow_tracker.errors import ConfigurationError


class Settings(BaseModel):
    FINNHUB_API_KEY: str | None = None
    FINNHUB_BASE_URL: str = "https://finnhub.io"
    REDIS_URL: str | None = None
    DOW_TRACKER_NAMESPACE: str = "dow-tracker"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls.model_validate(
            {
                "FINNHUB_API_KEY": os.getenv("FINNHUB_API_KEY") or None,
                "FINNHUB_BASE_URL": os.getenv("FINNHUB_BASE_URL") or "https://finnhub.io",
                "REDIS_URL": os.getenv("REDIS_URL") or None,
                "DOW_TRACKER_NAMESPACE": os.getenv("DOW_TRACKER_NAMESPACE") or "dow-tracker",
            }
        )

    def require_finnhub_api_key(self) -> str:
        if not self.FINNHUB_API_KEY:
            raise ConfigurationError("FINNHUB_API_KEY not configured")
        return self.FINNHUB_API_KEY


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
