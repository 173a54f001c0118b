from __future__ import annotations

from functools import lru_cache
from typing import Any, Protocol

import redis

from dow_tracker.config.settings import Settings


class ThresholdStore(Protocol):
    """Key-value capability backing the last-above-threshold record."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryThresholdStore:
    """Process-local store. Values do not survive a restart."""

    def __init__(self) -> None:
        self._rows: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._rows.get(key)

    def set(self, key: str, value: str) -> None:
        self._rows[key] = value

    def clear(self) -> None:
        self._rows.clear()


class RedisThresholdStore:
    """Redis-backed store; every key lives under ``<namespace>:``."""

    def __init__(self, client: Any, namespace: str = "dow-tracker") -> None:
        self.client = client
        self.namespace = namespace

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"

    def get(self, key: str) -> str | None:
        value = self.client.get(self._key(key))
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    def set(self, key: str, value: str) -> None:
        self.client.set(self._key(key), value)


memory_threshold_store = MemoryThresholdStore()


@lru_cache
def _redis_client(url: str) -> redis.Redis:
    return redis.Redis.from_url(url, decode_responses=True)


def build_threshold_store(settings: Settings) -> ThresholdStore:
    if settings.REDIS_URL:
        return RedisThresholdStore(
            _redis_client(settings.REDIS_URL),
            namespace=settings.DOW_TRACKER_NAMESPACE,
        )
    return memory_threshold_store
