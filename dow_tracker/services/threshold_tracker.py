from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from dow_tracker.services.threshold_store import ThresholdStore

LAST_ABOVE_KEY = "lastAbove50k"
FALLBACK_LAST_ABOVE = "2026-02-11T20:00:00.000Z"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_iso_millis(value: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class ThresholdTracker:
    """Remembers the last time the estimate sat at or above the threshold.

    Above the threshold the current time is written and echoed back.
    Below it the stored value is read; a missing value or a failing
    store yields ``fallback``. Concurrent writers race, last one wins.
    """

    def __init__(
        self,
        store: ThresholdStore,
        *,
        key: str = LAST_ABOVE_KEY,
        fallback: str = FALLBACK_LAST_ABOVE,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.store = store
        self.key = key
        self.fallback = fallback
        self.clock = clock or _utc_now

    def resolve(self, above_threshold: bool) -> str:
        if above_threshold:
            now_iso = to_iso_millis(self.clock())
            self.store.set(self.key, now_iso)
            print(f"[DOW][threshold_write] key={self.key} value={now_iso}", flush=True)
            return now_iso

        try:
            stored = self.store.get(self.key)
        except Exception as exc:
            print(
                f"[DOW][threshold_store_read_error] key={self.key} error={exc}",
                flush=True,
            )
            return self.fallback
        return stored or self.fallback
