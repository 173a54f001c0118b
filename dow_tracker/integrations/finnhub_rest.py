from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from dow_tracker.errors import ConfigurationError, ParseError, ProviderError, TransportError


def _to_float(value: Any, *, field_name: str) -> float:
    try:
        if value is None or value == "":
            raise ValueError(f"missing value for {field_name}")
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"invalid numeric value for {field_name}: {value!r}") from exc


class FinnhubRestClient:
    """Minimal Finnhub quote client. One GET per call, no retries."""

    DEFAULT_BASE_URL = "https://finnhub.io"

    def __init__(
        self,
        api_key: str,
        session: Optional[Any] = None,
        base_url: Optional[str] = None,
        timeout: float = 10,
    ) -> None:
        if not api_key:
            raise ConfigurationError("FINNHUB_API_KEY not configured")

        self.api_key = api_key
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.session = session or requests
        self.timeout = timeout

    def get_quote(self, symbol: str = "DIA") -> Dict[str, Any]:
        try:
            response = self.session.get(
                f"{self.base_url}/api/v1/quote",
                params={"symbol": symbol, "token": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc

        status_code = int(response.status_code)
        if not 200 <= status_code < 300:
            raise ProviderError(status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError("Finnhub returned malformed JSON") from exc
        if not isinstance(payload, dict):
            raise ParseError("Finnhub quote payload must be an object")

        ts_raw = payload.get("t")
        try:
            ts = int(ts_raw)
        except (TypeError, ValueError) as exc:
            raise ParseError(f"invalid timestamp value for t: {ts_raw!r}") from exc

        return {
            "symbol": symbol,
            "current": _to_float(payload.get("c"), field_name="c"),
            "previous_close": _to_float(payload.get("pc"), field_name="pc"),
            "open": _to_float(payload.get("o"), field_name="o"),
            "high": _to_float(payload.get("h"), field_name="h"),
            "low": _to_float(payload.get("l"), field_name="l"),
            "ts": ts,
        }
