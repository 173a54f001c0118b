from __future__ import annotations

from dow_tracker.schemas.dow import DowSummary
from dow_tracker.schemas.quote import DiaQuote
from dow_tracker.services.dow_estimator import DIA_TO_DOW_RATIO, compute_estimate
from dow_tracker.services.threshold_tracker import ThresholdTracker

SOURCE_LABEL = "Finnhub (DIA ETF estimate)"


class DowQuoteService:
    """Fetch DIA, rescale to a Dow estimate, then update the threshold record."""

    def __init__(
        self,
        *,
        rest_client,
        tracker: ThresholdTracker,
        symbol: str = "DIA",
        ratio: float = DIA_TO_DOW_RATIO,
    ) -> None:
        self.rest_client = rest_client
        self.tracker = tracker
        self.symbol = symbol
        self.ratio = ratio

    def _fetch_quote(self) -> DiaQuote:
        payload = self.rest_client.get_quote(self.symbol)
        quote = DiaQuote(
            symbol=str(payload.get("symbol", self.symbol)),
            current=float(payload["current"]),
            previous_close=float(payload["previous_close"]),
            open=float(payload["open"]),
            high=float(payload["high"]),
            low=float(payload["low"]),
            ts=int(payload["ts"]),
        )
        print(
            f"[DOW][quote_fetched] symbol={quote.symbol} price={quote.current} ts={quote.ts}",
            flush=True,
        )
        return quote

    def get_summary(self) -> DowSummary:
        quote = self._fetch_quote()
        estimate = compute_estimate(quote, ratio=self.ratio)
        last_above = self.tracker.resolve(estimate.above_threshold)

        return DowSummary(
            dow=estimate.dow,
            previous_close=estimate.previous_close,
            open=estimate.open,
            high=estimate.high,
            low=estimate.low,
            change=estimate.change,
            change_percent=estimate.change_percent,
            timestamp=quote.ts,
            above_50k=estimate.above_threshold,
            last_above_50k=last_above,
            source=SOURCE_LABEL,
            raw_dia=quote.current,
        )
