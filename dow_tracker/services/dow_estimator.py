from __future__ import annotations

import math

from dow_tracker.errors import ParseError
from dow_tracker.schemas.dow import DowEstimate
from dow_tracker.schemas.quote import DiaQuote

# DIA tracks the Dow at roughly 1/100th of its value
DIA_TO_DOW_RATIO = 99.91
DOW_THRESHOLD = 50000


def round_half_up(value: float, places: int = 2) -> float:
    """Round like ``Math.round(value * 10**places) / 10**places``.

    Halves go towards positive infinity, so ``round_half_up(0.125)`` is
    ``0.13`` where the builtin ``round`` would give ``0.12``.
    """
    scale = 10 ** places
    return math.floor(value * scale + 0.5) / scale


def compute_estimate(
    quote: DiaQuote,
    ratio: float = DIA_TO_DOW_RATIO,
    threshold: float = DOW_THRESHOLD,
) -> DowEstimate:
    dow = quote.current * ratio
    prev_close = quote.previous_close * ratio
    open_ = quote.open * ratio
    high = quote.high * ratio
    low = quote.low * ratio

    if prev_close == 0:
        raise ParseError("Finnhub quote has no previous close")

    diff = dow - prev_close
    # percent keeps 2 decimals: ratio scaled by 10000 then divided by 100
    change_percent = math.floor((diff / prev_close) * 10000 + 0.5) / 100

    return DowEstimate(
        dow=round_half_up(dow),
        previous_close=round_half_up(prev_close),
        open=round_half_up(open_),
        high=round_half_up(high),
        low=round_half_up(low),
        change=round_half_up(diff),
        change_percent=change_percent,
        above_threshold=dow >= threshold,
    )
