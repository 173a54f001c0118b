from pydantic import BaseModel


class DiaQuote(BaseModel):
    symbol: str = "DIA"
    current: float
    previous_close: float
    open: float
    high: float
    low: float
    ts: int
