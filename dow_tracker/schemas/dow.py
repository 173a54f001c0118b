from pydantic import BaseModel, ConfigDict, Field


class DowEstimate(BaseModel):
    dow: float
    previous_close: float
    open: float
    high: float
    low: float
    change: float
    change_percent: float
    above_threshold: bool


class DowSummary(BaseModel):
    """Wire body of GET /api/dow. Dump with ``by_alias=True``."""

    model_config = ConfigDict(populate_by_name=True)

    dow: float
    previous_close: float = Field(alias="previousClose")
    open: float
    high: float
    low: float
    change: float
    change_percent: float = Field(alias="changePercent")
    timestamp: int
    above_50k: bool = Field(alias="above50k")
    last_above_50k: str = Field(alias="lastAbove50k")
    source: str
    raw_dia: float
