# src/demand_forecast/types.py
"""Data types passed between the generator, normalizer, forecaster and accuracy test."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Literal, Optional

Status = Literal["ok", "empty", "failed"]


@dataclass
class DataPoint:
    date: Any                          # pd.Timestamp once parsed; only the month matters
    actual: Optional[float] = None     # observed value (None for forecast-only points)
    forecast: Optional[float] = None   # projected value (None for history-only points)


Series = List[DataPoint]


@dataclass
class TestFactors:
    seasonality: float = 20.0  # +/- percent, drawn per point
    trend: float = 5.0         # percent, applied to every point
    noise: float = 10.0        # +/- percent, drawn per point


@dataclass
class AccuracyResult:
    mape: float
    rmse: float
    accuracy: float
    periods: int = 0  # number of forecast points actually tested


@dataclass
class ForecastOutcome:
    """
    Result of a forecast run.

    status:
      - "ok"     : `series` holds every requested month
      - "empty"  : no usable history, `series` is empty
      - "failed" : an internal error stopped the run; `series` holds the
                   months produced before it and `reason` the error text
    """
    series: Series = field(default_factory=list)
    status: Status = "ok"
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"
