# src/demand_forecast/forecast.py
"""
Naive seasonal/trend demand forecaster.

Features:
- 12-month seasonal index learned from history (or a fixed retail table when
  there is less than a year of data)
- base level from the last three months
- growth rate from the first vs last three months, clamped to +/-5% a month
- small multiplicative noise so the projection doesn't look synthetic-flat
- never raises: problems come back as a ForecastOutcome with status
  "empty" or "failed" (partial series kept)
"""
import logging
from typing import List, Optional

import numpy as np
import pandas as pd

from demand_forecast.generate import seasonal_band
from demand_forecast.types import DataPoint, ForecastOutcome, Series
from demand_forecast.utils import add_months, round_half_up, to_timestamp

logger = logging.getLogger(__name__)

DEFAULT_BASE = 1000.0
DEFAULT_GROWTH = 1.01
MIN_GROWTH, MAX_GROWTH = 0.95, 1.05
RECENT_WINDOW = 3


def _mean_actual(points: Series) -> float:
    if not points:
        return 0.0
    return sum(p.actual or 0 for p in points) / len(points)


def seasonal_index(history: Series) -> List[float]:
    """
    Multiplicative factor per calendar month (index 0 = January).

    With a year or more of history the factors are the per-month means of
    `actual` scaled so the 12 of them average 1.0. Months with no observations
    get the average of the observed months, i.e. a neutral 1.0.
    """
    if len(history) < 12:
        return [seasonal_band(m) for m in range(1, 13)]

    rows = []
    for p in history:
        ts = to_timestamp(p.date)
        if ts is not None:
            rows.append((ts.month, p.actual or 0))
    df = pd.DataFrame(rows, columns=["month", "actual"])
    monthly = df.groupby("month")["actual"].mean().reindex(range(1, 13))

    observed_mean = monthly.mean()  # NaN-skipping
    if pd.isna(observed_mean) or observed_mean == 0:
        return [1.0] * 12
    monthly = monthly.fillna(observed_mean)
    return (monthly / monthly.mean()).astype(float).tolist()


def growth_rate(history: Series) -> float:
    """Per-month growth implied by the first vs last three points, clamped."""
    n = len(history)
    if n < 6:
        return DEFAULT_GROWTH
    old_avg = sum(p.actual or 0 for p in history[:RECENT_WINDOW]) / RECENT_WINDOW or DEFAULT_BASE
    new_avg = sum(p.actual or 0 for p in history[-RECENT_WINDOW:]) / RECENT_WINDOW or DEFAULT_BASE
    ratio = new_avg / old_avg
    if ratio <= 0:
        # sign flip (refunds/returns); no real root, treat as steepest decline
        return MIN_GROWTH
    rate = ratio ** (1 / n)
    return max(MIN_GROWTH, min(MAX_GROWTH, rate))


def forecast_demand(
    history: Series,
    months: int,
    rng: Optional[np.random.Generator] = None,
) -> ForecastOutcome:
    if not history:
        logger.warning("No historical data provided to forecast_demand")
        return ForecastOutcome(status="empty", reason="no historical data")

    last_date = to_timestamp(history[-1].date)
    if last_date is None:
        logger.error("Invalid last date in historical data: %r", history[-1].date)
        return ForecastOutcome(status="empty", reason="invalid last date in historical data")

    rng = rng if rng is not None else np.random.default_rng()
    data: Series = []
    try:
        index = seasonal_index(history)
        base = _mean_actual(history[-RECENT_WINDOW:]) or DEFAULT_BASE
        rate = growth_rate(history)
        logger.debug("Forecast inputs: base=%.2f growth=%.4f index=%s", base, rate, index)

        for i in range(months):
            target = add_months(last_date, i + 1)
            trend = rate ** i
            noise = rng.uniform(0.98, 1.02)
            value = round_half_up(base * index[target.month - 1] * trend * noise)
            data.append(DataPoint(date=target, actual=None, forecast=value))
    except Exception as e:
        logger.exception("Error generating forecast after %d of %d month(s)", len(data), months)
        return ForecastOutcome(series=data, status="failed", reason=repr(e))

    return ForecastOutcome(series=data)


def generate_forecast_data(
    history: Series,
    months: int,
    rng: Optional[np.random.Generator] = None,
) -> Series:
    """Forecast series only; see forecast_demand for the status."""
    return forecast_demand(history, months, rng=rng).series
