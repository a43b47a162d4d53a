# src/demand_forecast/generate.py
"""
Generate synthetic monthly sales with seasonality + trend + noise.

Seasonal bands (month numbers are 1-based):
  - Nov/Dec : holiday peak, x1.3 - x1.5
  - Jan/Feb : post-holiday dip, x0.8 - x0.9
  - Jun-Aug : summer lift, x1.1 - x1.2
  - other   : x1.0
The base level mean-reverts towards recent values (0.8 old + 0.2 new), so a
noisy month carries over a little into the next one.
"""
from datetime import date
from typing import Optional

import numpy as np
import pandas as pd

from demand_forecast.types import DataPoint, Series
from demand_forecast.utils import round_half_up

SAMPLE_START = date(2022, 1, 1)
SAMPLE_MONTHS = 24


def seasonal_band(month: int, rng: Optional[np.random.Generator] = None) -> float:
    """
    Seasonality multiplier for a calendar month (1-12).

    With `rng` the multiplier is drawn inside the band; without it the band's
    lower edge is returned (the fixed table the forecaster falls back on).
    """
    if month in (11, 12):
        low, high = 1.3, 1.5
    elif month in (1, 2):
        low, high = 0.8, 0.9
    elif 6 <= month <= 8:
        low, high = 1.1, 1.2
    else:
        return 1.0
    if rng is None:
        return low
    return float(rng.uniform(low, high))


def _simulate(start: pd.Timestamp, months: int, base: float, rng: np.random.Generator, jitter: bool) -> Series:
    data: Series = []
    for i in range(months):
        ts = start + pd.DateOffset(months=i)
        seasonality = seasonal_band(ts.month, rng if jitter else None)
        trend = 1 + i * 0.01
        noise = rng.uniform(0.9, 1.1)
        value = round_half_up(base * seasonality * trend * noise)
        data.append(DataPoint(date=ts, actual=value, forecast=None))
        base = base * 0.8 + value * 0.2
    return data


def generate_historical_data(
    months: int,
    rng: Optional[np.random.Generator] = None,
    today: Optional[date] = None,
) -> Series:
    """
    Synthetic history of `months` consecutive months ending last month.

    `today` pins the calendar (defaults to the current date).
    """
    if months <= 0:
        return []
    rng = rng if rng is not None else np.random.default_rng()
    today = today or date.today()
    start = pd.Timestamp(year=today.year, month=today.month, day=1) - pd.DateOffset(months=months)
    base = rng.uniform(1000, 1500)
    return _simulate(start, months, base, rng, jitter=True)


def generate_sample_data(rng: Optional[np.random.Generator] = None) -> Series:
    """Two years of demo sales from January 2022 with the fixed seasonal table."""
    rng = rng if rng is not None else np.random.default_rng()
    return _simulate(pd.Timestamp(SAMPLE_START), SAMPLE_MONTHS, 1000.0, rng, jitter=False)
