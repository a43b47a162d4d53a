# src/demand_forecast/utils.py
"""Rounding and month-granularity date helpers shared by the pipeline steps."""
from __future__ import annotations
import math
from typing import Any, Optional, Tuple

import pandas as pd


def round_half_up(x: float) -> int:
    # builtin round() is banker's rounding; demand figures round .5 up
    return int(math.floor(x + 0.5))


def to_timestamp(value: Any) -> Optional[pd.Timestamp]:
    """
    Coerce a date-like value to a tz-naive Timestamp.

    Returns None for anything pandas can't parse (garbage strings, None, NaN).
    Timezone-aware values keep their wall-clock time.
    """
    try:
        ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts


def month_key(ts: pd.Timestamp) -> Tuple[int, int]:
    return ts.year, ts.month


def month_start(ts: pd.Timestamp) -> pd.Timestamp:
    return pd.Timestamp(year=ts.year, month=ts.month, day=1)


def add_months(ts: pd.Timestamp, months: int) -> pd.Timestamp:
    """First day of the month `months` after the month of `ts`."""
    return month_start(ts) + pd.DateOffset(months=months)


def month_position(ts: pd.Timestamp) -> float:
    """
    Position of `ts` on a continuous month axis.

    Whole months count from year 0; the fraction is the share of the month
    already elapsed, so the first of every month lands on an integer.
    """
    start = month_start(ts)
    elapsed = (ts - start) / pd.Timedelta(days=ts.days_in_month)
    return ts.year * 12 + (ts.month - 1) + elapsed
