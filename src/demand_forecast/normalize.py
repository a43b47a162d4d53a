# src/demand_forecast/normalize.py
"""
Turn irregular (date, value) samples into a regular monthly series.

Steps:
  1. drop points whose date can't be parsed
  2. sort chronologically
  3. keep one point per calendar month (latest timestamp wins)
  4. walk every month from the first to the last one and fill the gaps by
     linear interpolation between the nearest known points; past either end
     of the known data the nearest value is carried flat
Imported points are emitted with their values untouched; only their date is
replaced by the parsed Timestamp.
"""
import logging
from bisect import bisect_left, bisect_right
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from demand_forecast.types import DataPoint, Series
from demand_forecast.utils import add_months, month_key, month_position, month_start, round_half_up, to_timestamp

logger = logging.getLogger(__name__)


def _interpolate(
    target: pd.Timestamp,
    before: Optional[DataPoint],
    after: Optional[DataPoint],
) -> Optional[float]:
    if before is not None and after is not None and before.actual is not None and after.actual is not None:
        t0 = month_position(before.date)
        t1 = month_position(after.date)
        ratio = (month_position(target) - t0) / (t1 - t0)
        return round_half_up(before.actual + ratio * (after.actual - before.actual))
    if before is not None and before.actual is not None:
        return before.actual
    if after is not None and after.actual is not None:
        return after.actual
    return None


def normalize_time_series_data(points: Iterable[DataPoint]) -> Series:
    points = list(points or [])
    if not points:
        logger.warning("Empty data passed to normalize_time_series_data")
        return []

    valid: List[DataPoint] = []
    for p in points:
        ts = to_timestamp(p.date)
        if ts is None:
            logger.debug("Excluding point with invalid date: %r", p.date)
            continue
        valid.append(replace(p, date=ts))

    if not valid:
        logger.warning("No valid dates found in data (%d points)", len(points))
        return []
    if len(valid) < len(points):
        logger.info("Excluded %d point(s) with invalid dates", len(points) - len(valid))

    valid.sort(key=lambda p: p.date)
    times = [p.date for p in valid]

    by_month: Dict[Tuple[int, int], DataPoint] = {}
    for p in valid:
        key = month_key(p.date)
        kept = by_month.get(key)
        if kept is None or kept.date <= p.date:
            by_month[key] = p

    out: Series = []
    current = month_start(times[0])
    last = times[-1]
    while current <= last:
        key = month_key(current)
        if key in by_month:
            out.append(by_month[key])
        else:
            # nearest points strictly before / after the first of this month
            i = bisect_left(times, current)
            j = bisect_right(times, current)
            before = valid[i - 1] if i > 0 else None
            after = valid[j] if j < len(valid) else None
            out.append(DataPoint(date=current, actual=_interpolate(current, before, after), forecast=None))
        current = add_months(current, 1)

    logger.debug("Normalized %d point(s) into %d month(s)", len(points), len(out))
    return out
