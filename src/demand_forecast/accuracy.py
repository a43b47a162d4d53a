# src/demand_forecast/accuracy.py
"""
Scenario test for a forecast: perturb the forecast with seasonality, trend
and noise factors to get hypothetical actuals, then score the forecast
against them (MAPE, RMSE, accuracy = 100 - MAPE).
"""
import logging
from typing import Mapping, Optional, Union

import numpy as np

from demand_forecast.types import AccuracyResult, Series, TestFactors
from demand_forecast.utils import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_PERIODS = 6


def _as_factors(factors: Union[TestFactors, Mapping[str, float], None]) -> TestFactors:
    if factors is None:
        return TestFactors()
    if isinstance(factors, TestFactors):
        return factors
    return TestFactors(
        seasonality=float(factors.get("seasonality", 0)),
        trend=float(factors.get("trend", 0)),
        noise=float(factors.get("noise", 0)),
    )


def test_forecast_accuracy(
    history: Series,
    forecast: Series,
    periods: int,
    factors: Union[TestFactors, Mapping[str, float], None] = None,
    rng: Optional[np.random.Generator] = None,
) -> AccuracyResult:
    """
    Score the first `periods` forecast points against synthetic actuals.

    `periods` outside 1..len(forecast) falls back to min(6, len(forecast)).
    `history` is accepted for signature parity with the other pipeline steps
    and not used in the scoring.

    A synthetic actual of exactly 0 counts as a 100% error for that point,
    unless the forecast is 0 as well.
    """
    factors = _as_factors(factors)
    rng = rng if rng is not None else np.random.default_rng()

    if periods <= 0 or periods > len(forecast):
        periods = min(len(forecast), DEFAULT_PERIODS)

    if periods == 0:
        logger.warning("No forecast points to test")
        return AccuracyResult(mape=0.0, rmse=0.0, accuracy=100.0, periods=0)

    pct_errors = []
    sq_errors = []
    for point in forecast[:periods]:
        fc = point.forecast or 0
        seasonality = 1 + rng.uniform(-1, 1) * factors.seasonality / 100
        trend = 1 + factors.trend / 100
        noise = 1 + rng.uniform(-1, 1) * factors.noise / 100
        actual = round_half_up(fc * seasonality * trend * noise)

        abs_error = abs(actual - fc)
        if abs_error == 0:
            pct_error = 0.0
        elif actual == 0:
            pct_error = 100.0
        else:
            pct_error = abs(abs_error / actual) * 100
        pct_errors.append(pct_error)
        sq_errors.append(abs_error ** 2)

    mape = float(np.mean(pct_errors))
    rmse = float(np.sqrt(np.mean(sq_errors)))
    accuracy = max(0.0, 100.0 - mape)
    logger.debug("Accuracy over %d period(s): mape=%.3f rmse=%.3f", periods, mape, rmse)
    return AccuracyResult(mape=mape, rmse=rmse, accuracy=accuracy, periods=periods)

