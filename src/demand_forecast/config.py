# src/demand_forecast/config.py
"""
Runtime defaults for the demand forecasting demo.

Every value can be overridden through an environment variable and, for the
runner, through its command-line flags.
"""
import logging
import os
from pathlib import Path

from demand_forecast.types import TestFactors

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[2]


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer); using %s", name, raw, default)
        return default


HISTORY_MONTHS = _env_int("DEMAND_FORECAST_HISTORY_MONTHS", 24)
FORECAST_HORIZON = _env_int("DEMAND_FORECAST_HORIZON", 12)
TEST_PERIODS = _env_int("DEMAND_FORECAST_TEST_PERIODS", 6)

RESULTS_DIR = Path(os.environ.get("DEMAND_FORECAST_RESULTS_DIR") or ROOT / "results")
RESULTS_PATH = RESULTS_DIR / "forecasts.csv"

LOG_LEVEL = os.environ.get("DEMAND_FORECAST_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

DEFAULT_FACTORS = TestFactors(seasonality=20.0, trend=5.0, noise=10.0)
