# src/demand_forecast/cli.py
"""
Demand forecasting demo runner.

Features:
- Imports a sales CSV (date + value/sales) and normalizes it to monthly, or
  generates a synthetic history when no input is given
- Forecasts the next N months
- Optionally runs the scenario accuracy test (MAPE / RMSE / accuracy)
- Writes history + forecast to results/forecasts.csv (date,actual,forecast)
- --write-sample writes the sample upload file and exits
"""
import argparse
import logging
import sys

import numpy as np

from demand_forecast import config
from demand_forecast.accuracy import test_forecast_accuracy
from demand_forecast.csv_io import export_csv, read_sales_csv, write_sample_csv
from demand_forecast.forecast import forecast_demand
from demand_forecast.generate import generate_historical_data
from demand_forecast.normalize import normalize_time_series_data
from demand_forecast.types import TestFactors

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate or import monthly sales and forecast demand.")
    parser.add_argument("--input", type=str, default=None, help="Sales CSV with 'date' and 'value' (or 'sales') columns.")
    parser.add_argument("--history-months", type=int, default=config.HISTORY_MONTHS, help="Months of synthetic history when no --input is given.")
    parser.add_argument("--horizon", type=int, default=config.FORECAST_HORIZON, help="Forecast horizon (months).")
    parser.add_argument("--output", type=str, default=str(config.RESULTS_PATH), help="Where to write the date,actual,forecast CSV.")
    parser.add_argument("--test", action="store_true", help="Run the forecast accuracy scenario test.")
    parser.add_argument("--test-periods", type=int, default=config.TEST_PERIODS, help="Forecast months to test.")
    parser.add_argument("--seasonality", type=float, default=config.DEFAULT_FACTORS.seasonality, help="Seasonality factor (%%).")
    parser.add_argument("--trend", type=float, default=config.DEFAULT_FACTORS.trend, help="Trend factor (%%).")
    parser.add_argument("--noise", type=float, default=config.DEFAULT_FACTORS.noise, help="Noise factor (%%).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs.")
    parser.add_argument("--write-sample", type=str, default=None, metavar="PATH", help="Write the sample sales CSV to PATH and exit.")
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL, help="Logging level (DEBUG, INFO, ...).")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format=config.LOG_FORMAT)

    rng = np.random.default_rng(args.seed)

    if args.write_sample:
        write_sample_csv(args.write_sample, rng=rng)
        print(f"✅ Saved sample data to {args.write_sample}")
        return 0

    if args.input:
        try:
            imported = read_sales_csv(args.input)
        except (OSError, ValueError) as e:
            print(f"ERROR: could not import {args.input}: {e}", file=sys.stderr)
            return 2
        history = normalize_time_series_data(imported)
        if not history:
            print(f"ERROR: no valid data in {args.input} after normalization.", file=sys.stderr)
            return 2
        logger.info("Imported %d row(s), normalized to %d month(s)", len(imported), len(history))
    else:
        history = generate_historical_data(args.history_months, rng=rng)
        logger.info("Generated %d month(s) of synthetic history", len(history))

    outcome = forecast_demand(history, args.horizon, rng=rng)
    if not outcome.ok:
        logger.warning("Forecast %s: %s (%d month(s) produced)", outcome.status, outcome.reason, len(outcome.series))
    forecast = outcome.series

    if args.test:
        factors = TestFactors(seasonality=args.seasonality, trend=args.trend, noise=args.noise)
        result = test_forecast_accuracy(history, forecast, args.test_periods, factors, rng=rng)
        print(
            f"Accuracy test over {result.periods} month(s): "
            f"MAPE {result.mape:.2f}%  RMSE {result.rmse:.2f}  accuracy {result.accuracy:.2f}%"
        )

    try:
        export_csv(history, forecast, args.output)
    except OSError:
        logger.exception("ERROR saving results CSV to %s", args.output)
        return 1
    print(f"✅ Saved forecasts to {args.output} ({len(history)} history + {len(forecast)} forecast rows)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
