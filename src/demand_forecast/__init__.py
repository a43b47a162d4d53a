"""Retail demand forecasting demo: synthetic history, normalization, naive forecast, accuracy scenarios."""
from demand_forecast.accuracy import test_forecast_accuracy
from demand_forecast.forecast import forecast_demand, generate_forecast_data, growth_rate, seasonal_index
from demand_forecast.generate import generate_historical_data, generate_sample_data
from demand_forecast.normalize import normalize_time_series_data
from demand_forecast.types import AccuracyResult, DataPoint, ForecastOutcome, Series, TestFactors

__all__ = [
    "AccuracyResult",
    "DataPoint",
    "ForecastOutcome",
    "Series",
    "TestFactors",
    "forecast_demand",
    "generate_forecast_data",
    "generate_historical_data",
    "generate_sample_data",
    "growth_rate",
    "normalize_time_series_data",
    "seasonal_index",
    "test_forecast_accuracy",
]
