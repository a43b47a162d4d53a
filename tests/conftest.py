"""
Shared fixtures for the demand forecasting test suite.

Everything is seeded so runs are reproducible; no files outside tmp_path.
"""
import numpy as np
import pandas as pd
import pytest

from demand_forecast.types import DataPoint


@pytest.fixture
def rng():
    """Seeded numpy Generator."""
    return np.random.default_rng(1234)


def monthly(values, start="2023-01-01"):
    """History points on the first of consecutive months."""
    start = pd.Timestamp(start)
    return [
        DataPoint(date=start + pd.DateOffset(months=i), actual=v, forecast=None)
        for i, v in enumerate(values)
    ]


@pytest.fixture
def make_history():
    return monthly
