"""Test normalize -- monthly regularization of imported samples."""
from datetime import date, datetime, timezone

import pandas as pd
import pytest

from demand_forecast.normalize import normalize_time_series_data
from demand_forecast.types import DataPoint


def _months(series):
    return [(p.date.year, p.date.month) for p in series]


class TestEmptyAndInvalid:
    """Inputs that normalize to nothing."""

    def test_empty_list(self):
        assert normalize_time_series_data([]) == []

    def test_none(self):
        assert normalize_time_series_data(None) == []

    def test_all_dates_invalid(self):
        points = [DataPoint("not a date", 1), DataPoint(None, 2), DataPoint("2024-13-45", 3)]
        assert normalize_time_series_data(points) == []

    def test_invalid_dates_are_skipped(self):
        points = [DataPoint("2024-01-01", 10), DataPoint("garbage", 99), DataPoint("2024-02-01", 20)]
        out = normalize_time_series_data(points)
        assert [p.actual for p in out] == [10, 20]


class TestContiguity:
    """One point per month, no gaps, strictly increasing."""

    def test_span_length(self):
        points = [DataPoint("2022-11-20", 5), DataPoint("2024-02-03", 7), DataPoint("2023-06-10", 6)]
        out = normalize_time_series_data(points)
        # Nov 2022 .. Feb 2024 inclusive
        assert len(out) == 16
        months = _months(out)
        assert months[0] == (2022, 11)
        assert months[-1] == (2024, 2)
        assert len(set(months)) == len(months)
        assert months == sorted(months)

    def test_unsorted_input_is_sorted(self):
        points = [DataPoint("2024-03-01", 3), DataPoint("2024-01-01", 1), DataPoint("2024-02-01", 2)]
        assert [p.actual for p in normalize_time_series_data(points)] == [1, 2, 3]

    def test_single_point(self):
        out = normalize_time_series_data([DataPoint("2024-05-17", 42)])
        assert len(out) == 1
        assert out[0].actual == 42
        assert out[0].date == pd.Timestamp("2024-05-17")

    def test_mixed_date_types(self):
        points = [
            DataPoint(date(2024, 1, 1), 1),
            DataPoint(datetime(2024, 2, 1, 12, 0), 2),
            DataPoint(pd.Timestamp("2024-03-01"), 3),
            DataPoint("2024-04-01", 4),
        ]
        out = normalize_time_series_data(points)
        assert [p.actual for p in out] == [1, 2, 3, 4]
        assert all(isinstance(p.date, pd.Timestamp) for p in out)

    def test_timezone_aware_dates_keep_wall_clock_month(self):
        points = [DataPoint(datetime(2024, 1, 31, 23, 0, tzinfo=timezone.utc), 1), DataPoint("2024-02-15", 2)]
        assert _months(normalize_time_series_data(points)) == [(2024, 1), (2024, 2)]


class TestDuplicates:
    """Several samples in the same month."""

    def test_latest_timestamp_wins(self):
        points = [
            DataPoint("2024-01-20", 300),
            DataPoint("2024-01-05", 100),
            DataPoint("2024-01-10", 200),
        ]
        out = normalize_time_series_data(points)
        assert len(out) == 1
        assert out[0].actual == 300

    def test_identical_timestamps_last_one_wins(self):
        points = [DataPoint("2024-01-10", 1), DataPoint("2024-01-10", 2)]
        assert normalize_time_series_data(points)[0].actual == 2

    def test_kept_point_values_verbatim(self):
        points = [DataPoint("2024-01-01", 12.5, 13.0), DataPoint("2024-02-01", 20)]
        first = normalize_time_series_data(points)[0]
        assert first.actual == 12.5
        assert first.forecast == 13.0


class TestInterpolation:
    """Gap filling between known months."""

    def test_midpoint(self):
        points = [DataPoint("2024-01-01", 100), DataPoint("2024-03-01", 200)]
        out = normalize_time_series_data(points)
        assert [p.actual for p in out] == [100, 150, 200]
        assert out[1].date == pd.Timestamp("2024-02-01")
        assert out[1].forecast is None

    def test_long_gap_is_linear(self):
        points = [DataPoint("2024-01-01", 100), DataPoint("2024-06-01", 200)]
        out = normalize_time_series_data(points)
        assert [p.actual for p in out] == [100, 120, 140, 160, 180, 200]

    def test_rounds_half_up(self):
        points = [DataPoint("2024-01-01", 0), DataPoint("2024-03-01", 5)]
        assert [p.actual for p in normalize_time_series_data(points)] == [0, 3, 5]

    def test_mid_month_samples_use_elapsed_time(self):
        # Jan 16 -> Mar 16 spans two months; Feb 1 sits just under halfway
        points = [DataPoint("2024-01-16", 0), DataPoint("2024-03-16", 1000)]
        out = normalize_time_series_data(points)
        assert 0 < out[1].actual < 500

    def test_null_neighbour_carries_other_value(self):
        points = [DataPoint("2024-01-01", None), DataPoint("2024-03-01", 200)]
        out = normalize_time_series_data(points)
        assert out[1].actual == 200

    def test_both_neighbours_null(self):
        points = [DataPoint("2024-01-01", None), DataPoint("2024-03-01", None)]
        out = normalize_time_series_data(points)
        assert out[1].actual is None


class TestIdempotence:
    """Normalized output is a fixed point."""

    @pytest.mark.parametrize("points", [
        [DataPoint("2024-01-01", 100), DataPoint("2024-06-01", 200)],
        [DataPoint("2023-11-20", 5), DataPoint("2023-11-25", 6), DataPoint("2024-04-03", 9)],
        [DataPoint("2024-02-10", 1)],
    ])
    def test_normalize_twice(self, points):
        once = normalize_time_series_data(points)
        assert normalize_time_series_data(once) == once

    def test_generated_history_unchanged(self, rng):
        from demand_forecast.generate import generate_historical_data

        history = generate_historical_data(24, rng=rng)
        assert normalize_time_series_data(history) == history
