"""Tests for evaluation/rolling.py — trailing N-year returns."""

import pandas as pd
import pytest

from ticker_analytics.evaluation.rolling import rolling_frame, rolling_returns, summarize_rolling


class TestRollingReturns:
    """Window resolution and the one-year special case."""

    def test_one_year_is_simple_return(self, series_factory):
        s = series_factory([("2020-01-01", 100), ("2021-01-01", 110)])
        points = rolling_returns(s, 1)
        assert len(points) == 1
        assert points[0].rolling_cagr == pytest.approx(10.0)
        assert points[0].start_date == "2020-01-01"
        assert (points[0].start_price, points[0].end_price) == (100, 110)

    def test_multi_year_is_cagr(self, series_factory):
        s = series_factory([("2020-01-01", 100), ("2023-01-01", 133.1)])
        points = rolling_returns(s, 3)
        years = 1096 / 365.25
        assert len(points) == 1
        assert points[0].rolling_cagr == pytest.approx((1.331 ** (1 / years) - 1) * 100)

    def test_points_without_history_skipped(self, synthetic_series):
        points = rolling_returns(synthetic_series, 2)
        first = pd.Timestamp(synthetic_series[0].date)
        assert points
        for p in points:
            assert pd.Timestamp(p.date) - pd.DateOffset(years=2) >= first

    def test_start_is_last_point_on_or_before_target(self, synthetic_series):
        dates = [p.date for p in synthetic_series]
        for p in rolling_returns(synthetic_series, 1):
            target = (pd.Timestamp(p.date) - pd.DateOffset(years=1)).strftime("%Y-%m-%d")
            expected = [d for d in dates if d <= target][-1]
            assert p.start_date == expected

    def test_leap_day_target_clamps(self, series_factory):
        s = series_factory([("2023-02-27", 90), ("2023-02-28", 100), ("2024-02-29", 120)])
        points = rolling_returns(s, 1)
        assert points[-1].start_date == "2023-02-28"
        assert points[-1].rolling_cagr == pytest.approx(20.0)

    def test_short_history_empty(self, series_factory):
        assert rolling_returns(series_factory([("2020-01-01", 100)]), 1) == []
        assert rolling_returns(series_factory([("2020-01-01", 100), ("2020-06-01", 90)]), 1) == []

    def test_invalid_window(self, synthetic_series):
        with pytest.raises(ValueError):
            rolling_returns(synthetic_series, 0)


class TestRollingSummary:

    def test_summary(self, synthetic_series):
        points = rolling_returns(synthetic_series, 1)
        summary = summarize_rolling(points)
        values = [p.rolling_cagr for p in points]
        assert summary.max == pytest.approx(max(values))
        assert summary.min == pytest.approx(min(values))
        assert summary.average == pytest.approx(sum(values) / len(values))
        assert summary.latest == values[-1]

    def test_empty_summary(self):
        assert summarize_rolling([]) is None

    def test_rolling_frame(self, synthetic_series):
        points = rolling_returns(synthetic_series, 1)
        frame = rolling_frame(points)
        assert len(frame) == len(points)
        assert frame.index.name == "date"
        assert list(frame.columns) == ["rolling_cagr", "start_date", "start_price", "end_price"]
