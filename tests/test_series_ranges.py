"""Tests for data/models.py, data/ranges.py and data/calendar.py."""

import pytest

from ticker_analytics.data.calendar import MonthEndIndex, prior_month, quarter_of
from ticker_analytics.data.models import NamedSeries, days_between
from ticker_analytics.data.ranges import common_date_range, filter_by_date_range, find_extremes


@pytest.fixture
def three_points(series_factory):
    return series_factory([("2023-01-01", 100), ("2023-06-01", 150), ("2023-12-01", 90)])


class TestFilterByDateRange:
    """Inclusive date-window filtering."""

    def test_bounds_inclusive(self, three_points):
        out = filter_by_date_range(three_points, "2023-01-01", "2023-06-01")
        assert [p.date for p in out] == ["2023-01-01", "2023-06-01"]

    def test_idempotent(self, synthetic_series):
        once = filter_by_date_range(synthetic_series, "2019-03-01", "2020-06-30")
        twice = filter_by_date_range(once, "2019-03-01", "2020-06-30")
        assert once == twice
        assert len(once) > 0

    def test_empty_result_is_valid(self, three_points):
        assert filter_by_date_range(three_points, "2024-01-01", "2024-12-31") == []

    def test_returns_new_list(self, three_points):
        out = filter_by_date_range(three_points, "2000-01-01", "2099-01-01")
        assert out == three_points
        assert out is not three_points


class TestCommonDateRange:
    """Intersection of the spans of several series."""

    def test_intersection(self, series_factory):
        a = NamedSeries("A", series_factory([("2020-01-01", 1), ("2020-12-31", 2)]))
        b = NamedSeries("B", series_factory([("2020-03-01", 1), ("2021-06-30", 2)]))
        rng = common_date_range([a, b])
        assert rng.min_date == "2020-03-01"
        assert rng.max_date == "2020-12-31"

    def test_empty_series_ignored(self, series_factory):
        a = NamedSeries("A", series_factory([("2020-01-01", 1), ("2020-12-31", 2)]))
        rng = common_date_range([NamedSeries("EMPTY", []), a])
        assert (rng.min_date, rng.max_date) == ("2020-01-01", "2020-12-31")

    def test_no_input(self):
        rng = common_date_range([])
        assert (rng.min_date, rng.max_date) == ("", "")


class TestFindExtremes:
    """Highest and lowest close, earliest on ties."""

    def test_scenario(self, three_points):
        ext = find_extremes(three_points)
        assert (ext.high.date, ext.high.price) == ("2023-06-01", 150)
        assert (ext.low.date, ext.low.price) == ("2023-12-01", 90)

    def test_first_occurrence_wins(self, series_factory):
        s = series_factory([("2023-01-02", 5), ("2023-01-03", 9), ("2023-01-04", 9), ("2023-01-05", 5)])
        ext = find_extremes(s)
        assert ext.high.date == "2023-01-03"
        assert ext.low.date == "2023-01-02"

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            find_extremes([])


class TestCalendar:
    """Month-end bucketing."""

    def test_prior_month_wraps_year(self):
        assert prior_month((2023, 1)) == (2022, 12)
        assert prior_month((2023, 7)) == (2023, 6)

    def test_quarter_of(self):
        assert [quarter_of(m) for m in (1, 3, 4, 6, 7, 9, 10, 12)] == [1, 1, 2, 2, 3, 3, 4, 4]

    def test_month_end_is_last_point(self, series_factory):
        s = series_factory([
            ("2023-01-03", 10), ("2023-01-31", 12), ("2023-02-01", 13), ("2023-02-28", 11),
        ])
        index = MonthEndIndex(s)
        assert len(index) == 2
        assert index.get((2023, 1)).date == "2023-01-31"
        assert index.price((2023, 2)) == 11
        assert index.price((2023, 3)) is None

    def test_last_in_year_scans_back(self, series_factory):
        s = series_factory([("2023-01-31", 10), ("2023-05-31", 12)])
        index = MonthEndIndex(s)
        assert index.last_in_year(2023).date == "2023-05-31"
        assert index.last_in_year(2022) is None

    def test_days_between(self):
        assert days_between("2020-01-01", "2021-01-01") == 366
        assert days_between("2023-03-01", "2023-03-01") == 0
