"""
Data subpackage — daily series records, date ranges, calendar bucketing,
DataFrame adapters and invariant checks.
"""
from .models import DailyPoint, NamedSeries, days_between, parse_date
from .ranges import DateRange, Extremes, PricePoint, common_date_range, filter_by_date_range, find_extremes
from .calendar import MonthEnd, MonthEndIndex
from .frames import normalize_ohlcv_columns, series_from_frame, series_to_frame
from .quality import SeriesQualityReport, validate_series

__all__ = [
    "DailyPoint",
    "NamedSeries",
    "days_between",
    "parse_date",
    "DateRange",
    "Extremes",
    "PricePoint",
    "common_date_range",
    "filter_by_date_range",
    "find_extremes",
    "MonthEnd",
    "MonthEndIndex",
    "normalize_ohlcv_columns",
    "series_from_frame",
    "series_to_frame",
    "SeriesQualityReport",
    "validate_series",
]
