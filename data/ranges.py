"""
Date-range utilities over sorted daily series.

Range filtering, the common (intersected) date range across several
instruments, and first-occurrence price extremes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .models import DailyPoint, NamedSeries


@dataclass(frozen=True)
class DateRange:
    """Inclusive ``[min_date, max_date]``; both empty when unknown."""
    min_date: str
    max_date: str


@dataclass(frozen=True)
class PricePoint:
    date: str
    price: float


@dataclass(frozen=True)
class Extremes:
    """Highest and lowest close of a series (earliest occurrence on ties)."""
    high: PricePoint
    low: PricePoint


def filter_by_date_range(
    series: Sequence[DailyPoint], start: str, end: str,
) -> List[DailyPoint]:
    """Keep points with ``start <= date <= end``.

    Returns a new list; an empty result is valid.
    """
    return [p for p in series if start <= p.date <= end]


def common_date_range(named_series: Sequence[NamedSeries]) -> DateRange:
    """Intersection of the ``[first, last]`` spans of every series.

    ``min_date`` is the latest first date and ``max_date`` the earliest
    last date, so the range covers only dates where all instruments have
    history.  Empty series are ignored; no input gives two empty strings.
    """
    populated = [ns for ns in named_series if ns.data]
    if not populated:
        return DateRange("", "")

    min_date = populated[0].first_date
    max_date = populated[0].last_date
    for ns in populated[1:]:
        if ns.first_date > min_date:
            min_date = ns.first_date
        if ns.last_date < max_date:
            max_date = ns.last_date
    return DateRange(min_date, max_date)


def find_extremes(series: Sequence[DailyPoint]) -> Extremes:
    """Single linear scan for the max and min close.

    Strict comparisons keep the first occurrence on ties.
    """
    if not series:
        raise ValueError("find_extremes requires a non-empty series")

    high = low = series[0]
    for point in series:
        if point.close > high.close:
            high = point
        if point.close < low.close:
            low = point
    return Extremes(
        high=PricePoint(high.date, high.close),
        low=PricePoint(low.date, low.close),
    )
