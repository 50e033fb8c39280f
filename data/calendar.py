"""
Calendar bucketing of daily series by (year, month).

The month-end index (last close per calendar month) is the shared
reference for YTD returns, the monthly returns table and the monthly
trend signals.  Build it once per top-level call and pass it down.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .models import DailyPoint

MonthKey = Tuple[int, int]   # (year, month 1-12)


def month_key(point: DailyPoint) -> MonthKey:
    return point.year, point.month


def prior_month(key: MonthKey) -> MonthKey:
    """December of the previous year for January, else the previous month."""
    year, month = key
    if month == 1:
        return year - 1, 12
    return year, month - 1


def quarter_of(month: int) -> int:
    return (month - 1) // 3 + 1


@dataclass(frozen=True)
class MonthEnd:
    """Representative (last) point of a calendar month bucket."""
    date: str
    price: float


class MonthEndIndex:
    """Ordered map ``(year, month) -> MonthEnd`` plus per-bucket points.

    Keys are kept in ascending calendar order.  The representative point
    of a bucket is its latest date, independent of input order.
    """

    def __init__(self, series: Sequence[DailyPoint]):
        buckets: Dict[MonthKey, List[DailyPoint]] = {}
        for point in series:
            buckets.setdefault(month_key(point), []).append(point)

        self._points: Dict[MonthKey, List[DailyPoint]] = {}
        self._ends: Dict[MonthKey, MonthEnd] = {}
        for key in sorted(buckets):
            points = sorted(buckets[key], key=lambda p: p.date)
            self._points[key] = points
            self._ends[key] = MonthEnd(points[-1].date, points[-1].close)

    def __len__(self) -> int:
        return len(self._ends)

    def __contains__(self, key: MonthKey) -> bool:
        return key in self._ends

    def __iter__(self) -> Iterator[MonthKey]:
        return iter(self._ends)

    def get(self, key: MonthKey) -> Optional[MonthEnd]:
        return self._ends.get(key)

    def price(self, key: MonthKey) -> Optional[float]:
        end = self._ends.get(key)
        return end.price if end is not None else None

    def items(self):
        return self._ends.items()

    def points(self, key: MonthKey) -> List[DailyPoint]:
        return self._points.get(key, [])

    @property
    def years(self) -> List[int]:
        return sorted({year for year, _ in self._ends})

    def year_points(self, year: int) -> List[DailyPoint]:
        """All points of *year* in date order."""
        out: List[DailyPoint] = []
        for month in range(1, 13):
            out.extend(self._points.get((year, month), []))
        return out

    def last_in_year(self, year: int) -> Optional[MonthEnd]:
        """Latest month-end of *year*, scanning December back to January."""
        for month in range(12, 0, -1):
            end = self._ends.get((year, month))
            if end is not None:
                return end
        return None
