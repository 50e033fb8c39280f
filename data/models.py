"""
Daily price records consumed by every analytics engine.

A series is a non-empty, date-ascending, duplicate-free list of
``DailyPoint``.  Dates are ISO ``YYYY-MM-DD`` strings, so ordering and
range checks are plain string comparisons.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from typing import Dict, List


@dataclass(frozen=True)
class DailyPoint:
    """One trading day for one instrument."""
    date: str
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    @property
    def year(self) -> int:
        return int(self.date[:4])

    @property
    def month(self) -> int:
        """Calendar month, 1-12."""
        return int(self.date[5:7])

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class NamedSeries:
    """A ticker and its daily history — the unit of work for a dashboard query."""
    ticker: str
    data: List[DailyPoint] = field(default_factory=list)

    @property
    def first_date(self) -> str:
        return self.data[0].date if self.data else ""

    @property
    def last_date(self) -> str:
        return self.data[-1].date if self.data else ""


def parse_date(value: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` string."""
    return date.fromisoformat(value[:10])


def days_between(start: str, end: str) -> int:
    """Whole calendar days from *start* to *end*."""
    return (parse_date(end) - parse_date(start)).days
