"""
Calendar returns table — monthly x annual grid with per-year risk.

For each calendar year present in the series:
    - 12 monthly returns (last close of the month vs last close of the
      prior month), ``None`` where either bucket has no data
    - the annual return (last close of the year vs the prior December
      close, or first-vs-last within the year when no prior December
      exists)
    - annualized volatility and max drawdown of the in-year daily closes
      only (the peak tracker restarts every January)
    - the number of new all-time highs reached during the year, measured
      against the full history

Every return carries a ``ReturnDetail`` with the exact prices and dates
that produced it.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..backtest.sharpe_utils import annualized_volatility, daily_returns
from ..config import MIN_STATISTICS_POINTS
from ..data.calendar import MonthEndIndex, prior_month, quarter_of
from ..data.models import DailyPoint
from ..errors import InsufficientDataError
from ..risk.drawdown import max_drawdown_pct

logger = logging.getLogger(__name__)

MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


@dataclass(frozen=True)
class ReturnDetail:
    """Prices and dates behind one return figure (all None when undetermined)."""
    return_value: Optional[float] = None
    start_price: Optional[float] = None
    end_price: Optional[float] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    @classmethod
    def between(cls, start_price: float, start_date: str,
                end_price: float, end_date: str) -> "ReturnDetail":
        return cls(
            return_value=(end_price - start_price) / start_price * 100,
            start_price=start_price,
            end_price=end_price,
            start_date=start_date,
            end_date=end_date,
        )


@dataclass
class YearlyReturnRecord:
    year: int
    monthly_details: List[ReturnDetail]      # index 0 = January
    annual_detail: ReturnDetail
    annual_std: Optional[float]
    max_drawdown: Optional[float]
    ath_count: int = 0

    @property
    def monthly_returns(self) -> List[Optional[float]]:
        return [d.return_value for d in self.monthly_details]

    @property
    def annual_return(self) -> Optional[float]:
        return self.annual_detail.return_value

    def to_dict(self) -> Dict:
        return {
            "year": self.year,
            "monthly": [asdict(d) for d in self.monthly_details],
            "annual": asdict(self.annual_detail),
            "annual_std": self.annual_std,
            "max_drawdown": self.max_drawdown,
            "ath_count": self.ath_count,
        }


@dataclass(frozen=True)
class MonthlyReturn:
    year: int
    month: int           # 1-12
    return_value: float
    detail: ReturnDetail


@dataclass(frozen=True)
class QuarterlyReturn:
    year: int
    quarter: int         # 1-4
    return_value: float
    months: int          # monthly returns compounded into this quarter


@dataclass
class ReturnsTable:
    years: List[YearlyReturnRecord] = field(default_factory=list)

    def year(self, year: int) -> Optional[YearlyReturnRecord]:
        for record in self.years:
            if record.year == year:
                return record
        return None

    def to_dict(self) -> Dict:
        return {"years": [r.to_dict() for r in self.years]}

    def monthly_returns(self) -> List[MonthlyReturn]:
        """Chronological list of every month with a return value."""
        out: List[MonthlyReturn] = []
        for record in self.years:
            for month, detail in enumerate(record.monthly_details, start=1):
                if detail.return_value is not None:
                    out.append(MonthlyReturn(record.year, month, detail.return_value, detail))
        return out

    def quarterly_returns(self) -> List[QuarterlyReturn]:
        """Quarter returns compounded from the monthly returns present.

        A quarter with no monthly return yields no entry.
        """
        out: List[QuarterlyReturn] = []
        for record in self.years:
            for quarter in range(1, 5):
                values = [
                    r for m, r in enumerate(record.monthly_returns, start=1)
                    if quarter_of(m) == quarter and r is not None
                ]
                if not values:
                    continue
                growth = float(np.prod([1 + r / 100 for r in values]))
                out.append(QuarterlyReturn(record.year, quarter, (growth - 1) * 100, len(values)))
        return out

    def to_frame(self) -> pd.DataFrame:
        """Year-indexed grid: Jan..Dec, Year, Std, MaxDD, ATHs (NaN where absent)."""
        rows = []
        for record in self.years:
            row: Dict[str, Optional[float]] = dict(zip(MONTH_LABELS, record.monthly_returns))
            row["Year"] = record.annual_return
            row["Std"] = record.annual_std
            row["MaxDD"] = record.max_drawdown
            row["ATHs"] = record.ath_count
            rows.append(row)
        columns = MONTH_LABELS + ["Year", "Std", "MaxDD", "ATHs"]
        frame = pd.DataFrame(rows, columns=columns, index=[r.year for r in self.years], dtype=float)
        frame.index.name = "year"
        return frame


def _ath_counts(series: Sequence[DailyPoint]) -> Dict[int, int]:
    """Strictly new global closing highs per year of occurrence."""
    counts: Dict[int, int] = {}
    high = series[0].close
    for point in series:
        if point.close > high:
            high = point.close
            counts[point.year] = counts.get(point.year, 0) + 1
    return counts


def _monthly_details(index: MonthEndIndex, year: int) -> List[ReturnDetail]:
    details: List[ReturnDetail] = []
    for month in range(1, 13):
        current = index.get((year, month))
        prior = index.get(prior_month((year, month)))
        if current is None or prior is None:
            details.append(ReturnDetail())
        else:
            details.append(ReturnDetail.between(prior.price, prior.date, current.price, current.date))
    return details


def _annual_detail(index: MonthEndIndex, year: int,
                   year_points: Sequence[DailyPoint]) -> ReturnDetail:
    prior_dec = index.get((year - 1, 12))
    last = index.last_in_year(year)
    if last is not None and prior_dec is not None:
        return ReturnDetail.between(prior_dec.price, prior_dec.date, last.price, last.date)
    if len(year_points) >= 2:
        first, final = year_points[0], year_points[-1]
        return ReturnDetail.between(first.close, first.date, final.close, final.date)
    return ReturnDetail()


def calculate_returns_table(series: Sequence[DailyPoint]) -> ReturnsTable:
    """Build the calendar returns table for *series*.

    Raises
    ------
    InsufficientDataError
        If the series has fewer than two points.
    """
    if len(series) < MIN_STATISTICS_POINTS:
        raise InsufficientDataError(
            f"Insufficient data for a returns table: {len(series)} point(s), "
            f"need {MIN_STATISTICS_POINTS}",
            required=MIN_STATISTICS_POINTS,
            actual=len(series),
        )

    ordered = sorted(series, key=lambda p: p.date)
    index = MonthEndIndex(ordered)
    ath_counts = _ath_counts(ordered)

    records: List[YearlyReturnRecord] = []
    for year in index.years:
        year_points = index.year_points(year)
        closes = [p.close for p in year_points]

        annual_std: Optional[float] = None
        in_year_returns = daily_returns(closes)
        if len(in_year_returns) >= 2:
            annual_std = annualized_volatility(in_year_returns) * 100

        max_dd: Optional[float] = max_drawdown_pct(closes) if len(closes) >= 2 else None

        records.append(YearlyReturnRecord(
            year=year,
            monthly_details=_monthly_details(index, year),
            annual_detail=_annual_detail(index, year, year_points),
            annual_std=annual_std,
            max_drawdown=max_dd,
            ath_count=ath_counts.get(year, 0),
        ))

    logger.debug("Returns table built for %d year(s)", len(records))
    return ReturnsTable(years=records)
