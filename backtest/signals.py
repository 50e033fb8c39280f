"""
Monthly trend signals: month-end sampling and the trailing-SMA rule.

A month is BUY when its closing price is strictly above the mean of the
trailing ``sma_months`` month-end closes (itself included), else SELL.
Months without enough history carry no signal.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..config import TREND_SMA_MONTHS
from ..data.calendar import MonthEndIndex
from ..data.models import DailyPoint

BUY = "BUY"
SELL = "SELL"


@dataclass(frozen=True)
class MonthlyPoint:
    date: str
    price: float


@dataclass(frozen=True)
class MonthlySignalPoint:
    date: str
    price: float
    sma10: Optional[float] = None
    signal: Optional[str] = None

    @property
    def year(self) -> int:
        return int(self.date[:4])

    @property
    def month(self) -> int:
        return int(self.date[5:7])

    def to_dict(self) -> Dict:
        return asdict(self)


def sample_month_end(series: Sequence[DailyPoint]) -> List[MonthlyPoint]:
    """One point per calendar month: the last trading day's close."""
    return [MonthlyPoint(end.date, end.price) for _, end in MonthEndIndex(series).items()]


def generate_monthly_signals(
    monthly: Sequence[MonthlyPoint],
    sma_months: int = TREND_SMA_MONTHS,
) -> List[MonthlySignalPoint]:
    if sma_months < 1:
        raise ValueError(f"sma_months must be at least 1, got {sma_months}")

    prices = np.array([m.price for m in monthly], dtype=float)
    out: List[MonthlySignalPoint] = []
    for i, point in enumerate(monthly):
        if i < sma_months - 1:
            out.append(MonthlySignalPoint(point.date, point.price))
            continue
        sma = float(np.mean(prices[i - sma_months + 1:i + 1]))
        signal = BUY if point.price > sma else SELL
        out.append(MonthlySignalPoint(point.date, point.price, sma, signal))
    return out
