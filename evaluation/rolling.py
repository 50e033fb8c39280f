"""
Rolling returns — trailing N-year annualized return at every date.

A monotonic start cursor walks forward with the end index, so the whole
series is processed in O(n).
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..backtest.sharpe_utils import compute_cagr, years_between
from ..data.models import DailyPoint, days_between

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RollingReturnPoint:
    date: str
    rolling_cagr: float     # percent
    start_date: str
    start_price: float
    end_price: float

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class RollingSummary:
    max: float
    min: float
    average: float
    latest: float

    def to_dict(self) -> Dict:
        return asdict(self)


def _years_before(date: str, years: int) -> str:
    return (pd.Timestamp(date) - pd.DateOffset(years=years)).strftime("%Y-%m-%d")


def rolling_returns(series: Sequence[DailyPoint], window_years: int) -> List[RollingReturnPoint]:
    """Trailing ``window_years`` return ending at each point.

    The window start is the last point dated on or before the end date
    minus ``window_years`` calendar years.  Points without that much
    history are skipped.  A one-year window reports the simple return;
    longer windows report CAGR over the exact elapsed year fraction.
    """
    if window_years < 1:
        raise ValueError(f"window_years must be at least 1, got {window_years}")
    if len(series) < 2:
        return []

    first_date = series[0].date
    points: List[RollingReturnPoint] = []
    cursor = 0
    for end in series:
        target = _years_before(end.date, window_years)
        if first_date > target:
            continue
        while cursor + 1 < len(series) and series[cursor + 1].date <= target:
            cursor += 1

        start = series[cursor]
        years = years_between(days_between(start.date, end.date))
        if years <= 0 or start.close <= 0:
            continue

        if window_years == 1:
            value = (end.close - start.close) / start.close * 100
        else:
            value = compute_cagr(start.close, end.close, years)

        points.append(RollingReturnPoint(
            date=end.date,
            rolling_cagr=value,
            start_date=start.date,
            start_price=start.close,
            end_price=end.close,
        ))

    logger.debug("Rolling %dY returns: %d of %d points", window_years, len(points), len(series))
    return points


def summarize_rolling(points: Sequence[RollingReturnPoint]) -> Optional[RollingSummary]:
    """Max / min / mean / latest of a rolling-return series."""
    if not points:
        return None
    values = np.array([p.rolling_cagr for p in points], dtype=float)
    return RollingSummary(
        max=float(values.max()),
        min=float(values.min()),
        average=float(values.mean()),
        latest=float(values[-1]),
    )


def rolling_frame(points: Sequence[RollingReturnPoint]) -> pd.DataFrame:
    """Date-indexed frame of rolling returns and their window prices."""
    frame = pd.DataFrame(
        [p.to_dict() for p in points],
        columns=["date", "rolling_cagr", "start_date", "start_price", "end_price"],
    )
    return frame.set_index("date")
