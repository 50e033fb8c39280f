"""
Moving-average indicators over daily closes.

``SMA`` and ``PriceVsSMA`` operate on an OHLCV DataFrame with a ``Close``
column (see ``data.frames.series_to_frame``).  ``sma_distance_series``
wraps them for the dashboard: the SMA is warmed up on the full history
and only the displayed date window is emitted.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..config import SMA_DISTANCE_PERIODS
from ..data.frames import series_to_frame
from ..data.models import DailyPoint


class Indicator(ABC):
    """Base class for all indicators."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the indicator's output column name."""

    @abstractmethod
    def calculate(self, df: pd.DataFrame) -> pd.Series:
        """Calculate indicator values. Returns a Series."""


class SMA(Indicator):
    """Simple Moving Average (NaN until ``period`` closes are available)."""

    def __init__(self, period: int = 200):
        self.period = period

    @property
    def name(self) -> str:
        return f"SMA_{self.period}"

    def calculate(self, df: pd.DataFrame) -> pd.Series:
        return df["Close"].rolling(window=self.period).mean()


class PriceVsSMA(Indicator):
    """Price distance from SMA (as percentage)."""

    def __init__(self, period: int = 200):
        self.period = period
        self._sma = SMA(period)

    @property
    def name(self) -> str:
        return f"PriceVsSMA_{self.period}"

    @staticmethod
    def from_sma(close: pd.Series, sma: pd.Series) -> pd.Series:
        """Percent distance of *close* from an already computed *sma*."""
        return (close / sma - 1) * 100

    def calculate(self, df: pd.DataFrame) -> pd.Series:
        return self.from_sma(df["Close"], self._sma.calculate(df))


@dataclass(frozen=True)
class SMADistancePoint:
    date: str
    price: float
    sma: float
    distance: float     # percent above (+) or below (-) the SMA

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class SMADistanceSummary:
    max_above: float
    max_above_date: str
    max_below: float
    max_below_date: str
    current: float

    def to_dict(self) -> Dict:
        return asdict(self)


def sma_distance_series(
    series: Sequence[DailyPoint],
    period: int,
    start: Optional[str] = None,
    end: Optional[str] = None,
) -> List[SMADistancePoint]:
    """Percent distance of each close from its trailing ``period``-day SMA.

    Raises:
        ValueError: if *period* is not one of the configured SMA periods.
    """
    if period not in SMA_DISTANCE_PERIODS:
        raise ValueError(
            f"Unsupported SMA period {period}; choose one of {SMA_DISTANCE_PERIODS}"
        )
    if len(series) < period:
        return []

    df = series_to_frame(series)
    sma = SMA(period).calculate(df)
    distance = PriceVsSMA.from_sma(df["Close"], sma)

    points: List[SMADistancePoint] = []
    for point, avg, dist in zip(series, sma.to_numpy(), distance.to_numpy()):
        if np.isnan(avg):
            continue
        if start is not None and point.date < start:
            continue
        if end is not None and point.date > end:
            continue
        points.append(SMADistancePoint(point.date, point.close, float(avg), float(dist)))
    return points


def summarize_sma_distance(points: Sequence[SMADistancePoint]) -> Optional[SMADistanceSummary]:
    """Largest stretch above and below the SMA plus the latest distance.

    ``max_above`` only moves on a strictly positive distance and
    ``max_below`` only on a strictly negative one; a side never reached
    stays at 0.0 with an empty date.
    """
    if not points:
        return None
    max_above, max_above_date = 0.0, ""
    max_below, max_below_date = 0.0, ""
    for p in points:
        if p.distance > max_above:
            max_above, max_above_date = p.distance, p.date
        if p.distance < max_below:
            max_below, max_below_date = p.distance, p.date
    return SMADistanceSummary(
        max_above=max_above,
        max_above_date=max_above_date,
        max_below=max_below,
        max_below_date=max_below_date,
        current=points[-1].distance,
    )
