"""
Drawdown engine — peak-tracking scans over price or equity sequences.

One scan primitive serves every drawdown consumer:
    - whole-history drawdown chart series (``drawdown_series``)
    - summary statistics (max drawdown, longest drawdown in calendar days)
    - per-calendar-year max drawdown in the returns table
    - per-curve drawdowns of the trend-following backtest

Callers choose the window by slicing the input (whole history, one
year, one equity curve); the scan itself never resets.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import numpy as np

from ..data.models import DailyPoint, days_between


@dataclass
class DrawdownScan:
    """Result of one forward pass with a running peak.

    ``drawdowns`` are fractions (``<= 0``; ``0`` at or above the running
    peak).  ``peak_indices`` holds index 0 plus every index that set a
    strictly higher peak, i.e. the start of each drawdown episode.
    """
    drawdowns: np.ndarray
    peak_indices: List[int]
    max_drawdown: float          # most negative fraction, 0.0 if never below peak
    max_drawdown_index: int      # first occurrence of max_drawdown
    final_peak: float

    @property
    def current_drawdown(self) -> float:
        return float(self.drawdowns[-1]) if len(self.drawdowns) else 0.0


def scan_drawdowns(values: Sequence[float]) -> DrawdownScan:
    """Peak-tracking drawdown scan.

    The running peak starts at ``values[0]``.  Values are assumed
    positive, so no zero-peak guard is applied.
    """
    arr = np.asarray(values, dtype=float)
    if arr.size == 0:
        return DrawdownScan(np.array([], dtype=float), [], 0.0, 0, 0.0)

    running_max = np.maximum.accumulate(arr)
    drawdowns = (arr - running_max) / running_max

    new_peak = np.flatnonzero(arr[1:] > running_max[:-1]) + 1
    peak_indices = [0] + new_peak.tolist()

    max_idx = int(np.argmin(drawdowns))
    return DrawdownScan(
        drawdowns=drawdowns,
        peak_indices=peak_indices,
        max_drawdown=float(drawdowns[max_idx]),
        max_drawdown_index=max_idx,
        final_peak=float(running_max[-1]),
    )


def max_drawdown_pct(values: Sequence[float]) -> float:
    """Largest decline from a running peak, as a positive percentage."""
    return 0.0 - scan_drawdowns(values).max_drawdown * 100


def longest_drawdown_days(dates: Sequence[str], scan: DrawdownScan) -> int:
    """Longest span in calendar days between successive new peaks.

    The still-open episode (last peak to last date) is included.
    """
    if not dates:
        return 0
    starts = scan.peak_indices
    longest = 0
    for begin, end in zip(starts, starts[1:]):
        longest = max(longest, days_between(dates[begin], dates[end]))
    longest = max(longest, days_between(dates[starts[-1]], dates[-1]))
    return longest


# ── Chart series ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class DrawdownPoint:
    date: str
    drawdown: float    # percent, <= 0


@dataclass
class DrawdownSeries:
    """Drawdown chart data with its headline figures.

    ``max_drawdown`` and ``current_drawdown`` are positive percentages.
    """
    points: List[DrawdownPoint] = field(default_factory=list)
    max_drawdown: float = 0.0
    max_drawdown_date: str = ""
    current_drawdown: float = 0.0

    def to_dict(self) -> Dict:
        return {
            "data": [{"date": p.date, "drawdown": p.drawdown} for p in self.points],
            "max_drawdown": self.max_drawdown,
            "max_drawdown_date": self.max_drawdown_date,
            "current_drawdown": self.current_drawdown,
        }


def drawdown_series(series: Sequence[DailyPoint]) -> DrawdownSeries:
    """Percent drawdown from the running peak close at every point."""
    if not series:
        return DrawdownSeries()

    scan = scan_drawdowns([p.close for p in series])
    pct = scan.drawdowns * 100
    points = [DrawdownPoint(p.date, float(dd)) for p, dd in zip(series, pct)]
    return DrawdownSeries(
        points=points,
        max_drawdown=0.0 - float(pct[scan.max_drawdown_index]),
        max_drawdown_date=series[scan.max_drawdown_index].date,
        current_drawdown=0.0 - float(pct[-1]),
    )
