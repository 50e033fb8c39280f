"""
Risk module — peak-tracking drawdown scans and drawdown chart series.
"""
from .drawdown import (
    DrawdownPoint,
    DrawdownScan,
    DrawdownSeries,
    drawdown_series,
    longest_drawdown_days,
    max_drawdown_pct,
    scan_drawdowns,
)

__all__ = [
    "DrawdownPoint",
    "DrawdownScan",
    "DrawdownSeries",
    "drawdown_series",
    "longest_drawdown_days",
    "max_drawdown_pct",
    "scan_drawdowns",
]
