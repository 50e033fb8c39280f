"""
Indicators — moving averages and price distance from them.
"""
from .moving_average import (
    Indicator,
    PriceVsSMA,
    SMA,
    SMADistancePoint,
    SMADistanceSummary,
    sma_distance_series,
    summarize_sma_distance,
)

__all__ = [
    "Indicator",
    "PriceVsSMA",
    "SMA",
    "SMADistancePoint",
    "SMADistanceSummary",
    "sma_distance_series",
    "summarize_sma_distance",
]
