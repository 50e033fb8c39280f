"""
Backtest — monthly SMA signals, the trend-following simulator and
round-trip accounting.
"""
from .signals import BUY, SELL, MonthlyPoint, MonthlySignalPoint, generate_monthly_signals, sample_month_end
from .trend_following import (
    DrawdownCurvePoint,
    SignalTransition,
    StrategyStats,
    TrendFollowingEquityPoint,
    TrendFollowingResult,
    run_trend_following,
)
from .round_trips import SignalSummary, summarize_signals

__all__ = [
    "BUY",
    "SELL",
    "MonthlyPoint",
    "MonthlySignalPoint",
    "generate_monthly_signals",
    "sample_month_end",
    "DrawdownCurvePoint",
    "SignalTransition",
    "StrategyStats",
    "TrendFollowingEquityPoint",
    "TrendFollowingResult",
    "run_trend_following",
    "SignalSummary",
    "summarize_signals",
]
