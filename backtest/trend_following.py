"""
Trend-following backtest — 10-month SMA rule vs. buy-and-hold.

The signal is evaluated once per calendar month on the month-end close
and acted on for every trading day of the following month.  While BUY
the strategy earns the instrument's daily return; while SELL it earns a
daily cash rate compounded from the annual risk-free rate.  Each change
of the active signal costs one proportional commission.

Both equity curves start at 1.0 on the first simulated day, which is the
first trading day on or after the first month with a defined signal.
The simulation runs over the full raw history so the SMA has warm-up
data before any displayed date window.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..config import (
    TRADING_DAYS_PER_YEAR,
    TREND_COMMISSION_RATE,
    TREND_MIN_DAILY_POINTS,
    TREND_MIN_MONTHLY_POINTS,
    TREND_RISK_FREE_RATE,
    TREND_SMA_MONTHS,
)
from ..data.calendar import MonthKey
from ..data.models import DailyPoint, days_between
from ..risk.drawdown import scan_drawdowns
from .sharpe_utils import (
    annualized_volatility,
    compute_cagr,
    compute_sharpe,
    daily_returns,
    years_between,
)
from .signals import BUY, MonthlySignalPoint, generate_monthly_signals, sample_month_end

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendFollowingEquityPoint:
    date: str
    buy_hold_value: float
    trend_following_value: float
    normalized_sma10: Optional[float]
    active_signal: str


@dataclass(frozen=True)
class SignalTransition:
    date: str
    signal: str


@dataclass(frozen=True)
class DrawdownCurvePoint:
    date: str
    buy_hold_drawdown: float           # percent, <= 0
    trend_following_drawdown: float    # percent, <= 0


@dataclass(frozen=True)
class StrategyStats:
    """Per-curve statistics; percent fields in percent, drawdowns positive."""
    final_amount: float
    total_return: float
    cagr: float
    annualized_std: float
    max_drawdown: float
    current_drawdown: float
    sharpe_ratio: float


@dataclass
class TrendFollowingResult:
    chart_data: List[TrendFollowingEquityPoint] = field(default_factory=list)
    drawdown_data: List[DrawdownCurvePoint] = field(default_factory=list)
    buy_hold_stats: Optional[StrategyStats] = None
    trend_following_stats: Optional[StrategyStats] = None
    current_signal: str = ""
    signal_dates: List[SignalTransition] = field(default_factory=list)
    monthly_signals: List[MonthlySignalPoint] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)


def daily_cash_return(annual_rate: float) -> float:
    """Daily rate that compounds to *annual_rate* over 252 sessions."""
    return (1 + annual_rate) ** (1 / TRADING_DAYS_PER_YEAR) - 1


def _strategy_stats(dates: Sequence[str], values: Sequence[float], risk_free_rate: float) -> StrategyStats:
    final = float(values[-1])
    years = years_between(days_between(dates[0], dates[-1]))
    cagr = compute_cagr(1.0, final, years)
    volatility = annualized_volatility(daily_returns(values))
    scan = scan_drawdowns(values)
    return StrategyStats(
        final_amount=final,
        total_return=(final - 1) * 100,
        cagr=cagr,
        annualized_std=volatility * 100,
        max_drawdown=0.0 - scan.max_drawdown * 100,
        current_drawdown=0.0 - scan.current_drawdown * 100,
        sharpe_ratio=compute_sharpe(cagr, volatility, risk_free_rate),
    )


def _validate_rates(risk_free_rate: float, commission_rate: float) -> None:
    if not 0.0 <= risk_free_rate < 1.0:
        raise ValueError(f"risk_free_rate must be in [0, 1), got {risk_free_rate}")
    if not 0.0 <= commission_rate < 1.0:
        raise ValueError(f"commission_rate must be in [0, 1), got {commission_rate}")


def run_trend_following(
    series: Sequence[DailyPoint],
    risk_free_rate: float = TREND_RISK_FREE_RATE,
    commission_rate: float = TREND_COMMISSION_RATE,
) -> Optional[TrendFollowingResult]:
    """Simulate buy-and-hold and the monthly SMA trend strategy side by side.

    Args:
        series: full raw daily history, date ascending
        risk_free_rate: annual cash rate earned while out of the market,
            also the Sharpe hurdle
        commission_rate: fraction of equity paid on every signal change

    Returns:
        ``TrendFollowingResult``, or None when the history is shorter than
        the configured minimum of daily or monthly points.

    Raises:
        ValueError: if either rate lies outside ``[0, 1)``.
    """
    _validate_rates(risk_free_rate, commission_rate)

    monthly = sample_month_end(series)
    if len(series) < TREND_MIN_DAILY_POINTS or len(monthly) < TREND_MIN_MONTHLY_POINTS:
        logger.info(
            "Trend following skipped: %d daily / %d monthly points (need %d / %d)",
            len(series), len(monthly), TREND_MIN_DAILY_POINTS, TREND_MIN_MONTHLY_POINTS,
        )
        return None

    signals = generate_monthly_signals(monthly, TREND_SMA_MONTHS)
    defined = [s for s in signals if s.signal is not None]
    if not defined:
        logger.info("Trend following skipped: no month has a defined signal")
        return None

    start = next(i for i, p in enumerate(series) if p.date >= defined[0].date)
    by_month: Dict[MonthKey, MonthlySignalPoint] = {(s.year, s.month): s for s in defined}

    first_day = series[start]
    initial = [s for s in defined if s.date <= first_day.date][-1]
    active = initial.signal
    latest_sma = initial.sma10
    base_price = first_day.close
    cash_return = daily_cash_return(risk_free_rate)

    transitions = [SignalTransition(first_day.date, active)]
    tf_value = 1.0
    chart: List[TrendFollowingEquityPoint] = []

    for i in range(start, len(series)):
        day = series[i]
        if i > start:
            prev = series[i - 1]
            if (day.year, day.month) != (prev.year, prev.month):
                completed = by_month.get((prev.year, prev.month))
                if completed is not None:
                    latest_sma = completed.sma10
                    if completed.signal != active:
                        tf_value *= 1 - commission_rate
                        active = completed.signal
                        transitions.append(SignalTransition(day.date, active))

            if active == BUY:
                tf_value *= 1 + (day.close - prev.close) / prev.close
            else:
                tf_value *= 1 + cash_return

        chart.append(TrendFollowingEquityPoint(
            date=day.date,
            buy_hold_value=day.close / base_price,
            trend_following_value=tf_value,
            normalized_sma10=latest_sma / base_price if latest_sma is not None else None,
            active_signal=active,
        ))

    dates = [p.date for p in chart]
    bh_values = np.array([p.buy_hold_value for p in chart], dtype=float)
    tf_values = np.array([p.trend_following_value for p in chart], dtype=float)
    bh_dd = scan_drawdowns(bh_values).drawdowns * 100
    tf_dd = scan_drawdowns(tf_values).drawdowns * 100
    drawdowns = [
        DrawdownCurvePoint(d, float(b), float(t)) for d, b, t in zip(dates, bh_dd, tf_dd)
    ]

    logger.debug(
        "Trend following over %s..%s: %d day(s), %d signal change(s)",
        dates[0], dates[-1], len(chart), len(transitions) - 1,
    )

    return TrendFollowingResult(
        chart_data=chart,
        drawdown_data=drawdowns,
        buy_hold_stats=_strategy_stats(dates, bh_values, risk_free_rate),
        trend_following_stats=_strategy_stats(dates, tf_values, risk_free_rate),
        current_signal=active,
        signal_dates=transitions,
        monthly_signals=signals,
    )
