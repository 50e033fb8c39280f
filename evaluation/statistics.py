"""
Summary statistics for a single daily price series.

Computes period and annualized returns, price extremes, drawdown
figures, session (up/down day) counts, annualized volatility, Sharpe,
and trailing YTD / 1Y / 3Y returns over an arbitrary date window.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence

from ..backtest.sharpe_utils import (
    annualized_volatility,
    compute_cagr,
    compute_sharpe,
    daily_returns,
    years_between,
)
from ..config import MIN_STATISTICS_POINTS, RISK_FREE_RATE
from ..data.calendar import MonthEndIndex
from ..data.models import DailyPoint, days_between
from ..data.ranges import find_extremes
from ..errors import InsufficientDataError
from ..risk.drawdown import longest_drawdown_days, scan_drawdowns

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryStatistics:
    """Fixed-shape statistics record for one instrument and date window.

    Percent fields are in percent (``12.5`` means 12.5%).  ``None`` on the
    trailing returns means the history does not reach back far enough.
    """
    # Data
    ticker: str
    start_date: str
    end_date: str
    total_days: int

    # Returns
    period_return: float
    cagr: float
    growth_of_1: float
    ytd_return: Optional[float]
    one_year_return: Optional[float]
    three_year_return: Optional[float]

    # Drawdowns
    max_drawdown: float
    max_drawdown_date: str
    current_drawdown: float
    to_return_to_ath: float
    longest_drawdown_days: int

    # Prices
    start_price: float
    end_price: float
    min_price: float
    min_price_date: str
    max_price: float
    max_price_date: str

    # Sessions and risk
    profit_sessions: int
    loss_sessions: int
    avg_profit_session: float
    avg_loss_session: float
    annualized_std: float
    sharpe_ratio: float

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class SessionStats:
    """Up/down day counts and mean daily moves (percent)."""
    profit_sessions: int
    loss_sessions: int
    avg_profit_session: float
    avg_loss_session: float
    daily_returns: List[float]


@dataclass(frozen=True)
class PeriodReturns:
    ytd_return: Optional[float]
    one_year_return: Optional[float]
    three_year_return: Optional[float]


def calculate_session_stats(series: Sequence[DailyPoint]) -> SessionStats:
    """Classify each daily simple return as a profit (> 0) or loss (< 0) session.

    Flat days count toward neither bucket.  Averages are 0 for an empty
    bucket.
    """
    returns = daily_returns([p.close for p in series]).tolist()
    gains = [r for r in returns if r > 0]
    losses = [r for r in returns if r < 0]
    return SessionStats(
        profit_sessions=len(gains),
        loss_sessions=len(losses),
        avg_profit_session=sum(gains) / len(gains) * 100 if gains else 0.0,
        avg_loss_session=sum(losses) / len(losses) * 100 if losses else 0.0,
        daily_returns=returns,
    )


def _price_on_or_before(series: Sequence[DailyPoint], target: str) -> Optional[float]:
    """Latest close dated on or before *target* (backward scan)."""
    for point in reversed(series):
        if point.date <= target:
            return point.close
    return None


def _pct_change(start: Optional[float], end: float) -> Optional[float]:
    if start is None:
        return None
    return (end - start) / start * 100


def calculate_period_returns(
    series: Sequence[DailyPoint],
    month_index: Optional[MonthEndIndex] = None,
) -> PeriodReturns:
    """YTD, 1Y and 3Y returns ending at the last point.

    YTD is measured from the December close of the prior calendar year.
    The N-year baselines are the latest close on or before the end date
    with its year moved back N years.  A missing baseline yields ``None``.
    """
    if len(series) < 2:
        return PeriodReturns(None, None, None)

    index = month_index if month_index is not None else MonthEndIndex(series)
    end = series[-1]
    end_year = end.year
    month_day = end.date[4:]

    ytd = _pct_change(index.price((end_year - 1, 12)), end.close)
    one_year = _pct_change(_price_on_or_before(series, f"{end_year - 1}{month_day}"), end.close)
    three_year = _pct_change(_price_on_or_before(series, f"{end_year - 3}{month_day}"), end.close)
    return PeriodReturns(ytd, one_year, three_year)


def calculate_statistics(ticker: str, series: Sequence[DailyPoint]) -> SummaryStatistics:
    """Compute the full statistics record for *series*.

    Raises
    ------
    InsufficientDataError
        If the series has fewer than two points.
    """
    if len(series) < MIN_STATISTICS_POINTS:
        raise InsufficientDataError(
            f"Insufficient data to calculate statistics for {ticker}: "
            f"{len(series)} point(s), need {MIN_STATISTICS_POINTS}",
            required=MIN_STATISTICS_POINTS,
            actual=len(series),
        )

    first, last = series[0], series[-1]
    start_price, end_price = first.close, last.close

    years = years_between(days_between(first.date, last.date))
    period_return = (end_price - start_price) / start_price * 100
    cagr = compute_cagr(start_price, end_price, years)

    extremes = find_extremes(series)

    dates = [p.date for p in series]
    scan = scan_drawdowns([p.close for p in series])
    max_drawdown = 0.0 - scan.max_drawdown * 100
    current_drawdown = (scan.final_peak - end_price) / scan.final_peak * 100

    max_price = extremes.high.price
    to_return_to_ath = (max_price / end_price - 1) * 100 if max_price > end_price else 0.0

    sessions = calculate_session_stats(series)
    volatility = annualized_volatility(sessions.daily_returns)
    sharpe = compute_sharpe(cagr, volatility, RISK_FREE_RATE)

    trailing = calculate_period_returns(series, MonthEndIndex(series))

    logger.debug(
        "Statistics for %s over %s..%s (%d points)", ticker, first.date, last.date, len(series),
    )

    return SummaryStatistics(
        ticker=ticker,
        start_date=first.date,
        end_date=last.date,
        total_days=len(series),
        period_return=period_return,
        cagr=cagr,
        growth_of_1=end_price / start_price,
        ytd_return=trailing.ytd_return,
        one_year_return=trailing.one_year_return,
        three_year_return=trailing.three_year_return,
        max_drawdown=max_drawdown,
        max_drawdown_date=dates[scan.max_drawdown_index],
        current_drawdown=current_drawdown,
        to_return_to_ath=to_return_to_ath,
        longest_drawdown_days=longest_drawdown_days(dates, scan),
        start_price=start_price,
        end_price=end_price,
        min_price=extremes.low.price,
        min_price_date=extremes.low.date,
        max_price=max_price,
        max_price_date=extremes.high.date,
        profit_sessions=sessions.profit_sessions,
        loss_sessions=sessions.loss_sessions,
        avg_profit_session=sessions.avg_profit_session,
        avg_loss_session=sessions.avg_loss_session,
        annualized_std=volatility * 100,
        sharpe_ratio=sharpe,
    )
