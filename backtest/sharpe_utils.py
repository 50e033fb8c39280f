"""Canonical return, volatility and Sharpe conventions.

All engines (summary statistics, returns table, strategy statistics)
use these functions so the conventions stay identical:

    - daily simple returns ``(v[i] - v[i-1]) / v[i-1]``
    - sample standard deviation (ddof=1) annualized by sqrt(252)
    - CAGR over the calendar-day year fraction (365.25-day year)
    - Sharpe = (CAGR - Rf) / annualized volatility, 0 when volatility is 0
"""
from typing import Sequence

import numpy as np

from ..config import DAYS_PER_YEAR, TRADING_DAYS_PER_YEAR


def daily_returns(values: Sequence[float]) -> np.ndarray:
    """Simple returns between adjacent values."""
    arr = np.asarray(values, dtype=float)
    if arr.size < 2:
        return np.array([], dtype=float)
    return (arr[1:] - arr[:-1]) / arr[:-1]


def annualized_volatility(
    returns: Sequence[float],
    periods_per_year: int = TRADING_DAYS_PER_YEAR,
) -> float:
    """Sample stdev of *returns* times ``sqrt(periods_per_year)``, as a fraction.

    Fewer than two returns give 0.0.
    """
    arr = np.asarray(returns, dtype=float)
    if arr.size < 2:
        return 0.0
    return float(np.std(arr, ddof=1) * np.sqrt(periods_per_year))


def years_between(days: float, days_per_year: float = DAYS_PER_YEAR) -> float:
    return days / days_per_year


def compute_cagr(start_value: float, end_value: float, years: float) -> float:
    """Compound annual growth rate in percent; 0.0 when ``years <= 0``."""
    if years <= 0:
        return 0.0
    return ((end_value / start_value) ** (1 / years) - 1) * 100


def compute_sharpe(cagr_pct: float, volatility: float, rf_annual: float) -> float:
    """Sharpe ratio from an annual growth rate.

    Args:
        cagr_pct: CAGR in percent
        volatility: annualized volatility as a fraction
        rf_annual: annual risk-free rate as a fraction

    Returns:
        ``(cagr_pct / 100 - rf_annual) / volatility``, 0.0 if volatility is 0
    """
    if volatility <= 0:
        return 0.0
    return float((cagr_pct / 100 - rf_annual) / volatility)
