"""
Ticker analytics — statistics engine for a price-history dashboard.

Turns daily OHLCV series into summary statistics, drawdown and rolling
return series, calendar return tables, multi-ticker comparison charts
and a monthly trend-following backtest.
"""

__version__ = "0.1.0"

from .data.models import DailyPoint, NamedSeries
from .errors import AnalyticsError, InsufficientDataError, SeriesValidationError
from .services.dashboard_service import DashboardService, DashboardSession

__all__ = [
    "__version__",
    "DailyPoint",
    "NamedSeries",
    "AnalyticsError",
    "InsufficientDataError",
    "SeriesValidationError",
    "DashboardService",
    "DashboardSession",
]
