"""
Evaluation layer — summary statistics, calendar returns table, rolling
returns and multi-ticker comparison.
"""

from .statistics import (
    PeriodReturns,
    SessionStats,
    SummaryStatistics,
    calculate_period_returns,
    calculate_session_stats,
    calculate_statistics,
)
from .returns_table import (
    MonthlyReturn,
    QuarterlyReturn,
    ReturnDetail,
    ReturnsTable,
    YearlyReturnRecord,
    calculate_returns_table,
)
from .rolling import RollingReturnPoint, RollingSummary, rolling_frame, rolling_returns, summarize_rolling
from .comparison import ChartRow, chart_frame, find_common_start_date, normalize_for_chart

__all__ = [
    "PeriodReturns",
    "SessionStats",
    "SummaryStatistics",
    "calculate_period_returns",
    "calculate_session_stats",
    "calculate_statistics",
    "MonthlyReturn",
    "QuarterlyReturn",
    "ReturnDetail",
    "ReturnsTable",
    "YearlyReturnRecord",
    "calculate_returns_table",
    "RollingReturnPoint",
    "RollingSummary",
    "rolling_frame",
    "rolling_returns",
    "summarize_rolling",
    "ChartRow",
    "chart_frame",
    "find_common_start_date",
    "normalize_for_chart",
]
