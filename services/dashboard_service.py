"""Assembles every analytics view for one dashboard query."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..backtest.round_trips import SignalSummary, summarize_signals
from ..backtest.trend_following import TrendFollowingResult, run_trend_following
from ..config import (
    ROLLING_DEFAULT_WINDOW_YEARS,
    ROLLING_WINDOW_CHOICES,
    SMA_DISTANCE_DEFAULT_PERIOD,
    TREND_COMMISSION_RATE,
    TREND_RISK_FREE_RATE,
)
from ..data.models import NamedSeries
from ..data.quality import validate_series
from ..data.ranges import DateRange, common_date_range, filter_by_date_range
from ..errors import InsufficientDataError
from ..evaluation.comparison import ChartRow, normalize_for_chart
from ..evaluation.returns_table import ReturnsTable, calculate_returns_table
from ..evaluation.rolling import (
    RollingReturnPoint,
    RollingSummary,
    rolling_returns,
    summarize_rolling,
)
from ..evaluation.statistics import SummaryStatistics, calculate_statistics
from ..indicators.moving_average import (
    SMADistancePoint,
    SMADistanceSummary,
    sma_distance_series,
    summarize_sma_distance,
)
from ..risk.drawdown import DrawdownSeries, drawdown_series

logger = logging.getLogger(__name__)


@dataclass
class DashboardSession:
    """Everything the dashboard renders for one set of tickers and dates.

    The single-instrument views stay None (or empty) when more than one
    ticker is selected.
    """
    available_range: DateRange
    selected_range: DateRange
    statistics: List[SummaryStatistics] = field(default_factory=list)
    omitted: List[str] = field(default_factory=list)
    chart_rows: List[ChartRow] = field(default_factory=list)
    returns_table: Optional[ReturnsTable] = None
    drawdowns: Optional[DrawdownSeries] = None
    sma_distance: List[SMADistancePoint] = field(default_factory=list)
    sma_distance_summary: Optional[SMADistanceSummary] = None
    rolling: List[RollingReturnPoint] = field(default_factory=list)
    rolling_summary: Optional[RollingSummary] = None
    trend_following: Optional[TrendFollowingResult] = None
    signal_summary: Optional[SignalSummary] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "available_range": {
                "min_date": self.available_range.min_date,
                "max_date": self.available_range.max_date,
            },
            "selected_range": {
                "min_date": self.selected_range.min_date,
                "max_date": self.selected_range.max_date,
            },
            "statistics": [s.to_dict() for s in self.statistics],
            "omitted": list(self.omitted),
            "chart": [r.to_dict() for r in self.chart_rows],
            "returns_table": self.returns_table.to_dict() if self.returns_table else None,
            "drawdowns": self.drawdowns.to_dict() if self.drawdowns else None,
            "rolling": [p.to_dict() for p in self.rolling],
            "rolling_summary": self.rolling_summary.to_dict() if self.rolling_summary else None,
            "sma_distance": [p.to_dict() for p in self.sma_distance],
            "sma_distance_summary": (
                self.sma_distance_summary.to_dict() if self.sma_distance_summary else None
            ),
            "trend_following": self.trend_following.to_dict() if self.trend_following else None,
            "signal_summary": self.signal_summary.to_dict() if self.signal_summary else None,
        }


class DashboardService:
    """Runs the analytics engines over already-fetched daily series."""

    def build_session(
        self,
        named_series: Sequence[NamedSeries],
        start: Optional[str] = None,
        end: Optional[str] = None,
        rolling_years: int = ROLLING_DEFAULT_WINDOW_YEARS,
        risk_free_rate: float = TREND_RISK_FREE_RATE,
        commission_rate: float = TREND_COMMISSION_RATE,
        sma_period: int = SMA_DISTANCE_DEFAULT_PERIOD,
    ) -> DashboardSession:
        """Run every view for *named_series* over ``[start, end]``.

        Raises:
            ValueError: if *rolling_years* is not one of the configured windows.
        """
        if rolling_years not in ROLLING_WINDOW_CHOICES:
            raise ValueError(
                f"Unsupported rolling window {rolling_years}; choose one of {ROLLING_WINDOW_CHOICES}"
            )
        for ns in named_series:
            report = validate_series(ns.data, ns.ticker)
            if not report.passed:
                logger.warning("Series %s failed checks: %s", ns.ticker, report.warnings)

        available = common_date_range(named_series)
        selected = DateRange(start or available.min_date, end or available.max_date)

        filtered = [
            NamedSeries(ns.ticker, filter_by_date_range(ns.data, selected.min_date, selected.max_date))
            for ns in named_series
        ]
        session = DashboardSession(available_range=available, selected_range=selected)

        for ns in filtered:
            try:
                session.statistics.append(calculate_statistics(ns.ticker, ns.data))
            except InsufficientDataError as e:
                logger.warning("Omitting %s from statistics: %s", ns.ticker, e)
                session.omitted.append(ns.ticker)

        session.chart_rows = normalize_for_chart(filtered)

        if len(named_series) == 1:
            self._single_instrument_views(
                session, named_series[0], filtered[0],
                rolling_years, risk_free_rate, commission_rate, sma_period,
            )
        return session

    def _single_instrument_views(
        self,
        session: DashboardSession,
        raw: NamedSeries,
        filtered: NamedSeries,
        rolling_years: int,
        risk_free_rate: float,
        commission_rate: float,
        sma_period: int,
    ) -> None:
        if len(filtered.data) >= 2:
            session.returns_table = calculate_returns_table(filtered.data)
        session.drawdowns = drawdown_series(filtered.data)

        session.sma_distance = sma_distance_series(
            raw.data, sma_period, session.selected_range.min_date, session.selected_range.max_date,
        )
        session.sma_distance_summary = summarize_sma_distance(session.sma_distance)

        session.rolling = rolling_returns(raw.data, rolling_years)
        session.rolling_summary = summarize_rolling(session.rolling)

        session.trend_following = run_trend_following(raw.data, risk_free_rate, commission_rate)
        if session.trend_following is not None:
            session.signal_summary = summarize_signals(session.trend_following)
