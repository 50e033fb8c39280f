"""
Structured configuration for ticker analytics using typed dataclasses.

This is the AUTHORITATIVE source of truth for all configuration values.
``config.py`` imports from here for backward compatibility.

Provides IDE autocomplete, type checking, and organized namespacing.
Each engine gets its own dataclass.

Usage:
    from ticker_analytics.config_structured import get_config
    cfg = get_config()
    cfg.statistics.trading_days_per_year   # 252
    cfg.trend.sma_months                   # 10
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


# ── Statistics ───────────────────────────────────────────────────────


@dataclass
class StatisticsConfig:
    """Conventions shared by the summary statistics and returns table."""

    trading_days_per_year: int = 252
    days_per_year: float = 365.25
    risk_free_rate: float = 0.02   # fixed 2% for the summary Sharpe ratio
    min_points: int = 2

    def __post_init__(self):
        if self.trading_days_per_year < 1:
            raise ValueError(
                f"trading_days_per_year must be positive, got {self.trading_days_per_year}"
            )
        if self.days_per_year <= 0:
            raise ValueError(f"days_per_year must be positive, got {self.days_per_year}")
        if self.min_points < 2:
            raise ValueError(f"min_points must be at least 2, got {self.min_points}")


@dataclass
class RollingConfig:
    """Rolling-returns window selection."""

    default_window_years: int = 3
    window_choices: List[int] = field(default_factory=lambda: [1, 2, 3, 5, 10])

    def __post_init__(self):
        if self.default_window_years not in self.window_choices:
            raise ValueError(
                f"default_window_years={self.default_window_years} is not one of "
                f"{self.window_choices}"
            )


@dataclass
class TrendFollowingConfig:
    """10-month SMA trend-following backtest parameters."""

    sma_months: int = 10
    min_daily_points: int = 252
    min_monthly_points: int = 12
    risk_free_rate: float = 0.02
    commission_rate: float = 0.002
    risk_free_rate_choices: List[float] = field(
        default_factory=lambda: [round(0.005 * i, 3) for i in range(11)]   # 0% .. 5%
    )
    commission_choices: List[float] = field(
        default_factory=lambda: [round(0.0005 * i, 4) for i in range(11)]  # 0% .. 0.5%
    )

    def __post_init__(self):
        if self.sma_months < 1:
            raise ValueError(f"sma_months must be positive, got {self.sma_months}")
        if self.min_monthly_points < self.sma_months:
            raise ValueError(
                f"min_monthly_points={self.min_monthly_points} is below "
                f"sma_months={self.sma_months}; no signal could ever be produced"
            )
        if not 0.0 <= self.commission_rate < 1.0:
            raise ValueError(f"commission_rate must be in [0, 1), got {self.commission_rate}")
        if self.risk_free_rate < 0.0:
            raise ValueError(f"risk_free_rate must be non-negative, got {self.risk_free_rate}")


@dataclass
class IndicatorConfig:
    """Daily moving-average indicator settings."""

    sma_distance_periods: List[int] = field(default_factory=lambda: [50, 200])
    default_sma_distance_period: int = 200

    def __post_init__(self):
        if self.default_sma_distance_period not in self.sma_distance_periods:
            raise ValueError(
                f"default_sma_distance_period={self.default_sma_distance_period} is not one of "
                f"{self.sma_distance_periods}"
            )


@dataclass
class LoggingConfig:
    """Logging output settings."""

    level: str = "INFO"
    structured: bool = True

    def __post_init__(self):
        if self.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {self.level!r}")


@dataclass
class SystemConfig:
    """Top-level configuration aggregating all engines.

    Provides a single entry point with IDE autocomplete for all config
    domains. Each engine is a typed dataclass.
    """

    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)
    rolling: RollingConfig = field(default_factory=RollingConfig)
    trend: TrendFollowingConfig = field(default_factory=TrendFollowingConfig)
    indicators: IndicatorConfig = field(default_factory=IndicatorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ── Module-level singleton ──────────────────────────────────────────

_CONFIG: Optional[SystemConfig] = None


def get_config() -> SystemConfig:
    """Return the singleton SystemConfig instance.

    On first call, instantiates the default SystemConfig. Subsequent
    calls return the same instance so all callers share one source of
    truth.
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = SystemConfig()
    return _CONFIG
