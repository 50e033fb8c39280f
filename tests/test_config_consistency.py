"""Config consolidation consistency.

config.py (flat constants) derives its values from the structured config
singleton in config_structured.py.  These tests check that:

1. Every mapped constant in config.py matches the structured source.
2. The get_config() singleton works correctly.
3. Each config dataclass rejects invalid values in ``__post_init__``.
"""

import pytest


class TestGetConfigSingleton:
    """get_config() must return a stable singleton."""

    def test_returns_system_config(self):
        from ticker_analytics.config_structured import SystemConfig, get_config

        assert isinstance(get_config(), SystemConfig)

    def test_singleton_identity(self):
        from ticker_analytics.config_structured import get_config

        assert get_config() is get_config()


class TestFlatConstantsMatchStructured:
    """Flat constants mirror the typed dataclasses."""

    def test_statistics(self):
        from ticker_analytics.config import (
            DAYS_PER_YEAR,
            MIN_STATISTICS_POINTS,
            RISK_FREE_RATE,
            TRADING_DAYS_PER_YEAR,
        )
        from ticker_analytics.config_structured import get_config

        cfg = get_config().statistics
        assert TRADING_DAYS_PER_YEAR == cfg.trading_days_per_year == 252
        assert DAYS_PER_YEAR == cfg.days_per_year == 365.25
        assert RISK_FREE_RATE == cfg.risk_free_rate == 0.02
        assert MIN_STATISTICS_POINTS == cfg.min_points == 2

    def test_trend(self):
        from ticker_analytics.config import (
            TREND_COMMISSION_CHOICES,
            TREND_COMMISSION_RATE,
            TREND_MIN_DAILY_POINTS,
            TREND_MIN_MONTHLY_POINTS,
            TREND_RISK_FREE_RATE,
            TREND_RISK_FREE_RATE_CHOICES,
            TREND_SMA_MONTHS,
        )
        from ticker_analytics.config_structured import get_config

        cfg = get_config().trend
        assert TREND_SMA_MONTHS == cfg.sma_months == 10
        assert TREND_MIN_DAILY_POINTS == cfg.min_daily_points == 252
        assert TREND_MIN_MONTHLY_POINTS == cfg.min_monthly_points == 12
        assert TREND_RISK_FREE_RATE == cfg.risk_free_rate == 0.02
        assert TREND_COMMISSION_RATE == cfg.commission_rate == 0.002
        assert TREND_RISK_FREE_RATE_CHOICES[0] == 0.0
        assert TREND_RISK_FREE_RATE_CHOICES[-1] == pytest.approx(0.05)
        assert len(TREND_RISK_FREE_RATE_CHOICES) == 11
        assert TREND_COMMISSION_CHOICES[-1] == pytest.approx(0.005)
        assert TREND_COMMISSION_RATE in TREND_COMMISSION_CHOICES

    def test_rolling_and_indicators(self):
        from ticker_analytics.config import (
            ROLLING_DEFAULT_WINDOW_YEARS,
            ROLLING_WINDOW_CHOICES,
            SMA_DISTANCE_DEFAULT_PERIOD,
            SMA_DISTANCE_PERIODS,
        )

        assert ROLLING_DEFAULT_WINDOW_YEARS == 3
        assert ROLLING_WINDOW_CHOICES == [1, 2, 3, 5, 10]
        assert SMA_DISTANCE_PERIODS == [50, 200]
        assert SMA_DISTANCE_DEFAULT_PERIOD == 200


class TestDataclassValidation:
    """Invalid values raise ValueError at construction."""

    def test_statistics_config(self):
        from ticker_analytics.config_structured import StatisticsConfig

        with pytest.raises(ValueError):
            StatisticsConfig(days_per_year=0)
        with pytest.raises(ValueError):
            StatisticsConfig(min_points=1)

    def test_trend_config(self):
        from ticker_analytics.config_structured import TrendFollowingConfig

        with pytest.raises(ValueError):
            TrendFollowingConfig(commission_rate=1.5)
        with pytest.raises(ValueError):
            TrendFollowingConfig(risk_free_rate=-0.01)
        with pytest.raises(ValueError):
            TrendFollowingConfig(sma_months=10, min_monthly_points=5)

    def test_rolling_and_indicator_config(self):
        from ticker_analytics.config_structured import IndicatorConfig, RollingConfig

        with pytest.raises(ValueError):
            RollingConfig(default_window_years=4)
        with pytest.raises(ValueError):
            IndicatorConfig(default_sma_distance_period=20)

    def test_logging_config(self):
        from ticker_analytics.config_structured import LoggingConfig

        with pytest.raises(ValueError):
            LoggingConfig(level="LOUD")
