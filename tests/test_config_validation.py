"""validate_config() catches invalid configuration values.

Rates outside [0, 1), a commission above every selectable choice, a
monthly warm-up shorter than the SMA, and non-positive window or
period choices.
"""

from unittest.mock import patch


def _messages(issues, level=None):
    return [i["message"] for i in issues if level is None or i["level"] == level]


class TestDefaults:

    def test_default_config_has_no_errors(self):
        from ticker_analytics.config import validate_config

        issues = validate_config()
        assert _messages(issues, "ERROR") == []
        assert all(set(i) == {"level", "message"} for i in issues)


class TestRateValidation:

    def test_negative_commission(self):
        with patch("ticker_analytics.config.TREND_COMMISSION_RATE", -0.001):
            from ticker_analytics.config import validate_config

            errors = _messages(validate_config(), "ERROR")
        assert any("TREND_COMMISSION_RATE" in m for m in errors)

    def test_commission_above_choices_warns(self):
        with patch("ticker_analytics.config.TREND_COMMISSION_RATE", 0.01):
            from ticker_analytics.config import validate_config

            warnings = _messages(validate_config(), "WARNING")
        assert any("TREND_COMMISSION_RATE" in m for m in warnings)

    def test_risk_free_out_of_range(self):
        with patch("ticker_analytics.config.TREND_RISK_FREE_RATE", 1.5):
            from ticker_analytics.config import validate_config

            errors = _messages(validate_config(), "ERROR")
        assert any("TREND_RISK_FREE_RATE" in m for m in errors)


class TestWarmupAndChoices:

    def test_monthly_warmup_below_sma(self):
        with patch("ticker_analytics.config.TREND_MIN_MONTHLY_POINTS", 6):
            from ticker_analytics.config import validate_config

            errors = _messages(validate_config(), "ERROR")
        assert any("TREND_MIN_MONTHLY_POINTS" in m for m in errors)

    def test_bad_window_choice(self):
        with patch("ticker_analytics.config.ROLLING_WINDOW_CHOICES", [0, 1]):
            from ticker_analytics.config import validate_config

            errors = _messages(validate_config(), "ERROR")
        assert any("ROLLING_WINDOW_CHOICES" in m for m in errors)

    def test_bad_sma_period(self):
        with patch("ticker_analytics.config.SMA_DISTANCE_PERIODS", [1, 200]):
            from ticker_analytics.config import validate_config

            errors = _messages(validate_config(), "ERROR")
        assert any("SMA_DISTANCE_PERIODS" in m for m in errors)

    def test_trading_days_warning(self):
        with patch("ticker_analytics.config.TRADING_DAYS_PER_YEAR", 250):
            from ticker_analytics.config import validate_config

            warnings = _messages(validate_config(), "WARNING")
        assert any("TRADING_DAYS_PER_YEAR" in m for m in warnings)
