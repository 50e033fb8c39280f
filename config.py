"""
Central configuration for ticker analytics.

Backward-compatible flat-constant interface.  All values are derived
from the structured config singleton in ``config_structured.py`` so
there is a single source of truth.

Config Status Legend
====================
Each constant is annotated with one of the following statuses:

  ACTIVE      — Imported and used by running code.  Changing the value
                affects live behaviour.
  PLACEHOLDER — Defined for future use.  Safe to change without
                affecting current behaviour.

Search for ``# STATUS:`` to locate all annotations.
"""

from .config_structured import get_config as _get_config

_cfg = _get_config()

# ── Statistics Conventions ────────────────────────────────────────────
TRADING_DAYS_PER_YEAR = _cfg.statistics.trading_days_per_year  # STATUS: ACTIVE — volatility annualization everywhere
DAYS_PER_YEAR = _cfg.statistics.days_per_year     # STATUS: ACTIVE — calendar-day year fraction for CAGR
RISK_FREE_RATE = _cfg.statistics.risk_free_rate   # STATUS: ACTIVE — evaluation/statistics.py summary Sharpe
MIN_STATISTICS_POINTS = _cfg.statistics.min_points  # STATUS: ACTIVE — statistics and returns table minimum history

# ── Rolling Returns ───────────────────────────────────────────────────
ROLLING_DEFAULT_WINDOW_YEARS = _cfg.rolling.default_window_years  # STATUS: ACTIVE — services/dashboard_service.py
ROLLING_WINDOW_CHOICES = list(_cfg.rolling.window_choices)  # STATUS: ACTIVE — services/dashboard_service.py rejects other windows

# ── Trend Following ───────────────────────────────────────────────────
TREND_SMA_MONTHS = _cfg.trend.sma_months          # STATUS: ACTIVE — backtest/signals.py trailing monthly SMA length
TREND_MIN_DAILY_POINTS = _cfg.trend.min_daily_points  # STATUS: ACTIVE — backtest/trend_following.py short-circuit
TREND_MIN_MONTHLY_POINTS = _cfg.trend.min_monthly_points  # STATUS: ACTIVE — backtest/trend_following.py short-circuit
TREND_RISK_FREE_RATE = _cfg.trend.risk_free_rate  # STATUS: ACTIVE — default cash rate and strategy Sharpe hurdle
TREND_COMMISSION_RATE = _cfg.trend.commission_rate  # STATUS: ACTIVE — default proportional commission per signal change
TREND_RISK_FREE_RATE_CHOICES = list(_cfg.trend.risk_free_rate_choices)  # STATUS: PLACEHOLDER — cash-rate options for a selector; any rate in [0, 1) is accepted
TREND_COMMISSION_CHOICES = list(_cfg.trend.commission_choices)  # STATUS: ACTIVE — validate_config upper bound for TREND_COMMISSION_RATE

# ── Indicators ────────────────────────────────────────────────────────
SMA_DISTANCE_PERIODS = list(_cfg.indicators.sma_distance_periods)  # STATUS: ACTIVE — indicators/moving_average.py
SMA_DISTANCE_DEFAULT_PERIOD = _cfg.indicators.default_sma_distance_period  # STATUS: ACTIVE — services/dashboard_service.py

# ── Logging ───────────────────────────────────────────────────────────
LOG_LEVEL = _cfg.logging.level                    # STATUS: ACTIVE — utils/logging.py configure_logging
LOG_STRUCTURED = _cfg.logging.structured          # STATUS: ACTIVE — JSON lines vs plain text


def validate_config() -> list:
    """Check config for common misconfigurations.

    Returns a list of dicts: [{"level": "WARNING"|"ERROR", "message": str}].
    """
    issues = []

    # 1. Annualization conventions
    if TRADING_DAYS_PER_YEAR != 252:
        issues.append({
            "level": "WARNING",
            "message": (
                f"TRADING_DAYS_PER_YEAR={TRADING_DAYS_PER_YEAR}; volatility figures will not "
                "be comparable with the usual sqrt(252) annualization."
            ),
        })
    if DAYS_PER_YEAR <= 0:
        issues.append({
            "level": "ERROR",
            "message": f"DAYS_PER_YEAR must be positive, got {DAYS_PER_YEAR}.",
        })

    # 2. Rates
    if not 0.0 <= RISK_FREE_RATE < 1.0:
        issues.append({
            "level": "ERROR",
            "message": f"RISK_FREE_RATE={RISK_FREE_RATE} is outside [0, 1).",
        })
    if not 0.0 <= TREND_RISK_FREE_RATE < 1.0:
        issues.append({
            "level": "ERROR",
            "message": f"TREND_RISK_FREE_RATE={TREND_RISK_FREE_RATE} is outside [0, 1).",
        })
    if not 0.0 <= TREND_COMMISSION_RATE < 1.0:
        issues.append({
            "level": "ERROR",
            "message": f"TREND_COMMISSION_RATE={TREND_COMMISSION_RATE} is outside [0, 1).",
        })
    elif TREND_COMMISSION_RATE > max(TREND_COMMISSION_CHOICES, default=0.0):
        issues.append({
            "level": "WARNING",
            "message": (
                f"TREND_COMMISSION_RATE={TREND_COMMISSION_RATE} is above every selectable "
                f"commission {TREND_COMMISSION_CHOICES}."
            ),
        })

    # 3. Trend warm-up
    if TREND_MIN_MONTHLY_POINTS < TREND_SMA_MONTHS:
        issues.append({
            "level": "ERROR",
            "message": (
                f"TREND_MIN_MONTHLY_POINTS={TREND_MIN_MONTHLY_POINTS} is below "
                f"TREND_SMA_MONTHS={TREND_SMA_MONTHS}; no signal could be produced."
            ),
        })

    # 4. Window and period choices
    if any(w < 1 for w in ROLLING_WINDOW_CHOICES):
        issues.append({
            "level": "ERROR",
            "message": f"ROLLING_WINDOW_CHOICES must be positive years, got {ROLLING_WINDOW_CHOICES}.",
        })
    if any(p < 2 for p in SMA_DISTANCE_PERIODS):
        issues.append({
            "level": "ERROR",
            "message": f"SMA_DISTANCE_PERIODS must be at least 2 days, got {SMA_DISTANCE_PERIODS}.",
        })

    return issues
