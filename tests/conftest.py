"""Shared test fixtures for the ticker_analytics test suite."""
from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from ticker_analytics.data.models import DailyPoint


def make_series(rows):
    """DailyPoint list from ``(date, close)`` pairs."""
    return [
        DailyPoint(date=d, open=float(c), high=float(c), low=float(c), close=float(c))
        for d, c in rows
    ]


def bdate_series(closes, start="2020-01-01"):
    """DailyPoint list on consecutive business days starting at *start*."""
    dates = pd.bdate_range(start, periods=len(closes))
    return make_series(zip(dates.strftime("%Y-%m-%d"), closes))


# ── Data fixtures ────────────────────────────────────────────────────


@pytest.fixture
def series_factory():
    """Build a series from ``(date, close)`` pairs."""
    return make_series


@pytest.fixture
def synthetic_series():
    """Random-walk daily series: 1000 business days from 2018-01-01."""
    rng = np.random.default_rng(42)
    n = 1000
    returns = rng.normal(0.0004, 0.012, n)
    closes = 100.0 * np.cumprod(1 + returns)
    return bdate_series(closes, start="2018-01-01")


@pytest.fixture
def uptrend_series():
    """Strictly increasing daily series: 600 business days from 2019-01-01."""
    closes = 100.0 * np.power(1.0005, np.arange(600))
    return bdate_series(closes, start="2019-01-01")


@pytest.fixture
def whipsaw_series():
    """Series alternating multi-month rallies and slides so the trend signal flips."""
    n = 900
    t = np.arange(n)
    closes = 100.0 + 25.0 * np.sin(2 * np.pi * t / 180.0) + 0.02 * t
    return bdate_series(closes, start="2017-01-02")


@pytest.fixture
def ohlcv_frame():
    """OHLCV DataFrame with a DatetimeIndex, 300 business days."""
    rng = np.random.default_rng(42)
    n = 300
    dates = pd.bdate_range("2022-01-03", periods=n)
    close = 100.0 + np.cumsum(rng.normal(0.05, 1.0, n))
    close = np.maximum(close, 1.0)
    opn = close * (1 + rng.normal(0, 0.005, n))
    high = np.maximum(opn, close) * (1 + rng.uniform(0, 0.02, n))
    low = np.minimum(opn, close) * (1 - rng.uniform(0, 0.02, n))
    vol = rng.integers(100_000, 10_000_000, n).astype(float)
    return pd.DataFrame(
        {"Open": opn, "High": high, "Low": low, "Close": close, "Volume": vol},
        index=dates,
    )
