"""
pandas adapter at the ingestion boundary.

Converts an OHLCV ``DataFrame`` (DatetimeIndex or a date column, English
or Stooq Polish headers) into the ``DailyPoint`` list every engine
consumes, and back into a frame for tabular presentation.
"""
import logging
import re
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from .models import DailyPoint

logger = logging.getLogger(__name__)

REQUIRED_OHLCV = ["Open", "High", "Low", "Close", "Volume"]
DATE_COLUMNS = ["Date", "date", "Data", "data", "Datetime", "datetime", "Timestamp", "timestamp"]

# Priority-ordered exact/anchored patterns for OHLCV column detection.
# Avoids greedy substring matching (e.g. "low" in "following").
_OHLCV_PATTERNS = {
    "Open": [
        re.compile(r"^(1\.\s*)?open$", re.I),
        re.compile(r"^otwarcie$", re.I),
    ],
    "High": [
        re.compile(r"^(2\.\s*)?high$", re.I),
        re.compile(r"^najwyzszy$", re.I),
    ],
    "Low": [
        re.compile(r"^(3\.\s*)?low$", re.I),
        re.compile(r"^najnizszy$", re.I),
    ],
    "Close": [
        re.compile(r"^(4\.\s*)?close$", re.I),
        re.compile(r"^adj[\._\s]?close$", re.I),
        re.compile(r"^zamkniecie$", re.I),
    ],
    "Volume": [
        re.compile(r"^(5\.\s*|6\.\s*)?volume$", re.I),
        re.compile(r"^wolumen$", re.I),
    ],
}

# Patterns for detecting OHLCV-like column names that didn't match
_OHLCV_LIKE = re.compile(r"(open|high|low|close|volume)", re.I)


def normalize_ohlcv_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename OHLCV columns to ``Open/High/Low/Close/Volume``.

    The first matching column wins for each target; later duplicates are
    left untouched.
    """
    column_map: Dict[str, str] = {}
    used: set = set()
    for col in df.columns:
        col_stripped = str(col).strip()
        target = None
        for ohlcv_target, patterns in _OHLCV_PATTERNS.items():
            if any(p.match(col_stripped) for p in patterns):
                target = ohlcv_target
                break

        if target and target not in used:
            column_map[col] = target
            used.add(target)
        elif target is None and _OHLCV_LIKE.search(col_stripped):
            logger.warning(
                "Column %r looks OHLCV-like but did not match any known pattern — skipping",
                col_stripped,
            )
    return df.rename(columns=column_map)


def _date_index(df: pd.DataFrame) -> pd.DatetimeIndex:
    for col in DATE_COLUMNS:
        if col in df.columns:
            return pd.DatetimeIndex(pd.to_datetime(df[col], errors="coerce"))
    if isinstance(df.index, pd.DatetimeIndex):
        return df.index
    return pd.DatetimeIndex(pd.to_datetime(df.index, errors="coerce"))


def series_from_frame(df: pd.DataFrame, ticker: Optional[str] = None) -> List[DailyPoint]:
    """Convert an OHLCV frame into a sorted, de-duplicated daily series.

    Rows with a missing, unparsable or non-positive close are dropped.
    Missing open/high/low default to the close and missing volume to 0.
    Duplicate dates keep the last row.

    Raises
    ------
    ValueError
        If no close column can be identified.
    """
    if df is None or len(df) == 0:
        return []

    out = normalize_ohlcv_columns(df)
    if "Close" not in out.columns:
        raise ValueError(
            f"No close column found for {ticker or 'frame'}; columns={list(df.columns)}"
        )

    frame = pd.DataFrame(index=_date_index(out))
    for col in REQUIRED_OHLCV:
        if col in out.columns:
            frame[col] = pd.to_numeric(out[col], errors="coerce").to_numpy()
        else:
            frame[col] = np.nan

    frame = frame[~frame.index.isna()]
    frame = frame[frame["Close"].notna() & (frame["Close"] > 0)]
    for col in ("Open", "High", "Low"):
        frame[col] = frame[col].fillna(frame["Close"])
    frame["Volume"] = frame["Volume"].fillna(0.0)

    frame.index = frame.index.normalize()
    frame = frame.sort_index(kind="mergesort")
    frame = frame[~frame.index.duplicated(keep="last")]

    dropped = len(df) - len(frame)
    if dropped:
        logger.info("Dropped %d unusable rows for %s", dropped, ticker or "frame")

    return [
        DailyPoint(
            date=ts.strftime("%Y-%m-%d"),
            open=float(row.Open),
            high=float(row.High),
            low=float(row.Low),
            close=float(row.Close),
            volume=float(row.Volume),
        )
        for ts, row in zip(frame.index, frame.itertuples(index=False))
    ]


def series_to_frame(series: Sequence[DailyPoint]) -> pd.DataFrame:
    """OHLCV frame with a DatetimeIndex named ``date``."""
    if not series:
        return pd.DataFrame(columns=REQUIRED_OHLCV, index=pd.DatetimeIndex([], name="date"))
    df = pd.DataFrame(
        {
            "Open": [p.open for p in series],
            "High": [p.high for p in series],
            "Low": [p.low for p in series],
            "Close": [p.close for p in series],
            "Volume": [p.volume for p in series],
        },
        index=pd.DatetimeIndex(pd.to_datetime([p.date for p in series]), name="date"),
    )
    return df
