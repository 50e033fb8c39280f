"""
Multi-instrument comparison — align several tickers on a common start.

A single series is charted in raw prices.  Two or more series are
rebased to 100 at the first date on which every ticker has a point, so
their growth can be compared on one axis.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pandas as pd

from ..data.models import NamedSeries

logger = logging.getLogger(__name__)


@dataclass
class ChartRow:
    """One date of the comparison chart; tickers without a point are absent."""
    date: str
    values: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {"date": self.date, **self.values}


def find_common_start_date(named_series: Sequence[NamedSeries]) -> Optional[str]:
    """Earliest date present in every series, or None if there is none."""
    date_sets = [{p.date for p in ns.data} for ns in named_series]
    for date in sorted(set().union(*date_sets)):
        if all(date in dates for dates in date_sets):
            return date
    return None


def normalize_for_chart(named_series: Sequence[NamedSeries]) -> List[ChartRow]:
    """Chart rows from the common start date onward.

    Rows follow the sorted union of all dates; a row is kept when at least
    one ticker has a value that date (gaps are left as gaps).  When no
    date is shared by every series, the first date of the first series is
    used as the start and each ticker's first close as its base.
    """
    populated = [ns for ns in named_series if ns.data]
    if not populated:
        return []

    price_maps: Dict[str, Dict[str, float]] = {
        ns.ticker: {p.date: p.close for p in ns.data} for ns in populated
    }
    all_dates = sorted(set().union(*(m.keys() for m in price_maps.values())))

    common_start = find_common_start_date(populated)
    if common_start is None:
        common_start = populated[0].data[0].date
        logger.warning(
            "No date shared by all of %s; rebasing from %s",
            [ns.ticker for ns in populated], common_start,
        )

    base_prices = {
        ns.ticker: price_maps[ns.ticker].get(common_start, ns.data[0].close)
        for ns in populated
    }
    rebase = len(populated) > 1

    rows: List[ChartRow] = []
    for date in all_dates[all_dates.index(common_start):]:
        values: Dict[str, float] = {}
        for ns in populated:
            price = price_maps[ns.ticker].get(date)
            if price is None:
                continue
            values[ns.ticker] = price / base_prices[ns.ticker] * 100 if rebase else price
        if values:
            rows.append(ChartRow(date, values))
    return rows


def chart_frame(rows: Sequence[ChartRow]) -> pd.DataFrame:
    """Wide frame (one column per ticker, NaN for gaps) indexed by date."""
    if not rows:
        return pd.DataFrame()
    frame = pd.DataFrame([r.values for r in rows], index=[r.date for r in rows])
    frame.index.name = "date"
    return frame
