"""Round-trip accounting over trend-following signal transitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .signals import BUY, SELL
from .trend_following import TrendFollowingResult


@dataclass(frozen=True)
class SignalSummary:
    buy_signals: int
    sell_signals: int
    successful_round_trips: int
    total_round_trips: int
    success_rate: Optional[float]   # fraction of successful round trips

    def to_dict(self) -> Dict:
        return {
            "buy_signals": self.buy_signals,
            "sell_signals": self.sell_signals,
            "successful_round_trips": self.successful_round_trips,
            "total_round_trips": self.total_round_trips,
            "success_rate": self.success_rate,
        }


def summarize_signals(result: TrendFollowingResult) -> SignalSummary:
    """Pair each SELL transition with the next BUY transition.

    Transitions are priced with the buy-and-hold value on their date.  A
    round trip is successful when the strategy re-entered below its exit.
    """
    price_on: Dict[str, float] = {p.date: p.buy_hold_value for p in result.chart_data}

    buys = sells = successful = total = 0
    exit_price: Optional[float] = None
    for transition in result.signal_dates:
        if transition.signal == SELL:
            sells += 1
            exit_price = price_on.get(transition.date)
        elif transition.signal == BUY:
            buys += 1
            if exit_price is not None:
                total += 1
                if price_on.get(transition.date, exit_price) < exit_price:
                    successful += 1
                exit_price = None

    return SignalSummary(
        buy_signals=buys,
        sell_signals=sells,
        successful_round_trips=successful,
        total_round_trips=total,
        success_rate=successful / total if total else None,
    )
