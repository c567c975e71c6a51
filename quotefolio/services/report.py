from __future__ import annotations
from typing import List
from datetime import datetime
from quotefolio.core.models import Holding


def format_holding(h: Holding) -> str:
    fetched = h.price_fetched_at.isoformat(timespec="seconds") if h.is_priced else "-"
    return (f" - {h.symbol:<6} qty: {h.quantity} | target: {h.target_allocation}"
            f" | price: {h.price} | fetched: {fetched}")

def format_holdings(holdings: List[Holding]) -> str:
    ts = datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")
    lines = [f"[{ts}] Holdings ({len(holdings)}):"]
    for h in holdings:
        lines.append(format_holding(h))
    return "\n".join(lines)
