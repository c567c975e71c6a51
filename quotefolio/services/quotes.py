from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, List

from quotefolio.adapters.alphavantage.client import AlphaVantageClient
from quotefolio.core.decimals import require_decimal
from quotefolio.core.errors import DecimalParseError, QuoteParseError
from quotefolio.core.models import Holding
from quotefolio.utils.logging import get_logger


log = get_logger("quotes")


def now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class PriceQuote:
    symbol: str
    price: Decimal
    fetched_at: datetime


def fetch_price(client: AlphaVantageClient, symbol: str, clock: Callable[[], datetime] = now) -> PriceQuote:
    """단일 종목 현재가를 조회한다. 실패 시 예외를 던진다."""
    quote = client.fetch_global_quote(symbol)
    try:
        price = require_decimal(quote.global_quote.price, "05. price")
    except DecimalParseError as e:
        raise QuoteParseError(symbol, str(e), quote.provider_message()) from e
    return PriceQuote(symbol=symbol, price=price, fetched_at=clock())


def enrich_holdings(client: AlphaVantageClient, holdings: List[Holding],
                    clock: Callable[[], datetime] = now) -> List[Holding]:
    """보유 종목마다 순차로 현재가를 붙인다.

    첫 오류에서 즉시 중단한다. 이미 조회된 종목의 가격은 그대로 남는다.
    """
    for i, h in enumerate(holdings, 1):
        q = fetch_price(client, h.symbol, clock=clock)
        h.price = q.price
        h.price_fetched_at = q.fetched_at
        log.debug("[%d/%d] %s 현재가 %s", i, len(holdings), h.symbol, q.price)
    log.info("현재가 조회 완료: %d건", len(holdings))
    return holdings
