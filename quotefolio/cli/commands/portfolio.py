from __future__ import annotations
import typer
import httpx
from typing import Callable, List, Optional

from quotefolio.config import Settings
from quotefolio.utils.logging import get_logger
from quotefolio.adapters.alphavantage.client import AlphaVantageClient
from quotefolio.core.models import Holding
from quotefolio.services.holdings import load_holdings
from quotefolio.services.quotes import enrich_holdings
from quotefolio.services.report import format_holdings


log = get_logger("cli.portfolio")


def run(st: Settings, transport: Optional[httpx.BaseTransport] = None,
        echo: Callable[[str], None] = typer.echo) -> List[Holding]:
    """load → enrich → display. 오류는 호출자에게 그대로 전파한다."""
    holdings = load_holdings(st.data_file)

    if not st.has_api_key():
        log.warning("AV_API_KEY가 설정되지 않았습니다. 시세 조회가 실패할 수 있습니다.")

    with AlphaVantageClient(st.av_base, st.av_api_key, function=st.av_function, transport=transport) as client:
        enrich_holdings(client, holdings)

    echo(format_holdings(holdings))
    return holdings
