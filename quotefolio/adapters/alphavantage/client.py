# quotefolio/adapters/alphavantage/client.py
from __future__ import annotations
import json
import httpx
from typing import Any, Dict, Optional
from pydantic import ValidationError
from quotefolio.core.errors import QuoteRequestError
from quotefolio.core.models import QuoteResponse
from quotefolio.utils.logging import get_logger

DEFAULT_BASE = "https://www.alphavantage.co/query"
FUNCTION_GLOBAL_QUOTE = "GLOBAL_QUOTE"

log = get_logger("alphavantage")


def decode_quote(body: bytes) -> QuoteResponse:
    """응답 본문을 QuoteResponse로 변환한다.

    형식이 맞지 않으면 예외 대신 빈 QuoteResponse를 돌려준다.
    가격이 비어 있으면 이후 십진수 파싱 단계에서 실패한다.
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        log.debug("JSON 디코딩 실패, 빈 응답으로 처리: %s", e)
        return QuoteResponse()
    if not isinstance(data, dict):
        log.debug("JSON 최상위가 객체가 아님: %s", type(data).__name__)
        return QuoteResponse()
    try:
        return QuoteResponse.model_validate(data)
    except ValidationError as e:
        log.debug("응답 스키마 불일치, 빈 응답으로 처리: %s", e.errors())
        return QuoteResponse()


class AlphaVantageClient:
    def __init__(self, base: str, api_key: str, function: str = FUNCTION_GLOBAL_QUOTE,
                 transport: Optional[httpx.BaseTransport] = None):
        self.base = base or DEFAULT_BASE
        self.api_key = api_key
        self.function = function
        # timeout은 httpx 기본값을 그대로 사용
        self._http = httpx.Client(transport=transport)

    def __enter__(self) -> "AlphaVantageClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def build_params(self, symbol: str) -> Dict[str, Any]:
        return {"function": self.function, "symbol": symbol, "apikey": self.api_key}

    def fetch_global_quote(self, symbol: str) -> QuoteResponse:
        try:
            # 응답 본문은 루프가 끝날 때까지 미루지 않고 여기서 바로 닫는다
            with self._http.stream("GET", self.base, params=self.build_params(symbol)) as r:
                body = r.read()
                status = r.status_code
        except httpx.HTTPError as e:
            raise QuoteRequestError(symbol, f"{type(e).__name__}: {e}") from e

        # 비 2xx 응답도 본문을 그대로 디코딩한다
        if not 200 <= status < 300:
            log.warning("%s 시세 응답 상태코드 %d", symbol, status)
        return decode_quote(body)
