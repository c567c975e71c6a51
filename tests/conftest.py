"""공통 pytest fixture."""

import json

import httpx
import pytest


def _quote_body(price: str, symbol: str = "") -> bytes:
    return json.dumps({"Global Quote": {"01. symbol": symbol, "05. price": price}}).encode()


@pytest.fixture
def quote_body():
    """Global Quote 응답 본문을 만드는 함수."""
    return _quote_body


@pytest.fixture
def write_csv(tmp_path):
    def _write(text: str, name: str = "data.csv"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


@pytest.fixture
def price_transport():
    """심볼별 가격을 돌려주는 MockTransport. 호출된 심볼은 calls에 기록된다."""
    def _make(prices: dict, fail_on: str | None = None):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            symbol = request.url.params["symbol"]
            calls.append(symbol)
            if symbol == fail_on:
                raise httpx.ConnectError("connection refused", request=request)
            if symbol not in prices:
                return httpx.Response(200, json={})
            return httpx.Response(200, content=_quote_body(prices[symbol], symbol))

        return httpx.MockTransport(handler), calls
    return _make
