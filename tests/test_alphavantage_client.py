import httpx
import pytest

from quotefolio.adapters.alphavantage.client import AlphaVantageClient, decode_quote
from quotefolio.core.errors import QuoteRequestError


def _client(handler, **kw):
    return AlphaVantageClient("https://av.test/query", "secret", transport=httpx.MockTransport(handler), **kw)


def test_request_url_params(quote_body):
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, content=quote_body("1.00"))

    with _client(handler) as c:
        c.fetch_global_quote("ABC")

    req = seen[0]
    assert req.method == "GET"
    assert req.url.host == "av.test"
    assert req.url.path == "/query"
    assert dict(req.url.params) == {"function": "GLOBAL_QUOTE", "symbol": "ABC", "apikey": "secret"}


def test_decodes_all_quote_fields():
    payload = {"Global Quote": {
        "01. symbol": "IBM", "02. open": "1.0", "03. high": "2.0", "04. low": "0.5",
        "05. price": "1.5", "06. volume": "100", "07. latest trading day": "2024-01-02",
        "08. previous close": "1.4", "09. change": "0.1", "10. change percent": "7.1429%",
    }}
    with _client(lambda r: httpx.Response(200, json=payload)) as c:
        q = c.fetch_global_quote("IBM").global_quote

    assert q.symbol == "IBM"
    assert q.price == "1.5"
    assert q.latest_trading_day == "2024-01-02"
    assert q.change_percent == "7.1429%"


def test_connection_error_raises_request_error():
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    with _client(handler) as c, pytest.raises(QuoteRequestError) as exc:
        c.fetch_global_quote("ABC")
    assert exc.value.symbol == "ABC"


def test_non_2xx_is_not_an_error():
    with _client(lambda r: httpx.Response(503, text="unavailable")) as c:
        resp = c.fetch_global_quote("ABC")
    assert resp.global_quote.price == ""


def test_api_key_absent_still_sends_request():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"Error Message": "the parameter apikey is invalid or missing"})

    with AlphaVantageClient("https://av.test/query", "", transport=httpx.MockTransport(handler)) as c:
        resp = c.fetch_global_quote("ABC")

    assert seen[0].url.params["apikey"] == ""
    assert resp.provider_message() == "the parameter apikey is invalid or missing"


@pytest.mark.parametrize("body", [
    b"",
    b"not json",
    b"[1, 2, 3]",
    b'"text"',
    b'{"Global Quote": []}',
    b'{"Global Quote": {"05. price": 123.45}}',
    b'{"Global Quote": {}}',
    b"\xff\xfe",
])
def test_decode_is_tolerant(body):
    resp = decode_quote(body)
    assert resp.global_quote.price == ""


def test_decode_provider_note():
    resp = decode_quote(b'{"Note": "Thank you for using Alpha Vantage! call frequency is 5 calls per minute"}')
    assert resp.global_quote.price == ""
    assert "call frequency" in resp.provider_message()


@pytest.mark.parametrize("body", [
    b'{"Global Quote": {"05. price": "123.45", "06. volume": 1000}}',
    b'{"Global Quote": {"05. price": "123.45", "01. symbol": null, "09. change": [1]}}',
    b'{"Global Quote": {"05. price": "123.45"}, "Information": {"a": 1}}',
    b'{"Global Quote": {"05. price": "123.45"}, "Note": 5, "Error Message": ["x"]}',
])
def test_decode_keeps_price_when_other_fields_mistyped(body):
    resp = decode_quote(body)
    assert resp.global_quote.price == "123.45"
    assert resp.provider_message() is None


def test_decode_keeps_string_siblings_next_to_mistyped_ones():
    q = decode_quote(b'{"Global Quote": {"01. symbol": "IBM", "05. price": "1.5", "06. volume": 1000}}').global_quote
    assert q.symbol == "IBM"
    assert q.volume == ""


def test_decode_keeps_quote_when_notice_mistyped():
    resp = decode_quote(b'{"Global Quote": {"05. price": "9.99"}, "Note": "slow down", "Information": 3}')
    assert resp.global_quote.price == "9.99"
    assert resp.provider_message() == "slow down"
