from __future__ import annotations
import re
from decimal import Decimal, InvalidOperation

from quotefolio.core.errors import DecimalParseError

# 부호, 정수부/소수부, 지수만 허용 (밑줄 구분자, 유니코드 숫자 불가)
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


def require_decimal(text: str | None, field: str = "value") -> Decimal:
    if text is None or not text.strip():
        raise DecimalParseError(field, text or "")
    cleaned = text.strip()
    # NaN/Infinity도 여기서 걸러진다
    if not _DECIMAL_RE.fullmatch(cleaned):
        raise DecimalParseError(field, text)
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise DecimalParseError(field, text) from None
