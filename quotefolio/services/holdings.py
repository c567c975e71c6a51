from __future__ import annotations
import csv
from pathlib import Path
from typing import Iterable, List

from quotefolio.core.decimals import require_decimal
from quotefolio.core.errors import DecimalParseError, HoldingsFileError, HoldingsParseError
from quotefolio.core.models import Holding
from quotefolio.utils.logging import get_logger


log = get_logger("holdings")

HEADER_FIRST_FIELD = "symbol"
MIN_FIELDS = 3


def _parse_row(line: int, row: List[str]) -> Holding:
    if len(row) < MIN_FIELDS:
        raise HoldingsParseError(line, f"필드가 {MIN_FIELDS}개 이상 필요합니다 (현재 {len(row)}개): {row}")

    symbol = row[0].strip()
    if not symbol:
        raise HoldingsParseError(line, "symbol이 비어 있습니다")

    try:
        quantity = require_decimal(row[1], "quantity")
        target = require_decimal(row[2], "target_allocation")
    except DecimalParseError as e:
        raise HoldingsParseError(line, str(e)) from e

    return Holding(symbol=symbol, quantity=quantity, target_allocation=target)


def parse_holdings(rows: Iterable[List[str]]) -> List[Holding]:
    """CSV 레코드를 Holding 목록으로 변환한다.

    첫 번째 레코드만 헤더 여부를 확인한다. 한 행이라도 실패하면
    부분 결과 없이 예외를 던진다.
    """
    holdings: List[Holding] = []
    first = True
    line = 0
    it = iter(rows)
    while True:
        try:
            row = next(it)
        except StopIteration:
            break
        except csv.Error as e:
            raise HoldingsParseError(line + 1, f"CSV 형식 오류: {e}") from e
        line += 1

        # 빈 줄은 무시
        if not row:
            continue

        if first:
            first = False
            if row[0] == HEADER_FIRST_FIELD:
                log.debug("헤더 행 건너뜀: %s", row)
                continue

        holdings.append(_parse_row(line, row))

    return holdings


def load_holdings(path: str | Path) -> List[Holding]:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8-sig", newline="") as f:
            holdings = parse_holdings(csv.reader(f))
    except (OSError, UnicodeDecodeError) as e:
        raise HoldingsFileError(str(p), str(e)) from e

    log.info("보유 종목 %d건 로드: %s", len(holdings), p)
    return holdings
