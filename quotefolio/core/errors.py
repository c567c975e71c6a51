from __future__ import annotations
from typing import Optional


class PortfolioError(Exception):
    """CLI까지 전파되어 프로세스를 종료시키는 오류의 공통 부모."""


class HoldingsFileError(PortfolioError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"보유 종목 파일을 읽을 수 없습니다: {path} ({reason})")


class HoldingsParseError(PortfolioError):
    def __init__(self, line: int, message: str):
        self.line = line
        super().__init__(f"{line}행: {message}")


class QuoteRequestError(PortfolioError):
    def __init__(self, symbol: str, reason: str):
        self.symbol = symbol
        super().__init__(f"{symbol} 시세 요청 실패: {reason}")


class QuoteParseError(PortfolioError):
    def __init__(self, symbol: str, message: str, provider_message: Optional[str] = None):
        self.symbol = symbol
        self.provider_message = provider_message
        text = f"{symbol} 시세 응답 파싱 실패: {message}"
        if provider_message:
            text += f" (provider: {provider_message})"
        super().__init__(text)


class DecimalParseError(ValueError):
    def __init__(self, field: str, text: str):
        self.field = field
        self.text = text
        super().__init__(f"{field} 값이 올바른 십진수가 아닙니다: {text!r}")
