from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

class Holding(BaseModel):
    symbol: str
    quantity: Decimal
    target_allocation: Decimal  # 0~1 또는 %, 합계 검증 없음
    price: Decimal = Decimal("0")
    price_fetched_at: Optional[datetime] = None

    @property
    def is_priced(self) -> bool:
        return self.price_fetched_at is not None

class QuoteData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    symbol: str = Field("", alias="01. symbol")
    open: str = Field("", alias="02. open")
    high: str = Field("", alias="03. high")
    low: str = Field("", alias="04. low")
    price: str = Field("", alias="05. price")
    volume: str = Field("", alias="06. volume")
    latest_trading_day: str = Field("", alias="07. latest trading day")
    previous_close: str = Field("", alias="08. previous close")
    change: str = Field("", alias="09. change")
    change_percent: str = Field("", alias="10. change percent")

    # 타입이 다른 필드는 해당 필드만 비우고 나머지는 그대로 채운다
    @field_validator("*", mode="before")
    @classmethod
    def _only_strings(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""

class QuoteResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    global_quote: QuoteData = Field(default_factory=QuoteData, alias="Global Quote")
    # 호출 한도 초과, 잘못된 키 등에서 내려오는 안내 문구
    note: Optional[str] = Field(None, alias="Note")
    information: Optional[str] = Field(None, alias="Information")
    error_message: Optional[str] = Field(None, alias="Error Message")

    @field_validator("global_quote", mode="before")
    @classmethod
    def _quote_object(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else {}

    # 안내 문구는 진단용이므로 형식이 달라도 시세 파싱에 영향을 주지 않는다
    @field_validator("note", "information", "error_message", mode="before")
    @classmethod
    def _message_text(cls, v: Any) -> Optional[str]:
        return v if isinstance(v, str) else None

    def provider_message(self) -> Optional[str]:
        return self.error_message or self.note or self.information
