from pydantic import BaseModel, Field
from dotenv import load_dotenv
import os
load_dotenv()


def _env(name: str, default: str = ""):
    # Settings() 생성 시점에 환경변수를 읽는다
    return Field(default_factory=lambda: os.getenv(name, default))


class Settings(BaseModel):
    # Alpha Vantage 설정
    av_api_key: str = _env("AV_API_KEY")
    av_base: str = _env("AV_BASE", "https://www.alphavantage.co/query")
    av_function: str = _env("AV_FUNCTION", "GLOBAL_QUOTE")

    # 보유 종목 CSV 경로 (작업 디렉터리 기준)
    data_file: str = _env("DATA_FILE", "data.csv")

    log_level: str = _env("LOG_LEVEL", "INFO")

    def has_api_key(self) -> bool:
        return bool(self.av_api_key.strip())
