from rich.console import Console
from rich.logging import RichHandler
import logging
import os

# stdout은 보고서 출력 전용, 로그는 stderr로 보낸다
_console = Console(stderr=True)

def get_logger(name: str = "app") -> logging.Logger:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_console, markup=False)],
    )
    return logging.getLogger(name)


def set_level(level: str) -> None:
    logging.getLogger().setLevel(level.upper())
