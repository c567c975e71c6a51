from __future__ import annotations
import typer
from typing import Optional
from quotefolio.utils.logging import get_logger, set_level
from quotefolio.config import Settings
from quotefolio.core.errors import PortfolioError

app = typer.Typer(help="보유 종목 현재가 조회 CLI", add_completion=False)
log = get_logger("cli")


@app.command()
def main(
    data_file: Optional[str] = typer.Option(None, "--data-file", help="보유 종목 CSV 경로 (미지정시 DATA_FILE 또는 data.csv)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="디버그 로그 출력"),
):
    from quotefolio.cli.commands.portfolio import run as run_portfolio

    st = Settings()
    if data_file:
        st.data_file = data_file
    set_level("DEBUG" if verbose else st.log_level)

    try:
        run_portfolio(st)
    except PortfolioError as e:
        log.debug("실행 중단", exc_info=True)
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
