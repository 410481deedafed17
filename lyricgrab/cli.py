from __future__ import annotations

from pathlib import Path
from typing import Optional, List

import httpx
import typer
from dotenv import find_dotenv, load_dotenv

from .version import __version__
from .utils.logging import get_logger, setup_logger
from .pipeline import RunConfig, run


app = typer.Typer(
    add_completion=False,
    help="Download a web page and extract the likely lyrics block into a clean .txt file.",
    epilog="For personal use. Respect the site's Terms of Service and copyright.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command()
def main(
    url: str = typer.Argument(..., help="Page URL to extract lyrics from"),
    output: Optional[Path] = typer.Option(None, "-o", "--out", help="Output text file path (default: derived from URL)"),
    timeout: float = typer.Option(20.0, "--timeout", help="Timeout seconds"),
    retry: int = typer.Option(1, "--retry", min=0, help="Retries for transient errors"),
    header: List[str] = typer.Option(None, "--header", help="Extra HTTP header KEY=VALUE", show_default=False),
    min_score: Optional[int] = typer.Option(
        None, "--min-score", help="Fall back to best-effort text when the best block scores below this"
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit"
    ),
):
    load_dotenv(find_dotenv(usecwd=True))
    setup_logger(log_level)
    cfg = RunConfig(
        url=url,
        output=output,
        timeout=timeout,
        retries=retry,
        headers=header,
        min_score=min_score,
        log_level=log_level,
    )
    try:
        written = run(cfg)
    except (httpx.HTTPError, OSError) as e:
        get_logger().error(f"Failed: {e}")
        raise typer.Exit(code=3) from e
    typer.echo(f"Saved: {written.resolve()}")


def entrypoint():
    app()

if __name__ == "__main__":
    entrypoint()
