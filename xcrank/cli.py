from __future__ import annotations

from datetime import datetime
from typing import Optional

import click
from pydantic import ValidationError

from .config import get_settings
from .dhv_fetcher import DhvXcError, DhvXcFetcher
from .models import DAY_FORMAT, QueryOptions
from .runner import run_loop, setup_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _validate_day(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> str:
    if not value:
        return ""
    try:
        datetime.strptime(value, DAY_FORMAT)
    except ValueError:
        raise click.BadParameter(f"expected DD.MM.YYYY, got {value!r}")
    return value


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-d", "--day", callback=_validate_day, help="date selection: 08.06.2022 (default: today)")
@click.option("-i", "--interval", type=click.IntRange(min=0), default=0, show_default=True, help="Refresh interval in seconds")
@click.option("-l", "--limit", type=click.IntRange(min=0), default=0, show_default=True, help="Limit to X results")
@click.option("-p", "--points", type=float, default=0.0, show_default=True, help="Only show flights > XC points")
@click.option("-a", "--ascii", "ascii_only", is_flag=True, help="Dont display colors, ascii only output")
@click.option("-f", "--takeoff", default="", help="Filter by takeoff: takeoff must include string")
@click.option("-c", "--compact", is_flag=True, help="Takeoff location only, no flight ID column")
@click.option("--log-level", type=click.Choice(LOG_LEVELS, case_sensitive=False), help="Override XCRANK_LOG_LEVEL")
def cli(
    day: str,
    interval: int,
    limit: int,
    points: float,
    ascii_only: bool,
    takeoff: str,
    compact: bool,
    log_level: Optional[str],
) -> None:
    """Show today's DHV-XC flights ranked by XC points."""
    try:
        settings = get_settings()
    except ValidationError as exc:
        raise click.UsageError(f"invalid configuration:\n{exc}")

    log = setup_logging((log_level or settings.log_level).upper(), settings.log_file)
    options = QueryOptions(
        day=day,
        interval=interval,
        limit=limit,
        points=points,
        takeoff=takeoff,
        ascii=ascii_only,
        compact=compact,
    )
    fetcher = DhvXcFetcher(settings.api_url, timeout=settings.timeout, logger=log)

    try:
        run_loop(fetcher, options, logger=log)
    except DhvXcError as exc:
        log.error("%s", exc)
        raise SystemExit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
