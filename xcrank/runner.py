from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import click

from .dhv_fetcher import ApiError, DhvXcFetcher
from .models import QueryOptions
from .ranking import rank_flights, select_rows
from .table import render_table

# wait this many intervals between two refreshes
SLEEP_FACTOR = 1.15

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
    """Configure root logging once and return the ``xcrank`` logger."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(level=level, handlers=handlers, format=LOG_FORMAT, force=True)
    return logging.getLogger("xcrank")


def run_cycle(fetcher: DhvXcFetcher, options: QueryOptions, *, logger: logging.Logger) -> bool:
    """Fetch, rank and print one day of flights.

    Returns ``False`` when the API has no flights for the day.
    """
    day = options.resolved_day()
    result = fetcher.fetch(day)
    if not result.success:
        raise ApiError(result.message)

    if not result.data:
        click.echo(f"No results for today: {day}")
        return False

    ranked = rank_flights(result.data)
    rows = select_rows(
        ranked,
        limit=options.limit,
        points=options.points,
        takeoff=options.takeoff,
        compact=options.compact,
    )
    logger.info("%s: %d flights, showing %d", day, len(ranked), len(rows))
    render_table(rows, ascii=options.ascii, compact=options.compact)
    return True


def run_loop(
    fetcher: DhvXcFetcher,
    options: QueryOptions,
    *,
    logger: logging.Logger,
    sleep: Optional[Callable[[float], None]] = None,
    clear: Optional[Callable[[], None]] = None,
) -> None:
    """Run cycles until done: once without interval, else until no results."""
    sleep = sleep or time.sleep
    clear = clear or click.clear
    while True:
        if options.interval > 0:
            clear()
        if not run_cycle(fetcher, options, logger=logger):
            break
        if options.interval == 0:
            break
        delay = SLEEP_FACTOR * options.interval
        logger.debug("Next refresh in %.1fs", delay)
        sleep(delay)


__all__ = ["SLEEP_FACTOR", "setup_logging", "run_cycle", "run_loop"]
