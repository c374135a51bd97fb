"""Console rendering of ranked flights."""

from __future__ import annotations

from typing import IO, List, Optional, Sequence

import click
from tabulate import tabulate

from .models import DisplayRow

HEADERS = ["#", "NAME", "XC-POINTS", "TAKEOFF", "LANDING", "FLIGHT ID"]

# click.style kwargs per column, header and body
HEADER_STYLES = [
    {"fg": "bright_black", "bold": True},
    {"fg": "white", "bg": "cyan"},
    {"fg": "white", "bg": "red"},
    {"fg": "white", "bg": "cyan"},
    {"fg": "white", "bg": "cyan"},
    {"fg": "white", "bg": "cyan"},
]
COLUMN_STYLES = [
    {"fg": "bright_black", "bold": True},
    {"fg": "bright_black", "bold": True},
    {"fg": "bright_red", "bold": True},
    {"fg": "black", "bold": True},
    {"fg": "black", "bold": True},
    {"fg": "black", "bold": True},
]


def _cells(row: DisplayRow, compact: bool) -> List[str]:
    cells = [str(row.rank), row.name, row.points, row.takeoff, row.landing]
    if not compact:
        cells.append(row.flight_id)
    return cells


def _styled(cells: Sequence[str], styles: Sequence[dict]) -> List[str]:
    return [click.style(cell, **style) for cell, style in zip(cells, styles)]


def format_table(rows: Sequence[DisplayRow], *, ascii: bool = False, compact: bool = False) -> str:
    """Return the borderless table for *rows* as a string."""
    headers = HEADERS[:5] if compact else list(HEADERS)
    body = [_cells(row, compact) for row in rows]
    if not ascii:
        headers = _styled(headers, HEADER_STYLES)
        body = [_styled(cells, COLUMN_STYLES) for cells in body]
    return tabulate(body, headers=headers, tablefmt="plain", disable_numparse=True)


def render_table(
    rows: Sequence[DisplayRow],
    *,
    ascii: bool = False,
    compact: bool = False,
    out: Optional[IO[str]] = None,
) -> None:
    """Write the table to *out* (stdout by default)."""
    click.echo(format_table(rows, ascii=ascii, compact=compact), file=out, color=not ascii)


__all__ = ["HEADERS", "format_table", "render_table"]
