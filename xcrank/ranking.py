from __future__ import annotations

import math
from typing import Iterable, List

from .models import DisplayRow, FlightRecord


def parse_points(text: str) -> float:
    """Return the XC points in *text* as float.

    Anything that is not a finite number counts as ``0.0`` so that a single
    broken record never aborts the ranking.
    """
    try:
        value = float(text)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def rank_flights(records: Iterable[FlightRecord]) -> List[FlightRecord]:
    """Return *records* sorted by descending points.

    ``sorted`` is stable, so flights with equal points keep the API order.
    """
    return sorted(records, key=lambda rec: parse_points(rec.besttaskpoints), reverse=True)


def select_rows(
    ranked: List[FlightRecord],
    *,
    limit: int = 0,
    points: float = 0.0,
    takeoff: str = "",
    compact: bool = False,
) -> List[DisplayRow]:
    """Turn the ranked list into display rows.

    Rank numbers are positions in the full ranked list, filters only hide
    rows. ``limit`` is compared against that position after a row has been
    emitted, so filtered-out flights still use up the limit.
    """
    rows: List[DisplayRow] = []
    for i, rec in enumerate(ranked):
        value = parse_points(rec.besttaskpoints)
        if points > 0 and value <= points:
            continue
        if takeoff and takeoff not in rec.takeoffwaypointname:
            continue

        rows.append(
            DisplayRow(
                rank=i + 1,
                name=rec.pilot_name,
                points=f"{value:.2f}",
                takeoff=rec.takeofflocation if compact else rec.takeoffwaypointname,
                landing=rec.landinglocation,
                flight_id="" if compact else rec.idflight,
            )
        )

        if limit > 0 and i + 1 >= limit:
            break
    return rows


__all__ = ["parse_points", "rank_flights", "select_rows"]
