"""Data models used throughout the project."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

DAY_FORMAT = "%d.%m.%Y"


@dataclass(frozen=True, slots=True)
class FlightRecord:
    firstname: str = ""
    lastname: str = ""
    besttaskpoints: str = ""
    takeofflocation: str = ""
    takeoffwaypointname: str = ""
    landinglocation: str = ""
    idflight: str = ""

    @property
    def pilot_name(self) -> str:
        return f"{self.firstname} {self.lastname}"


@dataclass(slots=True)
class ResultSet:
    data: List[FlightRecord] = field(default_factory=list)
    success: bool = False
    message: str = ""


@dataclass(frozen=True, slots=True)
class QueryOptions:
    """What to query and how to display it."""

    day: str = ""
    interval: int = 0
    limit: int = 0
    points: float = 0.0
    takeoff: str = ""
    ascii: bool = False
    compact: bool = False

    def resolved_day(self, today: Optional[date] = None) -> str:
        """Return ``day`` or, if unset, *today* (local date) as DD.MM.YYYY."""
        if self.day:
            return self.day
        return (today or date.today()).strftime(DAY_FORMAT)


@dataclass(frozen=True, slots=True)
class DisplayRow:
    rank: int
    name: str
    points: str
    takeoff: str
    landing: str
    flight_id: str = ""


__all__ = ["DAY_FORMAT", "FlightRecord", "ResultSet", "QueryOptions", "DisplayRow"]
