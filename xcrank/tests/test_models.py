from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from xcrank.models import FlightRecord, QueryOptions


def test_resolved_day_default_is_today_formatted():
    assert QueryOptions().resolved_day(today=date(2022, 6, 8)) == "08.06.2022"


def test_resolved_day_explicit():
    assert QueryOptions(day="01.07.2023").resolved_day(today=date(2022, 6, 8)) == "01.07.2023"


def test_flight_record_is_immutable():
    record = FlightRecord(firstname="Ann", lastname="Li")
    assert record.pilot_name == "Ann Li"
    with pytest.raises(FrozenInstanceError):
        record.firstname = "Bo"  # type: ignore[misc]
