from __future__ import annotations

import pytest

from pytoll.models import LineRef, Road, RoadTotal, RoadType, RoadTypeTotal, Vehicle, VehicleTotals
from pytoll.report import format_distance, format_error, format_road_total, format_vehicle_totals


@pytest.mark.parametrize(("distance", "expected"), [(0, "0,0"), (7, "0,7"), (50, "5,0"), (1234, "123,4")])
def test_format_distance(distance: int, expected: str) -> None:
    assert format_distance(distance) == expected


def test_format_vehicle_totals() -> None:
    entry = VehicleTotals(
        vehicle=Vehicle(plate="ABC123"),
        totals=(
            RoadTypeTotal(road_type=RoadType.A, distance=50),
            RoadTypeTotal(road_type=RoadType.S, distance=12),
        ),
    )
    assert format_vehicle_totals(entry) == "ABC123 A 5,0 S 1,2"


def test_format_road_total() -> None:
    entry = RoadTotal(road=Road(road_type=RoadType.S, number=3), distance=205)
    assert format_road_total(entry) == "S3 20,5"


def test_format_error_keeps_original_text() -> None:
    assert format_error(LineRef(number=4, text="  hello  world ")) == "Error in line 4:   hello  world "
