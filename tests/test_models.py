"""Tests for the pydantic value models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pytoll.models import LineRef, Road, RoadType, Vehicle
from pytoll.state.policy import road_order


class TestRoad:
    def test_str_is_type_then_number(self) -> None:
        assert str(Road(road_type=RoadType.S, number=42)) == "S42"

    def test_structural_equality_and_hash(self) -> None:
        first = Road(road_type=RoadType.A, number=7)
        second = Road(road_type=RoadType.A, number=7)
        assert first == second
        assert {first: 1}[second] == 1

    def test_is_frozen(self) -> None:
        road = Road(road_type=RoadType.A, number=7)
        with pytest.raises(ValidationError):
            road.number = 8  # type: ignore[misc]

    @pytest.mark.parametrize("number", [0, 1000])
    def test_rejects_out_of_range_numbers(self, number: int) -> None:
        with pytest.raises(ValidationError):
            Road(road_type=RoadType.A, number=number)

    def test_report_order_is_number_then_type(self) -> None:
        roads = [
            Road(road_type=RoadType.A, number=12),
            Road(road_type=RoadType.S, number=3),
            Road(road_type=RoadType.S, number=12),
            Road(road_type=RoadType.A, number=3),
        ]
        assert [str(road) for road in sorted(roads, key=road_order)] == ["A3", "S3", "A12", "S12"]


class TestVehicle:
    def test_plate_pattern_enforced(self) -> None:
        with pytest.raises(ValidationError):
            Vehicle(plate="x")

    def test_plates_are_case_sensitive(self) -> None:
        assert Vehicle(plate="abc123") != Vehicle(plate="ABC123")


def test_line_ref_requires_positive_number() -> None:
    with pytest.raises(ValidationError):
        LineRef(number=0, text="")
