"""Deterministic report ordering.

Reports never depend on dictionary iteration order; every listing is sorted
with one of these keys.
"""

from __future__ import annotations

from pytoll.models.road import Road, RoadType
from pytoll.models.vehicle import Vehicle


def road_order(road: Road) -> tuple[int, str]:
    """Number first, then type letter: ``S3 < A12`` and ``A7 < S7``."""
    return (road.number, road.road_type.value)


def road_type_order(road_type: RoadType) -> str:
    return road_type.value


def vehicle_order(vehicle: Vehicle) -> str:
    return vehicle.plate
