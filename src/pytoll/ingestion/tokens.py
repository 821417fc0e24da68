"""Token parsers.

Each parser accepts one whitespace-free token and returns the domain value,
or ``None`` when the token does not match.  Patterns must cover the whole
token.
"""

from __future__ import annotations

import re

from pytoll.models.distance import MAX_MARKER_UNITS, TENTHS
from pytoll.models.road import Road, RoadType
from pytoll.models.vehicle import Vehicle

_ROAD_RE = re.compile(r"(A|S)([1-9][0-9]{0,2})")
_PLATE_RE = re.compile(r"[A-Za-z0-9]{3,11}")
_MARKER_RE = re.compile(r"(0|[1-9][0-9]*),([0-9])")


def parse_road(token: str) -> Road | None:
    """``"A12"`` -> ``Road(road_type=A, number=12)``."""
    match = _ROAD_RE.fullmatch(token)
    if match is None:
        return None
    return Road(road_type=RoadType(match.group(1)), number=int(match.group(2)))


def parse_vehicle(token: str) -> Vehicle | None:
    if _PLATE_RE.fullmatch(token) is None:
        return None
    return Vehicle(plate=token)


def parse_distance(token: str) -> int | None:
    """``"123,4"`` -> ``1234`` tenths.

    Markers whose whole-unit part does not fit a signed 32-bit integer are
    rejected.
    """
    match = _MARKER_RE.fullmatch(token)
    if match is None:
        return None
    units = int(match.group(1))
    if units > MAX_MARKER_UNITS:
        return None
    return units * TENTHS + int(match.group(2))
