"""Data models for toll records and ledger results."""

from pytoll.models.distance import MAX_MARKER_UNITS, TENTHS, Distance, traveled
from pytoll.models.line import LineRef
from pytoll.models.road import MAX_ROAD_NUMBER, Road, RoadType
from pytoll.models.totals import LedgerReport, RoadTotal, RoadTypeTotal, VehicleTotals
from pytoll.models.vehicle import PLATE_PATTERN, Vehicle

__all__ = [
    "Distance",
    "LedgerReport",
    "LineRef",
    "MAX_MARKER_UNITS",
    "MAX_ROAD_NUMBER",
    "PLATE_PATTERN",
    "Road",
    "RoadTotal",
    "RoadType",
    "RoadTypeTotal",
    "TENTHS",
    "Vehicle",
    "VehicleTotals",
    "traveled",
]
