"""Text rendering of query results and diagnostics."""

from __future__ import annotations

from pytoll.models.distance import TENTHS
from pytoll.models.line import LineRef
from pytoll.models.totals import LedgerReport, RoadTotal, VehicleTotals


def format_distance(distance: int) -> str:
    """``1234`` -> ``"123,4"``."""
    units, tenths = divmod(distance, TENTHS)
    return f"{units},{tenths}"


def format_vehicle_totals(entry: VehicleTotals) -> str:
    """``ABC123 A 5,0 S 1,2``."""
    parts = [entry.vehicle.plate]
    for total in entry.totals:
        parts.append(total.road_type.value)
        parts.append(format_distance(total.distance))
    return " ".join(parts)


def format_road_total(entry: RoadTotal) -> str:
    """``A1 5,0``."""
    return f"{entry.road} {format_distance(entry.distance)}"


def format_report(report: LedgerReport) -> list[str]:
    lines = [format_vehicle_totals(entry) for entry in report.vehicles]
    lines.extend(format_road_total(entry) for entry in report.roads)
    return lines


def format_error(line: LineRef) -> str:
    return f"Error in line {line.number}: {line.text}"
