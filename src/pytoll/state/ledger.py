"""In-memory toll ledger.

This is the only component allowed to mutate pending crossings and totals.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from pytoll.models.distance import Distance, traveled
from pytoll.models.line import LineRef
from pytoll.models.road import Road, RoadType
from pytoll.models.vehicle import Vehicle

_logger = logging.getLogger(__name__)


class PendingEntry(BaseModel):
    """An entry crossing still waiting for the exit on the same road."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    road: Road
    distance: Distance
    origin: LineRef


class Ledger:
    """Pending crossings plus per-vehicle and per-road totals for one run.

    Totals only ever grow, and only when a vehicle's crossing is matched by
    a second crossing on the same road.
    """

    def __init__(self) -> None:
        self._pending: dict[Vehicle, PendingEntry] = {}
        self._vehicle_totals: dict[Vehicle, dict[RoadType, int]] = {}
        self._road_totals: dict[Road, int] = {}

    def record_crossing(
        self,
        vehicle: Vehicle,
        road: Road,
        distance: int,
        line: LineRef,
    ) -> LineRef | None:
        """Apply one crossing record.

        Returns
        -------
        LineRef or None
            The origin line of an open crossing on a *different* road that
            this record superseded, or ``None`` when nothing conflicted.
        """
        pending = self._pending.get(vehicle)

        if pending is not None and pending.road == road:
            segment = traveled(pending.distance, distance)
            self._road_totals[road] = self._road_totals.get(road, 0) + segment
            by_type = self._vehicle_totals.setdefault(vehicle, {})
            by_type[road.road_type] = by_type.get(road.road_type, 0) + segment
            del self._pending[vehicle]
            _logger.debug("Closed segment for %s on %s: %d tenths", vehicle, road, segment)
            return None

        self._pending[vehicle] = PendingEntry(road=road, distance=distance, origin=line)

        if pending is None:
            _logger.debug("Opened crossing for %s on %s at line %d", vehicle, road, line.number)
            return None

        _logger.debug(
            "Crossing for %s on %s at line %d supersedes open crossing on %s from line %d",
            vehicle,
            road,
            line.number,
            pending.road,
            pending.origin.number,
        )
        return pending.origin

    def pending_entry(self, vehicle: Vehicle) -> PendingEntry | None:
        return self._pending.get(vehicle)

    def pending_entries(self) -> list[tuple[Vehicle, PendingEntry]]:
        """Open crossings ordered by the line that opened them."""
        return sorted(self._pending.items(), key=lambda item: item[1].origin.number)

    def vehicle_totals(self, vehicle: Vehicle) -> dict[RoadType, int] | None:
        """Copy of the vehicle's per-road-type totals, or ``None``."""
        totals = self._vehicle_totals.get(vehicle)
        return dict(totals) if totals is not None else None

    def road_total(self, road: Road) -> int | None:
        return self._road_totals.get(road)

    def all_vehicle_totals(self) -> dict[Vehicle, dict[RoadType, int]]:
        """Copy of every vehicle's per-road-type totals, in no particular order."""
        return {vehicle: dict(by_type) for vehicle, by_type in self._vehicle_totals.items()}

    def all_road_totals(self) -> dict[Road, int]:
        """Copy of every road total, in no particular order."""
        return dict(self._road_totals)
