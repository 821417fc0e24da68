"""Query result models.

These are read-only snapshots built by :class:`pytoll.state.query.QueryEngine`.
Tuple fields are already in report order.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pytoll.models.distance import Distance
from pytoll.models.road import Road, RoadType
from pytoll.models.vehicle import Vehicle


class RoadTypeTotal(BaseModel):
    """Distance a vehicle has traveled on one road type."""

    model_config = ConfigDict(frozen=True)

    road_type: RoadType
    distance: Distance


class VehicleTotals(BaseModel):
    """Per-road-type totals of a single vehicle, sorted by type letter."""

    model_config = ConfigDict(frozen=True)

    vehicle: Vehicle
    totals: tuple[RoadTypeTotal, ...] = Field(default_factory=tuple)

    def distance_for(self, road_type: RoadType) -> int | None:
        for entry in self.totals:
            if entry.road_type == road_type:
                return entry.distance
        return None


class RoadTotal(BaseModel):
    """Distance traveled on one road by all vehicles."""

    model_config = ConfigDict(frozen=True)

    road: Road
    distance: Distance


class LedgerReport(BaseModel):
    """Full ledger dump: vehicles by plate, then roads by (number, type)."""

    model_config = ConfigDict(frozen=True)

    vehicles: tuple[VehicleTotals, ...] = Field(default_factory=tuple)
    roads: tuple[RoadTotal, ...] = Field(default_factory=tuple)
