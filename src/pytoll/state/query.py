"""Read-only queries over a :class:`~pytoll.state.ledger.Ledger`."""

from __future__ import annotations

from pytoll.models.road import Road, RoadType
from pytoll.models.totals import LedgerReport, RoadTotal, RoadTypeTotal, VehicleTotals
from pytoll.models.vehicle import Vehicle
from pytoll.state.ledger import Ledger
from pytoll.state.policy import road_order, road_type_order, vehicle_order


def _vehicle_totals(vehicle: Vehicle, by_type: dict[RoadType, int]) -> VehicleTotals:
    totals = tuple(
        RoadTypeTotal(road_type=road_type, distance=by_type[road_type])
        for road_type in sorted(by_type, key=road_type_order)
    )
    return VehicleTotals(vehicle=vehicle, totals=totals)


class QueryEngine:
    """Answers report queries.  Never mutates the ledger."""

    def __init__(self, ledger: Ledger) -> None:
        self._ledger = ledger

    def query_all(self) -> LedgerReport:
        """Every vehicle by plate, then every road by (number, type)."""
        vehicle_totals = self._ledger.all_vehicle_totals()
        vehicles = tuple(
            _vehicle_totals(vehicle, vehicle_totals[vehicle]) for vehicle in sorted(vehicle_totals, key=vehicle_order)
        )

        road_totals = self._ledger.all_road_totals()
        roads = tuple(RoadTotal(road=road, distance=road_totals[road]) for road in sorted(road_totals, key=road_order))

        return LedgerReport(vehicles=vehicles, roads=roads)

    def query_vehicle(self, vehicle: Vehicle) -> VehicleTotals | None:
        by_type = self._ledger.vehicle_totals(vehicle)
        if by_type is None:
            return None
        return _vehicle_totals(vehicle, by_type)

    def query_road(self, road: Road) -> RoadTotal | None:
        distance = self._ledger.road_total(road)
        if distance is None:
            return None
        return RoadTotal(road=road, distance=distance)
