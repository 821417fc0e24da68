"""pytoll - toll-accounting ledger for road crossing records."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pytoll")
except PackageNotFoundError:
    __version__ = "0+local"
from pytoll.config import TollConfig
from pytoll.dispatcher import LineDispatcher
from pytoll.exceptions import (
    ConflictingCrossingError,
    MalformedLineError,
    TollConfigError,
    TollError,
    TollInputError,
    TollLineError,
    UnresolvedArgumentError,
)
from pytoll.models import (
    LedgerReport,
    LineRef,
    Road,
    RoadTotal,
    RoadType,
    RoadTypeTotal,
    Vehicle,
    VehicleTotals,
)
from pytoll.state.ledger import Ledger, PendingEntry
from pytoll.state.query import QueryEngine

__all__ = [
    "__version__",
    "ConflictingCrossingError",
    "Ledger",
    "LedgerReport",
    "LineDispatcher",
    "LineRef",
    "MalformedLineError",
    "PendingEntry",
    "QueryEngine",
    "Road",
    "RoadTotal",
    "RoadType",
    "RoadTypeTotal",
    "TollConfig",
    "TollConfigError",
    "TollError",
    "TollInputError",
    "TollLineError",
    "UnresolvedArgumentError",
    "Vehicle",
    "VehicleTotals",
]
