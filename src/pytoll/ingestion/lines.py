"""Line classification.

Grammars are tried in a fixed order: blank, command, crossing record.
Anything else is rejected with a :class:`~pytoll.exceptions.TollLineError`.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from pytoll.exceptions import MalformedLineError, UnresolvedArgumentError
from pytoll.ingestion.tokens import parse_distance, parse_road, parse_vehicle
from pytoll.models.distance import Distance
from pytoll.models.line import LineRef
from pytoll.models.road import Road
from pytoll.models.vehicle import Vehicle

_COMMAND_RE = re.compile(r"\s*\?\s*(\S*)\s*", re.ASCII)
_ASCII_WHITESPACE = " \t\n\r\f\v"
_FIELD_SEPARATOR_RE = re.compile(r"[ \t\n\r\f\v]+")


class Command(BaseModel):
    """A ``?`` query.  With neither field set it asks for the whole ledger.

    An argument such as ``A12`` is both a valid road and a valid plate, in
    which case both fields are set.
    """

    model_config = ConfigDict(frozen=True)

    road: Road | None = None
    vehicle: Vehicle | None = None

    @property
    def is_dump_all(self) -> bool:
        return self.road is None and self.vehicle is None


class Crossing(BaseModel):
    """A vehicle seen on a road at a distance marker."""

    model_config = ConfigDict(frozen=True)

    vehicle: Vehicle
    road: Road
    distance: Distance


def parse_command(line: LineRef) -> Command | None:
    """Parse a command line.

    Returns ``None`` when the line is not command-shaped.

    Raises
    ------
    UnresolvedArgumentError
        The line is command-shaped but its argument is neither a road nor
        a plate.
    """
    match = _COMMAND_RE.fullmatch(line.text)
    if match is None:
        return None
    argument = match.group(1)
    if not argument:
        return Command()
    road = parse_road(argument)
    vehicle = parse_vehicle(argument)
    if road is None and vehicle is None:
        raise UnresolvedArgumentError(f"unresolved command argument {argument!r}", line=line)
    return Command(road=road, vehicle=vehicle)


def parse_crossing(line: LineRef) -> Crossing | None:
    """Parse ``<plate> <road> <marker>``; ``None`` if the line does not fit."""
    # Only ASCII whitespace separates fields.
    tokens = _FIELD_SEPARATOR_RE.split(line.text.strip(_ASCII_WHITESPACE))
    if len(tokens) != 3:
        return None
    vehicle = parse_vehicle(tokens[0])
    road = parse_road(tokens[1])
    distance = parse_distance(tokens[2])
    if vehicle is None or road is None or distance is None:
        return None
    return Crossing(vehicle=vehicle, road=road, distance=distance)


def classify_line(line: LineRef) -> Command | Crossing | None:
    """Classify one input line.

    Returns ``None`` for the empty line, which is ignored.  A line holding
    only whitespace is not blank.

    Raises
    ------
    MalformedLineError
        The line fits no grammar.
    UnresolvedArgumentError
        See :func:`parse_command`.
    """
    if line.text == "":
        return None
    command = parse_command(line)
    if command is not None:
        return command
    crossing = parse_crossing(line)
    if crossing is not None:
        return crossing
    raise MalformedLineError("line matches no known grammar", line=line)
