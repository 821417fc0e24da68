"""Custom exception hierarchy for pytoll."""

from __future__ import annotations

from pytoll.models.line import LineRef


class TollError(Exception):
    """Base exception for all pytoll errors."""


class TollConfigError(TollError):
    """Invalid or missing configuration."""


class TollInputError(TollError):
    """The input stream could not be read or decoded.

    This is the only condition that ends a run early.
    """


class TollLineError(TollError):
    """A single input line was rejected."""

    def __init__(self, message: str, *, line: LineRef) -> None:
        self.line = line
        super().__init__(message)


class MalformedLineError(TollLineError):
    """Line matches neither the command nor the crossing-record grammar."""


class UnresolvedArgumentError(TollLineError):
    """Command argument is neither a road nor a licence plate."""


class ConflictingCrossingError(TollLineError):
    """An open crossing was superseded by a crossing on another road.

    ``line`` is the *earlier* crossing, the one left without a matching exit.
    """
