"""Distance type.

Distances are counted in tenths of a unit so that sums stay exact:
the marker ``123,4`` is stored as ``1234``.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

#: Tenths per whole unit.
TENTHS = 10

#: Largest whole-unit part accepted on a marker.
MAX_MARKER_UNITS = 2**31 - 1

Distance = Annotated[int, Field(ge=0)]
"""Non-negative distance in tenths of a unit."""


def traveled(start: int, end: int) -> int:
    """Length of the segment between two markers, in either direction."""
    return abs(end - start)
