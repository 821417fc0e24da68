"""Road model."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

#: Highest road number that can appear on a sign.
MAX_ROAD_NUMBER = 999


class RoadType(StrEnum):
    """Road category, billed separately per vehicle."""

    A = "A"
    S = "S"


class Road(BaseModel):
    """A numbered road, e.g. ``A12`` or ``S3``.

    Equality and hashing are structural so a road can key the totals
    tables.  Report order is *not* field order; see
    :func:`pytoll.state.policy.road_order`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    road_type: RoadType
    number: int = Field(ge=1, le=MAX_ROAD_NUMBER)

    def __str__(self) -> str:
        return f"{self.road_type.value}{self.number}"
