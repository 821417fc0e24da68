"""Vehicle model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

PLATE_PATTERN = r"^[A-Za-z0-9]{3,11}$"


class Vehicle(BaseModel):
    """A vehicle identified by its licence plate.

    Plates are compared exactly; ``abc123`` and ``ABC123`` are different
    vehicles.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    plate: str = Field(pattern=PLATE_PATTERN)

    def __str__(self) -> str:
        return self.plate
