"""Input line reference."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LineRef(BaseModel):
    """Position and original text of an input line.

    Parameters
    ----------
    number : int
        1-based line number in the input stream.
    text : str
        Line text without its trailing newline.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    number: int = Field(ge=1)
    text: str
