from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class KeepMode(str, Enum):
    HIGHEST = "h"
    LOWEST = "l"


class RollResult(BaseModel):
    """Outcome of one evaluated dice roll."""

    model_config = ConfigDict(frozen=True)

    die: int
    rolls: tuple[int, ...] = ()
    value: int = 0
