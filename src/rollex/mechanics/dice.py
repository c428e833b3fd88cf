"""Dice rolling engine: pure math, no I/O."""
from __future__ import annotations

import logging
import math
import random
from typing import Callable

from rollex.models.roll import KeepMode, RollResult

logger = logging.getLogger(__name__)

# Zero-argument callable returning a uniform float in [0, 1)
RandomSource = Callable[[], float]


def roll_die(sides: int, rng: RandomSource | None = None) -> int:
    """Roll a single die, returning a value in [1, sides]."""
    u = (rng or random.random)()
    return 1 + math.floor(u * sides)


def roll_dice(
    dice: int,
    sides: int,
    keep: KeepMode | None = None,
    rng: RandomSource | None = None,
) -> RollResult:
    """Roll ``dice`` dice with ``sides`` sides each.

    The value is the sum of all dice, or only the highest/lowest die when
    ``keep`` is set. Every draw is recorded either way.
    """
    rng = rng or random.random
    rolls = [roll_die(sides, rng) for _ in range(dice)]

    if keep is KeepMode.HIGHEST:
        value = max(rolls)
    elif keep is KeepMode.LOWEST:
        value = min(rolls)
    else:
        value = sum(rolls)

    logger.debug("Rolled %dd%d%s: %s -> %d", dice, sides, keep.value if keep else "", rolls, value)
    return RollResult(die=sides, rolls=rolls, value=value)
