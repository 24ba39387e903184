"""Generates reachable sliding puzzle positions."""

from __future__ import annotations

import logging
import random

from backend.models.board import State, neighbors

logger = logging.getLogger(__name__)

DEFAULT_SCRAMBLE_STEPS = 30


def scramble_from(
    goal: State,
    size: int,
    steps: int = DEFAULT_SCRAMBLE_STEPS,
    rng: random.Random | None = None,
) -> State:
    """Random walk of *steps* blank moves starting at *goal*.

    Every step picks uniformly among the available neighbours, undoing
    the previous move included, so the result is reachable from *goal*
    but may equal it.
    """
    rng = rng or random.Random()
    current = tuple(goal)
    for _ in range(steps):
        current = rng.choice(neighbors(current, size)).state
    logger.debug("scrambled %d×%d board with %d steps", size, size, steps)
    return current
