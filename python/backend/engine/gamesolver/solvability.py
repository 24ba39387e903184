"""Parity-based solvability oracle."""

from __future__ import annotations

import logging

from backend.models.board import State, blank_index, goal_state, index_to_rc

logger = logging.getLogger(__name__)


def count_inversions(state: State) -> int:
    """Count tile pairs that appear in descending order, ignoring the blank."""
    flat = [v for v in state if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def is_solvable(state: State, size: int, goal: State | None = None) -> bool:
    """Return True if *state* can reach the canonical goal.

    Odd sizes need an even inversion count.  Even sizes also depend on
    the blank's row counted 1-based from the bottom: an even row needs
    odd inversions, an odd row needs even inversions.

    The rule is only exact against the canonical goal.  For any other
    *goal* the answer is advisory.
    """
    if goal is not None and tuple(goal) != goal_state(size):
        logger.warning(
            "Solvability is only exact against the canonical goal; "
            "result for a custom goal is advisory."
        )

    inversions = count_inversions(state)
    if size % 2 == 1:
        return inversions % 2 == 0

    row, _ = index_to_rc(blank_index(state), size)
    row_from_bottom = size - row
    if row_from_bottom % 2 == 0:
        return inversions % 2 == 1
    return inversions % 2 == 0
