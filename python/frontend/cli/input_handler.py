"""Textual board input and plain-text board formatting for CLI frontends.

Accepts boards typed as ``"1 2 3 4 5 6 7 0 8"`` (spaces, commas or
semicolons as separators) and validates them into a ``Board``.
"""

from __future__ import annotations

import re

from backend.engine.gamesolver import Algorithm
from backend.models.board import Board, InvalidBoardError, State

_SEPARATORS = re.compile(r"[\s,;]+")


# -- parsing ------------------------------------------------------------------


def parse_state(text: str, size: int) -> State:
    """Parse *text* into a validated state for a *size* × *size* board.

    Raises ``InvalidBoardError`` with a human-readable message.
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    if len(tokens) != size * size:
        raise InvalidBoardError(f"Enter exactly {size * size} numbers.")
    try:
        values = [int(t) for t in tokens]
    except ValueError:
        raise InvalidBoardError("Found a non-numeric value.") from None
    return Board.from_flat(size, values).tiles


# Menu numbers used by the interactive prompt: 1) BFS  2) IDDFS  3) Bidirectional
_ALGO_NUMBERS: dict[str, Algorithm] = {
    "1": Algorithm.bfs,
    "2": Algorithm.iddfs,
    "3": Algorithm.bidirectional,
}


def parse_algorithms(text: str) -> list[Algorithm]:
    """Map ``"1,3"`` or ``"bfs iddfs"`` to algorithms, keeping menu order."""
    chosen: set[Algorithm] = set()
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        algo = _ALGO_NUMBERS.get(token)
        if algo is None:
            try:
                algo = Algorithm(token.lower())
            except ValueError:
                raise ValueError(f"Unknown algorithm {token!r}.") from None
        chosen.add(algo)
    return [a for a in Algorithm if a in chosen]


# -- formatting ---------------------------------------------------------------


def format_board(state: State, size: int) -> str:
    """Return the board as right-aligned rows with the blank left empty."""
    width = len(str(size * size - 1))
    lines: list[str] = []
    for r in range(size):
        row = state[r * size : (r + 1) * size]
        lines.append(" ".join(f"{'' if v == 0 else v:>{width}}" for v in row))
    return "\n".join(lines)
