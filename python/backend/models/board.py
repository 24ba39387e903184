"""Board model for the sliding puzzle search engine.

A state is an immutable row-major tuple of ``N * N`` tile values where
``0`` is the blank.  The tuple doubles as the canonical key used by the
search strategies for visited sets and parent maps.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

State = tuple[int, ...]


class InvalidBoardError(ValueError):
    """Raised when tiles do not form a permutation of ``0 .. N*N-1``."""


class Move(StrEnum):
    """Direction the *blank* moves within the grid."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def inverse(self) -> Move:
        return _INVERSE[self]


_INVERSE = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}

# Fixed expansion order: every strategy breaks ties the same way.
_OFFSETS: tuple[tuple[Move, int, int], ...] = (
    (Move.UP, -1, 0),
    (Move.DOWN, 1, 0),
    (Move.LEFT, 0, -1),
    (Move.RIGHT, 0, 1),
)


class Successor(NamedTuple):
    state: State
    move: Move


# -- index helpers ------------------------------------------------------------


def index_to_rc(index: int, size: int) -> tuple[int, int]:
    return divmod(index, size)


def rc_to_index(row: int, col: int, size: int) -> int:
    return row * size + col


def blank_index(state: State) -> int:
    return state.index(0)


def key_of(state: State) -> State:
    """Return the canonical key of *state* (a plain tuple)."""
    return tuple(state)


def goal_state(size: int) -> State:
    """Return the canonical goal ``(1, 2, ..., N*N-1, 0)``."""
    return tuple(range(1, size * size)) + (0,)


# -- transitions --------------------------------------------------------------


def _swap(state: State, i: int, j: int) -> State:
    tiles = list(state)
    tiles[i], tiles[j] = tiles[j], tiles[i]
    return tuple(tiles)


def neighbors(state: State, size: int) -> list[Successor]:
    """Return every state one blank move away, in Up/Down/Left/Right order."""
    zero = blank_index(state)
    r, c = index_to_rc(zero, size)
    out: list[Successor] = []
    for move, dr, dc in _OFFSETS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < size and 0 <= nc < size:
            out.append(Successor(_swap(state, zero, rc_to_index(nr, nc, size)), move))
    return out


def apply_move(state: State, move: Move, size: int) -> State | None:
    """Move the blank in *move*'s direction.

    Returns the new state, or ``None`` if the blank would leave the grid.
    """
    zero = blank_index(state)
    r, c = index_to_rc(zero, size)
    for candidate, dr, dc in _OFFSETS:
        if candidate == move:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < size and 0 <= nc < size):
                return None
            return _swap(state, zero, rc_to_index(nr, nc, size))
    raise ValueError(f"Unknown move {move!r}")


# -- frontend-facing wrapper --------------------------------------------------


@dataclass(frozen=True)
class Board:
    """A validated puzzle position.

    Tiles are stored flat in row-major order. 0 represents the blank space.
    """

    size: int
    tiles: State

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, size: int, flat: list[int] | State) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        n = size * size
        if len(flat) != n:
            raise InvalidBoardError(
                f"Expected {n} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        seen: set[int] = set()
        for v in flat:
            if not 0 <= v < n:
                raise InvalidBoardError(f"Tile values must lie between 0 and {n - 1}.")
            if v in seen:
                raise InvalidBoardError(f"Tile {v} appears more than once.")
            seen.add(v)
        return cls(size=size, tiles=tuple(flat))

    @classmethod
    def goal(cls, size: int) -> Board:
        return cls(size=size, tiles=goal_state(size))

    # -- queries --------------------------------------------------------------

    @property
    def blank_pos(self) -> tuple[int, int]:
        return index_to_rc(blank_index(self.tiles), self.size)

    def rows(self) -> list[State]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[rc_to_index(row, col, self.size)]

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        expected_row = (val - 1) // self.size
        expected_col = (val - 1) % self.size
        return row == expected_row and col == expected_col
