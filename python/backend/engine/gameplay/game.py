"""Replays blank moves against a position and checks the win condition."""

from __future__ import annotations

from backend.engine.gamestate import GameState
from backend.models.board import Board, Move, State, apply_move


class GamePlay:
    """Orchestrates a single replay session."""

    def __init__(self, board: Board, goal: State | None = None) -> None:
        self.size = board.size
        self.goal = tuple(goal) if goal is not None else Board.goal(board.size).tiles
        self.state = GameState(board)

    @classmethod
    def from_state(cls, state: State, size: int, goal: State | None = None) -> GamePlay:
        """Create a session from a raw state tuple."""
        return cls(Board(size=size, tiles=tuple(state)), goal)

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Move) -> bool:
        """Move the blank one cell in *direction*.

        E.g. ``Move.UP`` swaps the blank with the tile **above** it.
        Returns True if the move was valid.
        """
        tiles = apply_move(self.state.board.tiles, direction, self.size)
        if tiles is None:
            return False
        self.state.board = Board(size=self.size, tiles=tiles)
        self.state.increment_moves()
        return True

    # -- queries --------------------------------------------------------------

    @property
    def tiles(self) -> State:
        return self.state.board.tiles

    @property
    def is_won(self) -> bool:
        return self.state.board.tiles == self.goal
