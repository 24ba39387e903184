"""Tracks the state of a replay and the timing of a search run."""

from __future__ import annotations

import time
from typing import Callable

from backend.engine.gamesolver import DEFAULT_MAX_DEPTH, Algorithm, Solver
from backend.models.board import Board, State
from backend.models.result import SearchResult

_LABELS: dict[Algorithm, str] = {
    Algorithm.bfs: "BFS (breadth-first)",
    Algorithm.iddfs: "IDDFS (iterative deepening)",
    Algorithm.bidirectional: "Bidirectional BFS",
}


class GameState:
    """Holds the current board and move counter."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    def increment_moves(self) -> None:
        self.moves += 1


class SearchRun:
    """Runs one search call and records its wall-clock time."""

    def __init__(self, label: str, search: Callable[[], SearchResult]) -> None:
        self.label = label
        self._search = search
        self.result: SearchResult | None = None
        self._elapsed: float = 0.0

    @classmethod
    def for_algorithm(
        cls,
        algorithm: Algorithm,
        start: State,
        goal: State,
        size: int,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> SearchRun:
        return cls(
            _LABELS[algorithm],
            lambda: Solver.run(algorithm, start, goal, size, max_depth),
        )

    def execute(self) -> SearchResult:
        t0 = time.perf_counter()
        self.result = self._search()
        self._elapsed = time.perf_counter() - t0
        return self.result

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed * 1000.0
