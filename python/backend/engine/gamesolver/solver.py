"""Sliding puzzle solver facade over the search strategies."""

from __future__ import annotations

from enum import StrEnum

from backend.engine.gamesolver.bfs import bfs
from backend.engine.gamesolver.bidirectional import bidirectional
from backend.engine.gamesolver.iddfs import DEFAULT_MAX_DEPTH, iddfs
from backend.models.board import State
from backend.models.result import SearchResult


class Algorithm(StrEnum):
    bfs = "bfs"
    iddfs = "iddfs"
    bidirectional = "bidirectional"


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def run(
        algorithm: Algorithm,
        start: State,
        goal: State,
        size: int,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> SearchResult:
        """Run one strategy and return its fresh result."""
        if algorithm is Algorithm.bfs:
            return bfs(start, goal, size)
        if algorithm is Algorithm.iddfs:
            return iddfs(start, goal, size, max_depth)
        if algorithm is Algorithm.bidirectional:
            return bidirectional(start, goal, size)
        raise ValueError(f"Unknown algorithm {algorithm!r}")
