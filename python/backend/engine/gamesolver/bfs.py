"""Breadth-first search."""

from __future__ import annotations

import logging
from collections import deque

from backend.engine.gamesolver.path import ParentLink, reconstruct_path
from backend.models.board import Move, State, key_of, neighbors
from backend.models.result import SearchResult

logger = logging.getLogger(__name__)

NAME = "bfs"


def bfs(start: State, goal: State, size: int) -> SearchResult:
    """Level-order search from *start*; the first goal dequeued is optimal.

    ``expanded`` counts the nodes dequeued before the goal.
    """
    start_key = key_of(start)
    goal_key = key_of(goal)
    if start_key == goal_key:
        return SearchResult.trivial(NAME, start_key)

    queue: deque[State] = deque([start_key])
    visited: set[State] = {start_key}
    parents: dict[State, ParentLink] = {start_key: ParentLink(None, start_key)}
    moves: dict[State, Move] = {}
    expanded = 0

    while queue:
        current = queue.popleft()
        if current == goal_key:
            path_states, path_moves = reconstruct_path(parents, moves, current)
            logger.debug("bfs: depth %d after %d expansions", len(path_moves), expanded)
            return SearchResult.success(NAME, expanded, path_states, path_moves)

        expanded += 1
        for nxt, move in neighbors(current, size):
            if nxt in visited:
                continue
            visited.add(nxt)
            parents[nxt] = ParentLink(current, nxt)
            moves[nxt] = move
            queue.append(nxt)

    logger.debug("bfs: frontier exhausted after %d expansions", expanded)
    return SearchResult.failure(NAME, expanded)
