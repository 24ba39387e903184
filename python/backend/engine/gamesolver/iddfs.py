"""Iterative-deepening depth-first search."""

from __future__ import annotations

import logging
from typing import Iterator

from backend.engine.gamesolver.path import ParentLink, reconstruct_path
from backend.models.board import Move, State, Successor, key_of, neighbors
from backend.models.result import SearchResult

logger = logging.getLogger(__name__)

NAME = "iddfs"
DEFAULT_MAX_DEPTH = 80


def _depth_limited(
    start: State, goal: State, size: int, limit: int
) -> tuple[dict[State, ParentLink], dict[State, Move], State | None, int]:
    """Explicit-stack DFS bounded by *limit* moves.

    Only states on the current path are remembered; they are released
    on backtrack.  Returns ``(parents, moves, end_key, expanded)`` where
    *end_key* is the goal key or ``None``.  *start* must differ from *goal*.
    """
    parents: dict[State, ParentLink] = {start: ParentLink(None, start)}
    moves: dict[State, Move] = {}
    if limit == 0:
        return parents, moves, None, 0

    on_path: set[State] = {start}
    stack: list[tuple[State, Iterator[Successor]]] = [(start, iter(neighbors(start, size)))]
    expanded = 1

    while stack:
        key, successors = stack[-1]
        step = next(successors, None)
        if step is None:
            stack.pop()
            on_path.discard(key)
            continue

        child = step.state
        if child in on_path:
            continue
        parents[child] = ParentLink(key, child)
        moves[child] = step.move
        if child == goal:
            return parents, moves, child, expanded

        # the child sits at depth len(stack); it may expand only below the limit
        if len(stack) < limit:
            on_path.add(child)
            expanded += 1
            stack.append((child, iter(neighbors(child, size))))

    return parents, moves, None, expanded


def iddfs(
    start: State, goal: State, size: int, max_depth: int = DEFAULT_MAX_DEPTH
) -> SearchResult:
    """Depth-limited searches with limits ``0 .. max_depth``.

    The first limit that reaches *goal* gives a shortest path.
    ``expanded`` is the total over every iteration.  Running out of
    limits reports ``found=False`` without proving the goal unreachable.
    """
    start_key = key_of(start)
    goal_key = key_of(goal)
    if start_key == goal_key:
        return SearchResult.trivial(NAME, start_key)

    total = 0
    for limit in range(max_depth + 1):
        parents, moves, end_key, expanded = _depth_limited(start_key, goal_key, size, limit)
        total += expanded
        if end_key is not None:
            path_states, path_moves = reconstruct_path(parents, moves, end_key)
            logger.debug("iddfs: depth %d at limit %d, %d expansions", len(path_moves), limit, total)
            return SearchResult.success(NAME, total, path_states, path_moves)

    logger.debug("iddfs: no solution within %d moves (%d expansions)", max_depth, total)
    return SearchResult.failure(NAME, total)
