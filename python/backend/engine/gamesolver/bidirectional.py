"""Bidirectional breadth-first search."""

from __future__ import annotations

import logging
from collections import deque

from backend.engine.gamesolver.path import ParentLink, reconstruct_path
from backend.models.board import Move, State, key_of, neighbors
from backend.models.result import SearchResult

logger = logging.getLogger(__name__)

NAME = "bidirectional"


class _Frontier:
    """One side of the search: queue, visited set, parent and move maps."""

    def __init__(self, root: State) -> None:
        self.queue: deque[State] = deque([root])
        self.visited: set[State] = {root}
        self.parents: dict[State, ParentLink] = {root: ParentLink(None, root)}
        self.moves: dict[State, Move] = {}

    def expand_layer(self, size: int, other: _Frontier) -> tuple[State | None, int]:
        """Expand every node currently queued.

        Stops at the first newly discovered state that *other* has
        visited.  Returns ``(meeting_key, expanded)``.
        """
        expanded = 0
        for _ in range(len(self.queue)):
            current = self.queue.popleft()
            expanded += 1
            for nxt, move in neighbors(current, size):
                if nxt in self.visited:
                    continue
                self.visited.add(nxt)
                self.parents[nxt] = ParentLink(current, nxt)
                self.moves[nxt] = move
                if nxt in other.visited:
                    return nxt, expanded
                self.queue.append(nxt)
        return None, expanded


def _join(meet: State, forward: _Frontier, backward: _Frontier) -> tuple[list[State], list[Move]]:
    head_states, head_moves = reconstruct_path(forward.parents, forward.moves, meet)
    tail_states, tail_moves = reconstruct_path(backward.parents, backward.moves, meet)
    # tail runs goal -> meet with backward moves; flip it to meet -> goal
    tail_states.reverse()
    tail_moves.reverse()
    return head_states + tail_states[1:], head_moves + [m.inverse for m in tail_moves]


def bidirectional(start: State, goal: State, size: int) -> SearchResult:
    """Alternate full-layer expansions from *start* and from *goal*.

    ``expanded`` counts nodes taken off both frontiers.
    """
    start_key = key_of(start)
    goal_key = key_of(goal)
    if start_key == goal_key:
        return SearchResult.trivial(NAME, start_key)

    forward = _Frontier(start_key)
    backward = _Frontier(goal_key)
    expanded = 0

    while forward.queue and backward.queue:
        for side, other in ((forward, backward), (backward, forward)):
            meet, count = side.expand_layer(size, other)
            expanded += count
            if meet is not None:
                path_states, path_moves = _join(meet, forward, backward)
                logger.debug(
                    "bidirectional: depth %d after %d expansions", len(path_moves), expanded
                )
                return SearchResult.success(NAME, expanded, path_states, path_moves)

    logger.debug("bidirectional: a frontier emptied after %d expansions", expanded)
    return SearchResult.failure(NAME, expanded)
