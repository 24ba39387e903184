"""Path reconstruction from parent links."""

from __future__ import annotations

from typing import NamedTuple

from backend.models.board import Move, State


class ParentLink(NamedTuple):
    parent_key: State | None
    state: State


def reconstruct_path(
    parents: dict[State, ParentLink],
    moves: dict[State, Move],
    end_key: State,
) -> tuple[list[State], list[Move]]:
    """Walk parent links from *end_key* back to the root.

    Returns ``(states, moves)`` ordered root → end, with one more state
    than moves.  *end_key* must be present in *parents*.
    """
    path_states: list[State] = []
    path_moves: list[Move] = []
    key: State | None = end_key
    while key is not None:
        link = parents[key]
        path_states.append(link.state)
        if link.parent_key is not None:
            path_moves.append(moves[key])
        key = link.parent_key
    path_states.reverse()
    path_moves.reverse()
    return path_states, path_moves
