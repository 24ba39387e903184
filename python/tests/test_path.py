"""Path reconstruction from parent links."""

from __future__ import annotations

from backend.engine.gamesolver import ParentLink, reconstruct_path
from backend.models.board import Move

A = (1, 2, 3, 4, 0, 5, 6, 7, 8)
B = (1, 2, 3, 4, 5, 0, 6, 7, 8)
C = (1, 2, 3, 4, 5, 8, 6, 7, 0)


def test_root_only() -> None:
    states, moves = reconstruct_path({A: ParentLink(None, A)}, {}, A)
    assert states == [A]
    assert moves == []


def test_walks_back_to_root_and_reverses() -> None:
    parents = {
        A: ParentLink(None, A),
        B: ParentLink(A, B),
        C: ParentLink(B, C),
    }
    moves = {B: Move.RIGHT, C: Move.DOWN}

    states, path_moves = reconstruct_path(parents, moves, C)

    assert states == [A, B, C]
    assert path_moves == [Move.RIGHT, Move.DOWN]
    assert len(states) == len(path_moves) + 1


def test_partial_path_to_inner_node() -> None:
    parents = {A: ParentLink(None, A), B: ParentLink(A, B), C: ParentLink(B, C)}
    states, path_moves = reconstruct_path(parents, {B: Move.RIGHT, C: Move.DOWN}, B)
    assert states == [A, B]
    assert path_moves == [Move.RIGHT]
