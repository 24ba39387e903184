"""Scrambler: seeded random walks from the goal."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import scramble_from
from backend.engine.gamesolver import bfs, is_solvable
from backend.models.board import goal_state

GOAL_3 = goal_state(3)


def test_zero_steps_returns_goal() -> None:
    assert scramble_from(GOAL_3, 3, 0, random.Random(1)) == GOAL_3


def test_same_seed_same_scramble() -> None:
    a = scramble_from(GOAL_3, 3, 40, random.Random(123))
    b = scramble_from(GOAL_3, 3, 40, random.Random(123))
    assert a == b


def test_scramble_stays_within_step_budget() -> None:
    for seed in range(10):
        start = scramble_from(GOAL_3, 3, 8, random.Random(seed))
        assert sorted(start) == list(range(9))
        assert is_solvable(start, 3)
        result = bfs(start, GOAL_3, 3)
        assert result.found
        assert result.depth <= 8


def test_scramble_4x4_is_solvable() -> None:
    goal = goal_state(4)
    for seed in range(5):
        assert is_solvable(scramble_from(goal, 4, 60, random.Random(seed)), 4)

