"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib print and ANSI codes to report search runs.
"""

from __future__ import annotations

from backend.engine.gamesolver import Algorithm
from backend.engine.gamestate import SearchRun
from backend.models.board import State
from frontend.cli.input_handler import format_board


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _indent(text: str, pad: str = "  ") -> str:
    return "\n".join(pad + line for line in text.splitlines())


# -- screens ------------------------------------------------------------------


def _print_boards(start: State, goal: State, size: int) -> None:
    print(f"\n  {_C}Start{_R}")
    print(_indent(format_board(start, size), "    "))
    print(f"\n  {_C}Goal{_R}")
    print(_indent(format_board(goal, size), "    "))


def _print_run(run: SearchRun, size: int, show_path: bool) -> None:
    result = run.result
    assert result is not None
    print(f"\n  {_DIM}---{_R} {_C}{run.label}{_R} {_DIM}---{_R}")

    if not result.found:
        print(f"  {_RED}No solution found.{_R}")
        print(f"  Expanded nodes: {_Y}{result.expanded}{_R}  |  Time: {_Y}{run.elapsed_ms:.0f} ms{_R}")
        return

    moves = " ".join(result.path_moves) or "(none)"
    print(f"  {_G}Solution found.{_R} Depth: {_Y}{result.depth}{_R} moves")
    print(f"  Expanded nodes: {_Y}{result.expanded}{_R}  |  Time: {_Y}{run.elapsed_ms:.0f} ms{_R}")
    print(f"  Moves: {moves}")

    if show_path:
        for i, state in enumerate(result.path_states):
            print(f"\n  {_DIM}Step {i}:{_R}")
            print(_indent(format_board(state, size), "    "))


# -- public entry point -------------------------------------------------------


def run(
    start: State,
    goal: State,
    size: int,
    algorithms: list[Algorithm],
    max_depth: int,
    show_path: bool = False,
) -> list[SearchRun]:
    """Run each algorithm on *start* → *goal* and print the report."""
    _print_boards(start, goal, size)
    runs: list[SearchRun] = []
    for algorithm in algorithms:
        search_run = SearchRun.for_algorithm(algorithm, start, goal, size, max_depth)
        search_run.execute()
        _print_run(search_run, size, show_path)
        runs.append(search_run)
    print()
    return runs
