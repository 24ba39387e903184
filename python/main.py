#!/usr/bin/env python3
"""Sliding Puzzle Search.

Usage::

    python main.py                          # interactive prompts (no search options)
    python main.py -n 3 --steps 20 -a bfs -a iddfs
    python main.py -n 3 --start "1 2 3 4 5 6 7 0 8" -a bidirectional --path
    python main.py -n 3 -f vanilla --seed 7 # plain-text report
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from click.core import ParameterSource
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import DEFAULT_SCRAMBLE_STEPS, scramble_from  # noqa: E402
from backend.engine.gamesolver import Algorithm, is_solvable  # noqa: E402
from backend.models.board import InvalidBoardError, State, goal_state  # noqa: E402
from frontend.cli.input_handler import parse_algorithms, parse_state  # noqa: E402

logger = logging.getLogger("sliding_search")

# IDDFS ceiling used by the CLI when --max-depth is not given.
CLI_MAX_DEPTH = 100

# Any of these on the command line skips the interactive prompts.
_SEARCH_OPTIONS = ("size", "start", "goal", "steps", "seed", "algorithms", "max_depth", "path")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _warn_if_unsolvable(start: State, goal: State, size: int) -> None:
    if not is_solvable(start, size, goal):
        logger.warning(
            "The start state does not look solvable against the standard goal. "
            "Ignore this if you are using a custom goal."
        )


def _ask(prompt: str, default: str) -> str:
    return input(f"  {prompt} [{default}]: ").strip() or default


def _ask_size() -> int:
    raw = _ask("Board size N (3 for 3x3, 4 for 4x4)", "3")
    try:
        size = int(raw)
        if size < 3:
            raise ValueError
    except ValueError:
        print("  Invalid size — using 3.")
        size = 3
    return size


def _ask_state(label: str, size: int) -> State:
    while True:
        raw = input(f"  {label} ({size * size} numbers, 0 is the blank): ")
        try:
            return parse_state(raw, size)
        except InvalidBoardError as exc:
            print(f"  Error: {exc}")


def _interactive(frontend: Frontend) -> None:
    print()
    print("  ============================================")
    print("    S L I D I N G   P U Z Z L E   S E A R C H ")
    print("  ============================================")
    print()

    size = _ask_size()
    goal = goal_state(size)

    if _ask("Manual or random states? (m/r)", "r").lower() == "m":
        print("  Example 3x3: 1 2 3 4 5 6 7 0 8")
        start = _ask_state("Start", size)
        if _ask("Use the standard goal [1..,0]? (y/n)", "y").lower() != "y":
            goal = _ask_state("Goal", size)
        _warn_if_unsolvable(start, goal, size)
    else:
        raw = _ask("Random moves from the goal", str(DEFAULT_SCRAMBLE_STEPS))
        steps = int(raw) if raw.isdigit() else DEFAULT_SCRAMBLE_STEPS
        start = scramble_from(goal, size, steps)

    while True:
        try:
            algorithms = parse_algorithms(
                _ask("Algorithms: 1) BFS  2) IDDFS  3) Bidirectional  (e.g. 1,3)", "1")
            )
            break
        except ValueError as exc:
            print(f"  Error: {exc}")
    show_path = _ask("Print every board along the path? (y/n)", "n").lower() == "y"

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(start, goal, size, algorithms, CLI_MAX_DEPTH, show_path)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    ctx: typer.Context,
    size: Optional[int] = typer.Option(
        None, "-n", "--size",
        min=3,
        help="Board size N (N×N). Defaults to 3 once any search option is given.",
    ),
    start: Optional[str] = typer.Option(
        None, "--start",
        help='Start state, e.g. "1 2 3 4 5 6 7 0 8". Omit to scramble.',
    ),
    goal: Optional[str] = typer.Option(
        None, "--goal",
        help="Custom goal state. Defaults to 1..N*N-1 followed by the blank.",
    ),
    steps: int = typer.Option(
        DEFAULT_SCRAMBLE_STEPS, "--steps",
        min=0,
        help="Random moves applied to the goal when scrambling.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the scrambler.",
    ),
    algorithms: list[Algorithm] = typer.Option(
        [Algorithm.bfs], "-a", "--algo",
        help="Search strategy to run. Repeat to run several.",
    ),
    max_depth: int = typer.Option(
        CLI_MAX_DEPTH, "--max-depth",
        min=0,
        help="Depth ceiling for IDDFS.",
    ),
    path: bool = typer.Option(
        False, "--path",
        help="Print every board along the solution path.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Report renderer.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Enable debug logging.",
    ),
) -> None:
    """Solve an N×N sliding puzzle with uninformed search."""
    _configure_logging(verbose)

    given = [
        name for name in _SEARCH_OPTIONS
        if ctx.get_parameter_source(name) is not ParameterSource.DEFAULT
    ]
    if not given:
        _interactive(frontend)
        return

    n = size or 3
    try:
        goal_tiles = parse_state(goal, n) if goal is not None else goal_state(n)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint="--goal") from exc

    if start is not None:
        try:
            start_tiles = parse_state(start, n)
        except InvalidBoardError as exc:
            raise typer.BadParameter(str(exc), param_hint="--start") from exc
        _warn_if_unsolvable(start_tiles, goal_tiles, n)
    else:
        start_tiles = scramble_from(goal_tiles, n, steps, random.Random(seed))

    # keep menu order and drop repeats
    chosen = [a for a in Algorithm if a in set(algorithms)]
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(start_tiles, goal_tiles, n, chosen, max_depth, path)


if __name__ == "__main__":
    app()
