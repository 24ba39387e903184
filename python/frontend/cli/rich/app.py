"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input parsing and backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamesolver import Algorithm
from backend.engine.gamestate import SearchRun
from backend.models.board import Board, State

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(title: str, state: State, size: int, style: str) -> Panel:
    return Panel(
        Align.center(_render_board(Board(size=size, tiles=state))),
        title=f"[bold {style}]{title}[/bold {style}]",
        border_style=style,
        padding=(0, 1),
    )


# -- screens ------------------------------------------------------------------


def _draw_boards(start: State, goal: State, size: int) -> None:
    console.print()
    console.print(
        Align.center(
            Columns(
                [
                    _board_panel("Start", start, size, "cyan"),
                    _board_panel("Goal", goal, size, "green"),
                ]
            )
        )
    )


def _draw_summary(runs: list[SearchRun]) -> None:
    table = Table(
        title="Search results",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("Algorithm", style="bold")
    table.add_column("Found", justify="center")
    table.add_column("Depth", justify="right", style="yellow")
    table.add_column("Expanded", justify="right", style="yellow")
    table.add_column("Time", justify="right", style="yellow")
    table.add_column("Moves", style="dim")

    for search_run in runs:
        result = search_run.result
        assert result is not None
        if result.found:
            found = "[green]yes[/green]"
            depth = str(result.depth)
            moves = " ".join(result.path_moves) or "(none)"
        else:
            found = "[red]no[/red]"
            depth = "-"
            moves = ""
        table.add_row(
            search_run.label,
            found,
            depth,
            str(result.expanded),
            f"{search_run.elapsed_ms:.0f} ms",
            moves,
        )

    console.print()
    console.print(Align.center(table))


def _draw_path(search_run: SearchRun, size: int) -> None:
    result = search_run.result
    assert result is not None
    if not result.found:
        return

    steps: list[Panel] = []
    for i, state in enumerate(result.path_states):
        title = f"Step {i}" if i == 0 else f"Step {i} ({result.path_moves[i - 1]})"
        steps.append(_board_panel(title, state, size, "bright_blue"))

    console.print()
    console.print(
        Panel(
            Group(Columns(steps)),
            title=f"[bold cyan]{search_run.label}  path[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
    )


# -- public entry point -------------------------------------------------------


def run(
    start: State,
    goal: State,
    size: int,
    algorithms: list[Algorithm],
    max_depth: int,
    show_path: bool = False,
) -> list[SearchRun]:
    """Run each algorithm on *start* → *goal* and render the report."""
    _draw_boards(start, goal, size)
    runs: list[SearchRun] = []
    for algorithm in algorithms:
        search_run = SearchRun.for_algorithm(algorithm, start, goal, size, max_depth)
        with console.status(Text(f"Running {search_run.label}…", style="cyan")):
            search_run.execute()
        runs.append(search_run)

    _draw_summary(runs)
    if show_path:
        for search_run in runs:
            _draw_path(search_run, size)
    console.print()
    return runs
