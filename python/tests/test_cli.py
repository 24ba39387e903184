"""CLI layer: board parsing and the Typer entry point."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from backend.engine.gamesolver import Algorithm
from backend.models.board import InvalidBoardError
from frontend.cli.input_handler import format_board, parse_algorithms, parse_state
from main import app

runner = CliRunner()


# -- parse_state --------------------------------------------------------------


@pytest.mark.parametrize(
    "text",
    ["1 2 3 4 5 6 7 0 8", "1,2,3,4,5,6,7,0,8", " 1; 2;3 4 5 6\n7 0 8 "],
    ids=["spaces", "commas", "mixed"],
)
def test_parse_state_separators(text: str) -> None:
    assert parse_state(text, 3) == (1, 2, 3, 4, 5, 6, 7, 0, 8)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("1 2 3", "exactly 9"),
        ("1 2 3 4 5 6 7 x 8", "non-numeric"),
        ("1 2 3 4 5 6 7 9 8", "between 0 and 8"),
        ("1 1 3 4 5 6 7 0 8", "more than once"),
    ],
    ids=["count", "non-numeric", "range", "duplicate"],
)
def test_parse_state_errors(text: str, message: str) -> None:
    with pytest.raises(InvalidBoardError, match=message):
        parse_state(text, 3)


def test_parse_algorithms() -> None:
    assert parse_algorithms("1,3") == [Algorithm.bfs, Algorithm.bidirectional]
    assert parse_algorithms("iddfs bfs 1") == [Algorithm.bfs, Algorithm.iddfs]
    with pytest.raises(ValueError):
        parse_algorithms("4")


def test_format_board() -> None:
    assert format_board((1, 2, 3, 4, 5, 6, 7, 0, 8), 3) == "1 2 3\n4 5 6\n7   8"
    assert format_board(tuple(range(1, 16)) + (0,), 4).splitlines()[3] == "13 14 15   "


# -- Typer entry point --------------------------------------------------------


def test_cli_vanilla_report() -> None:
    result = runner.invoke(
        app,
        ["-n", "3", "--start", "1 2 3 4 5 6 7 0 8", "-a", "bfs", "-a", "bidirectional",
         "-f", "vanilla", "--path"],
    )
    assert result.exit_code == 0, result.output
    assert "Solution found." in result.output
    assert "Moves: R" in result.output
    assert "Bidirectional BFS" in result.output
    assert "Step 1:" in result.output


def test_cli_scramble_with_seed_is_reproducible() -> None:
    args = ["-n", "3", "--steps", "6", "--seed", "11", "-a", "iddfs", "-f", "vanilla"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)
    assert first.exit_code == 0, first.output
    assert "Moves:" in first.output
    moves = [line for line in first.output.splitlines() if "Moves:" in line]
    assert moves == [line for line in second.output.splitlines() if "Moves:" in line]


def test_cli_reports_unreachable_goal() -> None:
    result = runner.invoke(
        app,
        ["-n", "3", "--start", "2 1 3 4 5 6 7 8 0", "-a", "iddfs",
         "--max-depth", "4", "-f", "vanilla"],
    )
    assert result.exit_code == 0, result.output
    assert "No solution found." in result.output


def test_cli_rich_report() -> None:
    result = runner.invoke(
        app, ["-n", "3", "--start", "1 2 3 4 5 6 7 0 8", "-a", "bfs", "-f", "rich"]
    )
    assert result.exit_code == 0, result.output
    assert "Search results" in result.output


def test_cli_rejects_invalid_start() -> None:
    result = runner.invoke(app, ["-n", "3", "--start", "1 2 3", "-f", "vanilla"])
    assert result.exit_code == 2


def test_cli_rejects_small_size() -> None:
    result = runner.invoke(app, ["-n", "2", "--start", "1 2 3 0"])
    assert result.exit_code == 2


def _board_after(label: str, output: str) -> str:
    lines = output.splitlines()
    at = next(i for i, line in enumerate(lines) if line.strip().endswith(label + "\033[0m"))
    return lines[at + 1].strip()


def test_cli_goal_without_size_skips_prompts() -> None:
    result = runner.invoke(
        app, ["--goal", "0 1 2 3 4 5 6 7 8", "--steps", "5", "--seed", "3", "-f", "vanilla"]
    )
    assert result.exit_code == 0, result.output
    assert "S L I D I N G" not in result.output
    assert "Solution found." in result.output
    assert _board_after("Goal", result.output) == "1 2"


@pytest.mark.parametrize(
    "args",
    [["--seed", "3"], ["--steps", "4"], ["-a", "bidirectional"], ["--max-depth", "20"], ["--path"]],
    ids=["seed", "steps", "algo", "max-depth", "path"],
)
def test_cli_any_search_option_skips_prompts(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-f", "vanilla"])
    assert result.exit_code == 0, result.output
    assert "S L I D I N G" not in result.output
    assert "Solution found." in result.output


def test_cli_without_search_options_prompts() -> None:
    answers = "3\nm\n1 2 3 4 5 6 7 0 8\ny\n1\nn\n"
    result = runner.invoke(app, ["-f", "vanilla"], input=answers)
    assert result.exit_code == 0, result.output
    assert "S L I D I N G" in result.output
    assert "Moves: R" in result.output
