"""Search result record shared by every strategy."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.models.board import Move, State

NOT_FOUND = -1


@dataclass(frozen=True)
class SearchResult:
    algorithm: str
    found: bool
    depth: int
    expanded: int
    path_states: tuple[State, ...] = field(default=())
    path_moves: tuple[Move, ...] = field(default=())

    @classmethod
    def success(
        cls,
        algorithm: str,
        expanded: int,
        path_states: list[State],
        path_moves: list[Move],
    ) -> SearchResult:
        return cls(
            algorithm=algorithm,
            found=True,
            depth=len(path_moves),
            expanded=expanded,
            path_states=tuple(path_states),
            path_moves=tuple(path_moves),
        )

    @classmethod
    def failure(cls, algorithm: str, expanded: int) -> SearchResult:
        return cls(algorithm=algorithm, found=False, depth=NOT_FOUND, expanded=expanded)

    @classmethod
    def trivial(cls, algorithm: str, start: State) -> SearchResult:
        """Result for a search whose start already equals the goal."""
        return cls(algorithm=algorithm, found=True, depth=0, expanded=0, path_states=(start,))
