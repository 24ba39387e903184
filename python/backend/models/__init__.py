from backend.models.board import (
    Board,
    InvalidBoardError,
    Move,
    State,
    Successor,
    apply_move,
    goal_state,
    key_of,
    neighbors,
)
from backend.models.result import NOT_FOUND, SearchResult

__all__ = [
    "Board",
    "InvalidBoardError",
    "Move",
    "NOT_FOUND",
    "SearchResult",
    "State",
    "Successor",
    "apply_move",
    "goal_state",
    "key_of",
    "neighbors",
]
