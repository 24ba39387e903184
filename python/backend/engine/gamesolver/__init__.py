from backend.engine.gamesolver.bfs import bfs
from backend.engine.gamesolver.bidirectional import bidirectional
from backend.engine.gamesolver.iddfs import DEFAULT_MAX_DEPTH, iddfs
from backend.engine.gamesolver.path import ParentLink, reconstruct_path
from backend.engine.gamesolver.solvability import count_inversions, is_solvable
from backend.engine.gamesolver.solver import Algorithm, Solver

__all__ = [
    "Algorithm",
    "DEFAULT_MAX_DEPTH",
    "ParentLink",
    "Solver",
    "bfs",
    "bidirectional",
    "count_inversions",
    "iddfs",
    "is_solvable",
    "reconstruct_path",
]
