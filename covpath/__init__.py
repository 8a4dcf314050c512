# covpath/__init__.py
from .types import Coord, DIRS
from .grid import Grid
from .visits import VisitTracker
from .memo import MemoTable
from .search import PathState, BestPath, Searcher
from .solver import solve, solve_many, SolveResult
from .report import format_grid, format_result, format_stats, NO_FREE_CELLS
from .viz import draw_coverage_png

__all__ = [
    "Coord", "DIRS", "Grid", "VisitTracker", "MemoTable",
    "PathState", "BestPath", "Searcher",
    "solve", "solve_many", "SolveResult",
    "format_grid", "format_result", "format_stats", "NO_FREE_CELLS",
    "draw_coverage_png",
]
