# covpath/solver.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
import os, sys, time

from .types import Coord
from .grid import Grid
from .memo import MemoTable
from .search import BestPath, PathState, Searcher
from .visits import VisitTracker

@dataclass
class SolveResult:
    has_free_cells: bool
    num_moves: int
    coverage: int
    length: int
    path: List[Coord]
    starts: int = 0
    calls: int = 0
    prunes: int = 0
    elapsed_sec: float = 0.0

def _check_memo(memo: MemoTable, grid: Grid, num_moves: int) -> None:
    if (memo.rows, memo.cols, memo.num_moves) != (grid.rows, grid.cols, num_moves):
        raise ValueError(f"memo table is {memo.rows}x{memo.cols}x{memo.num_moves}, "
                         f"expected {grid.rows}x{grid.cols}x{num_moves}")
    if not memo.is_fresh():
        raise ValueError("memo table already holds results from another run")

def solve(grid: Grid, num_moves: int, memo: Optional[MemoTable] = None) -> SolveResult:
    """
    Try every free cell as a start (row-major) and keep the walk of at most
    `num_moves` cells with the most distinct cells, then the fewest steps.
    `memo` may be passed in to observe the pruning table; it must be empty
    and sized for this grid and budget.
    """
    if num_moves < 1:
        raise ValueError(f"move budget must be at least 1, got {num_moves}")

    t0 = time.perf_counter()
    if not grid.has_free_cells():
        return SolveResult(False, num_moves, 0, 0, [], elapsed_sec=time.perf_counter() - t0)

    if memo is None:
        memo = MemoTable(grid.rows, grid.cols, num_moves)
    else:
        _check_memo(memo, grid, num_moves)
    path = PathState(num_moves)
    best = BestPath()
    visits = VisitTracker(grid.rows, grid.cols)
    searcher = Searcher(grid, memo, path, best, visits)

    starts = 0
    # one Python frame per step, plus headroom for the caller
    old_limit = sys.getrecursionlimit()
    if old_limit < num_moves + 200:
        sys.setrecursionlimit(num_moves + 200)
    try:
        for start in grid.free_cells():
            visits.begin_new_search(start)
            path.reset(start)
            searcher.search(start[0], start[1], num_moves - 1)
            starts += 1
    finally:
        sys.setrecursionlimit(old_limit)

    return SolveResult(True, num_moves, best.coverage, best.length, list(best.sequence),
                       starts=starts, calls=searcher.calls, prunes=searcher.prunes,
                       elapsed_sec=time.perf_counter() - t0)

def solve_many(paths: List[str], num_moves: int) -> List[Tuple[str, Grid, SolveResult]]:
    results: List[Tuple[str, Grid, SolveResult]] = []
    for fpath in paths:
        grid = Grid.load(fpath)
        results.append((os.path.basename(fpath), grid, solve(grid, num_moves)))
    return results
