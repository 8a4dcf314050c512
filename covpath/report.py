# covpath/report.py
from __future__ import annotations
from typing import List

from .types import Coord
from .grid import Grid
from .solver import SolveResult

NO_FREE_CELLS = "No free cells."

def format_grid(grid: Grid) -> str:
    lines = ["".join("1 " if cell else "0 " for cell in row) for row in grid.blocked]
    return "\n".join(lines) + "\n\n"

def format_path(path: List[Coord]) -> str:
    return " -> ".join(f"({r},{c})" for r, c in path)

def format_result(result: SolveResult) -> str:
    if not result.has_free_cells:
        return NO_FREE_CELLS + "\n"
    return (f"Best coverage: {result.coverage}\n"
            f"Path length: {result.length}\n"
            f"{format_path(result.path)}\n")

def format_stats(name: str, s: SolveResult) -> str:
    return (f"{name:20s} | coverage={s.coverage:4d} | length={s.length:4d} | "
            f"starts={s.starts:5d} | calls={s.calls:9d} | prunes={s.prunes:9d} | "
            f"time={s.elapsed_sec*1000:9.1f} ms")
