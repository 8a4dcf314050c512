# covpath/memo.py
from __future__ import annotations
from typing import List

class MemoTable:
    """
    Best coverage seen on entry to each (row, col, moves_left) state.

    One table is shared by every start of a run and is never cleared, so a
    state reached earlier with at least the same coverage prunes later
    arrivals too, whichever cell they started from. The comparison looks at
    coverage only, not at which cells were visited, so two paths with equal
    coverage but different visited sets are treated alike.
    """
    def __init__(self, rows: int, cols: int, num_moves: int):
        self.rows = rows
        self.cols = cols
        self.num_moves = num_moves
        self.best: List[List[List[int]]] = [
            [[0] * num_moves for _ in range(cols)] for _ in range(rows)
        ]

    def proven(self, row: int, col: int, moves_left: int) -> int:
        return self.best[row][col][moves_left]

    def record(self, row: int, col: int, moves_left: int, coverage: int) -> None:
        # caller has already checked this is an improvement
        self.best[row][col][moves_left] = coverage

    def should_prune(self, row: int, col: int, moves_left: int, coverage: int) -> bool:
        return self.best[row][col][moves_left] >= coverage

    def is_fresh(self) -> bool:
        return not any(v for plane in self.best for row in plane for v in row)
