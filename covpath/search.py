# covpath/search.py
from __future__ import annotations
from typing import List
from .types import Coord, DIRS
from .grid import Grid
from .memo import MemoTable
from .visits import VisitTracker

class PathState:
    """
    The path being extended by the search, used as a stack:
    every push() on the way down is undone by a pop() on the way back.
    """
    def __init__(self, capacity: int):
        self.capacity = capacity
        self.sequence: List[Coord] = [(0, 0)] * capacity
        self.coverage = 0
        self.length = 0

    def reset(self, start: Coord) -> None:
        self.sequence[0] = start
        self.coverage = 1
        self.length = 1

    def push(self, s: Coord, unique: bool) -> None:
        self.sequence[self.length] = s
        self.length += 1
        if unique:
            self.coverage += 1

    def pop(self, unique: bool) -> None:
        self.length -= 1
        if unique:
            self.coverage -= 1

    def place(self, s: Coord) -> None:
        self.sequence[self.length - 1] = s

    def cells(self) -> List[Coord]:
        return self.sequence[:self.length]

class BestPath:
    def __init__(self):
        self.coverage = 0
        self.length = 0
        self.sequence: List[Coord] = []

    def beats(self, path: PathState) -> bool:
        return (path.coverage > self.coverage or
                (path.coverage == self.coverage and path.length < self.length))

    def offer(self, path: PathState) -> bool:
        """Snapshot `path` if it covers more cells, or as many in fewer steps."""
        if not self.beats(path):
            return False
        self.coverage = path.coverage
        self.length = path.length
        self.sequence = path.cells()
        return True

class Searcher:
    def __init__(self, grid: Grid, memo: MemoTable, path: PathState,
                 best: BestPath, visits: VisitTracker):
        self.grid = grid
        self.memo = memo
        self.path = path
        self.best = best
        self.visits = visits
        self.calls = 0
        self.prunes = 0

    def search(self, row: int, col: int, moves_left: int) -> None:
        """
        Depth-first walk from (row, col) with `moves_left` further steps.
        The caller has already pushed (row, col) onto the path.
        """
        path = self.path
        self.calls += 1

        if self.memo.should_prune(row, col, moves_left, path.coverage):
            self.prunes += 1
            return
        self.memo.record(row, col, moves_left, path.coverage)

        path.place((row, col))
        self.best.offer(path)

        if moves_left == 0:
            return

        for dr, dc in DIRS:
            nr, nc = row + dr, col + dc
            if not self.grid.is_valid(nr, nc):
                continue
            nb = (nr, nc)
            unique = self.visits.is_first_visit(nb)
            path.push(nb, unique)
            self.visits.mark_visited(nb)

            self.search(nr, nc, moves_left - 1)

            # backtrack
            path.pop(unique)
            if unique:
                self.visits.unmark(nb)
