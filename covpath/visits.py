# covpath/visits.py
from __future__ import annotations
from typing import List
from .types import Coord

class VisitTracker:
    """
    Per-cell visit stamps for the path currently being searched.
    - A cell is on the current path iff its stamp equals the live epoch
    - Each new start bumps the epoch, so older stamps go stale without a reset
    """
    UNVISITED = 0

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.stamp: List[int] = [self.UNVISITED] * (rows * cols)
        self.epoch = 1

    def _idx(self, s: Coord) -> int:
        return s[0] * self.cols + s[1]

    def begin_new_search(self, start: Coord) -> None:
        self.epoch += 1
        self.stamp[self._idx(start)] = self.epoch

    def is_first_visit(self, s: Coord) -> bool:
        return self.stamp[self._idx(s)] != self.epoch

    def mark_visited(self, s: Coord) -> None:
        self.stamp[self._idx(s)] = self.epoch

    def unmark(self, s: Coord) -> None:
        self.stamp[self._idx(s)] = self.UNVISITED
