# covpath/grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional
import random, os
from .types import Coord, DIRS

@dataclass(frozen=True)
class Grid:
    rows: int
    cols: int
    blocked: List[List[bool]]  # True=blocked
    num_blocked: int = 0

    @staticmethod
    def build(rows: int, cols: int, blocked_coords: Iterable[Coord]) -> "Grid":
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
        blocked = [[False] * cols for _ in range(rows)]
        for r, c in blocked_coords:
            # out-of-range coordinates are dropped
            if 0 <= r < rows and 0 <= c < cols:
                blocked[r][c] = True
        count = sum(row.count(True) for row in blocked)
        return Grid(rows, cols, blocked, count)

    @staticmethod
    def random(rows: int = 8, cols: int = 8, p_blocked: float = 0.15, seed: Optional[int] = None) -> "Grid":
        rng = random.Random(seed)
        coords = [(r, c) for r in range(rows) for c in range(cols) if rng.random() < p_blocked]
        return Grid.build(rows, cols, coords)

    @staticmethod
    def load(path: str) -> "Grid":
        with open(path, "r") as f:
            lines = [line.strip() for line in f if line.strip()]
        if not lines:
            raise ValueError(f"{path}: empty grid file")

        header = lines[0].split()
        if header and header[0] == "GRID":
            if len(header) != 3:
                raise ValueError(f"{path}: expected 'GRID <rows> <cols>', got {lines[0]!r}")
            rows, cols = int(header[1]), int(header[2])
            body = lines[1:rows + 1]
        else:
            # legacy flat format: lines of 0/1 only
            body = lines
            rows, cols = len(body), len(body[0])

        if len(body) != rows or any(len(row) != cols for row in body):
            raise ValueError(f"{path}: grid body does not match {rows}x{cols}")
        if any(ch not in "01" for row in body for ch in row):
            raise ValueError(f"{path}: grid rows must contain only 0 and 1")
        coords = [(r, c) for r in range(rows) for c in range(cols) if body[r][c] == "1"]
        return Grid.build(rows, cols, coords)

    def save(self, path: str) -> None:
        folder = os.path.dirname(path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(path, "w") as f:
            f.write(f"GRID {self.rows} {self.cols}\n")
            for r in range(self.rows):
                f.write("".join("1" if self.blocked[r][c] else "0" for c in range(self.cols)) + "\n")

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def is_valid(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols and not self.blocked[row][col]

    def has_free_cells(self) -> bool:
        return self.size > self.num_blocked

    def free_cells(self) -> Iterator[Coord]:
        for r in range(self.rows):
            for c in range(self.cols):
                if not self.blocked[r][c]:
                    yield (r, c)

    def neighbors(self, s: Coord) -> List[Coord]:
        r, c = s
        cand = [(r + dr, c + dc) for dr, dc in DIRS]
        return [p for p in cand if self.is_valid(*p)]
