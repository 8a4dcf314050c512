# covpath/types.py
from typing import Tuple

Coord = Tuple[int, int]  # (row, col)

# search order for orthogonal moves
DIRS: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
