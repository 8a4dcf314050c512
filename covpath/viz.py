# covpath/viz.py
from __future__ import annotations
import os
from typing import List, Optional
from PIL import Image, ImageDraw

from .types import Coord
from .grid import Grid

FREE = (240, 240, 240)
WALL = (0, 0, 0)
PATH = (160, 190, 255)
START = (100, 220, 120)
END = (255, 170, 80)

def draw_coverage_png(grid: Grid,
                      path: Optional[List[Coord]],
                      out_png: str,
                      cell: int = 24) -> None:
    img = Image.new("RGB", (grid.cols * cell, grid.rows * cell), (255, 255, 255))
    drw = ImageDraw.Draw(img)

    def box(r: int, c: int):
        x0, y0 = c * cell, r * cell
        return (x0, y0, x0 + cell - 1, y0 + cell - 1)

    # base grid
    for r in range(grid.rows):
        for c in range(grid.cols):
            drw.rectangle(box(r, c), fill=WALL if grid.blocked[r][c] else FREE)

    if path:
        for (r, c) in path:
            drw.rectangle(box(r, c), fill=PATH)
        # step order as a polyline through cell centres
        if len(path) > 1:
            pts = [(c * cell + cell // 2, r * cell + cell // 2) for r, c in path]
            drw.line(pts, fill=(40, 60, 160), width=max(1, cell // 8))
        drw.rectangle(box(*path[-1]), outline=END, width=max(1, cell // 6))
        drw.rectangle(box(*path[0]), outline=START, width=max(1, cell // 6))

    folder = os.path.dirname(out_png)
    if folder:
        os.makedirs(folder, exist_ok=True)
    img.save(out_png)
