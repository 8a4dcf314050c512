# covpath/pygame_viewer.py (path replay)
from __future__ import annotations
import argparse
from dataclasses import dataclass
from typing import List, Optional, Set
import os
import pygame

from .types import Coord
from .grid import Grid
from .solver import SolveResult, solve

@dataclass
class Colors:
    BG = (18, 18, 22)
    WALL = (35, 35, 44)
    FLOOR = (230, 230, 240)
    COVERED = (160, 200, 160)
    PATH = (70, 170, 110)
    WALKER = (220, 90, 90)
    START = (90, 160, 220)
    GRID = (60, 60, 70)

def _is_cmd_ctrl_f(event):
    mods = event.mod
    KMOD_CMD = getattr(pygame, "KMOD_META", 0) | getattr(pygame, "KMOD_GUI", 0)
    return event.key == pygame.K_f and (mods & pygame.KMOD_CTRL) and (mods & KMOD_CMD)

class Viewer:
    def __init__(self, grid: Grid, num_moves: int, cell_size: int = 48, fps: int = 60,
                 fullscreen: bool = False, speed: float = 4.0, p_blocked: float = 0.15):
        self.grid = grid
        self.num_moves = num_moves
        self.cell = cell_size
        self.fps = fps
        self.speed_steps_per_sec = speed
        self.p_blocked = p_blocked

        self.autoplay = False
        self._step_timer = 0.0
        self.show_grid = True

        self.fullscreen = fullscreen
        self._recreate_display()
        self.clock = pygame.time.Clock()
        self._reset_state()

    # ----------------- display / fullscreen -----------------
    def _recreate_display(self) -> None:
        W, H = self.grid.cols * self.cell, self.grid.rows * self.cell
        flags = pygame.SCALED | (pygame.FULLSCREEN if self.fullscreen else 0)
        self.screen = pygame.display.set_mode((W, H), flags)

    def toggle_fullscreen(self) -> None:
        self.fullscreen = not self.fullscreen
        self._recreate_display()

    def _recalculate_step_interval(self) -> None:
        self._step_interval = 1.0 / self.speed_steps_per_sec

    def _update_caption(self) -> None:
        r = self.result
        if not r.has_free_cells:
            text = "No free cells"
        else:
            text = (f"budget {self.num_moves} | coverage {r.coverage} | length {r.length} | "
                    f"step {self.step + 1}/{len(self.path)}")
        pygame.display.set_caption(text)

    # ----------------- solve / replay -----------------
    def _reset_state(self) -> None:
        """Solves the current grid and rewinds the replay."""
        self.result: SolveResult = solve(self.grid, self.num_moves)
        self.path: List[Coord] = self.result.path
        self.step = 0
        self._step_timer = 0.0
        self._recalculate_step_interval()
        print(f"budget={self.num_moves} coverage={self.result.coverage} length={self.result.length} "
              f"time={self.result.elapsed_sec*1000:.1f} ms")
        self._update_caption()

    def _rewind(self) -> None:
        self.step = 0
        self._update_caption()

    def _advance(self, delta: int) -> None:
        if not self.path:
            return
        self.step = max(0, min(len(self.path) - 1, self.step + delta))
        self._update_caption()

    def _covered(self) -> Set[Coord]:
        return set(self.path[:self.step + 1])

    # ----------------- draw -----------------
    def draw(self) -> None:
        g, cell = self.grid, self.cell
        scr = self.screen
        scr.fill(Colors.BG)

        covered = self._covered()
        for r in range(g.rows):
            for c in range(g.cols):
                rect = pygame.Rect(c * cell, r * cell, cell, cell)
                if g.blocked[r][c]:
                    color = Colors.WALL
                elif (r, c) in covered:
                    color = Colors.COVERED
                else:
                    color = Colors.FLOOR
                scr.fill(color, rect)

        if self.path:
            pts = [(c * cell + cell // 2, r * cell + cell // 2) for r, c in self.path[:self.step + 1]]
            if len(pts) > 1:
                pygame.draw.lines(scr, Colors.PATH, False, pts, max(2, cell // 8))

            sr, sc = self.path[0]
            start_rect = pygame.Rect(sc * cell + 4, sr * cell + 4, cell - 8, cell - 8)
            pygame.draw.rect(scr, Colors.START, start_rect, width=3, border_radius=6)

            wr, wc = self.path[self.step]
            walker_rect = pygame.Rect(wc * cell + 6, wr * cell + 6, cell - 12, cell - 12)
            pygame.draw.rect(scr, Colors.WALKER, walker_rect, border_radius=8)

        if self.show_grid:
            for i in range(g.cols + 1):
                pygame.draw.line(scr, Colors.GRID, (i * cell, 0), (i * cell, g.rows * cell))
            for i in range(g.rows + 1):
                pygame.draw.line(scr, Colors.GRID, (0, i * cell), (g.cols * cell, i * cell))

        pygame.display.flip()

    # ----------------- loop -----------------
    def run(self) -> None:
        running = True
        while running:
            dt = self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        self.autoplay = not self.autoplay
                    elif event.key in (pygame.K_RIGHT, pygame.K_PERIOD):
                        self._advance(1)
                    elif event.key in (pygame.K_LEFT, pygame.K_COMMA):
                        self._advance(-1)
                    elif event.key == pygame.K_r:
                        self._rewind()
                    elif event.key == pygame.K_g:
                        self.grid = Grid.random(rows=self.grid.rows, cols=self.grid.cols, p_blocked=self.p_blocked)
                        self._reset_state()
                    elif event.key == pygame.K_EQUALS or event.key == pygame.K_PLUS:
                        self.num_moves += 1
                        self._reset_state()
                    elif event.key == pygame.K_MINUS:
                        self.num_moves = max(self.num_moves - 1, 1)
                        self._reset_state()
                    elif event.key == pygame.K_PAGEUP:
                        self.speed_steps_per_sec = min(self.speed_steps_per_sec + 1, 60)
                        self._recalculate_step_interval()
                    elif event.key == pygame.K_PAGEDOWN:
                        self.speed_steps_per_sec = max(self.speed_steps_per_sec - 1, 1)
                        self._recalculate_step_interval()
                    elif event.key == pygame.K_h:
                        self.show_grid = not self.show_grid
                    elif (event.key == pygame.K_RETURN and (event.mod & pygame.KMOD_ALT)) or _is_cmd_ctrl_f(event):
                        self.toggle_fullscreen()
                    elif event.key == pygame.K_F11:
                        self.toggle_fullscreen()

            if self.autoplay and self.path and self.step < len(self.path) - 1:
                self._step_timer += dt
                while self._step_timer >= self._step_interval and self.step < len(self.path) - 1:
                    self._advance(1)
                    self._step_timer -= self._step_interval

            self.draw()

def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Replay the best-coverage path on a grid")
    parser.add_argument("--rows", type=int, default=8, help="Grid rows when generating a random grid")
    parser.add_argument("--cols", type=int, default=8, help="Grid cols when generating a random grid")
    parser.add_argument("--p", type=float, default=0.15, help="Block probability for random grids")
    parser.add_argument("--load", type=str, default=None, help="Load a saved grid (.txt)")
    parser.add_argument("--moves", type=int, default=25, help="Move budget (max cells in the path)")
    parser.add_argument("--cell", type=int, default=48, help="Cell size in pixels")
    parser.add_argument("--fps", type=int, default=60, help="Frames per second")
    parser.add_argument("--speed", type=float, default=4.0, help="Autoplay speed in steps/sec")
    parser.add_argument("--fullscreen", action="store_true", help="Start in fullscreen (toggle Option+Enter / F11)")
    args = parser.parse_args(argv)

    if args.moves < 1:
        parser.error("--moves must be at least 1")
    if args.load:
        if not os.path.isfile(args.load):
            parser.error(f"no such grid file: {args.load}")
        grid = Grid.load(args.load)
    else:
        grid = Grid.random(rows=args.rows, cols=args.cols, p_blocked=args.p)

    pygame.init()
    try:
        Viewer(grid, args.moves, cell_size=args.cell, fps=args.fps, fullscreen=args.fullscreen,
               speed=args.speed, p_blocked=args.p).run()
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
