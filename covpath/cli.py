# covpath/cli.py
from __future__ import annotations
import argparse, csv, os, sys
from typing import List, Optional

from .types import Coord
from .grid import Grid
from .solver import SolveResult, solve, solve_many
from .report import format_grid, format_result, format_stats
from .viz import draw_coverage_png

EXAMPLE_ROWS, EXAMPLE_COLS = 8, 8
EXAMPLE_BLOCKED: List[Coord] = [(2, 0), (2, 1), (2, 2), (2, 3), (2, 4), (3, 3), (4, 3), (5, 5), (6, 6)]
EXAMPLE_MOVES = 25

def parse_blocked(text: str) -> List[Coord]:
    """Parse "r,c;r,c;..." into coordinates. Empty text means no blocked cells."""
    coords: List[Coord] = []
    for item in text.replace(" ", "").split(";"):
        if not item:
            continue
        parts = item.split(",")
        if len(parts) != 2:
            raise ValueError(f"bad blocked cell {item!r}, expected 'row,col'")
        try:
            coords.append((int(parts[0]), int(parts[1])))
        except ValueError:
            raise ValueError(f"bad blocked cell {item!r}, expected integers") from None
    return coords

def report(grid: Grid, result: SolveResult, png: str = "", stats: bool = False) -> None:
    print(format_grid(grid), end="")
    print(format_result(result), end="")
    if stats and result.has_free_cells:
        print(format_stats("search", result))
    if png and result.has_free_cells:
        draw_coverage_png(grid, result.path, png)
        print("wrote", png)

# -------- subcommands --------

def cmd_example(args: argparse.Namespace) -> None:
    grid = Grid.build(EXAMPLE_ROWS, EXAMPLE_COLS, EXAMPLE_BLOCKED)
    report(grid, solve(grid, EXAMPLE_MOVES), png=args.png, stats=args.stats)

def cmd_solve(args: argparse.Namespace) -> None:
    if args.env:
        grid = Grid.load(args.env)
    else:
        grid = Grid.build(args.rows, args.cols, parse_blocked(args.blocked))
    report(grid, solve(grid, args.moves), png=args.png, stats=args.stats)

def cmd_gen(args: argparse.Namespace) -> None:
    os.makedirs(args.out, exist_ok=True)
    for i in range(args.count):
        grid = Grid.random(rows=args.rows, cols=args.cols, p_blocked=args.p,
                           seed=(args.seed + i) if args.seed is not None else None)
        path = os.path.join(args.out, f"grid_{i:03d}.txt")
        grid.save(path)
        print("wrote", path)

def cmd_bench(args: argparse.Namespace) -> None:
    envs = sorted(os.path.join(args.envdir, p) for p in os.listdir(args.envdir) if p.endswith(".txt"))
    rows = []
    for fname, grid, st in solve_many(envs, args.moves):
        print(format_stats(fname, st))
        if args.out and st.has_free_cells:
            base = os.path.splitext(fname)[0]
            draw_coverage_png(grid, st.path, os.path.join(args.out, f"{base}_best.png"))
        rows.append({
            "env": fname,
            "moves": st.num_moves,
            "coverage": st.coverage,
            "length": st.length,
            "starts": st.starts,
            "calls": st.calls,
            "prunes": st.prunes,
            "time_sec": round(st.elapsed_sec, 6),
        })
    if args.csv and rows:
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Best-coverage bounded walks on blocked grids")
    sub = p.add_subparsers(dest="cmd", required=True)

    e = sub.add_parser("example", help="solve the built-in 8x8 example (budget 25)")
    e.add_argument("--png", type=str, default="")
    e.add_argument("--stats", action="store_true")
    e.set_defaults(func=cmd_example)

    s = sub.add_parser("solve", help="solve one grid given inline or as a file")
    s.add_argument("--rows", type=int, default=EXAMPLE_ROWS)
    s.add_argument("--cols", type=int, default=EXAMPLE_COLS)
    s.add_argument("--blocked", type=str, default="", help='blocked cells as "r,c;r,c;..."')
    s.add_argument("--env", type=str, default="", help="grid file (overrides --rows/--cols/--blocked)")
    s.add_argument("--moves", type=int, default=EXAMPLE_MOVES, help="max cells in the path")
    s.add_argument("--png", type=str, default="")
    s.add_argument("--stats", action="store_true")
    s.set_defaults(func=cmd_solve)

    g = sub.add_parser("gen", help="generate random grids")
    g.add_argument("--count", type=int, default=10)
    g.add_argument("--rows", type=int, default=8)
    g.add_argument("--cols", type=int, default=8)
    g.add_argument("--p", type=float, default=0.15)
    g.add_argument("--out", type=str, default="envs")
    g.add_argument("--seed", type=int, default=None)
    g.set_defaults(func=cmd_gen)

    b = sub.add_parser("bench", help="solve every .txt grid in a folder")
    b.add_argument("--envdir", type=str, required=True)
    b.add_argument("--moves", type=int, default=EXAMPLE_MOVES)
    b.add_argument("--out", type=str, default="", help="folder for PNGs of the best paths")
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    return p

def main(argv: Optional[List[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    try:
        args.func(args)
    except (ValueError, OSError) as exc:
        ap.error(str(exc))
    except MemoryError:
        print("Failed: out of memory", file=sys.stderr)
        return 1
    return 0

def run() -> None:
    sys.exit(main())
