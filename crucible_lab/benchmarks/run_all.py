# crucible_lab/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..algorithms.crucible import crucible_search
from ..algorithms.ucs import uniform_cost_search
from ..core.config import PRESETS, RunBounds, bounds_from_env, env_bounds
from ..core.grid import CostGrid
from ..core.errors import InvalidInput
from ..problems.crucible import CrucibleProblem
from ..problems.grid import WeightedGridProblem
from ..problems.samples import SAMPLES

DEFAULT_JSON = Path(__file__).with_name("results.json")


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def _load_grid(args: argparse.Namespace) -> CostGrid:
    if args.input:
        return CostGrid.from_text(Path(args.input).read_text())
    return SAMPLES[args.sample]()


def _bounds_list(args: argparse.Namespace) -> List[RunBounds]:
    if args.min_run is not None or args.max_run is not None:
        base = bounds_from_env()
        lo = base.min_run if args.min_run is None else args.min_run
        hi = base.max_run if args.max_run is None else args.max_run
        return [RunBounds(lo, hi)]
    from_env = env_bounds()
    if from_env is not None:
        return [from_env]
    return [PRESETS[name] for name in args.preset]


def _load_algos(grid: CostGrid, bounds_list: Sequence[RunBounds], args: argparse.Namespace):
    """(name, thunk) pairs; each thunk returns a SearchResult."""
    algos: List[Tuple[str, Callable[[], Any]]] = []
    for b in bounds_list:
        algos.append((
            f"Crucible {b.label}",
            lambda b=b: crucible_search(grid, bounds=b, record_path=True, early_exit=not args.drain),
        ))
        if args.cross_check:
            algos.append((
                f"UCS crucible {b.label}",
                lambda b=b: uniform_cost_search(CrucibleProblem(grid, bounds=b)),
            ))
    if args.baseline:
        algos.append(("UCS free movement", lambda: uniform_cost_search(WeightedGridProblem(grid))))
    return algos


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="python -m crucible_lab.benchmarks.run_all",
        description="Run the crucible search (and baselines) on a digit grid and record the results.",
    )
    src = p.add_mutually_exclusive_group()
    src.add_argument("--input", "-i", help="path to a digit-grid text file")
    src.add_argument("--sample", choices=sorted(SAMPLES), default="reference",
                     help="built-in grid to use when no --input is given (default: reference)")
    p.add_argument("--preset", nargs="+", choices=sorted(PRESETS), default=["normal", "ultra"],
                   help="run-length presets to evaluate (default: normal ultra)")
    p.add_argument("--min-run", type=int, default=None,
                   help="custom minimum run length (overrides --preset; env CRUCIBLE_MIN_RUN)")
    p.add_argument("--max-run", type=int, default=None,
                   help="custom maximum run length (overrides --preset; env CRUCIBLE_MAX_RUN)")
    p.add_argument("--drain", action="store_true",
                   help="drain the whole frontier instead of stopping early")
    p.add_argument("--cross-check", action="store_true",
                   help="also solve each preset with generic UCS over the same state space")
    p.add_argument("--no-baseline", dest="baseline", action="store_false",
                   help="skip the unconstrained 4-neighbour UCS baseline")
    p.add_argument("--json", type=Path, default=DEFAULT_JSON,
                   help=f"where to write the results (default: {DEFAULT_JSON.name} next to this script)")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        grid = _load_grid(args)
        bounds_list = _bounds_list(args)
    except (InvalidInput, OSError) as e:
        print(f"error: {e}")
        return 2

    print(f"Grid {grid.width}x{grid.height}, start {grid.top_left}, target {grid.bottom_right}")
    rows: List[Dict[str, Any]] = []
    for name, fn in _load_algos(grid, bounds_list, args):
        print(f"→ Running {name} ...")
        try:
            r = fn()
            print(
                f"  {name}: "
                f"{'OK' if r.success else 'NO PATH'} "
                f"cost={r.cost} "
                f"expanded={r.nodes_expanded}, "
                f"time={_fmt_time(r.time_s)}s"
            )
            row = r.as_row()
            row["algo"] = name
            row["path"] = [list(c) for c in r.path]
            rows.append(row)
        except Exception as e:
            print(f"  {name}: ERROR {repr(e)}")
            rows.append({
                "algo": name,
                "success": False,
                "error": repr(e),
                "nodes_expanded": None,
                "cost": None,
                "time_s": None,
                "peak_kb": None,
            })

    out = {
        "grid": {"width": grid.width, "height": grid.height, "costs": grid.array.tolist()},
        "results": rows,
        "ts": time.time(),
    }
    args.json.write_text(json.dumps(out, indent=2))
    print(f"Wrote {args.json}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
