# crucible_lab/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import Optional, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ..core.grid import CostGrid
from ..plots.plotting import plot_path

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"


def _load(path: Path):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m crucible_lab.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return data, rows


def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)


def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) or 0 for r in rows]

    x = list(range(len(algos)))
    ax.bar(x, vals)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    top = max(vals) or 1
    for xi, v in zip(x, vals):
        if isinstance(v, float) and v < 0.01:
            label = f"{v:.4f}"
        elif isinstance(v, float):
            label = f"{v:.3f}"
        else:
            label = f"{v}"
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)


def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Algorithm | Cost | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|",
    ]
    for r in rows:
        def fnum(x):
            if isinstance(x, (int, float)):
                return f"{x:.6f}" if isinstance(x, float) else f"{x}"
            return "n/a"
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('nodes_expanded'))} | "
            f"{fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def _png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    plt.close(fig)
    return buf.getvalue()


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="python -m crucible_lab.benchmarks.plot_results")
    p.add_argument("--results", type=Path, default=RESULTS_JSON)
    p.add_argument("--out-dir", type=Path, default=None, help="defaults to the results file's folder")
    args = p.parse_args(argv)

    data, rows = _load(args.results)
    out_dir = args.out_dir or args.results.parent
    out_dir.mkdir(parents=True, exist_ok=True)

    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    print(f"Wrote {md_path}")

    for metric, title, ylabel in (
        ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes"),
        ("time_s", "Wall Time (lower is better)", "seconds"),
        ("cost", "Heat Loss (lower is better)", "cost"),
    ):
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        out = out_dir / f"{metric}.png"
        out.write_bytes(_png_bytes(fig))
        print(f"Wrote {out}")

    grid_info = data.get("grid")
    if grid_info:
        grid = CostGrid(grid_info["costs"])
        paths = {r["algo"]: [tuple(c) for c in r.get("path", [])]
                 for r in rows if r["algo"].startswith("Crucible")}
        out = out_dir / "routes.png"
        out.write_bytes(_png_bytes(plot_path(grid, paths)))
        print(f"Wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
