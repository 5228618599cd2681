# crucible_lab/plots/plotting.py
# Static diagnostics: the heat-loss map with routes drawn on top, and a side-by-side comparison of runs.
# Nothing here feeds back into the search; the figures are only for looking at results.
from __future__ import annotations
from typing import Dict, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..core.grid import Cell, CostGrid


def plot_path(grid: CostGrid, paths: Dict[str, Sequence[Cell]], title: str = "Crucible routes", ax=None):
    """Heatmap of cell costs (green=cheap, red=expensive) with one polyline per route.

    Routes are offset slightly from each other so overlapping legs stay visible.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(max(4, grid.width * 0.4), max(4, grid.height * 0.4)))
    else:
        fig = ax.figure
    ax.imshow(grid.array, cmap="RdYlGn_r", interpolation="nearest")

    n = max(1, len(paths))
    offsets = np.linspace(-0.2, 0.2, n) if n > 1 else [0.0]
    for (label, cells), off in zip(paths.items(), offsets):
        if not cells:
            continue
        xs = [c[0] + off for c in cells]
        ys = [c[1] + off for c in cells]
        ax.plot(xs, ys, linewidth=2, label=label)
    if paths:
        ax.legend(loc="upper right", fontsize=8)
    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])
    fig.tight_layout()
    return fig


def bar_compare(results, title: str = "Search Comparison"):
    names = [r.algo for r in results]
    nodes = [r.nodes_expanded for r in results]
    costs = [_num(r.cost) for r in results]
    times = [r.time_s for r in results]
    mems  = [r.peak_kb or 0 for r in results]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    axs[0].bar(names, nodes); axs[0].set_title("Nodes Expanded"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, costs); axs[1].set_title("Path Cost"); axs[1].tick_params(axis='x', rotation=45)
    axs[2].bar(names, times); axs[2].set_title("Time (s)"); axs[2].tick_params(axis='x', rotation=45)
    axs[3].bar(names, mems); axs[3].set_title("Peak Memory (KB)"); axs[3].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig


def _num(v: Optional[int]) -> float:
    # no-path runs show as an empty bar rather than breaking the axis
    return 0.0 if v is None else float(v)
