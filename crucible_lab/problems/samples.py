# crucible_lab/problems/samples.py
# Small ready-made grids for the runners, plots and tests.
from __future__ import annotations

from ..core.grid import CostGrid

# 13x13 reference city: 102 with runs 1..3, 94 with runs 4..10.
REFERENCE_TEXT = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""

# 12x5 grid where an ultra crucible (runs 4..10) has to take the long way round: 71.
ULTRA_TEXT = """\
111111111111
999999999991
999999999991
999999999991
999999999991
"""

# 1x3 corridor: no room to turn, so the far end is reachable only by one run of length 2.
CORRIDOR_TEXT = "123\n"


def reference_grid() -> CostGrid:
    return CostGrid.from_text(REFERENCE_TEXT)


def ultra_grid() -> CostGrid:
    return CostGrid.from_text(ULTRA_TEXT)


def corridor_grid() -> CostGrid:
    return CostGrid.from_text(CORRIDOR_TEXT)


SAMPLES = {
    "reference": reference_grid,
    "ultra": ultra_grid,
    "corridor": corridor_grid,
}
