# crucible_lab/algorithms/moves.py
# Move generator for the crucible: expands a state into every legal straight run that ends with a turn.
from __future__ import annotations
from typing import Iterator

from ..core.config import RunBounds
from ..core.directions import turns_from
from ..core.grid import CostGrid
from ..core.state import Run, SearchState


def generate_runs(grid: CostGrid, state: SearchState, bounds: RunBounds) -> Iterator[Run]:
    """
    Yield Run(next_state, length, cost) for each legal run out of `state`.

    - Only the two directions perpendicular to the incoming heading are walked
      (all four from the start sentinel), so going straight on and reversing
      are ruled out.
    - Each direction is walked one cell at a time for k = 1..max_run. The cost
      is the running sum of the cells entered, so a run of k+1 costs the run of
      k plus one more cell.
    - Stops shorter than min_run are waypoints: they are priced, not emitted.
    - The walk stops at the grid edge.

    The run length is not part of the state. Each expansion emits whole runs
    instead, so the state space is cells x headings.
    """
    x, y = state.cell
    lo, hi = bounds.min_run, bounds.max_run
    width, height = grid.width, grid.height
    rows = grid.rows

    for d in turns_from(state.heading):
        dx, dy = d.delta
        cost = 0
        cx, cy = x, y
        for k in range(1, hi + 1):
            cx += dx
            cy += dy
            if not (0 <= cx < width and 0 <= cy < height):
                break
            cost += rows[cy][cx]
            if k >= lo:
                yield Run(SearchState((cx, cy), d), k, cost)

