# crucible_lab/problems/grid.py
from __future__ import annotations
from typing import Iterable, Optional

from ..core.grid import Cell, CostGrid
from ..core.problem import Problem, Successor

_MOVES = {
    "Up": (0, -1),
    "Down": (0, 1),
    "Left": (-1, 0),
    "Right": (1, 0),
}


class WeightedGridProblem(Problem):
    """
    Free 4-neighbour movement over a CostGrid; the unconstrained baseline.

    - State: (col, row) tuple
    - SUCCESSORS(s): in-bounds neighbours, each priced at the cost of the cell entered
    - IS-GOAL(s): s == target
    - heuristic(s): Manhattan distance x cheapest cell (admissible)
    """
    def __init__(self, grid: CostGrid, start: Optional[Cell] = None, target: Optional[Cell] = None):
        self.grid = grid
        self._start = grid.top_left if start is None else start
        self._goal = grid.bottom_right if target is None else target
        self._min_cost = int(grid.array.min())

    def initial_state(self) -> Cell:
        return self._start

    def is_goal(self, state: Cell) -> bool:
        return state == self._goal

    def successors(self, state: Cell) -> Iterable[Successor]:
        x, y = state
        for name, (dx, dy) in _MOVES.items():
            nxt = (x + dx, y + dy)
            if self.grid.in_bounds(nxt):
                yield name, nxt, self.grid.cost(nxt)

    def heuristic(self, state: Cell) -> float:
        x, y = state
        gx, gy = self._goal
        return (abs(x - gx) + abs(y - gy)) * self._min_cost
