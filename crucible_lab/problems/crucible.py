# crucible_lab/problems/crucible.py
# The crucible as a lab Problem, so the generic searches and checks can run on the run-based state space.
from __future__ import annotations
from typing import Iterable, Optional

from ..algorithms.moves import generate_runs
from ..core.config import NORMAL_CRUCIBLE, RunBounds
from ..core.grid import Cell, CostGrid
from ..core.problem import Problem, Successor
from ..core.state import SearchState


class CrucibleProblem(Problem):
    """
    States are SearchState(cell, heading); the start has heading None.
    An action is (heading, run length); its cost is the heat lost along the run.
    """
    def __init__(self, grid: CostGrid, start: Optional[Cell] = None, target: Optional[Cell] = None,
                 bounds: RunBounds = NORMAL_CRUCIBLE):
        self.grid = grid
        self.start = grid.top_left if start is None else start
        self.goal = grid.bottom_right if target is None else target
        self.bounds = bounds

    def initial_state(self) -> SearchState:
        return SearchState(self.start, None)

    def is_goal(self, s: SearchState) -> bool:
        return s.cell == self.goal

    def successors(self, s: SearchState) -> Iterable[Successor]:
        for run in generate_runs(self.grid, s, self.bounds):
            yield (run.state.heading, run.length), run.state, run.cost

    def heuristic(self, s: SearchState) -> float:
        return 0.0
