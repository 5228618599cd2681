# crucible_lab/algorithms/crucible.py
# Dijkstra over (cell, heading) states, expanded run-by-run by the move generator.
from __future__ import annotations
from numbers import Integral
from typing import Dict, List, Optional, Sequence

from ..core.config import NORMAL_CRUCIBLE, RunBounds
from ..core.errors import InvalidCoordinateError
from ..core.frontiers import PriorityQueue
from ..core.grid import Cell, CostGrid
from ..core.metrics import MeasuredRun, SearchResult
from ..core.state import SearchState
from ..core.utils import walk_predecessors
from .moves import generate_runs


def find_shortest_path(grid: CostGrid, start: Cell, target: Cell, min_run: int, max_run: int) -> Optional[int]:
    """
    Minimum heat loss from `start` to `target` when every straight run must be
    min_run..max_run cells long before turning.

    Returns None when no run sequence reaches the target. Raises InvalidInput
    (InvalidBoundsError / InvalidCoordinateError) for bad arguments.
    """
    bounds = RunBounds(min_run, max_run)
    start = _checked_cell("start", start, grid)
    target = _checked_cell("target", target, grid)
    return crucible_search(grid, start, target, bounds, trace_memory=False).cost


def crucible_search(
    grid: CostGrid,
    start: Optional[Cell] = None,
    target: Optional[Cell] = None,
    bounds: RunBounds = NORMAL_CRUCIBLE,
    record_path: bool = False,
    early_exit: bool = True,
    trace_memory: bool = True,
) -> SearchResult:
    """
    Instrumented crucible search. `start`/`target` default to the top-left and
    bottom-right corners.

    Every target state popped is a candidate answer. The target can be entered
    with several headings, each its own node, so the answer is the cheapest of
    them. Relaxations that cannot beat the best candidate so far are pruned.
    With `early_exit` the loop stops once the cheapest queued entry can no
    longer improve on the best candidate. Without it the frontier is drained.
    Either way the cost is the same.

    With `record_path`, each state's best predecessor is kept and the result
    carries the state chain (`states`) and the cell-by-cell route (`path`).
    """
    name = f"Crucible({bounds.min_run}..{bounds.max_run})"
    start = _checked_cell("start", grid.top_left if start is None else start, grid)
    target = _checked_cell("target", grid.bottom_right if target is None else target, grid)

    initial = SearchState(start, None)
    best: Dict[SearchState, int] = {initial: 0}
    pred: Optional[Dict[SearchState, SearchState]] = {} if record_path else None

    frontier = PriorityQueue()
    frontier.push(initial, priority=0)

    best_answer: Optional[int] = None
    best_end: Optional[SearchState] = None
    expanded = 0

    with MeasuredRun(trace_memory=trace_memory) as meter:
        while frontier:
            cost, s = frontier.pop_with_priority()
            if early_exit and best_answer is not None and cost >= best_answer:
                break
            if cost > best[s]:
                continue  # stale: a cheaper copy of s was already expanded

            if s.cell == target:
                if best_answer is None or cost < best_answer:
                    best_answer, best_end = cost, s
                continue

            expanded += 1
            for run in generate_runs(grid, s, bounds):
                c2 = cost + run.cost
                if best_answer is not None and c2 >= best_answer:
                    continue
                s2 = run.state
                prev = best.get(s2)
                if prev is None or c2 < prev:
                    best[s2] = c2
                    frontier.push(s2, priority=c2)
                    if pred is not None:
                        pred[s2] = s

    if best_end is None:
        return SearchResult(name, False, None, expanded, meter.elapsed, meter.peak_kb)

    states: List[SearchState] = []
    path: List[Cell] = []
    if pred is not None:
        states = walk_predecessors(pred, best_end)
        path = cells_along(states)
    return SearchResult(name, True, best_answer, expanded, meter.elapsed, meter.peak_kb,
                        path=path, states=states)


def cells_along(states: Sequence[SearchState]) -> List[Cell]:
    """Unfold a chain of run end-points into every cell visited, start included."""
    if not states:
        return []
    cells = [states[0].cell]
    for s in states[1:]:
        dx, dy = s.heading.delta
        x, y = cells[-1]
        while (x, y) != s.cell:
            x, y = x + dx, y + dy
            cells.append((x, y))
    return cells


def path_cost(grid: CostGrid, cells: Sequence[Cell]) -> int:
    """Entry cost of a cell route (the first cell is free)."""
    return sum(grid.cost(c) for c in cells[1:])


def _checked_cell(label: str, cell, grid: CostGrid) -> Cell:
    try:
        x, y = cell
    except (TypeError, ValueError):
        raise InvalidCoordinateError(f"{label} must be a (col, row) pair, got {cell!r}") from None
    if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, Integral) or not isinstance(y, Integral):
        raise InvalidCoordinateError(f"{label} must hold ints, got {cell!r}")
    x, y = int(x), int(y)
    if not grid.in_bounds((x, y)):
        raise InvalidCoordinateError(f"{label} {cell!r} is outside the {grid.width}x{grid.height} grid")
    return (x, y)
