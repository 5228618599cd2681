from crucible_lab.algorithms.moves import generate_runs
from crucible_lab.core.config import RunBounds
from crucible_lab.core.directions import Direction
from crucible_lab.core.grid import CostGrid
from crucible_lab.core.state import Run, SearchState

D, R, U, L = Direction.DOWN, Direction.RIGHT, Direction.UP, Direction.LEFT

GRID = CostGrid.from_text("123\n456\n789")


def runs(state, lo, hi, grid=GRID):
    return list(generate_runs(grid, state, RunBounds(lo, hi)))


def test_start_walks_every_direction_and_stops_at_edges():
    got = runs(SearchState((0, 0), None), 1, 3)
    assert got == [
        Run(SearchState((0, 1), D), 1, 4),
        Run(SearchState((0, 2), D), 2, 11),
        Run(SearchState((1, 0), R), 1, 2),
        Run(SearchState((2, 0), R), 2, 5),
    ]


def test_short_stops_are_priced_but_not_emitted():
    got = runs(SearchState((0, 0), None), 2, 3)
    # the length-2 run still pays for the waypoint it passed
    assert got == [
        Run(SearchState((0, 2), D), 2, 11),
        Run(SearchState((2, 0), R), 2, 5),
    ]


def test_only_turns_after_a_horizontal_run():
    got = runs(SearchState((1, 1), R), 1, 1)
    assert got == [
        Run(SearchState((1, 2), D), 1, 8),
        Run(SearchState((1, 0), U), 1, 2),
    ]
    assert all(not r.state.heading.same_axis(R) for r in got)


def test_only_turns_after_a_vertical_run():
    got = runs(SearchState((1, 1), U), 1, 3)
    assert [r.state.cell for r in got] == [(2, 1), (0, 1)]
    assert [r.cost for r in got] == [6, 4]


def test_longer_run_cost_extends_shorter_run():
    grid = CostGrid.from_text("1" + "23456789" + "9")
    got = runs(SearchState((0, 0), None), 1, 9, grid)
    right = [r for r in got if r.state.heading is R]
    assert [r.length for r in right] == list(range(1, 10))
    for shorter, longer in zip(right, right[1:]):
        assert longer.cost == shorter.cost + grid.cost(longer.state.cell)


def test_min_run_longer_than_room_yields_nothing():
    assert runs(SearchState((0, 0), None), 3, 5) == []


def test_zero_max_run_yields_nothing():
    assert runs(SearchState((1, 1), None), 0, 0) == []


def test_branching_factor_is_bounded():
    grid = CostGrid([[1] * 30 for _ in range(30)])
    got = runs(SearchState((15, 15), L), 1, 10, grid)
    assert len(got) == 2 * 10


def test_states_with_different_headings_are_distinct():
    assert SearchState((1, 1), R) != SearchState((1, 1), U)
    assert len({SearchState((1, 1), R), SearchState((1, 1), U), SearchState((1, 1), None)}) == 3
