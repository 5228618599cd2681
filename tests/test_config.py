import pytest

from crucible_lab.core.config import (
    NORMAL_CRUCIBLE,
    ULTRA_CRUCIBLE,
    RunBounds,
    bounds_from_env,
    env_bounds,
)
from crucible_lab.core.directions import ALL_DIRECTIONS, Direction, turns_from
from crucible_lab.core.errors import InvalidBoundsError, InvalidInput


def test_presets():
    assert NORMAL_CRUCIBLE == RunBounds(1, 3)
    assert ULTRA_CRUCIBLE == RunBounds(4, 10)
    assert NORMAL_CRUCIBLE.label == "runs 1..3"


@pytest.mark.parametrize("lo,hi", [(3, 1), (-1, 3), (0, -1), (True, 3), (1.0, 3)])
def test_bad_bounds_rejected(lo, hi):
    with pytest.raises(InvalidBoundsError):
        RunBounds(lo, hi)


def test_bounds_error_is_invalid_input():
    with pytest.raises(InvalidInput):
        RunBounds(5, 4)


def test_zero_bounds_are_legal():
    b = RunBounds(0, 0)
    assert (b.min_run, b.max_run) == (0, 0)


def test_env_overrides(monkeypatch):
    assert env_bounds() is None
    assert bounds_from_env() == NORMAL_CRUCIBLE

    monkeypatch.setenv("CRUCIBLE_MIN_RUN", "2")
    assert bounds_from_env() == RunBounds(2, 3)
    assert env_bounds() == RunBounds(2, 3)

    monkeypatch.setenv("CRUCIBLE_MAX_RUN", "7")
    assert bounds_from_env(ULTRA_CRUCIBLE) == RunBounds(2, 7)


def test_env_override_must_be_an_int(monkeypatch):
    monkeypatch.setenv("CRUCIBLE_MAX_RUN", "lots")
    with pytest.raises(InvalidBoundsError):
        bounds_from_env()


def test_axis_parity():
    assert Direction.LEFT.same_axis(Direction.RIGHT)
    assert Direction.UP.same_axis(Direction.DOWN)
    assert not Direction.LEFT.same_axis(Direction.UP)
    assert Direction.LEFT.is_horizontal and not Direction.DOWN.is_horizontal
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.RIGHT.opposite is Direction.LEFT


def test_deltas_are_col_row():
    assert Direction.RIGHT.delta == (1, 0)
    assert Direction.DOWN.delta == (0, 1)
    assert Direction.LEFT.delta == (-1, 0)
    assert Direction.UP.delta == (0, -1)


def test_turns_are_perpendicular_only():
    assert turns_from(Direction.LEFT) == (Direction.DOWN, Direction.UP)
    assert turns_from(Direction.RIGHT) == (Direction.DOWN, Direction.UP)
    assert turns_from(Direction.UP) == (Direction.RIGHT, Direction.LEFT)
    assert turns_from(Direction.DOWN) == (Direction.RIGHT, Direction.LEFT)


def test_start_sentinel_allows_every_direction():
    assert set(turns_from(None)) == set(Direction)
    assert turns_from(None) == ALL_DIRECTIONS
