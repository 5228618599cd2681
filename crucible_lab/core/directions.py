# crucible_lab/core/directions.py
from __future__ import annotations
from enum import IntEnum
from typing import Optional, Tuple


class Direction(IntEnum):
    """
    Compass directions on a (col, row) grid.

    Values alternate axes, so `value % 2` is the axis parity:
    LEFT/RIGHT are even (horizontal), UP/DOWN are odd (vertical).
    """
    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def is_horizontal(self) -> bool:
        return self % 2 == 0

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)

    def same_axis(self, other: "Direction") -> bool:
        return self % 2 == other % 2


Heading = Optional[Direction]  # None = no run taken yet (start state)

_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
}

# Walk order used by the move generator.
ALL_DIRECTIONS: Tuple[Direction, ...] = (Direction.DOWN, Direction.RIGHT, Direction.UP, Direction.LEFT)


def turns_from(heading: Heading) -> Tuple[Direction, ...]:
    """Directions a new run may take after arriving with `heading`.

    Continuing straight and reversing are both same-axis, so only the two
    perpendicular directions remain. The start sentinel allows all four.
    """
    if heading is None:
        return ALL_DIRECTIONS
    return tuple(d for d in ALL_DIRECTIONS if not d.same_axis(heading))
