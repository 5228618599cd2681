# crucible_lab/core/state.py
from __future__ import annotations
from typing import NamedTuple

from .directions import Heading
from .grid import Cell


class SearchState(NamedTuple):
    """
    Unit of work in the crucible search: where we are AND how we got here.

    The same cell reached by a horizontal run and by a vertical run are two
    different nodes, since the next legal runs differ.
    """
    cell: Cell
    heading: Heading  # direction of the run that arrived here; None at the start

    def __repr__(self) -> str:
        h = "start" if self.heading is None else self.heading.name
        return f"SearchState({self.cell}, {h})"


class Run(NamedTuple):
    """One legal straight run: where it ends, how long it is, what it costs."""
    state: SearchState
    length: int
    cost: int
