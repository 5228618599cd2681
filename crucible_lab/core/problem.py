# Defines the interface every search problem in the lab exposes (states, successors, goals, heuristic).
# crucible_lab/core/problem.py
from __future__ import annotations
from typing import Hashable, Iterable, Protocol, Tuple

Action = Hashable
State = Hashable

# (action taken, resulting state, non-negative integer step cost)
Successor = Tuple[Action, State, int]


class Problem(Protocol):
    """Atomic state-space view of a search problem.

    SUCCESSORS bundles ACTIONS/RESULT/step-cost into one generator. A single run
    can then price every cell it crosses incrementally, instead of re-summing
    the run for each length.
    """
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def successors(self, s: State) -> Iterable[Successor]: ...
    # Optional heuristic for informed search; default 0
    def heuristic(self, s: State) -> float: return 0.0
