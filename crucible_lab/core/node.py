# crucible_lab/core/node.py
# Search-tree node: a state plus the bookkeeping needed to rebuild how we got there.
from __future__ import annotations
from typing import Iterator, Optional

from .problem import Action, Problem, State


class Node:
    __slots__ = ("state", "parent", "action", "path_cost", "depth")

    def __init__(self, state: State, parent: Optional["Node"] = None, action: Action = None,
                 path_cost: int = 0, depth: int = 0):
        self.state = state
        self.parent = parent
        self.action = action
        self.path_cost = path_cost
        self.depth = depth

    def expand(self, problem: Problem) -> Iterator["Node"]:
        """Generate child Nodes from SUCCESSORS(s)."""
        s = self.state
        for a, s2, cost in problem.successors(s):
            if cost is None or cost < 0:
                raise ValueError(
                    f"successors produced an invalid step cost {cost!r} for (s={s!r}, a={a!r}, s'={s2!r}). "
                    "Costs must be non-negative."
                )
            yield Node(
                state=s2,
                parent=self,
                action=a,
                path_cost=self.path_cost + cost,
                depth=self.depth + 1,
            )

    def __repr__(self) -> str:
        return f"<Node {self.state!r} g={self.path_cost}>"
