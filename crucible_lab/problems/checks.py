# crucible_lab/problems/checks.py
from __future__ import annotations
from ..core.frontiers import FIFOQueue


def sanity_check_problem(problem, max_states: int = 10_000):
    """Walks states breadth-first and checks every step cost is a non-negative int."""
    seen = set()
    q = FIFOQueue()
    q.push(problem.initial_state())
    steps = 0
    while q and steps < max_states:
        s = q.pop()
        if s in seen:
            continue
        seen.add(s)
        for a, s2, cost in problem.successors(s):
            if cost is None or isinstance(cost, bool) or not isinstance(cost, int):
                raise AssertionError(f"step cost {cost!r} is not an int for (s={s}, a={a}, s'={s2})")
            if cost < 0:
                raise AssertionError(f"negative step cost {cost} for (s={s}, a={a}, s'={s2})")
            q.push(s2)
        steps += 1
    return f"OK: visited {len(seen)} states; all step costs are non-negative ints."
