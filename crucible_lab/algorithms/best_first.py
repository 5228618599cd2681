# crucible_lab/algorithms/best_first.py
from __future__ import annotations
from typing import Callable, Optional
from ..core.frontiers import PriorityQueue
from ..core.node import Node
from ..core.metrics import SearchResult, MeasuredRun
from ..core.utils import node_states, reconstruct_path
from ..core.problem import Problem


def best_first_search(
    problem: Problem,
    f: Callable[[Node], float],
    name: str = "BestFirst",
    h: Optional[Callable[[Node], float]] = None,
    max_expansions: Optional[int] = None,
    trace_memory: bool = True,
) -> SearchResult:
    root = Node(problem.initial_state())

    def fscore(n: Node) -> float:
        base = f(n)
        if h is None:
            return base
        hv = h(n)
        return base + (0 if hv is None else hv)

    frontier = PriorityQueue(key=fscore)
    frontier.push(root)

    reached = {root.state: root}
    expanded = 0

    def _done(node: Node) -> SearchResult:
        _, cost = reconstruct_path(node)
        states = node_states(node)
        return SearchResult(name, True, cost, expanded, meter.elapsed, meter.peak_kb,
                            path=[getattr(s, "cell", s) for s in states], states=states)

    with MeasuredRun(trace_memory=trace_memory) as meter:
        while frontier:
            # expansion cap
            if max_expansions is not None and expanded >= max_expansions:
                return SearchResult(name, False, None, expanded, meter.elapsed, meter.peak_kb,
                                    error=f"expansion cap {max_expansions} hit")

            node = frontier.pop()
            if node is not reached.get(node.state):
                continue  # superseded by a cheaper copy
            if problem.is_goal(node.state):
                return _done(node)

            expanded += 1
            for child in node.expand(problem):
                prev = reached.get(child.state)
                if prev is None or child.path_cost < prev.path_cost:
                    reached[child.state] = child
                    frontier.push(child)

    return SearchResult(name, False, None, expanded, meter.elapsed, meter.peak_kb)
