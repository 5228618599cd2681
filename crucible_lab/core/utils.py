# crucible_lab/core/utils.py
# Path reconstruction helpers: from a goal Node (tree search) or from a predecessor map (graph search).
from __future__ import annotations
from typing import Dict, Hashable, List, Tuple

from .node import Node


def reconstruct_path(node: Node) -> Tuple[List, int]:
    actions = []
    cost = node.path_cost
    cur = node
    while cur.parent is not None:
        actions.append(cur.action)
        cur = cur.parent
    actions.reverse()
    return actions, cost


def node_states(node: Node) -> List:
    """States from the root down to `node`."""
    states = []
    cur = node
    while cur is not None:
        states.append(cur.state)
        cur = cur.parent
    states.reverse()
    return states


def walk_predecessors(pred: Dict[Hashable, Hashable], end: Hashable) -> List:
    """Follow pred[...] back from `end` until a state with no predecessor; return root..end."""
    chain = [end]
    cur = end
    seen = {end}
    while cur in pred:
        cur = pred[cur]
        if cur in seen:
            raise RuntimeError(f"predecessor cycle at {cur!r}")
        seen.add(cur)
        chain.append(cur)
    chain.reverse()
    return chain
