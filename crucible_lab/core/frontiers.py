# crucible_lab/core/frontiers.py
from __future__ import annotations
import heapq
from collections import deque


class FIFOQueue:
    def __init__(self):
        self.q = deque()
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)
    def peek(self): return self.q[0]


class PriorityQueue:
    """Min-heap by key(x). Equal keys pop in insertion order."""
    def __init__(self, key=None):
        self.key = key
        self.h = []
        self.counter = 0  # tie-breaker for stability

    def push(self, x, priority=None):
        if priority is None:
            priority = self.key(x)
        self.counter += 1
        heapq.heappush(self.h, (priority, self.counter, x))

    def pop(self):
        return heapq.heappop(self.h)[2]

    def pop_with_priority(self):
        priority, _, x = heapq.heappop(self.h)
        return priority, x

    def min_key(self):
        return self.h[0][0]

    def __len__(self): return len(self.h)

    def peek(self):
        return self.h[0][2]
