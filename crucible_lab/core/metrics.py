# crucible_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import time, tracemalloc


@dataclass
class SearchResult:
    algo: str
    success: bool
    cost: Optional[int]                 # None = no path
    nodes_expanded: int
    time_s: float
    peak_kb: int
    path: List[Any] = field(default_factory=list)      # cells, start..target (when recorded)
    states: List[Any] = field(default_factory=list)    # search states, start..target (when recorded)
    error: Optional[str] = None

    def as_row(self) -> Dict[str, Any]:
        """Flat dict used by the benchmark JSON."""
        return {
            "algo": self.algo,
            "success": self.success,
            "cost": self.cost,
            "nodes_expanded": self.nodes_expanded,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "path_len": len(self.path),
            "error": self.error,
        }


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.

    Memory tracing is optional because tracemalloc slows the hot loop
    noticeably on full-size puzzle grids.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._trace_memory = trace_memory
        self._tracing: bool = False

    def __enter__(self) -> "MeasuredRun":
        # don't hijack an outer tracer (e.g. a profiler already running tracemalloc)
        if self._trace_memory and not tracemalloc.is_tracing():
            self._tracing = True
            tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
