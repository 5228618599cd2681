# crucible_lab/core/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidBoundsError


@dataclass(frozen=True)
class RunBounds:
    """Inclusive limits on the length of a straight run before a turn."""
    min_run: int
    max_run: int

    def __post_init__(self) -> None:
        for name in ("min_run", "max_run"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidBoundsError(f"{name} must be an int, got {v!r}")
            if v < 0:
                raise InvalidBoundsError(f"{name} must be >= 0, got {v}")
        if self.min_run > self.max_run:
            raise InvalidBoundsError(
                f"min_run ({self.min_run}) must not exceed max_run ({self.max_run})"
            )

    @property
    def label(self) -> str:
        return f"runs {self.min_run}..{self.max_run}"


# The two crucible flavours: same engine, different bounds.
NORMAL_CRUCIBLE = RunBounds(1, 3)
ULTRA_CRUCIBLE = RunBounds(4, 10)

PRESETS = {
    "normal": NORMAL_CRUCIBLE,
    "ultra": ULTRA_CRUCIBLE,
}


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidBoundsError(f"{name}={raw!r} is not an integer") from None


def bounds_from_env(default: RunBounds = NORMAL_CRUCIBLE) -> RunBounds:
    """Apply CRUCIBLE_MIN_RUN / CRUCIBLE_MAX_RUN overrides on top of `default`."""
    lo = _env_int("CRUCIBLE_MIN_RUN")
    hi = _env_int("CRUCIBLE_MAX_RUN")
    return RunBounds(
        default.min_run if lo is None else lo,
        default.max_run if hi is None else hi,
    )


def env_bounds() -> Optional[RunBounds]:
    """Bounds from the environment, or None when neither variable is set."""
    if _env_int("CRUCIBLE_MIN_RUN") is None and _env_int("CRUCIBLE_MAX_RUN") is None:
        return None
    return bounds_from_env()
