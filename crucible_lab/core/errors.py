# crucible_lab/core/errors.py
# Precondition failures raised before any search work starts.
# An unreachable target is not an error: searches report it as "no path" (None).
from __future__ import annotations


class InvalidInput(ValueError):
    """Base class for every rejected grid, coordinate or bound."""


class MalformedGridError(InvalidInput):
    """Empty, jagged or non-numeric grid."""


class InvalidCoordinateError(InvalidInput):
    """Start or target outside the grid."""


class InvalidBoundsError(InvalidInput):
    """Negative run bounds, or min_run > max_run."""
