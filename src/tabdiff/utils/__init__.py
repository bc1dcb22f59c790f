"""Utility functions for the tabdiff package."""

from .validate import (
    LengthMismatchError,
    as_xy_arrays,
    validate_min_length,
    validate_strictly_increasing,
    validate_xy_lengths,
)

__all__ = [
    "LengthMismatchError",
    "as_xy_arrays",
    "validate_xy_lengths",
    "validate_strictly_increasing",
    "validate_min_length",
]
