"""Validation utilities for tabulated samples."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

__all__ = [
    "LengthMismatchError",
    "as_xy_arrays",
    "validate_xy_lengths",
    "validate_strictly_increasing",
    "validate_min_length",
]


class LengthMismatchError(ValueError):
    """Raised when the x and y samples do not have the same length."""


def validate_xy_lengths(x: NDArray[np.floating], y: NDArray[np.floating]) -> None:
    """Checks that ``x`` and ``y`` hold the same number of samples.

    This is the only check the derivative routines themselves perform.

    Args:
        x: 1D array of x values.
        y: Array of y values whose first axis indexes the samples.

    Raises:
        LengthMismatchError: If ``len(x) != len(y)``.
    """
    nx = x.shape[0]
    ny = y.shape[0]
    if nx != ny:
        raise LengthMismatchError(
            f"x and y must have the same length; got {nx} and {ny}."
        )


def as_xy_arrays(
    x: ArrayLike,
    y: ArrayLike,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """Converts tabulated ``x`` and ``y`` into float arrays and checks their lengths.

    ``y`` may carry trailing dimensions; the first axis must match ``x``.
    Neither the ordering of ``x`` nor the number of samples is checked here
    (see :func:`validate_strictly_increasing` and :func:`validate_min_length`).

    Args:
        x: 1D array-like of x values.
        y: Array-like of y values with ``y.shape[0] == len(x)``.

    Returns:
        Tuple of (x_array, y_array) as NumPy float arrays.

    Raises:
        ValueError: If ``x`` is not 1D or ``y`` is a scalar.
        LengthMismatchError: If the lengths of ``x`` and ``y`` differ.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)

    if x_arr.ndim != 1:
        raise ValueError("x must be 1D.")
    if y_arr.ndim < 1:
        raise ValueError("y must be at least 1D.")
    validate_xy_lengths(x_arr, y_arr)

    return x_arr, y_arr


def validate_strictly_increasing(x: ArrayLike) -> NDArray[np.floating]:
    """Validates that ``x`` is strictly increasing.

    Args:
        x: 1D array-like of x values.

    Returns:
        ``x`` as a NumPy float array.

    Raises:
        ValueError: If any consecutive pair of samples is not increasing.
    """
    x_arr = np.asarray(x, dtype=float)
    steps = np.diff(x_arr)
    if not np.all(steps > 0):
        bad = int(np.flatnonzero(~(steps > 0))[0])
        raise ValueError(
            "x must be strictly increasing; "
            f"x[{bad}]={x_arr[bad]!r} is followed by x[{bad + 1}]={x_arr[bad + 1]!r}."
        )
    return x_arr


def validate_min_length(x: ArrayLike, min_length: int = 2) -> NDArray[np.floating]:
    """Validates that ``x`` holds at least ``min_length`` samples.

    Args:
        x: 1D array-like of x values.
        min_length: Smallest accepted number of samples. Default is 2,
            the fewest that defines a difference.

    Returns:
        ``x`` as a NumPy float array.

    Raises:
        ValueError: If ``x`` has fewer than ``min_length`` samples.
    """
    x_arr = np.asarray(x, dtype=float)
    if x_arr.shape[0] < min_length:
        raise ValueError(
            f"at least {min_length} samples are required; got {x_arr.shape[0]}."
        )
    return x_arr
