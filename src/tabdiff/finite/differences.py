"""First derivatives of tabulated samples by finite differences.

Both routines take the x and y samples of a function and return one
derivative estimate per sample:

* :func:`forwarddiff` uses each sample and its successor. The last sample
  has no successor and repeats the slope of the final interval.
* :func:`centraldiff` uses the two neighbours of each interior sample and
  falls back to the one-sided slope at the two ends. It is second-order
  accurate on uniform grids and is the recommended default.

``y`` may carry trailing dimensions, in which case every component is
differentiated along the sample axis.

Examples:
--------
>>> import numpy as np
>>> from tabdiff.finite.differences import centraldiff, forwarddiff
>>> x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
>>> y = x**2
>>> forwarddiff(x, y)
array([1., 3., 5., 7., 7.])
>>> centraldiff(x, y)
array([1., 2., 4., 6., 7.])
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tabdiff.utils.numerics import undefined_result, warn_if_not_finite
from tabdiff.utils.validate import as_xy_arrays

__all__ = [
    "forwarddiff",
    "centraldiff",
    "Derivative1",
]


def _per_sample(dx: NDArray[np.floating], ndim: int) -> NDArray[np.floating]:
    """Reshapes x spacings so they broadcast against y of dimension ``ndim``."""
    return dx.reshape((-1,) + (1,) * (ndim - 1))


def _interval_slopes(
    x: NDArray[np.floating],
    y: NDArray[np.floating],
) -> NDArray[np.floating]:
    """Returns ``(y[i+1] - y[i]) / (x[i+1] - x[i])`` for every interval."""
    return np.diff(y, axis=0) / _per_sample(np.diff(x), y.ndim)


def forwarddiff(x: ArrayLike, y: ArrayLike) -> NDArray[np.floating]:
    """Computes first derivatives with the forward difference approximation.

    Args:
        x: Abscissae of the samples, shape ``(N,)``. Expected to be strictly
            increasing; this is not checked.
        y: Ordinates of the samples, shape ``(N,)`` or ``(N, ...)``.

    Returns:
        A new array with the shape of ``y``. Entry ``i < N-1`` is the slope
        of the interval ``[x[i], x[i+1]]`` and entry ``N-1`` repeats the
        slope of the last interval.

    Raises:
        LengthMismatchError: If ``x`` and ``y`` have different lengths.
    """
    x_arr, y_arr = as_xy_arrays(x, y)
    if x_arr.shape[0] < 2:
        return undefined_result(y_arr, "forwarddiff")

    with np.errstate(divide="ignore", invalid="ignore"):
        slopes = _interval_slopes(x_arr, y_arr)

    dydx = np.empty_like(y_arr)
    dydx[:-1] = slopes
    dydx[-1] = slopes[-1]
    return warn_if_not_finite(dydx, "forwarddiff")


def centraldiff(x: ArrayLike, y: ArrayLike) -> NDArray[np.floating]:
    """Computes first derivatives with the three-point central difference.

    Interior samples use ``(y[i+1] - y[i-1]) / (x[i+1] - x[i-1])``. The first
    and last samples use the slope of their single adjacent interval.

    Args:
        x: Abscissae of the samples, shape ``(N,)``. Expected to be strictly
            increasing; this is not checked.
        y: Ordinates of the samples, shape ``(N,)`` or ``(N, ...)``.

    Returns:
        A new array with the shape of ``y``.

    Raises:
        LengthMismatchError: If ``x`` and ``y`` have different lengths.
    """
    x_arr, y_arr = as_xy_arrays(x, y)
    if x_arr.shape[0] < 2:
        return undefined_result(y_arr, "centraldiff")

    dydx = np.empty_like(y_arr)
    with np.errstate(divide="ignore", invalid="ignore"):
        slopes = _interval_slopes(x_arr, y_arr)
        dydx[0] = slopes[0]
        dydx[-1] = slopes[-1]
        if x_arr.shape[0] > 2:
            dydx[1:-1] = (y_arr[2:] - y_arr[:-2]) / _per_sample(
                x_arr[2:] - x_arr[:-2], y_arr.ndim
            )
    return warn_if_not_finite(dydx, "centraldiff")


# Older name for centraldiff.
Derivative1 = centraldiff
