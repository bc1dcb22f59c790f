"""Second derivatives of tabulated samples from a cubic spline.

The cubic spline through the samples has a continuous second derivative.
Requiring continuity of the first derivative at every interior knot gives a
tridiagonal system for the second derivatives at the knots, which is solved
here in linear time by forward elimination and back substitution.

The two end conditions are chosen per end:

* natural: the second derivative vanishes at the end,
* clamped: the first derivative at the end equals a supplied value
  (``yp0`` at the start, ``ypn`` at the end).

Examples:
--------
>>> import numpy as np
>>> from tabdiff.spline.second_derivative import seconddx
>>> x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
>>> y = x**2
>>> np.allclose(seconddx(x, y, yp0=0.0, ypn=8.0), 2.0)
True
>>> d2 = seconddx(x, y)  # natural ends
>>> float(d2[0]), float(d2[-1])
(0.0, 0.0)
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tabdiff.utils.numerics import undefined_result, warn_if_not_finite
from tabdiff.utils.types import BoundarySlope
from tabdiff.utils.validate import as_xy_arrays

__all__ = [
    "seconddx",
    "Derivative2",
]


def _start_condition(
    x: NDArray[np.floating],
    y: NDArray[np.floating],
    yp0: BoundarySlope,
) -> tuple[float, NDArray[np.floating] | float]:
    """Returns the first row of the eliminated system for the chosen start condition."""
    if yp0 is None:
        return 0.0, 0.0
    h = x[1] - x[0]
    return -0.5, (3.0 / h) * ((y[1] - y[0]) / h - np.asarray(yp0, dtype=float))


def _end_condition(
    x: NDArray[np.floating],
    y: NDArray[np.floating],
    ypn: BoundarySlope,
) -> tuple[float, NDArray[np.floating] | float]:
    """Returns ``(qn, un)`` for the chosen end condition."""
    if ypn is None:
        return 0.0, 0.0
    h = x[-1] - x[-2]
    return 0.5, (3.0 / h) * (np.asarray(ypn, dtype=float) - (y[-1] - y[-2]) / h)


def seconddx(
    x: ArrayLike,
    y: ArrayLike,
    yp0: BoundarySlope = None,
    ypn: BoundarySlope = None,
) -> NDArray[np.floating]:
    """Computes second derivatives at the samples from the interpolating cubic spline.

    Args:
        x: Abscissae of the samples, shape ``(N,)``. Expected to be strictly
            increasing; this is not checked.
        y: Ordinates of the samples, shape ``(N,)`` or ``(N, ...)``.
        yp0: First derivative at ``x[0]``. If ``None`` (default), the natural
            condition is used at the start. For ``y`` with trailing
            dimensions, a scalar or an array broadcastable to ``y.shape[1:]``.
        ypn: First derivative at ``x[-1]``, with the same conventions as
            ``yp0``.

    Returns:
        A new array with the shape of ``y`` holding the spline's second
        derivative at every sample.

    Raises:
        LengthMismatchError: If ``x`` and ``y`` have different lengths.
    """
    x_arr, y_arr = as_xy_arrays(x, y)
    n = x_arr.shape[0]
    if n < 2:
        return undefined_result(y_arr, "seconddx")

    last = n - 1
    # diag[i] is the coefficient of d2[i+1] once row i has been eliminated.
    diag = np.empty(n, dtype=float)
    u = np.empty_like(y_arr)
    d2 = np.empty_like(y_arr)

    with np.errstate(divide="ignore", invalid="ignore"):
        diag[0], u[0] = _start_condition(x_arr, y_arr, yp0)

        for i in range(1, last):
            span = x_arr[i + 1] - x_arr[i - 1]
            sig = (x_arr[i] - x_arr[i - 1]) / span
            p = sig * diag[i - 1] + 2.0
            diag[i] = (sig - 1.0) / p
            right = (y_arr[i + 1] - y_arr[i]) / (x_arr[i + 1] - x_arr[i])
            left = (y_arr[i] - y_arr[i - 1]) / (x_arr[i] - x_arr[i - 1])
            u[i] = (6.0 * (right - left) / span - sig * u[i - 1]) / p

        qn, un = _end_condition(x_arr, y_arr, ypn)
        d2[last] = (un - qn * u[last - 1]) / (qn * diag[last - 1] + 1.0)

        for i in range(last - 1, -1, -1):
            d2[i] = diag[i] * d2[i + 1] + u[i]

    return warn_if_not_finite(d2, "seconddx")


# Older name for seconddx.
Derivative2 = seconddx
