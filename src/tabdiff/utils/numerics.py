"""Numerical helpers shared by the derivative routines."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tabdiff.logger import tabdiff_logger

__all__ = [
    "undefined_result",
    "warn_if_not_finite",
    "relative_error",
]


def undefined_result(y: NDArray[np.floating], name: str) -> NDArray[np.floating]:
    """Returns the result for inputs too short to define a derivative.

    Args:
        y: Tabulated y values with fewer than two samples.
        name: Name of the calling routine, used in the log message.

    Returns:
        A new array of ``nan`` with the shape of ``y``.
    """
    tabdiff_logger.warning(
        "%s needs at least 2 samples; got %d. Returning nan.", name, y.shape[0]
    )
    return np.full(y.shape, np.nan, dtype=float)


def warn_if_not_finite(result: NDArray[np.floating], name: str) -> NDArray[np.floating]:
    """Logs a warning when ``result`` contains ``nan`` or ``inf`` values.

    The derivative routines do not reject repeated or decreasing x values;
    the resulting divisions by zero show up here instead.

    Args:
        result: Derivative estimates.
        name: Name of the calling routine, used in the log message.

    Returns:
        ``result`` unchanged.
    """
    bad = ~np.isfinite(result)
    if np.any(bad):
        tabdiff_logger.warning(
            "%s produced %d non-finite value(s); check that x is strictly increasing.",
            name,
            int(np.count_nonzero(bad)),
        )
    return result


def relative_error(a: ArrayLike, b: ArrayLike) -> float:
    """Computes the relative error metric between a and b.

    This metric is defined as the maximum over all components of a and b of
    the absolute difference divided by the maximum of 1.0 and the absolute values of
    a and b.

    Args:
        a: First array-like input.
        b: Second array-like input.

    Returns:
        The relative error metric as a float.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    denom = np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))
    return float(np.max(np.abs(a - b) / denom))
