"""Provides the TabulatedDerivativeKit API.

This class is a lightweight front end over the tabdiff derivative routines.
You provide the tabulated samples once, then choose a routine by name (e.g.,
``"central"``, ``"forward"`` or ``"second"``).

Two common entry points are:

* Direct construction with ``(x, y)`` arrays of shape ``(N,)`` and ``(N, ...)``.
* :meth:`TabulatedDerivativeKit.from_table` for simple 2D tables containing x
  and one or more y components in columns.

Examples:
    >>> import numpy as np
    >>> from tabdiff.tabulated_kit import TabulatedDerivativeKit
    >>> x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    >>> kit = TabulatedDerivativeKit(x, x**2)
    >>> kit.differentiate()  # central differences
    array([1., 2., 4., 6., 7.])
    >>> kit.differentiate(method="forward")
    array([1., 3., 5., 7., 7.])
    >>> np.allclose(kit.differentiate(method="second", yp0=0.0, ypn=8.0), 2.0)
    True
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tabdiff.derivative_table import resolve_method
from tabdiff.logger import tabdiff_logger
from tabdiff.utils.validate import (
    as_xy_arrays,
    validate_min_length,
    validate_strictly_increasing,
)

__all__ = ["TabulatedDerivativeKit", "parse_xy_table"]


class TabulatedDerivativeKit:
    """Unified interface for derivatives of tabulated samples.

    Here ``x`` is a one-dimensional grid of length ``N``, and the first
    dimension of ``y`` must also have length ``N``. All remaining
    dimensions of ``y`` are treated as independent components.

    Attributes:
        x: Tabulated x grid.
        y: Tabulated y values with shape ``(N,)`` or ``(N, ...)``.
        strict: Whether the samples were checked for ordering and length.
        default_method: The routine used when no method is specified.
    """

    def __init__(self, x: ArrayLike, y: ArrayLike, *, strict: bool = False) -> None:
        """Initializes the kit with tabulated samples.

        Args:
            x: Tabulated x values with shape ``(N,)``.
            y: Tabulated y values with shape ``(N,)`` or ``(N, ...)``.
            strict: If True, also require at least two samples and a strictly
                increasing ``x``. Default is False, which only checks the
                lengths and leaves degenerate samples to show up as ``nan``
                or ``inf`` in the results.

        Raises:
            LengthMismatchError: If ``x`` and ``y`` have different lengths.
            ValueError: If ``strict`` is True and the samples are too few or
                not strictly increasing.
        """
        x_arr, y_arr = as_xy_arrays(x, y)
        if strict:
            validate_min_length(x_arr)
            validate_strictly_increasing(x_arr)

        self.x = x_arr
        self.y = y_arr
        self.strict = strict
        self.default_method = "central"

    @classmethod
    def from_table(cls, table: ArrayLike, *, strict: bool = False) -> TabulatedDerivativeKit:
        """Creates a kit from a simple 2D ``(x, y)`` table.

        Args:
            table: 2D array containing x and y columns, see :func:`parse_xy_table`.
            strict: Passed to the constructor.

        Returns:
            A :class:`TabulatedDerivativeKit` built from the parsed table.
        """
        x, y = parse_xy_table(table)
        return cls(x, y, strict=strict)

    def differentiate(self, *, method: str | None = None, **kwargs: Any) -> NDArray[np.floating]:
        """Computes derivative estimates at every sample with the chosen method.

        Args:
            method: Method name or alias (e.g., "central", "forward", "second",
                "Derivative2"). Default is "central".
            **kwargs: Passed through to the routine, e.g. ``yp0`` and ``ypn``
                for the second derivative.

        Returns:
            A new array with the shape of ``y``.

        Raises:
            ValueError: If ``method`` is not recognized.
        """
        chosen = method or self.default_method
        func = resolve_method(chosen)
        tabdiff_logger.debug(
            "Differentiating %d samples with method %r.", self.x.shape[0], chosen
        )
        return func(self.x, self.y, **kwargs)


def parse_xy_table(
    table: ArrayLike,
) -> tuple[NDArray[np.floating], NDArray[np.floating]]:
    """Parses a 2D table into ``(x, y)`` arrays.

    Supported layouts:

    * ``(2, N)``:
        Row 0 = x, row 1 = scalar y.
    * ``(N, 2)``:
        Column 0 = x, column 1 = scalar y.
    * ``(N, M+1)``:
        Column 0 = x, columns 1..M = components of y, returned with shape ``(N, M)``.

    A ``(2, 2)`` table is read row-wise.

    Args:
        table: 2D array containing x and y (e.g. data loaded from a text file).

    Returns:
        A tuple ``(x, y)`` as NumPy arrays.

    Raises:
        ValueError: If the input does not match any of the supported layouts.
    """
    arr = np.asarray(table, dtype=float)
    if arr.ndim != 2:
        raise ValueError("table must be a 2D array.")

    n_rows, n_cols = arr.shape

    match (n_rows, n_cols):
        case (2, n) if n >= 2:
            # row 0 = x, row 1 = y
            x = arr[0, :]
            y = arr[1, :]
        case (n, m) if n >= 2 and m >= 2:
            # column 0 = x, remaining columns = y components
            x = arr[:, 0]
            y = arr[:, 1] if m == 2 else arr[:, 1:]
        case _:
            raise ValueError(
                f"Unexpected table shape {arr.shape}; expected (N, 2), (N, M+1) or (2, N)."
            )

    return x.copy(), y.copy()
