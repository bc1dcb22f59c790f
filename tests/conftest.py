"""Pytest configuration file with shared tabulated samples."""

import numpy as np
import pytest

__all__ = ["square_samples", "quadratic_samples"]


@pytest.fixture
def square_samples():
    """Return ``x = [0, 1, 2, 3, 4]`` and ``y = x**2``."""
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    return x, x**2


@pytest.fixture
def quadratic_samples():
    """Return a factory for uniformly spaced samples of ``a*x**2 + b*x + c``.

    The returned function has signature ``make(a, b, c, n=13, lo=-1.0, hi=2.0)``
    and returns ``(x, y)``.
    """
    def _make(a, b, c, n=13, lo=-1.0, hi=2.0):
        x = np.linspace(lo, hi, n)
        return x, a * x**2 + b * x + c
    return _make
