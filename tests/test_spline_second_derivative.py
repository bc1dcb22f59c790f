"""Tests for tabdiff.spline.second_derivative."""

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from tabdiff.spline.second_derivative import Derivative2, seconddx
from tabdiff.utils.validate import LengthMismatchError


def test_natural_ends_on_squares(square_samples):
    """The natural spline through x**2 on five points has known knot values."""
    x, y = square_samples
    out = seconddx(x, y)
    expected = [0.0, 18.0 / 7.0, 12.0 / 7.0, 18.0 / 7.0, 0.0]
    np.testing.assert_allclose(out, expected, rtol=1e-12, atol=1e-12)


def test_clamped_ends_on_squares(square_samples):
    """With the exact end slopes the spline reproduces the quadratic."""
    x, y = square_samples
    out = seconddx(x, y, yp0=0.0, ypn=8.0)
    np.testing.assert_allclose(out, np.full(5, 2.0), rtol=1e-12)


@pytest.mark.parametrize("a, b, c", [(1.0, 0.0, 0.0), (-0.75, 2.0, 1.0), (3.0, -1.0, 4.0)])
def test_clamped_quadratic_is_exact(quadratic_samples, a, b, c):
    """Clamped with exact slopes, every estimate equals 2*a."""
    x, y = quadratic_samples(a, b, c)
    out = seconddx(x, y, 2 * a * x[0] + b, 2 * a * x[-1] + b)
    np.testing.assert_allclose(out, np.full_like(x, 2 * a), rtol=1e-10, atol=1e-10)


def test_natural_quadratic_converges_away_from_ends(quadratic_samples):
    """Natural ends are zero; interior estimates approach 2*a away from them."""
    a = 3.0
    x, y = quadratic_samples(a, 0.5, -1.0, n=201, lo=0.0, hi=1.0)
    out = seconddx(x, y)
    assert out[0] == 0.0
    assert out[-1] == 0.0
    np.testing.assert_allclose(out[20:-20], 2 * a, rtol=1e-8)


def test_natural_on_linear_data_is_zero():
    """A line has no curvature."""
    x = np.array([0.0, 0.4, 1.0, 1.7, 2.5, 3.0])
    out = seconddx(x, 4.0 * x - 1.0)
    np.testing.assert_allclose(out, 0.0, atol=1e-12)


def test_boundary_hints_mostly_change_the_ends():
    """Hints move the end values; the shift decays toward the middle."""
    x = np.linspace(0.0, 5.0, 51)
    y = x**2
    natural = seconddx(x, y)
    clamped = seconddx(x, y, yp0=1.0, ypn=9.0)
    shift = np.abs(clamped - natural)
    assert shift[0] > 1.0
    assert shift[-1] > 1.0
    assert shift[25] < 1e-8
    assert shift[1] < shift[0]
    assert shift[5] < shift[1]


def test_only_one_hint_changes_only_that_side():
    """A start hint alone leaves the far end essentially at the natural value."""
    x = np.linspace(0.0, 5.0, 51)
    y = np.sin(x)
    natural = seconddx(x, y)
    start_only = seconddx(x, y, yp0=0.0)
    assert abs(start_only[0] - natural[0]) > 1e-3
    assert start_only[-1] == 0.0
    np.testing.assert_allclose(start_only[-10:], natural[-10:], atol=1e-10)


def test_two_samples_do_not_crash():
    """With two samples the natural spline is a line."""
    out = seconddx([0.0, 1.0], [1.0, 3.0])
    np.testing.assert_allclose(out, [0.0, 0.0])


def test_length_mismatch_raises():
    """Different numbers of x and y samples raise LengthMismatchError."""
    with pytest.raises(LengthMismatchError):
        seconddx([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 2.0])
    with pytest.raises(LengthMismatchError):
        Derivative2([0.0, 1.0], [0.0, 1.0, 2.0], 0.0, 0.0)


@pytest.mark.parametrize("n", [2, 3, 4, 17])
def test_output_has_input_length(n):
    """There is one estimate per sample."""
    x = np.linspace(-1.0, 1.0, n)
    assert seconddx(x, x**3).shape == (n,)
    assert seconddx(x, x**3, 3.0, 3.0).shape == (n,)


def test_derivative2_is_seconddx():
    """The old name is bound to the same function and gives identical output."""
    x = np.linspace(0.0, 3.0, 11)
    y = np.sin(x)
    assert Derivative2 is seconddx
    assert np.array_equal(Derivative2(x, y), seconddx(x, y))
    assert np.array_equal(Derivative2(x, y, 1.0, -1.0), seconddx(x, y, yp0=1.0, ypn=-1.0))


def test_uneven_grid_cubic_is_close():
    """On a dense uneven grid the clamped spline tracks 6x for y = x**3."""
    rng = np.random.default_rng(7)
    x = np.sort(rng.uniform(0.0, 1.0, 400))
    y = x**3
    out = seconddx(x, y, 3 * x[0] ** 2, 3 * x[-1] ** 2)
    np.testing.assert_allclose(out, 6 * x, atol=5e-2)


def test_vector_valued_samples_with_per_component_hints():
    """Trailing dimensions are solved independently, with broadcast hints."""
    x = np.linspace(0.0, 2.0, 9)
    y = np.column_stack([x**2, 3.0 * x + 1.0])
    out = seconddx(x, y, yp0=[0.0, 3.0], ypn=[4.0, 3.0])
    assert out.shape == (9, 2)
    np.testing.assert_allclose(out[:, 0], 2.0, rtol=1e-10)
    np.testing.assert_allclose(out[:, 1], 0.0, atol=1e-10)
    np.testing.assert_allclose(out[:, 0], seconddx(x, y[:, 0], 0.0, 4.0))


def test_inputs_are_not_modified_or_aliased(square_samples):
    """Inputs stay untouched and the result is a fresh array."""
    x, y = square_samples
    x_copy, y_copy = x.copy(), y.copy()
    out = seconddx(x, y, 0.0, 8.0)
    assert not np.shares_memory(out, y)
    np.testing.assert_array_equal(x, x_copy)
    np.testing.assert_array_equal(y, y_copy)


def test_repeated_x_propagates_nan_and_warns(caplog):
    """Coincident samples are not rejected; the solve yields non-finite values."""
    with caplog.at_level(logging.WARNING, logger="tabdiff"):
        out = seconddx([0.0, 1.0, 1.0, 2.0], [0.0, 1.0, 1.0, 4.0])
    assert out.shape == (4,)
    assert not np.all(np.isfinite(out))
    assert "non-finite" in caplog.text


def test_single_sample_gives_nan(caplog):
    """One sample cannot define a spline."""
    with caplog.at_level(logging.WARNING, logger="tabdiff"):
        out = seconddx([1.0], [2.0])
    assert out.shape == (1,)
    assert np.isnan(out[0])


def test_concurrent_calls_agree():
    """Calls share no state and can run from several threads."""
    x = np.linspace(0.0, 4.0, 101)
    ys = [np.sin(k * x) for k in range(1, 9)]
    expected = [seconddx(x, y) for y in ys]
    with ThreadPoolExecutor(max_workers=4) as ex:
        results = list(ex.map(lambda y: seconddx(x, y), ys))
    for got, want in zip(results, expected):
        assert np.array_equal(got, want)
