"""Quick comparison of the tabulated derivative methods.

Samples the polynomial ``2x^4 - 7x^3 - 2x^2 - x + 1`` on ``x = 2.0, 2.1, ..., 3.9``
and prints the exact first and second derivatives next to the estimates.

Run with:
    python compare_deriv_methods.py
"""

from __future__ import annotations

import numpy as np
from numpy.polynomial import Polynomial

from tabdiff import centraldiff, forwarddiff, seconddx
from tabdiff.utils.numerics import relative_error


def main() -> None:
    """Main comparison routine."""
    # Coefficients in increasing powers of x.
    poly = Polynomial([1.0, -1.0, -2.0, -7.0, 2.0])
    dpoly = poly.deriv()
    d2poly = poly.deriv(2)

    xvals = np.arange(20, 40) / 10.0
    yvals = poly(xvals)
    dx_yvals = dpoly(xvals)
    d2x_yvals = d2poly(xvals)

    cen_dydx = centraldiff(xvals, yvals)
    for_dydx = forwarddiff(xvals, yvals)

    line = "-" * 60
    print(line)
    print("First derivative")
    print(line)
    print("    x          y         dy     center    forward")
    for j in range(xvals.size):
        print(
            f"{xvals[j]:5.2f} {yvals[j]:10.4f} {dx_yvals[j]:10.4f} "
            f"{cen_dydx[j]:10.4f} {for_dydx[j]:10.4f}"
        )
    print(f"\n  max rel_err center : {relative_error(cen_dydx, dx_yvals):.6e}")
    print(f"  max rel_err forward: {relative_error(for_dydx, dx_yvals):.6e}")

    natural = seconddx(xvals, yvals)
    clamped = seconddx(xvals, yvals, dx_yvals[0], dx_yvals[-1])

    print()
    print(line)
    print("Second derivative")
    print(line)
    print("    x        d2y    natural    clamped")
    for j in range(xvals.size):
        print(
            f"{xvals[j]:5.2f} {d2x_yvals[j]:10.4f} "
            f"{natural[j]:10.4f} {clamped[j]:10.4f}"
        )
    print(f"\n  max rel_err natural: {relative_error(natural, d2x_yvals):.6e}")
    print(f"  max rel_err clamped: {relative_error(clamped, d2x_yvals):.6e}")


if __name__ == "__main__":
    main()
