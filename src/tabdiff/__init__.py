"""Provides numeric first and second derivatives of tabulated samples."""

from importlib.metadata import PackageNotFoundError, version

from tabdiff.derivative_table import available_methods, register_method
from tabdiff.finite.differences import Derivative1, centraldiff, forwarddiff
from tabdiff.spline.second_derivative import Derivative2, seconddx
from tabdiff.tabulated_kit import TabulatedDerivativeKit
from tabdiff.utils.validate import LengthMismatchError

try:
    __version__ = version("tabdiff")
except PackageNotFoundError:
    pass

__all__ = [
    "forwarddiff",
    "centraldiff",
    "seconddx",
    "Derivative1",
    "Derivative2",
    "LengthMismatchError",
    "TabulatedDerivativeKit",
    "available_methods",
    "register_method",
]
