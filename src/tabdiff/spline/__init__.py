"""Cubic-spline second derivatives of tabulated samples."""

from .second_derivative import Derivative2, seconddx

__all__ = ["seconddx", "Derivative2"]
