"""Finite-difference first derivatives of tabulated samples."""

from .differences import Derivative1, centraldiff, forwarddiff

__all__ = ["forwarddiff", "centraldiff", "Derivative1"]
