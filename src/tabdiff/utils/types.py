"""Shared typing aliases for tabdiff."""

from __future__ import annotations

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

# A boundary first derivative: a scalar, one value per y component, or unset.
BoundarySlope: TypeAlias = float | NDArray[np.floating] | None
