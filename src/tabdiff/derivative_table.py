"""Provides the table of named derivative methods.

Every derivative routine is reachable under a canonical name and any number
of aliases. The old public names ``Derivative1`` and ``Derivative2`` are
registered as aliases of ``"central"`` and ``"second"``.

Adding methods
--------------
New routines can be registered without modifying this module by calling
``register_method`` (see example below).

Examples:
    Looking up a routine:

        >>> import numpy as np
        >>> from tabdiff.derivative_table import resolve_method
        >>> central = resolve_method("Derivative1")
        >>> central(np.array([0.0, 1.0, 2.0]), np.array([0.0, 1.0, 4.0]))
        array([1., 2., 3.])

    Registering a new method:

        >>> from tabdiff.derivative_table import register_method
        >>> def backwarddiff(x, y):
        ...     ...
        >>> register_method(
        ...     name="backward",
        ...     func=backwarddiff,
        ...     aliases=("backward-difference", "bwd"),
        ... )  # doctest: +SKIP

Notes:
    - Method names are case/spacing/punctuation insensitive, so
      ``"central-difference"``, ``"Central Difference"`` and
      ``"centraldifference"`` all resolve to the same routine.
    - For available canonical method names at runtime, call
      ``available_methods()``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Iterable, Mapping, Protocol

from numpy.typing import ArrayLike, NDArray

from tabdiff.finite.differences import centraldiff, forwarddiff
from tabdiff.logger import tabdiff_logger
from tabdiff.spline.second_derivative import seconddx

__all__ = [
    "DerivativeMethod",
    "register_method",
    "resolve_method",
    "available_methods",
    "method_aliases",
]


class DerivativeMethod(Protocol):
    """Protocol each tabulated derivative routine must satisfy.

    A routine takes the x and y samples (plus optional keyword arguments) and
    returns one derivative estimate per sample.
    """
    def __call__(self, x: ArrayLike, y: ArrayLike, **kwargs: Any) -> NDArray:
        """Compute the derivative estimates at the samples."""
        ...


# These are the built-in methods available in the package by default.
_METHOD_SPECS: list[tuple[str, DerivativeMethod, list[str]]] = [
    ("forward", forwarddiff, ["forwarddiff", "forward-difference", "fwd"]),
    ("central", centraldiff, ["centraldiff", "central-difference", "Derivative1", "cd"]),
    ("second", seconddx, ["seconddx", "second-derivative", "spline", "Derivative2", "d2"]),
]


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive).

    Args:
        s: Input string.

    Returns:
        Normalized string.
    """
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _method_maps() -> tuple[Mapping[str, DerivativeMethod], tuple[str, ...]]:
    """Construct and cache lookup tables for derivative methods.

    The result is cached after the first call; ``register_method`` clears the
    cache so that new entries are picked up on the next lookup.

    Returns:
        A pair ``(method_map, canonical_names)`` where ``method_map`` maps
        normalized names and aliases to routines and ``canonical_names``
        lists the sorted canonical method names.
    """
    method_map: dict[str, DerivativeMethod] = {}
    canonical: set[str] = set()
    for name, func, aliases in _METHOD_SPECS:
        k = _norm(name)
        method_map[k] = func
        canonical.add(k)
        for a in aliases:
            method_map[_norm(a)] = func
    return method_map, tuple(sorted(canonical))


def register_method(
    name: str,
    func: DerivativeMethod,
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new derivative method.

    Adds a routine that can be referenced by name in :func:`resolve_method`
    and :class:`tabdiff.tabulated_kit.TabulatedDerivativeKit`. A name or alias
    that is already taken is rebound to the new routine.

    Args:
        name: Canonical public name of the method (e.g., ``"backward"``).
        func: Callable implementing the DerivativeMethod protocol.
        aliases: Additional accepted spellings.
    """
    aliases = list(aliases)
    _METHOD_SPECS.append((name, func, aliases))
    _method_maps.cache_clear()
    tabdiff_logger.debug(
        "Registered derivative method %r with aliases %s.", name, aliases
    )


def resolve_method(method: str) -> DerivativeMethod:
    """Resolve a user-provided method name or alias to a routine.

    Args:
        method: User-provided method name or alias.

    Returns:
        Corresponding derivative routine.

    Raises:
        ValueError: If ``method`` is not a registered name or alias.
    """
    method_map, canon = _method_maps()
    try:
        return method_map[_norm(method)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown derivative method '{method}'. Choose one of {{{opts}}}.") from None


def available_methods() -> list[str]:
    """List canonical method names.

    Returns:
        List of method names.
    """
    _, canon = _method_maps()
    return list(canon)


def method_aliases() -> dict[str, list[str]]:
    """Group accepted spellings by canonical method name.

    Returns:
        Mapping from each canonical name to a list whose first element is the
        canonical name, followed by its aliases in registration order.
    """
    groups: dict[str, list[str]] = {}
    for name, _, aliases in _METHOD_SPECS:
        group = groups.setdefault(name, [name])
        group.extend(a for a in aliases if a not in group)
    return groups
