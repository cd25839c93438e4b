"""Scalar helpers and aggregate statistics over point collections."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..errors import DomainError, EmptyInputError
from ..utils.points import GroupLike, as_point


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation; ``t`` outside ``[0, 1]`` extrapolates."""
    return (1 - t) * a + t * b


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return max(lo, min(hi, value))


def bound_value(val: float, lo: float, hi: float, positive: bool = False) -> float:
    """Wrap ``val`` periodically into the range between ``lo`` and ``hi``.

    The period is ``|hi - lo|`` and results fall in the half-open range
    ``[lo, hi)``, so a value exactly at ``hi`` wraps to ``lo``:
    ``bound_value(360, 0, 360) == 0`` and ``bound_value(-30, 0, 360) == 330``.

    Args:
        val: Value to wrap.
        lo: Lower end of the range.
        hi: Upper end of the range.
        positive: Lift a negative result by one more period.

    Raises:
        DomainError: If ``lo == hi``.
    """
    length = abs(hi - lo)
    if length == 0:
        raise DomainError("[lo, hi] must define a range that is not zero")
    base = min(lo, hi)
    a = base + (val - base) % length
    # tiny negative offsets can round up to exactly one period
    if a >= base + length:
        a = base
    if positive and a < 0:
        a += length
    return a


def within(p: float, a: float, b: float) -> bool:
    return min(a, b) <= p <= max(a, b)


def random_range(
    a: float, b: float = 0, rng: Optional[np.random.Generator] = None
) -> float:
    """Sample uniformly between ``a`` and ``b`` (in either order)."""
    if rng is None:
        rng = np.random.default_rng()
    lo, hi = (a, b) if a <= b else (b, a)
    return lo + float(rng.random()) * (hi - lo)


def normalize_value(n: float, a: float, b: float) -> float:
    """Map ``n`` so that ``min(a, b) -> 0`` and ``max(a, b) -> 1``."""
    lo, hi = (a, b) if a <= b else (b, a)
    if hi == lo:
        raise DomainError("[a, b] must define a range that is not zero")
    return (n - lo) / (hi - lo)


def map_to_range(
    n: float, curr_a: float, curr_b: float, target_a: float, target_b: float
) -> float:
    """Remap ``n`` from the range ``[curr_a, curr_b]`` into ``[target_a, target_b]``.

    Both ranges are order-independent. Raises :class:`DomainError` when the
    current range has zero length.
    """
    if curr_a == curr_b:
        raise DomainError("[curr_a, curr_b] must define a range that is not zero")
    lo, hi = (target_a, target_b) if target_a <= target_b else (target_b, target_a)
    return normalize_value(n, curr_a, curr_b) * (hi - lo) + lo


def sum_points(pts: GroupLike) -> np.ndarray:
    """Componentwise sum; the result has the first point's dimensionality."""
    if len(pts) == 0:
        raise EmptyInputError("Cannot sum an empty group of points")
    total = np.zeros(len(pts[0]), dtype=np.float64)
    n = total.size
    for p in pts:
        v = as_point(p)[:n]
        total[: v.size] += v
    return total


def average(pts: GroupLike) -> np.ndarray:
    return sum_points(pts) / len(pts)


__all__ = [
    "lerp",
    "clamp",
    "bound_value",
    "within",
    "random_range",
    "normalize_value",
    "map_to_range",
    "sum_points",
    "average",
]
