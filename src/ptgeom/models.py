"""Dataclasses describing parameters and value types for ptgeom."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Axis(Enum):
    """Named pairs of component indices for 2D operations on nD points."""

    XY = (0, 1)
    XZ = (0, 2)
    YZ = (1, 2)


@dataclass(frozen=True)
class Intercept:
    """Slope form of a non-vertical line.

    ``x_intercept`` is ``None`` for horizontal lines, which never cross the
    x-axis at a single point.
    """

    slope: float
    y_intercept: float
    x_intercept: Optional[float]


@dataclass
class TableParams:
    """Sizing of the precomputed sine/cosine lookup table."""

    resolution: int = 360  # entries per full turn


__all__ = [
    "Axis",
    "Intercept",
    "TableParams",
]
