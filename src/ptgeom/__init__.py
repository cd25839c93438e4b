"""ptgeom: a small computational-geometry kernel for 2D/3D point sets."""

from __future__ import annotations

import logging

from ._version import get_version
from .errors import DomainError, EmptyInputError, GeometryError
from .models import Axis, Intercept, TableParams
from .ops import geom, line, num, rectangle

__version__ = get_version()

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "get_version",
    "Axis",
    "Intercept",
    "TableParams",
    "DomainError",
    "EmptyInputError",
    "GeometryError",
    "geom",
    "line",
    "num",
    "rectangle",
]
