"""Exceptions raised by the ptgeom kernel.

Geometric non-answers (vertical slopes, parallel lines, intersections outside
a segment) are not errors; those operations return ``None`` instead.
"""


class GeometryError(ValueError):
    """Base class for failures raised by ptgeom."""

    pass


class DomainError(GeometryError):
    """A numeric argument describes a degenerate (zero-length) range."""

    pass


class EmptyInputError(GeometryError):
    """An aggregate operation received no points."""

    pass


__all__ = ["GeometryError", "DomainError", "EmptyInputError"]
