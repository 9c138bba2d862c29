from __future__ import annotations


class DegenerateGeometryError(ValueError):
    """Raised when an operation has no well-defined result for its input (e.g. normalizing a zero vector)."""
