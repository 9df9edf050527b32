"""2D vector math with explicit allocating and mutating forms."""

from .matrix import Matrix2, Matrix3, elements_of
from .vector import Vector2

__all__ = [
    "Vector2",
    "Matrix2",
    "Matrix3",
    "elements_of",
]
