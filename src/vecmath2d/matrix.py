"""Column-major element layouts for 2x2 and 3x3 transforms.

Vectors only read matrix elements. Anything exposing an ``elements``
sequence, or a plain sequence of 4 (2x2) or 9 (3x3) numbers, satisfies the
contract. The containers below only lay elements out; they do no algebra.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import cos, sin
from numbers import Real
from typing import Callable, List, Sequence, Union

logger = logging.getLogger(__name__)


def _identity2() -> List[float]:
    return [1.0, 0.0, 0.0, 1.0]


def _identity3() -> List[float]:
    return [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]


def _coerce(elements: object, size: int, fallback: Callable[[], List[float]]) -> List[float]:
    if (
        isinstance(elements, (list, tuple))
        and len(elements) == size
        and all(isinstance(value, Real) for value in elements)
    ):
        return [float(value) for value in elements]
    logger.debug("Expected %d matrix elements, got %r; using identity", size, elements)
    return fallback()


@dataclass(slots=True)
class Matrix2:
    """2x2 transform, elements ``[m00, m10, m01, m11]``."""

    elements: List[float] = field(default_factory=_identity2)

    def __post_init__(self) -> None:
        self.elements = _coerce(self.elements, 4, _identity2)

    @classmethod
    def identity(cls) -> "Matrix2":
        return cls()

    @classmethod
    def rotation(cls, rad: float) -> "Matrix2":
        """Counter-clockwise rotation by ``rad`` radians."""
        c, s = cos(rad), sin(rad)
        return cls([c, s, -s, c])

    @classmethod
    def scale(cls, sx: float, sy: float) -> "Matrix2":
        return cls([sx, 0.0, 0.0, sy])


@dataclass(slots=True)
class Matrix3:
    """3x3 transform, columns ``[x axis, y axis, translation]``.

    Used both as a 2x3 affine block (elements 2, 5, 8 ignored) and as a full
    homogeneous transform with perspective divide.
    """

    elements: List[float] = field(default_factory=_identity3)

    def __post_init__(self) -> None:
        self.elements = _coerce(self.elements, 9, _identity3)

    @classmethod
    def identity(cls) -> "Matrix3":
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> "Matrix3":
        return cls([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, tx, ty, 1.0])

    @classmethod
    def rotation(cls, rad: float) -> "Matrix3":
        c, s = cos(rad), sin(rad)
        return cls([c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0])

    @classmethod
    def scale(cls, sx: float, sy: float) -> "Matrix3":
        return cls([sx, 0.0, 0.0, 0.0, sy, 0.0, 0.0, 0.0, 1.0])


Matrix2Like = Union[Matrix2, Sequence[float]]
Matrix3Like = Union[Matrix3, Sequence[float]]


def elements_of(matrix: Union[Matrix2Like, Matrix3Like]) -> Sequence[float]:
    return getattr(matrix, "elements", matrix)
