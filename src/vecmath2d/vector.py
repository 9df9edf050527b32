"""Two component vector with explicit control over allocation.

Every operation that produces a vector comes in two forms: a method that
overwrites the receiver and returns it (this module), and a free function that
allocates a result or writes into a caller supplied ``target``
(:mod:`vecmath2d.ops`).

Numeric edge cases are never raised. Division by zero, singular perspective
transforms and out-of-domain angles resolve to IEEE-754 infinities and NaNs.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from numbers import Real
from typing import Iterator, List, Optional, Sequence

from .matrix import Matrix2Like, Matrix3Like, elements_of

logger = logging.getLogger(__name__)


def _is_pair(value: object) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) == 2
        and isinstance(value[0], Real)
        and isinstance(value[1], Real)
    )


def _as_floats(value: object) -> Optional[List[float]]:
    if not _is_pair(value):
        return None
    try:
        return [float(value[0]), float(value[1])]
    except OverflowError:
        return None


def _to_fixed(value: float, digits: int) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= 1e21:
        return repr(value)
    # Adding 0.0 turns -0.0 into 0.0 so a signed zero prints without "-".
    exact = Decimal(value + 0.0)
    quantum = Decimal(1).scaleb(-digits)
    rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP, context=Context(prec=digits + 25))
    return f"{rounded:f}"


def _ieee_div(numerator: float, denominator: float) -> float:
    """Float division that follows IEEE-754 instead of raising ZeroDivisionError."""
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class Vector2:
    """Mutable 2D vector backed by a two element list of floats.

    ``x``/``y`` and ``s``/``t`` address the same two slots.
    """

    __slots__ = ("components",)

    components: List[float]

    def __init__(self, pair: Optional[Sequence[float]] = None) -> None:
        self.define(pair)

    @classmethod
    def wrap(cls, storage: List[float]) -> "Vector2":
        """Create a vector that shares ``storage`` with the caller."""
        return cls().adopt(storage)

    def define(self, pair: Optional[Sequence[float]]) -> "Vector2":
        """Re-run construction against this instance with fresh storage.

        Anything other than a list or tuple of two real numbers falls back to
        the zero vector.
        """
        components = _as_floats(pair)
        if components is None:
            if pair is not None:
                logger.debug("Malformed component pair %r, using zero vector", pair)
            components = [0.0, 0.0]
        self.components = components
        return self

    def adopt(self, storage: List[float]) -> "Vector2":
        """Use the caller owned ``storage`` list as the backing components.

        Writes through either handle are visible through the other. Integer
        items are converted to floats in place.
        """
        components = _as_floats(storage) if isinstance(storage, list) else None
        if components is not None:
            storage[:] = components
            self.components = storage
        else:
            logger.debug("Cannot adopt storage %r, using zero vector", storage)
            self.components = [0.0, 0.0]
        return self

    def update(self, x: float, y: float) -> "Vector2":
        n = self.components
        n[0] = float(x)
        n[1] = float(y)
        return self

    # Accessors

    @property
    def x(self) -> float:
        return self.components[0]

    @x.setter
    def x(self, value: float) -> None:
        self.components[0] = float(value)

    @property
    def y(self) -> float:
        return self.components[1]

    @y.setter
    def y(self, value: float) -> None:
        self.components[1] = float(value)

    @property
    def s(self) -> float:
        """Alias of :attr:`x`."""
        return self.x

    @s.setter
    def s(self, value: float) -> None:
        self.x = value

    @property
    def t(self) -> float:
        """Alias of :attr:`y`."""
        return self.y

    @t.setter
    def t(self, value: float) -> None:
        self.y = value

    @property
    def norm(self) -> float:
        x, y = self.components
        return math.sqrt(x * x + y * y)

    @property
    def norm_squared(self) -> float:
        x, y = self.components
        return x * x + y * y

    def __getitem__(self, index: int) -> float:
        return self.components[index]

    def __setitem__(self, index: int, value: float) -> None:
        self.components[index] = float(value)

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    # Scalar results

    @staticmethod
    def cross(v: "Vector2", w: "Vector2") -> float:
        """Perp dot product, the signed area of the parallelogram (v, w)."""
        vn, wn = v.components, w.components
        return vn[0] * wn[1] - vn[1] * wn[0]

    @staticmethod
    def dot(v: "Vector2", w: "Vector2") -> float:
        vn, wn = v.components, w.components
        return vn[0] * wn[0] + vn[1] * wn[1]

    @staticmethod
    def rad(v: "Vector2", w: "Vector2") -> float:
        """Angle between two unit vectors, ``acos(v . w)``.

        Inputs are not normalized here. A dot product outside [-1, 1] gives NaN.
        """
        vn, wn = v.components, w.components
        cos_angle = vn[0] * wn[0] + vn[1] * wn[1]
        if cos_angle > 1.0 or cos_angle < -1.0:
            return math.nan
        return math.acos(cos_angle)

    @staticmethod
    def is_eq(v: "Vector2", w: "Vector2") -> bool:
        """Identity or exact componentwise equality, no tolerance."""
        vn, wn = v.components, w.components
        return v is w or (vn[0] == wn[0] and vn[1] == wn[1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2.is_eq(self, other)

    __hash__ = None  # type: ignore[assignment]

    # Receiver = f(v, w)

    def add(self, v: "Vector2", w: "Vector2") -> "Vector2":
        n, vn, wn = self.components, v.components, w.components
        n[0] = vn[0] + wn[0]
        n[1] = vn[1] + wn[1]
        return self

    def subtract(self, v: "Vector2", w: "Vector2") -> "Vector2":
        n, vn, wn = self.components, v.components, w.components
        n[0] = vn[0] - wn[0]
        n[1] = vn[1] - wn[1]
        return self

    def multiply_scalar(self, v: "Vector2", scalar: float) -> "Vector2":
        n, vn = self.components, v.components
        n[0] = vn[0] * scalar
        n[1] = vn[1] * scalar
        return self

    def multiply_matrix2(self, m: Matrix2Like, v: "Vector2") -> "Vector2":
        """Column-major 2x2 transform, ``m * v``."""
        mn = elements_of(m)
        x, y = v.components
        n = self.components
        n[0] = x * mn[0] + y * mn[2]
        n[1] = x * mn[1] + y * mn[3]
        return self

    def multiply_2x3_matrix3(self, m: Matrix3Like, v: "Vector2") -> "Vector2":
        """Affine transform using the upper 2x3 block of a column-major 3x3.

        The bottom row is ignored, so there is no perspective divide.
        """
        mn = elements_of(m)
        x, y = v.components
        n = self.components
        n[0] = x * mn[0] + y * mn[3] + mn[6]
        n[1] = x * mn[1] + y * mn[4] + mn[7]
        return self

    def multiply_matrix3(self, m: Matrix3Like, v: "Vector2") -> "Vector2":
        """Homogeneous transform with perspective divide.

        A zero denominator yields infinite or NaN components.
        """
        mn = elements_of(m)
        x, y = v.components
        w = _ieee_div(1.0, x * mn[2] + y * mn[5] + mn[8])
        n = self.components
        n[0] = (x * mn[0] + y * mn[3] + mn[6]) * w
        n[1] = (x * mn[1] + y * mn[4] + mn[7]) * w
        return self

    def project(self, v: "Vector2", w: "Vector2") -> "Vector2":
        """Orthogonal projection of ``w`` onto ``v``."""
        vx, vy = v.components
        wn = w.components
        factor = _ieee_div(vx * wn[0] + vy * wn[1], vx * vx + vy * vy)
        n = self.components
        n[0] = vx * factor
        n[1] = vy * factor
        return self

    def min_xy(self, v: "Vector2", w: "Vector2") -> "Vector2":
        n, vn, wn = self.components, v.components, w.components
        x = vn[0] if vn[0] < wn[0] else wn[0]
        y = vn[1] if vn[1] < wn[1] else wn[1]
        n[0] = x
        n[1] = y
        return self

    def max_xy(self, v: "Vector2", w: "Vector2") -> "Vector2":
        n, vn, wn = self.components, v.components, w.components
        x = vn[0] if vn[0] > wn[0] else wn[0]
        y = vn[1] if vn[1] > wn[1] else wn[1]
        n[0] = x
        n[1] = y
        return self

    def normalization_of(self, v: "Vector2") -> "Vector2":
        """Unit vector in the direction of ``v``.

        A squared norm of exactly 0.0 or 1.0 is used as the scale factor
        without a sqrt, so unit vectors are copied as-is and a vector whose
        squared norm underflows to 0.0 comes out zeroed. Compare
        :meth:`normalize`, which leaves such a vector untouched.
        """
        vx, vy = v.components
        norm_sq = vx * vx + vy * vy
        scale = norm_sq
        if norm_sq != 0.0 and norm_sq != 1.0:
            scale = 1.0 / math.sqrt(norm_sq)
        n = self.components
        n[0] = vx * scale
        n[1] = vy * scale
        return self

    def perpendicular_of(self, v: "Vector2") -> "Vector2":
        """``v`` rotated 90 degrees counter-clockwise."""
        vx, vy = v.components
        n = self.components
        n[0] = -vy
        n[1] = vx
        return self

    def copy_of(self, v: "Vector2") -> "Vector2":
        """Duplicate the components of ``v`` into fresh storage.

        Any storage shared through :meth:`adopt` is released.
        """
        vx, vy = v.components
        self.components = [vx, vy]
        return self

    # Receiver = f(receiver, w)

    def add_eq(self, w: "Vector2") -> "Vector2":
        n, wn = self.components, w.components
        n[0] += wn[0]
        n[1] += wn[1]
        return self

    def subtract_eq(self, w: "Vector2") -> "Vector2":
        n, wn = self.components, w.components
        n[0] -= wn[0]
        n[1] -= wn[1]
        return self

    def multiply_scalar_eq(self, scalar: float) -> "Vector2":
        n = self.components
        n[0] *= scalar
        n[1] *= scalar
        return self

    def project_eq(self, w: "Vector2") -> "Vector2":
        """Replace the receiver with the projection of ``w`` onto it."""
        return self.project(self, w)

    def normalize(self) -> "Vector2":
        n = self.components
        x, y = n
        norm_sq = x * x + y * y
        if norm_sq == 0.0 or norm_sq == 1.0:
            return self
        scale = 1.0 / math.sqrt(norm_sq)
        n[0] = x * scale
        n[1] = y * scale
        return self

    def perpendicular(self) -> "Vector2":
        return self.perpendicular_of(self)

    # Diagnostics

    def to_string(self, digits: int = 3) -> str:
        """Space joined fixed point components, e.g. ``[Vector2](1.000 0.000)``.

        Exact ties round away from zero and non-finite values print as
        ``NaN``/``Infinity``.
        """
        body = " ".join(_to_fixed(item, digits) for item in self.components)
        return f"[Vector2]({body})"

    def value_of(self) -> float:
        return self.norm

    def __float__(self) -> float:
        return self.norm

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Vector2([{self.components[0]!r}, {self.components[1]!r}])"
