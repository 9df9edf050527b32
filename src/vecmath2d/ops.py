"""Allocating counterparts of the :class:`Vector2` operations.

Each function takes its operands followed by an optional ``target``. Without a
target a new vector is returned; with one, the target is overwritten and
returned, so hot loops can reuse a single instance.
"""

from __future__ import annotations

import math
from typing import Optional

from .matrix import Matrix2Like, Matrix3Like
from .vector import Vector2

cross = Vector2.cross
dot = Vector2.dot
rad = Vector2.rad
is_eq = Vector2.is_eq


def _target(target: Optional[Vector2]) -> Vector2:
    return Vector2() if target is None else target


def x_axis(target: Optional[Vector2] = None) -> Vector2:
    return _target(target).update(1.0, 0.0)


def y_axis(target: Optional[Vector2] = None) -> Vector2:
    return _target(target).update(0.0, 1.0)


def rotation(angle: float, target: Optional[Vector2] = None) -> Vector2:
    """Unit vector ``(cos angle, sin angle)``."""
    if math.isinf(angle):
        return _target(target).update(math.nan, math.nan)
    return _target(target).update(math.cos(angle), math.sin(angle))


def barycentric_uv(
    v0: Vector2,
    v1: Vector2,
    v2: Vector2,
    u: float,
    v: float,
    target: Optional[Vector2] = None,
) -> Vector2:
    """Point at barycentric ``(u, v)`` of the triangle ``(v0, v1, v2)``.

    ``u`` and ``v`` are not range checked, points outside the triangle are
    extrapolated.
    """
    x0, y0 = v0.components
    n1, n2 = v1.components, v2.components
    return _target(target).update(
        x0 + (n1[0] - x0) * u + (n2[0] - x0) * v,
        y0 + (n1[1] - y0) * u + (n2[1] - y0) * v,
    )


def add(v: Vector2, w: Vector2, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).add(v, w)


def subtract(v: Vector2, w: Vector2, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).subtract(v, w)


def multiply_scalar(v: Vector2, scalar: float, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).multiply_scalar(v, scalar)


def multiply_matrix2(m: Matrix2Like, v: Vector2, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).multiply_matrix2(m, v)


def multiply_2x3_matrix3(m: Matrix3Like, v: Vector2, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).multiply_2x3_matrix3(m, v)


def multiply_matrix3(m: Matrix3Like, v: Vector2, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).multiply_matrix3(m, v)


def project(v: Vector2, w: Vector2, target: Optional[Vector2] = None) -> Vector2:
    """Orthogonal projection of ``w`` onto ``v``; NaN when ``v`` is zero."""
    return _target(target).project(v, w)


def min_xy(v: Vector2, w: Vector2, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).min_xy(v, w)


def max_xy(v: Vector2, w: Vector2, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).max_xy(v, w)


def normalize(v: Vector2, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).normalization_of(v)


def perpendicular(v: Vector2, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).perpendicular_of(v)


def copy(v: Vector2, target: Optional[Vector2] = None) -> Vector2:
    return _target(target).copy_of(v)
