from __future__ import annotations

from typing import Optional

from pygame.math import Vector2 as PygameVector2

from .vector import Vector2


def to_pygame(vector: Vector2) -> PygameVector2:
    return PygameVector2(vector.x, vector.y)


def from_pygame(source: PygameVector2, target: Optional[Vector2] = None) -> Vector2:
    """Copy a pygame vector's components into a new vector or ``target``."""
    return (Vector2() if target is None else target).update(source.x, source.y)
