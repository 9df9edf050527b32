from __future__ import annotations

import math
import random
from typing import Optional

from pygame.math import Vector2 as PygameVector2

from .interop import from_pygame
from .vector import Vector2


class DeterministicRng:
    def __init__(self, seed: int):
        self._seed = seed
        self._random = random.Random(seed)

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_float(self) -> float:
        return self._random.random()

    def next_range(self, low: float, high: float) -> float:
        return self._random.uniform(low, high)

    def next_vector(self, low: float, high: float, target: Optional[Vector2] = None) -> Vector2:
        x = self._random.uniform(low, high)
        y = self._random.uniform(low, high)
        return (Vector2() if target is None else target).update(x, y)

    def next_unit_circle(self, target: Optional[Vector2] = None) -> Vector2:
        angle = self._random.uniform(0, 2 * math.pi)
        vector = PygameVector2()
        vector.from_polar((1, math.degrees(angle)))
        return from_pygame(vector, target)
