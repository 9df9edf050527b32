from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import yaml

OPERATIONS = (
    "add",
    "subtract",
    "multiply_scalar",
    "multiply_matrix2",
    "multiply_2x3_matrix3",
    "multiply_matrix3",
    "project",
    "min_xy",
    "max_xy",
    "normalize",
    "perpendicular",
    "copy",
    "barycentric_uv",
    "rotation",
)


@dataclass
class BenchConfig:
    iterations: int = 20_000
    sample_size: int = 64
    seed: int = 42
    digits: int = 3
    value_range: tuple[float, float] = (-10.0, 10.0)
    operations: List[str] = field(default_factory=lambda: list(OPERATIONS))

    @staticmethod
    def from_yaml(path: Path) -> "BenchConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def load_config(raw: dict) -> BenchConfig:
    default = BenchConfig()

    def _pair(value: tuple[float, float] | list[float] | None, fallback: tuple[float, float]) -> tuple[float, float]:
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return (float(value[0]), float(value[1]))
        return fallback

    unknown_keys = set(raw) - {"iterations", "sample_size", "seed", "digits", "value_range", "operations"}
    if unknown_keys:
        raise ValueError(f"Unknown bench config keys: {sorted(unknown_keys)}")

    operations = list(raw.get("operations", default.operations))
    unknown_ops = [name for name in operations if name not in OPERATIONS]
    if unknown_ops:
        raise ValueError(f"operations: unknown operation(s) {unknown_ops}")

    config = BenchConfig(
        iterations=int(raw.get("iterations", default.iterations)),
        sample_size=int(raw.get("sample_size", default.sample_size)),
        seed=int(raw.get("seed", default.seed)),
        digits=int(raw.get("digits", default.digits)),
        value_range=_pair(raw.get("value_range"), default.value_range),
        operations=operations,
    )
    if config.iterations <= 0:
        raise ValueError(f"iterations must be positive, got {config.iterations}")
    if config.sample_size <= 0:
        raise ValueError(f"sample_size must be positive, got {config.sample_size}")
    return config
