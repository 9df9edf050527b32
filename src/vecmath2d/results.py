from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BenchResult:
    operation: str
    variant: str
    iterations: int
    total_ms: float
    ns_per_call: float
    checksum: float
