from __future__ import annotations

import argparse
import csv
import logging
import math
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import Any, Callable, Dict, List, Optional

from . import ops
from .config import BenchConfig
from .matrix import Matrix2, Matrix3
from .results import BenchResult
from .rng import DeterministicRng
from .vector import Vector2

logger = logging.getLogger(__name__)

VARIANTS = ("allocating", "mutating")

_HEADER = ["operation", "variant", "iterations", "total_ms", "ns_per_call", "checksum"]

_MATRIX2 = Matrix2.rotation(0.5)
# Mild perspective; the divide stays well away from zero for the default value range.
_MATRIX3 = Matrix3([0.9, 0.1, 0.01, -0.2, 1.1, 0.02, 2.0, -3.0, 1.0])


@dataclass(slots=True)
class _Sample:
    a: Vector2
    b: Vector2
    c: Vector2
    direction: Vector2
    scalar: float
    u: float
    v: float
    angle: float


_ALLOCATING: Dict[str, Callable[[_Sample], Vector2]] = {
    "add": lambda s: ops.add(s.a, s.b),
    "subtract": lambda s: ops.subtract(s.a, s.b),
    "multiply_scalar": lambda s: ops.multiply_scalar(s.a, s.scalar),
    "multiply_matrix2": lambda s: ops.multiply_matrix2(_MATRIX2, s.a),
    "multiply_2x3_matrix3": lambda s: ops.multiply_2x3_matrix3(_MATRIX3, s.a),
    "multiply_matrix3": lambda s: ops.multiply_matrix3(_MATRIX3, s.a),
    "project": lambda s: ops.project(s.direction, s.a),
    "min_xy": lambda s: ops.min_xy(s.a, s.b),
    "max_xy": lambda s: ops.max_xy(s.a, s.b),
    "normalize": lambda s: ops.normalize(s.a),
    "perpendicular": lambda s: ops.perpendicular(s.a),
    "copy": lambda s: ops.copy(s.a),
    "barycentric_uv": lambda s: ops.barycentric_uv(s.a, s.b, s.c, s.u, s.v),
    "rotation": lambda s: ops.rotation(s.angle),
}

_MUTATING: Dict[str, Callable[[Vector2, _Sample], Vector2]] = {
    "add": lambda out, s: out.add(s.a, s.b),
    "subtract": lambda out, s: out.subtract(s.a, s.b),
    "multiply_scalar": lambda out, s: out.multiply_scalar(s.a, s.scalar),
    "multiply_matrix2": lambda out, s: out.multiply_matrix2(_MATRIX2, s.a),
    "multiply_2x3_matrix3": lambda out, s: out.multiply_2x3_matrix3(_MATRIX3, s.a),
    "multiply_matrix3": lambda out, s: out.multiply_matrix3(_MATRIX3, s.a),
    "project": lambda out, s: out.project(s.direction, s.a),
    "min_xy": lambda out, s: out.min_xy(s.a, s.b),
    "max_xy": lambda out, s: out.max_xy(s.a, s.b),
    "normalize": lambda out, s: out.normalization_of(s.a),
    "perpendicular": lambda out, s: out.perpendicular_of(s.a),
    "copy": lambda out, s: out.copy_of(s.a),
    "barycentric_uv": lambda out, s: ops.barycentric_uv(s.a, s.b, s.c, s.u, s.v, out),
    "rotation": lambda out, s: ops.rotation(s.angle, out),
}


def _make_samples(config: BenchConfig) -> List[_Sample]:
    rng = DeterministicRng(config.seed)
    low, high = config.value_range
    samples = []
    for _ in range(config.sample_size):
        samples.append(
            _Sample(
                a=rng.next_vector(low, high),
                b=rng.next_vector(low, high),
                c=rng.next_vector(low, high),
                direction=rng.next_unit_circle(),
                scalar=rng.next_range(low, high),
                u=rng.next_float(),
                v=rng.next_float(),
                angle=rng.next_range(-math.pi, math.pi),
            )
        )
    return samples


def _run_operation(name: str, variant: str, samples: List[_Sample], iterations: int) -> tuple[BenchResult, Vector2]:
    count = len(samples)
    checksum = 0.0
    result = Vector2()
    if variant == "allocating":
        allocate = _ALLOCATING[name]
        start = perf_counter()
        for i in range(iterations):
            result = allocate(samples[i % count])
            checksum += result.x + result.y
    else:
        mutate = _MUTATING[name]
        out = Vector2()
        start = perf_counter()
        for i in range(iterations):
            result = mutate(out, samples[i % count])
            checksum += result.x + result.y
    elapsed = perf_counter() - start
    bench_result = BenchResult(
        operation=name,
        variant=variant,
        iterations=iterations,
        total_ms=elapsed * 1000.0,
        ns_per_call=elapsed * 1e9 / iterations,
        checksum=checksum,
    )
    return bench_result, result


def run_bench(
    config: BenchConfig,
    log_path: Optional[Path] = None,
    deterministic_log: bool = False,
) -> List[BenchResult]:
    samples = _make_samples(config)
    with ExitStack() as stack:
        writer = None
        if log_path:
            csv_file = stack.enter_context(Path(log_path).open("w", newline=""))
            writer = csv.writer(csv_file)
            writer.writerow(_HEADER)
        return _run_all(config, samples, writer, deterministic_log)


def _run_all(config: BenchConfig, samples: List[_Sample], writer: Optional[Any], deterministic_log: bool) -> List[BenchResult]:
    results: List[BenchResult] = []
    for name in config.operations:
        for variant in VARIANTS:
            bench_result, last = _run_operation(name, variant, samples, config.iterations)
            results.append(bench_result)
            logger.info("%-22s %-10s %10.1f ns/call", name, variant, bench_result.ns_per_call)
            logger.debug("%s/%s last result %s", name, variant, last.to_string(config.digits))
            if writer:
                total_ms = 0.0 if deterministic_log else bench_result.total_ms
                ns_per_call = 0.0 if deterministic_log else bench_result.ns_per_call
                writer.writerow(
                    [
                        name,
                        variant,
                        bench_result.iterations,
                        f"{total_ms:.3f}",
                        f"{ns_per_call:.1f}",
                        f"{bench_result.checksum:.{config.digits}f}",
                    ]
                )
    return results


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Headless Vector2 micro-benchmark")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with bench settings")
    parser.add_argument("--iterations", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write results")
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (timing columns are forced to 0 so identical seeds match).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log the last result of every run")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = BenchConfig.from_yaml(args.config) if args.config else BenchConfig()
    if args.iterations is not None:
        if args.iterations <= 0:
            parser.error("--iterations must be positive")
        config.iterations = args.iterations
    if args.seed is not None:
        config.seed = args.seed
    run_bench(config, args.log, deterministic_log=args.deterministic_log)


if __name__ == "__main__":
    main()
