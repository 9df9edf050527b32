import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-perf-tests",
        action="store_true",
        default=False,
        help="run timing sensitive benchmark tests",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "perf: marks tests that compare wall clock timings",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-perf-tests"):
        return

    skip_marker = pytest.mark.skip(
        reason="Timing sensitive (use --run-perf-tests)",
    )

    for item in items:
        if "perf" in item.keywords:
            item.add_marker(skip_marker)


@pytest.fixture
def sample_vectors():
    """Factory for seeded vectors with components in [-100, 100]."""
    from vecmath2d.rng import DeterministicRng

    def make(count: int = 50, seed: int = 7):
        rng = DeterministicRng(seed)
        return [rng.next_vector(-100.0, 100.0) for _ in range(count)]

    return make
