import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_fire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class FixedDraws:
    """Stand-in generator returning scripted values.

    Values are returned in order; the last one repeats once the script runs out.
    """

    def __init__(self, *values: float):
        self.values = list(values) or [0.0]
        self.calls = 0

    def random(self) -> float:
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_draws():
    """Factory for scripted generators."""
    return FixedDraws


@pytest.fixture
def environment():
    """Mild weather: temperature at the ignition base, half humidity."""
    from forest_fire.environment import Environment

    return Environment(temperature=25.0, humidity=0.5)


@pytest.fixture
def make_grid(environment):
    """Build a grid from rows of cells, defaulting to the mild environment and East wind."""
    from forest_fire.environment import WindDirection
    from forest_fire.grid import Grid

    def _make(rows, step=0, env=None, wind=WindDirection.East):
        height = len(rows)
        width = len(rows[0]) if rows else 0
        return Grid(rows, width, height, step, env or environment, wind)

    return _make


@pytest.fixture
def grass_grid(make_grid):
    """Factory for a uniform grass grid."""
    from forest_fire.cell import Cell
    from forest_fire.vegetation import VegetationKind

    def _make(width=3, height=3, **kwargs):
        rows = [[Cell.unburnt(VegetationKind.Grass)] * width for _ in range(height)]
        return make_grid(rows, **kwargs)

    return _make
