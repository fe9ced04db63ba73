"""Fire spread model: grid creation, ignition and the time-stepped driver."""

import logging
import random
from enum import Enum
from typing import Optional

import numpy as np
from mesa import Model
from mesa.datacollection import DataCollector

from .cell import Cell, CellState
from .composition import CompositionConfig
from .engine import RandomSource, TransitionEngine
from .environment import Environment, WindDirection
from .grid import Grid

logger = logging.getLogger(__name__)

INITIAL_WIND = WindDirection.East


class DrawPolicy(Enum):
    """How cells obtain their random draws during a step.

    Sequential: one shared generator, cells visited row-major, a cell draws
        only when its transition needs a value. Reproducible for a fixed seed
        as long as the visiting order stays row-major.
    Keyed: each cell gets its own generator seeded by (seed, step, x, y), so
        its outcome does not depend on the order cells are evaluated in.
    """
    Sequential = "sequential"
    Keyed = "keyed"


def create_grid(
    width: int,
    height: int,
    config: CompositionConfig,
    environment: Environment,
    rng: Optional[RandomSource] = None,
) -> Grid:
    """
    Build the step-0 grid by sampling a vegetation kind for every cell.

    Args:
        width: Number of columns (> 0)
        height: Number of rows (> 0)
        config: Fractional share of each vegetation kind
        environment: Temperature and humidity of the run
        rng: Generator for the per-cell draws (row-major order)

    Returns:
        New Grid at step 0 with wind blowing East
    """
    if width <= 0 or height <= 0:
        logger.error(f"Invalid grid size {width}x{height}")
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    if rng is None:
        rng = random.Random()

    cells = [
        [Cell.unburnt(config.select(rng.random())) for _ in range(width)]
        for _ in range(height)
    ]
    logger.info(f"Created {width}x{height} grid (T={environment.temperature}, humidity={environment.humidity})")
    return Grid(cells, width, height, 0, environment, INITIAL_WIND)


def ignite(grid: Grid, x: int, y: int) -> Grid:
    """Set (x, y) on fire if it holds unburnt ignitable vegetation.

    Out-of-bounds or non-ignitable targets leave the grid untouched and the
    same instance is returned.
    """
    cell = grid.get(x, y)
    if cell is None or not cell.is_burnable():
        logger.debug(f"Ignoring ignition at ({x}, {y}): {cell if cell is not None else 'out of bounds'}")
        return grid
    return grid.with_cell(x, y, Cell.burning(cell.kind, cell.kind.burn_duration))


def step_grid(grid: Grid, engine: TransitionEngine, rng: RandomSource) -> Grid:
    """Next snapshot using one shared generator, cells visited row-major.

    Every next state is computed from ``grid`` before the new Grid exists,
    so no cell observes a sibling's updated state.
    """
    cells = [
        [engine.next_cell(grid, x, y, rng) for x in range(grid.width)]
        for y in range(grid.height)
    ]
    return grid.advanced(cells)


def cell_generator(seed: int, step: int, x: int, y: int) -> np.random.Generator:
    """Independent generator for one cell of one step."""
    return np.random.default_rng([seed, step, x, y])


def step_grid_keyed(grid: Grid, engine: TransitionEngine, seed: int) -> Grid:
    """Next snapshot where each cell draws from its own keyed generator."""
    cells = [
        [engine.next_cell(grid, x, y, cell_generator(seed, grid.step, x, y)) for x in range(grid.width)]
        for y in range(grid.height)
    ]
    return grid.advanced(cells)


class FireModel(Model):
    """Time-stepped driver producing one immutable snapshot per step.

    Mesa provides the seeded ``self.random`` generator used for sequential
    draws and the DataCollector that records per-step state counts.
    """

    def __init__(
        self,
        grid: Grid,
        engine: Optional[TransitionEngine] = None,
        draws: DrawPolicy = DrawPolicy.Sequential,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        max_steps: Optional[int] = None,
    ):
        """
        Initialize the fire spread model.

        Args:
            grid: Initial snapshot (usually step 0, already ignited)
            engine: Transition rules, defaults to the reference rules
            draws: Random draw policy, see DrawPolicy
            seed: Seed for Mesa's generator and for keyed draws
            rng: Explicit generator for sequential draws instead of ``self.random``
            max_steps: Step at which ``running`` turns False
        """
        super().__init__(seed=seed)
        self.grid = grid
        self.engine = engine or TransitionEngine()
        self.draws = draws
        self.draw_source = rng if rng is not None else self.random
        if draws == DrawPolicy.Keyed and seed is None:
            seed = self.random.getrandbits(32)
        self.draw_seed = seed
        self.max_steps = max_steps
        self.history: list[Grid] = [grid]
        self.running = max_steps is None or grid.step < max_steps

        self.datacollector = DataCollector(
            model_reporters={
                "Step": lambda m: m.grid.step,
                "Unburnt": lambda m: m.grid.count_state(CellState.Unburnt),
                "Burning": lambda m: m.grid.count_state(CellState.Burning),
                "Destroyed": lambda m: m.grid.count_state(CellState.Destroyed),
            }
        )
        self.datacollector.collect(self)

    def step(self):
        """Advance the simulation by one snapshot."""
        if self.draws == DrawPolicy.Keyed:
            next_grid = step_grid_keyed(self.grid, self.engine, self.draw_seed)
        else:
            next_grid = step_grid(self.grid, self.engine, self.draw_source)

        self.grid = next_grid
        self.history.append(next_grid)
        self.datacollector.collect(self)

        if self.max_steps is not None and next_grid.step >= self.max_steps:
            self.running = False
        logger.debug(f"Step {next_grid.step}: {next_grid.count_state(CellState.Burning)} cells burning")

    def run(self, max_steps: int) -> list[Grid]:
        """Step until the current grid reaches ``max_steps`` and return the history."""
        self.max_steps = max_steps
        self.running = self.grid.step < max_steps
        logger.info(f"Running simulation from step {self.grid.step} to {max_steps} ({self.draws.value} draws)")

        while self.running:
            self.step()

        logger.info(f"Simulation finished with {len(self.history)} snapshots")
        return list(self.history)

    def is_burning(self) -> bool:
        return self.grid.count_state(CellState.Burning) > 0


def run(
    grid: Grid,
    max_steps: int,
    engine: Optional[TransitionEngine] = None,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
    draws: DrawPolicy = DrawPolicy.Sequential,
) -> list[Grid]:
    """
    Run a simulation and return its history.

    The history holds snapshots for ``grid.step`` through ``max_steps``
    inclusive. When ``max_steps`` is not past the initial step, only the
    initial grid is returned.

    Args:
        grid: Initial snapshot, returned unmodified as the first element
        max_steps: Last step to simulate
        engine: Transition rules
        rng: Generator for sequential draws (overrides ``seed``)
        seed: Seed for a fresh generator or for keyed draws
        draws: Random draw policy

    Returns:
        Ordered list of Grid snapshots
    """
    model = FireModel(grid, engine=engine, draws=draws, seed=seed, rng=rng)
    return model.run(max_steps)
