"""Per-cell stochastic transition rules.

The engine is a pure function of the current grid snapshot and a random
generator. It never looks at cells that were already updated during the
same step, which is what makes the automaton synchronous.

Any object with a ``random()`` method returning a float in [0, 1) can be
used as a generator: ``random.Random``, ``numpy.random.Generator`` or a
stub with fixed values in tests.
"""

from dataclasses import dataclass
from typing import Protocol

from . import constants
from .cell import DESTROYED, Cell, CellState
from .grid import Grid
from .vegetation import VegetationKind


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass(frozen=True)
class SimulationParameters:
    """Tunable constants of the transition rules."""

    base_extinguish: float = constants.BASE_EXTINGUISH_PROBABILITY
    water_extinguish_bonus: float = constants.WATER_EXTINGUISH_BONUS
    humidity_extinguish_bonus: float = constants.HUMIDITY_EXTINGUISH_BONUS
    max_extinguish: float = constants.MAX_EXTINGUISH_PROBABILITY

    base_self_ignition: float = constants.BASE_SELF_IGNITION_CHANCE
    temperature_self_ignition_exponent: float = constants.TEMPERATURE_SELF_IGNITION_EXPONENT
    humidity_self_ignition_reduction: float = constants.HUMIDITY_SELF_IGNITION_REDUCTION

    neighbor_ignition_effect: float = constants.NEIGHBOR_IGNITION_EFFECT
    temperature_ignition_base: float = constants.TEMPERATURE_IGNITION_BASE
    min_temperature_effect: float = constants.MIN_TEMPERATURE_EFFECT
    min_humidity_effect: float = constants.MIN_HUMIDITY_EFFECT
    wind_bonus: float = constants.WIND_SPREAD_BONUS

    destroyed_to_grass: float = constants.DESTROYED_TO_GRASS_CHANCE
    destroyed_to_bush: float = constants.DESTROYED_TO_BUSH_CHANCE
    destroyed_to_small_tree: float = constants.DESTROYED_TO_SMALL_TREE_CHANCE
    destroyed_to_growing_tree: float = constants.DESTROYED_TO_GROWING_TREE_CHANCE

    def regrowth_table(self) -> list[tuple[float, VegetationKind]]:
        return [
            (self.destroyed_to_grass, VegetationKind.Grass),
            (self.destroyed_to_bush, VegetationKind.Bush),
            (self.destroyed_to_small_tree, VegetationKind.SmallTree),
            (self.destroyed_to_growing_tree, VegetationKind.GrowingTree),
        ]


DEFAULT_PARAMETERS = SimulationParameters()

# Vegetation succession: kind -> ordered (chance, next kind) buckets
GROWTH_TABLE: dict[VegetationKind, list[tuple[float, VegetationKind]]] = {
    VegetationKind.Grass: [
        (constants.GRASS_TO_BUSH_CHANCE, VegetationKind.Bush),
        (constants.GRASS_TO_SMALL_TREE_CHANCE, VegetationKind.SmallTree),
        (constants.GRASS_TO_GROWING_TREE_CHANCE, VegetationKind.GrowingTree),
    ],
    VegetationKind.Bush: [(constants.BUSH_TO_SMALL_TREE_CHANCE, VegetationKind.SmallTree)],
    VegetationKind.SmallTree: [(constants.SMALL_TREE_TO_GROWING_TREE_CHANCE, VegetationKind.GrowingTree)],
    VegetationKind.GrowingTree: [(constants.GROWING_TREE_TO_TREE_CHANCE, VegetationKind.Tree)],
}


def select_cumulative(r: float, buckets: list[tuple[float, VegetationKind]]) -> VegetationKind | None:
    """Return the bucket whose running partial sum first exceeds ``r``, or None."""
    threshold = 0.0
    for chance, kind in buckets:
        threshold += chance
        if r < threshold:
            return kind
    return None


class TransitionEngine:
    """Computes the next state of a single cell from the current snapshot.

    Args:
        parameters: Constants used by the probability formulas
        succession: When False (default) ignition is checked first for every
            ignitable kind and vegetation growth never happens, matching the
            reference model. When True, a cell that did not ignite draws a
            second value and may grow according to ``GROWTH_TABLE``.
    """

    def __init__(self, parameters: SimulationParameters = DEFAULT_PARAMETERS, succession: bool = False):
        self.parameters = parameters
        self.succession = succession

    def extinguish_probability(self, grid: Grid, x: int, y: int) -> float:
        p = self.parameters
        water_effect = grid.count_water(x, y) * p.water_extinguish_bonus
        humidity_effect = grid.environment.humidity * p.humidity_extinguish_bonus
        probability = min(p.max_extinguish, p.base_extinguish + water_effect + humidity_effect)
        return max(0.0, probability)

    def self_ignition_probability(self, grid: Grid, kind: VegetationKind) -> float:
        """Spontaneous ignition chance, zero for non-ignitable kinds."""
        if not kind.ignitable:
            return 0.0
        p = self.parameters
        env = grid.environment
        # Magnitude only, so sub-zero temperatures stay real for fractional exponents
        temperature_effect = abs(env.temperature / p.temperature_ignition_base) ** p.temperature_self_ignition_exponent
        humidity_reduction = 1.0 - env.humidity * p.humidity_self_ignition_reduction
        return p.base_self_ignition * temperature_effect * humidity_reduction * kind.self_ignition_multiplier

    def wind_bonus(self, grid: Grid, x: int, y: int) -> float:
        """Bonus applied when a cardinal neighbor burns in the wind direction.

        Diagonal neighbors never count here even though they do count
        towards the spread magnitude.
        """
        if grid.wind in grid.burning_cardinal_directions(x, y):
            return self.parameters.wind_bonus
        return 1.0

    def spread_ignition_probability(self, grid: Grid, x: int, y: int, kind: VegetationKind) -> float:
        burning = grid.count_burning(x, y)
        if burning == 0:
            return 0.0
        p = self.parameters
        env = grid.environment
        neighbor_effect = burning * p.neighbor_ignition_effect
        temperature_effect = max(p.min_temperature_effect, env.temperature / p.temperature_ignition_base)
        humidity_effect = max(p.min_humidity_effect, 1.0 - env.humidity)
        return (
            kind.base_ignition_probability
            * neighbor_effect
            * temperature_effect
            * humidity_effect
            * self.wind_bonus(grid, x, y)
        )

    def ignition_probability(self, grid: Grid, x: int, y: int, kind: VegetationKind) -> float:
        """Chance that an unburnt cell of ``kind`` at (x, y) catches fire, clamped to [0, 1]."""
        spread = self.spread_ignition_probability(grid, x, y, kind)
        spontaneous = self.self_ignition_probability(grid, kind)
        return min(1.0, max(0.0, spread, spontaneous))

    def next_cell(self, grid: Grid, x: int, y: int, rng: RandomSource) -> Cell:
        """
        Compute the state of (x, y) for the next step.

        Args:
            grid: Current, unmodified snapshot
            x: Column of the cell
            y: Row of the cell
            rng: Generator used for every draw this cell needs

        Returns:
            The cell's next state
        """
        cell = grid.cells[y][x]

        if cell.state == CellState.Burning:
            return self._next_burning(grid, x, y, cell, rng)

        if cell.state == CellState.Destroyed:
            regrown = select_cumulative(rng.random(), self.parameters.regrowth_table())
            return Cell.unburnt(regrown) if regrown is not None else DESTROYED

        # Water and rock never change
        if not cell.kind.ignitable:
            return cell

        if rng.random() < self.ignition_probability(grid, x, y, cell.kind):
            return Cell.burning(cell.kind, cell.kind.burn_duration)

        if self.succession and cell.kind in GROWTH_TABLE:
            grown = select_cumulative(rng.random(), GROWTH_TABLE[cell.kind])
            if grown is not None:
                return Cell.unburnt(grown)
        return cell

    def _next_burning(self, grid: Grid, x: int, y: int, cell: Cell, rng: RandomSource) -> Cell:
        if cell.ticks_remaining <= 1:
            return DESTROYED
        if rng.random() < self.extinguish_probability(grid, x, y):
            return Cell.unburnt(cell.kind)
        return Cell.burning(cell.kind, cell.ticks_remaining - 1)
