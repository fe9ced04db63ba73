"""Unit tests for the per-cell transition rules."""

import pytest
from forest_fire.cell import Cell, CellState, DESTROYED
from forest_fire.engine import GROWTH_TABLE, SimulationParameters, TransitionEngine, select_cumulative
from forest_fire.environment import Environment, WindDirection
from forest_fire.vegetation import VegetationKind

G = Cell.unburnt(VegetationKind.Grass)
W = Cell.unburnt(VegetationKind.Water)
R = Cell.unburnt(VegetationKind.Rock)
F = Cell.burning(VegetationKind.Grass, 3)

NO_EXTINGUISH = SimulationParameters(base_extinguish=0.0, water_extinguish_bonus=0.0, humidity_extinguish_bonus=0.0)
ALWAYS_EXTINGUISH = SimulationParameters(base_extinguish=1.0, max_extinguish=1.0)


@pytest.fixture
def engine():
    return TransitionEngine()


class TestExtinguishProbability:
    """Test cases for the extinguish formula."""

    def test_base_and_humidity(self, engine, make_grid):
        """Test base chance plus humidity bonus without water nearby."""
        grid = make_grid([[G, G], [G, F]])
        assert engine.extinguish_probability(grid, 1, 1) == pytest.approx(0.01 + 0.5 * 0.1)

    def test_water_bonus(self, engine, make_grid):
        """Test each water neighbor adds its bonus."""
        grid = make_grid([[W, W], [G, F]])
        assert engine.extinguish_probability(grid, 1, 1) == pytest.approx(0.01 + 2 * 0.1 + 0.05)

    def test_clamped_to_maximum(self, engine, make_grid):
        """Test that many water neighbors never exceed the maximum."""
        env = Environment(temperature=25.0, humidity=1.0)
        grid = make_grid([[W, W, W], [W, F, W], [W, W, W]], env=env)
        assert engine.extinguish_probability(grid, 1, 1) == pytest.approx(0.8)


class TestIgnitionProbability:
    """Test cases for the spread and self-ignition formulas."""

    def test_self_ignition_only_without_fire(self, engine, grass_grid):
        """Test that an isolated cell only has the spontaneous chance."""
        grid = grass_grid(3, 3)
        expected = 0.001 * 1.0 * (1 - 0.5 * 0.5) * 1.5
        assert engine.spread_ignition_probability(grid, 1, 1, VegetationKind.Grass) == 0.0
        assert engine.ignition_probability(grid, 1, 1, VegetationKind.Grass) == pytest.approx(expected)

    def test_self_ignition_zero_for_terrain(self, engine, grass_grid):
        """Test that water and rock never ignite spontaneously."""
        grid = grass_grid(1, 1)
        assert engine.self_ignition_probability(grid, VegetationKind.Water) == 0.0
        assert engine.self_ignition_probability(grid, VegetationKind.Rock) == 0.0

    def test_spread_from_one_neighbor(self, engine, make_grid):
        """Test spread from a single diagonal neighbor (no wind bonus)."""
        grid = make_grid([[F, G, G], [G, G, G], [G, G, G]])
        expected = 0.8 * 0.8 * 1.0 * 0.5 * 1.0
        assert engine.ignition_probability(grid, 1, 1, VegetationKind.Grass) == pytest.approx(expected)

    def test_spread_uses_minimum_effects(self, engine, make_grid):
        """Test cold and humid weather fall back to the minimum effects."""
        env = Environment(temperature=5.0, humidity=0.9)
        grid = make_grid([[F, G], [G, G]], env=env)
        expected = 0.8 * 0.8 * 0.5 * 0.3
        assert engine.spread_ignition_probability(grid, 1, 1, VegetationKind.Grass) == pytest.approx(expected)

    def test_clamped_to_one(self, engine, make_grid):
        """Test extreme heat and a ring of fire never exceed certainty."""
        env = Environment(temperature=1000.0, humidity=0.0)
        grid = make_grid([[F, F, F], [F, G, F], [F, F, F]], env=env)
        assert engine.ignition_probability(grid, 1, 1, VegetationKind.Grass) == 1.0

    def test_non_negative_in_freezing_cold(self, engine, make_grid):
        """Test probabilities stay within [0, 1] below zero degrees."""
        env = Environment(temperature=-40.0, humidity=1.0)
        grid = make_grid([[F, G], [G, G]], env=env)
        probability = engine.ignition_probability(grid, 1, 1, VegetationKind.Tree)
        assert 0.0 <= probability <= 1.0

    def test_fractional_exponent_below_zero(self, grass_grid):
        """Test self-ignition stays a real number for sub-zero temperatures."""
        engine = TransitionEngine(SimulationParameters(temperature_self_ignition_exponent=1.5))
        grid = grass_grid(3, 3, env=Environment(temperature=-25.0, humidity=0.0))
        spontaneous = engine.self_ignition_probability(grid, VegetationKind.Grass)
        assert isinstance(spontaneous, float)
        assert spontaneous == pytest.approx(0.001 * 1.5)
        assert engine.ignition_probability(grid, 1, 1, VegetationKind.Grass) == pytest.approx(0.001 * 1.5)


class TestWindBonus:
    """Test cases for wind-aligned spread."""

    def test_cardinal_fire_in_wind_direction(self, engine, make_grid):
        """Test the bonus when the burning cardinal neighbor lies in the wind direction."""
        grid = make_grid([[G, G, G], [G, G, F], [G, G, G]], wind=WindDirection.East)
        assert engine.wind_bonus(grid, 1, 1) == 1.5
        expected = 0.8 * 0.8 * 1.0 * 0.5 * 1.5
        assert engine.ignition_probability(grid, 1, 1, VegetationKind.Grass) == pytest.approx(expected)

    def test_cardinal_fire_against_wind(self, engine, make_grid):
        """Test no bonus when the fire is on another side."""
        grid = make_grid([[G, G, G], [G, G, F], [G, G, G]], wind=WindDirection.West)
        assert engine.wind_bonus(grid, 1, 1) == 1.0

    def test_diagonal_fire_never_gets_bonus(self, engine, make_grid):
        """Test a diagonal fire counts for spread but not for wind."""
        for wind in WindDirection:
            grid = make_grid([[G, G, G], [G, G, G], [G, G, F]], wind=wind)
            assert grid.count_burning(1, 1) == 1
            assert engine.wind_bonus(grid, 1, 1) == 1.0


class TestTransitions:
    """Test cases for next_cell."""

    def test_last_tick_destroys_without_draw(self, engine, make_grid, fixed_draws):
        """Test that a cell on its last tick is destroyed unconditionally."""
        grid = make_grid([[Cell.burning(VegetationKind.Tree, 1)]])
        rng = fixed_draws(0.0)
        assert engine.next_cell(grid, 0, 0, rng) == DESTROYED
        assert rng.calls == 0

    def test_burning_counts_down(self, make_grid, fixed_draws):
        """Test the burn timer decreases when not extinguished."""
        grid = make_grid([[Cell.burning(VegetationKind.Tree, 5)]])
        engine = TransitionEngine(NO_EXTINGUISH)
        assert engine.next_cell(grid, 0, 0, fixed_draws(0.0)) == Cell.burning(VegetationKind.Tree, 4)

    def test_extinguished_reverts_to_original_kind(self, make_grid, fixed_draws):
        """Test that a put-out fire restores the vegetation that was burning."""
        grid = make_grid([[Cell.burning(VegetationKind.Bush, 2)]])
        engine = TransitionEngine(ALWAYS_EXTINGUISH)
        assert engine.next_cell(grid, 0, 0, fixed_draws(0.5)) == Cell.unburnt(VegetationKind.Bush)

    def test_ignition_uses_burn_duration(self, engine, make_grid, fixed_draws):
        """Test that a low draw sets the cell burning for its full duration."""
        tree = Cell.unburnt(VegetationKind.Tree)
        grid = make_grid([[F, tree]])
        assert engine.next_cell(grid, 1, 0, fixed_draws(0.0)) == Cell.burning(VegetationKind.Tree, 5)

    def test_high_draw_keeps_vegetation(self, engine, make_grid, fixed_draws):
        """Test that a draw above the ignition probability changes nothing."""
        grid = make_grid([[F, G]])
        assert engine.next_cell(grid, 1, 0, fixed_draws(0.99)) == G

    def test_terrain_is_absorbing(self, engine, make_grid, fixed_draws):
        """Test water and rock never change and consume no draws."""
        grid = make_grid([[F, W], [R, F]])
        rng = fixed_draws(0.0)
        assert engine.next_cell(grid, 1, 0, rng) == W
        assert engine.next_cell(grid, 0, 1, rng) == R
        assert rng.calls == 0

    @pytest.mark.parametrize("draw, expected", [
        (0.005, Cell.unburnt(VegetationKind.Grass)),
        (0.012, Cell.unburnt(VegetationKind.Bush)),
        (0.018, Cell.unburnt(VegetationKind.SmallTree)),
        (0.022, Cell.unburnt(VegetationKind.GrowingTree)),
        (0.03, DESTROYED),
    ])
    def test_destroyed_regrowth(self, engine, make_grid, fixed_draws, draw, expected):
        """Test cumulative regrowth thresholds of destroyed cells."""
        grid = make_grid([[DESTROYED]])
        assert engine.next_cell(grid, 0, 0, fixed_draws(draw)) == expected

    def test_reads_only_the_current_snapshot(self, engine, make_grid, fixed_draws):
        """Test that the engine does not modify the grid it reads."""
        grid = make_grid([[F, G]])
        before = grid.cells
        engine.next_cell(grid, 1, 0, fixed_draws(0.0))
        assert grid.cells == before
        assert grid.get(1, 0).state == CellState.Unburnt


class TestSuccession:
    """Test cases for vegetation growth ordering."""

    def test_growth_never_runs_by_default(self, engine, grass_grid, fixed_draws):
        """Test the reference ordering: ignition check only, one draw."""
        grid = grass_grid(1, 1)
        rng = fixed_draws(0.5, 0.0)
        assert engine.next_cell(grid, 0, 0, rng) == G
        assert rng.calls == 1

    def test_growth_after_failed_ignition(self, grass_grid, fixed_draws):
        """Test grass growing into bush when succession is enabled."""
        engine = TransitionEngine(succession=True)
        grid = grass_grid(1, 1)
        rng = fixed_draws(0.5, 0.01)
        assert engine.next_cell(grid, 0, 0, rng) == Cell.unburnt(VegetationKind.Bush)
        assert rng.calls == 2

    def test_growth_table_is_a_chain(self):
        """Test every growth step leads towards a full tree."""
        assert select_cumulative(0.025, GROWTH_TABLE[VegetationKind.Grass]) == VegetationKind.SmallTree
        assert select_cumulative(0.037, GROWTH_TABLE[VegetationKind.Grass]) == VegetationKind.GrowingTree
        assert select_cumulative(0.001, GROWTH_TABLE[VegetationKind.GrowingTree]) == VegetationKind.Tree
        assert VegetationKind.Tree not in GROWTH_TABLE

    def test_ignition_wins_over_growth(self, make_grid, fixed_draws):
        """Test that ignition is still checked first with succession enabled."""
        engine = TransitionEngine(succession=True)
        grid = make_grid([[F, G]])
        assert engine.next_cell(grid, 1, 0, fixed_draws(0.0)) == Cell.burning(VegetationKind.Grass, 1)
