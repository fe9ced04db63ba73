"""Unit tests for cell states and vegetation kinds."""

import pytest
from forest_fire.cell import Cell, CellState, DESTROYED
from forest_fire.vegetation import (
    VegetationKind,
    base_ignition_probability,
    burn_duration,
    ignitable,
    self_ignition_multiplier,
)


class TestVegetationKind:
    """Test cases for the vegetation table."""

    def test_terrain_is_not_ignitable(self):
        """Test that water and rock never burn."""
        for kind in (VegetationKind.Water, VegetationKind.Rock):
            assert ignitable(kind) is False
            assert burn_duration(kind) == 0
            assert base_ignition_probability(kind) == 0.0
            assert self_ignition_multiplier(kind) == 1.0

    def test_vegetation_is_ignitable(self):
        """Test that every plant kind can burn."""
        plants = [kind for kind in VegetationKind if kind not in (VegetationKind.Water, VegetationKind.Rock)]
        assert len(plants) == 5
        assert all(kind.ignitable for kind in plants)

    def test_burn_durations(self):
        """Test burn durations grow with vegetation size."""
        assert [burn_duration(kind) for kind in VegetationKind] == [0, 0, 1, 2, 3, 4, 5]

    def test_ignition_probabilities(self):
        """Test base ignition probabilities."""
        assert base_ignition_probability(VegetationKind.Grass) == 0.8
        assert base_ignition_probability(VegetationKind.Tree) == 0.4

    def test_self_ignition_multipliers(self):
        """Test self-ignition multipliers per kind."""
        expected = {
            VegetationKind.Grass: 1.5,
            VegetationKind.Bush: 1.2,
            VegetationKind.SmallTree: 1.0,
            VegetationKind.GrowingTree: 0.8,
            VegetationKind.Tree: 0.6,
        }
        for kind, multiplier in expected.items():
            assert self_ignition_multiplier(kind) == multiplier


class TestCell:
    """Test cases for the Cell tagged value."""

    def test_unburnt_cell_creation(self):
        """Test creating an unburnt cell."""
        cell = Cell.unburnt(VegetationKind.Bush)
        assert cell.state == CellState.Unburnt
        assert cell.kind == VegetationKind.Bush
        assert cell.ticks_remaining == 0

    def test_burning_cell_creation(self):
        """Test creating a burning cell keeps the original kind."""
        cell = Cell.burning(VegetationKind.Tree, 5)
        assert cell.state == CellState.Burning
        assert cell.kind == VegetationKind.Tree
        assert cell.ticks_remaining == 5

    def test_burning_cell_needs_positive_timer(self):
        """Test that a burning cell never holds a zero timer."""
        with pytest.raises(ValueError):
            Cell.burning(VegetationKind.Grass, 0)

    def test_cell_needs_kind(self):
        """Test that unburnt and burning cells need a vegetation kind."""
        with pytest.raises(ValueError):
            Cell(CellState.Unburnt)
        with pytest.raises(ValueError):
            Cell(CellState.Burning, None, 3)

    def test_destroyed_has_no_payload(self):
        """Test that destroyed cells reject a payload."""
        with pytest.raises(ValueError):
            Cell(CellState.Destroyed, VegetationKind.Grass)
        assert DESTROYED.kind is None

    def test_cells_are_immutable(self):
        """Test that cells cannot be modified in place."""
        cell = Cell.unburnt(VegetationKind.Grass)
        with pytest.raises(AttributeError):
            cell.kind = VegetationKind.Tree

    def test_burnable_unburnt_vegetation(self):
        """Test that unburnt vegetation is burnable."""
        assert Cell.unburnt(VegetationKind.Grass).is_burnable() is True

    def test_not_burnable_water(self):
        """Test that water cells are not burnable."""
        assert Cell.unburnt(VegetationKind.Water).is_burnable() is False

    def test_not_burnable_burning_cell(self):
        """Test that burning cells are not burnable."""
        assert Cell.burning(VegetationKind.Grass, 1).is_burnable() is False

    def test_not_burnable_destroyed_cell(self):
        """Test that destroyed cells are not burnable."""
        assert DESTROYED.is_burnable() is False

    def test_export_codes(self):
        """Test the nine export codes."""
        assert [Cell.unburnt(kind).code for kind in VegetationKind] == [0, 1, 2, 3, 4, 5, 6]
        assert Cell.burning(VegetationKind.Bush, 2).code == 7
        assert DESTROYED.code == 8

    def test_str(self):
        """Test string representation of cells."""
        assert str(Cell.burning(VegetationKind.Bush, 2)) == "Burning(Bush, 2)"
        assert str(Cell.unburnt(VegetationKind.Rock)) == "Unburnt(Rock)"
        assert str(DESTROYED) == "Destroyed"


class TestCellState:
    """Test cases for CellState enum."""

    def test_cell_states_exist(self):
        """Test that all expected cell states exist."""
        assert CellState.Unburnt
        assert CellState.Burning
        assert CellState.Destroyed

    def test_cell_state_values(self):
        """Test cell state values."""
        assert CellState.Unburnt.value == 0
        assert CellState.Burning.value == 1
        assert CellState.Destroyed.value == 2
