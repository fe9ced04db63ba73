"""Grid rendering functionality for the fire spread simulation.

This module provides the GridRenderer class which handles drawing a grid
snapshot with proper colors for each cell state.
"""

import math

import pygame

from forest_fire.cell import Cell, CellState
from forest_fire.grid import Grid
from forest_fire.vegetation import VegetationKind
from .colors import (
    BURNING_COLOR,
    DESTROYED_COLOR,
    WATER_COLOR,
    ROCK_COLOR,
    GRASS_COLOR,
    BUSH_COLOR,
    SMALL_TREE_COLOR,
    GROWING_TREE_COLOR,
    TREE_COLOR,
)


class GridRenderer:
    """Renders grid snapshots onto a Pygame surface.

    Each cell is colored by its vegetation kind, or by its state when it is
    burning or destroyed.

    Attributes:
        cell_size: Size of each cell in pixels.
        pulse: Whether burning cells flicker with the frame counter.
    """

    VEGETATION_COLORS = {
        VegetationKind.Water: WATER_COLOR,
        VegetationKind.Rock: ROCK_COLOR,
        VegetationKind.Grass: GRASS_COLOR,
        VegetationKind.Bush: BUSH_COLOR,
        VegetationKind.SmallTree: SMALL_TREE_COLOR,
        VegetationKind.GrowingTree: GROWING_TREE_COLOR,
        VegetationKind.Tree: TREE_COLOR,
    }

    def __init__(self, cell_size: int, pulse: bool = False) -> None:
        """Initialize the grid renderer.

        Args:
            cell_size: Size of each cell in pixels.
            pulse: Animate burning cells with a glow.
        """
        self.cell_size = cell_size
        self.pulse = pulse

    def get_cell_color(self, cell: Cell, x: int = 0) -> tuple[int, int, int]:
        """Get the RGB color for a given cell.

        Args:
            cell: The cell to get color for.
            x: Column of the cell, used to offset the burning pulse.

        Returns:
            RGB color tuple for the given cell.
        """
        if cell.state == CellState.Burning:
            if not self.pulse:
                return BURNING_COLOR
            strength = 1.0 + 0.4 * math.sin(pygame.time.get_ticks() * 0.01 + x * 0.3)
            return self._apply_glow(BURNING_COLOR, strength)

        elif cell.state == CellState.Destroyed:
            return DESTROYED_COLOR

        return self.VEGETATION_COLORS[cell.kind]

    def _apply_glow(self, color: tuple[int, int, int], strength: float) -> tuple[int, int, int]:
        """Apply glow to a base color by scaling brightness."""
        r, g, b = color

        r = max(0, min(255, int(r * strength)))
        g = max(0, min(255, int(g * strength)))
        b = max(0, min(255, int(b * strength)))

        return (r, g, b)

    def surface_size(self, grid: Grid) -> tuple[int, int]:
        return grid.width * self.cell_size, grid.height * self.cell_size

    def draw_base(self, screen: pygame.Surface, grid: Grid, offset_x: int = 0, offset_y: int = 0) -> None:
        """Draw every cell of the snapshot, row 0 at the top."""
        for x, y, cell in grid.iter_cells():
            pygame.draw.rect(
                screen,
                self.get_cell_color(cell, x),
                (
                    offset_x + x * self.cell_size,
                    offset_y + y * self.cell_size,
                    self.cell_size,
                    self.cell_size
                )
            )
