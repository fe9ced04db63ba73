"""UI components for the fire spread visualization.

This module contains the info panel showing playback status beneath
the grid.
"""

import pygame

from forest_fire.cell import CellState
from forest_fire.grid import Grid
from .colors import WHITE, PANEL_COLOR


class InfoPanel:
    """Displays snapshot information at the bottom of the screen.

    Shows the current step, weather, number of burning cells, pause status
    and keyboard shortcuts.

    Attributes:
        font: Main font for primary information.
        small_font: Smaller font for secondary information.
    """

    def __init__(self) -> None:
        """Initialize the info panel with fonts."""
        self.font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 22)

    def status_lines(self, grid: Grid, paused: bool, fps: int) -> list[str]:
        env = grid.environment
        burning = grid.count_state(CellState.Burning)
        return [
            f"Step: {grid.step}    {'PAUSED' if paused else 'PLAYING'}",
            f"Temperature: {env.temperature}°C  Humidity: {int(env.humidity * 100)}%  Wind: {grid.wind.name}",
            f"Burning cells: {burning}    Speed: {fps} FPS",
        ]

    def draw(
        self,
        screen: pygame.Surface,
        grid: Grid,
        paused: bool,
        fps: int,
        panel_y: int,
        panel_height: int,
    ) -> None:
        """Draw the panel block beneath the grid."""
        width = screen.get_width()
        panel_surface = pygame.Surface((width, panel_height))
        panel_surface.fill(PANEL_COLOR)
        screen.blit(panel_surface, (0, panel_y))

        y = panel_y + 8
        for line in self.status_lines(grid, paused, fps):
            text = self.font.render(line, True, WHITE)
            screen.blit(text, (10, y))
            y += text.get_height() + 2

        hint = self.small_font.render("SPACE = pause  UP/DOWN = speed  ESC = quit", True, WHITE)
        screen.blit(hint, (width - hint.get_width() - 10, panel_y + 8))
