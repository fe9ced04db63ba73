#!/usr/bin/env python3
"""Pygame visualization launcher for the fire spread simulation.

Runs a seeded simulation headlessly, then plays the snapshot history back
with interactive controls for pause and playback speed.

Usage:
    python scripts/pygame_run.py
"""

import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import CompositionConfig, Environment, Grid, create_grid, ignite, run

from visualization import (
    GridRenderer,
    InfoPanel,
    WHITE,
    DEFAULT_CELL_SIZE,
    DEFAULT_FPS,
    MIN_FPS,
    MAX_FPS,
    PANEL_HEIGHT,
)

logger = logging.getLogger(__name__)

CONFIG: Dict[str, Any] = {
    "seed": 12345,
    "width": 60,
    "height": 45,
    "max_steps": 120,
    "temperature": 35.0,
    "humidity": 0.4,
    "composition": CompositionConfig(
        water=0.05, rock=0.02, grass=0.35, bush=0.25, small_tree=0.15, growing_tree=0.13, tree=0.05
    ),
    "fire_pos": None,  # (x, y) or None for center
}


class PlaybackRunner:
    """Plays back a simulation history with Pygame.

    Attributes:
        history: Snapshots to play, one per step.
        index: Position of the snapshot currently shown.
        paused: Whether playback is paused.
        current_fps: Current frames per second setting.
    """

    def __init__(self, history: list[Grid], cell_size: int) -> None:
        """Initialize the playback runner.

        Args:
            history: Ordered snapshots produced by ``run``.
            cell_size: Size of each cell in pixels.
        """
        self.history = history
        self.renderer = GridRenderer(cell_size, pulse=True)
        grid_width, grid_height = self.renderer.surface_size(history[0])

        pygame.init()
        self.screen = pygame.display.set_mode((max(grid_width, 640), grid_height + PANEL_HEIGHT))
        pygame.display.set_caption("Forest Fire Simulation")
        self.clock = pygame.time.Clock()
        self.info_panel = InfoPanel()

        self.grid_height = grid_height
        self.index = 0
        self.paused = False
        self.current_fps = DEFAULT_FPS

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Args:
            event: The keyboard event to process.

        Returns:
            False if playback should quit, True otherwise.
        """
        if event.key == pygame.K_ESCAPE:
            return False

        elif event.key == pygame.K_SPACE:
            self.paused = not self.paused

        elif event.key == pygame.K_UP:
            self.current_fps = min(MAX_FPS, self.current_fps + 1)

        elif event.key == pygame.K_DOWN:
            self.current_fps = max(MIN_FPS, self.current_fps - 1)

        elif event.key == pygame.K_r:
            self.index = 0
            self.paused = False

        return True

    def _render(self) -> None:
        """Render the current snapshot and the info panel."""
        grid = self.history[self.index]
        self.screen.fill(WHITE)
        self.renderer.draw_base(self.screen, grid)
        self.info_panel.draw(self.screen, grid, self.paused, self.current_fps, self.grid_height, PANEL_HEIGHT)
        pygame.display.flip()

    def run(self) -> None:
        """Run the playback loop until the user quits."""
        running = True

        while running:
            self._render()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False

            if not self.paused:
                if self.index < len(self.history) - 1:
                    self.index += 1
                else:
                    self.paused = True

            self.clock.tick(self.current_fps)

        pygame.quit()


def main() -> None:
    """Simulate with the CONFIG parameters, then show the playback window."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    width, height = CONFIG["width"], CONFIG["height"]
    environment = Environment(temperature=CONFIG["temperature"], humidity=CONFIG["humidity"])
    rng = random.Random(CONFIG["seed"])

    grid = create_grid(width, height, CONFIG["composition"], environment, rng=rng)
    fire_pos = CONFIG["fire_pos"] or (width // 2, height // 2)
    ignited = ignite(grid, *fire_pos)
    if ignited is grid:
        logger.warning(f"Cannot ignite starting cell at {fire_pos}")

    history = run(ignited, CONFIG["max_steps"], rng=rng)
    PlaybackRunner(history, DEFAULT_CELL_SIZE).run()


if __name__ == "__main__":
    main()
