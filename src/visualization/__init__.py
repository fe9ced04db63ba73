"""Visualization package for fire spread snapshots using Pygame."""

from .colors import *
from .renderer import GridRenderer
from .ui import InfoPanel

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'InfoPanel',

    # Vegetation colors
    'WATER_COLOR',
    'ROCK_COLOR',
    'GRASS_COLOR',
    'BUSH_COLOR',
    'SMALL_TREE_COLOR',
    'GROWING_TREE_COLOR',
    'TREE_COLOR',

    # Cell state colors
    'BURNING_COLOR',
    'DESTROYED_COLOR',

    # UI colors
    'BLACK',
    'WHITE',
    'PANEL_COLOR',

    # Default parameters
    'DEFAULT_CELL_SIZE',
    'DEFAULT_FPS',
    'PANEL_HEIGHT',

    # FPS limits
    'MIN_FPS',
    'MAX_FPS',
]
