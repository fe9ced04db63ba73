"""Color definitions and constants for the fire spread visualization.

This module contains all RGB color tuples and default configuration values
used throughout the Pygame visualization.
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# VEGETATION COLORS (matching forest_fire.vegetation.VegetationKind)
# ============================================================================

WATER_COLOR: Color = (0, 0, 255)                    # blue
ROCK_COLOR: Color = (128, 128, 128)                 # gray
GRASS_COLOR: Color = (154, 205, 50)                 # yellowgreen
BUSH_COLOR: Color = (60, 179, 113)                  # mediumseagreen
SMALL_TREE_COLOR: Color = (34, 139, 34)             # forestgreen
GROWING_TREE_COLOR: Color = (0, 100, 0)             # darkgreen
TREE_COLOR: Color = (0, 77, 0)                      # deep green

# ============================================================================
# CELL STATE COLORS (burning and destroyed)
# ============================================================================

BURNING_COLOR: Color = (255, 0, 0)                  # red (on fire)
DESTROYED_COLOR: Color = (0, 0, 0)                  # black (burned out)

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Grid lines, text
WHITE: Color = (255, 255, 255)                      # Background
PANEL_COLOR: Color = (80, 0, 0)                     # Info panel background

# ============================================================================
# DEFAULT PLAYBACK PARAMETERS
# ============================================================================

DEFAULT_CELL_SIZE: int = 12                         # Cell size in pixels
DEFAULT_FPS: int = 5                                # Default frames per second
PANEL_HEIGHT: int = 90                              # Info panel height in pixels

# ============================================================================
# FPS LIMITS
# ============================================================================

MIN_FPS: int = 1                                    # Minimum playback speed
MAX_FPS: int = 30                                   # Maximum playback speed
