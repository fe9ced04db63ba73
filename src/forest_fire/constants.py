"""Simulation constants for the forest fire cellular automaton.

Every probability used by the transition rules lives here so that the
engine can be tuned from one place. ``SimulationParameters`` in
``engine.py`` takes its defaults from these values.
"""

# ============================================================================
# EXTINGUISHING
# ============================================================================

BASE_EXTINGUISH_PROBABILITY: float = 0.01
WATER_EXTINGUISH_BONUS: float = 0.1         # per water cell in the Moore neighborhood
HUMIDITY_EXTINGUISH_BONUS: float = 0.1      # scaled by atmosphere humidity
MAX_EXTINGUISH_PROBABILITY: float = 0.8

# ============================================================================
# SELF IGNITION
# ============================================================================

BASE_SELF_IGNITION_CHANCE: float = 0.001
TEMPERATURE_SELF_IGNITION_EXPONENT: float = 2.0
HUMIDITY_SELF_IGNITION_REDUCTION: float = 0.5

# ============================================================================
# SPREAD IGNITION
# ============================================================================

NEIGHBOR_IGNITION_EFFECT: float = 0.8       # per burning Moore neighbor
TEMPERATURE_IGNITION_BASE: float = 25.0     # degrees Celsius
MIN_TEMPERATURE_EFFECT: float = 0.5
MIN_HUMIDITY_EFFECT: float = 0.3
WIND_SPREAD_BONUS: float = 1.5

# ============================================================================
# VEGETATION GROWTH (only used with succession enabled)
# ============================================================================

GRASS_TO_BUSH_CHANCE: float = 0.02
GRASS_TO_SMALL_TREE_CHANCE: float = 0.008
GRASS_TO_GROWING_TREE_CHANCE: float = 0.01
BUSH_TO_SMALL_TREE_CHANCE: float = 0.015
SMALL_TREE_TO_GROWING_TREE_CHANCE: float = 0.01
GROWING_TREE_TO_TREE_CHANCE: float = 0.008

# ============================================================================
# REGROWTH OF DESTROYED CELLS
# ============================================================================

DESTROYED_TO_GRASS_CHANCE: float = 0.01
DESTROYED_TO_BUSH_CHANCE: float = 0.006
DESTROYED_TO_SMALL_TREE_CHANCE: float = 0.004
DESTROYED_TO_GROWING_TREE_CHANCE: float = 0.005

# ============================================================================
# GRID COMPOSITION
# ============================================================================

COMPOSITION_TOLERANCE: float = 0.001

# ============================================================================
# EXPORT CODES FOR NON-VEGETATION STATES
# ============================================================================

BURNING_CODE: int = 7
DESTROYED_CODE: int = 8
