"""
Forest Fire Simulation using Cellular Automata.

A probabilistic cellular automaton modelling wildfire ignition, spread,
extinguishing and regrowth over a heterogeneous vegetation grid under a
global temperature, humidity and wind direction.
"""

from .cell import Cell, CellState, DESTROYED
from .composition import CompositionConfig
from .engine import SimulationParameters, TransitionEngine
from .environment import Environment, WindDirection
from .grid import Grid
from .model import DrawPolicy, FireModel, create_grid, ignite, run
from .vegetation import VegetationKind

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "CellState",
    "DESTROYED",
    "CompositionConfig",
    "SimulationParameters",
    "TransitionEngine",
    "Environment",
    "WindDirection",
    "Grid",
    "DrawPolicy",
    "FireModel",
    "create_grid",
    "ignite",
    "run",
    "VegetationKind",
]
