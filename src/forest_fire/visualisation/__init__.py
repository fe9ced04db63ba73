"""Visualisation helpers for simulation snapshots.

All plotting functions operate on Grid snapshots or on the DataCollector
frame of a FireModel.
"""

from .grid_viz import GridVisualizer

__all__ = ["GridVisualizer"]
