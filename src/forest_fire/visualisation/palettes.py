from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CellPalette:
    """Matplotlib colors for the nine export codes, indexed by code."""

    colors: tuple[str, ...] = (
        "#1f77b4",  # water
        "#7f7f7f",  # rock
        "#9ACD32",  # grass
        "#3CB371",  # bush
        "#228B22",  # small tree
        "#006400",  # growing tree
        "#004d00",  # tree
        "#ff3300",  # burning
        "#000000",  # destroyed
    )
    labels: tuple[str, ...] = (
        "Water",
        "Rock",
        "Grass",
        "Bush",
        "SmallTree",
        "GrowingTree",
        "Tree",
        "Burning",
        "Destroyed",
    )


@dataclass(frozen=True)
class CountSpec:
    """Line colors for the state-count time series."""

    colors: dict[str, str] = field(
        default_factory=lambda: {"Unburnt": "#228B22", "Burning": "#ff3300", "Destroyed": "#000000"}
    )


DEFAULT_PALETTE = CellPalette()
DEFAULT_COUNTS = CountSpec()
