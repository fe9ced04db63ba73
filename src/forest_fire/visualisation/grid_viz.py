from __future__ import annotations

from typing import Any, Literal

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from ..grid import Grid
from .palettes import DEFAULT_COUNTS, DEFAULT_PALETTE, CellPalette, CountSpec


def _cell_colormap(palette: CellPalette) -> tuple[ListedColormap, BoundaryNorm]:
    cmap = ListedColormap(list(palette.colors))
    bounds = np.arange(len(palette.colors) + 1) - 0.5
    return cmap, BoundaryNorm(bounds, cmap.N)


class GridVisualizer:
    """Small helper to render snapshots with Matplotlib.

    Scope:
    - Plots a single snapshot as a categorical map of export codes.
    - Plots the per-step state counts collected by ``FireModel``.
    """

    def __init__(
        self,
        *,
        show_legend: bool = True,
        origin: Literal["upper", "lower"] = "upper",
    ) -> None:
        self.show_legend = show_legend
        self.origin = origin

    def plot_snapshot(
        self,
        grid: Grid,
        *,
        title: str | None = None,
        palette: CellPalette = DEFAULT_PALETTE,
        show_axes: bool = False,
        ax: Any | None = None,
    ) -> Any:
        """Plot one snapshot, one color per export code."""

        codes = grid.to_codes()
        if ax is None:
            _, ax = plt.subplots(1, 1, figsize=(6, 6))

        cmap, norm = _cell_colormap(palette)
        ax.imshow(codes, cmap=cmap, norm=norm, origin=self.origin, interpolation="nearest")

        env = grid.environment
        if title is None:
            title = f"Step {grid.step} (T={env.temperature}°C, humidity={env.humidity:.0%})"
        ax.set_title(title)

        if not show_axes:
            ax.set_xticks([])
            ax.set_yticks([])

        if self.show_legend:
            present = sorted(int(code) for code in np.unique(codes))
            handles = [Patch(color=palette.colors[code], label=palette.labels[code]) for code in present]
            ax.legend(handles=handles, loc="upper left", bbox_to_anchor=(1.01, 1.0), fontsize=8)
        return ax

    def plot_counts(
        self,
        frame: pd.DataFrame,
        *,
        title: str = "Cell states over time",
        counts: CountSpec = DEFAULT_COUNTS,
        ax: Any | None = None,
    ) -> Any:
        """Plot the DataCollector frame (Step, Unburnt, Burning, Destroyed columns)."""

        if "Step" not in frame.columns:
            raise ValueError(f"frame must have a 'Step' column. Got {list(frame.columns)}.")

        if ax is None:
            _, ax = plt.subplots(1, 1, figsize=(8, 4))

        for column, color in counts.colors.items():
            if column in frame.columns:
                ax.plot(frame["Step"], frame[column], label=column, color=color)

        ax.set_xlabel("Step")
        ax.set_ylabel("Cells")
        ax.set_title(title)
        ax.legend()
        return ax

    def save(self, fig: Any, path: str, *, dpi: int = 150) -> None:
        """Save a Matplotlib figure to disk."""

        fig.savefig(path, dpi=dpi, bbox_inches="tight")
