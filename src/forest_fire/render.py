"""Console rendering of grid snapshots."""

from .cell import CellState
from .grid import Grid
from .vegetation import VegetationKind

VEGETATION_SYMBOLS = {
    VegetationKind.Water: "🟦",
    VegetationKind.Rock: "⛰️",
    VegetationKind.Grass: "🟩",
    VegetationKind.Bush: "🌿",
    VegetationKind.SmallTree: "🌳",
    VegetationKind.GrowingTree: "🌲",
    VegetationKind.Tree: "🌴",
}
BURNING_SYMBOL = "🔥"
DESTROYED_SYMBOL = "⬛"


def cell_symbol(cell) -> str:
    if cell.state == CellState.Burning:
        return BURNING_SYMBOL
    if cell.state == CellState.Destroyed:
        return DESTROYED_SYMBOL
    return VEGETATION_SYMBOLS[cell.kind]


def format_grid(grid: Grid) -> str:
    """
    Text representation of a snapshot.

    Args:
        grid: Snapshot to render

    Returns:
        Header with step and weather followed by one line of symbols per row
    """
    env = grid.environment
    lines = [
        f"Time Step: {grid.step}",
        f"Temperature: {env.temperature}°C, Humidity: {int(env.humidity * 100)}%",
    ]
    for row in grid.cells:
        lines.append(" ".join(cell_symbol(cell) for cell in row))
    return "\n".join(lines) + "\n"


def print_grid(grid: Grid) -> None:
    """Print a simple representation of the grid to console."""
    print(format_grid(grid))
