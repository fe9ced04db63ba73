"""CSV export of a simulation history.

One row per (step, x, y) with columns ``step,x,y,cell_type,temperature,humidity``.
``cell_type`` uses the export codes: 0 Water, 1 Rock, 2 Grass, 3 Bush,
4 SmallTree, 5 GrowingTree, 6 Tree, 7 Burning, 8 Destroyed.
"""

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from .grid import Grid

logger = logging.getLogger(__name__)

COLUMNS = ["step", "x", "y", "cell_type", "temperature", "humidity"]


def history_frame(history: Iterable[Grid]) -> pd.DataFrame:
    """Flatten snapshots into a DataFrame, snapshots in order and cells row-major."""
    records = [record for grid in history for record in grid.iter_records()]
    return pd.DataFrame.from_records(records, columns=COLUMNS)


def export_csv(history: Iterable[Grid], path: str | Path) -> Path:
    """
    Write a simulation history to a CSV file.

    Args:
        history: Ordered snapshots, usually the result of ``run``
        path: Destination file

    Returns:
        Path of the written file
    """
    path = Path(path)
    frame = history_frame(history)
    frame.to_csv(path, index=False)
    logger.info(f"Exported {len(frame)} rows to {path}")
    return path
