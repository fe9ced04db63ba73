"""Global weather conditions shared by every cell of a run."""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class WindDirection(Enum):
    """Cardinal wind directions with their (dx, dy) grid offsets.

    The y axis grows downwards, so North points to the previous row.
    """
    North = (0, -1)
    East = (1, 0)
    South = (0, 1)
    West = (-1, 0)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value


@dataclass(frozen=True)
class Environment:
    """Temperature (Celsius) and atmosphere humidity (0-1), fixed for a run."""
    temperature: float
    humidity: float

    def __post_init__(self):
        if not 0.0 <= self.humidity <= 1.0:
            logger.error(f"Humidity {self.humidity} is outside [0, 1]")
            raise ValueError(f"Humidity must be within [0, 1], got {self.humidity}")
