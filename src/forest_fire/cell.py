"""Cell states of the forest fire cellular automaton."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import BURNING_CODE, DESTROYED_CODE
from .vegetation import VegetationKind


class CellState(Enum):
    """Possible states of a forest cell."""
    Unburnt = 0
    Burning = 1
    Destroyed = 2


@dataclass(frozen=True)
class Cell:
    """Immutable content of one grid position.

    A tagged value: ``state`` selects the variant and the remaining fields
    are its payload.

    - ``Unburnt``: ``kind`` is the vegetation or terrain standing there.
    - ``Burning``: ``kind`` is the vegetation that caught fire and
      ``ticks_remaining`` (>= 1) counts the steps left before it is destroyed.
    - ``Destroyed``: no payload.

    Use the ``unburnt``/``burning`` constructors and the ``DESTROYED``
    constant instead of building cells by hand.
    """
    state: CellState
    kind: Optional[VegetationKind] = None
    ticks_remaining: int = 0

    def __post_init__(self):
        if self.state == CellState.Destroyed:
            if self.kind is not None or self.ticks_remaining != 0:
                raise ValueError("Destroyed cells carry no vegetation or burn timer")
            return

        if self.kind is None:
            raise ValueError(f"{self.state.name} cells need a vegetation kind")

        if self.state == CellState.Burning:
            if self.ticks_remaining < 1:
                raise ValueError(f"Burning cells need ticks_remaining >= 1, got {self.ticks_remaining}")
        elif self.ticks_remaining != 0:
            raise ValueError("Unburnt cells have no burn timer")

    @classmethod
    def unburnt(cls, kind: VegetationKind) -> "Cell":
        return cls(CellState.Unburnt, kind)

    @classmethod
    def burning(cls, kind: VegetationKind, ticks_remaining: int) -> "Cell":
        return cls(CellState.Burning, kind, ticks_remaining)

    @property
    def is_burning(self) -> bool:
        return self.state == CellState.Burning

    @property
    def is_water(self) -> bool:
        return self.state == CellState.Unburnt and self.kind == VegetationKind.Water

    def is_burnable(self) -> bool:
        """
        Check if the cell can catch fire.

        Returns:
            True only for unburnt cells of an ignitable vegetation kind
        """
        return self.state == CellState.Unburnt and self.kind.ignitable

    @property
    def code(self) -> int:
        """Numeric export code: 0-6 vegetation kind, 7 burning, 8 destroyed."""
        if self.state == CellState.Burning:
            return BURNING_CODE
        if self.state == CellState.Destroyed:
            return DESTROYED_CODE
        return self.kind.value

    def __str__(self) -> str:
        if self.state == CellState.Burning:
            return f"Burning({self.kind.name}, {self.ticks_remaining})"
        if self.state == CellState.Destroyed:
            return "Destroyed"
        return f"Unburnt({self.kind.name})"


DESTROYED = Cell(CellState.Destroyed)
