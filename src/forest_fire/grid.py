"""Immutable grid snapshot of the forest."""

from collections import Counter
from typing import Iterator, Optional, Sequence

import numpy as np

from .cell import Cell, CellState
from .environment import Environment, WindDirection

# Moore neighborhood offsets (dx, dy), centre excluded
MOORE_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


class Grid:
    """One snapshot of the forest at a fixed simulation step.

    A grid never changes after construction. Operations that "modify" it
    (``with_cell``, ``advanced``) return a new instance.

    Attributes:
        cells: ``height`` rows of ``width`` cells, indexed ``cells[y][x]``
        width: Number of columns
        height: Number of rows
        step: Simulation step this snapshot belongs to
        environment: Temperature and humidity of the run
        wind: Current wind direction
    """

    __slots__ = ("_cells", "_width", "_height", "_step", "_environment", "_wind")

    def __init__(
        self,
        cells: Sequence[Sequence[Cell]],
        width: int,
        height: int,
        step: int,
        environment: Environment,
        wind: WindDirection,
    ):
        rows = tuple(tuple(row) for row in cells)
        if len(rows) != height:
            raise ValueError(f"Expected {height} rows, got {len(rows)}")
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {width}")
        if step < 0:
            raise ValueError(f"Step must be non-negative, got {step}")

        self._cells = rows
        self._width = width
        self._height = height
        self._step = step
        self._environment = environment
        self._wind = wind

    @property
    def cells(self) -> tuple[tuple[Cell, ...], ...]:
        return self._cells

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def step(self) -> int:
        return self._step

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def wind(self) -> WindDirection:
        return self._wind

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._step == other._step
            and self._wind == other._wind
            and self._environment == other._environment
            and self._cells == other._cells
        )

    def __hash__(self) -> int:
        return hash((self._cells, self._step, self._environment, self._wind))

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, step={self._step}, wind={self._wind.name})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at (x, y), or None outside the grid."""
        if self.in_bounds(x, y):
            return self._cells[y][x]
        return None

    def cell_at(self, x: int, y: int) -> int:
        """Export code of the cell at (x, y).

        Raises:
            IndexError: If (x, y) lies outside the grid
        """
        cell = self.get(x, y)
        if cell is None:
            raise IndexError(f"({x}, {y}) is outside a {self._width}x{self._height} grid")
        return cell.code

    def neighbors8(self, x: int, y: int) -> list[Cell]:
        """Moore neighborhood; positions outside the grid are left out."""
        neighbors = []
        for dx, dy in MOORE_OFFSETS:
            cell = self.get(x + dx, y + dy)
            if cell is not None:
                neighbors.append(cell)
        return neighbors

    def neighbors4_with_direction(self, x: int, y: int) -> list[tuple[Cell, WindDirection]]:
        """Cardinal neighbors tagged with the direction from (x, y) towards them."""
        neighbors = []
        for direction in WindDirection:
            dx, dy = direction.offset
            cell = self.get(x + dx, y + dy)
            if cell is not None:
                neighbors.append((cell, direction))
        return neighbors

    def count_burning(self, x: int, y: int) -> int:
        return sum(1 for cell in self.neighbors8(x, y) if cell.is_burning)

    def count_water(self, x: int, y: int) -> int:
        return sum(1 for cell in self.neighbors8(x, y) if cell.is_water)

    def burning_cardinal_directions(self, x: int, y: int) -> set[WindDirection]:
        return {direction for cell, direction in self.neighbors4_with_direction(x, y) if cell.is_burning}

    def with_cell(self, x: int, y: int, cell: Cell) -> "Grid":
        """Copy of this grid with a single cell replaced (same step)."""
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is outside a {self._width}x{self._height} grid")
        row = self._cells[y][:x] + (cell,) + self._cells[y][x + 1:]
        cells = self._cells[:y] + (row,) + self._cells[y + 1:]
        return Grid(cells, self._width, self._height, self._step, self._environment, self._wind)

    def advanced(self, cells: Sequence[Sequence[Cell]]) -> "Grid":
        """Snapshot for the next step built from freshly computed cells."""
        return Grid(cells, self._width, self._height, self._step + 1, self._environment, self._wind)

    def iter_cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield (x, y, cell) in row-major order."""
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                yield x, y, cell

    def iter_records(self) -> Iterator[tuple[int, int, int, int, float, float]]:
        """Yield (step, x, y, code, temperature, humidity) for every cell, row-major."""
        temperature = self._environment.temperature
        humidity = self._environment.humidity
        for x, y, cell in self.iter_cells():
            yield self._step, x, y, cell.code, temperature, humidity

    def count_state(self, state: CellState) -> int:
        return sum(1 for _, _, cell in self.iter_cells() if cell.state == state)

    def state_counts(self) -> dict[CellState, int]:
        counts = Counter(cell.state for _, _, cell in self.iter_cells())
        return {state: counts.get(state, 0) for state in CellState}

    def to_codes(self) -> np.ndarray:
        """Export codes as a (height, width) integer matrix."""
        return np.array(
            [[cell.code for cell in row] for row in self._cells],
            dtype=np.int8,
        ).reshape(self._height, self._width)
