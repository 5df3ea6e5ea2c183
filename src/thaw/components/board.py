from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from thaw.components.cell import CellState


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable row-major grid of cell states.

    Player actions never mutate a Board; they produce a new one via ``with_cell``.
    """
    width: int
    height: int
    cells: Tuple[CellState, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"board dimensions must be non-negative, got {self.width}x{self.height}")
        cells = tuple(self.cells)
        if len(cells) != self.width * self.height:
            raise ValueError(
                f"board {self.width}x{self.height} needs {self.width * self.height} cells, got {len(cells)}"
            )
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[CellState]]) -> "Board":
        height = len(rows)
        width = len(rows[0]) if rows else 0
        cells: list[CellState] = []
        for row in rows:
            if len(row) != width:
                raise ValueError("all rows must have the same width")
            cells.extend(row)
        return cls(width=width, height=height, cells=tuple(cells))

    def __len__(self) -> int:
        return len(self.cells)

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self.cells)

    def position(self, index: int) -> Tuple[int, int]:
        """Return (row, col) for a cell index."""
        return divmod(index, self.width)

    def index_of(self, row: int, col: int) -> int:
        return row * self.width + col

    def cell_at(self, index: int) -> CellState:
        return self.cells[index]

    def with_cell(self, index: int, state: CellState) -> "Board":
        cells = list(self.cells)
        cells[index] = state
        return Board(width=self.width, height=self.height, cells=tuple(cells))

    def count(self, state: CellState) -> int:
        return sum(1 for cell in self.cells if cell is state)

    def rows(self) -> Iterable[Tuple[CellState, ...]]:
        for start in range(0, len(self.cells), self.width or 1):
            yield self.cells[start:start + self.width]
