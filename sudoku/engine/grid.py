"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..core.constants import EMPTY, Geometry


class SudokuGrid:
    """Flat, row-major array of cell values with its geometry.

    ``cells`` is exposed directly so the search routines can mutate it without
    going through method calls on every placement.
    """

    def __init__(self, cells: Iterable[int], geometry: Optional[Geometry] = None) -> None:
        self.geometry = geometry or Geometry()
        self.cells: List[int] = list(cells)
        if len(self.cells) != self.geometry.size:
            raise ValueError(
                f"Expected {self.geometry.size} cells, got {len(self.cells)}"
            )

    @classmethod
    def empty(cls, geometry: Optional[Geometry] = None) -> "SudokuGrid":
        geometry = geometry or Geometry()
        return cls([EMPTY] * geometry.size, geometry)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, position: int) -> int:
        return self.cells[position]

    def place(self, position: int, value: int) -> None:
        if not 1 <= value <= self.geometry.side:
            raise ValueError(f"Value {value} outside 1..{self.geometry.side}")
        self.cells[position] = value

    def clear(self, position: int) -> int:
        """Empty a cell and return the value it held."""

        previous = self.cells[position]
        self.cells[position] = EMPTY
        return previous

    def copy(self) -> "SudokuGrid":
        return SudokuGrid(self.cells, self.geometry)

    def load(self, other: "SudokuGrid") -> None:
        """Overwrite this grid's cells with ``other``'s without reallocating."""

        if other.geometry != self.geometry:
            raise ValueError("Cannot load a grid with a different geometry")
        self.cells[:] = other.cells

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_complete(self) -> bool:
        return EMPTY not in self.cells

    def empty_positions(self) -> List[int]:
        return [pos for pos, value in enumerate(self.cells) if value == EMPTY]

    @property
    def clue_count(self) -> int:
        return sum(1 for value in self.cells if value != EMPTY)

    def rows(self) -> List[List[int]]:
        side = self.geometry.side
        return [self.cells[r * side:(r + 1) * side] for r in range(side)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return self.geometry == other.geometry and self.cells == other.cells

    def __repr__(self) -> str:
        return f"SudokuGrid(block={self.geometry.block}, clues={self.clue_count})"
