"""Shared constants and enumerations for the sudoku engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

DEFAULT_BLOCK_SIZE = 3
MIN_BLOCK_SIZE = 2
MAX_BLOCK_SIZE = 4

EMPTY = 0


class SearchOrder(str, Enum):
    """Candidate ordering used by the backtracking search."""

    DETERMINISTIC = "deterministic"
    RANDOMIZED = "randomized"


class SolverBackend(str, Enum):
    """Engines able to count completions of a grid."""

    BACKTRACKING = "backtracking"
    CPSAT = "cpsat"


@dataclass(frozen=True)
class Geometry:
    """Position arithmetic for a square grid built from ``block`` x ``block`` blocks."""

    block: int = DEFAULT_BLOCK_SIZE

    def __post_init__(self) -> None:
        if not MIN_BLOCK_SIZE <= self.block <= MAX_BLOCK_SIZE:
            raise ValueError(
                f"Block size must be between {MIN_BLOCK_SIZE} and {MAX_BLOCK_SIZE}, got {self.block}"
            )

    @property
    def side(self) -> int:
        return self.block * self.block

    @property
    def size(self) -> int:
        return self.side * self.side

    @property
    def full_mask(self) -> int:
        return (1 << self.side) - 1

    def row_of(self, position: int) -> int:
        return position // self.side

    def column_of(self, position: int) -> int:
        return position % self.side

    def block_of(self, position: int) -> int:
        row, col = self.row_of(position), self.column_of(position)
        return (row // self.block) * self.block + col // self.block

    def offset_of(self, position: int) -> int:
        row, col = self.row_of(position), self.column_of(position)
        return (row % self.block) * self.block + col % self.block

    def top_left(self, position: int) -> int:
        row, col = self.row_of(position), self.column_of(position)
        return (row // self.block) * self.block * self.side + (col // self.block) * self.block

    # ------------------------------------------------------------------
    # Unit listings
    # ------------------------------------------------------------------
    def row_positions(self, row: int) -> List[int]:
        return [row * self.side + n for n in range(self.side)]

    def column_positions(self, col: int) -> List[int]:
        return [n * self.side + col for n in range(self.side)]

    def block_positions(self, block: int) -> List[int]:
        top = (block // self.block) * self.block * self.side + (block % self.block) * self.block
        return [top + (n % self.block) * self.side + (n // self.block) for n in range(self.side)]

    def units(self) -> List[List[int]]:
        """All rows, then all columns, then all blocks."""

        rows = [self.row_positions(r) for r in range(self.side)]
        cols = [self.column_positions(c) for c in range(self.side)]
        blocks = [self.block_positions(b) for b in range(self.side)]
        return rows + cols + blocks
