"""Result models returned by the solver and generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..engine.grid import SudokuGrid


@dataclass
class SolveResult:
    """Outcome of a single solve call.

    ``grid`` holds the last completion reached by the search, or the partially
    propagated input when no completion exists.
    """

    grid: SudokuGrid
    solutions: int
    elapsed: float = 0.0

    @property
    def solved(self) -> bool:
        return self.solutions >= 1

    @property
    def unique(self) -> bool:
        return self.solutions == 1


@dataclass
class GenerationResult:
    """A generated puzzle together with the completion it was carved from."""

    puzzle: SudokuGrid
    solution: SudokuGrid
    attempts: int
    budget_exhausted: bool = False
    seed: Optional[int] = None
    elapsed: float = 0.0

    @property
    def clues(self) -> int:
        return self.puzzle.clue_count
