"""Puzzle generation by clue removal.

Two-phase approach:
  1. Completion: a randomized backtracking search fills an empty grid.
  2. Reduction: clues are removed one at a time in a single shuffled order.
     After every removal the solver is asked for up to two completions; the
     clue is restored unless the answer is still exactly one.

Decisions are never revisited once later clues have been removed, so every
kept clue was necessary at the moment it was tested but the result is not
guaranteed to be globally minimal.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.constants import DEFAULT_BLOCK_SIZE, Geometry
from ..core.exceptions import ValidationError
from ..core.models import GenerationResult
from ..utils.logger import get_logger
from .cpsat import count_solutions_cpsat
from .grid import SudokuGrid
from .search import ShuffledOrder, search
from .solver import count_solutions
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    block_size: int = DEFAULT_BLOCK_SIZE
    seed: Optional[int] = None
    use_easy_pass_first: bool = True
    time_budget_seconds: Optional[float] = None
    max_attempts: Optional[int] = None
    verify_with_cpsat: bool = False
    cpsat_timeout: float = 10.0

    def geometry(self) -> Geometry:
        return Geometry(block=self.block_size)


class SudokuGenerator:
    """Builds uniquely solvable puzzles from random completions."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.geometry = self.config.geometry()
        self.rng = random.Random(self.config.seed)
        self.validator = GridValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> GenerationResult:
        started = time.perf_counter()
        solution = self._random_solution()
        puzzle, attempts, exhausted = self._reduce(solution)
        self._verify(puzzle, solution)

        elapsed = time.perf_counter() - started
        LOGGER.info(
            "Generated puzzle with %d clues after %d removal probes in %.3fs",
            puzzle.clue_count,
            attempts,
            elapsed,
        )
        return GenerationResult(
            puzzle=puzzle,
            solution=solution,
            attempts=attempts,
            budget_exhausted=exhausted,
            seed=self.config.seed,
            elapsed=elapsed,
        )

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def _random_solution(self) -> SudokuGrid:
        grid = SudokuGrid.empty(self.geometry)
        found = search(grid, limit=1, order=ShuffledOrder(self.rng))
        if found != 1:
            raise ValidationError("Randomized search failed to complete an empty grid")
        return grid

    def _reduce(self, solution: SudokuGrid) -> Tuple[SudokuGrid, int, bool]:
        started = time.perf_counter()
        working = solution.copy()
        scratch = solution.copy()
        removal_order: List[int] = list(range(self.geometry.size))
        self.rng.shuffle(removal_order)

        attempts = 0
        for position in removal_order:
            if self._budget_exhausted(attempts, started):
                LOGGER.warning(
                    "Reduction budget reached after %d probes; keeping %d clues",
                    attempts,
                    working.clue_count,
                )
                return working, attempts, True

            saved = working.clear(position)
            scratch.load(working)
            solutions = count_solutions(
                scratch, limit=2, use_easy_pass_first=self.config.use_easy_pass_first
            )
            attempts += 1
            if solutions != 1:
                working.cells[position] = saved
                LOGGER.debug("Cell %d is required (%d completions without it)", position, solutions)
            else:
                LOGGER.debug("Removed cell %d, %d clues left", position, working.clue_count)
        return working, attempts, False

    def _budget_exhausted(self, attempts: int, started: float) -> bool:
        if self.config.max_attempts is not None and attempts >= self.config.max_attempts:
            return True
        budget = self.config.time_budget_seconds
        return budget is not None and time.perf_counter() - started >= budget

    def _verify(self, puzzle: SudokuGrid, solution: SudokuGrid) -> None:
        checks = (
            self.validator.validate(puzzle),
            self.validator.validate_solution(solution),
        )
        for check in checks:
            if not check.ok:
                raise ValidationError(f"Generated grid failed validation: {check.messages}")
        if self.config.verify_with_cpsat:
            solutions = count_solutions_cpsat(
                puzzle.copy(), limit=2, timeout=self.config.cpsat_timeout
            )
            if solutions != 1:
                raise ValidationError(
                    f"CP-SAT found {solutions} completion(s) for a generated puzzle"
                )
