"""Solution counting: hidden-singles propagation followed by backtracking."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_BLOCK_SIZE, Geometry, SearchOrder, SolverBackend
from ..core.models import SolveResult
from ..utils.logger import get_logger
from .cpsat import count_solutions_cpsat
from .grid import SudokuGrid
from .propagation import propagate
from .search import CandidateOrder, make_order, search

LOGGER = get_logger(__name__)


def count_solutions(
    grid: SudokuGrid,
    limit: int = 1,
    use_easy_pass_first: bool = True,
    order: Optional[CandidateOrder] = None,
) -> int:
    """Count completions of ``grid`` up to ``limit``, mutating it in place.

    Returns 0 when the grid has no completion, 1 for a unique completion and
    at most ``limit`` otherwise.
    """
    if use_easy_pass_first:
        propagate(grid)
    return search(grid, limit, order)


@dataclass
class SolverConfig:
    block_size: int = DEFAULT_BLOCK_SIZE
    limit: int = 1
    order: SearchOrder = SearchOrder.DETERMINISTIC
    use_easy_pass_first: bool = True
    backend: SolverBackend = SolverBackend.BACKTRACKING
    seed: Optional[int] = None
    cpsat_timeout: float = 10.0

    def geometry(self) -> Geometry:
        return Geometry(block=self.block_size)


class SudokuSolver:
    """Solves grids on private copies and reports timing alongside the count."""

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.config = config or SolverConfig()
        self.geometry = self.config.geometry()
        self.rng = random.Random(self.config.seed)
        self.order = make_order(self.config.order, self.rng)

    def solve(self, grid: SudokuGrid) -> SolveResult:
        if grid.geometry != self.geometry:
            raise ValueError(
                f"Grid is {grid.geometry.side}x{grid.geometry.side} but the solver is configured "
                f"for {self.geometry.side}x{self.geometry.side}"
            )
        work = grid.copy()
        started = time.perf_counter()
        if SolverBackend(self.config.backend) == SolverBackend.CPSAT:
            solutions = count_solutions_cpsat(work, self.config.limit, self.config.cpsat_timeout)
        else:
            solutions = count_solutions(
                work,
                limit=self.config.limit,
                use_easy_pass_first=self.config.use_easy_pass_first,
                order=self.order,
            )
        elapsed = time.perf_counter() - started
        LOGGER.debug(
            "Solved %d-clue grid: %d solution(s) (limit %d) in %.4fs",
            grid.clue_count,
            solutions,
            self.config.limit,
            elapsed,
        )
        return SolveResult(grid=work, solutions=solutions, elapsed=elapsed)
