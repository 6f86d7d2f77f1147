"""CP-SAT solution counting using OR-Tools.

An independent engine used to cross-check the backtracking search, most
notably the uniqueness of generated puzzles.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from ortools.sat.python import cp_model

from ..core.constants import EMPTY
from ..core.exceptions import SolverTimeoutError
from ..utils.logger import get_logger
from .grid import SudokuGrid

LOGGER = get_logger(__name__)


class _SolutionCounter(cp_model.CpSolverSolutionCallback):
    """Counts solutions, keeps the first one and stops at ``limit``."""

    def __init__(self, cell_vars: Dict[int, cp_model.IntVar], limit: int) -> None:
        super().__init__()
        self._cell_vars = cell_vars
        self._limit = limit
        self.count = 0
        self.first: Optional[Dict[int, int]] = None

    def on_solution_callback(self) -> None:
        self.count += 1
        if self.first is None:
            self.first = {pos: self.value(var) for pos, var in self._cell_vars.items()}
        if self.count >= self._limit:
            self.stop_search()


def count_solutions_cpsat(grid: SudokuGrid, limit: int = 1, timeout: float = 10.0) -> int:
    """Count completions of ``grid`` up to ``limit`` via CP-SAT.

    Args:
        grid: Grid to complete; the first completion found is written back.
        limit: Stop enumerating once this many solutions were seen.
        timeout: Solver time limit in seconds.

    Returns:
        Number of solutions found, capped at ``limit``.

    Raises:
        SolverTimeoutError: The time limit ran out before the search either
            reached ``limit`` or exhausted the search space.
    """
    if limit < 1:
        raise ValueError(f"Solution limit must be at least 1, got {limit}")

    geometry = grid.geometry
    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: Cell variables, clues stay constants
    # ------------------------------------------------------------------
    cells: List[Union[int, cp_model.IntVar]] = []
    cell_vars: Dict[int, cp_model.IntVar] = {}
    for position, value in enumerate(grid.cells):
        if value != EMPTY:
            cells.append(value)
            continue
        var = model.new_int_var(1, geometry.side, f"c_{position}")
        cell_vars[position] = var
        cells.append(var)

    # ------------------------------------------------------------------
    # Step 2: All-different per row, column and block
    # ------------------------------------------------------------------
    for unit in geometry.units():
        model.add_all_different([cells[pos] for pos in unit])

    # ------------------------------------------------------------------
    # Step 3: Enumerate
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    solver.parameters.enumerate_all_solutions = True
    solver.parameters.num_workers = 1

    counter = _SolutionCounter(cell_vars, limit)
    status = solver.solve(model, counter)
    LOGGER.debug(
        "CP-SAT: %d free cells, status=%s, %d solution(s) in %.3fs",
        len(cell_vars),
        solver.status_name(status),
        counter.count,
        solver.wall_time,
    )
    if counter.count < limit and status not in (cp_model.OPTIMAL, cp_model.INFEASIBLE):
        raise SolverTimeoutError(
            f"CP-SAT stopped after {timeout}s with {counter.count} of {limit} solution(s) found "
            f"(status {solver.status_name(status)})"
        )

    if counter.first is not None:
        for position, value in counter.first.items():
            grid.cells[position] = value
    return counter.count
