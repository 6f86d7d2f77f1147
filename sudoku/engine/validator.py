"""Deterministic rule validation for grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from ..core.constants import EMPTY
from ..core.exceptions import ValidationError
from ..utils.logger import get_logger
from .grid import SudokuGrid


LOGGER = get_logger(__name__)

_UNIT_KINDS = ("row", "column", "block")


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Checks the row/column/block rules over a grid."""

    def validate(self, grid: SudokuGrid) -> ValidationResult:
        return self._run(grid, require_complete=False)

    def validate_solution(self, grid: SudokuGrid) -> ValidationResult:
        return self._run(grid, require_complete=True)

    def _run(self, grid: SudokuGrid, require_complete: bool) -> ValidationResult:
        try:
            self._check_values_in_range(grid)
            self._check_no_duplicates(grid)
            if require_complete:
                self._check_complete(grid)
        except ValidationError as exc:
            LOGGER.debug("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True, messages=[])

    def _check_values_in_range(self, grid: SudokuGrid) -> None:
        side = grid.geometry.side
        for position, value in enumerate(grid.cells):
            if not 0 <= value <= side:
                raise ValidationError(f"Value {value} at cell {position} outside 0..{side}")

    def _check_no_duplicates(self, grid: SudokuGrid) -> None:
        side = grid.geometry.side
        for index, unit in enumerate(grid.geometry.units()):
            seen: Dict[int, int] = {}
            for position in unit:
                value = grid.cells[position]
                if value == EMPTY:
                    continue
                if value in seen:
                    kind = _UNIT_KINDS[index // side]
                    raise ValidationError(
                        f"Duplicate {value} in {kind} {index % side} at cells {seen[value]} and {position}"
                    )
                seen[value] = position

    def _check_complete(self, grid: SudokuGrid) -> None:
        empty = grid.empty_positions()
        if empty:
            raise ValidationError(f"{len(empty)} cell(s) still empty, first at {empty[0]}")
