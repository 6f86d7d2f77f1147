"""Hidden-singles propagation.

Commits every value that has exactly one legal cell left inside a row, column
or block, repeating until a full pass makes no progress. Each commit is forced
by the current clues, so the pass never changes the number of completions; it
only shrinks the work left for the backtracking search.
"""

from __future__ import annotations

from typing import List

from ..core.constants import EMPTY
from ..utils.logger import get_logger
from .constraints import invalid_values
from .grid import SudokuGrid

LOGGER = get_logger(__name__)


def build_markup(grid: SudokuGrid) -> List[int]:
    """Per-cell exclusion bitmaps; filled cells carry the full mask."""

    geometry = grid.geometry
    full = geometry.full_mask
    return [
        full if value != EMPTY else invalid_values(grid.cells, position, geometry)
        for position, value in enumerate(grid.cells)
    ]


def propagate(grid: SudokuGrid) -> List[int]:
    """Place hidden singles in ``grid`` until a fixed point and return the markup."""

    geometry = grid.geometry
    markup = build_markup(grid)
    groups = (
        [geometry.row_positions(r) for r in range(geometry.side)],
        [geometry.column_positions(c) for c in range(geometry.side)],
        [geometry.block_positions(b) for b in range(geometry.side)],
    )

    total = 0
    while True:
        commits = 0
        for units in groups:
            commits += _commit_hidden_singles(grid, markup, units)
        total += commits
        if commits == 0:
            break

    LOGGER.debug("Propagation committed %d cells, %d left empty", total, len(grid.empty_positions()))
    return markup


def _commit_hidden_singles(grid: SudokuGrid, markup: List[int], units: List[List[int]]) -> int:
    commits = 0
    for value in range(1, grid.geometry.side + 1):
        bit = 1 << (value - 1)
        for unit in units:
            target = -1
            for position in unit:
                if markup[position] & bit:
                    continue
                if target >= 0:
                    break
                target = position
            else:
                if target >= 0:
                    _commit(grid, markup, target, value)
                    commits += 1
    return commits


def _commit(grid: SudokuGrid, markup: List[int], position: int, value: int) -> None:
    geometry = grid.geometry
    side = geometry.side
    block = geometry.block
    bit = 1 << (value - 1)
    row = position // side
    col = position % side
    top_left = geometry.top_left(position)

    grid.cells[position] = value
    for n in range(side):
        markup[n * side + col] |= bit
        markup[row * side + n] |= bit
        markup[top_left + (n % block) * side + (n // block)] |= bit
    markup[position] = geometry.full_mask
