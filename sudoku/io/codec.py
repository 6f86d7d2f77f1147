"""Fixed-width text encoding of grids.

One character per cell, row-major. Decoding table:

========================  ==============================
character                 cell value
========================  ==============================
``1``-``9``               1-9
``A``-``F`` (any case)    10-15, only when side is 16
``G`` (any case)          16, only when side is 16
anything else             empty (``0``, ``.``, blanks...)
========================  ==============================

Symbols naming a value above the grid side also decode to empty. Encoding
writes ``0`` for empty cells. A line of ``NO_SOLUTION_SYMBOL`` characters
stands in for a grid when no solution was found.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..core.constants import EMPTY, Geometry
from ..core.exceptions import MalformedPuzzleError
from ..engine.grid import SudokuGrid

EMPTY_SYMBOL = "0"
NO_SOLUTION_SYMBOL = "."
VALUE_SYMBOLS = "123456789ABCDEFG"

_SYMBOL_VALUES: Dict[str, int] = {}
for _index, _symbol in enumerate(VALUE_SYMBOLS, start=1):
    _SYMBOL_VALUES[_symbol] = _index
    _SYMBOL_VALUES[_symbol.lower()] = _index


def decode(text: str, geometry: Optional[Geometry] = None) -> SudokuGrid:
    """Parse exactly ``geometry.size`` characters into a grid."""

    geometry = geometry or Geometry()
    if len(text) != geometry.size:
        raise MalformedPuzzleError(
            f"Expected {geometry.size} characters, got {len(text)}"
        )
    side = geometry.side
    cells = []
    for symbol in text:
        value = _SYMBOL_VALUES.get(symbol, EMPTY)
        cells.append(value if value <= side else EMPTY)
    return SudokuGrid(cells, geometry)


def encode(grid: SudokuGrid) -> str:
    return "".join(VALUE_SYMBOLS[value - 1] if value else EMPTY_SYMBOL for value in grid.cells)


def no_solution(geometry: Optional[Geometry] = None) -> str:
    geometry = geometry or Geometry()
    return NO_SOLUTION_SYMBOL * geometry.size
