"""Peer constraint bitmaps.

Bit ``v - 1`` of a constraint bitmap is set when value ``v`` already appears
among the row, column or block peers of a cell.
"""

from __future__ import annotations

from typing import List, Sequence

from ..core.constants import Geometry


def invalid_values(cells: Sequence[int], position: int, geometry: Geometry) -> int:
    """Return the bitmap of values used by the peers of ``position``."""

    side = geometry.side
    block = geometry.block
    row = position // side
    col = position % side
    top_left = (row // block) * block * side + (col // block) * block
    bits = 0
    for n in range(side):
        value = cells[n * side + col]
        if value:
            bits |= 1 << (value - 1)
        value = cells[row * side + n]
        if value:
            bits |= 1 << (value - 1)
        value = cells[top_left + (n % block) * side + (n // block)]
        if value:
            bits |= 1 << (value - 1)
    return bits


def candidates(cells: Sequence[int], position: int, geometry: Geometry) -> List[int]:
    bits = invalid_values(cells, position, geometry)
    return [value for value in range(1, geometry.side + 1) if not (bits >> (value - 1)) & 1]
