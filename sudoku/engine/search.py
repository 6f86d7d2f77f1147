"""Exhaustive backtracking search with an early exit at a solution limit.

The search mutates the grid in place: a candidate is written into the first
empty cell, the routine recurses, and the cell is reset before the next
candidate is tried. Once ``limit`` completions have been counted the search
unwinds immediately and leaves the grid as it stands, so callers that need the
original input back must keep their own copy.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ..core.constants import EMPTY, Geometry, SearchOrder
from .constraints import invalid_values
from .grid import SudokuGrid

CandidateOrder = Callable[[int], Sequence[int]]


def ascending_order(side: int) -> Sequence[int]:
    return range(1, side + 1)


class ShuffledOrder:
    """Fresh random permutation of ``1..side`` on every call."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def __call__(self, side: int) -> List[int]:
        values = list(range(1, side + 1))
        self.rng.shuffle(values)
        return values


def make_order(mode: SearchOrder, rng: Optional[random.Random] = None) -> CandidateOrder:
    if SearchOrder(mode) == SearchOrder.RANDOMIZED:
        return ShuffledOrder(rng)
    return ascending_order


@dataclass
class SearchContext:
    """Mutable state shared by every frame of one search call."""

    cells: List[int]
    geometry: Geometry
    limit: int
    order: CandidateOrder = ascending_order
    solutions: int = 0

    @property
    def exhausted(self) -> bool:
        return self.solutions >= self.limit


def search(grid: SudokuGrid, limit: int = 1, order: Optional[CandidateOrder] = None) -> int:
    """Count completions of ``grid`` up to ``limit``.

    A grid with no empty cell counts as one solution without any search.
    Inputs that already repeat a value inside a row, column or block are
    outside the contract and produce unspecified counts.
    """

    if limit < 1:
        raise ValueError(f"Solution limit must be at least 1, got {limit}")
    context = SearchContext(
        cells=grid.cells,
        geometry=grid.geometry,
        limit=limit,
        order=order or ascending_order,
    )
    _search(context, 0)
    return context.solutions


def _search(context: SearchContext, start: int) -> None:
    cells = context.cells
    geometry = context.geometry
    # Every cell before ``start`` is filled: earlier frames only recurse
    # after placing a value at their own first empty cell.
    for position in range(start, geometry.size):
        if cells[position] != EMPTY:
            continue
        excluded = invalid_values(cells, position, geometry)
        for value in context.order(geometry.side):
            if (excluded >> (value - 1)) & 1:
                continue
            cells[position] = value
            _search(context, position + 1)
            if context.exhausted:
                return
            cells[position] = EMPTY
        return
    context.solutions += 1
