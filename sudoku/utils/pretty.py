"""Pretty-print helpers for sudoku grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..engine.grid import SudokuGrid


def cell_symbol(value: int) -> str:
    if value == 0:
        return "."
    return str(value)


def format_grid(grid: SudokuGrid) -> str:
    """Render the grid with ``|`` between blocks and rules between bands."""

    block = grid.geometry.block
    side = grid.geometry.side
    width = max(len(cell_symbol(side)), 1) + 2
    segment = "-" * (width * block)
    border = " +" + "+".join([segment] * block) + "+ "
    separator = " |" + "+".join([segment] * block) + "| "

    lines: List[str] = [border]
    for r, row in enumerate(grid.rows()):
        if r and r % block == 0:
            lines.append(separator)
        chunks = []
        for b in range(block):
            values = row[b * block:(b + 1) * block]
            chunks.append("".join(f"{cell_symbol(v):^{width}}" for v in values))
        lines.append(" |" + "|".join(chunks) + "|")
    lines.append(border)
    return "\n".join(lines)


def pretty_print_grid(grid: SudokuGrid, *, label: str | None = None, stream=None) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)
    print(file=stream)


def print_run_stats(elapsed: float, count: int, *, stream=None) -> None:
    """Print the elapsed time and throughput of a batch run."""

    stream = stream or sys.stdout
    speed = count / elapsed if elapsed > 0 else 0.0
    print(
        f"Elapsed time: {elapsed:.3f} seconds. Puzzles completed: {count}. "
        f"Performance: {speed:.3f} puzzles/second.",
        file=stream,
    )
