"""Sudoku solving and puzzle generation engine.

This package exposes the public API surface via:

- ``sudoku.engine.solver.SudokuSolver``: counts completions up to a limit.
- ``sudoku.engine.generator.SudokuGenerator``: builds uniquely solvable puzzles.
- ``sudoku.io.codec`` helpers: fixed-width text encoding of grids.
"""

from .core.constants import Geometry, SearchOrder, SolverBackend
from .engine.generator import GeneratorConfig, SudokuGenerator
from .engine.grid import SudokuGrid
from .engine.solver import SolverConfig, SudokuSolver, count_solutions
from .io.codec import decode, encode

__all__ = [
    "Geometry",
    "SearchOrder",
    "SolverBackend",
    "GeneratorConfig",
    "SudokuGenerator",
    "SudokuGrid",
    "SolverConfig",
    "SudokuSolver",
    "count_solutions",
    "decode",
    "encode",
]

__version__ = "0.1.0"
