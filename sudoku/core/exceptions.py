"""Custom exception hierarchy for the sudoku engine."""


class SudokuError(Exception):
    """Base exception for solver and generator failures."""


class MalformedPuzzleError(SudokuError):
    """Raised when a textual puzzle cannot be decoded into a grid."""


class PuzzleFileError(SudokuError):
    """Raised when a puzzle file cannot be read or written."""


class SolverTimeoutError(SudokuError):
    """Raised when a solver hits its time limit before settling the count."""


class ValidationError(SudokuError):
    """Raised when a grid breaks the row/column/block rules."""
