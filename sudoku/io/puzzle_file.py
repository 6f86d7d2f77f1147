"""Plain-text puzzle files, one encoded grid per line."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from ..core.constants import Geometry
from ..core.exceptions import PuzzleFileError
from ..engine.grid import SudokuGrid
from ..utils.logger import get_logger
from .codec import decode, encode

LOGGER = get_logger(__name__)


def read_puzzles(path: Path | str, geometry: Geometry) -> Iterator[SudokuGrid]:
    """Yield a grid for every line holding at least one full puzzle.

    Lines are not trimmed, since blanks are empty cells. Shorter lines
    (headers, separators) are skipped; characters past the first
    ``geometry.size`` are ignored.
    """

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise PuzzleFileError(f"Cannot read puzzle file {source}: {exc}") from exc

    skipped = 0
    for line in text.splitlines():
        line = line.rstrip("\r\n")
        if len(line) < geometry.size:
            skipped += 1
            continue
        yield decode(line[:geometry.size], geometry)
    if skipped:
        LOGGER.debug("Skipped %d short line(s) in %s", skipped, source)


def append_puzzles(path: Path | str, puzzles: Iterable[SudokuGrid]) -> int:
    """Append puzzles to ``path`` (created if missing) and return how many were written."""

    destination = Path(path)
    written = 0
    try:
        with destination.open("a", encoding="utf-8") as handle:
            for puzzle in puzzles:
                handle.write("\n")
                handle.write(encode(puzzle))
                written += 1
    except OSError as exc:
        raise PuzzleFileError(f"Cannot append to puzzle file {destination}: {exc}") from exc
    return written


def write_lines(path: Path | str, lines: Iterable[str]) -> None:
    destination = Path(path)
    try:
        destination.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    except OSError as exc:
        raise PuzzleFileError(f"Cannot write {destination}: {exc}") from exc
