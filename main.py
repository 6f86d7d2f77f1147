"""CLI entrypoint: solves puzzle files or appends freshly generated puzzles."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List

from sudoku.core.constants import Geometry, SearchOrder, SolverBackend
from sudoku.core.exceptions import PuzzleFileError, SudokuError
from sudoku.engine.generator import GeneratorConfig, SudokuGenerator
from sudoku.engine.solver import SolverConfig, SudokuSolver
from sudoku.engine.validator import GridValidator
from sudoku.io.codec import encode, no_solution
from sudoku.io.puzzle_file import append_puzzles, read_puzzles, write_lines
from sudoku.utils.logger import configure_logging, get_logger
from sudoku.utils.pretty import pretty_print_grid, print_run_stats

LOGGER = get_logger("sudoku.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solves and generates Sudoku puzzles, but fast!",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-s", "--solve", action="store_true", help="Solve puzzles in a text file (default)")
    mode.add_argument(
        "-g",
        "--generate",
        action="store_true",
        help="Generate puzzles and append them to a text file",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=Path("puzzles.txt"),
        help="A file containing puzzles, one per line (default: puzzles.txt)",
    )
    parser.add_argument(
        "-n",
        "--number",
        type=int,
        default=10,
        help="The number of puzzles to generate and append to the file",
    )
    parser.add_argument("--block-size", type=int, default=3, help="Block size B, grids are B^2 x B^2 (2-4)")
    parser.add_argument("--limit", type=int, default=1, help="Stop counting after this many solutions")
    parser.add_argument(
        "--random-order",
        action="store_true",
        help="Try candidates in shuffled order instead of ascending",
    )
    parser.add_argument(
        "--no-easy-pass",
        action="store_true",
        help="Skip the hidden-singles pass before backtracking",
    )
    parser.add_argument(
        "--backend",
        type=str,
        choices=[b.value for b in SolverBackend],
        default=SolverBackend.BACKTRACKING.value,
        help="Engine used to solve puzzles",
    )
    parser.add_argument(
        "--time-budget",
        type=float,
        default=None,
        help="Seconds allowed for clue removal per generated puzzle (default: no cap)",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Removal probes allowed per generated puzzle (default: no cap)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Cross-check generated puzzles for uniqueness with CP-SAT",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Write one solution line per solved puzzle")
    parser.add_argument(
        "--report-every",
        type=int,
        default=None,
        help="Print every k-th puzzle (default: 200 when solving, 100 when generating)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def solve_file(args: argparse.Namespace, geometry: Geometry) -> int:
    """Solve every puzzle in ``args.file`` and return how many were processed."""

    config = SolverConfig(
        block_size=geometry.block,
        limit=args.limit,
        order=SearchOrder.RANDOMIZED if args.random_order else SearchOrder.DETERMINISTIC,
        use_easy_pass_first=not args.no_easy_pass,
        backend=SolverBackend(args.backend),
        seed=args.seed,
    )
    solver = SudokuSolver(config)
    validator = GridValidator()
    report_every = args.report_every or 200
    solutions: List[str] = []

    count = 0
    for puzzle in read_puzzles(args.file, geometry):
        report = count % report_every == 0
        if report:
            pretty_print_grid(puzzle, label=f"Solving puzzle #{count + 1}")

        check = validator.validate(puzzle)
        if not check.ok:
            LOGGER.warning("Puzzle #%d breaks the rules: %s", count + 1, "; ".join(check.messages))
            solutions.append(no_solution(geometry))
        else:
            result = solver.solve(puzzle)
            if result.solved:
                if report:
                    pretty_print_grid(result.grid)
                solutions.append(encode(result.grid))
            else:
                print("There is no solution for this puzzle.")
                solutions.append(no_solution(geometry))
            if args.limit > 1 and result.solutions > 1:
                LOGGER.info("Puzzle #%d has at least %d solutions", count + 1, result.solutions)
        count += 1

    if args.output:
        write_lines(args.output, solutions)
    return count


def generate_file(args: argparse.Namespace, geometry: Geometry) -> int:
    """Append ``args.number`` generated puzzles to ``args.file``."""

    config = GeneratorConfig(
        block_size=geometry.block,
        seed=args.seed,
        use_easy_pass_first=not args.no_easy_pass,
        time_budget_seconds=args.time_budget,
        max_attempts=args.max_attempts,
        verify_with_cpsat=args.verify,
    )
    generator = SudokuGenerator(config)
    report_every = args.report_every or 100

    def puzzles():
        for index in range(args.number):
            result = generator.generate()
            if index % report_every == 0:
                pretty_print_grid(
                    result.puzzle,
                    label=f"Generating puzzle {index + 1} of {args.number} ({result.clues} clues):",
                )
            yield result.puzzle

    return append_puzzles(args.file, puzzles())


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.limit < 1:
        parser.error("--limit must be at least 1")
    if args.number < 0:
        parser.error("--number cannot be negative")
    if args.report_every is not None and args.report_every < 1:
        parser.error("--report-every must be at least 1")
    try:
        geometry = Geometry(block=args.block_size)
    except ValueError as exc:
        parser.error(str(exc))

    started = time.perf_counter()
    try:
        if args.generate:
            count = generate_file(args, geometry)
        else:
            count = solve_file(args, geometry)
    except PuzzleFileError as exc:
        LOGGER.error("%s", exc)
        return 1
    except SudokuError as exc:
        LOGGER.error("Run aborted: %s", exc)
        return 1

    print_run_stats(time.perf_counter() - started, count)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
