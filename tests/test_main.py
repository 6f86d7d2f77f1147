import contextlib
import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import main
from sudoku.core.constants import Geometry
from sudoku.core.exceptions import SolverTimeoutError
from sudoku.engine.solver import count_solutions
from sudoku.io.codec import no_solution
from sudoku.io.puzzle_file import read_puzzles

from puzzles import CLASSIC_PUZZLE, CLASSIC_SOLUTION


def _run(argv):
    stdout = io.StringIO()
    with contextlib.redirect_stdout(stdout):
        status = main.main(argv)
    return status, stdout.getvalue()


class ParserTests(unittest.TestCase):
    def test_defaults(self) -> None:
        args = main.build_parser().parse_args([])
        self.assertFalse(args.generate)
        self.assertEqual(args.file, Path("puzzles.txt"))
        self.assertEqual(args.number, 10)
        self.assertEqual(args.limit, 1)
        self.assertEqual(args.backend, "backtracking")

    def test_modes_are_exclusive(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.build_parser().parse_args(["--solve", "--generate"])

    def test_rejects_bad_block_size(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["--block-size", "5"])


class SolveModeTests(unittest.TestCase):
    def test_writes_solutions_and_placeholders(self) -> None:
        broken = "55" + CLASSIC_PUZZLE[2:]
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "puzzles.txt"
            output = Path(tmpdir) / "solutions.txt"
            source.write_text(CLASSIC_PUZZLE + "\n" + broken + "\n", encoding="utf-8")
            status, printed = _run(
                ["--solve", "--file", str(source), "--output", str(output), "--log-level", "ERROR"]
            )
            lines = output.read_text(encoding="utf-8").splitlines()
        self.assertEqual(status, 0)
        self.assertEqual(lines, [CLASSIC_SOLUTION, no_solution(Geometry())])
        self.assertIn("Solving puzzle #1", printed)
        self.assertIn("Puzzles completed: 2", printed)

    def test_solver_timeout_aborts_instead_of_reporting_no_solution(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            source = Path(tmpdir) / "puzzles.txt"
            source.write_text(CLASSIC_PUZZLE + "\n", encoding="utf-8")
            with mock.patch(
                "sudoku.engine.solver.count_solutions_cpsat",
                side_effect=SolverTimeoutError("CP-SAT stopped after 0.001s"),
            ):
                status, printed = _run(
                    ["--solve", "--file", str(source), "--backend", "cpsat", "--log-level", "CRITICAL"]
                )
        self.assertEqual(status, 1)
        self.assertNotIn("There is no solution", printed)

    def test_missing_file_fails(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            status, _ = _run(["--file", str(Path(tmpdir) / "nope.txt"), "--log-level", "CRITICAL"])
        self.assertEqual(status, 1)


class GenerateModeTests(unittest.TestCase):
    def test_appends_unique_puzzles(self) -> None:
        geometry = Geometry(block=2)
        with tempfile.TemporaryDirectory() as tmpdir:
            target = Path(tmpdir) / "generated.txt"
            status, printed = _run(
                [
                    "--generate",
                    "--file", str(target),
                    "--number", "3",
                    "--block-size", "2",
                    "--seed", "9",
                    "--log-level", "ERROR",
                ]
            )
            puzzles = list(read_puzzles(target, geometry))
        self.assertEqual(status, 0)
        self.assertEqual(len(puzzles), 3)
        for puzzle in puzzles:
            self.assertEqual(count_solutions(puzzle, limit=2), 1)
        self.assertIn("Generating puzzle 1 of 3", printed)
        self.assertIn("Puzzles completed: 3", printed)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
