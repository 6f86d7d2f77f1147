import io
import unittest

from sudoku.core.constants import Geometry
from sudoku.engine.grid import SudokuGrid
from sudoku.io.codec import decode
from sudoku.utils.pretty import format_grid, pretty_print_grid, print_run_stats

from puzzles import CLASSIC_PUZZLE


class FormatGridTests(unittest.TestCase):
    def test_nine_by_nine_layout(self) -> None:
        lines = format_grid(decode(CLASSIC_PUZZLE)).splitlines()
        self.assertEqual(len(lines), 13)
        self.assertEqual(lines[0], " +---------+---------+---------+ ")
        self.assertEqual(lines[1], " | 5  3  . | .  7  . | .  .  . |")
        self.assertEqual(lines[4], " |---------+---------+---------| ")

    def test_sixteen_by_sixteen_widens_cells(self) -> None:
        lines = format_grid(SudokuGrid.empty(Geometry(block=4))).splitlines()
        self.assertEqual(len(lines), 16 + 3 + 2)
        self.assertTrue(lines[1].startswith(" | .  "))

    def test_pretty_print_with_label(self) -> None:
        stream = io.StringIO()
        pretty_print_grid(SudokuGrid.empty(Geometry(block=2)), label="Empty", stream=stream)
        self.assertTrue(stream.getvalue().startswith("Empty\n +"))


class RunStatsTests(unittest.TestCase):
    def test_reports_throughput(self) -> None:
        stream = io.StringIO()
        print_run_stats(2.0, 10, stream=stream)
        self.assertEqual(
            stream.getvalue().strip(),
            "Elapsed time: 2.000 seconds. Puzzles completed: 10. Performance: 5.000 puzzles/second.",
        )

    def test_zero_elapsed(self) -> None:
        stream = io.StringIO()
        print_run_stats(0.0, 3, stream=stream)
        self.assertIn("Performance: 0.000", stream.getvalue())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
