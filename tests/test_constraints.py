import unittest

from sudoku.core.constants import Geometry
from sudoku.engine.constraints import candidates, invalid_values
from sudoku.io.codec import decode

from puzzles import CLASSIC_PUZZLE, CLASSIC_SOLUTION


class GeometryTests(unittest.TestCase):
    def test_default_is_nine_by_nine(self) -> None:
        geometry = Geometry()
        self.assertEqual(geometry.side, 9)
        self.assertEqual(geometry.size, 81)
        self.assertEqual(geometry.full_mask, 0b111111111)

    def test_position_decomposition(self) -> None:
        geometry = Geometry()
        self.assertEqual(
            (geometry.row_of(40), geometry.column_of(40), geometry.block_of(40), geometry.offset_of(40)),
            (4, 4, 4, 4),
        )
        self.assertEqual(geometry.top_left(40), 30)
        self.assertEqual(geometry.block_of(11), 0)
        self.assertEqual(geometry.offset_of(11), 5)
        self.assertEqual(geometry.top_left(80), 60)

    def test_units_cover_every_cell_three_times(self) -> None:
        geometry = Geometry(block=2)
        units = geometry.units()
        self.assertEqual(len(units), 12)
        counts = [0] * geometry.size
        for unit in units:
            self.assertEqual(len(set(unit)), geometry.side)
            for position in unit:
                counts[position] += 1
        self.assertEqual(counts, [3] * geometry.size)

    def test_block_positions(self) -> None:
        self.assertEqual(
            sorted(Geometry().block_positions(4)), [30, 31, 32, 39, 40, 41, 48, 49, 50]
        )

    def test_rejects_unsupported_block_sizes(self) -> None:
        for block in (1, 5):
            with self.assertRaises(ValueError):
                Geometry(block=block)


class InvalidValuesTests(unittest.TestCase):
    def test_collects_row_column_and_block_peers(self) -> None:
        grid = decode(CLASSIC_PUZZLE)
        # Row 0 holds 3,5,7; column 2 holds 8; block 0 holds 3,5,6,8,9.
        expected = sum(1 << (v - 1) for v in (3, 5, 6, 7, 8, 9))
        self.assertEqual(invalid_values(grid.cells, 2, grid.geometry), expected)
        self.assertEqual(candidates(grid.cells, 2, grid.geometry), [1, 2, 4])

    def test_empty_grid_has_no_exclusions(self) -> None:
        geometry = Geometry()
        cells = [0] * geometry.size
        for position in (0, 40, 80):
            self.assertEqual(invalid_values(cells, position, geometry), 0)

    def test_solution_value_is_always_a_candidate(self) -> None:
        puzzle = decode(CLASSIC_PUZZLE)
        solution = decode(CLASSIC_SOLUTION)
        for position in puzzle.empty_positions():
            self.assertIn(
                solution.cell(position),
                candidates(puzzle.cells, position, puzzle.geometry),
            )

    def test_does_not_mutate_cells(self) -> None:
        grid = decode(CLASSIC_PUZZLE)
        before = list(grid.cells)
        invalid_values(grid.cells, 10, grid.geometry)
        self.assertEqual(grid.cells, before)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
