import unittest

from game import (
    Board,
    Mark,
    ROWS,
    COLS,
    EMPTY,
    BLOCKED,
    DEFAULT_BLOCKED,
    InvalidPlacement,
    all_coords,
)


class TestBoard(unittest.TestCase):
    def test_given_default_layout_when_initialized_then_only_listed_cells_blocked(self):
        board = Board.initialize(DEFAULT_BLOCKED)
        self.assertEqual(len(board.grid), ROWS * COLS)
        for coord in all_coords():
            expected = BLOCKED if coord in DEFAULT_BLOCKED else EMPTY
            self.assertEqual(board.get(coord), expected)
        self.assertEqual(set(board.blocked_cells()), set(DEFAULT_BLOCKED))

    def test_given_out_of_bounds_blocked_cell_when_initialized_then_value_error(self):
        with self.assertRaises(ValueError):
            Board.initialize([(7, 0)])

    def test_given_empty_cell_when_placing_then_new_board_has_mark_and_old_is_unchanged(self):
        board = Board.initialize(DEFAULT_BLOCKED)
        placed = board.place((3, 2), player=1, number=1)
        self.assertEqual(placed.get((3, 2)), Mark(player=1, number=1))
        self.assertTrue(placed.is_marked((3, 2)))
        self.assertEqual(board.get((3, 2)), EMPTY)

    def test_given_blocked_or_occupied_cell_when_placing_then_invalid_placement(self):
        board = Board.initialize(DEFAULT_BLOCKED)
        with self.assertRaises(InvalidPlacement):
            board.place((0, 4), player=1, number=1)
        placed = board.place((3, 2), player=1, number=1)
        with self.assertRaises(InvalidPlacement):
            placed.place((3, 2), player=2, number=2)
        with self.assertRaises(InvalidPlacement):
            placed.place((-1, 2), player=2, number=2)

    def test_given_out_of_bounds_coordinate_when_getting_then_index_error(self):
        board = Board.initialize(DEFAULT_BLOCKED)
        with self.assertRaises(IndexError):
            board.get((0, COLS))
        self.assertFalse(board.is_empty((ROWS, 0)))

    def test_given_marks_when_pretty_then_numbers_and_symbols_rendered(self):
        board = Board.initialize(DEFAULT_BLOCKED).place((3, 2), 1, 1).place((3, 3), 2, 2)
        txt = board.pretty()
        self.assertIn('1x', txt)
        self.assertIn('2o', txt)
        self.assertIn('#', txt)
        self.assertEqual(len(txt.splitlines()), ROWS + 1)


if __name__ == '__main__':
    unittest.main(verbosity=2)
