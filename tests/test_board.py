# -*-  coding: utf-8 -*-
"""
Set of test for board creation, tile spawning and end of game detection.
"""
from unittest import TestCase, main

import numpy as np
from numpy.random import default_rng

from mergeboard.core.gameboard import TILE_SPAWN_PROBS, fill_cells, has_moves, is_done, new_board, spawn_tile

CHECKERBOARD = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])


class TestNewBoard(TestCase):
    def test_empty(self):
        """A new board is an empty 4x4 grid."""
        board = new_board()
        self.assertEqual(board.shape, (4, 4))
        self.assertEqual(np.count_nonzero(board), 0)


class TestSpawnTile(TestCase):
    """
    Test for random tile spawning.
    """

    def test_changes_exactly_one_cell(self):
        """One empty cell becomes a 2 or a 4, nothing else moves."""
        board = np.array([[2, 0, 0, 0], [0, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 8]])
        rng = default_rng(7)
        for _ in range(50):
            result = spawn_tile(board, rng)
            changed = result != board
            self.assertEqual(np.count_nonzero(changed), 1)
            self.assertEqual(board[changed][0], 0)
            self.assertIn(result[changed][0], (2, 4))

    def test_full_board_unchanged(self):
        """A full board is returned unchanged."""
        result = spawn_tile(CHECKERBOARD, default_rng(0))
        np.testing.assert_array_equal(result, CHECKERBOARD)
        self.assertIsNot(result, CHECKERBOARD)

    def test_input_not_modified(self):
        """The input board is never written to."""
        board = new_board()
        spawn_tile(board, default_rng(0))
        self.assertEqual(np.count_nonzero(board), 0)

    def test_seed_reproducibility(self):
        """Same seed produces identical spawns."""
        board1 = fill_cells(new_board(), 5, default_rng(42))
        board2 = fill_cells(new_board(), 5, default_rng(42))
        np.testing.assert_array_equal(board1, board2)

    def test_every_empty_cell_reachable(self):
        """Cells are chosen among all empty cells."""
        board = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        rng = default_rng(3)
        seen = set()
        for _ in range(500):
            result = spawn_tile(board, rng)
            seen.add(tuple(np.argwhere(result != board)[0]))
        self.assertEqual(len(seen), 15)

    def test_tile_spawn_distribution(self):
        """Tile values follow 90/10 distribution for 2 vs 4."""
        rng = default_rng(0)
        samples = 2000
        tiles = [spawn_tile(new_board(), rng).sum() for _ in range(samples)]
        freq_2 = tiles.count(2) / samples

        # ##>: Allow ±5% tolerance.
        self.assertAlmostEqual(freq_2, TILE_SPAWN_PROBS[2], delta=0.05)
        self.assertEqual(tiles.count(2) + tiles.count(4), samples)

    def test_fill_cells_stops_when_full(self):
        """Asking for more tiles than empty cells fills the board."""
        board = fill_cells(new_board(), 20, default_rng(1))
        self.assertEqual(np.count_nonzero(board), 16)

    def test_fill_cells_returns_new_board(self):
        """Even with no tile to add, the caller's board is not handed back."""
        board = new_board()
        result = fill_cells(board, 0, default_rng(1))
        self.assertIsNot(result, board)
        np.testing.assert_array_equal(result, board)


class TestHasMoves(TestCase):
    """
    Test for end of game detection.
    """

    def test_checkerboard_is_terminal(self):
        """A full board without equal neighbours has no move."""
        self.assertFalse(has_moves(CHECKERBOARD))
        self.assertTrue(is_done(CHECKERBOARD))

    def test_any_empty_cell_is_not_terminal(self):
        """Zeroing any single cell of the checkerboard gives a move."""
        for row in range(4):
            for col in range(4):
                board = CHECKERBOARD.copy()
                board[row, col] = 0
                self.assertTrue(has_moves(board), msg=f"cell {(row, col)}")

    def test_horizontal_pair(self):
        """Two equal neighbours in a row give a move."""
        board = CHECKERBOARD.copy()
        board[3, 3] = 4
        self.assertTrue(has_moves(board))

    def test_vertical_pair(self):
        """Two equal neighbours in a column give a move."""
        board = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 4096]])
        self.assertTrue(has_moves(board))

    def test_not_finished_board(self):
        """Test if the game correctly identifies an unfinished state."""
        board = np.array([[2, 2, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertFalse(is_done(board))

    def test_wrong_shape(self):
        """A board that is not 4x4 is rejected."""
        with self.assertRaises(ValueError):
            has_moves(np.zeros((5, 5)))


if __name__ == "__main__":
    main()
