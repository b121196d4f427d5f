import unittest
from dataclasses import replace

from blockfall_piece import CODES, PIECE_TYPES, SHAPES, Piece, rotate_ccw


class PieceTests(unittest.TestCase):
    def test_spawn_position_and_copy(self):
        p = Piece.spawn("T")
        self.assertEqual((p.row, p.col), (0, 4))
        self.assertEqual(p.shape, SHAPES["T"])
        self.assertIsNot(p.shape, SHAPES["T"])

    def test_shape_cells_hold_type_code(self):
        for t in PIECE_TYPES:
            values = {v for row in SHAPES[t] for v in row if v}
            self.assertEqual(values, {CODES[t]})
            self.assertEqual(len(Piece.spawn(t).cells()), 4)

    def test_unknown_type(self):
        with self.assertRaises(ValueError):
            Piece.spawn("X")

    def test_unknown_type_built_directly(self):
        with self.assertRaises(ValueError):
            Piece("X", [[1]], 0, 0)
        with self.assertRaises(ValueError):
            replace(Piece.spawn("O"), t="Q")

    def test_rotate_counter_clockwise(self):
        self.assertEqual(rotate_ccw([[1, 1, 1, 1]]), [[1], [1], [1], [1]])
        self.assertEqual(rotate_ccw([[0, 6, 0], [6, 6, 6]]), [[0, 6], [6, 6], [0, 6]])

    def test_four_rotations_restore_shape(self):
        for t in PIECE_TYPES:
            p = Piece.spawn(t)
            q = p.rotated().rotated().rotated().rotated()
            self.assertEqual(q.shape, p.shape)

    def test_moved_leaves_original(self):
        p = Piece.spawn("O")
        q = p.moved(2, -1)
        self.assertEqual((q.row, q.col), (2, 3))
        self.assertEqual((p.row, p.col), (0, 4))


if __name__ == "__main__":
    unittest.main()
