import unittest

from blockfall_piece import PIECE_TYPES
from blockfall_rng import PieceRandom


class PieceRandomTests(unittest.TestCase):
    def test_seed_repeats_sequence(self):
        a = PieceRandom(seed=1234)
        b = PieceRandom(seed=1234)
        self.assertEqual([a.next_piece() for _ in range(50)], [b.next_piece() for _ in range(50)])

    def test_covers_all_types(self):
        rng = PieceRandom(seed=0)
        seen = {rng.next_piece() for _ in range(500)}
        self.assertEqual(seen, set(PIECE_TYPES))


if __name__ == "__main__":
    unittest.main()
