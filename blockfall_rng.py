
"""Piece randomizer"""
import random
from typing import Optional
from blockfall_piece import PIECE_TYPES

class PieceRandom:
    """Uniform choice over the seven tetrominoes.

    ``seed=None`` draws from OS entropy; pass an int for a repeatable sequence.
    """
    PIECES = PIECE_TYPES

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
