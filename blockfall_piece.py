
"""Piece model: shapes, type codes, spawn, rotation"""
from dataclasses import dataclass, replace
from typing import List, Tuple

COLS, ROWS = 10, 20

# Type code doubles as the colour index stamped onto the board
CODES = {"I": 1, "J": 2, "L": 3, "O": 4, "S": 5, "T": 6, "Z": 7}

SHAPES = {
    "I": [[1,1,1,1]],
    "J": [[2,0,0],[2,2,2]],
    "L": [[0,0,3],[3,3,3]],
    "O": [[4,4],[4,4]],
    "S": [[0,5,5],[5,5,0]],
    "T": [[0,6,0],[6,6,6]],
    "Z": [[7,7,0],[0,7,7]],
}

PIECE_TYPES = list(SHAPES)

SPAWN_ROW, SPAWN_COL = 0, COLS // 2 - 1

def rotate_ccw(m): return [list(c) for c in zip(*m)][::-1]

@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    row: int
    col: int

    def __post_init__(self):
        if self.t not in SHAPES:
            raise ValueError(f"unknown piece type {self.t!r}")

    @staticmethod
    def spawn(t: str) -> "Piece":
        if t not in SHAPES:
            raise ValueError(f"unknown piece type {t!r}")
        return Piece(t, [r[:] for r in SHAPES[t]], SPAWN_ROW, SPAWN_COL)

    @property
    def code(self) -> int:
        return CODES[self.t]

    def moved(self, dr: int, dc: int) -> "Piece":
        return replace(self, row=self.row + dr, col=self.col + dc)

    def rotated(self) -> "Piece":
        return replace(self, shape=rotate_ccw(self.shape))

    def cells(self) -> List[Tuple[int, int]]:
        """Board (row, col) of every occupied cell, bounds not checked."""
        return [(self.row + r, self.col + c)
                for r, line in enumerate(self.shape)
                for c, v in enumerate(line) if v]
