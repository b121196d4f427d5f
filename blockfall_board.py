
"""Board helpers: validity, merge, line clear, display overlay"""
from typing import List, Optional, Tuple
from blockfall_piece import Piece, COLS, ROWS

Board = List[List[int]]

EMPTY = 0
POINTS_PER_LINE = 100

def empty_board() -> Board:
    return [[EMPTY] * COLS for _ in range(ROWS)]

def check_board(board: Board):
    if len(board) != ROWS or any(len(r) != COLS for r in board):
        raise ValueError(f"board must be {ROWS}x{COLS}")

def copy_board(board: Board) -> Board:
    check_board(board)
    return [r[:] for r in board]

def is_valid(board: Board, piece: Piece, row: Optional[int] = None, col: Optional[int] = None) -> bool:
    """True iff every occupied cell of ``piece`` placed at (row, col) is on the
    board and over an empty cell. Position defaults to the piece's own."""
    check_board(board)
    r0 = piece.row if row is None else row
    c0 = piece.col if col is None else col
    for y, line in enumerate(piece.shape):
        for x, v in enumerate(line):
            if not v: continue
            by, bx = r0 + y, c0 + x
            if by < 0 or by >= ROWS or bx < 0 or bx >= COLS: return False
            if board[by][bx] != EMPTY: return False
    return True

def merge(board: Board, piece: Piece) -> Board:
    """Return a new board with the piece stamped on it (no validity check)."""
    out = copy_board(board)
    for y, line in enumerate(piece.shape):
        for x, v in enumerate(line):
            if v: out[piece.row + y][piece.col + x] = v
    return out

def clear_lines(board: Board) -> Tuple[Board, int]:
    kept = [r for r in copy_board(board) if any(v == EMPTY for v in r)]
    cleared = ROWS - len(kept)
    return [[EMPTY] * COLS for _ in range(cleared)] + kept, cleared

def overlay(board: Board, piece: Optional[Piece]) -> Board:
    """Board copy with the falling piece drawn in, for display only."""
    out = copy_board(board)
    if piece is None: return out
    for by, bx in piece.cells():
        if 0 <= by < ROWS and 0 <= bx < COLS:
            out[by][bx] = piece.code
    return out
