
"""
Game state machine
==================

Owns the board, the falling piece, the score and the Playing / GameOver state.
Every board update goes through the helpers in ``blockfall_board``, which
return fresh grids, so a ``Game`` only swaps references.

The driver calls:

  • tick()        : gravity step, once per timer event
  • handle(cmd)   : "left" / "right" / "down" / "rotate" / "restart"

Everything except restart is ignored once the game is over.
"""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from blockfall_board import Board, POINTS_PER_LINE, clear_lines, empty_board, is_valid, merge, overlay
from blockfall_piece import Piece
from blockfall_rng import PieceRandom

log = logging.getLogger(__name__)


class GameState(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class TickResult:
    moved: bool = False
    landed: bool = False
    cleared: int = 0
    game_over: bool = False


class Game:
    COMMANDS = ("left", "right", "down", "rotate", "restart")

    def __init__(self, rng: Optional[PieceRandom] = None):
        self.rng = rng if rng is not None else PieceRandom()
        self.board: Board = empty_board()
        self.current: Optional[Piece] = None
        self.score = 0
        self.state = GameState.PLAYING
        self._spawn()

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    # ---------- lifecycle ----------
    def _spawn(self) -> bool:
        """Put a new random piece at the spawn point; False means the game ended."""
        piece = Piece.spawn(self.rng.next_piece())
        if not is_valid(self.board, piece):
            self.current = None
            self.state = GameState.GAME_OVER
            log.info("game over: %s blocked at spawn, final score %d", piece.t, self.score)
            log.debug("final board:\n%s", self.dump())
            return False
        self.current = piece
        log.debug("spawned %s at (%d, %d)", piece.t, piece.row, piece.col)
        return True

    def restart(self) -> bool:
        self.board = empty_board()
        self.score = 0
        self.state = GameState.PLAYING
        log.info("restart")
        self._spawn()
        return True

    # ---------- gravity ----------
    def tick(self) -> TickResult:
        """Move the piece down one row, or land it and spawn the next one."""
        if self.game_over:
            return TickResult(game_over=True)
        piece = self.current
        below = piece.moved(1, 0)
        if is_valid(self.board, below):
            self.current = below
            return TickResult(moved=True)

        self.board, cleared = clear_lines(merge(self.board, piece))
        log.debug("landed %s at (%d, %d)", piece.t, piece.row, piece.col)
        if cleared:
            self.score += cleared * POINTS_PER_LINE
            log.info("cleared %d line(s), score %d", cleared, self.score)
        alive = self._spawn()
        return TickResult(landed=True, cleared=cleared, game_over=not alive)

    # ---------- player commands ----------
    def _shift(self, dc: int) -> bool:
        if self.game_over: return False
        trial = self.current.moved(0, dc)
        if not is_valid(self.board, trial): return False
        self.current = trial
        return True

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def move_down(self) -> bool:
        if self.game_over: return False
        self.tick()
        return True

    def rotate(self) -> bool:
        # No wall kick: the rotated shape must fit where the piece already is
        if self.game_over: return False
        trial = self.current.rotated()
        if not is_valid(self.board, trial): return False
        self.current = trial
        return True

    def handle(self, command: str) -> bool:
        if command not in self.COMMANDS:
            raise ValueError(f"unknown command {command!r}")
        return {
            "left": self.move_left,
            "right": self.move_right,
            "down": self.move_down,
            "rotate": self.rotate,
            "restart": self.restart,
        }[command]()

    # ---------- view ----------
    def display_board(self) -> Board:
        return overlay(self.board, self.current)

    def dump(self) -> str:
        """Text grid of the display board: '.' for empty, type codes otherwise."""
        return "\n".join("".join(str(v) if v else "." for v in row) for row in self.display_board())
