# blockfall_layout.py
from dataclasses import dataclass
from typing import Tuple
from blockfall_config import CONFIG
from blockfall_piece import COLS, ROWS

MARGIN = 16
PANEL_W = 200
BUTTON_H = 36

Rect = Tuple[int, int, int, int]

@dataclass
class Dims:
    """Window geometry: board on the left, side panel on the right."""
    cell: int
    margin: int = MARGIN
    panel_w: int = PANEL_W

    @property
    def board_x(self) -> int: return self.margin
    @property
    def board_y(self) -> int: return self.margin
    @property
    def board_w(self) -> int: return COLS * self.cell
    @property
    def board_h(self) -> int: return ROWS * self.cell
    @property
    def panel_x(self) -> int: return self.board_x + self.board_w + self.margin
    @property
    def panel_y(self) -> int: return self.board_y
    @property
    def total_w(self) -> int: return self.panel_x + self.panel_w + self.margin
    @property
    def total_h(self) -> int: return self.board_h + 2 * self.margin

    @property
    def button(self) -> Rect:
        """Restart button, under the score lines."""
        return (self.panel_x + 12, self.panel_y + 120, self.panel_w - 24, BUTTON_H)

    def button_hit(self, pos: Tuple[int, int]) -> bool:
        x, y, w, h = self.button
        return x <= pos[0] < x + w and y <= pos[1] < y + h

def compute_dims() -> Dims:
    return Dims(cell=int(CONFIG["CELL_SIZE"]))
