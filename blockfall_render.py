
"""
Rendering for the pygame window.

Layers, back to front:
  1. background: board grid, side panel, restart button (built once per Dims)
  2. locked blocks: cached, rebuilt after a landing or restart
  3. falling piece: drawn every frame
  4. HUD text and the game-over shade
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from blockfall_layout import Dims
from blockfall_piece import COLS, ROWS, Piece

RGB = Tuple[int, int, int]

# Type code -> block colour (cyan, blue, orange, yellow, green, purple, red)
COLORS: Dict[int, RGB] = {
    1: (102,224,255),
    2: (106,119,255),
    3: (255,158,94),
    4: (255,224,102),
    5: (94,224,142),
    6: (200,119,255),
    7: (255,102,119),
}

PALETTE: Dict[str, RGB] = {
    "bg": (10,13,34),
    "grid": (40,50,90),
    "panel": (21,25,53),
    "panel_edge": (50,60,100),
    "button": (40,48,96),
    "button_edge": (90,105,170),
    "title": (197,202,233),
    "text": (200,210,240),
    "dim": (165,175,215),
    "alert": (255,140,150),
    "banner": (255,220,220),
}

LEGEND = ["←/→ Move", "↓ Down", "↑ Rotate", "R Restart • Esc Quit"]

@dataclass
class HudCache:
    score: int = -1
    game_over: Optional[bool] = None
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    status_s: Optional[pygame.Surface] = None
    button_s: Optional[pygame.Surface] = None
    legend: Optional[List[pygame.Surface]] = None

class RenderAssets:
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.hud = HudCache()
        size = dims.cell - 2
        self.blocks = {code: self._block(size, col) for code, col in COLORS.items()}
        self.background = self._background()
        self.locked = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)

    @staticmethod
    def _block(size: int, color: RGB) -> pygame.Surface:
        s = pygame.Surface((size, size))
        s.fill(color)
        return s

    def _background(self) -> pygame.Surface:
        d = self.dims
        bg = pygame.Surface((d.total_w, d.total_h))
        bg.fill(PALETTE["bg"])
        left, top = d.board_x, d.board_y
        right, bottom = left + d.board_w, top + d.board_h
        for i in range(COLS+1):
            pygame.draw.line(bg, PALETTE["grid"], (left + i*d.cell, top), (left + i*d.cell, bottom))
        for i in range(ROWS+1):
            pygame.draw.line(bg, PALETTE["grid"], (left, top + i*d.cell), (right, top + i*d.cell))
        for rect, fill, edge in (
            (pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h), "panel", "panel_edge"),
            (pygame.Rect(d.button), "button", "button_edge"),
        ):
            pygame.draw.rect(bg, PALETTE[fill], rect)
            pygame.draw.rect(bg, PALETTE[edge], rect, 1)
        return bg

    def _offset(self, row: int, col: int) -> Tuple[int, int]:
        # Top-left pixel of a block inside the board area, leaving a 1px grid gap
        return col*self.dims.cell + 1, row*self.dims.cell + 1

    def rebuild_board_surface(self, board: List[List[int]]):
        """Redraw the cached layer of locked blocks."""
        self.locked.fill((0,0,0,0))
        for r, line in enumerate(board):
            for c, code in enumerate(line):
                if code:
                    self.locked.blit(self.blocks[code], self._offset(r, c))

    def draw_piece(self, screen: pygame.Surface, piece: Optional[Piece]):
        if piece is None: return
        block = self.blocks[piece.code]
        for r, c in piece.cells():
            if 0 <= r < ROWS and 0 <= c < COLS:
                x, y = self._offset(r, c)
                screen.blit(block, (self.dims.board_x + x, self.dims.board_y + y))

    def draw_panel_hud(self, screen: pygame.Surface, score: int, game_over: bool):
        d, f, hud = self.dims, self.font, self.hud
        if hud.title is None:
            hud.title = self.big_font.render("Blockfall", True, PALETTE["title"])
            hud.button_s = f.render("New Game (R)", True, PALETTE["text"])
            hud.legend = [f.render("Controls:", True, PALETTE["text"])]
            hud.legend += [f.render(line, True, PALETTE["dim"]) for line in LEGEND]
        if score != hud.score:
            hud.score = score
            hud.score_s = f.render(f"Score: {score}", True, PALETTE["text"])
        if game_over != hud.game_over:
            hud.game_over = game_over
            hud.status_s = f.render("GAME OVER", True, PALETTE["alert"]) if game_over else None

        x = d.panel_x + 12
        screen.blit(hud.title, (x, d.panel_y + 12))
        screen.blit(hud.score_s, (x, d.panel_y + 56))
        if hud.status_s: screen.blit(hud.status_s, (x, d.panel_y + 84))
        screen.blit(hud.button_s, hud.button_s.get_rect(center=pygame.Rect(d.button).center))
        for i, surf in enumerate(hud.legend):
            screen.blit(surf, (x, d.panel_y + 190 + i*20))

    def draw_game_over(self, screen: pygame.Surface):
        d = self.dims
        shade = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        shade.fill(PALETTE["bg"] + (170,))
        screen.blit(shade, (d.board_x, d.board_y))
        msg = self.big_font.render("GAME OVER", True, PALETTE["banner"])
        screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w//2, d.board_y + d.board_h//2)))

    def draw(self, screen: pygame.Surface, game):
        screen.blit(self.background, (0,0))
        screen.blit(self.locked, (self.dims.board_x, self.dims.board_y))
        self.draw_piece(screen, game.current)
        self.draw_panel_hud(screen, game.score, game.game_over)
        if game.game_over:
            self.draw_game_over(screen)
