
"""Key bindings and held-key repeat"""
from typing import Optional, Set
import pygame
from blockfall_config import CONFIG

KEYMAP = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_DOWN: "down",
    pygame.K_UP: "rotate",
    pygame.K_r: "restart",
}

# Fire once per physical press; repeated KEYDOWNs are dropped until KEYUP
ONE_SHOT = {"restart"}

def command_for(key: int) -> Optional[str]:
    return KEYMAP.get(key)

def enable_key_repeat():
    pygame.key.set_repeat(CONFIG["KEY_REPEAT_DELAY_MS"], CONFIG["KEY_REPEAT_INTERVAL_MS"])

class KeyFilter:
    """Turns KEYDOWN/KEYUP into commands, letting only movement keys repeat."""
    def __init__(self):
        self.held: Set[int] = set()

    def press(self, key: int) -> Optional[str]:
        cmd = command_for(key)
        if cmd in ONE_SHOT:
            if key in self.held: return None
            self.held.add(key)
        return cmd

    def release(self, key: int):
        self.held.discard(key)
