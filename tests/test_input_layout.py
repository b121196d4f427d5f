import unittest

import pygame

from blockfall_config import CONFIG
from blockfall_input import KeyFilter, command_for
from blockfall_layout import compute_dims


class KeymapTests(unittest.TestCase):
    def test_arrow_keys(self):
        self.assertEqual(command_for(pygame.K_LEFT), "left")
        self.assertEqual(command_for(pygame.K_RIGHT), "right")
        self.assertEqual(command_for(pygame.K_DOWN), "down")
        self.assertEqual(command_for(pygame.K_UP), "rotate")
        self.assertEqual(command_for(pygame.K_r), "restart")

    def test_unbound_key(self):
        self.assertIsNone(command_for(pygame.K_SPACE))


class KeyFilterTests(unittest.TestCase):
    def test_held_restart_fires_once(self):
        keys = KeyFilter()
        self.assertEqual(keys.press(pygame.K_r), "restart")
        self.assertIsNone(keys.press(pygame.K_r))
        self.assertIsNone(keys.press(pygame.K_r))
        keys.release(pygame.K_r)
        self.assertEqual(keys.press(pygame.K_r), "restart")

    def test_movement_repeats(self):
        keys = KeyFilter()
        self.assertEqual([keys.press(pygame.K_LEFT) for _ in range(3)], ["left"] * 3)
        self.assertEqual([keys.press(pygame.K_UP) for _ in range(2)], ["rotate"] * 2)

    def test_unbound_key(self):
        keys = KeyFilter()
        self.assertIsNone(keys.press(pygame.K_SPACE))
        keys.release(pygame.K_SPACE)


class LayoutTests(unittest.TestCase):
    def tearDown(self):
        CONFIG["CELL_SIZE"] = 32

    def test_board_and_panel_geometry(self):
        d = compute_dims()
        self.assertEqual((d.board_w, d.board_h), (320, 640))
        self.assertEqual(d.panel_x, d.board_x + d.board_w + d.margin)
        self.assertEqual(d.total_h, d.board_h + 2 * d.margin)

    def test_button_inside_panel(self):
        d = compute_dims()
        x, y, w, h = d.button
        self.assertGreaterEqual(x, d.panel_x)
        self.assertLessEqual(x + w, d.panel_x + d.panel_w)
        self.assertTrue(d.button_hit((x + 1, y + 1)))
        self.assertFalse(d.button_hit((x + w, y)))
        self.assertFalse(d.button_hit((d.board_x, d.board_y)))

    def test_follows_cell_size(self):
        CONFIG["CELL_SIZE"] = 20
        self.assertEqual(compute_dims().board_w, 200)


if __name__ == "__main__":
    unittest.main()
