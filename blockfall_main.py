
import argparse
import logging
import sys

import pygame
from blockfall_config import CONFIG
from blockfall_game import Game
from blockfall_input import KeyFilter, enable_key_repeat
from blockfall_layout import compute_dims
from blockfall_render import RenderAssets
from blockfall_rng import PieceRandom

log = logging.getLogger("blockfall")

TICK_EVENT = pygame.USEREVENT + 1


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game.")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"], help="piece randomizer seed")
    p.add_argument("--tick-ms", type=int, default=CONFIG["TICK_MS"], help="gravity interval in ms")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"], help="cell size in pixels")
    p.add_argument("--log-level", default=CONFIG["LOG_LEVEL"],
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging level")
    args = p.parse_args(argv)
    if args.tick_ms <= 0:
        p.error("--tick-ms must be positive")
    if args.cell_size < 8:
        p.error("--cell-size must be at least 8")
    return args


def apply_args(args):
    CONFIG["SEED"] = args.seed
    CONFIG["TICK_MS"] = args.tick_ms
    CONFIG["CELL_SIZE"] = args.cell_size
    CONFIG["LOG_LEVEL"] = args.log_level


def start_timer():
    # Re-arming replaces any pending timer, so a restart gets a full first interval
    pygame.time.set_timer(TICK_EVENT, CONFIG["TICK_MS"])


def stop_timer():
    pygame.time.set_timer(TICK_EVENT, 0)


def main(argv=None):
    apply_args(parse_args(argv))
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP, pygame.MOUSEBUTTONDOWN, TICK_EVENT])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Blockfall")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    game = Game(PieceRandom(CONFIG["SEED"]))
    render.rebuild_board_surface(game.board)
    keys = KeyFilter()
    enable_key_repeat()
    start_timer()
    log.info("started: tick %d ms, seed %s", CONFIG["TICK_MS"], CONFIG["SEED"])

    def restart():
        game.restart()
        render.rebuild_board_surface(game.board)
        start_timer()

    def step():
        if game.game_over: return
        result = game.tick()
        if result.landed:
            render.rebuild_board_surface(game.board)
        if result.game_over:
            stop_timer()

    running = True
    while running:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == TICK_EVENT:
                step()
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                    continue
                cmd = keys.press(e.key)
                if cmd == "restart":
                    restart()
                elif cmd == "down":
                    step()
                elif cmd:
                    game.handle(cmd)
            elif e.type == pygame.KEYUP:
                keys.release(e.key)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if dims.button_hit(e.pos):
                    restart()

        render.draw(screen, game)
        pygame.display.flip()

    stop_timer()
    pygame.quit()
    return 0


if __name__ == '__main__':
    sys.exit(main())
