# tools/run_game.py
# Pygame session driver for the giftmaze engine.
# - Arrow keys / WASD call GameState.move_player; the engine decides legality.
# - Board is redrawn on a fixed cadence (TimingModel.redraw_interval_ms), not per event.
# - On finish the engine only flips `ended`; the GAME OVER banner appears after
#   finish_delay_ms, and the old session keeps showing underneath.
# - R discards the current GameState and starts a fresh one; Esc quits.

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

from giftmaze.engine.state import DIRECTIONS, GameState
from giftmaze.engine.timing import TimingModel
from giftmaze.errors import InvalidDimensions, NoOpenCells
from giftmaze.render.board import board_size, draw_board
from giftmaze.render.tileset import Tileset
from giftmaze.ui.status_bar import StatusBarState, render_status_bar

KEYS = {
    pygame.K_UP: "up", pygame.K_w: "up",
    pygame.K_DOWN: "down", pygame.K_s: "down",
    pygame.K_LEFT: "left", pygame.K_a: "left",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
}


def new_session(args, finished: list) -> GameState:
    finished.clear()
    return GameState(
        args.height,
        args.width,
        seed=args.seed,
        on_finish=lambda st: finished.append(True),
    )


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="giftmaze runtime")
    parser.add_argument("--height", type=int, default=15)
    parser.add_argument("--width", type=int, default=20)
    parser.add_argument("--seed", type=int, default=None, help="fixed seed (default: random per session)")
    parser.add_argument("--tile", type=int, default=32, help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--redraw-ms", type=int, default=100, help="board redraw interval")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    timing = TimingModel(redraw_interval_ms=args.redraw_ms, fps=args.fps)
    finished: list = []
    try:
        state = new_session(args, finished)
    except (InvalidDimensions, NoOpenCells) as e:
        print("[run_game]", e)
        return 2

    pygame.init()
    snap = state.snapshot()
    bw, bh = board_size(snap, args.tile)
    screen = pygame.display.set_mode((bw, bh + args.tile))
    pygame.display.set_caption(f"giftmaze {args.height}x{args.width}")
    clock = pygame.time.Clock()
    tileset = Tileset(args.tile)
    banner_font = pygame.font.SysFont(None, max(16, args.tile))

    redraw_in = 0
    banner_in: Optional[int] = None

    running = True
    while running:
        # --- Input ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    try:
                        state = new_session(args, finished)
                    except NoOpenCells as e:
                        print("[run_game]", e)
                        continue
                    banner_in = None
                    redraw_in = 0
                elif event.key in KEYS:
                    state.move_player(*DIRECTIONS[KEYS[event.key]])

        if finished and banner_in is None:
            banner_in = timing.finish_delay_frames

        # --- Rendering on the redraw cadence ---
        if redraw_in <= 0:
            redraw_in = timing.redraw_frames
            snap = state.snapshot()
            screen.fill((0, 0, 0))
            draw_board(screen, snap, tileset)
            render_status_bar(screen, (0, bh), args.tile, snap.width, StatusBarState.from_snapshot(snap))
            if banner_in is not None and banner_in <= 0:
                img = banner_font.render(f"GAME OVER: {snap.pickups} gifts", True, (255, 255, 255), (0, 0, 0))
                screen.blit(img, img.get_rect(center=(bw // 2, bh // 2)))
            pygame.display.flip()
        redraw_in -= 1
        if banner_in is not None and banner_in > 0:
            banner_in -= 1

        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
