#!/usr/bin/env python3
# Render a generated giftmaze session to a PNG using Pillow.

import argparse, os
from PIL import Image, ImageDraw

from giftmaze.engine.state import GameState
from giftmaze.errors import InvalidDimensions, NoOpenCells
from giftmaze.render.tileset import tile_color
from giftmaze.tiles import HALL, PLAYER, PRIZE

def tile_image(tile_id, tile_size):
    if tile_id in (PLAYER, PRIZE):
        img = Image.new("RGBA", (tile_size, tile_size), color=tile_color(HALL))
        draw = ImageDraw.Draw(img)
        pad = max(1, tile_size // 10)
        draw.ellipse((pad, pad, tile_size - pad - 1, tile_size - pad - 1), fill=tile_color(tile_id))
        return img
    return Image.new("RGBA", (tile_size, tile_size), color=tile_color(tile_id))

def render_snapshot(snap, out_png, tile_size=16, margin=0):
    w, h = snap.width * tile_size + 2*margin, snap.height * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    cache = {}
    for row in snap.cells:
        for c in row:
            tid = c.tile
            if tid not in cache:
                cache[tid] = tile_image(tid, tile_size)
            img = cache[tid]
            x0 = margin + c.x * tile_size
            y0 = margin + c.y * tile_size
            canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)
    return canvas

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--height", type=int, required=True)
    ap.add_argument("--width", type=int, required=True)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--out", type=str, default="out/maze.png", help="PNG path")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    args = ap.parse_args(argv)

    try:
        state = GameState(args.height, args.width, seed=args.seed)
    except (InvalidDimensions, NoOpenCells) as e:
        raise SystemExit(f"render_grid: {e}")
    render_snapshot(state.snapshot(), args.out, tile_size=args.tile)
    print(f"Wrote {args.out} (seed {state.seed})")

if __name__ == "__main__":
    main()
