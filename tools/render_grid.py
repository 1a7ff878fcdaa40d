#!/usr/bin/env python3
# Render generated 20x20 mazes (or TSV dumps of them) to PNGs using Pillow.
# Uses the same assets as the runtime: assets/letter_s.png, assets/trap.png, ...

import argparse, os
from PIL import Image, ImageDraw, ImageFont

from seanle.config import ROWS, COLS
from seanle.mapgen.generator import generate_grid
from seanle.render.tileset import ASSET_FILES, ASSET_DIR, LETTER_GLYPH, fallback_color

def read_tsv(path):
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    if len(rows) != ROWS or any(len(r) != COLS for r in rows):
        raise SystemExit(f"{path}: expected {ROWS} rows of {COLS} columns.")
    return rows

def tile_image(tile_id, tile_size):
    name = ASSET_FILES.get(tile_id)
    if name:
        p = os.path.join(ASSET_DIR, name)
        if os.path.exists(p):
            img = Image.open(p).convert("RGBA")
            if img.size != (tile_size, tile_size):
                img = img.resize((tile_size, tile_size), Image.NEAREST)
            return img
    # Fallback: flat colour, letters as black glyph on white
    glyph = LETTER_GLYPH.get(tile_id)
    color = (255, 255, 255, 255) if glyph else fallback_color(tile_id)
    img = Image.new("RGBA", (tile_size, tile_size), color=color)
    if glyph:
        draw = ImageDraw.Draw(img)
        font = ImageFont.load_default()
        tw, th = draw.textlength(glyph, font=font), 8
        draw.text(((tile_size - tw) / 2, (tile_size - th) / 2), glyph, fill=(0, 0, 0, 255), font=font)
    return img

def render_grid(grid, out_png, tile_size=16, margin=0):
    w, h = COLS * tile_size + 2*margin, ROWS * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    cache = {}
    for r in range(ROWS):
        for c in range(COLS):
            tid = grid[r][c]
            if tid not in cache:
                cache[tid] = tile_image(tid, tile_size)
            img = cache[tid]
            x0 = margin + c * tile_size
            y0 = margin + r * tile_size
            canvas.paste(img, (x0, y0, x0 + tile_size, y0 + tile_size), img)
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--seed", type=int, help="first puzzle number to render")
    src.add_argument("--tsv", type=str, help="render a single TSV dump instead")
    ap.add_argument("--count", type=int, default=1, help="how many consecutive seeds")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    args = ap.parse_args()

    if args.tsv:
        png = os.path.join(args.outdir, os.path.splitext(os.path.basename(args.tsv))[0] + ".png")
        render_grid(read_tsv(args.tsv), png, tile_size=args.tile)
        print(f"Wrote {png}")
        return

    for seed in range(args.seed, args.seed + args.count):
        png = os.path.join(args.outdir, f"{seed:05d}.png")
        render_grid(generate_grid(seed), png, tile_size=args.tile)
    print(f"Wrote {args.count} PNG(s) to {args.outdir}")

if __name__ == "__main__":
    main()
