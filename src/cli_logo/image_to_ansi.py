#!/usr/bin/env python3
"""Render an image as lines of (optionally colored) terminal glyphs."""

import argparse
import logging
import os
import sys
from typing import Iterator, Optional

import numpy as np

from .background import find_background
from .banner import generate_banner, generate_code
from .brightness import pick_glyph
from .charsets import Charset, get_ramp
from .colors import ESC, RESET, ColorMode, color_escape
from .options import RenderOptions
from .pixels import PixelBuffer, load_pixels

ALPHA_CUTOFF = 128
BLANK = RESET + " "

LOG = logging.getLogger(__name__)


# -----------------------------
# Line renderer
# -----------------------------
def render_lines(
    buffer: PixelBuffer, opt: RenderOptions, mask: Optional[np.ndarray] = None
) -> Iterator[str]:
    """Yield one rendered row per pixel row (no trailing newline)."""
    ramp = get_ramp(opt.charset, invert=opt.invert)
    mode = ColorMode(opt.color_mode)
    data = buffer.data

    for y in range(buffer.height):
        row = []
        for x in range(buffer.width):
            pixel_idx = y * buffer.width + x
            r, g, b, a = data[pixel_idx * 4 : pixel_idx * 4 + 4]

            if a < ALPHA_CUTOFF:
                row.append(BLANK)
                continue

            if opt.background_transparent and mask is not None and mask[pixel_idx]:
                row.append(BLANK)
                continue

            ch = pick_glyph(ramp, r, g, b)
            if mode is ColorMode.NONE:
                row.append(ch)
            else:
                row.append(color_escape(mode, r, g, b) + ch + RESET)
        yield "".join(row)


def render(buffer: PixelBuffer, opt: RenderOptions) -> str:
    opt.validate()

    mask = None
    if opt.background_transparent:
        mask = find_background(buffer, opt.background_threshold)

    return "".join(line + "\n" for line in render_lines(buffer, opt, mask))


def image_to_ansi(image_path: str, opt: Optional[RenderOptions] = None) -> str:
    """Decode `image_path`, resample it to `opt.width` columns and render it."""
    opt = (opt or RenderOptions()).validate()
    LOG.info(
        "Rendering %s (width=%d color=%s charset=%s invert=%s bg=%s/%d)",
        image_path,
        opt.width,
        opt.color_mode.value,
        opt.charset.value,
        opt.invert,
        opt.background_transparent,
        opt.background_threshold,
    )
    buffer = load_pixels(image_path, opt.width)
    LOG.debug("Pixel buffer %dx%d", buffer.width, buffer.height)
    return render(buffer, opt)


# -----------------------------
# CLI helpers (shared with init)
# -----------------------------
def add_render_arguments(parser: argparse.ArgumentParser, default_width: int) -> None:
    parser.add_argument("image", help="Path to the image file")
    parser.add_argument(
        "-w", "--width", type=int, default=default_width, help="Width in characters"
    )
    parser.add_argument(
        "-c",
        "--color",
        choices=[m.value for m in ColorMode],
        default=ColorMode.TRUECOLOR.value,
        help="Color mode",
    )
    parser.add_argument(
        "-s",
        "--charset",
        choices=[c.value for c in Charset],
        default=Charset.BLOCKS.value,
        help="Character set",
    )
    parser.add_argument(
        "-i", "--invert", action="store_true", help="Invert brightness mapping"
    )
    parser.add_argument(
        "-b",
        "--bg-transparent",
        action="store_true",
        help="Treat white background connected to the edges as transparent",
    )
    parser.add_argument(
        "--bg-threshold", type=int, default=250, help="White threshold (0-255)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING)",
    )


def options_from_args(args: argparse.Namespace) -> RenderOptions:
    return RenderOptions.from_values(
        width=args.width,
        color_mode=args.color,
        charset=args.charset,
        invert=args.invert,
        background_transparent=args.bg_transparent,
        background_threshold=args.bg_threshold,
    )


def setup_logging(log_level: str) -> None:
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.basicConfig(
        stream=sys.stderr, level=numeric_level, format="%(levelname)s: %(message)s"
    )


def fail(message: str) -> int:
    print(f"{ESC}[31mError: {message}{RESET}", file=sys.stderr)
    return 1


def convert_image(args: argparse.Namespace) -> str:
    """Shared front half of `convert` and `init`: check the path, render the art."""
    resolved = os.path.abspath(args.image)
    if not os.path.exists(resolved):
        raise FileNotFoundError(f"Image not found: {resolved}")
    return image_to_ansi(resolved, options_from_args(args))


# -----------------------------
# CLI
# -----------------------------
def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="cli-logo convert", description="Convert an image to ASCII art"
    )
    add_render_arguments(parser, default_width=60)
    parser.add_argument("-t", "--title", default=None, help="Add a title below the logo")
    parser.add_argument("-v", "--ver", default=None, help="Version to display with title")
    parser.add_argument("--subtitle", default=None, help="Subtitle text")
    parser.add_argument("-o", "--output", default=None, help="Save output to file")
    parser.add_argument(
        "--code", action="store_true", help="Generate reusable Python code"
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        art = convert_image(args)
    except Exception as e:
        LOG.debug("Conversion failed", exc_info=True)
        return fail(str(e))

    if args.code:
        output = generate_code(
            art,
            title=args.title or "My CLI",
            version=args.ver or "1.0.0",
            subtitle=args.subtitle or "",
        )
    else:
        output = generate_banner(
            art,
            title=args.title or "",
            version=args.ver or "",
            subtitle=args.subtitle or "",
        )

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"{ESC}[32m✓ Saved to {args.output}{RESET}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
