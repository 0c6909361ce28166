"""
Paint Bucket command line tool.

Fills the region around a seed point in one or more images:

    python paint_bucket.py photo.png --seed 10 20 --color "#ff0000" --tolerance 40 --antialias
"""

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from PB_Libs.constants import DEFAULT_OUTPUT_FORMAT, DEFAULT_TOLERANCE, MAX_PIXEL_DIFF, OUTPUT_FILE_PREFIX
from PB_Libs.FillLib.pixel import Pixel
from PB_Libs.ImageEditingLib.image_editing_ops import (
    image_by_replacing_color_at,
    load_image,
    save_images,
)
from PB_Libs.ImageEditingLib.image_models import ImageRecord

logger = logging.getLogger("paint_bucket")


def parse_pixel(text: str) -> Pixel:
    try:
        return Pixel.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Replace the connected region around a point with a color.")
    p.add_argument("inputs", nargs="+", type=Path, help="Input image file(s).")
    p.add_argument("--seed", nargs=2, type=int, required=True, metavar=("X", "Y"), help="Seed point, origin top-left.")
    p.add_argument("-c", "--color", type=parse_pixel, required=True, help="Fill color. '#RRGGBB[AA]', a color name, or 'R,G,B[,A]'.")
    p.add_argument("-t", "--tolerance", type=non_negative_int, default=DEFAULT_TOLERANCE, help=f"Color difference tolerance (0..{MAX_PIXEL_DIFF}). Default: {DEFAULT_TOLERANCE}.")
    p.add_argument("--antialias", action="store_true", help="Fade the fill toward the tolerance limit.")
    p.add_argument("-o", "--output", type=Path, help="Output file. Only valid with a single input.")
    p.add_argument("--output-dir", type=Path, help=f"Write '{OUTPUT_FILE_PREFIX}<name>.png' files here. Defaults to each input's directory.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.output is not None and len(args.inputs) != 1:
        parser.error("--output requires exactly one input")

    seed = (args.seed[0], args.seed[1])
    failures = 0

    for path in args.inputs:
        try:
            original = load_image(path)
            filled = image_by_replacing_color_at(
                original,
                seed,
                args.color,
                tolerance=args.tolerance,
                antialias=args.antialias,
            )
            if args.output is not None:
                filled.save(args.output, format=DEFAULT_OUTPUT_FORMAT)
                logger.info(f"Saved {args.output}")
            else:
                output_dir = args.output_dir or path.parent
                output_dir.mkdir(parents=True, exist_ok=True)
                save_images([ImageRecord(path=path, original=original, modified=filled)], output_dir)
        except (OSError, IndexError, ValueError) as exc:
            logger.error(f"{path}: {exc}")
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
