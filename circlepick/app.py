"""Command line front end: place points, optionally randomise, save a PGM."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Optional, Sequence

from circlepick.editor import CircleEditor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="circlepick",
        description="Place three points and draw the circle through them.",
    )
    parser.add_argument("--width", type=int, default=1920, help="canvas width")
    parser.add_argument("--height", type=int, default=1080, help="canvas height")
    parser.add_argument("--offset", type=int, default=50, help="canvas offset from window top")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--point",
        type=int,
        nargs=2,
        action="append",
        default=[],
        metavar=("X", "Y"),
        help="click at window position X Y (repeatable)",
    )
    parser.add_argument("--thickness", type=float, default=5.0, help="point radius")
    parser.add_argument("--color", type=int, default=100, help="point gray level")
    parser.add_argument("--circle-thickness", type=float, default=3.0, help="ring thickness")
    parser.add_argument("--random", type=int, default=0, metavar="N", help="randomise N times")
    parser.add_argument("--delay", type=float, default=0.5, help="seconds between random steps")
    parser.add_argument("--output", type=Path, default=None, help="write the canvas as PGM")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    rng = random.Random(args.seed)
    editor = CircleEditor(args.width, args.height, args.offset, rng)
    editor.reset()
    editor.thickness = args.thickness
    editor.color = args.color
    editor.circle_thickness = args.circle_thickness

    for x, y in args.point:
        editor.button_down(x, y)
        editor.button_up(x, y)

    if args.random:
        if not editor.run_random(args.random, args.delay):
            print("randomising needs exactly three points", file=sys.stderr)
            return 1

    for p in editor.points:
        print(f"point=({p.x}, {p.y})")
    circle = editor.circle
    if circle is not None and circle.valid:
        print(f"center=({circle.cx:.2f}, {circle.cy:.2f}) radius={circle.radius:.2f}")
    elif len(editor.points) == 3:
        print("no circle: points are collinear")

    if args.output is not None:
        args.output.write_bytes(editor.image.to_pgm())
    return 0