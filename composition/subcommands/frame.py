#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/subcommands/frame.py

import argparse
import sys

from composition.core import config as c
from composition.logic.frame import engine
from composition.shared.logger import ComposerArgumentParser
from composition.shared.sanitizer import INPUT_HANDLERS


def get_frame_parser() -> argparse.ArgumentParser:
    """Create argument parser for frame command."""
    parser = ComposerArgumentParser(
        prog="composition frame",
        description="composition frame: crop rectangle, composition guides and export name for a camera frame",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-W",
        "--width",
        required=True,
        type=INPUT_HANDLERS["dimension"],
        help="frame width in pixels",
    )
    parser.add_argument(
        "-H",
        "--height",
        required=True,
        type=INPUT_HANDLERS["dimension"],
        help="frame height in pixels",
    )
    parser.add_argument(
        "-R",
        "--ratio",
        type=INPUT_HANDLERS["ratio"],
        default=c.RATIO_OPTIONS[0][0],
        help=f"target aspect ratio: {' '.join(label for label, _ in c.RATIO_OPTIONS)}",
    )
    parser.add_argument(
        "-o",
        "--overlay",
        type=INPUT_HANDLERS["overlay"],
        default="none",
        help=f"composition guides: {' '.join(c.OVERLAY_TITLES)}",
    )
    parser.add_argument(
        "-c",
        "--camera",
        type=INPUT_HANDLERS["facing"],
        default="user",
        help="camera facing: user (mirrored) or environment",
    )
    parser.add_argument(
        "--cycle",
        action="store_true",
        help="also show the next ratio, grid and camera",
    )
    parser.add_argument(
        "-p",
        "--plain",
        action="store_true",
        help="print without ANSI styling",
    )
    return parser


def main(argv=None) -> None:
    """Main entry point for frame command."""
    parser = get_frame_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    engine.run(args, parser)


if __name__ == "__main__":
    main()
