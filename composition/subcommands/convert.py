#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/subcommands/convert.py

import argparse
import sys

from composition.logic.convert import engine
from composition.shared.logger import ComposerArgumentParser
from composition.shared.parser import EXAMPLES
from composition.shared.sanitizer import INPUT_HANDLERS


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command.

    Returns:
        argparse.ArgumentParser: Configured parser.
    """
    parser = ComposerArgumentParser(
        prog="composition convert",
        description="composition convert: convert a color value from one format to another",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    formats_list = "hex rgb hsl cmyk hcl (lch) oklch"
    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-f",
        "--from-format",
        required=True,
        type=INPUT_HANDLERS["from_format"],
        help="the format to convert from\n" f"all formats: {formats_list}",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        required=True,
        type=INPUT_HANDLERS["to_format"],
        help="the format to convert to\n" f"all formats: {formats_list}",
    )

    examples = "\n".join(f'  -v "{ex}"' for ex in EXAMPLES.values()).replace("%", "%%")

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "-v",
        "--value",
        type=str,
        help=(
            "color value to convert must be in quotes\n"
            "examples:\n"
            f"{examples}"
        ),
    )
    input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="generate a random value for the --from-format",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="print the conversion verbosely",
    )
    parser.add_argument(
        "-p",
        "--plain",
        action="store_true",
        help="print without ANSI styling",
    )
    return parser


def main(argv=None) -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    engine.run(args, parser)


if __name__ == "__main__":
    main()
