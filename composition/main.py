#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/main.py

import argparse
import sys

from composition import __version__
from composition.logic.color import engine
from composition.subcommands.command_registry import SUBCOMMANDS
from composition.shared.logger import log, ComposerArgumentParser
from composition.shared.sanitizer import INPUT_HANDLERS
from composition.shared.truecolor import ensure_truecolor


def get_color_parser() -> argparse.ArgumentParser:
    """Create argument parser for the main color (inspector) command."""
    parser = ComposerArgumentParser(
        prog="composition",
        description="composition: color code converter and camera framing helper",
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
        "-v",
        "--version",
        action="version",
        version=f"composition {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )

    # Color Input Group
    color_input_group = parser.add_mutually_exclusive_group()
    color_input_group.add_argument(
        "-H",
        "--hex",
        dest="hex",
        type=INPUT_HANDLERS["hex"],
        help="3 or 6 digit hex color code, '#' optional",
    )
    color_input_group.add_argument(
        "-V",
        "--value",
        dest="value",
        type=str,
        help="color in any model, e.g. \"hsl(0, 100%%, 50%%)\" or \"oklch(0.63 0.26 29)\"",
    )
    color_input_group.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="generate a random hex color",
    )
    parser.add_argument(
        "-f",
        "--from-format",
        type=INPUT_HANDLERS["from_format"],
        default=None,
        help="model of --value when it has no prefix: hex rgb hsl cmyk hcl oklch",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random",
    )
    parser.add_argument(
        "-hb",
        "--hide-bars",
        action="store_true",
        help="hide the color swatch",
    )
    parser.add_argument(
        "-p",
        "--plain",
        action="store_true",
        help="print without ANSI styling",
    )

    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_color_command(args: argparse.Namespace) -> None:
    """Entry point for the core color command."""
    parser = get_color_parser()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    # Routing Validation (if a command was passed in the wrong place)
    if args.command:
        if args.command.lower() in SUBCOMMANDS:
            log("error", f"the '{args.command}' command must be the first argument")
        else:
            log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    # Execution
    engine.run(args, parser)


def main(argv=None) -> None:
    """Main entry point for composition CLI"""
    argv = list(sys.argv[1:] if argv is None else argv)

    # Subcommand Routing (Global behavior)
    if argv:
        cmd = argv[0].lower()
        if cmd in SUBCOMMANDS:
            ensure_truecolor()
            SUBCOMMANDS[cmd].main(argv[1:])
            sys.exit(0)

    parser = get_color_parser()
    args = parser.parse_args(argv)
    ensure_truecolor()
    handle_color_command(args)


if __name__ == "__main__":
    main()
