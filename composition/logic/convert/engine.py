#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/logic/convert/engine.py

import argparse
import random
import sys

from composition.core import config as c
from composition.core import conversions as conv
from composition.core.errors import ColorError
from composition.shared.logger import log_color_error
from .resolver import resolve_convert_input
from .renderer import render_convert_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for color conversion"""
    if args.seed is not None:
        random.seed(args.seed)

    try:
        if args.random:
            rgb = conv.hex_to_rgb(f"{random.randint(0, c.MAX_DEC):06x}")
        else:
            rgb = resolve_convert_input(args.value, args.from_format)

        plain = getattr(args, "plain", False)
        out = render_convert_info(rgb, args.to_format, plain)

        if args.verbose:
            src = render_convert_info(rgb, args.from_format, plain)
            arrow = "->" if plain else f"{c.MSG_BOLD_COLORS['info']}->{c.RESET}"
            print(f"{src} {arrow} {out}")
        else:
            print(out)
    except ColorError as e:
        log_color_error(e, "composition convert")
        sys.exit(2)
