#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/logic/color/resolver.py

import argparse
import random
import sys
from typing import Tuple

from composition.core import config as c
from composition.core import conversions as conv
from composition.core.models import RGB, ColorModel
from composition.shared.logger import log
from composition.shared.parser import parse_any, parse_color


def resolve_color_input(args: argparse.Namespace) -> Tuple[ColorModel, RGB, str]:
    """Resolve raw CLI input into (input model, rgb, title). Raises ColorError subclasses."""

    if args.seed is not None:
        random.seed(args.seed)

    if args.random:
        rgb = conv.hex_to_rgb(f"{random.randint(0, c.MAX_DEC):06x}")
        return ColorModel.HEX, rgb, "random"

    if args.hex:
        return ColorModel.HEX, conv.hex_to_rgb(args.hex), "current"

    if args.value is not None:
        if args.from_format:
            model = ColorModel.from_alias(args.from_format)
            value = parse_color(args.value, model)
        else:
            model, value = parse_any(args.value)
        return model, conv.to_rgb(value, model), "current"

    log("error", "one of the arguments -H/--hex -V/--value -r/--random is required")
    log("info", "use 'composition --help' for more information")
    sys.exit(2)
