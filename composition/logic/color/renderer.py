#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/logic/color/renderer.py

import argparse
from typing import Dict, List

from composition.core import config as c
from composition.core.models import ColorModel
from composition.shared.formatting import format_color
from composition.shared.preview import print_color_block


def render_color_info(
    hex_code: str,
    title: str,
    args: argparse.Namespace,
    order: List[ColorModel],
    tech_data: Dict[ColorModel, object],
) -> None:
    """Strictly prints color information. Data must be pre-calculated by the engine."""
    plain = getattr(args, "plain", False)

    if not getattr(args, "hide_bars", False) and not plain:
        print()
        print_color_block(hex_code, f"{c.BOLD_WHITE}{title}{c.RESET}")
        print()

    for model in order:
        text = format_color(model, tech_data[model])
        if plain:
            print(f"{model.value:<6}: {text}")
        else:
            label = f"{c.MSG_BOLD_COLORS['info']}{model.value}{c.RESET}"
            print(f"{label}{' ' * (18 - len(model.value))}{c.BOLD_WHITE}: {text}{c.RESET}")
