#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/logic/convert/renderer.py

from composition.core import config as c
from composition.core import conversions as conv
from composition.core.models import RGB, ColorModel
from composition.shared.formatting import format_color


def render_convert_info(rgb: RGB, fmt: str, plain: bool = False) -> str:
    """Composes RGB into a formatted output string in the target model."""
    model = ColorModel.from_alias(fmt)
    text = format_color(model, conv.from_rgb(rgb, model))
    if plain:
        return text
    return f"{c.BOLD_WHITE}{text}{c.RESET}"
