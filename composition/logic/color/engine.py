#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/logic/color/engine.py

import argparse
import sys
from typing import Dict

from composition.core import conversions as conv
from composition.core.errors import ColorError
from composition.core.models import RGB, ColorModel
from composition.shared.logger import log_color_error
from .resolver import resolve_color_input
from .renderer import render_color_info


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the color command"""
    try:
        model, rgb, title = resolve_color_input(args)
    except ColorError as e:
        log_color_error(e)
        sys.exit(2)

    # input model first, the rest in cycle order
    order = [model] + model.others()
    tech_data = get_color_data(rgb)

    render_color_info(
        hex_code=tech_data[ColorModel.HEX],
        title=title,
        args=args,
        order=order,
        tech_data=tech_data,
    )


def get_color_data(rgb: RGB) -> Dict[ColorModel, object]:
    """Every model's encoding of one RGB color."""
    return {model: conv.from_rgb(rgb, model) for model in ColorModel}
