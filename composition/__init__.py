#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/__init__.py

__version__ = "1.0.0"

from composition.core.errors import ColorError, InvalidFormat, OutOfRange
from composition.core.models import CMYK, HCL, HSL, OKLCH, RGB, ColorModel
from composition.core.conversions import (
    cmyk_to_hex,
    cmyk_to_rgb,
    convert,
    from_rgb,
    hcl_in_gamut,
    hcl_to_hex,
    hcl_to_rgb,
    hex_to_cmyk,
    hex_to_hcl,
    hex_to_hsl,
    hex_to_oklch,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    oklch_in_gamut,
    oklch_to_hex,
    oklch_to_rgb,
    rgb_to_cmyk,
    rgb_to_hcl,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_oklch,
    to_rgb,
)
from composition.shared.clamping import hue_difference, normalize_hue
from composition.shared.formatting import format_color
from composition.shared.parser import parse_any, parse_color
