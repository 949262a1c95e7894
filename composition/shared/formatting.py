#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/shared/formatting.py

from composition.core.models import ColorModel


def format_colorspace(fmt: str, *args) -> str:
    """
    Format color values into CSS-like string representations.

    Args:
        fmt (str): The colorspace ('hex', 'rgb', 'hsl', 'cmyk', 'hcl', 'oklch').
        *args: The channel values, in the units of the matching record.

    Returns:
        str: A formatted string ready for CLI output or display.
    """
    if fmt == 'hex':
        return str(args[0]).lower()
    elif fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h:.2f}deg, {s:.2f}%, {l:.2f}%)"
    elif fmt == 'cmyk':
        c, m, y, k = args
        return f"cmyk({c:.2f}%, {m:.2f}%, {y:.2f}%, {k:.2f}%)"
    elif fmt == 'hcl':
        return f"lch({args[0]:.4f} {args[1]:.4f} {args[2]:.2f}deg)"
    elif fmt == 'oklch':
        return f"oklch({args[0]:.4f} {args[1]:.4f} {args[2]:.2f}deg)"

    return ""


def format_color(model, value) -> str:
    """Format a record (or hex string) of the given model, wrapping hues that round up to 360."""
    model = ColorModel(model)
    if model is ColorModel.HEX:
        return format_colorspace('hex', value)
    return format_colorspace(model.value, *value.rounded())
