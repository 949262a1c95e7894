#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/logic/convert/resolver.py

from composition.core import conversions as conv
from composition.core.models import RGB, ColorModel
from composition.shared.parser import parse_color


def resolve_convert_input(val: str, fmt: str) -> RGB:
    """Resolves a raw value written in `fmt` into RGB. Raises ColorError subclasses."""
    model = ColorModel.from_alias(fmt)
    return conv.to_rgb(parse_color(val, model), model)
