#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/shared/parser.py

import math
import re
from typing import List, Tuple

from composition.core.errors import InvalidFormat, OutOfRange
from composition.core.models import CMYK, HCL, HSL, OKLCH, RGB, ColorModel
from .sanitizer import HEX_PATTERN, normalize_hex

# Optional sign, integer or decimal, optional exponent, optional percent sign
NUMBER_PATTERN = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?%?"

# Leading 'name(' of a CSS-like functional notation
FUNCTION_PREFIX = re.compile(r"^\s*([a-zA-Z]+)\s*\(")


def _normalize_value_string(s: str) -> str:
    """
    Normalizes the input color string to make numerical extraction easier.
    It strips quotes, removes formatting characters (like degrees),
    and unwraps CSS-like function syntaxes (e.g., 'rgb(255, 0, 0)' -> '255 0 0').
    """
    if not s:
        return ""
    s = s.strip()

    # Remove matching surrounding quotes or backticks
    while len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'`":
        s = s[1:-1].strip()

    # Standardize angle symbols and typographic dashes
    s = s.replace('°', ' ')
    s = s.replace('–', '-')
    s = re.sub(r'deg', ' ', s, flags=re.IGNORECASE)

    # Remove functional wrappers like "rgb(" or "oklch(" at the start, and ")" at the end
    s = re.sub(r'^[a-zA-Z]+\s*\(', '', s)
    s = s.rstrip(')')

    # Replace common delimiters (commas, slashes) with spaces
    s = s.replace(',', ' ')
    s = s.replace('/', ' ')

    # Collapse multiple consecutive spaces into a single space
    s = re.sub(r'\s+', ' ', s)
    return s.strip()


def _tokenize(s: str, count: int, model_name: str) -> List[str]:
    """
    Splits a color string into exactly `count` numeric tokens.
    Every token must be a number (with an optional '%'); stray words
    or a wrong count raise InvalidFormat.
    """
    if not isinstance(s, str):
        raise InvalidFormat(f"invalid {model_name} value: {s!r}", value=s)

    body = _normalize_value_string(s)
    tokens = body.split(" ") if body else []
    if len(tokens) != count or not all(re.fullmatch(NUMBER_PATTERN, t) for t in tokens):
        raise InvalidFormat(
            f"invalid {model_name} string: '{s}'",
            value=s,
            hint=f"expected {count} numbers, e.g. {EXAMPLES[model_name]}",
        )
    return tokens


def _to_float(token: str) -> float:
    v = float(token.rstrip('%'))
    if not math.isfinite(v):
        raise InvalidFormat(f"non-finite numeric value '{token}'", value=token)
    return v


def parse_rgb_string(s: str) -> RGB:
    """Parses 'rgb(255, 128, 0)' or '255 128 0'. Channels must be whole numbers in 0-255."""
    vals = [_to_float(t) for t in _tokenize(s, 3, "rgb")]
    for name, v in zip(("red", "green", "blue"), vals):
        if v != int(v):
            raise InvalidFormat(f"{name} channel must be an integer, got {v:g}", value=s)
        if not 0 <= v <= 255:
            raise OutOfRange(f"{name} channel must be within [0, 255], got {v:g}", value=s)
    return RGB(*(int(v) for v in vals))


def parse_hsl_string(s: str) -> HSL:
    """Parses 'hsl(210deg, 50%, 40%)'. Saturation and lightness are percentages."""
    h, sat, light = (_to_float(t) for t in _tokenize(s, 3, "hsl"))
    return HSL(h, sat, light)


def parse_cmyk_string(s: str) -> CMYK:
    """Parses 'cmyk(0%, 100%, 100%, 0%)'. All channels are percentages."""
    return CMYK(*(_to_float(t) for t in _tokenize(s, 4, "cmyk")))


def parse_hcl_string(s: str) -> HCL:
    """Parses 'lch(53.24 104.55 40deg)' as lightness, chroma, hue."""
    return HCL(*(_to_float(t) for t in _tokenize(s, 3, "hcl")))


def parse_oklch_string(s: str) -> OKLCH:
    """
    Parses 'oklch(0.628 0.2577 29.23deg)'. A lightness written as a
    percentage ('62.8%') is scaled to 0-1, as in CSS.
    """
    tokens = _tokenize(s, 3, "oklch")
    light = _to_float(tokens[0])
    if tokens[0].endswith('%'):
        light /= 100.0
    return OKLCH(light, _to_float(tokens[1]), _to_float(tokens[2]))


def parse_hex_string(s: str) -> str:
    return "#" + normalize_hex(s)


def parse_color(s: str, model) -> Tuple:
    """Parse text written in the given model into its record (or '#rrggbb' for hex)."""
    model = ColorModel(model)
    return STRING_PARSERS[model.value](s)


def detect_model(s: str) -> ColorModel:
    """
    Infers the model of a color string from its function prefix
    ('hsl(', 'lch(', ...) or from a hex shape. Bare number lists are RGB.
    """
    if not isinstance(s, str) or not s.strip():
        raise InvalidFormat("empty color value", value=s)

    m = FUNCTION_PREFIX.match(s)
    if m:
        return ColorModel.from_alias(m.group(1))

    bare = s.strip().lower()
    if bare.startswith('#') or HEX_PATTERN.fullmatch(bare):
        return ColorModel.HEX
    return ColorModel.RGB


def parse_any(s: str) -> Tuple[ColorModel, Tuple]:
    """Parse a color string of any model, returning (model, record)."""
    model = detect_model(s)
    return model, parse_color(s, model)


# Examples shown in error hints and help texts
EXAMPLES = {
    'hex': '#ff8800',
    'rgb': 'rgb(255, 136, 0)',
    'hsl': 'hsl(32deg, 100%, 50%)',
    'cmyk': 'cmyk(0%, 47%, 100%, 0%)',
    'hcl': 'lch(68.65 86.35 57.7deg)',
    'oklch': 'oklch(0.7450 0.1824 57.9deg)',
}

# Central dictionary to map format strings to their respective parsing functions
STRING_PARSERS = {
    'hex': parse_hex_string,
    'rgb': parse_rgb_string,
    'hsl': parse_hsl_string,
    'cmyk': parse_cmyk_string,
    'hcl': parse_hcl_string,
    'oklch': parse_oklch_string,
}
