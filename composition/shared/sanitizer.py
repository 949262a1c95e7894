#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/shared/sanitizer.py

import argparse
import math
import re

from composition.core import config as c
from composition.core.errors import ColorError, InvalidFormat

# 3 or 6 hex digits, nothing else
HEX_PATTERN = re.compile(r"[0-9a-f]{3}|[0-9a-f]{6}")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalizes a hex color into 6 lowercase digits without the hash.
    Accepts an optional leading '#', the 3-digit shorthand ('F0A' -> 'ff00aa')
    and surrounding whitespace. Anything else raises InvalidFormat.
    """
    if not isinstance(value, str):
        raise InvalidFormat(f"hex color must be a string, got {type(value).__name__}", value=value)

    s = value.strip().lower()
    if s.startswith("#"):
        s = s[1:]

    if not HEX_PATTERN.fullmatch(s):
        raise InvalidFormat(
            f"invalid hex value: '{_sanitize_for_log(value)}'",
            value=value,
            hint="expected 3 or 6 hex digits, e.g. #f80 or #ff8800",
        )

    if len(s) == 3:
        # e.g., 'abc' becomes 'aabbcc'
        return "".join(ch * 2 for ch in s)
    return s


def _extract_signed_float(value: str) -> float:
    """
    Reads a single finite number from a CLI token, allowing a trailing
    unit such as '%', 'px' or 'deg'.
    """
    if value is None:
        return None

    m = re.fullmatch(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(?:%|px|deg|°)?\s*", str(value))
    if not m:
        return None

    val = float(m.group(1))
    if not math.isfinite(val):
        return None
    return val


def _extract_alpha_only(value: str) -> str:
    """
    Extracts only alphabetical characters from a string, lowercasing them.
    Useful for cleaning up format names.
    """
    if value is None:
        return ""
    s = str(value).replace(" ", "").lower()
    return "".join(re.findall(r"[a-z]", s))


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    try:
        return normalize_hex(v)
    except ColorError as e:
        raise argparse.ArgumentTypeError(str(e))


def handle_string_clean(v: str) -> str:
    """Validator for pure alphabetical string options (e.g., format names)."""
    cleaned = _extract_alpha_only(v)
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_color_model(v: str) -> str:
    """Validator for color model names; resolves aliases such as 'lch'."""
    cleaned = _extract_alpha_only(v)
    if cleaned not in c.FORMAT_ALIASES:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(
            f"invalid color model: '{raw}' (choose from {', '.join(sorted(set(c.FORMAT_ALIASES.values())))})"
        )
    return c.FORMAT_ALIASES[cleaned]


def handle_ratio_label(v: str) -> str:
    """Validator for aspect ratio labels like '16:9' (also accepts '16x9' and '16/9')."""
    s = re.sub(r"\s+", "", str(v or "")).replace("x", ":").replace("/", ":")
    labels = [label for label, _ in c.RATIO_OPTIONS]
    if s not in labels:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid aspect ratio: '{raw}' (choose from {', '.join(labels)})")
    return s


def handle_positive_float(v: str) -> float:
    """Validator for strictly positive dimensions."""
    val = _extract_signed_float(v)
    if val is None or val <= 0:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid dimension: '{raw}' (must be a positive number)")
    return val


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        try:
            val = int(str(v).strip())
        except ValueError:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

# Maps custom CLI argument types to their respective parsing functions.
INPUT_HANDLERS = {
    "hex": handle_hex,
    "from_format": handle_color_model,
    "to_format": handle_color_model,
    "overlay": handle_string_clean,
    "facing": handle_string_clean,
    "ratio": handle_ratio_label,
    "dimension": handle_positive_float,
    "seed": handle_int_range(0, 999_999_999_999_999_999),
}
