#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/shared/clamping.py

import math

from composition.core import config as c


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(c.RGB_MAX, v))


def round_half_away(v: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


def to_byte(v: float) -> int:
    """Clamp a channel to [0, 255] and round it to an 8-bit integer."""
    return round_half_away(_clamp255(v))


def normalize_hue(h: float) -> float:
    """Wrap any finite angle into [0, 360)."""
    h = h % c.HUE_MAX
    # -1e-15 % 360 evaluates to 360.0
    if h >= c.HUE_MAX:
        return 0.0
    return h


def hue_difference(h1: float, h2: float) -> float:
    """Signed shortest-arc difference h2 - h1, in (-180, 180]."""
    d = normalize_hue(h2 - h1)
    if d > c.HUE_HALF:
        d -= c.HUE_MAX
    return d
