#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/core/models.py

from enum import Enum
from typing import NamedTuple

from .config import DISPLAY_PLACES, DISPLAY_PLACES_FINE, FORMAT_ALIASES
from .errors import InvalidFormat
from composition.shared.clamping import normalize_hue


def _round_hue(h: float, places: int) -> float:
    return normalize_hue(round(h, places))


class RGB(NamedTuple):
    """8-bit sRGB channels, 0-255."""
    r: int
    g: int
    b: int

    def rounded(self, places: int = DISPLAY_PLACES) -> "RGB":
        return self


class HSL(NamedTuple):
    """Hue in degrees, saturation and lightness in percent."""
    h: float
    s: float
    l: float

    def rounded(self, places: int = DISPLAY_PLACES) -> "HSL":
        return HSL(_round_hue(self.h, places), round(self.s, places), round(self.l, places))


class CMYK(NamedTuple):
    """Naive subtractive channels in percent."""
    c: float
    m: float
    y: float
    k: float

    def rounded(self, places: int = DISPLAY_PLACES) -> "CMYK":
        return CMYK(*(round(v, places) for v in self))


class HCL(NamedTuple):
    """CIELCh: lightness 0-100, chroma >= 0, hue in degrees."""
    l: float
    c: float
    h: float

    def rounded(self, places: int = DISPLAY_PLACES_FINE, hue_places: int = DISPLAY_PLACES) -> "HCL":
        return HCL(round(self.l, places), round(self.c, places), _round_hue(self.h, hue_places))


class OKLCH(NamedTuple):
    """OKLab in cylindrical form: lightness 0-1, chroma >= 0, hue in degrees."""
    l: float
    c: float
    h: float

    def rounded(self, places: int = DISPLAY_PLACES_FINE, hue_places: int = DISPLAY_PLACES) -> "OKLCH":
        return OKLCH(round(self.l, places), round(self.c, places), _round_hue(self.h, hue_places))


class ColorModel(Enum):
    """The six supported encodings, declared in cycle order."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    CMYK = "cmyk"
    HCL = "hcl"
    OKLCH = "oklch"

    def next(self) -> "ColorModel":
        members = list(ColorModel)
        return members[(members.index(self) + 1) % len(members)]

    def others(self) -> list:
        """The remaining models, starting after this one and wrapping around."""
        out = []
        model = self.next()
        while model is not self:
            out.append(model)
            model = model.next()
        return out

    @classmethod
    def from_alias(cls, name: str) -> "ColorModel":
        key = str(name).strip().lower() if name is not None else ""
        if key not in FORMAT_ALIASES:
            raise InvalidFormat(
                f"unknown color model '{name}'",
                value=name,
                hint=f"choose one of: {' '.join(m.value for m in cls)}",
            )
        return cls(FORMAT_ALIASES[key])
