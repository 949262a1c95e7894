#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/core/conversions.py

import functools
import math
import numbers
from typing import Tuple, Union

from . import config as c
from .errors import InvalidFormat, OutOfRange
from .models import CMYK, HCL, HSL, OKLCH, RGB, ColorModel
from composition.shared.clamping import _clamp01, _clamp255, normalize_hue, to_byte
from composition.shared.sanitizer import normalize_hex

Vec3 = Tuple[float, float, float]
ColorValue = Union[str, RGB, HSL, CMYK, HCL, OKLCH]


# ==========================================
# Shared numeric helpers
# ==========================================


def _mat3_mul(m, v: Vec3) -> Vec3:
    """Multiply a 3x3 row-major matrix by a column vector."""
    return (
        m[0][0] * v[0] + m[0][1] * v[1] + m[0][2] * v[2],
        m[1][0] * v[0] + m[1][1] * v[1] + m[1][2] * v[2],
        m[2][0] * v[0] + m[2][1] * v[1] + m[2][2] * v[2],
    )


def _signed_cbrt(v: float) -> float:
    return abs(v) ** c.OKLAB_CUBE_ROOT_EXP if v >= 0 else -(abs(v) ** c.OKLAB_CUBE_ROOT_EXP)


def _is_achromatic(r: float, g: float, b: float) -> bool:
    return r == g == b


def _require_finite(name: str, v: float) -> None:
    if not isinstance(v, numbers.Real) or not math.isfinite(v):
        raise OutOfRange(f"{name} must be a finite number, got {v!r}", value=v)


def _require_between(name: str, v: float, lo: float, hi: float) -> None:
    _require_finite(name, v)
    if not lo <= v <= hi:
        raise OutOfRange(f"{name} must be within [{lo:g}, {hi:g}], got {v:g}", value=v)


def _require_chroma(v: float) -> None:
    _require_finite("chroma", v)
    if v < 0:
        raise OutOfRange(f"chroma must not be negative, got {v:g}", value=v)


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to linear component."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def _linear_to_rgb_float(r_lin: float, g_lin: float, b_lin: float) -> Vec3:
    return (
        _linear_to_srgb(r_lin) * c.RGB_MAX,
        _linear_to_srgb(g_lin) * c.RGB_MAX,
        _linear_to_srgb(b_lin) * c.RGB_MAX,
    )


def _to_rgb_record(r: float, g: float, b: float) -> RGB:
    return RGB(to_byte(r), to_byte(g), to_byte(b))


def _linear_in_gamut(lin: Vec3) -> bool:
    return all(-c.GAMUT_EPS <= v <= c.UNIT + c.GAMUT_EPS for v in lin)


# ==========================================
# HEX
# ==========================================


def hex_to_rgb(hex_code: str) -> RGB:
    """Convert hex string ('#f80', 'FF8800', ...) to RGB."""
    h = normalize_hex(hex_code)
    return RGB(int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a lowercase '#rrggbb' string, clamping first."""
    return f"#{to_byte(r):02x}{to_byte(g):02x}{to_byte(b):02x}"


# ==========================================
# HSL
# ==========================================


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert RGB to HSL (hue in degrees, saturation and lightness in percent)."""
    r_f, g_f, b_f = _clamp255(r) / c.RGB_MAX, _clamp255(g) / c.RGB_MAX, _clamp255(b) / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
        s = 0.0 if abs(denom) < c.EPS else delta / denom
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + c.DIV_2)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + c.HSL_BLUE_OFFSET)
        h = normalize_hue(h)
    return HSL(h, min(s, c.UNIT) * c.PERCENT, L * c.PERCENT)


def hsl_to_rgb_float(h: float, s: float, l: float) -> Vec3:
    """Convert HSL to unrounded RGB floats in [0, 255]."""
    _require_finite("hue", h)
    _require_between("saturation", s, 0.0, c.PERCENT)
    _require_between("lightness", l, 0.0, c.PERCENT)

    h = normalize_hue(h)
    s = s / c.PERCENT
    L = l / c.PERCENT
    if s == 0:
        r = g = b = L
    else:
        chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
        x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
        m = L - chroma / c.DIV_2
        if 0 <= h < 60:
            r_p, g_p, b_p = chroma, x, 0
        elif 60 <= h < 120:
            r_p, g_p, b_p = x, chroma, 0
        elif 120 <= h < 180:
            r_p, g_p, b_p = 0, chroma, x
        elif 180 <= h < 240:
            r_p, g_p, b_p = 0, x, chroma
        elif 240 <= h < 300:
            r_p, g_p, b_p = x, 0, chroma
        else:
            r_p, g_p, b_p = chroma, 0, x
        r, g, b = (r_p + m), (g_p + m), (b_p + m)
    return _clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL to RGB. Raises OutOfRange for s/l outside [0, 100] or a non-finite hue."""
    return _to_rgb_record(*hsl_to_rgb_float(h, s, l))


# ==========================================
# CMYK
# ==========================================


def rgb_to_cmyk(r: float, g: float, b: float) -> CMYK:
    """Convert RGB to naive subtractive CMYK, in percent."""
    r_norm = _clamp255(r) / c.RGB_MAX
    g_norm = _clamp255(g) / c.RGB_MAX
    b_norm = _clamp255(b) / c.RGB_MAX
    k = c.UNIT - max(r_norm, g_norm, b_norm)
    if k >= c.UNIT:
        # pure black, avoids the zero denominator below
        return CMYK(0.0, 0.0, 0.0, c.PERCENT)
    denom = c.UNIT - k
    cy = (c.UNIT - r_norm - k) / denom
    m = (c.UNIT - g_norm - k) / denom
    y = (c.UNIT - b_norm - k) / denom
    return CMYK(cy * c.PERCENT, m * c.PERCENT, y * c.PERCENT, k * c.PERCENT)


def cmyk_to_rgb_float(cy: float, m: float, y: float, k: float) -> Vec3:
    """Convert CMYK percentages to unrounded RGB floats."""
    for name, v in (("cyan", cy), ("magenta", m), ("yellow", y), ("key", k)):
        _require_between(name, v, 0.0, c.PERCENT)
    k_inv = c.UNIT - k / c.PERCENT
    r = c.RGB_MAX * (c.UNIT - cy / c.PERCENT) * k_inv
    g = c.RGB_MAX * (c.UNIT - m / c.PERCENT) * k_inv
    b = c.RGB_MAX * (c.UNIT - y / c.PERCENT) * k_inv
    return r, g, b


def cmyk_to_rgb(cy: float, m: float, y: float, k: float) -> RGB:
    """Convert CMYK to RGB. Raises OutOfRange for any channel outside [0, 100]."""
    return _to_rgb_record(*cmyk_to_rgb_float(cy, m, y, k))


# ==========================================
# XYZ
# ==========================================


def rgb_to_xyz(r: float, g: float, b: float) -> Vec3:
    """Convert RGB to CIE XYZ (D65, Y = 1 for white)."""
    lin = (_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))
    return _mat3_mul(c.M_SRGB_XYZ, lin)


def xyz_to_rgb_float(x: float, y: float, z: float) -> Vec3:
    """Convert CIE XYZ to RGB floats. Negative linear light is floored at zero, the top is not clamped."""
    return _linear_to_rgb_float(*_mat3_mul(c.M_XYZ_SRGB, (x, y, z)))


def xyz_to_rgb(x: float, y: float, z: float) -> RGB:
    """Convert CIE XYZ to RGB, clamping out-of-gamut channels."""
    return _to_rgb_record(*xyz_to_rgb_float(x, y, z))


# ==========================================
# CIELAB / HCL
# ==========================================


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    if t > c.LAB_E:
        return t ** (c.UNIT / 3.0)
    return (c.LAB_KAPPA * t + c.LAB_L_SUB) / c.LAB_L_MULT


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    if t > c.LAB_DELTA:
        return t ** 3
    return (c.LAB_L_MULT * t - c.LAB_L_SUB) / c.LAB_KAPPA


def xyz_to_lab(x: float, y: float, z: float) -> Vec3:
    """Convert XYZ to CIE LAB."""
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return L, a, b


def lab_to_xyz(L: float, a: float, b: float) -> Vec3:
    """Convert LAB to CIE XYZ."""
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    return _xyz_f_inv(x_r) * c.D65_X, _xyz_f_inv(y_r) * c.D65_Y, _xyz_f_inv(z_r) * c.D65_Z


def lab_to_lch(L: float, a: float, b: float) -> Vec3:
    """Convert LAB to LCH."""
    chroma = math.hypot(a, b)
    hue = normalize_hue(math.degrees(math.atan2(b, a)))
    return L, chroma, hue


def lch_to_lab(L: float, chroma: float, hue: float) -> Vec3:
    """Convert LCH to LAB."""
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return L, a, b


def rgb_to_hcl(r: float, g: float, b: float) -> HCL:
    """Convert RGB to CIELCh. Grays report chroma 0 and hue 0."""
    r, g, b = _clamp255(r), _clamp255(g), _clamp255(b)
    L, a_val, b_val = xyz_to_lab(*rgb_to_xyz(r, g, b))
    # matrix residue puts white a hair above 100
    L = min(max(L, 0.0), c.HCL_L_MAX)
    if _is_achromatic(r, g, b):
        return HCL(L, 0.0, 0.0)
    return HCL(*lab_to_lch(L, a_val, b_val))


def _require_lch(l: float, chroma: float, hue: float, l_max: float) -> None:
    _require_between("lightness", l, 0.0, l_max)
    _require_chroma(chroma)
    _require_finite("hue", hue)


def hcl_to_rgb_float(l: float, chroma: float, hue: float) -> Vec3:
    """Convert CIELCh to RGB floats. Negative channels are floored at zero, the top is not clamped."""
    _require_lch(l, chroma, hue, c.HCL_L_MAX)
    return xyz_to_rgb_float(*lab_to_xyz(*lch_to_lab(l, chroma, normalize_hue(hue))))


def hcl_to_rgb(l: float, chroma: float, hue: float) -> RGB:
    """Convert CIELCh to RGB; out-of-gamut channels are clamped to [0, 255]."""
    return _to_rgb_record(*hcl_to_rgb_float(l, chroma, hue))


def hcl_in_gamut(l: float, chroma: float, hue: float) -> bool:
    """True if the color is representable in sRGB without clamping."""
    _require_lch(l, chroma, hue, c.HCL_L_MAX)
    return _linear_in_gamut(_mat3_mul(c.M_XYZ_SRGB, lab_to_xyz(*lch_to_lab(l, chroma, hue))))


# ==========================================
# OKLab / OKLCH
# ==========================================


def xyz_to_oklab(x: float, y: float, z: float) -> Vec3:
    """Convert XYZ to OKLab."""
    lms = _mat3_mul(c.M1_OKLAB, (x, y, z))
    lms_ = (_signed_cbrt(lms[0]), _signed_cbrt(lms[1]), _signed_cbrt(lms[2]))
    return _mat3_mul(c.M2_OKLAB, lms_)


def oklab_to_xyz(L: float, a: float, b: float) -> Vec3:
    """Convert OKLab to XYZ."""
    l_, m_, s_ = _mat3_mul(c.M2_OKLAB_INV, (L, a, b))
    return _mat3_mul(c.M1_OKLAB_INV, (l_ ** 3, m_ ** 3, s_ ** 3))


def oklab_to_oklch(L: float, a: float, b: float) -> Vec3:
    """Convert OKLab to OKLCH."""
    chroma = math.hypot(a, b)
    hue = normalize_hue(math.degrees(math.atan2(b, a)))
    return L, chroma, hue


def oklch_to_oklab(L: float, chroma: float, hue: float) -> Vec3:
    """Convert OKLCH to OKLab."""
    a = chroma * math.cos(math.radians(hue))
    b = chroma * math.sin(math.radians(hue))
    return L, a, b


def rgb_to_oklch(r: float, g: float, b: float) -> OKLCH:
    """Convert RGB to OKLCH. Grays report chroma 0 and hue 0."""
    r, g, b = _clamp255(r), _clamp255(g), _clamp255(b)
    L, a_val, b_val = xyz_to_oklab(*rgb_to_xyz(r, g, b))
    L = min(max(L, 0.0), c.OKLCH_L_MAX)
    if _is_achromatic(r, g, b):
        return OKLCH(L, 0.0, 0.0)
    return OKLCH(*oklab_to_oklch(L, a_val, b_val))


def oklch_to_rgb_float(l: float, chroma: float, hue: float) -> Vec3:
    """Convert OKLCH to RGB floats. Negative channels are floored at zero, the top is not clamped."""
    _require_lch(l, chroma, hue, c.OKLCH_L_MAX)
    return xyz_to_rgb_float(*oklab_to_xyz(*oklch_to_oklab(l, chroma, normalize_hue(hue))))


def oklch_to_rgb(l: float, chroma: float, hue: float) -> RGB:
    """Convert OKLCH to RGB; out-of-gamut channels are clamped to [0, 255]."""
    return _to_rgb_record(*oklch_to_rgb_float(l, chroma, hue))


def oklch_in_gamut(l: float, chroma: float, hue: float) -> bool:
    """True if the color is representable in sRGB without clamping."""
    _require_lch(l, chroma, hue, c.OKLCH_L_MAX)
    return _linear_in_gamut(_mat3_mul(c.M_XYZ_SRGB, oklab_to_xyz(*oklch_to_oklab(l, chroma, hue))))


# ==========================================
# Composition through RGB
# ==========================================


def to_rgb(value: ColorValue, model: ColorModel) -> RGB:
    """Decode a value of the given model into RGB."""
    model = ColorModel(model)
    if model is ColorModel.HEX:
        return hex_to_rgb(value)
    if model is ColorModel.RGB:
        if len(value) != 3:
            raise InvalidFormat(f"rgb needs 3 channels, got {len(value)}", value=value)
        for name, v in zip(("red", "green", "blue"), value):
            _require_between(name, v, 0.0, c.RGB_MAX)
        return _to_rgb_record(*value)

    decoders = {
        ColorModel.HSL: hsl_to_rgb,
        ColorModel.CMYK: cmyk_to_rgb,
        ColorModel.HCL: hcl_to_rgb,
        ColorModel.OKLCH: oklch_to_rgb,
    }
    return decoders[model](*value)


def from_rgb(rgb: RGB, model: ColorModel) -> ColorValue:
    """Encode an RGB value into the given model."""
    model = ColorModel(model)
    encoders = {
        ColorModel.HEX: rgb_to_hex,
        ColorModel.RGB: _to_rgb_record,
        ColorModel.HSL: rgb_to_hsl,
        ColorModel.CMYK: rgb_to_cmyk,
        ColorModel.HCL: rgb_to_hcl,
        ColorModel.OKLCH: rgb_to_oklch,
    }
    return encoders[model](*rgb)


def convert(value: ColorValue, source: ColorModel, target: ColorModel) -> ColorValue:
    """Convert between any two models by way of RGB."""
    return from_rgb(to_rgb(value, source), target)


# ==========================================
# Direct Conversion Wrappers
# ==========================================


def hex_to_hsl(hex_code: str) -> HSL:
    """Direct Hex to HSL."""
    return rgb_to_hsl(*hex_to_rgb(hex_code))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Direct HSL to Hex."""
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def hex_to_cmyk(hex_code: str) -> CMYK:
    """Direct Hex to CMYK."""
    return rgb_to_cmyk(*hex_to_rgb(hex_code))


def cmyk_to_hex(cy: float, m: float, y: float, k: float) -> str:
    """Direct CMYK to Hex."""
    return rgb_to_hex(*cmyk_to_rgb(cy, m, y, k))


def hex_to_hcl(hex_code: str) -> HCL:
    """Direct Hex to HCL."""
    return rgb_to_hcl(*hex_to_rgb(hex_code))


def hcl_to_hex(l: float, chroma: float, hue: float) -> str:
    """Direct HCL to Hex."""
    return rgb_to_hex(*hcl_to_rgb(l, chroma, hue))


def hex_to_oklch(hex_code: str) -> OKLCH:
    """Direct Hex to OKLCH."""
    return rgb_to_oklch(*hex_to_rgb(hex_code))


def oklch_to_hex(l: float, chroma: float, hue: float) -> str:
    """Direct OKLCH to Hex."""
    return rgb_to_hex(*oklch_to_rgb(l, chroma, hue))


def _cached(func):
    """
    LRU-cache `func` for hashable arguments only. Unhashable ones skip the
    cache so the function's own validation reports them.
    """
    cached = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            hash((args, tuple(kwargs.items())))
        except TypeError:
            return func(*args, **kwargs)
        return cached(*args, **kwargs)

    wrapper.cache_info = cached.cache_info
    wrapper.cache_clear = cached.cache_clear
    return wrapper


# Apply LRU caching to the public scalar conversions in this module;
# the composition helpers take arbitrary sequences and stay uncached
_UNCACHED = {"to_rgb", "from_rgb", "convert"}
for _name, _obj in list(globals().items()):
    if (
        callable(_obj)
        and getattr(_obj, "__module__", None) == __name__
        and not _name.startswith("_")
        and _name not in _UNCACHED
    ):
        globals()[_name] = _cached(_obj)
