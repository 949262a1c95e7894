#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 1024

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
PERCENT = 100.0                    # Scale of percentage fields (HSL, CMYK)
HUE_MAX = 360.0                    # Full circle degrees
HUE_HALF = 180.0                   # Half circle, used for shortest-arc hue differences
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
HSL_BLUE_OFFSET = 4.0              # Sector offset when blue is the dominant channel
HCL_L_MAX = 100.0                  # Upper bound of CIELAB lightness
OKLCH_L_MAX = 1.0                  # Upper bound of OKLab lightness
GAMUT_EPS = 1e-4                   # Linear-light tolerance for sRGB gamut checks

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65), on the Y = 1 scale
D65_X = 0.95047                    # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 1.0                        # Y coordinate (Luminance) for D65 illuminant
D65_Z = 1.08883                    # Z coordinate for D65 illuminant

# sRGB to XYZ Matrix (Source: sRGB D65, rows are X, Y, Z)
M_SRGB_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# XYZ to sRGB Matrix (Source: sRGB D65 inverse, rows are linear R, G, B)
M_XYZ_SRGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# CIELAB Constants (Source: CIE 15:2004, exact rational forms)
LAB_E = 216.0 / 24389.0            # Threshold between the linear segment and the cube root
LAB_KAPPA = 24389.0 / 27.0         # Slope of the linear segment for low luminance values
LAB_DELTA = 6.0 / 29.0             # Cube root of LAB_E, threshold for the inverse
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# Constants for OKLab color space conversions (Source: https://bottosson.github.io/posts/oklab/)
OKLAB_CUBE_ROOT_EXP = 1.0 / 3.0    # Power exponent for perceptual LMS non-linearity

# XYZ to LMS (M1) and LMS' to OKLab (M2) matrices (Source: Björn Ottosson, 2020)
M1_OKLAB = (
    (0.8189330101, 0.3618667424, -0.1288597137),
    (0.0329845436, 0.9293118715, 0.0361456387),
    (0.0482003018, 0.2643662691, 0.6338517070),
)
M2_OKLAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# Inverse stages (OKLab to LMS', then LMS to XYZ)
M2_OKLAB_INV = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)
M1_OKLAB_INV = (
    (1.2270138511, -0.5577999807, 0.2812561490),
    (-0.0405801784, 1.1122568696, -0.0716766787),
    (-0.0763812845, -0.4214819784, 1.5861632204),
)

# ==========================================
# Application Logic & Constraints
# ==========================================

MAX_DEC = 16777215                 # Max integer value for 24-bit Hex (0xFFFFFF)
DISPLAY_PLACES = 2                 # Decimal places for percentages and degrees
DISPLAY_PLACES_FINE = 4            # Decimal places for HCL/OKLCH lightness and chroma

# Format aliases for the 'convert' command and the inspector
FORMAT_ALIASES = {
    'hex': 'hex',
    'rgb': 'rgb',
    'hsl': 'hsl',
    'cmyk': 'cmyk',
    'hcl': 'hcl',
    'lch': 'hcl',
    'cielch': 'hcl',
    'oklch': 'oklch',
}

# Aspect ratios offered by the framing tool, in cycle order
RATIO_OPTIONS = (
    ('1:1', 1.0),
    ('4:3', 4.0 / 3.0),
    ('3:2', 3.0 / 2.0),
    ('16:9', 16.0 / 9.0),
)

# Composition overlays and their button titles, in cycle order
OVERLAY_TITLES = {
    'none': 'No Grid',
    'thirds': 'Rule of Thirds',
    'symmetry': 'Symmetry',
}

CAPTURE_PREFIX = "photo"           # Export file name prefix
CAPTURE_EXT = "png"                # Export file extension

# ==========================================
# CLI UI
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"
