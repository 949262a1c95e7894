import pytest

from composition.core.conversions import rgb_to_cmyk, rgb_to_hcl, rgb_to_hsl, rgb_to_oklch
from composition.core.models import HSL, RGB, ColorModel
from composition.shared.formatting import format_color, format_colorspace


@pytest.mark.parametrize("fmt, args, expected", [
    ("hex", ("#FF8800",), "#ff8800"),
    ("rgb", (255, 136, 0), "rgb(255, 136, 0)"),
    ("hsl", (32, 100, 50), "hsl(32.00deg, 100.00%, 50.00%)"),
    ("cmyk", (0, 46.6667, 100, 0), "cmyk(0.00%, 46.67%, 100.00%, 0.00%)"),
    ("hcl", (53.2408, 104.5518, 40.0), "lch(53.2408 104.5518 40.00deg)"),
    ("oklch", (0.628, 0.2577, 29.23), "oklch(0.6280 0.2577 29.23deg)"),
    ("lab", (1, 2, 3), ""),
])
def test_format_colorspace(fmt, args, expected):
    assert format_colorspace(fmt, *args) == expected


def test_format_color_red():
    assert format_color(ColorModel.HEX, "#ff0000") == "#ff0000"
    assert format_color("rgb", RGB(255, 0, 0)) == "rgb(255, 0, 0)"
    assert format_color("hsl", rgb_to_hsl(255, 0, 0)) == "hsl(0.00deg, 100.00%, 50.00%)"
    assert format_color("cmyk", rgb_to_cmyk(255, 0, 0)) == "cmyk(0.00%, 100.00%, 100.00%, 0.00%)"
    assert format_color("hcl", rgb_to_hcl(255, 0, 0)).startswith("lch(53.24")
    assert format_color("oklch", rgb_to_oklch(255, 0, 0)).startswith("oklch(0.62")


def test_format_color_never_prints_full_turn():
    assert format_color("hsl", HSL(359.999, 100, 50)) == "hsl(0.00deg, 100.00%, 50.00%)"


def test_black_cmyk():
    assert format_color("cmyk", rgb_to_cmyk(0, 0, 0)) == "cmyk(0.00%, 0.00%, 0.00%, 100.00%)"
