import argparse

import pytest

from composition.core.errors import InvalidFormat, OutOfRange
from composition.core.models import CMYK, HCL, HSL, OKLCH, RGB, ColorModel
from composition.shared import parser as p
from composition.shared import sanitizer as san


class TestParseStrings:

    @pytest.mark.parametrize("text", ["rgb(255, 128, 0)", "255 128 0", "255,128,0", "RGB( 255 128 0 )", "'rgb(255,128,0)'"])
    def test_rgb(self, text):
        assert p.parse_rgb_string(text) == RGB(255, 128, 0)

    def test_rgb_rejects_fractions(self):
        with pytest.raises(InvalidFormat):
            p.parse_rgb_string("rgb(1.5, 0, 0)")

    @pytest.mark.parametrize("text", ["rgb(256, 0, 0)", "rgb(-1, 0, 0)"])
    def test_rgb_out_of_range(self, text):
        with pytest.raises(OutOfRange):
            p.parse_rgb_string(text)

    @pytest.mark.parametrize("text", ["rgb(1, 2)", "rgb(1, 2, 3, 4)", "rgb(a, b, c)", "", "rgb(1, 2, x3)"])
    def test_rgb_malformed(self, text):
        with pytest.raises(InvalidFormat) as exc:
            p.parse_rgb_string(text)
        if text:
            assert "rgb(255, 136, 0)" in exc.value.hint

    def test_hsl(self):
        assert p.parse_hsl_string("hsl(210deg, 50%, 40%)") == HSL(210, 50, 40)
        assert p.parse_hsl_string("hsl(210° 50% 40%)") == HSL(210, 50, 40)

    def test_hsl_keeps_percent_scale(self):
        # bare fractions are not rescaled
        assert p.parse_hsl_string("0 0.5 0.5") == HSL(0, 0.5, 0.5)

    def test_cmyk(self):
        assert p.parse_cmyk_string("cmyk(0%, 47%, 100%, 0%)") == CMYK(0, 47, 100, 0)

    def test_cmyk_needs_four_channels(self):
        with pytest.raises(InvalidFormat):
            p.parse_cmyk_string("cmyk(0%, 47%, 100%)")

    def test_hcl(self):
        assert p.parse_hcl_string("lch(53.24 104.55 40deg)") == HCL(53.24, 104.55, 40)

    def test_oklch(self):
        assert p.parse_oklch_string("oklch(0.628 0.2577 29.23deg)") == OKLCH(0.628, 0.2577, 29.23)

    def test_oklch_percent_lightness(self):
        assert p.parse_oklch_string("oklch(62.8% 0.2577 29.23)").l == pytest.approx(0.628)

    def test_hex(self):
        assert p.parse_hex_string("F80") == "#ff8800"


class TestDetect:

    @pytest.mark.parametrize("text, model", [
        ("#ff8800", ColorModel.HEX),
        ("abc", ColorModel.HEX),
        ("rgb(1, 2, 3)", ColorModel.RGB),
        ("1 2 3", ColorModel.RGB),
        ("hsl(0, 100%, 50%)", ColorModel.HSL),
        ("cmyk(0, 0, 0, 0)", ColorModel.CMYK),
        ("hcl(50 20 10)", ColorModel.HCL),
        ("lch(50 20 10)", ColorModel.HCL),
        ("oklch(0.5 0.1 10)", ColorModel.OKLCH),
    ])
    def test_detect_model(self, text, model):
        assert p.detect_model(text) is model

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty_is_invalid(self, text):
        with pytest.raises(InvalidFormat):
            p.detect_model(text)

    def test_unknown_function(self):
        with pytest.raises(InvalidFormat):
            p.detect_model("lab(50 20 10)")

    def test_parse_any(self):
        assert p.parse_any("hsl(0, 100%, 50%)") == (ColorModel.HSL, HSL(0, 100, 50))
        assert p.parse_any("#F00") == (ColorModel.HEX, "#ff0000")

    def test_parse_color_with_explicit_model(self):
        assert p.parse_color("0 100 50", "hsl") == HSL(0, 100, 50)
        assert p.parse_color("0 100 50", ColorModel.RGB) == RGB(0, 100, 50)


class TestSanitizer:

    @pytest.mark.parametrize("text, expected", [
        ("#ABC", "aabbcc"),
        ("abcdef", "abcdef"),
        (" #0F0 ", "00ff00"),
    ])
    def test_normalize_hex(self, text, expected):
        assert san.normalize_hex(text) == expected

    def test_normalize_hex_hint(self):
        with pytest.raises(InvalidFormat) as exc:
            san.normalize_hex("#12")
        assert "3 or 6" in exc.value.hint

    def test_handle_hex(self):
        assert san.handle_hex("#F80") == "ff8800"
        with pytest.raises(argparse.ArgumentTypeError):
            san.handle_hex("nope")

    @pytest.mark.parametrize("text, expected", [
        ("HSL", "hsl"),
        ("lch", "hcl"),
        ("cielch", "hcl"),
        (" oklch ", "oklch"),
    ])
    def test_handle_color_model(self, text, expected):
        assert san.handle_color_model(text) == expected

    def test_handle_color_model_rejects_unknown(self):
        with pytest.raises(argparse.ArgumentTypeError):
            san.handle_color_model("lab")

    @pytest.mark.parametrize("text", ["16:9", "16x9", "16/9", " 16 : 9 "])
    def test_handle_ratio_label(self, text):
        assert san.handle_ratio_label(text) == "16:9"

    def test_handle_ratio_label_rejects_unknown(self):
        with pytest.raises(argparse.ArgumentTypeError):
            san.handle_ratio_label("21:9")

    def test_handle_positive_float(self):
        assert san.handle_positive_float("1920px") == 1920.0
        for bad in ("0", "-5", "wide", "inf"):
            with pytest.raises(argparse.ArgumentTypeError):
                san.handle_positive_float(bad)

    def test_seed_is_clamped(self):
        handler = san.handle_int_range(0, 10)
        assert handler("-3") == 0
        assert handler("42") == 10
        assert handler(" 7 ") == 7
        with pytest.raises(argparse.ArgumentTypeError):
            handler("seven")
