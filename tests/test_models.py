import pytest

from composition.core.errors import ColorError, InvalidFormat
from composition.core.models import CMYK, HCL, HSL, OKLCH, RGB, ColorModel
from composition.shared.clamping import hue_difference, normalize_hue, round_half_away, to_byte


class TestColorModel:

    def test_cycle_order(self):
        assert [m.value for m in ColorModel] == ["hex", "rgb", "hsl", "cmyk", "hcl", "oklch"]
        assert ColorModel.HEX.next() is ColorModel.RGB
        assert ColorModel.OKLCH.next() is ColorModel.HEX

    def test_others_wrap_around(self):
        assert ColorModel.HCL.others() == [
            ColorModel.OKLCH, ColorModel.HEX, ColorModel.RGB, ColorModel.HSL, ColorModel.CMYK,
        ]

    @pytest.mark.parametrize("alias, model", [
        ("HEX", ColorModel.HEX),
        ("lch", ColorModel.HCL),
        ("CIELCh", ColorModel.HCL),
        (" oklch ", ColorModel.OKLCH),
    ])
    def test_from_alias(self, alias, model):
        assert ColorModel.from_alias(alias) is model

    def test_from_alias_unknown(self):
        with pytest.raises(InvalidFormat) as exc:
            ColorModel.from_alias("lab")
        assert "oklch" in exc.value.hint
        assert isinstance(exc.value, ColorError)


class TestRounded:

    def test_hsl(self):
        assert HSL(329.8824, 100.0, 50.1961).rounded() == HSL(329.88, 100.0, 50.2)

    def test_hue_that_rounds_to_full_turn(self):
        assert HSL(359.999, 50, 50).rounded().h == 0.0
        assert OKLCH(0.5, 0.1, 359.9999).rounded().h == 0.0

    def test_fine_places(self):
        assert HCL(53.24079, 104.55177, 39.99901).rounded() == HCL(53.2408, 104.5518, 40.0)

    def test_cmyk_and_rgb(self):
        assert CMYK(0, 47.0588, 100, 0).rounded() == CMYK(0, 47.06, 100, 0)
        assert RGB(1, 2, 3).rounded() == RGB(1, 2, 3)


class TestClamping:

    @pytest.mark.parametrize("v, expected", [(2.5, 3), (-2.5, -3), (0.49, 0), (254.5, 255)])
    def test_round_half_away(self, v, expected):
        assert round_half_away(v) == expected

    @pytest.mark.parametrize("v, expected", [(-4, 0), (300, 255), (127.5, 128), (float("nan"), 0)])
    def test_to_byte(self, v, expected):
        assert to_byte(v) == expected

    @pytest.mark.parametrize("h, expected", [(360, 0), (-30, 330), (725, 5), (0, 0), (-1e-15, 0)])
    def test_normalize_hue(self, h, expected):
        assert normalize_hue(h) == pytest.approx(expected)
        assert 0 <= normalize_hue(h) < 360

    @pytest.mark.parametrize("h1, h2, expected", [
        (10, 350, -20),
        (350, 10, 20),
        (0, 180, 180),
        (180, 0, 180),
        (90, 90, 0),
    ])
    def test_hue_difference(self, h1, h2, expected):
        assert hue_difference(h1, h2) == pytest.approx(expected)
