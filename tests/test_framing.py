from datetime import datetime, timedelta, timezone

import pytest

from composition.core import framing as fr
from composition.core.errors import InvalidFormat, OutOfRange


class TestRatios:

    def test_ratio_order(self):
        assert [r.label for r in fr.RATIOS] == ["1:1", "4:3", "3:2", "16:9"]
        assert fr.RATIOS[3].value == pytest.approx(16 / 9)

    def test_next_ratio_wraps(self):
        assert fr.next_ratio(0) == 1
        assert fr.next_ratio(3) == 0

    def test_ratio_from_label(self):
        assert fr.ratio_from_label("3:2").value == 1.5
        with pytest.raises(InvalidFormat):
            fr.ratio_from_label("21:9")


class TestModes:

    def test_overlay_cycle(self):
        assert fr.OverlayMode.NONE.next() is fr.OverlayMode.THIRDS
        assert fr.OverlayMode.THIRDS.next() is fr.OverlayMode.SYMMETRY
        assert fr.OverlayMode.SYMMETRY.next() is fr.OverlayMode.NONE

    def test_overlay_titles(self):
        assert fr.OverlayMode.NONE.title == "No Grid"
        assert fr.OverlayMode.THIRDS.title == "Rule of Thirds"

    def test_facing(self):
        assert fr.FacingMode.USER.mirrored
        assert not fr.FacingMode.ENVIRONMENT.mirrored
        assert fr.FacingMode.USER.toggle() is fr.FacingMode.ENVIRONMENT
        assert fr.FacingMode.ENVIRONMENT.toggle() is fr.FacingMode.USER


class TestCropRect:

    def test_wide_frame_loses_width(self):
        assert fr.crop_rect(1920, 1080, 1.0) == (420, 0, 1080, 1080)

    def test_tall_frame_loses_height(self):
        rect = fr.crop_rect(1080, 1920, 16 / 9)
        assert rect.width == 1080
        assert rect.height == pytest.approx(607.5)
        assert rect.x == 0
        assert rect.y == pytest.approx(656.25)

    def test_matching_ratio_is_whole_frame(self):
        assert fr.crop_rect(1600, 1200, 4 / 3) == pytest.approx((0, 0, 1600, 1200))

    def test_crop_keeps_ratio_and_fits(self):
        for width, height in [(640, 480), (1080, 1920), (3000, 2000), (500, 500)]:
            for ratio in fr.RATIOS:
                rect = fr.crop_rect(width, height, ratio.value)
                assert rect.width / rect.height == pytest.approx(ratio.value)
                assert rect.x >= 0 and rect.y >= 0
                assert rect.x * 2 + rect.width == pytest.approx(width)
                assert rect.y * 2 + rect.height == pytest.approx(height)

    @pytest.mark.parametrize("width, height, ratio", [
        (0, 100, 1.0),
        (100, -1, 1.0),
        (100, 100, 0),
        (float("inf"), 100, 1.0),
        ("100", 100, 1.0),
    ])
    def test_invalid_dimensions(self, width, height, ratio):
        with pytest.raises(OutOfRange):
            fr.crop_rect(width, height, ratio)


class TestGuideLines:

    def test_none(self):
        assert fr.guide_lines(fr.OverlayMode.NONE, fr.crop_rect(1920, 1080, 1.0)) == ()

    def test_thirds(self):
        rect = fr.crop_rect(900, 900, 1.0)
        lines = fr.guide_lines(fr.OverlayMode.THIRDS, rect)
        assert [line.orientation for line in lines] == ["vertical", "vertical", "horizontal", "horizontal"]
        assert [line.position for line in lines] == pytest.approx([300, 600, 300, 600])

    def test_symmetry_inside_crop(self):
        lines = fr.guide_lines("symmetry", fr.crop_rect(1920, 1080, 1.0))
        assert lines == (fr.GuideLine("vertical", 960), fr.GuideLine("horizontal", 540))


class TestCaptureFilename:

    def test_naive_time(self):
        when = datetime(2024, 5, 1, 10, 20, 30, 123000)
        assert fr.capture_filename(fr.RATIOS[3], when) == "photo-16:9-2024-05-01T10-20-30-123Z.png"

    def test_aware_time_is_converted_to_utc(self):
        when = datetime(2024, 5, 1, 12, 20, 30, tzinfo=timezone(timedelta(hours=2)))
        assert fr.capture_filename(fr.RATIOS[0], when) == "photo-1:1-2024-05-01T10-20-30-000Z.png"

    def test_default_is_now(self):
        name = fr.capture_filename(fr.RATIOS[1])
        assert name.startswith("photo-4:3-")
        assert name.endswith("Z.png")
