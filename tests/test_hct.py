"""Tests for CAM16 and HCT."""

import pytest

from tonal_theme.color import lstar_from_argb
from tonal_theme.hct import Cam16, Hct, ViewingConditions

from conftest import BLUE, GREEN, RED


class TestCam16:
    """CAM16 forward and inverse transforms."""

    def test_red(self):
        cam = Cam16.from_int(RED)
        assert cam.hue == pytest.approx(27.408, abs=0.01)
        assert cam.chroma == pytest.approx(113.357, abs=0.01)
        assert cam.j == pytest.approx(46.445, abs=0.01)

    def test_white_and_black(self):
        white = Cam16.from_int(0xFFFFFFFF)
        black = Cam16.from_int(0xFF000000)
        assert white.j == pytest.approx(100.0, abs=0.01)
        assert black.j == pytest.approx(0.0, abs=0.01)
        assert black.chroma == pytest.approx(0.0, abs=0.01)

    @pytest.mark.parametrize("argb", [RED, GREEN, BLUE, 0xFF4285F4, 0xFF808080])
    def test_round_trip(self, argb):
        assert Cam16.from_int(argb).to_int() == argb

    def test_ucs_round_trip(self):
        cam = Cam16.from_int(0xFF4285F4)
        assert Cam16.from_ucs(cam.jstar, cam.astar, cam.bstar).to_int() == 0xFF4285F4

    def test_distance_to_self_is_zero(self):
        cam = Cam16.from_int(BLUE)
        assert cam.distance(cam) == pytest.approx(0.0)


class TestViewingConditions:
    """Default viewing conditions."""

    def test_default_is_cached(self):
        assert ViewingConditions.DEFAULT is ViewingConditions.DEFAULT

    def test_make_matches_default(self):
        assert ViewingConditions.make() == ViewingConditions.DEFAULT


class TestHct:
    """HCT color space."""

    @pytest.mark.parametrize(
        "argb, hue, chroma, tone",
        [
            (RED, 27.408, 113.357, 53.233),
            (GREEN, 142.139, 108.410, 87.737),
            (BLUE, 282.788, 87.230, 32.302),
        ],
    )
    def test_from_int(self, argb, hue, chroma, tone):
        hct = Hct.from_int(argb)
        assert hct.hue == pytest.approx(hue, abs=0.01)
        assert hct.chroma == pytest.approx(chroma, abs=0.01)
        assert hct.tone == pytest.approx(tone, abs=0.01)
        assert hct.to_int() == argb

    @pytest.mark.parametrize("tone", [10.0, 30.0, 50.0, 70.0, 90.0])
    def test_from_hct_matches_tone(self, tone):
        argb = Hct.from_hct(250.0, 20.0, tone).to_int()
        assert lstar_from_argb(argb) == pytest.approx(tone, abs=0.5)

    def test_from_hct_in_gamut_keeps_hue_and_chroma(self):
        hct = Hct.from_hct(250.0, 20.0, 50.0)
        assert hct.hue == pytest.approx(250.0, abs=2.0)
        assert hct.chroma == pytest.approx(20.0, abs=2.0)

    def test_out_of_gamut_chroma_is_reduced(self):
        hct = Hct.from_hct(120.0, 200.0, 50.0)
        assert hct.chroma < 200.0
        assert hct.tone == pytest.approx(50.0, abs=0.5)

    def test_extreme_tones_are_black_and_white(self):
        assert Hct.from_hct(30.0, 50.0, 0.0).to_int() == 0xFF000000
        assert Hct.from_hct(30.0, 50.0, 100.0).to_int() == 0xFFFFFFFF

    def test_equality(self):
        assert Hct.from_int(RED) == Hct.from_int(RED)
        assert Hct.from_int(RED) != Hct.from_int(BLUE)
