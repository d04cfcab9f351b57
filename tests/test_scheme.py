"""Tests for light and dark schemes."""

import pytest

from tonal_theme.color import lstar_from_argb
from tonal_theme.hct import Hct
from tonal_theme.palettes import CorePalette
from tonal_theme.scheme import DARK_TONES, LIGHT_TONES, ROLES, Scheme

from conftest import SEED


class TestToneTables:
    """Role -> tone tables."""

    def test_tables_cover_every_role(self):
        assert set(LIGHT_TONES) == set(ROLES)
        assert set(DARK_TONES) == set(ROLES)

    def test_accent_stops(self):
        assert LIGHT_TONES["primary"] == ("a1", 40)
        assert LIGHT_TONES["on_tertiary_container"] == ("a3", 10)
        assert DARK_TONES["error_container"] == ("error", 30)
        assert DARK_TONES["on_secondary"] == ("a2", 20)


class TestScheme:
    """Scheme construction."""

    def test_light_samples_core_palette(self):
        core = CorePalette.of(SEED)
        scheme = Scheme.light(SEED)
        assert scheme.primary == core.a1.tone(40)
        assert scheme.on_primary == core.a1.tone(100)
        assert scheme.surface == core.n1.tone(99)
        assert scheme.outline == core.n2.tone(50)
        assert scheme.inverse_primary == core.a1.tone(80)

    def test_dark_samples_core_palette(self):
        core = CorePalette.of(SEED)
        scheme = Scheme.dark(SEED)
        assert scheme.primary == core.a1.tone(80)
        assert scheme.on_primary_container == core.a1.tone(90)
        assert scheme.background == core.n1.tone(10)
        assert scheme.inverse_primary == core.a1.tone(40)

    def test_light_and_dark_differ(self):
        assert Scheme.light(SEED).primary != Scheme.dark(SEED).primary
        assert Scheme.light(SEED).background != Scheme.dark(SEED).background

    def test_primary_tones(self):
        assert lstar_from_argb(Scheme.light(SEED).primary) == pytest.approx(40, abs=0.5)
        assert lstar_from_argb(Scheme.dark(SEED).primary) == pytest.approx(80, abs=0.5)

    def test_shadow_is_black(self):
        assert Scheme.light(SEED).shadow == 0xFF000000
        assert Scheme.dark(SEED).scrim == 0xFF000000

    def test_content_scheme_keeps_low_chroma(self):
        muted_seed = 0xFF6B7A8F
        default = Hct.from_int(Scheme.light(muted_seed).primary)
        content = Hct.from_int(Scheme.light_content(muted_seed).primary)
        assert content.chroma < default.chroma
        assert Scheme.dark_content(muted_seed) != Scheme.dark(muted_seed)


class TestToJson:
    """Role enumeration."""

    def test_keys_are_camel_case_in_role_order(self):
        keys = list(Scheme.light(SEED).to_json())
        assert len(keys) == 29
        assert keys[:4] == [
            "primary",
            "onPrimary",
            "primaryContainer",
            "onPrimaryContainer",
        ]
        assert "inverseOnSurface" in keys
        assert "outlineVariant" in keys

    def test_values_are_role_colors(self):
        scheme = Scheme.dark(SEED)
        data = scheme.to_json()
        assert data["onSurfaceVariant"] == scheme.on_surface_variant
        assert data["scrim"] == scheme.scrim
