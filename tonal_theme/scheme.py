from collections import namedtuple

from .palettes import CorePalette

ROLES = [
    "primary",
    "on_primary",
    "primary_container",
    "on_primary_container",
    "secondary",
    "on_secondary",
    "secondary_container",
    "on_secondary_container",
    "tertiary",
    "on_tertiary",
    "tertiary_container",
    "on_tertiary_container",
    "error",
    "on_error",
    "error_container",
    "on_error_container",
    "background",
    "on_background",
    "surface",
    "on_surface",
    "surface_variant",
    "on_surface_variant",
    "outline",
    "outline_variant",
    "shadow",
    "scrim",
    "inverse_surface",
    "inverse_on_surface",
    "inverse_primary",
]

_ACCENTS = [
    ("primary", "a1"),
    ("secondary", "a2"),
    ("tertiary", "a3"),
    ("error", "error"),
]


def _accent_tones(color, on_color, container, on_container):
    """role -> (palette attribute, tone) for the four accent families."""
    table = {}
    for accent, palette_name in _ACCENTS:
        table[accent] = (palette_name, color)
        table[f"on_{accent}"] = (palette_name, on_color)
        table[f"{accent}_container"] = (palette_name, container)
        table[f"on_{accent}_container"] = (palette_name, on_container)
    return table


LIGHT_NEUTRAL_TONES = {
    "background": ("n1", 99),
    "on_background": ("n1", 10),
    "surface": ("n1", 99),
    "on_surface": ("n1", 10),
    "surface_variant": ("n2", 90),
    "on_surface_variant": ("n2", 30),
    "outline": ("n2", 50),
    "outline_variant": ("n2", 80),
    "shadow": ("n1", 0),
    "scrim": ("n1", 0),
    "inverse_surface": ("n1", 20),
    "inverse_on_surface": ("n1", 95),
    "inverse_primary": ("a1", 80),
}

DARK_NEUTRAL_TONES = {
    "background": ("n1", 10),
    "on_background": ("n1", 90),
    "surface": ("n1", 10),
    "on_surface": ("n1", 90),
    "surface_variant": ("n2", 30),
    "on_surface_variant": ("n2", 80),
    "outline": ("n2", 60),
    "outline_variant": ("n2", 30),
    "shadow": ("n1", 0),
    "scrim": ("n1", 0),
    "inverse_surface": ("n1", 90),
    "inverse_on_surface": ("n1", 20),
    "inverse_primary": ("a1", 40),
}


LIGHT_TONES = {**_accent_tones(40, 100, 90, 10), **LIGHT_NEUTRAL_TONES}
DARK_TONES = {**_accent_tones(80, 20, 30, 90), **DARK_NEUTRAL_TONES}


def _camel_case(role):
    head, *rest = role.split("_")
    return head + "".join(word.title() for word in rest)


class Scheme(namedtuple("Scheme", ROLES)):
    """Semantic color roles for one appearance (light or dark).

    Each field is an ARGB int. Use the class methods to build a scheme from a
    seed color rather than filling the roles by hand.
    """

    __slots__ = ()

    @classmethod
    def from_core_palette(cls, core, tones):
        """Sample every role from a palette family using a role -> tone table."""
        return cls(
            **{
                role: getattr(core, palette_name).tone(tone)
                for role, (palette_name, tone) in tones.items()
            }
        )

    @classmethod
    def light(cls, argb):
        return cls.from_core_palette(CorePalette.of(argb), LIGHT_TONES)

    @classmethod
    def dark(cls, argb):
        return cls.from_core_palette(CorePalette.of(argb), DARK_TONES)

    @classmethod
    def light_content(cls, argb):
        return cls.from_core_palette(CorePalette.content_of(argb), LIGHT_TONES)

    @classmethod
    def dark_content(cls, argb):
        return cls.from_core_palette(CorePalette.content_of(argb), DARK_TONES)

    def to_json(self):
        """Roles as an ordered dict keyed by camelCase role name.

        Returns:
            dict: e.g. {"primary": 0xFF6750A4, "onPrimary": ..., ...}
        """
        return {_camel_case(role): value for role, value in zip(self._fields, self)}
