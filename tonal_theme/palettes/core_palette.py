from collections import namedtuple

from ..hct import Hct
from .tonal_palette import TonalPalette

# Key colors of the default palette family: hue offset and chroma per palette
MIN_PRIMARY_CHROMA = 48.0
SECONDARY_CHROMA = 16.0
TERTIARY_CHROMA = 24.0
TERTIARY_HUE_OFFSET = 60.0
NEUTRAL_CHROMA = 4.0
NEUTRAL_VARIANT_CHROMA = 8.0
ERROR_HUE = 25.0
ERROR_CHROMA = 84.0

_CorePalette = namedtuple("CorePalette", ["a1", "a2", "a3", "n1", "n2", "error"])


class CorePalette(_CorePalette):
    """The six tonal palettes a scheme is built from.

    a1, a2 and a3 are the accent palettes (primary, secondary, tertiary);
    n1 and n2 are the neutral and neutral-variant palettes.
    """

    __slots__ = ()

    @classmethod
    def of(cls, argb):
        """Palette family with vivid accents, whatever the seed chroma."""
        hct = Hct.from_int(argb)
        hue = hct.hue
        chroma = hct.chroma
        return cls(
            a1=TonalPalette.from_hue_and_chroma(hue, max(MIN_PRIMARY_CHROMA, chroma)),
            a2=TonalPalette.from_hue_and_chroma(hue, SECONDARY_CHROMA),
            a3=TonalPalette.from_hue_and_chroma(hue + TERTIARY_HUE_OFFSET, TERTIARY_CHROMA),
            n1=TonalPalette.from_hue_and_chroma(hue, NEUTRAL_CHROMA),
            n2=TonalPalette.from_hue_and_chroma(hue, NEUTRAL_VARIANT_CHROMA),
            error=TonalPalette.from_hue_and_chroma(ERROR_HUE, ERROR_CHROMA),
        )

    @classmethod
    def content_of(cls, argb):
        """Palette family that stays faithful to the seed's own chroma."""
        hct = Hct.from_int(argb)
        hue = hct.hue
        chroma = hct.chroma
        return cls(
            a1=TonalPalette.from_hue_and_chroma(hue, chroma),
            a2=TonalPalette.from_hue_and_chroma(hue, chroma / 3),
            a3=TonalPalette.from_hue_and_chroma(hue + TERTIARY_HUE_OFFSET, chroma / 2),
            n1=TonalPalette.from_hue_and_chroma(hue, min(chroma / 12, NEUTRAL_CHROMA)),
            n2=TonalPalette.from_hue_and_chroma(
                hue, min(chroma / 6, NEUTRAL_VARIANT_CHROMA)
            ),
            error=TonalPalette.from_hue_and_chroma(ERROR_HUE, ERROR_CHROMA),
        )
