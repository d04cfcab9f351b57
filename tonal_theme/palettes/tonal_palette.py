from ..hct import Hct


class TonalPalette:
    """All tones of one hue and chroma.

    Tones are solved lazily and cached per palette, so a palette can be
    sampled repeatedly without repeating the HCT search.
    """

    def __init__(self, hue, chroma):
        self.hue = hue
        self.chroma = chroma
        self._cache = {}

    @classmethod
    def from_int(cls, argb):
        hct = Hct.from_int(argb)
        return cls(hct.hue, hct.chroma)

    @classmethod
    def from_hue_and_chroma(cls, hue, chroma):
        return cls(hue, chroma)

    def tone(self, tone):
        """ARGB of this palette at the given tone (0 = black, 100 = white)."""
        argb = self._cache.get(tone)
        if argb is None:
            argb = Hct.from_hct(self.hue, self.chroma, tone).to_int()
            self._cache[tone] = argb
        return argb

    def __eq__(self, other):
        if not isinstance(other, TonalPalette):
            return NotImplemented
        return self.hue == other.hue and self.chroma == other.chroma

    def __hash__(self):
        return hash((self.hue, self.chroma))

    def __repr__(self):
        return f"TonalPalette(hue={self.hue:.1f}, chroma={self.chroma:.1f})"
