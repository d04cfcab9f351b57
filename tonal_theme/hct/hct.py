from ..color import argb_from_lstar, lstar_from_argb, sanitize_degrees_double
from .cam16 import Cam16

# Search tolerances for solving hue/chroma/tone back into sRGB
CHROMA_SEARCH_ENDPOINT = 0.4
DE_MAX = 1.0
DL_MAX = 0.2
LIGHTNESS_SEARCH_ENDPOINT = 0.01


def _find_cam_by_j(hue, chroma, tone):
    """Binary search CAM16 lightness for a color at the given tone.

    Returns the best in-gamut Cam16 whose hue and chroma are within DE_MAX of
    the request, or None if no such color exists.
    """
    low, high = 0.0, 100.0
    best_dl = 1000.0
    best_de = 1000.0
    best_cam = None

    while abs(low - high) > LIGHTNESS_SEARCH_ENDPOINT:
        mid = low + (high - low) / 2
        clipped = Cam16.from_jch(mid, chroma, hue).to_int()
        clipped_lstar = lstar_from_argb(clipped)
        d_l = abs(tone - clipped_lstar)

        if d_l < DL_MAX:
            cam_clipped = Cam16.from_int(clipped)
            d_e = cam_clipped.distance(
                Cam16.from_jch(cam_clipped.j, cam_clipped.chroma, hue)
            )
            if d_e <= DE_MAX and d_e <= best_de:
                best_dl = d_l
                best_de = d_e
                best_cam = cam_clipped

        if best_dl == 0 and best_de == 0:
            break

        if clipped_lstar < tone:
            low = mid
        else:
            high = mid

    return best_cam


def solve_to_int(hue, chroma, tone):
    """Closest sRGB color to the requested hue, chroma and tone.

    Tone is matched; chroma is reduced by binary search until the color fits
    in the sRGB gamut.
    """
    if chroma < 1.0 or round(tone) <= 0.0 or round(tone) >= 100.0:
        return argb_from_lstar(tone)

    hue = sanitize_degrees_double(hue)
    high = chroma
    mid = chroma
    low = 0.0
    is_first_loop = True
    answer = None

    while abs(low - high) >= CHROMA_SEARCH_ENDPOINT:
        possible_answer = _find_cam_by_j(hue, mid, tone)

        if is_first_loop:
            if possible_answer is not None:
                return possible_answer.to_int()
            # Requested chroma is out of gamut, search below it
            is_first_loop = False
            mid = low + (high - low) / 2.0
            continue

        if possible_answer is None:
            high = mid
        else:
            answer = possible_answer
            low = mid
        mid = low + (high - low) / 2.0

    if answer is None:
        return argb_from_lstar(tone)
    return answer.to_int()


class Hct:
    """A color described by hue (0-360), chroma and tone (L*, 0-100)."""

    def __init__(self, argb):
        self._argb = argb
        cam = Cam16.from_int(argb)
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = lstar_from_argb(argb)

    @classmethod
    def from_int(cls, argb):
        return cls(argb)

    @classmethod
    def from_hct(cls, hue, chroma, tone):
        return cls(solve_to_int(hue, chroma, tone))

    @property
    def hue(self):
        return self._hue

    @property
    def chroma(self):
        return self._chroma

    @property
    def tone(self):
        return self._tone

    def to_int(self):
        return self._argb

    def __eq__(self, other):
        if not isinstance(other, Hct):
            return NotImplemented
        return self._argb == other._argb

    def __hash__(self):
        return hash(self._argb)

    def __repr__(self):
        return (
            f"Hct(hue={self._hue:.1f}, chroma={self._chroma:.1f}, "
            f"tone={self._tone:.1f})"
        )
