import math
from collections import namedtuple

from ..color import WHITE_POINT_D65, lerp, y_from_lstar

_ViewingConditions = namedtuple(
    "ViewingConditions",
    ["n", "aw", "nbb", "ncb", "c", "nc", "rgb_d", "fl", "fl_root", "z"],
)


class ViewingConditions(_ViewingConditions):
    """Environment in which CAM16 colors are perceived.

    The defaults describe sRGB content viewed in an average room, on a
    background of L* 50.
    """

    __slots__ = ()

    @classmethod
    def make(
        cls,
        white_point=None,
        adapting_luminance=None,
        background_lstar=50.0,
        surround=2.0,
        discounting_illuminant=False,
    ):
        """Build viewing conditions.

        Args:
            white_point: XYZ of the reference white (default D65)
            adapting_luminance: Luminance of the adapting field in lux
            background_lstar: L* of the background
            surround: 0 = dark room, 1 = dim, 2 = average
            discounting_illuminant: Whether the eye fully adapts to the illuminant

        Returns:
            ViewingConditions
        """
        if white_point is None:
            white_point = WHITE_POINT_D65
        if adapting_luminance is None:
            adapting_luminance = 200.0 / math.pi * y_from_lstar(50.0) / 100.0

        x, y, z = white_point
        r_w = x * 0.401288 + y * 0.650173 + z * -0.051461
        g_w = x * -0.250268 + y * 1.204414 + z * 0.045854
        b_w = x * -0.002079 + y * 0.048952 + z * 0.953127

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = max(0.0, min(1.0, d))

        nc = f
        rgb_d = [
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        ]

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * (5.0 * adapting_luminance) ** (
            1.0 / 3.0
        )

        n = y_from_lstar(background_lstar) / white_point[1]
        z_exp = 1.48 + math.sqrt(n)
        nbb = 0.725 / n**0.2
        ncb = nbb

        rgb_a_factors = [
            (fl * rgb_d[0] * r_w / 100.0) ** 0.42,
            (fl * rgb_d[1] * g_w / 100.0) ** 0.42,
            (fl * rgb_d[2] * b_w / 100.0) ** 0.42,
        ]
        rgb_a = [400.0 * factor / (factor + 27.13) for factor in rgb_a_factors]
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=ncb,
            c=c,
            nc=nc,
            rgb_d=tuple(rgb_d),
            fl=fl,
            fl_root=fl**0.25,
            z=z_exp,
        )


ViewingConditions.DEFAULT = ViewingConditions.make()
