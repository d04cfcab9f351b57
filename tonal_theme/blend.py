from .color import difference_degrees, rotation_direction, sanitize_degrees_double
from .hct import Cam16, Hct

# Harmonization never rotates a hue further than this
MAX_HARMONIZE_ROTATION = 15.0


def harmonize(design_color, source_color):
    """Shift the hue of design_color toward source_color.

    The rotation is half the hue difference, capped at 15 degrees, so the
    design color stays recognizable. Chroma and tone are kept.

    Args:
        design_color: ARGB of the color to adjust (e.g. a brand color)
        source_color: ARGB of the color to lean toward (e.g. the theme seed)

    Returns:
        ARGB of the harmonized color
    """
    from_hct = Hct.from_int(design_color)
    to_hct = Hct.from_int(source_color)
    difference = difference_degrees(from_hct.hue, to_hct.hue)
    rotation = min(difference * 0.5, MAX_HARMONIZE_ROTATION)
    output_hue = sanitize_degrees_double(
        from_hct.hue + rotation * rotation_direction(from_hct.hue, to_hct.hue)
    )
    return Hct.from_hct(output_hue, from_hct.chroma, from_hct.tone).to_int()


def hct_hue(from_color, to_color, amount):
    """Blend the hue of from_color toward to_color, keeping from_color's
    chroma and tone. amount=0 returns from_color's hue, 1 returns to_color's.
    """
    ucs = cam16_ucs(from_color, to_color, amount)
    ucs_cam = Cam16.from_int(ucs)
    from_cam = Cam16.from_int(from_color)
    blended = Hct.from_hct(ucs_cam.hue, from_cam.chroma, Hct.from_int(from_color).tone)
    return blended.to_int()


def cam16_ucs(from_color, to_color, amount):
    """Interpolate two colors in CAM16-UCS."""
    from_cam = Cam16.from_int(from_color)
    to_cam = Cam16.from_int(to_color)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    return Cam16.from_ucs(jstar, astar, bstar).to_int()
