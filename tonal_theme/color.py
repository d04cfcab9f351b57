import math

# sRGB <-> XYZ (D65) matrices
SRGB_TO_XYZ = [
    [0.41233895, 0.35762064, 0.18051042],
    [0.2126, 0.7152, 0.0722],
    [0.01932141, 0.11916382, 0.95034478],
]

XYZ_TO_SRGB = [
    [3.2413774792388685, -1.5376652402851851, -0.49885366846268053],
    [-0.9691452513005321, 1.8758853451067872, 0.04156585616912061],
    [0.05562093689691305, -0.20395524564742123, 1.0571799111220335],
]

WHITE_POINT_D65 = [95.047, 100.0, 108.883]

# CIE L*a*b* constants
LAB_EPSILON = 216.0 / 24389.0
LAB_KAPPA = 24389.0 / 27.0


def signum(num):
    if num < 0:
        return -1
    if num == 0:
        return 0
    return 1


def lerp(start, stop, amount):
    return (1.0 - amount) * start + amount * stop


def clamp_int(low, high, value):
    return max(low, min(high, value))


def sanitize_degrees_int(degrees):
    return degrees % 360


def sanitize_degrees_double(degrees):
    degrees = math.fmod(degrees, 360.0)
    if degrees < 0:
        degrees += 360.0
    return degrees


def difference_degrees(a, b):
    """Distance between two hues in degrees, 0-180."""
    return 180.0 - abs(abs(a - b) - 180.0)


def rotation_direction(from_degrees, to_degrees):
    """1 if the shortest way from one hue to the other is increasing, else -1."""
    increasing_difference = sanitize_degrees_double(to_degrees - from_degrees)
    return 1.0 if increasing_difference <= 180.0 else -1.0


def matrix_multiply(row, matrix):
    return [
        row[0] * matrix[i][0] + row[1] * matrix[i][1] + row[2] * matrix[i][2]
        for i in range(3)
    ]


def argb_from_rgb(r, g, b):
    """Pack 8-bit channels into an opaque ARGB int."""
    return (255 << 24 | (r & 255) << 16 | (g & 255) << 8 | (b & 255)) & 0xFFFFFFFF


def alpha_from_argb(argb):
    return (argb >> 24) & 255


def red_from_argb(argb):
    return (argb >> 16) & 255


def green_from_argb(argb):
    return (argb >> 8) & 255


def blue_from_argb(argb):
    return argb & 255


def is_opaque(argb):
    return alpha_from_argb(argb) >= 255


def hex_from_argb(argb):
    """Format an ARGB int as #rrggbb, dropping alpha."""
    r, g, b = red_from_argb(argb), green_from_argb(argb), blue_from_argb(argb)
    return f"#{r:02x}{g:02x}{b:02x}"


def argb_from_hex(hex_color):
    """Parse #rgb, #rrggbb or #aarrggbb (leading # optional) into ARGB.

    Raises:
        ValueError: if the text is not a hex color
    """
    text = hex_color.strip().lstrip("#")
    if len(text) not in (3, 6, 8) or any(
        c not in "0123456789abcdefABCDEF" for c in text
    ):
        raise ValueError(f"Invalid hex color: {hex_color!r}")

    if len(text) == 3:
        text = "".join(c * 2 for c in text)
    if len(text) == 6:
        text = "ff" + text
    return int(text, 16)


def linearized(rgb_component):
    """Convert an 8-bit sRGB channel to linear RGB on a 0-100 scale."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_component):
    """Convert a 0-100 linear RGB channel back to an 8-bit sRGB channel."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinear = normalized * 12.92
    else:
        delinear = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return clamp_int(0, 255, round(delinear * 255.0))


def xyz_from_argb(argb):
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    return matrix_multiply([r, g, b], SRGB_TO_XYZ)


def argb_from_xyz(x, y, z):
    linear_r, linear_g, linear_b = matrix_multiply([x, y, z], XYZ_TO_SRGB)
    return argb_from_rgb(
        delinearized(linear_r), delinearized(linear_g), delinearized(linear_b)
    )


def lab_f(t):
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (LAB_KAPPA * t + 16) / 116


def lab_invf(ft):
    ft3 = ft * ft * ft
    if ft3 > LAB_EPSILON:
        return ft3
    return (116 * ft - 16) / LAB_KAPPA


def y_from_lstar(lstar):
    """Relative luminance Y (0-100) for a given L*."""
    return 100.0 * lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y):
    return lab_f(y / 100.0) * 116.0 - 16.0


def lstar_from_argb(argb):
    """L* of a color, which is what HCT calls tone."""
    y = xyz_from_argb(argb)[1]
    return 116.0 * lab_f(y / 100.0) - 16.0


def argb_from_lstar(lstar):
    """The gray with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)
