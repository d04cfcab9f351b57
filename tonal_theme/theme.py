import re
from collections import namedtuple

from .blend import harmonize
from .color import hex_from_argb
from .image import seed_from_image
from .palettes import CorePalette
from .scheme import Scheme
from .style import default_environment

PROPERTY_PREFIX = "--md-sys-color-"

# Tones of the custom color's primary palette for each group role
LIGHT_GROUP_TONES = {
    "color": 40,
    "on_color": 100,
    "color_container": 90,
    "on_color_container": 10,
}
DARK_GROUP_TONES = {
    "color": 80,
    "on_color": 20,
    "color_container": 30,
    "on_color_container": 90,
}

CustomColor = namedtuple("CustomColor", ["value", "name", "blend"])
ColorGroup = namedtuple(
    "ColorGroup", ["color", "on_color", "color_container", "on_color_container"]
)
CustomColorGroup = namedtuple("CustomColorGroup", ["color", "value", "light", "dark"])
Schemes = namedtuple("Schemes", ["light", "dark"])
Palettes = namedtuple(
    "Palettes",
    ["primary", "secondary", "tertiary", "neutral", "neutral_variant", "error"],
)
Theme = namedtuple("Theme", ["seed", "schemes", "palettes", "custom_colors"])


def theme_from_seed(seed, custom_colors=()):
    """Generate a theme from a seed color.

    Args:
        seed: ARGB seed color
        custom_colors: CustomColor entries to harmonize into the theme

    Returns:
        Theme
    """
    palette = CorePalette.of(seed)
    return Theme(
        seed=seed,
        schemes=Schemes(light=Scheme.light(seed), dark=Scheme.dark(seed)),
        palettes=Palettes(
            primary=palette.a1,
            secondary=palette.a2,
            tertiary=palette.a3,
            neutral=palette.n1,
            neutral_variant=palette.n2,
            error=palette.error,
        ),
        custom_colors=tuple(custom_color(seed, c) for c in custom_colors),
    )


async def theme_from_image(image, custom_colors=()):
    """Generate a theme from the seed color of an image.

    Args:
        image: bytes, file path or http(s) URL of the image
        custom_colors: CustomColor entries to harmonize into the theme

    Returns:
        Theme
    """
    seed = await seed_from_image(image)
    return theme_from_seed(seed, custom_colors)


def _color_group(tones, group_tones):
    return ColorGroup(**{role: tones.tone(tone) for role, tone in group_tones.items()})


def custom_color(seed, color):
    """Generate the light and dark color groups for a custom color.

    When color.blend is set the color's hue is first harmonized toward the
    seed.

    Args:
        seed: ARGB seed color of the theme
        color: CustomColor

    Returns:
        CustomColorGroup holding the original color and the value actually used
    """
    value = color.value
    if color.blend:
        value = harmonize(color.value, seed)

    tones = CorePalette.of(value).a1
    return CustomColorGroup(
        color=color,
        value=value,
        light=_color_group(tones, LIGHT_GROUP_TONES),
        dark=_color_group(tones, DARK_GROUP_TONES),
    )


def role_token(role):
    """Property token for a scheme role.

    "onPrimaryContainer" -> "on-primary-container"
    """
    return re.sub(r"([a-z])([A-Z])", r"\1-\2", role).replace("_", "-").lower()


def apply_theme(theme, dark=None, target=None, environment=None):
    """Write the theme's scheme colors as custom properties on a style node.

    Each role becomes --md-sys-color-<token> set to its #rrggbb value.

    Args:
        theme: Theme
        dark: Use the dark scheme; None follows the system preference
        target: StyleNode to write to; None uses the environment's default
        environment: Environment supplying the defaults
    """
    if environment is None:
        environment = default_environment()
    if target is None:
        target = environment.default_target()
    if dark is None:
        dark = environment.prefers_dark()

    scheme = theme.schemes.dark if dark else theme.schemes.light
    for role, argb in scheme.to_json().items():
        name = f"{PROPERTY_PREFIX}{role_token(role)}"
        target.set_property(name, hex_from_argb(argb))
