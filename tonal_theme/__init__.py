from .color import argb_from_hex, hex_from_argb
from .theme import (
    ColorGroup,
    CustomColor,
    CustomColorGroup,
    Theme,
    apply_theme,
    custom_color,
    theme_from_image,
    theme_from_seed,
)

__version__ = "0.1.0"

__all__ = [
    "ColorGroup",
    "CustomColor",
    "CustomColorGroup",
    "Theme",
    "apply_theme",
    "argb_from_hex",
    "custom_color",
    "hex_from_argb",
    "theme_from_image",
    "theme_from_seed",
]
