import json

from ..color import hex_from_argb

# Tone stops written out for each palette
PALETTE_TONES = [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100]


def _scheme_hex(scheme):
    return {role: hex_from_argb(argb) for role, argb in scheme.to_json().items()}


def _group_hex(group):
    return {
        "color": hex_from_argb(group.color),
        "onColor": hex_from_argb(group.on_color),
        "colorContainer": hex_from_argb(group.color_container),
        "onColorContainer": hex_from_argb(group.on_color_container),
    }


def theme_to_json(theme):
    """Convert a theme to a JSON-compatible dict of hex strings.

    Args:
        theme: The Theme

    Returns:
        dict with seed, schemes, palettes and customColors
    """
    palettes = {
        "primary": theme.palettes.primary,
        "secondary": theme.palettes.secondary,
        "tertiary": theme.palettes.tertiary,
        "neutral": theme.palettes.neutral,
        "neutralVariant": theme.palettes.neutral_variant,
        "error": theme.palettes.error,
    }

    return {
        "seed": hex_from_argb(theme.seed),
        "schemes": {
            "light": _scheme_hex(theme.schemes.light),
            "dark": _scheme_hex(theme.schemes.dark),
        },
        "palettes": {
            name: {
                str(tone): hex_from_argb(palette.tone(tone)) for tone in PALETTE_TONES
            }
            for name, palette in palettes.items()
        },
        "customColors": [
            {
                "name": group.color.name,
                "blend": group.color.blend,
                "color": hex_from_argb(group.color.value),
                "value": hex_from_argb(group.value),
                "light": _group_hex(group.light),
                "dark": _group_hex(group.dark),
            }
            for group in theme.custom_colors
        ],
    }


def export_json(theme, filepath):
    """Export a theme as JSON.

    Args:
        theme: The Theme
        filepath: Output file path
    """
    with open(filepath, "w") as f:
        json.dump(theme_to_json(theme), f, indent=2)
