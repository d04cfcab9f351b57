import re

from ..color import hex_from_argb
from ..style import StyleNode
from ..theme import apply_theme, role_token

CUSTOM_PROPERTY_PREFIX = "--md-custom-color-"


def custom_color_token(name):
    """CSS-safe token for a custom color name: "Brand Blue" -> "brand-blue"."""
    return re.sub(r"[^a-z0-9]+", "-", role_token(name)).strip("-")


def apply_custom_colors(theme, target, dark):
    """Write each custom color group as --md-custom-color-* properties."""
    for group in theme.custom_colors:
        token = custom_color_token(group.color.name)
        colors = group.dark if dark else group.light
        target.set_property(
            f"{CUSTOM_PROPERTY_PREFIX}{token}", hex_from_argb(colors.color)
        )
        target.set_property(
            f"{CUSTOM_PROPERTY_PREFIX}on-{token}", hex_from_argb(colors.on_color)
        )
        target.set_property(
            f"{CUSTOM_PROPERTY_PREFIX}{token}-container",
            hex_from_argb(colors.color_container),
        )
        target.set_property(
            f"{CUSTOM_PROPERTY_PREFIX}on-{token}-container",
            hex_from_argb(colors.on_color_container),
        )


def _styled_node(theme, dark, selector=":root"):
    node = StyleNode(selector)
    apply_theme(theme, dark=dark, target=node)
    apply_custom_colors(theme, node, dark)
    return node


def build_css(theme, dark=None):
    """Render a theme as CSS custom properties.

    Args:
        theme: The Theme
        dark: True/False for a single scheme; None emits the light scheme on
            :root and the dark scheme inside a prefers-color-scheme media query

    Returns:
        CSS text
    """
    if dark is not None:
        return _styled_node(theme, dark).to_css() + "\n"

    light_css = _styled_node(theme, dark=False).to_css()
    dark_css = _styled_node(theme, dark=True).to_css(indent="  ")
    return f"{light_css}\n\n@media (prefers-color-scheme: dark) {{\n{dark_css}\n}}\n"


def export_css(theme, filepath=None, dark=None):
    """Build the theme CSS and optionally write it to filepath.

    Returns:
        CSS text
    """
    css = build_css(theme, dark=dark)
    if filepath is not None:
        with open(filepath, "w") as f:
            f.write(css)
    return css
