from .css_export import apply_custom_colors, build_css, export_css
from .json_export import export_json, theme_to_json
from .preview import create_html_preview, print_theme

__all__ = [
    "apply_custom_colors",
    "build_css",
    "create_html_preview",
    "export_css",
    "export_json",
    "print_theme",
    "theme_to_json",
]
