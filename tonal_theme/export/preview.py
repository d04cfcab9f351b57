from ..color import hex_from_argb
from .css_export import build_css, custom_color_token

# (section title, [(role token, on-role token)])
SECTIONS = [
    (
        "Accents",
        [
            ("primary", "on-primary"),
            ("primary-container", "on-primary-container"),
            ("secondary", "on-secondary"),
            ("secondary-container", "on-secondary-container"),
            ("tertiary", "on-tertiary"),
            ("tertiary-container", "on-tertiary-container"),
        ],
    ),
    (
        "Error",
        [("error", "on-error"), ("error-container", "on-error-container")],
    ),
    (
        "Surfaces",
        [
            ("background", "on-background"),
            ("surface", "on-surface"),
            ("surface-variant", "on-surface-variant"),
            ("inverse-surface", "inverse-on-surface"),
        ],
    ),
    (
        "Outlines",
        [("outline", "surface"), ("outline-variant", "on-surface")],
    ),
]

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <style>
{css}
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body {
            font-family: 'Roboto', 'Helvetica Neue', sans-serif;
            background: var(--md-sys-color-background);
            color: var(--md-sys-color-on-background);
            padding: 40px;
            min-height: 100vh;
        }
        h1 { margin-bottom: 10px; font-weight: 400; }
        .theme-badge {
            display: inline-block;
            padding: 4px 12px;
            border-radius: 4px;
            font-size: 12px;
            margin-bottom: 30px;
            background: var(--md-sys-color-surface-variant);
            color: var(--md-sys-color-on-surface-variant);
        }
        h2 {
            margin: 30px 0 15px 0;
            font-weight: 400;
            font-size: 14px;
            text-transform: uppercase;
            letter-spacing: 2px;
            color: var(--md-sys-color-on-surface-variant);
        }
        .palette-section {
            display: flex;
            flex-wrap: wrap;
            gap: 15px;
        }
        .color-card {
            width: 180px;
            height: 90px;
            border-radius: 12px;
            padding: 12px;
            font-size: 12px;
            border: 1px solid var(--md-sys-color-outline-variant);
        }
        .color-name { font-weight: 600; margin-bottom: 4px; }
    </style>
</head>
<body>
    <h1>{title}</h1>
    <div class="theme-badge">{mode} scheme, seed {seed}</div>
{sections}
</body>
</html>"""


def _make_card(name, background, foreground):
    text_name = foreground.rsplit("color-", 1)[-1]
    return f"""        <div class="color-card" style="background: var({background}); color: var({foreground})">
            <div class="color-name">{name}</div>
            <div>{text_name}</div>
        </div>"""


def _make_section(title, cards):
    return "\n".join(
        [
            f"    <h2>{title}</h2>",
            '    <div class="palette-section">',
            *cards,
            "    </div>",
        ]
    )


def create_html_preview(theme, output_path, dark, title="Theme Preview"):
    """Create an HTML page showing every role pair of one scheme.

    Swatches are styled through the --md-sys-color-* properties the theme
    applies, so the page also shows what the exported CSS produces.
    """
    sections = []
    for section_title, pairs in SECTIONS:
        cards = [
            _make_card(
                token, f"--md-sys-color-{token}", f"--md-sys-color-{on_token}"
            )
            for token, on_token in pairs
        ]
        sections.append(_make_section(section_title, cards))

    if theme.custom_colors:
        cards = []
        for group in theme.custom_colors:
            token = custom_color_token(group.color.name)
            cards.append(
                _make_card(
                    group.color.name,
                    f"--md-custom-color-{token}",
                    f"--md-custom-color-on-{token}",
                )
            )
            cards.append(
                _make_card(
                    f"{group.color.name} container",
                    f"--md-custom-color-{token}-container",
                    f"--md-custom-color-on-{token}-container",
                )
            )
        sections.append(_make_section("Custom Colors", cards))

    replacements = {
        "{title}": title,
        "{mode}": "Dark" if dark else "Light",
        "{seed}": hex_from_argb(theme.seed),
        "{css}": build_css(theme, dark=dark),
        "{sections}": "\n".join(sections),
    }

    html = HTML_TEMPLATE
    for old, new in replacements.items():
        html = html.replace(old, new)

    with open(output_path, "w") as f:
        f.write(html)


def print_theme(theme, dark):
    """Print theme info"""
    scheme = theme.schemes.dark if dark else theme.schemes.light

    print("\n" + "=" * 60)
    variant = "DARK" if dark else "LIGHT"
    print(f"THEME ({variant} SCHEME)  seed {hex_from_argb(theme.seed)}")
    print("=" * 60)

    print("\nROLES:")
    for role, argb in scheme.to_json().items():
        print(f"  {role:22} {hex_from_argb(argb)}")

    if theme.custom_colors:
        print("\nCUSTOM COLORS:")
        for group in theme.custom_colors:
            colors = group.dark if dark else group.light
            blended = " (harmonized)" if group.color.blend else ""
            print(
                f"  {group.color.name:22} {hex_from_argb(group.color.value)} -> "
                f"{hex_from_argb(group.value)}{blended}"
            )
            print(
                f"    color {hex_from_argb(colors.color)}  "
                f"on {hex_from_argb(colors.on_color)}  "
                f"container {hex_from_argb(colors.color_container)}  "
                f"on container {hex_from_argb(colors.on_color_container)}"
            )
