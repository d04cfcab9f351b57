import argparse
import asyncio
import os
import sys

import requests

from . import __version__
from .color import argb_from_hex, hex_from_argb
from .export import create_html_preview, export_css, export_json, print_theme
from .theme import CustomColor, theme_from_image, theme_from_seed


def parse_custom_color(text):
    """Parse NAME=HEX[:blend|:noblend] into a CustomColor.

    Raises:
        ValueError: if the text is malformed
    """
    name, sep, rest = text.partition("=")
    if not sep or not name.strip():
        raise ValueError(f"Expected NAME=HEX, got {text!r}")

    hex_color, _, flag = rest.partition(":")
    if flag not in ("", "blend", "noblend"):
        raise ValueError(f"Unknown custom color flag {flag!r} (use blend or noblend)")

    return CustomColor(
        value=argb_from_hex(hex_color),
        name=name.strip(),
        blend=flag != "noblend",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="tonal-theme",
        description="Generate light and dark color themes from a seed color or an image",
    )
    parser.add_argument(
        "seed",
        nargs="?",
        default=None,
        help="Seed color as hex, e.g. '#6750a4'",
    )
    parser.add_argument(
        "--image",
        metavar="PATH_OR_URL",
        help="Derive the seed color from an image file or http(s) URL",
    )
    parser.add_argument(
        "--custom",
        metavar="NAME=HEX[:blend|:noblend]",
        action="append",
        default=[],
        help="Custom color to include; harmonized toward the seed unless ':noblend'",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=".",
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "--name",
        help="Theme name used for output files (default: image filename or 'theme')",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--dark",
        dest="dark",
        action="store_const",
        const=True,
        default=None,
        help="Only export the dark scheme",
    )
    mode.add_argument(
        "--light",
        dest="dark",
        action="store_const",
        const=False,
        help="Only export the light scheme",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate arguments
    if args.seed and args.image:
        parser.error("Cannot use both a seed color and --image")
    if not args.seed and not args.image:
        parser.error("Either a seed color or --image is required")

    try:
        custom_colors = [parse_custom_color(text) for text in args.custom]
    except ValueError as e:
        parser.error(str(e))

    if args.image:
        theme = _run_from_image(args, custom_colors)
    else:
        try:
            seed = argb_from_hex(args.seed)
        except ValueError as e:
            parser.error(str(e))
        print(f"Seed: {hex_from_argb(seed)}")
        theme = theme_from_seed(seed, custom_colors)

    _export(theme, args)


def _run_from_image(args, custom_colors):
    """Extract the seed from an image, exiting with status 1 on failure."""
    print(f"Analyzing: {args.image}")
    try:
        theme = asyncio.run(theme_from_image(args.image, custom_colors))
    except (OSError, requests.RequestException) as e:
        print(f"Error reading image {args.image}: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Extracted seed: {hex_from_argb(theme.seed)}")
    return theme


def _theme_name(args):
    if args.name:
        return args.name
    if args.image:
        return os.path.splitext(os.path.basename(args.image))[0] or "theme"
    return "theme"


def _export(theme, args):
    output_dir = args.output
    theme_name = _theme_name(args)
    modes = [args.dark] if args.dark is not None else [False, True]

    os.makedirs(output_dir, exist_ok=True)

    for dark in modes:
        print_theme(theme, dark)

    json_path = os.path.join(output_dir, f"{theme_name}.json")
    css_path = os.path.join(output_dir, f"{theme_name}.css")
    export_json(theme, json_path)
    export_css(theme, css_path, dark=args.dark)
    exported = [json_path, css_path]

    for dark in modes:
        variant = "dark" if dark else "light"
        html_path = os.path.join(output_dir, f"{theme_name}-preview-{variant}.html")
        create_html_preview(
            theme, html_path, dark, title=f"{theme_name} ({variant.title()})"
        )
        exported.append(html_path)

    print("\n" + "=" * 60)
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print("=" * 60)


if __name__ == "__main__":
    main()
