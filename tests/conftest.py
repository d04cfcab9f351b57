"""Pytest configuration and fixtures."""

import io

import pytest
from PIL import Image

from tonal_theme import theme_from_seed
from tonal_theme.style import Environment, StyleNode

# Google Blue
SEED = 0xFF4285F4
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF


def make_image(colors, size=(40, 40), mode="RGB"):
    """Build an image with horizontal bands, one per (color, rows) entry."""
    img = Image.new(mode, size)
    y = 0
    for color, rows in colors:
        for row in range(y, y + rows):
            for x in range(size[0]):
                img.putpixel((x, row), color)
        y += rows
    return img


def image_bytes(img, fmt="PNG"):
    buffer = io.BytesIO()
    img.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def seed():
    return SEED


@pytest.fixture(scope="module")
def theme():
    """A theme derived from Google Blue with no custom colors."""
    return theme_from_seed(SEED)


@pytest.fixture
def red_png():
    """PNG bytes of a solid red image."""
    return image_bytes(make_image([((255, 0, 0), 40)]))


@pytest.fixture
def environment():
    """An environment that prefers dark and targets a fresh node."""
    node = StyleNode(":root")
    return Environment(prefers_dark=lambda: True, default_target=lambda: node)
