import asyncio
import io
import math
import os

import numpy as np
import requests
from PIL import Image
from sklearn.cluster import KMeans

from .color import argb_from_rgb, difference_degrees, sanitize_degrees_int
from .hct import Hct

N_COLORS = 16
THUMBNAIL_SIZE = (300, 300)

# Scoring: how much of the image a hue covers vs. how colorful it is
TARGET_CHROMA = 48.0
WEIGHT_PROPORTION = 0.7
WEIGHT_CHROMA_ABOVE = 0.3
WEIGHT_CHROMA_BELOW = 0.1
CUTOFF_CHROMA = 15.0
CUTOFF_EXCITED_PROPORTION = 0.01
HUE_NEIGHBORHOOD = 15
MIN_HUE_DIFFERENCE = 15.0

# Google Blue, used when no color in the image is suitable
FALLBACK_SEED = 0xFF4285F4


def extract_colors(image, n_colors=N_COLORS):
    """Extract dominant colors using k-means clustering.

    Transparent pixels are ignored.

    Args:
        image: PIL image
        n_colors: Maximum number of clusters

    Returns:
        list of (argb, proportion) tuples, most common first
    """
    img = image.convert("RGBA")
    img.thumbnail(THUMBNAIL_SIZE)
    pixels = np.array(img).reshape(-1, 4)
    pixels = pixels[pixels[:, 3] == 255][:, :3]

    if len(pixels) == 0:
        return []

    n_clusters = min(n_colors, len(np.unique(pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    labels = kmeans.fit_predict(pixels)
    counts = np.bincount(labels, minlength=n_clusters)

    colors = []
    for center, count in zip(kmeans.cluster_centers_, counts):
        if count == 0:
            continue
        r, g, b = (int(round(channel)) for channel in center)
        colors.append((argb_from_rgb(r, g, b), count / len(pixels)))

    return sorted(colors, key=lambda item: item[1], reverse=True)


def score(colors):
    """Rank colors by how well they would work as a theme seed.

    A color scores well when its hue neighborhood covers much of the image
    and its chroma is close to or above TARGET_CHROMA. Grays and hues that
    barely appear are dropped, as are hues too close to a better candidate.

    Args:
        colors: list of (argb, proportion) tuples

    Returns:
        list of ARGB ints, best first; [FALLBACK_SEED] if nothing qualifies
    """
    hue_proportions = [0.0] * 360
    candidates = []
    for argb, proportion in colors:
        hct = Hct.from_int(argb)
        hue = sanitize_degrees_int(math.floor(hct.hue))
        hue_proportions[hue] += proportion
        candidates.append((argb, hct, hue))

    scored = []
    for argb, hct, hue in candidates:
        excited_proportion = sum(
            hue_proportions[sanitize_degrees_int(hue + offset)]
            for offset in range(-HUE_NEIGHBORHOOD, HUE_NEIGHBORHOOD + 1)
        )
        if hct.chroma < CUTOFF_CHROMA or excited_proportion <= CUTOFF_EXCITED_PROPORTION:
            continue

        proportion_score = excited_proportion * 100.0 * WEIGHT_PROPORTION
        chroma_weight = (
            WEIGHT_CHROMA_BELOW if hct.chroma < TARGET_CHROMA else WEIGHT_CHROMA_ABOVE
        )
        chroma_score = (hct.chroma - TARGET_CHROMA) * chroma_weight
        scored.append((proportion_score + chroma_score, argb, hct))

    scored.sort(key=lambda item: item[0], reverse=True)

    chosen = []
    for _, argb, hct in scored:
        if all(
            difference_degrees(hct.hue, other.hue) >= MIN_HUE_DIFFERENCE
            for _, other in chosen
        ):
            chosen.append((argb, hct))

    if not chosen:
        return [FALLBACK_SEED]
    return [argb for argb, _ in chosen]


def source_color_from_image(image):
    """The color most suitable for creating a theme from a PIL image."""
    return score(extract_colors(image))[0]


def load_image(image):
    """Open an image given as bytes, a file path, an http(s) URL or a PIL image.

    Raises:
        PIL.UnidentifiedImageError: if the data is not a decodable image
        FileNotFoundError: if a path does not exist
        requests.HTTPError: if a URL cannot be fetched
    """
    if isinstance(image, Image.Image):
        return image

    if isinstance(image, (bytes, bytearray, memoryview)):
        source = io.BytesIO(bytes(image))
    elif isinstance(image, str) and image.startswith(("http://", "https://")):
        response = requests.get(image)
        response.raise_for_status()
        source = io.BytesIO(response.content)
    else:
        source = os.fspath(image)

    with Image.open(source) as img:
        return img.copy()


def _seed_from_image(image):
    return source_color_from_image(load_image(image))


async def seed_from_image(image):
    """Extract a seed color from an image without blocking the event loop.

    Decoding, fetching and clustering run in a worker thread.

    Args:
        image: bytes, file path, http(s) URL or PIL image

    Returns:
        ARGB seed color
    """
    return await asyncio.to_thread(_seed_from_image, image)
