"""
Extract a representative palette from an image (local path or http(s) URL).

Pixels are clustered with k-means; the cluster centers, ordered dark to light
by CIELAB L*, become the anchors of a ramp.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from urllib.parse import urlparse

import numpy as np
import requests
from PIL import Image, UnidentifiedImageError
from scipy.cluster.vq import kmeans2
from skimage import color

from .errors import MalformedSource, SourceUnavailable

logger = logging.getLogger(__name__)

DEFAULT_COLOURS = 7
DEFAULT_SIZE = 100
DEFAULT_TIMEOUT = 10.0
KMEANS_SEED = 333


def is_url(source) -> bool:
    return isinstance(source, str) and urlparse(source).scheme in ("http", "https")


def looks_like_image_source(source) -> bool:
    """True for http(s) URLs and existing local files."""
    if isinstance(source, Path):
        return source.is_file()
    if not isinstance(source, str) or not source:
        return False
    if is_url(source):
        return True
    try:
        return _local_path(source).is_file()
    except (OSError, RuntimeError):
        # RuntimeError: "~user" with no such home directory
        return False


def _local_path(source) -> Path:
    return Path(source).expanduser()


def load_image(source, max_edge: int = DEFAULT_SIZE, timeout: float = DEFAULT_TIMEOUT) -> Image.Image:
    """Open `source`, convert to RGB and shrink so the longest edge <= max_edge."""
    label = str(source)
    try:
        if is_url(source):
            logger.info("downloading image %s", label)
            resp = requests.get(source, timeout=timeout)
            resp.raise_for_status()
            img = Image.open(io.BytesIO(resp.content))
        else:
            img = Image.open(_local_path(source))
        img = img.convert("RGB")
    except requests.RequestException as e:
        raise SourceUnavailable(f"Cannot download {label}: {e}", source=label) from e
    except UnidentifiedImageError as e:
        raise MalformedSource(f"Unsupported image format: {label}", source=label) from e
    except Image.DecompressionBombError as e:
        raise MalformedSource(f"Image too large: {label}: {e}", source=label) from e
    except OSError as e:
        raise SourceUnavailable(f"Cannot read image {label}: {e}", source=label) from e
    except RuntimeError as e:
        raise SourceUnavailable(f"Cannot resolve path {label}: {e}", source=label) from e

    img.thumbnail((max_edge, max_edge))
    return img


def dominant_colors(img: Image.Image, k: int = DEFAULT_COLOURS) -> np.ndarray:
    """Return up to k RGB float[m,3] (0-255) cluster centers, dark to light."""
    pixels = np.asarray(img, np.float64).reshape(-1, 3)
    if pixels.size == 0:
        raise MalformedSource("Image has no pixels")

    unique = np.unique(pixels, axis=0)
    if len(unique) <= k:
        centers = unique
    else:
        centers, labels = kmeans2(pixels, k, minit="++", seed=KMEANS_SEED)
        # drop clusters that ended up empty
        centers = centers[np.bincount(labels, minlength=k) > 0]

    lightness = color.rgb2lab(centers.reshape(-1, 1, 3) / 255.0).reshape(-1, 3)[:, 0]
    return centers[np.argsort(lightness, kind="stable")]


def image_palette(
    source,
    k: int = DEFAULT_COLOURS,
    max_edge: int = DEFAULT_SIZE,
    timeout: float = DEFAULT_TIMEOUT,
) -> list[str]:
    """Return "#RRGGBB" anchors extracted from the image at `source`."""
    centers = dominant_colors(load_image(source, max_edge, timeout), k)
    rgb = np.clip(np.rint(centers), 0, 255).astype(int)
    return [f"#{r:02X}{g:02X}{b:02X}" for r, g, b in rgb]
