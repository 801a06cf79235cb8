"""
Fetch palettes from a COLOURlovers-compatible service by numeric ID.

The service answers GET http://<host>/api/palette/<id> with line-oriented
XML; every line holding <hex>RRGGBB</hex> contributes one color.
"""
from __future__ import annotations

import logging
import re

import requests

from .errors import MalformedSource, SourceUnavailable

logger = logging.getLogger(__name__)

DEFAULT_HOST = "www.colourlovers.com"
DEFAULT_TIMEOUT = 10.0

_HEX_TAG = re.compile(r"<hex>([0-9A-Fa-f]{6})</hex>")

DEFAULT_USER_AGENT = "colourgen/0.1 (+https://pypi.org/project/colourgen/)"


def request_headers(user_agent: str = DEFAULT_USER_AGENT) -> dict:
    return {
        "Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8",
        "User-Agent": user_agent,
    }


def palette_url(palette_id: int, host: str = DEFAULT_HOST) -> str:
    return f"http://{host.rstrip('/')}/api/palette/{palette_id}"


def parse_hex_tags(body: str) -> list[str]:
    """Return "#RRGGBB" for each <hex> tag, in line order."""
    colors = []
    for line in body.splitlines():
        m = _HEX_TAG.search(line)
        if m:
            colors.append("#" + m.group(1).upper())
    return colors


def fetch_palette(
    palette_id: int,
    host: str = DEFAULT_HOST,
    timeout: float = DEFAULT_TIMEOUT,
    headers: dict | None = None,
) -> list[str]:
    """
    Download palette `palette_id` and return its colors.
    Raises SourceUnavailable on transport errors or non-2xx status, and
    MalformedSource when the body holds no <hex> tags.
    """
    url = palette_url(palette_id, host)
    logger.info("fetching remote palette %s", url)
    try:
        resp = requests.get(url, headers=headers or request_headers(), timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise SourceUnavailable(f"GET {url} failed: {e}", source=url) from e

    colors = parse_hex_tags(resp.text)
    if not colors:
        raise MalformedSource(f"No <hex> colors in response from {url}", source=url)
    logger.debug("remote palette %s: %s", palette_id, colors)
    return colors
