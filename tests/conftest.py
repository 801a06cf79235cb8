"""Shared fixtures: network stubs and a tiny on-disk image."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests
from PIL import Image

import color_palettes
from color_palettes import _brewer
from tests._utils.fakes import FakeResponse


@pytest.fixture()
def fake_get(monkeypatch):
    """Replace requests.get with a stub returning the queued response."""
    calls: list[dict] = []
    state: dict = {"response": FakeResponse()}

    def _get(url, **kwargs):
        calls.append({"url": url, **kwargs})
        resp = state["response"]
        if isinstance(resp, Exception):
            raise resp
        return resp

    monkeypatch.setattr(requests, "get", _get)

    def set_response(resp) -> list[dict]:
        state["response"] = resp
        return calls

    return set_response


@pytest.fixture()
def no_network(fake_get):
    fake_get(requests.ConnectionError("network disabled in tests"))


@pytest.fixture()
def stripes_png(tmp_path: Path) -> Path:
    """30x10 PNG: black, red and white vertical stripes."""
    img = Image.new("RGB", (30, 10), "#FFFFFF")
    for x in range(10):
        for y in range(10):
            img.putpixel((x, y), (0, 0, 0))
            img.putpixel((x + 10, y), (255, 0, 0))
    path = tmp_path / "stripes.png"
    img.save(path)
    return path


@pytest.fixture()
def fresh_brewer_cache():
    _brewer._cached_table.cache_clear()
    yield
    _brewer._cached_table.cache_clear()


@pytest.fixture()
def without_viridis(monkeypatch):
    """Pretend matplotlib is missing for the viridis family."""
    color_palettes.get_palette.cache_clear()
    for name in ("viridis", "magma", "plasma", "inferno", "cividis"):
        monkeypatch.delitem(color_palettes._FACTORIES, name, raising=False)
        monkeypatch.setitem(color_palettes._MISSING, name, "No module named 'matplotlib'")
    yield
    color_palettes.get_palette.cache_clear()
