"""
Continuous color ramps and hex helpers shared by every palette source.

A ramp maps t in [0, 1] to a "#RRGGBB" string. Anchor ramps interpolate
linearly in RGB with the first anchor at t=0 and the last at t=1.
"""
from __future__ import annotations

from typing import Callable, Iterable, Sequence

import numpy as np
from PIL import ImageColor
from skimage import color


def normalize_hex(value) -> str:
    """Return an accepted color value as uppercase "#RRGGBB".

    Accepts hex strings (with or without "#", 3 or 6 digits, an alpha pair is
    dropped), CSS color names and (r, g, b) tuples in 0-255.
    """
    return _to_hex(parse_color(value))


def parse_color(value) -> np.ndarray:
    """Return RGB float[3] in 0-255 or raise ValueError."""
    if isinstance(value, str):
        txt = value.strip()
        if txt and txt[0] != "#" and len(txt) in (3, 6, 8) and _is_hex(txt):
            txt = "#" + txt
        if txt.startswith("#") and len(txt) == 9 and _is_hex(txt[1:]):
            txt = txt[:7]
        try:
            rgb = ImageColor.getrgb(txt)
        except ValueError as e:
            raise ValueError(f"invalid color: {value!r}") from e
        return np.array(rgb[:3], np.float64)

    if isinstance(value, (tuple, list, np.ndarray)) and len(value) in (3, 4):
        rgb = np.asarray(value[:3], np.float64)
        if np.all((rgb >= 0) & (rgb <= 255)):
            return rgb
    raise ValueError(f"invalid color: {value!r}")


def _is_hex(txt: str) -> bool:
    return all(c in "0123456789abcdefABCDEF" for c in txt)


def _to_hex(rgb: np.ndarray) -> str:
    r, g, b = np.clip(np.rint(rgb), 0, 255).astype(int)
    return f"#{r:02X}{g:02X}{b:02X}"


class ColorRamp:
    """Deterministic t -> "#RRGGBB" function.

    Build it with :meth:`from_anchors` for interpolated palettes or
    :meth:`from_function` for ramps computed directly from t.
    """

    def __init__(
        self,
        rgb_fn: Callable[[np.ndarray], np.ndarray],
        name: str = "",
        anchors: tuple[str, ...] = (),
    ):
        # rgb_fn: float[k] -> float[k,3] in 0-255
        self._rgb_fn = rgb_fn
        self.name = name
        self.anchors = anchors

    @classmethod
    def from_anchors(cls, colors: Sequence, name: str = "") -> "ColorRamp":
        """Piecewise-linear ramp through `colors` in order."""
        if len(colors) == 0:
            raise ValueError("at least one anchor color is required")
        anchors = np.stack([parse_color(c) for c in colors])
        if len(anchors) == 1:
            anchors = np.vstack([anchors, anchors])
        x = np.linspace(0.0, 1.0, len(anchors))

        def rgb_fn(t: np.ndarray) -> np.ndarray:
            return np.stack([np.interp(t, x, anchors[:, i]) for i in range(3)], axis=1)

        return cls(rgb_fn, name, tuple(_to_hex(a) for a in anchors))

    @classmethod
    def from_function(cls, fn01: Callable[[np.ndarray], np.ndarray], name: str = "") -> "ColorRamp":
        """Wrap a vectorized t -> RGB float[k,3] in 0-1."""
        return cls(lambda t: np.asarray(fn01(t), np.float64)[:, :3] * 255.0, name)

    def rgb(self, t: Iterable[float]) -> np.ndarray:
        ts = np.clip(np.atleast_1d(np.asarray(t, np.float64)), 0.0, 1.0)
        return self._rgb_fn(ts)

    def colors(self, t: Iterable[float]) -> list[str]:
        """Evaluate the ramp at every parameter in `t`, in order."""
        return [_to_hex(row) for row in self.rgb(t)]

    def __call__(self, t: float) -> str:
        return self.colors([t])[0]

    def __repr__(self) -> str:
        return f"ColorRamp({self.name!r})"


def hsv_to_rgb(h, s, v) -> np.ndarray:
    """Vectorized HSV (each 0-1) -> RGB float[k,3] in 0-1."""
    h, s, v = np.broadcast_arrays(
        np.asarray(h, np.float64), np.asarray(s, np.float64), np.asarray(v, np.float64)
    )
    hsv = np.stack([np.mod(h, 1.0), s, v], axis=-1)
    return color.hsv2rgb(hsv.reshape(-1, 1, 3)).reshape(-1, 3)
