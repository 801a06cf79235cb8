"""
Terrain palette (green lowlands -> tan hills -> near-white peaks)
"""
import numpy as np
from functools import lru_cache

from ._ramp import ColorRamp, hsv_to_rgb

name = "terrain.colors"
description = "Piecewise HSV: green -> tan -> off-white"

# (hue, saturation, value) at t = 0, 0.5, 1
_HSV_PTS = np.array([
    (4 / 12, 1.0, 0.65),
    (2 / 12, 1.0, 0.90),
    (0 / 12, 0.0, 0.95),
])


def _terrain(t: np.ndarray) -> np.ndarray:
    x = np.linspace(0, 1, len(_HSV_PTS))
    h, s, v = (np.interp(t, x, _HSV_PTS[:, i]) for i in range(3))
    return hsv_to_rgb(h, s, v)


@lru_cache(maxsize=1)
def ramp() -> ColorRamp:
    return ColorRamp.from_function(_terrain, name)
