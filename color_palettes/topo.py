"""
Topographic palette (deep blue water, greens, then pale yellow highlands)
"""
import numpy as np
from functools import lru_cache

from ._ramp import ColorRamp, hsv_to_rgb

name = "topo.colors"
description = "Three HSV hue bands in equal thirds"

# (h0, h1, s0, s1) per third
_BANDS = (
    (43 / 60, 31 / 60, 1.0, 1.0),
    (23 / 60, 11 / 60, 1.0, 1.0),
    (10 / 60, 6 / 60, 1.0, 0.3),
)


def _topo(t: np.ndarray) -> np.ndarray:
    band = np.minimum((t * 3).astype(int), 2)
    u = t * 3 - band
    b = np.array(_BANDS)[band]
    h = b[:, 0] + u * (b[:, 1] - b[:, 0])
    s = b[:, 2] + u * (b[:, 3] - b[:, 2])
    return hsv_to_rgb(h, s, 1.0)


@lru_cache(maxsize=1)
def ramp() -> ColorRamp:
    return ColorRamp.from_function(_topo, name)
