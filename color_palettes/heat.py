"""
Heat palette (red -> yellow, then desaturating toward pale yellow)
"""
import numpy as np
from functools import lru_cache

from ._ramp import ColorRamp, hsv_to_rgb

name = "heat.colors"
description = "Red -> yellow over the first 3/4, yellow -> pale yellow over the rest"

_SPLIT = 0.75


def _heat(t: np.ndarray) -> np.ndarray:
    hot = t <= _SPLIT
    u = (t - _SPLIT) / (1.0 - _SPLIT)
    h = np.where(hot, t / _SPLIT / 6, 1 / 6)
    s = np.where(hot, 1.0, 1.0 - u * (1.0 - 1 / 8))
    return hsv_to_rgb(h, s, 1.0)


@lru_cache(maxsize=1)
def ramp() -> ColorRamp:
    return ColorRamp.from_function(_heat, name)
