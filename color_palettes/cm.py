"""
Cyan-magenta palette (diverging through white)
"""
import numpy as np
from functools import lru_cache

from ._ramp import ColorRamp, hsv_to_rgb

name = "cm.colors"
description = "Pale cyan -> white -> pale magenta"


def _cm(t: np.ndarray) -> np.ndarray:
    low = t < 0.5
    h = np.where(low, 6 / 12, 10 / 12)
    s = np.abs(2 * t - 1) * 0.5
    return hsv_to_rgb(h, s, 1.0)


@lru_cache(maxsize=1)
def ramp() -> ColorRamp:
    return ColorRamp.from_function(_cm, name)
