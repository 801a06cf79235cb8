"""
Gamma-corrected grayscale palette
"""
import numpy as np
from functools import lru_cache

from ._ramp import ColorRamp

name = "gray.colors"
description = "Grey 0.3 -> 0.9, evenly spaced after gamma 2.2"

_START, _END, _GAMMA = 0.3, 0.9, 2.2


def _gray(t: np.ndarray) -> np.ndarray:
    lo, hi = _START ** _GAMMA, _END ** _GAMMA
    level = (lo + t * (hi - lo)) ** (1 / _GAMMA)
    return np.repeat(level[:, None], 3, axis=1)


@lru_cache(maxsize=1)
def ramp() -> ColorRamp:
    return ColorRamp.from_function(_gray, name)
