"""
Rainbow palette (full-saturation HSV hue sweep, red -> magenta)
"""
from functools import lru_cache

from ._ramp import ColorRamp, hsv_to_rgb

name = "rainbow"
description = "HSV hue 0 -> 5/6 at full saturation and value"


@lru_cache(maxsize=1)
def ramp() -> ColorRamp:
    return ColorRamp.from_function(lambda t: hsv_to_rgb(t * 5 / 6, 1.0, 1.0), name)
