"""
Fallback palettes used when a descriptor is absent or cannot be resolved.
"""
from functools import lru_cache

from ._ramp import ColorRamp

# Tableau-style orange -> blue diverging
ORANGE_BLUE = (
    "#9E3D22", "#D35F1A", "#F6A55E", "#F1F0EC", "#A0C3DE", "#5A8FC0", "#2B5C8A",
)

# Earth -> emerald diverging
EARTH_EMERALD = (
    "#7F4F24", "#A6763C", "#D2B48C", "#EDE8DF", "#8FCFB0", "#3AA17E", "#00704A",
)


@lru_cache(maxsize=2)
def default_ramp(default: bool = True) -> ColorRamp:
    """Orange->blue when `default` is true, earth->emerald otherwise."""
    if default:
        return ColorRamp.from_anchors(ORANGE_BLUE, "orange-blue")
    return ColorRamp.from_anchors(EARTH_EMERALD, "earth-emerald")
