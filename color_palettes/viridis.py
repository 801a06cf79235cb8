"""
Viridis family of perceptually-uniform palettes (viridis, magma, plasma, inferno, cividis)

* At the lowest value (0) → darkest color; at the highest value → lightest
* Retrieved from Matplotlib's colormap registry. If Matplotlib isn't installed
  this module raises an informative ImportError and the registry marks the
  family as unavailable.
"""
import numpy as np
from functools import lru_cache

try:
    import matplotlib
except ImportError as e:
    # If Matplotlib isn't installed, inform the user how to install it
    raise ImportError(
        "The viridis palettes require matplotlib. "
        "Please install it with: pip install matplotlib"
    ) from e

from ._ramp import ColorRamp

description = "Matplotlib viridis-family colormaps"

NAMES = ("viridis", "magma", "plasma", "inferno", "cividis")


@lru_cache(maxsize=None)
def _ramp(cmap_name: str) -> ColorRamp:
    cmap = matplotlib.colormaps[cmap_name]
    # cmap() returns RGBA in 0-1; ColorRamp drops the alpha channel.
    return ColorRamp.from_function(lambda t: cmap(np.asarray(t)), cmap_name)


RAMPS = {n: (lambda n=n: _ramp(n)) for n in NAMES}
