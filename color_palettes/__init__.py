"""
color_palettes package
----------------------
Named continuous color ramps, discovered automatically: drop a *.py file in
this package and it is registered. Modules whose name starts with "_" are
helpers and are skipped.

Each module must provide one of:

* ramp() -> ColorRamp            (a single palette)
* RAMPS : dict[str, () -> ColorRamp]   (a family of palettes)

Optionally:
    name        : registry name for ramp() (defaults to the module name)
    description : short description (str)

A module that raises ImportError (missing optional library) is not fatal:
the names listed for it in _OPTIONAL_FAMILIES are reported as unavailable.
"""

from functools import lru_cache
import importlib
import logging
import pkgutil

from ._ramp import ColorRamp, normalize_hex, parse_color

logger = logging.getLogger(__name__)

# module name -> palette names it provides when its dependencies are present
_OPTIONAL_FAMILIES = {
    "viridis": ("viridis", "magma", "plasma", "inferno", "cividis"),
}


def _discover():
    """Scan the package and return ({name: factory}, {name: reason})."""
    factories = {}
    missing = {}
    for _, modname, ispkg in pkgutil.iter_modules(__path__):
        if ispkg or modname.startswith("_"):
            continue
        try:
            mod = importlib.import_module(f"{__name__}.{modname}")
        except ImportError as e:
            if modname not in _OPTIONAL_FAMILIES:
                raise
            logger.debug("palette module %s unavailable: %s", modname, e)
            for name in _OPTIONAL_FAMILIES[modname]:
                missing[name] = str(e)
            continue

        if hasattr(mod, "ramp") and callable(mod.ramp):
            factories[getattr(mod, "name", modname)] = mod.ramp
        elif isinstance(getattr(mod, "RAMPS", None), dict):
            factories.update(mod.RAMPS)
        else:
            raise AttributeError(f"{modname} must expose ramp() or a RAMPS dict.")
    return factories, missing


_FACTORIES, _MISSING = _discover()

# ------------------------------------------------------------
# Public API
# ------------------------------------------------------------
def list_palettes():
    """All recognized ramp names, including ones whose library is missing."""
    return sorted({*_FACTORIES, *_MISSING})


def available_palettes():
    """Ramp names that can actually be built in this environment."""
    return sorted(_FACTORIES)


def unavailable_reason(name: str):
    """Why a recognized ramp cannot be built, or None if it can."""
    return _MISSING.get(name)


def is_named_palette(name) -> bool:
    """Case-sensitive membership test against list_palettes()."""
    return isinstance(name, str) and (name in _FACTORIES or name in _MISSING)


@lru_cache(maxsize=None)
def get_palette(name: str) -> ColorRamp:
    """
    Return the ColorRamp registered under `name`.
    - KeyError if the name is not recognized
    - ImportError if it belongs to a family whose library is missing
    """
    if name in _MISSING:
        raise ImportError(f"Palette '{name}' is unavailable: {_MISSING[name]}")
    if name not in _FACTORIES:
        raise KeyError(f"Unknown palette '{name}'. Available: {list_palettes()}")
    return _FACTORIES[name]()


__all__ = [
    "ColorRamp",
    "available_palettes",
    "get_palette",
    "is_named_palette",
    "list_palettes",
    "normalize_hex",
    "parse_color",
    "unavailable_reason",
]
