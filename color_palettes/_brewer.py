"""
ColorBrewer table: categorical palette name -> ordered anchor colors.

Loaded from the bundled brewer_list.json on first use, exactly once per
process, and exposed read-only afterwards.
"""
from __future__ import annotations

import json
import logging
import threading
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ._ramp import normalize_hex

logger = logging.getLogger(__name__)

BREWER_PATH = Path(__file__).with_name("brewer_list.json")

_LOAD_LOCK = threading.Lock()


class BrewerTableError(RuntimeError):
    """The bundled Brewer dataset is missing or malformed."""


def _load(path: Path) -> Mapping[str, Tuple[str, ...]]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise BrewerTableError(f"Cannot load Brewer table from {path}: {e}") from e
    if not isinstance(raw, dict) or not raw:
        raise BrewerTableError(f"{path} must hold a non-empty JSON object")

    table = {}
    for name, colors in raw.items():
        if not isinstance(colors, list) or len(colors) < 3:
            raise BrewerTableError(f"Brewer palette {name!r} needs at least 3 colors")
        try:
            table[name] = tuple(normalize_hex(c) for c in colors)
        except ValueError as e:
            raise BrewerTableError(f"Brewer palette {name!r}: {e}") from e
    logger.debug("loaded %d Brewer palettes from %s", len(table), path)
    return MappingProxyType(table)


@lru_cache(maxsize=1)
def _cached_table() -> Mapping[str, Tuple[str, ...]]:
    return _load(BREWER_PATH)


def brewer_table() -> Mapping[str, Tuple[str, ...]]:
    """Return the process-wide, read-only Brewer table."""
    # lru_cache alone may run the loader twice under a race
    with _LOAD_LOCK:
        return _cached_table()


def brewer_names() -> list[str]:
    return list(brewer_table())


def lookup(name) -> Optional[Tuple[str, ...]]:
    """Case-insensitive exact match; None when no key matches."""
    key = canonical_name(name)
    return None if key is None else brewer_table()[key]


def canonical_name(name) -> Optional[str]:
    """Return the table key matching `name` case-insensitively."""
    if not isinstance(name, str):
        return None
    folded = name.casefold()
    return next((k for k in brewer_table() if k.casefold() == folded), None)
