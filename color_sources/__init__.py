"""
color_sources package
---------------------
Adapters that turn external resources into anchor colors:

* remote : COLOURlovers-style palette service, fetched by numeric ID
* image  : representative colors extracted from an image file or URL

Every failure is raised as a PaletteError subclass (see errors).
"""

from .errors import MalformedSource, PaletteError, SourceUnavailable, UnknownName

__all__ = ["MalformedSource", "PaletteError", "SourceUnavailable", "UnknownName"]
