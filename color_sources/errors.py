"""
Failures a palette source can report. The resolver turns every one of them
into a fallback to the default palette; none reaches make_palette() callers.
"""


class PaletteError(Exception):
    """A descriptor could not be turned into a color ramp."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(message)
        self.source = source


class SourceUnavailable(PaletteError):
    """Network, file or image fetch failure."""


class MalformedSource(PaletteError):
    """Color data was fetched but could not be parsed."""


class UnknownName(PaletteError):
    """The descriptor names no known ramp, table entry or resource."""
