#!/usr/bin/env python3
"""
colourgen: turn a color descriptor into n discrete chart colors.

A descriptor may be a named ramp ("rainbow", "viridis"), a ColorBrewer name
("Spectral", any letter case), a COLOURlovers palette ID (int), a list of
colors, an image path/URL, or nothing. It is classified into exactly one
source, turned into a continuous ramp and sampled evenly. Sources that cannot
be resolved fall back to the default diverging palette; make_palette() never
fails on descriptor input.

Usage:
  # Seven colors from a Brewer palette:
  python colourgen.py make Spectral

  # Custom anchors, 5 colors, reversed, with a swatch image:
  python colourgen.py make "#CAF60D" "#18D33A" "#4255EC" -n 5 --reverse --preview out.png

  # Remote palette by ID:
  python colourgen.py make 3914747

  # List named ramps and Brewer palettes:
  python colourgen.py list
"""

from __future__ import annotations

import argparse
import logging
import numbers
import os
import sys
from dataclasses import dataclass, field, replace
from typing import Any, Callable, NamedTuple, Optional, Sequence, Union

import numpy as np

from color_palettes import ColorRamp, get_palette, is_named_palette, list_palettes
from color_palettes._brewer import brewer_names, canonical_name, lookup
from color_palettes._defaults import default_ramp
from color_sources import MalformedSource, PaletteError, UnknownName
from color_sources import image as image_source
from color_sources import remote as remote_source

logger = logging.getLogger(__name__)

SHUFFLE_SEED = 333
DEFAULT_N = 7

# ---------------------------------------------------------------------
# Settings: defaults < environment < explicit arguments
# ---------------------------------------------------------------------

def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = float(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not a number", name, raw)
        return default
    return val if val > 0 else default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not an integer", name, raw)
        return default
    return val if val > 0 else default


@dataclass(frozen=True)
class Settings:
    """Knobs for the sources that touch the outside world."""

    service_host: str = remote_source.DEFAULT_HOST
    timeout: float = remote_source.DEFAULT_TIMEOUT
    image_colours: int = image_source.DEFAULT_COLOURS
    image_size: int = image_source.DEFAULT_SIZE
    user_agent: str = remote_source.DEFAULT_USER_AGENT

    @classmethod
    def from_env(cls) -> "Settings":
        """Read COLOURGEN_* variables; invalid values keep the defaults."""
        return cls(
            service_host=os.getenv("COLOURGEN_SERVICE_HOST") or cls.service_host,
            timeout=_env_float("COLOURGEN_TIMEOUT", cls.timeout),
            image_colours=_env_int("COLOURGEN_IMAGE_COLOURS", cls.image_colours),
            image_size=_env_int("COLOURGEN_IMAGE_SIZE", cls.image_size),
            user_agent=os.getenv("COLOURGEN_USER_AGENT") or cls.user_agent,
        )


def setup_logging(verbose: bool = False) -> None:
    """Apply a minimal logging config once; no-op if the app configured one."""
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

# ---------------------------------------------------------------------
# Descriptors: every raw input is classified into exactly one of these
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class NamedFunction:
    name: str


@dataclass(frozen=True)
class CategoricalName:
    name: str  # canonical Brewer key


@dataclass(frozen=True)
class RemoteID:
    id: int


@dataclass(frozen=True)
class ColorList:
    colors: tuple


@dataclass(frozen=True)
class ImageSource:
    source: str


@dataclass(frozen=True)
class Unrecognized:
    value: Any


@dataclass(frozen=True)
class Absent:
    pass


ColorDescriptor = Union[
    NamedFunction, CategoricalName, RemoteID, ColorList, ImageSource, Unrecognized, Absent
]


def classify(raw) -> ColorDescriptor:
    """
    Classify a raw descriptor. Priority: color list > named ramp >
    Brewer name > numeric ID > image path/URL > unrecognized.
    """
    if raw is None:
        return Absent()

    if isinstance(raw, np.ndarray) and raw.ndim == 0:
        return classify(raw.item())

    if isinstance(raw, (list, tuple, np.ndarray)):
        items = list(raw)
        if not items:
            return Absent()
        if len(items) == 1:
            return classify(items[0])
        return ColorList(tuple(items))

    if isinstance(raw, numbers.Number) and not isinstance(raw, bool):
        if isinstance(raw, numbers.Integral):
            return RemoteID(int(raw))
        if isinstance(raw, numbers.Real) and float(raw).is_integer():
            return RemoteID(int(raw))
        return Unrecognized(raw)

    if isinstance(raw, os.PathLike):
        return ImageSource(os.fspath(raw))

    if isinstance(raw, str):
        if not raw.strip():
            return Absent()
        if is_named_palette(raw):
            return NamedFunction(raw)
        key = canonical_name(raw)
        if key is not None:
            return CategoricalName(key)
        if image_source.looks_like_image_source(raw):
            return ImageSource(raw)

    return Unrecognized(raw)

# ---------------------------------------------------------------------
# Strategies: descriptor -> ColorRamp, failures carried in a Resolution
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Resolution:
    """Outcome of one strategy: a ramp, or the error that prevented one."""

    strategy: str
    ramp: Optional[ColorRamp] = None
    error: Optional[PaletteError] = None

    @property
    def ok(self) -> bool:
        return self.ramp is not None

    def or_else(self, fallback: ColorRamp) -> ColorRamp:
        return self.ramp if self.ramp is not None else fallback


class Strategy:
    """Base class: subclasses implement _build() and raise PaletteError."""

    name = "strategy"

    def try_resolve(self, descriptor, default: bool = True, settings: Optional[Settings] = None) -> Resolution:
        try:
            ramp = self._build(descriptor, settings or Settings())
        except PaletteError as e:
            return Resolution(self.name, error=e)
        return Resolution(self.name, ramp=ramp)

    def _build(self, descriptor, settings: Settings) -> ColorRamp:
        raise NotImplementedError


class VectorStrategy(Strategy):
    name = "vector"

    def _build(self, descriptor: ColorList, settings):
        try:
            return ColorRamp.from_anchors(descriptor.colors, "vector")
        except (ValueError, TypeError) as e:
            raise MalformedSource(str(e)) from e


class NamedRampStrategy(Strategy):
    name = "named"

    def _build(self, descriptor: NamedFunction, settings):
        try:
            return get_palette(descriptor.name)
        except (ImportError, KeyError) as e:
            raise UnknownName(str(e), source=descriptor.name) from e


class CategoricalTableStrategy(Strategy):
    name = "brewer"

    def _build(self, descriptor: CategoricalName, settings):
        anchors = lookup(descriptor.name)
        if anchors is None:
            raise UnknownName(f"No Brewer palette named {descriptor.name!r}")
        return ColorRamp.from_anchors(anchors, descriptor.name)


class RemoteIDStrategy(Strategy):
    name = "remote"

    def _build(self, descriptor: RemoteID, settings):
        colors = remote_source.fetch_palette(
            descriptor.id,
            host=settings.service_host,
            timeout=settings.timeout,
            headers=remote_source.request_headers(settings.user_agent),
        )
        return ColorRamp.from_anchors(colors, f"remote:{descriptor.id}")


class ImageStrategy(Strategy):
    name = "image"

    def _build(self, descriptor, settings):
        if isinstance(descriptor, Unrecognized):
            raise UnknownName(f"{descriptor.value!r} is not a palette name, color list or image")
        anchors = image_source.image_palette(
            descriptor.source,
            k=settings.image_colours,
            max_edge=settings.image_size,
            timeout=settings.timeout,
        )
        return ColorRamp.from_anchors(anchors, descriptor.source)


class DefaultStrategy(Strategy):
    name = "default"

    def try_resolve(self, descriptor=None, default: bool = True, settings=None) -> Resolution:
        return Resolution(self.name, ramp=default_ramp(bool(default)))


DEFAULT_STRATEGY = DefaultStrategy()

# descriptor type -> strategy; classify() already applied the priority order
_STRATEGIES: dict[type, Strategy] = {
    ColorList: VectorStrategy(),
    NamedFunction: NamedRampStrategy(),
    CategoricalName: CategoricalTableStrategy(),
    RemoteID: RemoteIDStrategy(),
    ImageSource: ImageStrategy(),
    Absent: DEFAULT_STRATEGY,
}
_STRATEGIES[Unrecognized] = _STRATEGIES[ImageSource]


def strategy_for(descriptor: ColorDescriptor) -> Strategy:
    return _STRATEGIES[type(descriptor)]

# ---------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------

class Resolved(NamedTuple):
    ramp: ColorRamp
    source: str
    descriptor: ColorDescriptor
    fallback_reason: Optional[str]


def resolve_color_function(colour=None, default: bool = True, settings: Optional[Settings] = None) -> Resolved:
    """Return the continuous ramp for `colour`, or the default ramp on failure."""
    settings = settings or Settings.from_env()
    descriptor = classify(colour)
    strategy = strategy_for(descriptor)
    logger.debug("descriptor %r -> %s strategy", descriptor, strategy.name)

    result = strategy.try_resolve(descriptor, default, settings)
    if result.ok:
        return Resolved(result.ramp, result.strategy, descriptor, None)

    logger.warning(
        "%s strategy could not resolve %r: %s; using default palette",
        result.strategy, colour, result.error,
    )
    fallback = DEFAULT_STRATEGY.try_resolve(descriptor, default, settings).ramp
    return Resolved(result.or_else(fallback), DEFAULT_STRATEGY.name, descriptor, str(result.error))

# ---------------------------------------------------------------------
# Sampler
# ---------------------------------------------------------------------

def _check_n(n) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    return int(n)


def sample_colors(
    fn: Callable[[float], str],
    n: int,
    reverse: bool = False,
    shuffle: bool = False,
    seed: int = SHUFFLE_SEED,
) -> list[str]:
    """
    Evaluate `fn` at n evenly spaced points of [0, 1] (t=0 alone when n == 1).

    reverse flips the sequence. shuffle permutes the *unreversed* sequence
    with a fixed seed, so when both are set the shuffle wins.
    """
    n = _check_n(n)
    ts = np.linspace(0.0, 1.0, n) if n > 1 else np.zeros(1)
    if isinstance(fn, ColorRamp):
        base = fn.colors(ts)
    else:
        base = [fn(float(t)) for t in ts]

    colors = base[::-1] if reverse else list(base)
    if shuffle:
        if reverse:
            logger.debug("shuffle requested with reverse; reverse has no effect")
        order = np.random.default_rng(seed).permutation(n)
        colors = [base[i] for i in order]
    return colors

# ---------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------

PREVIEW_BACKGROUND = "#BFBFBF"


def render_preview(colors: Sequence[str]):
    """Bar swatch of `colors` labelled with their hex codes; returns a Figure."""
    from matplotlib.figure import Figure

    n = len(colors)
    fig = Figure(figsize=(max(3.0, 0.8 * n), 3.0), facecolor=PREVIEW_BACKGROUND)
    ax = fig.add_subplot()
    ax.set_facecolor(PREVIEW_BACKGROUND)
    ax.bar(range(n), [1] * n, width=1.0, color=list(colors), edgecolor="none")
    ax.set_xticks(range(n))
    ax.set_xticklabels(colors, rotation=90)
    ax.set_yticks([])
    ax.set_xlim(-0.5, n - 0.5)
    for spine in ax.spines.values():
        spine.set_visible(False)
    fig.subplots_adjust(bottom=0.35, left=0.05, right=0.95, top=0.95)
    return fig

# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class Palette:
    """n sampled colors plus the options that produced them."""

    colors: tuple
    n: int
    reverse: bool = False
    shuffle: bool = False
    default: bool = True
    source: str = "default"
    descriptor: Any = field(default_factory=Absent)
    fallback_reason: Optional[str] = None
    preview: Any = field(default=None, compare=False, repr=False)

    @property
    def fell_back(self) -> bool:
        return self.fallback_reason is not None

    def to_list(self) -> list[str]:
        return list(self.colors)

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self):
        return iter(self.colors)


def make_palette(
    colour=None,
    n: int = DEFAULT_N,
    reverse: bool = False,
    shuffle: bool = False,
    default: bool = True,
    plot: bool = False,
    settings: Optional[Settings] = None,
) -> Palette:
    """
    Resolve `colour` and sample n colors from it.

    Never raises for bad or unreachable descriptors; those fall back to the
    default palette (orange->blue if `default`, earth->emerald otherwise).
    Only an invalid `n` or a broken bundled Brewer table raise.
    """
    n = _check_n(n)
    resolved = resolve_color_function(colour, default, settings)
    colors = sample_colors(resolved.ramp, n, reverse=reverse, shuffle=shuffle)
    return Palette(
        colors=tuple(colors),
        n=n,
        reverse=bool(reverse),
        shuffle=bool(shuffle),
        default=bool(default),
        source=resolved.source,
        descriptor=resolved.descriptor,
        fallback_reason=resolved.fallback_reason,
        preview=render_preview(colors) if plot else None,
    )


resolve_palette = make_palette

# ---------------------------------------------------------------------
# CLI: Argument parsing and main
# ---------------------------------------------------------------------

def descriptor_from_args(values: Sequence[str]):
    """CLI words -> raw descriptor: none, a remote ID, one string or a list."""
    if not values:
        return None
    if len(values) > 1:
        return list(values)
    value = values[0]
    return int(value) if value.isdigit() else value


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="colourgen: build chart palettes from names, IDs, colors or images."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    mk = sub.add_parser("make", help="Print n colors for a descriptor")
    mk.add_argument("colour", nargs="*", help="Ramp/Brewer name, palette ID, colors, or image path/URL")
    mk.add_argument("-n", type=int, default=DEFAULT_N, help="Number of colors")
    mk.add_argument("--reverse", action="store_true", help="Reverse the palette order")
    mk.add_argument("--shuffle", action="store_true", help="Shuffle with a fixed seed")
    mk.add_argument(
        "--earth",
        action="store_true",
        help="Use the earth->emerald default instead of orange->blue",
    )
    mk.add_argument("--preview", metavar="FILE", help="Save a swatch image")
    mk.add_argument("--host", help="Remote palette service host")
    mk.add_argument("--timeout", type=float, help="Network timeout in seconds")

    sub.add_parser("list", help="List named ramps and Brewer palettes")

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "list":
        for name in list_palettes():
            print(name)
        for name in brewer_names():
            print(name)
        return

    if args.n < 1:
        sys.exit("colourgen: -n must be >= 1")
    if args.timeout is not None and args.timeout <= 0:
        sys.exit("colourgen: --timeout must be > 0")

    settings = Settings.from_env()
    if args.host:
        settings = replace(settings, service_host=args.host)
    if args.timeout is not None:
        settings = replace(settings, timeout=args.timeout)

    palette = make_palette(
        descriptor_from_args(args.colour),
        n=args.n,
        reverse=args.reverse,
        shuffle=args.shuffle,
        default=not args.earth,
        plot=bool(args.preview),
        settings=settings,
    )
    for c in palette.colors:
        print(c)
    if args.preview:
        palette.preview.savefig(args.preview, facecolor=PREVIEW_BACKGROUND)


if __name__ == "__main__":
    main()
