from __future__ import annotations

import numpy as np
import pytest

from color_palettes import ColorRamp, normalize_hex, parse_color


def test_normalize_hex_variants() -> None:
    assert normalize_hex("#caf60d") == "#CAF60D"
    assert normalize_hex("CAF60D") == "#CAF60D"
    assert normalize_hex("#abc") == "#AABBCC"
    assert normalize_hex("#11223344") == "#112233"
    assert normalize_hex("red") == "#FF0000"
    assert normalize_hex((255, 128, 0)) == "#FF8000"


@pytest.mark.parametrize("bad", ["not-a-color", "#12", 42, (300, 0, 0), None])
def test_parse_color_invalid(bad) -> None:
    with pytest.raises(ValueError):
        parse_color(bad)


def test_anchor_ramp_hits_anchors_at_even_spacing() -> None:
    anchors = ["#000000", "#FF0000", "#FFFFFF"]
    ramp = ColorRamp.from_anchors(anchors)
    assert ramp.colors([0.0, 0.5, 1.0]) == anchors
    assert ramp.anchors == tuple(anchors)


def test_anchor_ramp_interpolates_in_rgb() -> None:
    ramp = ColorRamp.from_anchors(["#000000", "#FFFFFF"])
    assert ramp(0.5) == "#808080"
    assert ramp(0.25) == "#404040"


def test_ramp_clips_parameter_and_is_deterministic() -> None:
    ramp = ColorRamp.from_anchors(["#102030", "#A0B0C0"])
    assert ramp(-1.0) == "#102030"
    assert ramp(2.0) == "#A0B0C0"
    assert ramp(0.37) == ramp(0.37)


def test_single_anchor_ramp_is_constant() -> None:
    ramp = ColorRamp.from_anchors(["#123456"])
    assert ramp.colors(np.linspace(0, 1, 4)) == ["#123456"] * 4


def test_empty_anchor_list_rejected() -> None:
    with pytest.raises(ValueError):
        ColorRamp.from_anchors([])


def test_function_ramp_scales_unit_rgb() -> None:
    ramp = ColorRamp.from_function(lambda t: np.stack([t, t, t], axis=1), "grey")
    assert ramp.colors([0.0, 1.0]) == ["#000000", "#FFFFFF"]
    assert repr(ramp) == "ColorRamp('grey')"
