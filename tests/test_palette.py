import pytest

from hexagon_game import palette
from hexagon_game.palette import lerp_color


def test_source_colours():
    assert lerp_color(palette.P2_COLOR, palette.BACKGROUND, 0.0) == (255, 85, 85)
    assert lerp_color(palette.P2_COLOR, palette.BACKGROUND, 1.0) == (30, 30, 46)
    assert lerp_color(palette.P1_COLOR, palette.P1_COLOR, 0.5) == palette.GREEN
    assert lerp_color(palette.EMPTY_COLOR, palette.EMPTY_COLOR, 0.5) == palette.SURFACE0
    assert lerp_color(palette.SELECTED_CELL, palette.SELECTED_CELL, 0.5) == palette.MAUVE


def test_lerp_endpoints():
    assert lerp_color(palette.RED, palette.SKY, 0.0) == palette.RED
    assert lerp_color(palette.RED, palette.SKY, 1.0) == palette.SKY


@pytest.mark.parametrize("t", [1.5, 10.0])
def test_lerp_clamps_above_one(t):
    assert lerp_color(palette.TEAL, palette.MAUVE, t) == palette.MAUVE


def test_lerp_clamps_below_zero():
    assert lerp_color(palette.TEAL, palette.MAUVE, -2.0) == palette.TEAL


@pytest.mark.parametrize("t", [0.1, 0.25, 0.5, 0.9])
def test_lerp_channels_between_endpoints(t):
    old, new = palette.BACKGROUND, palette.YELLOW
    result = lerp_color(old, new, t)
    assert len(result) == 3
    for channel, a, b in zip(result, old, new):
        assert min(a, b) <= channel <= max(a, b)


def test_lerp_same_colour_is_identity():
    assert lerp_color(palette.GREEN, palette.GREEN, 0.37) == palette.GREEN