"""Colour palette used by the board, the menus and the score display."""

from __future__ import annotations

Color = tuple[int, int, int]

# Base colours
TEAL: Color = (148, 226, 213)
GREEN: Color = (166, 227, 161)
MAUVE: Color = (203, 166, 247)
SKY: Color = (137, 220, 235)
RED: Color = (243, 139, 168)
YELLOW: Color = (249, 226, 175)

# UI colours
BACKGROUND: Color = (30, 30, 46)
SURFACE0: Color = (49, 50, 68)
SURFACE1: Color = (69, 71, 90)

# Board colours
EMPTY_COLOR: Color = SURFACE0
P1_COLOR: Color = GREEN
P2_COLOR: Color = (255, 85, 85)
EMPTY_HOVER_COLOR: Color = SURFACE1
P1_HOVER_COLOR: Color = TEAL
P2_HOVER_COLOR: Color = RED

SELECTED_CELL: Color = MAUVE


def lerp_color(old: Color, new: Color, t: float) -> Color:
    """Blend two RGB colours; ``t`` is clamped to the range 0..1."""
    t = min(max(t, 0.0), 1.0)
    r, g, b = (int((1 - t) * a + t * z) for a, z in zip(old, new))
    return (r, g, b)