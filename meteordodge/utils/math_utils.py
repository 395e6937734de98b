"""Small geometry and colour helpers shared by the simulation and renderer."""

from __future__ import annotations

import colorsys
import math
from typing import Tuple

Color = Tuple[int, int, int]


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``."""
    return max(lower, min(upper, value))


def hsl_to_rgb(hue_degrees: float, saturation: float, lightness: float) -> Color:
    """Convert CSS-style HSL (hue in degrees, s/l in 0..1) to an RGB triple.

    Args:
        hue_degrees: Hue angle; wrapped into [0, 360).
        saturation: Saturation in the range 0..1.
        lightness: Lightness in the range 0..1.

    Returns:
        Integer RGB channels in the range 0..255.
    """
    hue = (hue_degrees % 360.0) / 360.0
    # colorsys orders the arguments as hue, lightness, saturation.
    red, green, blue = colorsys.hls_to_rgb(hue, lightness, saturation)
    return (
        int(round(red * 255)),
        int(round(green * 255)),
        int(round(blue * 255)),
    )
