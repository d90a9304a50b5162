"""Six color heatmap gradient (black, blue, cyan, green, yellow, red)."""

from __future__ import annotations

import math
from typing import Sequence

from .config import GRADIENT
from .keys import Color


def _lerp_channel(start: int, end: int, frac: float) -> int:
    # int() truncates toward zero, matching a signed cast before narrowing
    return (start + int((end - start) * frac)) & 0xFF


def interpolate(value: float, stops: Sequence[Color] = GRADIENT) -> Color:
    """Map ``value`` in [0, 1] onto the gradient.

    Values at or below 0 return the first stop and values at or above 1 the
    last one; anything between blends the two surrounding stops channel by
    channel, truncating instead of rounding.
    """

    if value <= 0.0:
        return stops[0]
    if value >= 1.0:
        return stops[-1]

    scaled = value * (len(stops) - 1)
    idx = math.floor(scaled)
    frac = scaled - idx
    low, high = stops[idx], stops[idx + 1]
    return Color(
        _lerp_channel(low.red, high.red, frac),
        _lerp_channel(low.green, high.green, frac),
        _lerp_channel(low.blue, high.blue, frac),
    )
