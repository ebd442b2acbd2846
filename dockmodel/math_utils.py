"""Conversions between alpha values and transparency percentages."""

from __future__ import annotations

import math


def alpha_to_transparency_percent(alpha: float) -> int:
    """Convert an alpha in [0, 1] to a transparency percentage, rounding half away from zero."""
    value = 100 * (1 - alpha)
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def transparency_percent_to_alpha(percent: int) -> float:
    """Convert a transparency percentage to an alpha in [0, 1]."""
    return 1 - percent / 100.0