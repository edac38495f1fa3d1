"""
Visual encoding for earthquake markers.

Maps magnitude to marker radius and depth to a fill color and a human-readable
depth class. Color, label and legend all come from the single DEPTH_BINS table,
so markers and legend cannot disagree.

Constants:
    RADIUS_SCALE: Pixels of radius per unit of magnitude
    MIN_RADIUS: Floor applied to negative / missing magnitudes
    DEPTH_BINS: Ordered, non-overlapping depth classes (ascending)

Functions:
    radius_for: Marker radius for a magnitude
    depth_bin_for: DepthBin containing a depth
    color_for: Fill color for a depth
    explanation_for: Depth class label for a depth
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

RADIUS_SCALE = 4
MIN_RADIUS = 0.0


@dataclass(frozen=True)
class DepthBin:
    """
    Half-open depth interval ``(lower_bound, upper_bound]`` in km.

    The first bin is open below (``lower_bound is None``) and also holds
    missing depths; the last bin (``upper_bound is None``) holds everything
    above its lower bound.
    """
    lower_bound: Optional[float]
    upper_bound: Optional[float]
    color: str
    label: str

    @property
    def range_label(self) -> str:
        """Legend text such as ``'10&ndash;30 km'``, ``'&le;10 km'`` or ``'90+ km'``."""
        if self.lower_bound is None:
            return f"&le;{_format_bound(self.upper_bound)} km"
        lower = _format_bound(self.lower_bound)
        if self.upper_bound is None:
            return f"{lower}+ km"
        return f"{lower}&ndash;{_format_bound(self.upper_bound)} km"


DEPTH_BINS: Tuple[DepthBin, ...] = (
    DepthBin(None, 10, '#1a9850', 'Surface'),
    DepthBin(10, 30, '#91cf60', 'Very Shallow'),
    DepthBin(30, 50, '#d9ef8b', 'Shallow'),
    DepthBin(50, 70, '#fee08b', 'Moderately Deep'),
    DepthBin(70, 90, '#fc8d59', 'Deep'),
    DepthBin(90, None, '#d73027', 'Very Deep'),
)

# Depths that are missing or not numeric land here
CATCH_ALL_BIN = DEPTH_BINS[0]


def _format_bound(value: float) -> str:
    return f"{value:g}"


def _is_missing(value) -> bool:
    if value is None:
        return True
    try:
        return math.isnan(float(value))
    except (TypeError, ValueError):
        return True


def radius_for(magnitude) -> float:
    """
    Marker radius in pixels: ``magnitude * RADIUS_SCALE``.

    Negative results and missing magnitudes (None / NaN) floor to MIN_RADIUS.

    Examples:
        >>> radius_for(2.5)
        10.0
        >>> radius_for(-1.2)
        0.0
    """
    if _is_missing(magnitude):
        return MIN_RADIUS
    return max(float(magnitude) * RADIUS_SCALE, MIN_RADIUS)


def depth_bin_for(depth, bins: Tuple[DepthBin, ...] = DEPTH_BINS) -> DepthBin:
    """
    Return the bin a depth falls in.

    Thresholds are checked from the deepest bin upward; the first lower bound
    the depth strictly exceeds wins. Anything not above the second bin's lower
    bound (including missing depths) falls into the first bin.
    """
    if _is_missing(depth):
        return bins[0]

    depth = float(depth)
    for depth_bin in reversed(bins[1:]):
        if depth > depth_bin.lower_bound:
            return depth_bin
    return bins[0]


def color_for(depth) -> str:
    """
    Fill color for a depth in km.

    Examples:
        >>> color_for(95)
        '#d73027'
        >>> color_for(-5)
        '#1a9850'
    """
    return depth_bin_for(depth).color


def explanation_for(depth) -> str:
    """Depth class label ('Surface' ... 'Very Deep') for a depth in km."""
    return depth_bin_for(depth).label
