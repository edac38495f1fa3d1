"""
Popup formatting utilities for Quake Map Creator.

This module provides functions to format earthquake attributes for display in
map popups. Missing values (None/NaN) are shown as 'Unknown' instead of 'nan'.

Functions:
    format_popup_value: Format a single value for display in popup HTML
    build_quake_popup: Build the popup HTML for one earthquake
"""

import html
from typing import Any, Optional


def format_popup_value(value: Any, unit: Optional[str] = None, precision: Optional[int] = None) -> str:
    """
    Format a popup value, escaping HTML and handling missing values.

    Parameters:
    -----------
    value : Any
        Value to format
    unit : Optional[str]
        Unit suffix such as 'km' (omitted for missing values)
    precision : Optional[int]
        Decimal places for floats (default: shown as-is)

    Returns:
    --------
    str
        Formatted HTML-safe string

    Examples:
        >>> format_popup_value(4.25, precision=1)
        '4.2'
        >>> format_popup_value(10.0, unit='km')
        '10.0 km'
        >>> format_popup_value(float('nan'), unit='km')
        'Unknown'
    """
    # Handle None and NaN values
    if value is None or (isinstance(value, float) and value != value):
        return 'Unknown'

    if precision is not None and isinstance(value, float):
        value_str = f"{value:.{precision}f}"
    else:
        value_str = html.escape(str(value))

    if unit:
        return f"{value_str} {unit}"
    return value_str


def build_quake_popup(place: Any, magnitude: Any, depth_km: Any, url: Optional[str] = None) -> str:
    """
    Build popup HTML for an earthquake: place heading, magnitude and depth.

    Example:
        >>> build_quake_popup('10km NE of Ridgecrest, CA', 4.2, 8.1)
        '<h3>10km NE of Ridgecrest, CA</h3><hr><p>Magnitude: 4.2</p><p>Depth: 8.1 km</p>'
    """
    popup_html = (
        f"<h3>{format_popup_value(place)}</h3><hr>"
        f"<p>Magnitude: {format_popup_value(magnitude)}</p>"
        f"<p>Depth: {format_popup_value(depth_km, unit='km')}</p>"
    )
    if isinstance(url, str) and url:
        popup_html += (
            f'<p><a href="{html.escape(url, quote=True)}" target="_blank" '
            f'style="color: #0066cc;">Event details</a></p>'
        )
    return popup_html
