"""
HTML generation utilities for Quake Map Creator.

This module provides functions to generate HTML for map UI elements that
folium has no component for.

Functions:
    generate_error_banner: Create the banner listing feeds that failed to load
    generate_title_block: Create the map title / feed summary box
"""

import html
from typing import Dict, List, Optional


def generate_error_banner(errors: Dict[str, str]) -> str:
    """
    Generate HTML for a banner listing failed feeds.

    Parameters:
    -----------
    errors : Dict[str, str]
        Feed display name -> error message

    Returns:
    --------
    str
        HTML string, or an empty string when there are no errors

    Example Output:
        <div id="quake-error-banner" role="alert" ...>
            <div class="quake-error">Tectonic Plates could not be loaded: Request timed out after 30s</div>
        </div>
    """
    if not errors:
        return ""

    lines = "".join(
        f'<div class="quake-error">{html.escape(name)} could not be loaded: '
        f'{html.escape(message)}</div>'
        for name, message in errors.items()
    )

    return f"""
        <div id="quake-error-banner" role="alert" style="
            position: fixed;
            top: 10px; left: 50%;
            transform: translateX(-50%);
            z-index: 10000;
            max-width: 600px;
            background-color: #fdecea;
            color: #611a15;
            border: 1px solid #f5c6cb;
            border-radius: 5px;
            padding: 8px 14px;
            font: 13px/1.4 Arial, Helvetica, sans-serif;
            box-shadow: 0 0 10px rgba(0, 0, 0, 0.2);">
            {lines}
        </div>
        """


def generate_title_block(title: str, feed_name: Optional[str], summary: List[str]) -> str:
    """
    Generate HTML for the title box shown in the bottom-left corner.

    Parameters:
    -----------
    title : str
        Map title
    feed_name : Optional[str]
        USGS feed key (e.g. 'all_day'), omitted if None
    summary : List[str]
        Short lines such as '152 earthquakes'

    Returns:
    --------
    str
        HTML string
    """
    subtitle = f'<div style="color: #777;">USGS feed: {html.escape(feed_name)}</div>' if feed_name else ''
    summary_html = "".join(f"<div>{html.escape(line)}</div>" for line in summary)

    return f"""
        <div id="quake-title" style="
            position: fixed;
            bottom: 30px; left: 10px;
            z-index: 9999;
            background-color: white;
            padding: 6px 10px;
            border-radius: 5px;
            box-shadow: 0 0 15px rgba(0, 0, 0, 0.2);
            font: 13px/1.4 Arial, Helvetica, sans-serif;">
            <div style="font-weight: bold; font-size: 15px;">{html.escape(title)}</div>
            {subtitle}
            {summary_html}
        </div>
        """
