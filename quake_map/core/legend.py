"""
Depth legend for Quake Map Creator.

Renders the static, color-coded depth legend from the DEPTH_BINS table using
the Jinja2 template in templates/legend.html.

Functions:
    legend_rows: Row data (color, range, label) for each depth bin
    build_legend: Render the legend HTML fragment
    add_legend: Attach the legend to a folium map
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import folium
from folium import Element
from jinja2 import Environment, FileSystemLoader

from quake_map.core.encoding import DEPTH_BINS, DepthBin, depth_bin_for
from quake_map.utils.logger import get_logger

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / 'templates'
LEGEND_TITLE = 'Earthquake Depth (km)'

# Thresholds are exclusive, so a bin is sampled just above its lower bound
LEGEND_EPSILON = 1e-6


def legend_rows(
    bins: Sequence[DepthBin] = DEPTH_BINS,
    counts: Optional[Dict[str, int]] = None
) -> List[Dict]:
    """
    Build one row per depth bin, in table order.

    Swatch and label are both looked up just above the lower bound
    (``lower_bound + LEGEND_EPSILON``); thresholds are exclusive, so a lookup
    at the bound itself would return the shallower bin. A bin open below is
    looked up at its upper bound.

    Parameters:
    -----------
    bins : Sequence[DepthBin]
        Depth bins to describe
    counts : Optional[Dict[str, int]]
        Earthquake count per bin label (from summarize_depths), shown per row

    Returns:
    --------
    List[Dict]
        Rows with keys color, range_label, label, count
    """
    rows = []
    for depth_bin in bins:
        if depth_bin.lower_bound is None:
            sample_depth = depth_bin.upper_bound
        else:
            sample_depth = depth_bin.lower_bound + LEGEND_EPSILON
        sampled = depth_bin_for(sample_depth, bins)
        rows.append({
            'color': sampled.color,
            'range_label': depth_bin.range_label,
            'label': sampled.label,
            'count': counts.get(depth_bin.label, 0) if counts is not None else None
        })
    return rows


def build_legend(
    bins: Sequence[DepthBin] = DEPTH_BINS,
    counts: Optional[Dict[str, int]] = None,
    title: str = LEGEND_TITLE
) -> str:
    """
    Render the legend HTML fragment.

    The output depends only on its arguments, so repeated calls return the
    same markup.

    Example:
        >>> html = build_legend()
        >>> html.count('class="legend-row"')
        6
    """
    env = Environment(loader=FileSystemLoader(str(TEMPLATES_DIR)), autoescape=False)
    template = env.get_template('legend.html')
    return template.render(title=title, rows=legend_rows(bins, counts))


def add_legend(
    map_obj: folium.Map,
    bins: Sequence[DepthBin] = DEPTH_BINS,
    counts: Optional[Dict[str, int]] = None
) -> Element:
    """Attach the legend to the map's root HTML and return the element."""
    legend = Element(build_legend(bins, counts))
    map_obj.get_root().html.add_child(legend)
    logger.info(f"  - Added depth legend ({len(bins)} classes)")
    return legend
