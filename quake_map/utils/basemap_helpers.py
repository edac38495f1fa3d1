"""
Basemap utility functions for Quake Map Creator.

This module provides functions to:
- Describe the selectable background tile layers
- Build folium TileLayers from those descriptions
"""

from typing import Dict, List, Optional

import folium

from quake_map.utils.logger import get_logger

logger = get_logger(__name__)


def get_basemap_config() -> List[Dict]:
    """
    Return the basemap configuration, default basemap first.

    Returns list of basemap dictionaries containing:
    - display_name: Human-friendly name for the layer control
    - tile_url: Leaflet tile URL template
    - attribution: Tile attribution HTML
    - max_zoom: Highest zoom level the tile server provides

    Returns:
        List of basemap configuration dictionaries
    """
    return [
        {
            'display_name': 'Street Map',
            'tile_url': 'https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png',
            'attribution': '&copy; <a href=\'https://www.openstreetmap.org/copyright\'>OpenStreetMap</a> contributors',
            'max_zoom': 19
        },
        {
            'display_name': 'Topographic Map',
            'tile_url': 'https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png',
            'attribution': (
                'Map data: &copy; <a href=\'https://www.openstreetmap.org/copyright\'>OpenStreetMap</a> '
                'contributors, SRTM | Map style: &copy; <a href=\'https://opentopomap.org\'>OpenTopoMap</a> '
                '(CC-BY-SA)'
            ),
            'max_zoom': 17
        }
    ]


def create_tile_layers(basemaps: Optional[List[Dict]] = None) -> List[folium.TileLayer]:
    """
    Create a base TileLayer per basemap. Only the first one is shown initially.

    Args:
        basemaps: Basemap configuration (defaults to get_basemap_config())

    Returns:
        TileLayers in configuration order
    """
    if basemaps is None:
        basemaps = get_basemap_config()

    tile_layers = []
    for index, basemap in enumerate(basemaps):
        tile_layers.append(folium.TileLayer(
            tiles=basemap['tile_url'],
            attr=basemap['attribution'],
            name=basemap['display_name'],
            max_zoom=basemap.get('max_zoom'),
            overlay=False,
            show=index == 0
        ))
        logger.debug(f"Prepared basemap: {basemap['display_name']}")

    return tile_layers
