"""
Map building module for Quake Map Creator.

This module creates the interactive Leaflet map with Folium: basemaps, the
depth legend, the earthquake layers (heatmap, clustered markers, circles),
the tectonic plate overlay and the layer control.

Each data source is optional. When a feed failed to load its layers are left
out, an error banner says so, and the layer control still lists every layer
that did load.

Functions:
    create_base_map: Map with basemaps and legend registered, no data layers
    create_web_map: Generate the complete interactive map
"""

from typing import Dict, Optional, Tuple

import folium
import geopandas as gpd
from folium import Element

from quake_map.core.layer_builders import (
    BOUNDARY_LAYER_NAME,
    CIRCLES_LAYER_NAME,
    CLUSTER_LAYER_NAME,
    HEATMAP_LAYER_NAME,
    build_boundary_layer,
    build_heat_layer,
    build_point_layer,
)
from quake_map.core.layer_set import LayerSet
from quake_map.core.legend import add_legend
from quake_map.utils.basemap_helpers import create_tile_layers
from quake_map.utils.html_generators import generate_error_banner, generate_title_block
from quake_map.utils.logger import get_logger

logger = get_logger(__name__)


def create_base_map(settings: Dict, depth_counts: Optional[Dict[str, int]] = None) -> Tuple[folium.Map, LayerSet]:
    """
    Create the map with basemaps registered and the legend attached.

    Parameters:
    -----------
    settings : Dict
        Map settings (see load_map_settings)
    depth_counts : Optional[Dict[str, int]]
        Earthquakes per depth class, shown in the legend

    Returns:
    --------
    Tuple[folium.Map, LayerSet]
        Map without tiles or data layers, and a LayerSet holding the basemaps
    """
    m = folium.Map(
        location=settings['center'],
        zoom_start=settings['default_zoom'],
        tiles=None
    )

    layers = LayerSet()
    for tile_layer in create_tile_layers():
        layers.register(tile_layer.tile_name, tile_layer, base=True)

    add_legend(m, counts=depth_counts)

    return m, layers


def create_web_map(
    quakes: Optional[gpd.GeoDataFrame],
    boundaries: Optional[gpd.GeoDataFrame],
    settings: Dict,
    fetch_errors: Optional[Dict[str, str]] = None,
    feed_name: Optional[str] = None,
    depth_counts: Optional[Dict[str, int]] = None
) -> folium.Map:
    """
    Create an interactive Leaflet map with all available layers.

    Generates a web map including:
    - Street and topographic basemaps
    - Heatmap of magnitude-weighted earthquakes (visible on open)
    - Clustered circle markers and flat circle markers (toggleable)
    - Tectonic plate boundaries (toggleable)
    - Depth legend and layer control
    - Error banner for feeds that failed to load

    Parameters:
    -----------
    quakes : Optional[gpd.GeoDataFrame]
        Parsed earthquakes, or None if the earthquake feed failed
    boundaries : Optional[gpd.GeoDataFrame]
        Parsed plate boundaries, or None if the boundary feed failed
    settings : Dict
        Map settings (see load_map_settings)
    fetch_errors : Optional[Dict[str, str]]
        Feed display name -> error message for failed feeds
    feed_name : Optional[str]
        USGS feed key shown in the title box
    depth_counts : Optional[Dict[str, int]]
        Earthquakes per depth class, shown in the legend

    Returns:
    --------
    folium.Map
        Folium map object ready to be saved

    Example:
        >>> map_obj = create_web_map(quakes, boundaries, settings)
        >>> map_obj.save('index.html')
    """
    logger.info("=" * 80)
    logger.info("Creating Interactive Web Map")
    logger.info("=" * 80)

    m, layers = create_base_map(settings, depth_counts)

    summary = []

    if quakes is not None:
        logger.info(f"  - Adding earthquake layers ({len(quakes)} earthquakes)...")

        layers.register(
            HEATMAP_LAYER_NAME,
            build_heat_layer(quakes, options=settings['heatmap'], show=True)
        )

        point_layers = build_point_layer(
            quakes,
            marker_style=settings['marker'],
            min_marker_radius=settings['min_marker_radius'],
            cluster_options=settings['cluster_options'],
            show=False
        )
        layers.register(CLUSTER_LAYER_NAME, point_layers.cluster)
        layers.register(CIRCLES_LAYER_NAME, point_layers.circles)

        logger.info(f"    ✓ Added {len(point_layers.markers)} markers")
        summary.append(f"{len(quakes)} earthquakes")
    else:
        logger.warning("  ⚠ Earthquake layers unavailable")

    if boundaries is not None:
        logger.info(f"  - Adding tectonic plates ({len(boundaries)} segments)...")
        layers.register(
            BOUNDARY_LAYER_NAME,
            build_boundary_layer(boundaries, style=settings['boundary_style'], show=False)
        )
    else:
        logger.warning("  ⚠ Tectonic plate layer unavailable")

    layers.attach(m)

    if fetch_errors:
        logger.info(f"  - Adding error banner ({len(fetch_errors)} failed feed(s))...")
        m.get_root().html.add_child(Element(generate_error_banner(fetch_errors)))

    m.get_root().html.add_child(Element(generate_title_block(settings['title'], feed_name, summary)))

    logger.info("  ✓ Map created successfully\n")

    return m
