"""
Layer construction module for Quake Map Creator.

Builds the folium layers drawn from the parsed feeds:

- Heatmap: magnitude-weighted density of all earthquakes
- Markers: circle markers grouped by MarkerCluster for decluttering
- Circles: the same circle markers, ungrouped
- Tectonic Plates: fixed-style boundary lines

Every builder accepts an empty GeoDataFrame and returns an empty, valid layer.

Functions:
    build_heat_layer: Build the magnitude-weighted heatmap
    build_point_layer: Build clustered and flat circle marker layers
    build_boundary_layer: Build the tectonic plate boundary layer
"""

import json
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import folium
import geopandas as gpd
from folium import plugins

from quake_map.core.encoding import color_for, radius_for
from quake_map.utils.popup_formatters import build_quake_popup
from quake_map.utils.logger import get_logger

logger = get_logger(__name__)

HEATMAP_LAYER_NAME = 'Heatmap'
CLUSTER_LAYER_NAME = 'Markers'
CIRCLES_LAYER_NAME = 'Circles'
BOUNDARY_LAYER_NAME = 'Tectonic Plates'

DEFAULT_HEATMAP_OPTIONS = {'radius': 25, 'blur': 15, 'max_zoom': 17}
DEFAULT_MARKER_STYLE = {'color': '#000', 'weight': 1, 'opacity': 1, 'fill_opacity': 0.8}
DEFAULT_BOUNDARY_STYLE = {'color': 'navy', 'weight': 2}


@dataclass
class PointLayers:
    """Clustered and flat marker layers built from the same earthquakes."""
    cluster: plugins.MarkerCluster
    circles: folium.FeatureGroup
    markers: List[folium.CircleMarker] = field(default_factory=list)


def _heat_weight(magnitude) -> float:
    # HeatMap rejects NaN; density weights are non-negative
    if magnitude is None or math.isnan(magnitude):
        return 0.0
    return max(float(magnitude), 0.0)


def build_heat_layer(
    quakes: gpd.GeoDataFrame,
    options: Optional[Dict] = None,
    name: str = HEATMAP_LAYER_NAME,
    show: bool = True
) -> plugins.HeatMap:
    """
    Build a heatmap with one ``[lat, lng, magnitude]`` sample per earthquake.

    Samples keep input order and no earthquake is excluded: a zero (or
    missing) magnitude contributes a zero-weight sample.

    Parameters:
    -----------
    quakes : gpd.GeoDataFrame
        Parsed earthquakes (point geometry, 'magnitude' column)
    options : Optional[Dict]
        HeatMap options (default radius=25, blur=15, max_zoom=17)
    name : str
        Layer name shown in the layer control
    show : bool
        Whether the layer is visible when the map opens

    Returns:
    --------
    plugins.HeatMap
        Heatmap layer (overlay)
    """
    heat_options = {**DEFAULT_HEATMAP_OPTIONS, **(options or {})}

    heat_data = [
        [row.geometry.y, row.geometry.x, _heat_weight(row['magnitude'])]
        for _, row in quakes.iterrows()
    ]

    logger.debug(f"Heatmap: {len(heat_data)} samples, options={heat_options}")

    return plugins.HeatMap(
        heat_data,
        name=name,
        overlay=True,
        show=show,
        **heat_options
    )


def build_point_layer(
    quakes: gpd.GeoDataFrame,
    marker_style: Optional[Dict] = None,
    min_marker_radius: float = 1.0,
    cluster_options: Optional[Dict] = None,
    show: bool = False
) -> PointLayers:
    """
    Build circle markers for every earthquake.

    Each earthquake becomes a CircleMarker sized by ``radius_for(magnitude)``
    and filled with ``color_for(depth_km)``, with a popup giving place,
    magnitude and depth. A folium element can only belong to one parent, so
    every marker is created twice from the same options: once inside the
    MarkerCluster, once inside the flat FeatureGroup.

    Parameters:
    -----------
    quakes : gpd.GeoDataFrame
        Parsed earthquakes
    marker_style : Optional[Dict]
        Stroke/fill options shared by all markers
    min_marker_radius : float
        Smallest radius actually drawn, so zero-magnitude events stay visible
        (Leaflet falls back to a 10px default when radius is 0)
    cluster_options : Optional[Dict]
        Extra Leaflet.markercluster options
    show : bool
        Whether the two layers are visible when the map opens

    Returns:
    --------
    PointLayers
        cluster: MarkerCluster ("Markers"), circles: FeatureGroup ("Circles"),
        markers: the flat CircleMarkers in input order
    """
    style = {**DEFAULT_MARKER_STYLE, **(marker_style or {})}

    cluster = plugins.MarkerCluster(
        name=CLUSTER_LAYER_NAME,
        overlay=True,
        show=show,
        **(cluster_options or {})
    )
    circles = folium.FeatureGroup(name=CIRCLES_LAYER_NAME, overlay=True, show=show)
    markers = []

    for _, row in quakes.iterrows():
        magnitude = row['magnitude']
        depth = row['depth_km']
        location = [row.geometry.y, row.geometry.x]
        radius = max(radius_for(magnitude), min_marker_radius)
        popup_html = build_quake_popup(row['place'], magnitude, depth, row.get('url'))
        tooltip = f"M {magnitude:.1f}" if not math.isnan(magnitude) else None

        for parent in (cluster, circles):
            marker = folium.CircleMarker(
                location=location,
                radius=radius,
                fill_color=color_for(depth),
                fill=True,
                popup=folium.Popup(popup_html, max_width=300),
                tooltip=tooltip,
                **style
            )
            marker.add_to(parent)
            if parent is circles:
                markers.append(marker)

    logger.debug(f"Point layers: {len(markers)} markers")

    return PointLayers(cluster=cluster, circles=circles, markers=markers)


def build_boundary_layer(
    boundaries: gpd.GeoDataFrame,
    style: Optional[Dict] = None,
    name: str = BOUNDARY_LAYER_NAME,
    show: bool = False
) -> folium.GeoJson:
    """
    Build the tectonic plate boundary layer with a fixed line style.

    No popups or tooltips are attached and no encoding is applied.

    Parameters:
    -----------
    boundaries : gpd.GeoDataFrame
        Parsed boundary geometries
    style : Optional[Dict]
        Leaflet path style (default navy, weight 2)
    name : str
        Layer name shown in the layer control
    show : bool
        Whether the layer is visible when the map opens
    """
    boundary_style = {**DEFAULT_BOUNDARY_STYLE, **(style or {})}

    # Style is bound at definition time
    def style_function(feature, line_style=boundary_style):
        return dict(line_style)

    return folium.GeoJson(
        json.loads(boundaries.to_json()),
        name=name,
        overlay=True,
        show=show,
        style_function=style_function
    )
