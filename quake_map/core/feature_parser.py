"""
Feature parsing module for Quake Map Creator.

Converts raw GeoJSON feeds into GeoDataFrames. Earthquakes must have a usable
location to be placed on the map; features without one are skipped and
counted. Missing or non-numeric magnitude / depth values are kept as NaN so
those earthquakes still render (smallest radius, catch-all depth color).

Functions:
    parse_earthquakes: USGS earthquake feed -> GeoDataFrame of points
    parse_boundaries: Tectonic boundary GeoJSON -> GeoDataFrame
    summarize_depths: Count earthquakes per depth bin
"""

import math
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

import geopandas as gpd
from shapely.errors import ShapelyError
from shapely.geometry import shape

from quake_map.core.encoding import DEPTH_BINS, depth_bin_for
from quake_map.utils.logger import get_logger

logger = get_logger(__name__)

EARTHQUAKE_COLUMNS = ['event_id', 'place', 'magnitude', 'depth_km', 'time', 'url']


def _to_float(value) -> Optional[float]:
    """Return value as a finite float, or None if it isn't one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _event_time(epoch_ms) -> Optional[str]:
    """USGS times are epoch milliseconds; return ISO-8601 UTC."""
    epoch_ms = _to_float(epoch_ms)
    if epoch_ms is None:
        return None
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).isoformat()


def parse_earthquakes(geojson: Optional[Dict]) -> Tuple[gpd.GeoDataFrame, Dict]:
    """
    Parse a USGS GeoJSON FeatureCollection into a GeoDataFrame.

    Feed order is preserved. A feature is skipped only when its longitude or
    latitude is missing, non-numeric or out of range.

    Parameters:
    -----------
    geojson : Optional[Dict]
        Parsed USGS feed (``None`` yields an empty frame)

    Returns:
    --------
    Tuple[gpd.GeoDataFrame, Dict]
        - GeoDataFrame (EPSG:4326) with columns event_id, place, magnitude,
          depth_km, time, url and point geometry
        - Parse metadata with keys:
          - total_features: Features in the feed
          - valid_features: Features kept
          - skipped_features: Features without a usable location
          - missing_magnitude: Kept features with no numeric magnitude
          - missing_depth: Kept features with no numeric depth

    Example:
        >>> gdf, meta = parse_earthquakes(feed)
        >>> gdf[['place', 'magnitude', 'depth_km']].head()
    """
    features = (geojson or {}).get('features') or []

    records = {column: [] for column in EARTHQUAKE_COLUMNS}
    longitudes = []
    latitudes = []
    metadata = {
        'total_features': len(features),
        'valid_features': 0,
        'skipped_features': 0,
        'missing_magnitude': 0,
        'missing_depth': 0
    }

    for index, feature in enumerate(features):
        # Malformed members count as missing
        if not isinstance(feature, dict):
            feature = {}
        properties = feature.get('properties')
        if not isinstance(properties, dict):
            properties = {}
        geometry = feature.get('geometry')
        if not isinstance(geometry, dict):
            geometry = {}
        coordinates = geometry.get('coordinates')
        if not isinstance(coordinates, (list, tuple)):
            coordinates = []

        longitude = _to_float(coordinates[0]) if len(coordinates) > 0 else None
        latitude = _to_float(coordinates[1]) if len(coordinates) > 1 else None

        if (longitude is None or latitude is None
                or not -180 <= longitude <= 180 or not -90 <= latitude <= 90):
            metadata['skipped_features'] += 1
            logger.debug(f"Skipping feature {index} ({feature.get('id')}): no usable location")
            continue

        magnitude = _to_float(properties.get('mag'))
        depth = _to_float(coordinates[2]) if len(coordinates) > 2 else None

        if magnitude is None:
            metadata['missing_magnitude'] += 1
        if depth is None:
            metadata['missing_depth'] += 1

        records['event_id'].append(feature.get('id'))
        records['place'].append(properties.get('place') or 'Unknown location')
        records['magnitude'].append(magnitude if magnitude is not None else float('nan'))
        records['depth_km'].append(depth if depth is not None else float('nan'))
        records['time'].append(_event_time(properties.get('time')))
        records['url'].append(properties.get('url'))
        longitudes.append(longitude)
        latitudes.append(latitude)

    gdf = gpd.GeoDataFrame(
        records,
        geometry=gpd.points_from_xy(longitudes, latitudes),
        crs='EPSG:4326'
    )
    gdf['magnitude'] = gdf['magnitude'].astype(float)
    gdf['depth_km'] = gdf['depth_km'].astype(float)

    metadata['valid_features'] = len(gdf)

    logger.info(f"  - Parsed {len(gdf)} of {len(features)} earthquakes")
    if metadata['skipped_features']:
        logger.warning(
            f"  ⚠ Skipped {metadata['skipped_features']} earthquake(s) without a usable location"
        )
    if metadata['missing_magnitude'] or metadata['missing_depth']:
        logger.warning(
            f"  ⚠ Incomplete earthquakes kept: {metadata['missing_magnitude']} without magnitude, "
            f"{metadata['missing_depth']} without depth"
        )

    return gdf, metadata


def parse_boundaries(geojson: Optional[Dict]) -> Tuple[gpd.GeoDataFrame, Dict]:
    """
    Parse tectonic plate boundary GeoJSON into a GeoDataFrame.

    Features whose geometry shapely cannot build are skipped and counted.

    Parameters:
    -----------
    geojson : Optional[Dict]
        Parsed boundary document (FeatureCollection)

    Returns:
    --------
    Tuple[gpd.GeoDataFrame, Dict]
        GeoDataFrame (EPSG:4326) and metadata with total_features,
        valid_features and skipped_features
    """
    features = (geojson or {}).get('features') or []

    properties_list = []
    geometries = []
    skipped = 0

    for feature in features:
        try:
            geometry = shape(feature['geometry'])
        except (KeyError, TypeError, ValueError, AttributeError, ShapelyError) as e:
            skipped += 1
            logger.debug(f"Skipping boundary feature: {e}")
            continue
        if geometry.is_empty:
            skipped += 1
            continue
        properties_list.append(feature.get('properties') or {})
        geometries.append(geometry)

    gdf = gpd.GeoDataFrame(properties_list, geometry=geometries, crs='EPSG:4326')

    metadata = {
        'total_features': len(features),
        'valid_features': len(gdf),
        'skipped_features': skipped
    }

    logger.info(f"  - Parsed {len(gdf)} of {len(features)} boundary segments")
    if skipped:
        logger.warning(f"  ⚠ Skipped {skipped} boundary feature(s) with invalid geometry")

    return gdf, metadata


def summarize_depths(quakes: gpd.GeoDataFrame) -> Dict[str, int]:
    """
    Count earthquakes per depth bin, in bin order.

    Earthquakes without a depth count toward the catch-all bin.

    Example:
        >>> summarize_depths(gdf)
        {'Surface': 120, 'Very Shallow': 40, 'Shallow': 8, ...}
    """
    counts = {depth_bin.label: 0 for depth_bin in DEPTH_BINS}
    if 'depth_km' not in quakes.columns:
        return counts
    for depth in quakes['depth_km']:
        counts[depth_bin_for(depth).label] += 1
    return counts
