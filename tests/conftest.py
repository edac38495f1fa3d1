"""Shared sample feeds for the test suite."""

import pytest


def make_quake_feature(event_id, lon, lat, depth, mag, place="Somewhere"):
    """Build a USGS-style GeoJSON earthquake feature."""
    return {
        "type": "Feature",
        "id": event_id,
        "properties": {
            "mag": mag,
            "place": place,
            "time": 1703001600000,  # 2023-12-19 16:00:00 UTC
            "url": f"https://earthquake.usgs.gov/earthquakes/eventpage/{event_id}",
        },
        "geometry": {
            "type": "Point",
            "coordinates": [lon, lat, depth],
        },
    }


def make_feature_collection(features):
    return {
        "type": "FeatureCollection",
        "metadata": {"count": len(features)},
        "features": features,
    }


SAMPLE_QUAKES = make_feature_collection([
    make_quake_feature("ak001", -150.1, 61.2, 5.0, 1.0, "10 km N of Anchorage, Alaska"),
    make_quake_feature("us002", 142.3, 38.1, 45.0, 5.0, "Off the east coast of Honshu, Japan"),
    make_quake_feature("us003", -72.5, -33.0, 95.0, 9.5, "Central Chile"),
])

SAMPLE_BOUNDARIES = make_feature_collection([
    {
        "type": "Feature",
        "properties": {"Name": "AF-AN", "PlateA": "AF", "PlateB": "AN"},
        "geometry": {
            "type": "LineString",
            "coordinates": [[-0.4, -54.9], [0.1, -54.6], [0.9, -54.3]],
        },
    },
    {
        "type": "Feature",
        "properties": {"Name": "NA-PA", "PlateA": "NA", "PlateB": "PA"},
        "geometry": {
            "type": "LineString",
            "coordinates": [[-124.0, 40.3], [-125.2, 40.4]],
        },
    },
])


@pytest.fixture
def quake_feed():
    return SAMPLE_QUAKES


@pytest.fixture
def boundary_feed():
    return SAMPLE_BOUNDARIES


@pytest.fixture
def map_settings():
    from quake_map.config.config_loader import DEFAULT_SETTINGS
    return {key: (dict(value) if isinstance(value, dict) else value)
            for key, value in DEFAULT_SETTINGS.items()}


@pytest.fixture
def feature_factory():
    """Return (make_quake_feature, make_feature_collection)."""
    return make_quake_feature, make_feature_collection
