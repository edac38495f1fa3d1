"""
Core modules for Quake Map Creator.

This package contains the main functional modules for building the earthquake map.

Modules:
    encoding: Magnitude -> radius and depth -> color/label encoding
    feed_client: Fetch GeoJSON feeds concurrently
    feature_parser: Validate and convert feeds to GeoDataFrames
    layer_builders: Heatmap, marker and boundary layers
    layer_set: Ordered registry of map layers
    legend: Depth legend rendering
    map_builder: Generate interactive Leaflet maps
    output_generator: Save output files and metadata
"""

__version__ = '1.0.0'
