"""
Quake Map Creator.

Generates interactive Leaflet web maps of the USGS earthquake feed with
depth-colored, magnitude-sized markers, a heatmap, marker clustering and
tectonic plate boundaries.

Packages:
    config: Configuration loading
    core: Feed fetching, parsing, encoding, layers, legend, map and output
    utils: Logging and HTML helpers
"""

__version__ = '1.0.0'
