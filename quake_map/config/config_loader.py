"""
Configuration loading for Quake Map Creator.

This module handles loading and validation of the map configuration JSON file.

Constants:
    CONFIG_DIR: Configuration files directory
    OUTPUT_DIR: Output files directory (under the working directory)
    DEFAULT_CONFIG_PATH: Bundled map_config.json

Functions:
    load_config: Load and validate map configuration from JSON
    load_map_settings: Merge configured map settings with defaults
    resolve_feed_url: Look up the URL of a named earthquake feed
"""

import json
from pathlib import Path
from typing import Dict, Optional

# Project paths
CONFIG_DIR = Path(__file__).parent
OUTPUT_DIR = Path.cwd() / 'outputs'
DEFAULT_CONFIG_PATH = CONFIG_DIR / 'map_config.json'

DEFAULT_SETTINGS = {
    'title': 'Earthquake Map',
    'default_feed': 'all_day',
    'boundaries_url': (
        'https://raw.githubusercontent.com/fraxen/tectonicplates/'
        'master/GeoJSON/PB2002_boundaries.json'
    ),
    'center': [0, 0],
    'default_zoom': 2,
    'request_timeout': 30,
    'max_workers': 2,
    'min_marker_radius': 1.0,
    'heatmap': {'radius': 25, 'blur': 15, 'max_zoom': 17},
    'marker': {'color': '#000', 'weight': 1, 'opacity': 1, 'fill_opacity': 0.8},
    'cluster_options': {},
    'boundary_style': {'color': 'navy', 'weight': 2},
}


def load_config(config_path: Optional[Path] = None) -> Dict:
    """
    Load map configuration from JSON file.

    Reads map_config.json (or the given path) and validates basic structure.

    Parameters:
    -----------
    config_path : Optional[Path]
        Alternative configuration file (defaults to the bundled map_config.json)

    Returns:
    --------
    Dict
        Configuration dictionary with 'feeds' and 'settings' keys

    Raises:
    -------
    FileNotFoundError
        If configuration file doesn't exist
    json.JSONDecodeError
        If configuration file contains invalid JSON
    KeyError
        If required configuration keys are missing
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = json.load(f)

    if 'feeds' not in config:
        raise KeyError("Configuration missing required 'feeds' key")
    if 'settings' not in config:
        raise KeyError("Configuration missing required 'settings' key")

    return config


def load_map_settings(config: Dict = None) -> Dict:
    """
    Load map settings from configuration.

    Args:
        config: Configuration dictionary (optional, will load if not provided)

    Returns:
        Dictionary with map settings

    Note:
        Nested dictionaries (heatmap, marker, boundary_style) are merged
        key by key, so a config that only overrides ``heatmap.radius``
        keeps the default blur and max_zoom.
    """
    if config is None:
        config = load_config()

    settings = config.get('settings', {})

    result = {**DEFAULT_SETTINGS, **settings}
    for key, default in DEFAULT_SETTINGS.items():
        if isinstance(default, dict) and isinstance(settings.get(key), dict):
            result[key] = {**default, **settings[key]}

    return result


def resolve_feed_url(config: Dict, feed_name: Optional[str] = None) -> str:
    """
    Return the URL for a named earthquake feed.

    Args:
        config: Configuration dictionary
        feed_name: Feed key such as 'all_day' (defaults to settings.default_feed)

    Raises:
        KeyError: If the feed name is not configured
    """
    if feed_name is None:
        feed_name = load_map_settings(config)['default_feed']

    feeds = config['feeds']
    if feed_name not in feeds:
        raise KeyError(
            f"Unknown feed '{feed_name}'. Available feeds: {', '.join(sorted(feeds))}"
        )
    return feeds[feed_name]
