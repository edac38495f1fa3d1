"""
Output generation module for Quake Map Creator.

This module handles saving the generated map and data files to the output directory.
Creates a timestamped directory structure with HTML map, GeoJSON data files, and metadata.

Functions:
    generate_output: Save map, data files, and metadata to output directory
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

import folium
import geopandas as gpd

from quake_map.config.config_loader import OUTPUT_DIR
from quake_map.utils.logger import get_logger

logger = get_logger(__name__)


def generate_output(
    map_obj: folium.Map,
    quakes: Optional[gpd.GeoDataFrame],
    boundaries: Optional[gpd.GeoDataFrame],
    metadata: Dict,
    output_name: Optional[str] = None,
    output_dir: Optional[Path] = None
) -> Path:
    """
    Generate output directory with HTML map, GeoJSON data files and metadata.

    Creates an output directory containing:
    - index.html: Interactive Leaflet map
    - metadata.json: Feed, validation and depth summary information
    - data/earthquakes.geojson: Parsed earthquakes (if the feed loaded)
    - data/tectonic_plates.geojson: Parsed boundaries (if the feed loaded)

    Parameters:
    -----------
    map_obj : folium.Map
        Folium map object to save
    quakes : Optional[gpd.GeoDataFrame]
        Parsed earthquakes, or None if unavailable
    boundaries : Optional[gpd.GeoDataFrame]
        Parsed plate boundaries, or None if unavailable
    metadata : Dict
        Run metadata (feeds, parsing, depth_summary, ...)
    output_name : Optional[str]
        Custom output directory name (defaults to timestamped name)
    output_dir : Optional[Path]
        Parent directory (defaults to OUTPUT_DIR)

    Returns:
    --------
    Path
        Path to output directory

    Example:
        >>> output_path = generate_output(map_obj, quakes, boundaries, metadata)
        >>> output_path
        Path('outputs/quake_map_20250108_143022')
    """
    logger.info("=" * 80)
    logger.info("Generating Output Files")
    logger.info("=" * 80)

    if output_name is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_name = f"quake_map_{timestamp}"

    output_path = Path(output_dir or OUTPUT_DIR) / output_name
    output_path.mkdir(parents=True, exist_ok=True)

    data_path = output_path / 'data'
    data_path.mkdir(exist_ok=True)

    logger.info(f"Output directory: {output_path}")

    data_files = []
    for file_stem, gdf in (('earthquakes', quakes), ('tectonic_plates', boundaries)):
        if gdf is None:
            continue
        logger.info(f"  - Saving {file_stem} ({len(gdf)} features)...")
        data_file = data_path / f'{file_stem}.geojson'
        data_file.write_text(gdf.to_json(), encoding='utf-8')
        data_files.append(data_file.name)

    logger.info("  - Saving interactive map...")
    map_file = output_path / 'index.html'
    map_obj.save(str(map_file))

    logger.info("  - Saving metadata...")
    metadata_file = output_path / 'metadata.json'

    summary = {
        'generated_at': datetime.now().isoformat(),
        'earthquake_count': len(quakes) if quakes is not None else 0,
        'boundary_count': len(boundaries) if boundaries is not None else 0,
        'data_files': data_files,
        **metadata
    }

    with open(metadata_file, 'w', encoding='utf-8') as f:
        json.dump(summary, f, indent=2, default=str)

    logger.info("")
    logger.info("=" * 80)
    logger.info("✓ Output Generation Complete")
    logger.info("=" * 80)
    logger.info(f"Files saved to: {output_path}")
    logger.info("  - index.html (interactive map)")
    logger.info("  - metadata.json (summary statistics)")
    logger.info(f"  - data/ ({len(data_files)} GeoJSON files)")
    logger.info("")
    logger.info(f"To view the map, open: {map_file}")
    logger.info("=" * 80)

    return output_path
