#!/usr/bin/env python
"""
Quake Map Creator
=================
Fetches the live USGS earthquake feed and the PB2002 tectonic plate boundaries
and generates an interactive Leaflet web map: magnitude/depth-encoded circle
markers, a heatmap, clustered markers, plate boundaries, a depth legend and a
layer control.

Usage:
    quake-map --feed all_week --output my_map
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from quake_map.utils.logger import setup_logging, get_logger

from quake_map.config.config_loader import load_config, load_map_settings, resolve_feed_url

from quake_map.core.feed_client import fetch_feeds
from quake_map.core.feature_parser import parse_earthquakes, parse_boundaries, summarize_depths
from quake_map.core.layer_builders import BOUNDARY_LAYER_NAME
from quake_map.core.map_builder import create_web_map
from quake_map.core.output_generator import generate_output

EARTHQUAKE_FEED = 'earthquakes'
BOUNDARY_FEED = 'tectonic_plates'


def main(
    feed_name: Optional[str] = None,
    output_name: Optional[str] = None,
    config_path: Optional[str] = None,
    timeout: Optional[float] = None,
    output_dir: Optional[Path] = None,
    log_dir: Optional[Path] = None
) -> Optional[Path]:
    """
    Main execution workflow for Quake Map Creator.

    Workflow Steps:
    1. Setup logging to console and file
    2. Load configuration
    3. Fetch the earthquake and boundary feeds concurrently
    4. Parse and validate features
    5. Create interactive web map
    6. Generate output files

    A feed that fails to load does not stop the workflow: the map is built
    from whatever loaded and shows an error banner for the rest.

    Parameters:
    -----------
    feed_name : Optional[str]
        USGS summary feed key (defaults to settings.default_feed, 'all_day')
    output_name : Optional[str]
        Custom name for output directory (defaults to timestamped name)
    config_path : Optional[str]
        Alternative configuration file
    timeout : Optional[float]
        Per-request timeout in seconds (defaults to settings.request_timeout)
    output_dir : Optional[Path]
        Parent directory for outputs (defaults to ./outputs)
    log_dir : Optional[Path]
        Directory for log files (defaults to ./logs)

    Returns:
    --------
    Optional[Path]
        Path to output directory if successful, None if failed

    Example:
        >>> output_path = main('all_week')
        >>> print(f"Map saved to: {output_path / 'index.html'}")
    """
    workflow_start_time = time.time()

    log_file = setup_logging(log_dir)
    logger = get_logger(__name__)

    logger.info("=" * 80)
    logger.info("QUAKE MAP CREATOR - USGS Earthquake Web Map")
    logger.info("=" * 80)
    logger.info(f"Log file: {log_file}")
    logger.info("")

    try:
        config = load_config(config_path)
        settings = load_map_settings(config)

        feed_name = feed_name or settings['default_feed']
        quake_url = resolve_feed_url(config, feed_name)
        logger.info(f"Earthquake feed: {feed_name}")
        logger.info("")

        # Step 1: Fetch both feeds
        results = fetch_feeds(
            {EARTHQUAKE_FEED: quake_url, BOUNDARY_FEED: settings['boundaries_url']},
            timeout=timeout or settings['request_timeout'],
            max_workers=settings['max_workers']
        )
        quake_data, quake_fetch_meta = results[EARTHQUAKE_FEED]
        boundary_data, boundary_fetch_meta = results[BOUNDARY_FEED]

        # Step 2: Parse and validate
        logger.info("=" * 80)
        logger.info("Parsing Features")
        logger.info("=" * 80)

        fetch_errors = {}
        quakes = boundaries = None
        quake_parse_meta = boundary_parse_meta = None
        depth_counts = None

        if quake_fetch_meta['error']:
            fetch_errors['Earthquakes'] = quake_fetch_meta['error']
        else:
            quakes, quake_parse_meta = parse_earthquakes(quake_data)
            depth_counts = summarize_depths(quakes)

        if boundary_fetch_meta['error']:
            fetch_errors[BOUNDARY_LAYER_NAME] = boundary_fetch_meta['error']
        else:
            boundaries, boundary_parse_meta = parse_boundaries(boundary_data)

        if quakes is not None and len(quakes) == 0:
            logger.warning("⚠ WARNING: The feed contained no earthquakes to map.")
        logger.info("")

        # Step 3: Create web map
        map_obj = create_web_map(
            quakes, boundaries, settings,
            fetch_errors=fetch_errors,
            feed_name=feed_name,
            depth_counts=depth_counts
        )

        total_execution_time = time.time() - workflow_start_time

        metadata = {
            'feed': feed_name,
            'feeds': {
                EARTHQUAKE_FEED: quake_fetch_meta,
                BOUNDARY_FEED: boundary_fetch_meta
            },
            'parsing': {
                EARTHQUAKE_FEED: quake_parse_meta,
                BOUNDARY_FEED: boundary_parse_meta
            },
            'depth_summary': depth_counts,
            'errors': fetch_errors,
            '_execution_time': {
                'total_seconds': total_execution_time,
                'formatted': f"{total_execution_time:.2f} seconds"
            }
        }

        # Step 4: Generate output
        output_path = generate_output(
            map_obj, quakes, boundaries, metadata,
            output_name=output_name,
            output_dir=output_dir
        )

        logger.info("")
        if fetch_errors:
            logger.warning(f"⚠ WORKFLOW COMPLETE WITH {len(fetch_errors)} FAILED FEED(S)")
        else:
            logger.info("✓ WORKFLOW COMPLETE")
        logger.info(f"✓ Total execution time: {total_execution_time:.2f} seconds")
        logger.info(f"✓ Output directory: {output_path}")
        logger.info(f"✓ Log file: {log_file}")
        logger.info("")

        return output_path

    except Exception as e:
        elapsed_time = time.time() - workflow_start_time

        logger.error("")
        logger.error("=" * 80)
        logger.error("✗ WORKFLOW FAILED")
        logger.error("=" * 80)
        logger.error(f"Error: {str(e)}", exc_info=True)
        logger.error(f"Workflow failed after {elapsed_time:.2f} seconds")
        logger.error("")
        logger.error(f"See log file for details: {log_file}")
        logger.error("=" * 80)
        return None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate an interactive web map of recent earthquakes from the USGS feed."
    )
    parser.add_argument(
        "--feed",
        help="USGS summary feed, e.g. all_hour, all_day, 4.5_week, significant_month (default: all_day)",
    )
    parser.add_argument(
        "--output",
        help="Output directory name (default: quake_map_<timestamp>)",
    )
    parser.add_argument(
        "--config",
        help="Path to an alternative map_config.json",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-request timeout in seconds (default: 30)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Parent directory for generated maps (default: ./outputs)",
    )
    return parser.parse_args(argv)


def cli(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    output_dir = main(
        feed_name=args.feed,
        output_name=args.output,
        config_path=args.config,
        timeout=args.timeout,
        output_dir=args.output_dir
    )

    if output_dir:
        print(f"\n✓ Success! Open {output_dir / 'index.html'} in your browser.")
        return 0

    print("\n✗ Failed to generate map. Check log file for details.")
    return 1


if __name__ == "__main__":
    sys.exit(cli())
