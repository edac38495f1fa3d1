"""
GeoJSON feed fetching module for Quake Map Creator.

This module downloads the earthquake feed and the tectonic plate boundaries.
Each feed is fetched as an independent task; a failure in one never prevents
the other from completing. Failures are reported in the returned metadata
rather than raised, so the map can still be built from whatever arrived.

Functions:
    fetch_geojson: Fetch one GeoJSON document
    fetch_feeds: Fetch several GeoJSON documents concurrently
"""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Optional, Tuple

import requests

from quake_map.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30


def fetch_geojson(
    url: str,
    name: str = "Feed",
    timeout: float = DEFAULT_TIMEOUT
) -> Tuple[Optional[Dict], Dict]:
    """
    Fetch a GeoJSON document over HTTP.

    Parameters:
    -----------
    url : str
        Feed URL
    name : str
        Feed name for logging and metadata
    timeout : float
        Request timeout in seconds (default: 30)

    Returns:
    --------
    Tuple[Optional[Dict], Dict]
        Parsed GeoJSON (None on failure) and a metadata dictionary

    Metadata Keys:
        - name: Feed name
        - url: Requested URL
        - status_code: HTTP status code (if a response arrived)
        - feature_count: Number of features in the document
        - fetch_time: Elapsed time in seconds
        - error: Error message if the fetch failed, else None
    """
    metadata = {
        'name': name,
        'url': url,
        'status_code': None,
        'feature_count': 0,
        'fetch_time': 0.0,
        'error': None
    }

    start_time = time.time()
    logger.info(f"  Fetching {name}...")
    logger.debug(f"GET {url}")

    try:
        response = requests.get(url, timeout=timeout)
        metadata['status_code'] = response.status_code
        response.raise_for_status()
        data = response.json()

        if not isinstance(data, dict):
            raise ValueError(f"expected a GeoJSON object, got {type(data).__name__}")

        metadata['feature_count'] = len(data.get('features') or [])
        metadata['fetch_time'] = time.time() - start_time
        logger.info(
            f"    ✓ {name}: {metadata['feature_count']} features "
            f"({metadata['fetch_time']:.2f}s)"
        )
        return data, metadata

    except requests.exceptions.Timeout:
        metadata['error'] = f"Request timed out after {timeout}s"
    except requests.exceptions.JSONDecodeError as e:
        metadata['error'] = f"Invalid GeoJSON response: {str(e)}"
    except requests.exceptions.RequestException as e:
        metadata['error'] = f"Request failed: {str(e)}"
    except ValueError as e:
        metadata['error'] = f"Invalid GeoJSON response: {str(e)}"

    metadata['fetch_time'] = time.time() - start_time
    logger.error(f"    ✗ {name}: {metadata['error']}")
    return None, metadata


def fetch_feeds(
    urls: Dict[str, str],
    timeout: float = DEFAULT_TIMEOUT,
    max_workers: int = 2
) -> Dict[str, Tuple[Optional[Dict], Dict]]:
    """
    Fetch several GeoJSON feeds concurrently and wait for all of them.

    Parameters:
    -----------
    urls : Dict[str, str]
        Feed name -> URL
    timeout : float
        Per-request timeout in seconds
    max_workers : int
        Thread pool size (default: 2)

    Returns:
    --------
    Dict[str, Tuple[Optional[Dict], Dict]]
        Feed name -> (GeoJSON or None, metadata), in the order of ``urls``

    Example:
        >>> results = fetch_feeds({'earthquakes': quake_url, 'tectonic_plates': plates_url})
        >>> data, meta = results['earthquakes']
        >>> meta['error'] is None
        True
    """
    logger.info("=" * 80)
    logger.info("Fetching Feeds")
    logger.info("=" * 80)

    results = {}
    if not urls:
        return results

    future_to_name = {}
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(urls)))) as executor:
        for name, url in urls.items():
            future = executor.submit(fetch_geojson, url, name, timeout)
            future_to_name[future] = name

        for future in as_completed(tuple(future_to_name.keys())):
            name = future_to_name.pop(future)
            results[name] = future.result()

    failed = [name for name, (_, meta) in results.items() if meta['error']]
    if failed:
        logger.warning(f"⚠ {len(failed)} of {len(urls)} feed(s) failed: {', '.join(failed)}")
    logger.info("")

    return {name: results[name] for name in urls}
