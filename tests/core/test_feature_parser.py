"""Unit tests for GeoJSON feature parsing."""

import math

import pytest

from quake_map.core.feature_parser import (
    EARTHQUAKE_COLUMNS,
    parse_boundaries,
    parse_earthquakes,
    summarize_depths,
)


class TestParseEarthquakes:
    """Tests for parse_earthquakes()."""

    def test_parses_all_features_in_order(self, quake_feed):
        gdf, meta = parse_earthquakes(quake_feed)

        assert len(gdf) == 3
        assert list(gdf['event_id']) == ['ak001', 'us002', 'us003']
        assert list(gdf['magnitude']) == [1.0, 5.0, 9.5]
        assert list(gdf['depth_km']) == [5.0, 45.0, 95.0]
        assert meta['total_features'] == 3
        assert meta['valid_features'] == 3
        assert meta['skipped_features'] == 0

    def test_geometry_is_lon_lat_point(self, quake_feed):
        gdf, _ = parse_earthquakes(quake_feed)

        first = gdf.geometry.iloc[0]
        assert first.x == -150.1
        assert first.y == 61.2
        assert gdf.crs.to_epsg() == 4326

    def test_columns(self, quake_feed):
        gdf, _ = parse_earthquakes(quake_feed)
        for column in EARTHQUAKE_COLUMNS:
            assert column in gdf.columns

    def test_converts_time_to_iso_utc(self, quake_feed):
        gdf, _ = parse_earthquakes(quake_feed)
        # 1703001600000 ms = 2023-12-19 16:00:00 UTC
        assert gdf['time'].iloc[0] == '2023-12-19T16:00:00+00:00'

    def test_skips_features_without_location(self, feature_factory):
        make_feature, make_collection = feature_factory
        no_geometry = make_feature('x1', 0, 0, 10, 2.0)
        no_geometry['geometry'] = None
        out_of_range = make_feature('x2', 200, 0, 10, 2.0)
        short_coords = make_feature('x3', 0, 0, 10, 2.0)
        short_coords['geometry']['coordinates'] = [12.0]
        good = make_feature('ok', 12.0, 41.9, 10, 2.0)

        gdf, meta = parse_earthquakes(
            make_collection([no_geometry, out_of_range, short_coords, good, None])
        )

        assert list(gdf['event_id']) == ['ok']
        assert meta['total_features'] == 5
        assert meta['skipped_features'] == 4
        assert meta['valid_features'] == 1

    @pytest.mark.parametrize("malformed,kept,skipped", [
        ({'type': 'Feature', 'geometry': 'oops'}, 1, 1),
        ({'type': 'Feature', 'geometry': {'type': 'Point', 'coordinates': 5}}, 1, 1),
        ({'type': 'Feature', 'properties': ['x'],
          'geometry': {'type': 'Point', 'coordinates': [1.0, 2.0, 3.0]}}, 2, 0),
    ])
    def test_malformed_feature_does_not_abort_parse(self, feature_factory, malformed, kept, skipped):
        """A malformed feature is skipped (or kept as incomplete) and the rest still parse."""
        make_feature, make_collection = feature_factory
        good = make_feature('ok', 12.0, 41.9, 10, 2.0)

        gdf, meta = parse_earthquakes(make_collection([malformed, good]))

        assert len(gdf) == kept
        assert 'ok' in list(gdf['event_id'])
        assert meta['skipped_features'] == skipped
        assert meta['valid_features'] == kept

    def test_malformed_properties_kept_as_incomplete(self, feature_factory):
        _, make_collection = feature_factory
        feature = {'type': 'Feature', 'id': 'p', 'properties': 'bad',
                   'geometry': {'type': 'Point', 'coordinates': [1.0, 2.0, 3.0]}}

        gdf, meta = parse_earthquakes(make_collection([feature]))

        assert math.isnan(gdf['magnitude'].iloc[0])
        assert gdf['place'].iloc[0] == 'Unknown location'
        assert meta['missing_magnitude'] == 1

    def test_keeps_features_with_missing_magnitude_or_depth(self, feature_factory):
        """Incomplete earthquakes are kept with NaN so they still render."""
        make_feature, make_collection = feature_factory
        no_mag = make_feature('m', 10, 10, 12.0, None)
        no_depth = make_feature('d', 11, 11, 12.0, 3.1)
        no_depth['geometry']['coordinates'] = [11, 11]
        bad_depth = make_feature('b', 12, 12, 'deep', 2.0)

        gdf, meta = parse_earthquakes(make_collection([no_mag, no_depth, bad_depth]))

        assert len(gdf) == 3
        assert math.isnan(gdf['magnitude'].iloc[0])
        assert math.isnan(gdf['depth_km'].iloc[1])
        assert math.isnan(gdf['depth_km'].iloc[2])
        assert meta['missing_magnitude'] == 1
        assert meta['missing_depth'] == 2

    def test_missing_place_gets_placeholder(self, feature_factory):
        make_feature, make_collection = feature_factory
        feature = make_feature('p', 10, 10, 5.0, 1.0)
        feature['properties']['place'] = None

        gdf, _ = parse_earthquakes(make_collection([feature]))

        assert gdf['place'].iloc[0] == 'Unknown location'

    def test_empty_feed(self):
        gdf, meta = parse_earthquakes({'type': 'FeatureCollection', 'features': []})

        assert len(gdf) == 0
        assert meta['total_features'] == 0
        assert 'magnitude' in gdf.columns

    def test_none_feed(self):
        gdf, meta = parse_earthquakes(None)
        assert len(gdf) == 0
        assert meta['valid_features'] == 0


class TestParseBoundaries:
    """Tests for parse_boundaries()."""

    def test_parses_line_strings(self, boundary_feed):
        gdf, meta = parse_boundaries(boundary_feed)

        assert len(gdf) == 2
        assert list(gdf['Name']) == ['AF-AN', 'NA-PA']
        assert gdf.geometry.iloc[0].geom_type == 'LineString'
        assert meta['skipped_features'] == 0

    def test_skips_invalid_geometry(self, boundary_feed):
        features = list(boundary_feed['features']) + [
            {'type': 'Feature', 'properties': {}, 'geometry': None},
            {'type': 'Feature', 'properties': {}},
            {'type': 'Feature', 'properties': {}, 'geometry': {'type': 'Blob', 'coordinates': []}},
        ]

        gdf, meta = parse_boundaries({'type': 'FeatureCollection', 'features': features})

        assert len(gdf) == 2
        assert meta['total_features'] == 5
        assert meta['skipped_features'] == 3

    def test_empty_document(self):
        gdf, meta = parse_boundaries({'type': 'FeatureCollection', 'features': []})
        assert len(gdf) == 0
        assert meta['valid_features'] == 0


class TestSummarizeDepths:
    """Tests for summarize_depths()."""

    def test_counts_per_bin_in_order(self, quake_feed):
        gdf, _ = parse_earthquakes(quake_feed)

        counts = summarize_depths(gdf)

        assert list(counts) == [
            'Surface', 'Very Shallow', 'Shallow', 'Moderately Deep', 'Deep', 'Very Deep'
        ]
        assert counts['Surface'] == 1
        assert counts['Shallow'] == 1
        assert counts['Very Deep'] == 1
        assert sum(counts.values()) == 3

    def test_missing_depth_counts_as_catch_all(self, feature_factory):
        make_feature, make_collection = feature_factory
        feature = make_feature('n', 1, 1, None, 2.0)

        gdf, _ = parse_earthquakes(make_collection([feature]))

        assert summarize_depths(gdf)['Surface'] == 1
