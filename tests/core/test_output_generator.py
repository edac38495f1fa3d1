"""Tests for output file generation."""

import json

import folium

from quake_map.core.feature_parser import parse_boundaries, parse_earthquakes
from quake_map.core.output_generator import generate_output


class TestGenerateOutput:
    """Tests for generate_output()."""

    def test_writes_map_data_and_metadata(self, tmp_path, quake_feed, boundary_feed):
        quakes, _ = parse_earthquakes(quake_feed)
        boundaries, _ = parse_boundaries(boundary_feed)

        output_path = generate_output(
            folium.Map(tiles=None), quakes, boundaries, {'feed': 'all_day'},
            output_name='run', output_dir=tmp_path
        )

        assert output_path == tmp_path / 'run'
        assert (output_path / 'index.html').exists()

        saved = json.loads((output_path / 'data' / 'earthquakes.geojson').read_text(encoding='utf-8'))
        assert len(saved['features']) == 3

        metadata = json.loads((output_path / 'metadata.json').read_text(encoding='utf-8'))
        assert metadata['feed'] == 'all_day'
        assert metadata['earthquake_count'] == 3
        assert metadata['boundary_count'] == 2
        assert metadata['data_files'] == ['earthquakes.geojson', 'tectonic_plates.geojson']

    def test_skips_missing_layers(self, tmp_path, quake_feed):
        quakes, _ = parse_earthquakes(quake_feed)

        output_path = generate_output(
            folium.Map(tiles=None), quakes, None, {}, output_name='partial', output_dir=tmp_path
        )

        assert not (output_path / 'data' / 'tectonic_plates.geojson').exists()
        metadata = json.loads((output_path / 'metadata.json').read_text(encoding='utf-8'))
        assert metadata['boundary_count'] == 0

    def test_default_name_is_timestamped(self, tmp_path):
        output_path = generate_output(folium.Map(tiles=None), None, None, {}, output_dir=tmp_path)

        assert output_path.parent == tmp_path
        assert output_path.name.startswith('quake_map_')
