"""Tests for the LayerSet registry."""

import folium
import pytest

from quake_map.core.layer_set import LayerSet


def _control_entries(m, control):
    """Render the map so the layer control collects its entries."""
    m.get_root().render()
    return list(control.base_layers), list(control.overlays)


class TestLayerSet:
    """Tests for LayerSet."""

    def test_register_preserves_order(self):
        layers = LayerSet()
        layers.register('Street Map', folium.TileLayer('OpenStreetMap'), base=True)
        layers.register('B', folium.FeatureGroup())
        layers.register('A', folium.FeatureGroup())

        assert layers.names() == ['Street Map', 'B', 'A']
        assert list(layers) == ['Street Map', 'B', 'A']
        assert len(layers) == 3
        assert 'A' in layers

    def test_duplicate_name_raises(self):
        layers = LayerSet()
        layers.register('Heatmap', folium.FeatureGroup())

        with pytest.raises(ValueError, match="already registered"):
            layers.register('Heatmap', folium.FeatureGroup())

    def test_register_sets_control_name(self):
        layers = LayerSet()
        group = folium.FeatureGroup(name='something else', overlay=False)

        layers.register('Circles', group)

        assert group.layer_name == 'Circles'
        assert group.overlay is True
        assert layers['Circles'] is group

    def test_base_and_overlays(self):
        layers = LayerSet()
        tiles = folium.TileLayer('OpenStreetMap')
        group = folium.FeatureGroup()
        layers.register('Street Map', tiles, base=True)
        layers.register('Markers', group)

        assert list(layers.base_layers()) == ['Street Map']
        assert list(layers.overlays()) == ['Markers']
        assert tiles.overlay is False

    def test_attach_lists_every_layer_in_control(self):
        m = folium.Map(tiles=None)
        layers = LayerSet()
        layers.register('Street Map', folium.TileLayer('OpenStreetMap'), base=True)
        layers.register('Heatmap', folium.FeatureGroup())
        layers.register('Markers', folium.FeatureGroup())

        control = layers.attach(m)

        assert isinstance(control, folium.LayerControl)
        base_layers, overlays = _control_entries(m, control)
        assert base_layers == ['Street Map']
        assert overlays == ['Heatmap', 'Markers']

    def test_attach_empty_set(self):
        m = folium.Map(tiles=None)

        control = LayerSet().attach(m)

        assert _control_entries(m, control) == ([], [])
