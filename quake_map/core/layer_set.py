"""
Layer registry for Quake Map Creator.

A LayerSet maps display names to folium layers. Registration order is the
order entries appear in the layer control; names are unique.

Classes:
    LayerSet: Ordered registry of base layers and overlays
"""

from collections import OrderedDict
from typing import Iterator, List, Tuple

import folium
from folium.map import Layer

from quake_map.utils.logger import get_logger

logger = get_logger(__name__)


class LayerSet:
    """
    Ordered registry of map layers, owned by one map build.

    Example:
        >>> layers = LayerSet()
        >>> layers.register('Street Map', street_tiles, base=True)
        >>> layers.register('Heatmap', heat_layer)
        >>> layers.names()
        ['Street Map', 'Heatmap']
    """

    def __init__(self):
        self._layers: 'OrderedDict[str, Tuple[Layer, bool]]' = OrderedDict()

    def register(self, name: str, layer: Layer, base: bool = False) -> Layer:
        """
        Register a layer under a display name.

        The layer's control name and overlay flag are set to match the
        registration, so the folium LayerControl lists it under this name.

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._layers:
            raise ValueError(f"Layer '{name}' is already registered")

        layer.layer_name = name
        layer.overlay = not base
        layer.control = True
        self._layers[name] = (layer, base)
        logger.debug(f"Registered {'base layer' if base else 'overlay'}: {name}")
        return layer

    def __contains__(self, name: str) -> bool:
        return name in self._layers

    def __len__(self) -> int:
        return len(self._layers)

    def __getitem__(self, name: str) -> Layer:
        return self._layers[name][0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._layers)

    def names(self) -> List[str]:
        return list(self._layers)

    def base_layers(self) -> 'OrderedDict[str, Layer]':
        return OrderedDict((name, layer) for name, (layer, base) in self._layers.items() if base)

    def overlays(self) -> 'OrderedDict[str, Layer]':
        return OrderedDict((name, layer) for name, (layer, base) in self._layers.items() if not base)

    def attach(self, map_obj: folium.Map, collapsed: bool = False) -> folium.LayerControl:
        """
        Add every registered layer to the map, in registration order, then
        the layer control listing them.
        """
        for layer, _ in self._layers.values():
            layer.add_to(map_obj)

        control = folium.LayerControl(collapsed=collapsed)
        control.add_to(map_obj)
        logger.info(
            f"  - Added layer control ({len(self.base_layers())} base layers, "
            f"{len(self.overlays())} overlays)"
        )
        return control
