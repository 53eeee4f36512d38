"""Components package initialization."""

from curtain_map.components.map import (
    CURTAIN_LAYER_ID,
    LeafletMapHost,
    MarkerLayer,
    create_map_component,
    create_marker_layer,
)

__all__ = [
    'CURTAIN_LAYER_ID',
    'LeafletMapHost',
    'MarkerLayer',
    'create_map_component',
    'create_marker_layer',
]
