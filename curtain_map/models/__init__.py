"""Models package initialization."""

from curtain_map.models.item import (
    Bounds,
    Feature,
    Item,
    ItemHandle,
    ItemState,
    LatLng,
    MapHost,
    RefreshResult,
    RenderableLayer,
    UnknownItemError,
)

__all__ = [
    'Bounds',
    'Feature',
    'Item',
    'ItemHandle',
    'ItemState',
    'LatLng',
    'MapHost',
    'RefreshResult',
    'RenderableLayer',
    'UnknownItemError',
]
