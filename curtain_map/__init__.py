"""
Map Curtain
===========

Keeps large point layers responsive by attaching each feature's marker to
the map only while the feature lies inside the visible viewport. Anything
outside the viewport stays behind the "curtain". Individual items can also
be suppressed by hand, which keeps them hidden whatever the viewport.

Usage:

    from curtain_map import Curtain

    curtain = Curtain(host)            # host: add_layer / remove_layer / get_bounds
    handle = curtain.add(layer, feature)
    curtain.refresh()                  # call on every pan/zoom
    curtain.set_suppressed(handle, True)
"""

from curtain_map.models.item import (
    Bounds,
    ItemHandle,
    ItemState,
    MapHost,
    RefreshResult,
    RenderableLayer,
    UnknownItemError,
)
from curtain_map.services.curtain_service import Curtain

__all__ = [
    "Bounds",
    "Curtain",
    "ItemHandle",
    "ItemState",
    "MapHost",
    "RefreshResult",
    "RenderableLayer",
    "UnknownItemError",
]

__version__ = "0.1.0"
