"""Map component and dash-leaflet host for the curtain."""

import logging

import dash_leaflet as dl

from curtain_map.config.settings import MAP_CONFIG
from curtain_map.models.item import Bounds
from curtain_map.utils.helper_utils import feature_coordinates, feature_id, feature_name

# Configure logging
logger = logging.getLogger(__name__)

CURTAIN_LAYER_ID = "curtain-layer"


class LeafletMapHost:
    """
    Server-side stand-in for a dash-leaflet map. The browser reports its
    viewport through the map's ``bounds`` prop; attached layers are rendered
    as the children of the curtain ``LayerGroup`` in attach order.
    """
    def __init__(self, initial_bounds=None):
        """
        Args:
            initial_bounds (list or None): [[south, west], [north, east]] used
                until the browser reports a viewport.
        """
        self._viewport = Bounds.from_corners(initial_bounds) if initial_bounds else None
        self._attached = {}

    @property
    def has_viewport(self):
        return self._viewport is not None

    def update_viewport(self, corners):
        self._viewport = Bounds.from_corners(corners)
        logger.debug(f"Viewport updated to {self._viewport!r}")

    def get_bounds(self):
        return self._viewport

    def add_layer(self, layer):
        self._attached[id(layer)] = layer

    def remove_layer(self, layer):
        self._attached.pop(id(layer), None)

    def has_layer(self, layer):
        return id(layer) in self._attached

    def children(self):
        """Return the components currently attached, in attach order."""
        return [layer.component for layer in self._attached.values()]


class MarkerLayer:
    """A ``dl.Marker`` whose attachment state is owned by a ``LeafletMapHost``."""
    def __init__(self, host, component, feature_id=None):
        self._host = host
        self.component = component
        self.feature_id = feature_id

    def is_attached(self):
        return self._host.has_layer(self)

    def __repr__(self):
        return f"MarkerLayer({self.feature_id!r})"


def create_marker_layer(host, feature, key=None):
    """
    Builds a marker layer for a point feature.

    Args:
        host (LeafletMapHost): The host the layer will be attached to.
        feature (dict): GeoJSON point feature.
        key (str or None): Component key; defaults to the feature id.

    Returns:
        MarkerLayer: Layer wrapping a ``dl.Marker`` with a name tooltip.
    """
    lon, lat = feature_coordinates(feature)
    fid = feature_id(feature) if key is None else key
    marker = dl.Marker(
        id=f"marker-{fid}",
        position=[lat, lon],
        children=[dl.Tooltip(feature_name(feature, default=str(fid)))],
    )
    return MarkerLayer(host, marker, feature_id=fid)


def create_map_component(id="map"):
    """
    Creates the map component holding the curtain layer group.

    Args:
        id (str): The component ID to use

    Returns:
        dash_leaflet.Map: Configured map component
    """
    tile_layer = dl.TileLayer(
        url=MAP_CONFIG["tile_url"],
        attribution=MAP_CONFIG["attribution"],
    )

    curtain_layer = dl.LayerGroup(id=CURTAIN_LAYER_ID, children=[])

    return dl.Map(
        id=id,
        children=[tile_layer, curtain_layer],
        center=MAP_CONFIG["default_center"],
        zoom=MAP_CONFIG["default_zoom"],
        style={'width': '100%', 'height': '600px'},
    )
