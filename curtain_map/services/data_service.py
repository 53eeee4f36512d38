"""Data service for loading point features and building the curtain."""

import logging

import geopandas as gpd

from curtain_map.components.map import create_marker_layer
from curtain_map.services.curtain_service import Curtain
from curtain_map.utils.helper_utils import feature_key

# Configure logging
logger = logging.getLogger(__name__)


def load_point_features(path):
    """
    Loads point features from any vector format geopandas can read and
    returns them as GeoJSON feature dicts in file order. Data in a projected
    CRS is reprojected to WGS84 so coordinates are longitude/latitude. Rows
    whose geometry is missing, empty or not a Point are dropped with a
    warning. Every feature carries its row index as ``id``.

    Args:
        path (str or pathlib.Path): Location of the vector file.

    Returns:
        list: GeoJSON feature dicts with ``[lon, lat]`` coordinates.
    """
    gdf = gpd.read_file(path)
    if gdf.crs is not None and not gdf.crs.equals("EPSG:4326"):
        logger.info(f"Reprojecting {path} from {gdf.crs.to_string()} to EPSG:4326")
        gdf = gdf.to_crs(epsg=4326)

    is_point = (gdf.geometry.geom_type == "Point") & ~gdf.geometry.is_empty
    skipped = int((~is_point).sum())
    if skipped:
        logger.warning(f"Skipped {skipped} non-point rows from {path}")

    features = gdf[is_point].__geo_interface__["features"]
    for feature in features:
        lon, lat = feature["geometry"]["coordinates"][:2]
        feature["geometry"]["coordinates"] = [lon, lat]

    logger.info(f"Loaded {len(features)} point features from {path}")
    return features


def build_curtain(host, features):
    """
    Creates a curtain over ``host`` and registers a marker layer for each
    feature, preserving order. Features without an id are keyed by their
    position in ``features``.

    Args:
        host (LeafletMapHost): The map host.
        features (list): GeoJSON point features.

    Returns:
        tuple: The curtain and a dict mapping feature key to item handle.

    Raises:
        ValueError: If two features share a key.
    """
    curtain = Curtain(host)
    handles = {}
    for index, feature in enumerate(features):
        key = feature_key(feature, index)
        if key in handles:
            raise ValueError(f"Duplicate feature id {key!r} at position {index}")
        layer = create_marker_layer(host, feature, key=key)
        handles[key] = curtain.add(layer, feature)
    return curtain, handles
