"""Utility functions for the map curtain application."""

import time
import logging
from functools import wraps
from collections import defaultdict

from curtain_map.config.settings import APP_CONFIG

# Configure logging
logger = logging.getLogger(__name__)


def monitor_performance(func):
    """
    Decorator to monitor the performance of functions.
    Logs average execution time after every ``APP_CONFIG["perf_log_every"]`` calls.

    Args:
        func (callable): The function to monitor

    Returns:
        callable: Wrapped function with performance monitoring
    """
    metrics = defaultdict(list)
    window = max(1, APP_CONFIG["perf_log_every"])

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        execution_time = time.perf_counter() - start_time
        metrics[func.__name__].append(execution_time)

        if len(metrics[func.__name__]) >= window:
            avg_time = sum(metrics[func.__name__]) / len(metrics[func.__name__])
            logger.info(f"{func.__name__} average execution time: {avg_time:.4f}s")
            metrics[func.__name__] = []

        return result
    return wrapper


def feature_coordinates(feature):
    """
    Returns the ``(longitude, latitude)`` pair of a point feature. Objects
    exposing ``coordinates()`` are asked directly; anything else is read as a
    GeoJSON feature mapping. Malformed geometry is not checked here.

    Args:
        feature: A Feature-like object or a GeoJSON feature dict.

    Returns:
        tuple: (lon, lat)
    """
    coordinates = getattr(feature, "coordinates", None)
    if callable(coordinates):
        return coordinates()
    lon, lat = feature["geometry"]["coordinates"][:2]
    return lon, lat


def feature_id(feature):
    """Return the GeoJSON ``id`` of a feature, or None."""
    if isinstance(feature, dict):
        return feature.get("id")
    return getattr(feature, "id", None)


def feature_key(feature, index):
    """Return the feature id as a string, or its position when it has none."""
    fid = feature_id(feature)
    return str(index) if fid is None else str(fid)


def feature_name(feature, default=""):
    """Return a display name for a feature, falling back to its id, then ``default``."""
    if isinstance(feature, dict):
        name = (feature.get("properties") or {}).get("name")
        if name:
            return str(name)
    fid = feature_id(feature)
    return default if fid is None else str(fid)
