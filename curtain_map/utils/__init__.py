"""Utils package initialization."""

from curtain_map.utils.helper_utils import monitor_performance, feature_coordinates, feature_id, feature_key, feature_name

__all__ = ['monitor_performance', 'feature_coordinates', 'feature_id', 'feature_key', 'feature_name']
