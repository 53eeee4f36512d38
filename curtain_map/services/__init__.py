"""Services package initialization."""

from curtain_map.services.curtain_service import BoundsTracker, Curtain, ItemRegistry
from curtain_map.services.data_service import build_curtain, load_point_features

__all__ = ['BoundsTracker', 'Curtain', 'ItemRegistry', 'build_curtain', 'load_point_features']
