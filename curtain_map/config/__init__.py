"""Config package initialization."""

from curtain_map.config.settings import APP_CONFIG, MAP_CONFIG

__all__ = ['APP_CONFIG', 'MAP_CONFIG']
