"""Controllers package initialization."""

from curtain_map.controllers.callbacks import apply_viewport_change, make_curtain_updater, register_callbacks

__all__ = ['apply_viewport_change', 'make_curtain_updater', 'register_callbacks']
