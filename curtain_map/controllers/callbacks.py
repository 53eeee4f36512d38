"""Controllers for application callbacks."""

import logging
import threading

from dash import Output, Input
from dash.exceptions import PreventUpdate

from curtain_map.components.map import CURTAIN_LAYER_ID

# Configure logging
logger = logging.getLogger(__name__)


def apply_viewport_change(curtain, host, handles, bounds, suppressed_ids):
    """
    Applies one round of browser input to the curtain: the reported viewport
    and the set of suppressed features. Suppression changes are deferred so
    a single refresh makes every attach/detach decision.

    Args:
        curtain (Curtain): The curtain to update.
        host (LeafletMapHost): The host backing the curtain.
        handles (dict): Feature id to item handle.
        bounds (list or None): Map ``bounds`` prop, [[south, west], [north, east]].
        suppressed_ids (list or None): Feature ids the user switched off.

    Returns:
        list: The children of the curtain layer group.
    """
    if bounds:
        host.update_viewport(bounds)
    elif not host.has_viewport:
        raise PreventUpdate

    suppressed = {str(fid) for fid in (suppressed_ids or [])}
    for fid, handle in handles.items():
        curtain.set_suppressed(handle, str(fid) in suppressed, defer_attach=True)

    result = curtain.refresh()
    logger.debug(f"Viewport change: {result.attached} attached, {result.detached} detached")
    return host.children()


def make_curtain_updater(curtain, host, handles):
    """
    Returns a callable applying one viewport change at a time. The curtain
    and host are shared by every request thread, so each update holds a lock
    from the viewport change through to reading the rendered children.

    Args:
        curtain (Curtain): The curtain to update.
        host (LeafletMapHost): The host backing the curtain.
        handles (dict): Feature id to item handle.

    Returns:
        callable: ``update(bounds, suppressed_ids) -> list``
    """
    lock = threading.Lock()

    def update(bounds, suppressed_ids):
        with lock:
            return apply_viewport_change(curtain, host, handles, bounds, suppressed_ids)
    return update


def register_callbacks(app, curtain, host, handles):
    """
    Register all Dash callbacks for the application.

    Args:
        app: The Dash application instance
        curtain (Curtain): The curtain managing the point layers
        host (LeafletMapHost): The host backing the curtain
        handles (dict): Feature id to item handle
    """
    update = make_curtain_updater(curtain, host, handles)

    @app.callback(
        Output(CURTAIN_LAYER_ID, "children"),
        [
            Input("map", "bounds"),
            Input("suppressed-features", "value"),
        ],
    )
    def update_curtain(bounds, suppressed_ids):
        return update(bounds, suppressed_ids)
