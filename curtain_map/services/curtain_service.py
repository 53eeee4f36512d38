"""
Curtain service: keeps only the point layers inside the visible viewport
attached to the host map.

The service is split into three collaborating pieces that share state:

- ``ItemRegistry`` owns the ordered, append-only item records.
- ``BoundsTracker`` caches the host's viewport rectangle.
- ``Curtain`` decides which layers to attach or detach.

Everything runs synchronously on the caller's thread, normally from a map
move/zoom callback. Functions passed to ``Curtain.all`` and
``Curtain.each_visible`` must not call back into the curtain (``refresh``,
``set_suppressed``, ``add``); doing so is unsupported and is not guarded.
"""

import logging

from curtain_map.models.item import (
    Item,
    ItemHandle,
    ItemState,
    RefreshResult,
    UnknownItemError,
)
from curtain_map.utils.helper_utils import feature_coordinates, monitor_performance

# Configure logging
logger = logging.getLogger(__name__)


class ItemRegistry:
    """Ordered, append-only collection of items. Insertion order is the attach order."""

    def __init__(self):
        self._items = []

    def add(self, layer, feature):
        self._items.append(Item(layer, feature))
        return ItemHandle(self, len(self._items) - 1)

    def get(self, handle):
        """
        Resolve a handle issued by this registry.

        Raises:
            UnknownItemError: If the handle was issued elsewhere.
        """
        if not isinstance(handle, ItemHandle) or handle._owner is not self:
            raise UnknownItemError(handle)
        return self._items[handle._index]

    def handles(self):
        for index, item in enumerate(self._items):
            yield ItemHandle(self, index), item

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)


class BoundsTracker:
    """Cached snapshot of the host viewport, replaced on every ``update_bounds``."""

    def __init__(self, host):
        self._host = host
        self._bounds = None

    @property
    def bounds(self):
        return self._bounds

    def update_bounds(self):
        self._bounds = self._host.get_bounds()
        return self._bounds


class Curtain:
    """
    Attaches a registered layer to the host map while its feature is inside
    the viewport and detaches it once it leaves, unless the item is
    suppressed, in which case it stays detached regardless of geometry.

    Attachment state is always read from the layer (``is_attached()``) and
    never tracked here, so host-side changes made outside the curtain are
    respected and every attach/detach is issued only when it changes
    something.
    """

    def __init__(self, host):
        self._host = host
        self._registry = ItemRegistry()
        self._tracker = BoundsTracker(host)

    @property
    def bounds(self):
        return self._tracker.bounds

    def __len__(self):
        return len(self._registry)

    def add(self, layer, feature):
        """
        Register a layer and its feature. The item starts withheld: it is not
        attached until the next ``refresh`` finds it in view or it is turned on.

        Returns:
            ItemHandle: Opaque handle for later operations on this item.
        """
        return self._registry.add(layer, feature)

    def update_bounds(self):
        """Resnapshot the host viewport."""
        return self._tracker.update_bounds()

    def is_in_viewport(self, feature):
        """
        Test a feature against the cached bounds without resnapshotting.

        Inclusion is strict on all four edges: a point lying exactly on the
        viewport border counts as outside. With no snapshot yet, nothing is in
        view.
        """
        bounds = self._tracker.bounds
        if bounds is None:
            return False
        lon, lat = feature_coordinates(feature)
        sw, ne = bounds.southwest, bounds.northeast
        return sw.lat < lat < ne.lat and sw.lng < lon < ne.lng

    def set_suppressed(self, handle, value, defer_attach=False):
        """
        Suppress or release an item.

        Suppressing detaches the layer at once if it is attached. Releasing
        attaches it immediately without a viewport test, so an out-of-view
        item shows until the next ``refresh``; pass ``defer_attach=True`` to
        leave the decision to that refresh instead.

        Args:
            handle (ItemHandle): Item to change.
            value (bool): New suppression flag.
            defer_attach (bool): When releasing, skip the immediate attach.
        """
        item = self._registry.get(handle)
        if value:
            item.suppressed = True
            if item.layer.is_attached():
                logger.debug(f"Detaching suppressed item {handle!r}")
                self._host.remove_layer(item.layer)
            return

        item.suppressed = False
        if not defer_attach and not item.layer.is_attached():
            logger.debug(f"Force attaching released item {handle!r}")
            self._host.add_layer(item.layer)

    def turn_on(self, handle, skip_adding_layer=False):
        self.set_suppressed(handle, False, defer_attach=skip_adding_layer)

    def turn_off(self, handle):
        self.set_suppressed(handle, True)

    def is_suppressed(self, handle):
        return self._registry.get(handle).suppressed

    def is_attached(self, handle):
        return self._registry.get(handle).layer.is_attached()

    def state(self, handle):
        item = self._registry.get(handle)
        if item.suppressed:
            return ItemState.SUPPRESSED
        if item.layer.is_attached():
            return ItemState.DISPLAYED
        return ItemState.WITHHELD

    @monitor_performance
    def refresh(self):
        """
        Resnapshot the viewport and bring every non-suppressed item in line
        with it: attach what came into view, detach what left. Suppressed
        items are skipped.

        Returns:
            RefreshResult: Number of layers attached and detached.
        """
        self._tracker.update_bounds()

        attached = detached = 0
        for item in self._registry:
            if item.suppressed:
                continue

            in_view = self.is_in_viewport(item.feature)
            is_attached = item.layer.is_attached()
            if in_view and not is_attached:
                self._host.add_layer(item.layer)
                attached += 1
            elif not in_view and is_attached:
                self._host.remove_layer(item.layer)
                detached += 1

        if attached or detached:
            logger.debug(f"Curtain refresh attached {attached}, detached {detached} of {len(self._registry)} items")
        return RefreshResult(attached, detached)

    def all(self, fn):
        """
        Call ``fn(layer, feature, handle)`` for every item in registry order,
        whatever its suppression or attachment state.
        """
        self._tracker.update_bounds()
        for handle, item in self._registry.handles():
            fn(item.layer, item.feature, handle)

    def each_visible(self, fn):
        """
        Call ``fn(layer, feature)`` for every item that is not suppressed and
        currently attached on the host. This reports what is rendered now,
        which can lag the viewport until the next ``refresh``.
        """
        self._tracker.update_bounds()
        for item in self._registry:
            if item.suppressed:
                continue
            if item.layer.is_attached():
                fn(item.layer, item.feature)
