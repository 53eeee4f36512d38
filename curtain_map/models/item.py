"""Data model for the map curtain: bounds, items, handles and host capabilities."""

from collections import namedtuple
from enum import Enum
from typing import Protocol, Tuple, runtime_checkable

LatLng = namedtuple("LatLng", ["lat", "lng"])

RefreshResult = namedtuple("RefreshResult", ["attached", "detached"])


class UnknownItemError(KeyError):
    """Raised when a handle does not belong to the curtain it is used with."""


class ItemState(Enum):
    SUPPRESSED = "suppressed"
    DISPLAYED = "displayed"
    WITHHELD = "withheld"


class Bounds:
    """
    A snapshot of the visible map rectangle. Bounds are never updated in
    place; a new snapshot replaces the previous one wholesale.
    """
    __slots__ = ("_southwest", "_northeast")

    def __init__(self, southwest, northeast):
        self._southwest = LatLng(*southwest)
        self._northeast = LatLng(*northeast)

    @classmethod
    def from_corners(cls, corners):
        """
        Builds bounds from the dash-leaflet ``bounds`` prop shape.

        Args:
            corners (list): [[south, west], [north, east]]

        Returns:
            Bounds: The corresponding snapshot.
        """
        (south, west), (north, east) = corners
        return cls((south, west), (north, east))

    @property
    def southwest(self):
        return self._southwest

    @property
    def northeast(self):
        return self._northeast

    def to_corners(self):
        return [list(self._southwest), list(self._northeast)]

    def __eq__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return self._southwest == other._southwest and self._northeast == other._northeast

    def __hash__(self):
        return hash((self._southwest, self._northeast))

    def __repr__(self):
        return f"Bounds(southwest={tuple(self._southwest)}, northeast={tuple(self._northeast)})"


class Item:
    """One registered feature, its renderable layer and its suppression flag."""
    __slots__ = ("feature", "layer", "suppressed")

    def __init__(self, layer, feature):
        self.layer = layer
        self.feature = feature
        self.suppressed = False


class ItemHandle:
    """
    Opaque reference to an item owned by a registry. Callers never see the
    item record itself; every mutation goes through the curtain.
    """
    __slots__ = ("_owner", "_index")

    def __init__(self, owner, index):
        self._owner = owner
        self._index = index

    def __eq__(self, other):
        if not isinstance(other, ItemHandle):
            return NotImplemented
        return self._owner is other._owner and self._index == other._index

    def __hash__(self):
        return hash((id(self._owner), self._index))

    def __repr__(self):
        return f"ItemHandle({self._index})"


@runtime_checkable
class MapHost(Protocol):
    """The host canvas the curtain attaches layers to."""

    def add_layer(self, layer) -> None: ...

    def remove_layer(self, layer) -> None: ...

    def get_bounds(self) -> Bounds: ...


@runtime_checkable
class RenderableLayer(Protocol):
    """A layer whose attachment state the host can report."""

    def is_attached(self) -> bool: ...


@runtime_checkable
class Feature(Protocol):
    """A point feature exposing ``(longitude, latitude)``."""

    def coordinates(self) -> Tuple[float, float]: ...
