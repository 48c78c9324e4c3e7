"""
Per-axis extent model and coordinate helpers.

Every axis of a skeleton coordinate is in one of three states: pinned
to the lower boundary (``NEGATIVE``), pinned to the upper boundary
(``POSITIVE``), or free inside the face (``Interior(v)`` with
``0 <= v < side_len``). A coordinate is a plain tuple of extents, one
per axis, so it can be hashed and used directly as a dictionary key.

The Euclidean embedding reserves offset ``0`` for the lower boundary and
``side_len + 1`` for the upper one, with interior values occupying
``[1, side_len]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class ExtentKind(Enum):
    """State of a single axis."""
    NEGATIVE = "negative"
    POSITIVE = "positive"
    INTERIOR = "interior"


@dataclass(frozen=True)
class Extent:
    """Coordinate value along one axis.

    Attributes:
        kind: Whether the axis is pinned low, pinned high, or free.
        value: Interior offset in ``[0, side_len)``; always 0 for pins.
    """
    kind: ExtentKind
    value: int = 0

    @classmethod
    def interior(cls, value: int) -> "Extent":
        return cls(ExtentKind.INTERIOR, value)

    @property
    def is_interior(self) -> bool:
        return self.kind is ExtentKind.INTERIOR

    def step(self, direction: int, side_len: int) -> Optional["Extent"]:
        """Return the extent one unit away in ``direction`` (+1 or -1).

        Walking off the interior lands on the matching pin, and walking
        inward from a pin lands on the first (or last) interior value.
        A zero-width axis connects the two pins directly. ``None`` means
        there is nothing further in that direction.
        """
        if self.kind is ExtentKind.POSITIVE:
            if direction > 0:
                return None
            return Extent.interior(side_len - 1) if side_len > 0 else NEGATIVE
        if self.kind is ExtentKind.NEGATIVE:
            if direction < 0:
                return None
            return Extent.interior(0) if side_len > 0 else POSITIVE
        if direction > 0:
            nxt = self.value + 1
            if nxt < side_len:
                return Extent.interior(nxt)
            if nxt == side_len:
                return POSITIVE
            return None
        if self.value == 0:
            return NEGATIVE
        return Extent.interior(self.value - 1)

    def __repr__(self) -> str:
        if self.kind is ExtentKind.INTERIOR:
            return f"Interior({self.value})"
        return self.kind.name.capitalize()


NEGATIVE = Extent(ExtentKind.NEGATIVE)
POSITIVE = Extent(ExtentKind.POSITIVE)

#: Placeholder stored in every free axis of a face pattern
FACE_SENTINEL = Extent.interior(0)

Coordinate = Tuple[Extent, ...]


def to_euclidean(extent: Extent, side_len: int) -> int:
    """Map an extent to its integer offset along a ``side_len + 2`` wide axis."""
    if extent.kind is ExtentKind.NEGATIVE:
        return 0
    if extent.kind is ExtentKind.POSITIVE:
        return side_len + 1
    return extent.value + 1


def free_axes(coord: Coordinate) -> int:
    """Count the axes of ``coord`` that are in the interior state."""
    return sum(1 for e in coord if e.kind is ExtentKind.INTERIOR)


def face_of(coord: Coordinate) -> Coordinate:
    """Return the face pattern ``coord`` belongs to.

    Interior entries are replaced by the sentinel so that two coordinates
    on the same face map to the same key regardless of their offsets.
    """
    return tuple(FACE_SENTINEL if e.kind is ExtentKind.INTERIOR else e for e in coord)


def make_coordinate(*items: Union[int, str, Extent]) -> Coordinate:
    """Build a coordinate from a compact notation.

    Integers become interior values, ``"-"`` and ``"+"`` become the lower
    and upper pins, and ``Extent`` instances are passed through.

    >>> make_coordinate("-", 3, "+")
    (Negative, Interior(3), Positive)
    """
    out = []
    for item in items:
        if isinstance(item, Extent):
            out.append(item)
        elif item == "-":
            out.append(NEGATIVE)
        elif item == "+":
            out.append(POSITIVE)
        elif isinstance(item, int) and not isinstance(item, bool):
            out.append(Extent.interior(item))
        else:
            raise ValueError(f"Cannot interpret {item!r} as an extent")
    return tuple(out)
