"""
Skeleton metadata: face enumeration, dense indexing and adjacency.

``HyperSurfaceMeta`` is the single source of truth for the shape of a
k-skeleton. Given the number of axes ``n_dims``, the interior width
``side_len`` and the dimensionality cap ``max_dim`` it enumerates the
faces ("planes") that make up the skeleton, assigns every coordinate a
dense index inside its face, maps coordinates to Euclidean offsets for
drawing, and lists the neighbors of a coordinate without ever leaving
the skeleton.

A face is identified by a coordinate pattern whose free axes hold the
sentinel ``Interior(0)`` and whose pinned axes hold ``NEGATIVE`` or
``POSITIVE``. A face with ``f`` free axes stores ``side_len ** f``
points. Summed over all faces this is exactly the number of lattice
points on faces of dimension at most ``max_dim``, which is always at
most the ``(side_len + 2) ** n_dims`` points of the full volume.

Metadata is immutable. Storage (``HyperSurface``) and the neighbor
cache (``NeighborCache``) are both derived from it and never need to
observe changes.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .combinatorics import choose, indicator
from .config import SkeletonConfig
from .extent import (
    FACE_SENTINEL,
    NEGATIVE,
    POSITIVE,
    Coordinate,
    Extent,
    ExtentKind,
    free_axes,
    to_euclidean,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HyperSurfaceMeta:
    """Shape of a hypercube skeleton.

    Attributes:
        side_len: Number of interior values along every free axis.
        max_dim: Largest number of simultaneously free axes (the ``k`` of
            the k-skeleton). Must not exceed ``n_dims``.
        n_dims: Number of axes of the enclosing hypercube.
    """
    side_len: int
    max_dim: int
    n_dims: int = 3

    def __post_init__(self):
        if self.side_len < 0 or self.max_dim < 0 or self.n_dims < 0:
            raise ValueError(
                f"side_len, max_dim and n_dims must be non-negative, got "
                f"{self.side_len}, {self.max_dim}, {self.n_dims}"
            )
        if self.max_dim > self.n_dims:
            raise ValueError(f"max_dim={self.max_dim} exceeds n_dims={self.n_dims}")
        logger.debug(
            "Skeleton meta: n_dims=%d side_len=%d max_dim=%d",
            self.n_dims, self.side_len, self.max_dim,
        )

    @classmethod
    def from_config(cls, config: SkeletonConfig) -> "HyperSurfaceMeta":
        return cls(side_len=config.side_len, max_dim=config.max_dim, n_dims=config.n_dims)

    # ------------------------------------------------------------------
    # Faces
    # ------------------------------------------------------------------

    def enumerate_faces(self) -> List[Coordinate]:
        """Return every face pattern of the skeleton.

        Faces are grouped by number of free axes (0 up to ``max_dim``),
        then by free-axis subset, then by the sign assignment of the
        remaining pinned axes: bit ``i`` of the assignment pins the
        ``i``-th pinned axis to ``POSITIVE``. The result holds
        ``sum(comb(N, k) * 2 ** (N - k) for k in range(max_dim + 1))``
        distinct patterns.
        """
        return list(self._faces())

    def _faces(self) -> Tuple[Coordinate, ...]:
        faces = self.__dict__.get("_face_cache")
        if faces is None:
            faces = tuple(self._build_faces())
            # frozen dataclass: bypass __setattr__ for the derived cache
            object.__setattr__(self, "_face_cache", faces)
            logger.debug("Enumerated %d faces", len(faces))
        return faces

    def _build_faces(self) -> List[Coordinate]:
        n = self.n_dims
        faces: List[Coordinate] = []
        for n_free in range(self.max_dim + 1):
            n_pinned = n - n_free
            for subset in choose(n, n_free):
                mask = indicator(subset, n)
                pinned = [axis for axis in range(n) if not mask[axis]]
                for signs in range(2 ** n_pinned):
                    face = [FACE_SENTINEL] * n
                    for bit, axis in enumerate(pinned):
                        face[axis] = POSITIVE if (signs >> bit) & 1 else NEGATIVE
                    faces.append(tuple(face))
        return faces

    def face_size(self, face: Coordinate) -> int:
        """Number of points stored for ``face``."""
        return self.side_len ** free_axes(face)

    def num_faces(self) -> int:
        return len(self._faces())

    def num_points(self) -> int:
        """Number of valid coordinates in the skeleton."""
        return sum(self.face_size(face) for face in self._faces())

    def volume(self) -> int:
        """Number of lattice points in the full enclosing N-volume."""
        return (self.side_len + 2) ** self.n_dims

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    def all_coordinates(self) -> Iterator[Coordinate]:
        """Yield every valid coordinate, face by face.

        Within a face the first free axis varies fastest, so the position
        of a coordinate inside its face equals its ``dense_index``. Each
        call returns a fresh generator.
        """
        for face in self._faces():
            free = [axis for axis, e in enumerate(face) if e.is_interior]
            for values in itertools.product(range(self.side_len), repeat=len(free)):
                coord = list(face)
                # product() varies its last element fastest
                for axis, v in zip(free, reversed(values)):
                    coord[axis] = Extent.interior(v)
                yield tuple(coord)

    dense_coordinates = all_coordinates
    all_points = all_coordinates

    def dense_index(self, coord: Coordinate) -> Optional[int]:
        """Return the index of ``coord`` within its face's storage.

        The index is a mixed-radix number over the interior axes only,
        in axis order with the first free axis least significant. ``None``
        is returned when ``coord`` has more than ``max_dim`` free axes.
        """
        index = 0
        stride = 1
        n_free = 0
        for e in coord:
            if e.kind is ExtentKind.INTERIOR:
                index += e.value * stride
                stride *= self.side_len
                n_free += 1
        if n_free > self.max_dim:
            return None
        return index

    def is_valid(self, coord: Coordinate) -> bool:
        """True if ``coord`` is a point of this skeleton."""
        if len(coord) != self.n_dims:
            return False
        n_free = 0
        for e in coord:
            if e.kind is ExtentKind.INTERIOR:
                if not 0 <= e.value < self.side_len:
                    return False
                n_free += 1
        return n_free <= self.max_dim

    def coordinate_to_euclidean(self, coord: Coordinate) -> Tuple[int, ...]:
        """Integer position of ``coord`` in ``[0, side_len + 1] ** n_dims``."""
        return tuple(to_euclidean(e, self.side_len) for e in coord)

    coord_euclid = coordinate_to_euclidean

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def neighbors(self, coord: Coordinate) -> Iterator[Coordinate]:
        """Yield the skeleton neighbors of ``coord``.

        Axes are visited in order and each contributes its ``-1`` step
        followed by its ``+1`` step. A step is dropped when the axis has
        nothing further in that direction or when it would free one axis
        too many for ``max_dim``.
        """
        n_free = free_axes(coord)
        for axis, e in enumerate(coord):
            for direction in (-1, 1):
                stepped = e.step(direction, self.side_len)
                if stepped is None:
                    continue
                free_after = n_free - e.is_interior + stepped.is_interior
                if free_after > self.max_dim:
                    continue
                yield coord[:axis] + (stepped,) + coord[axis + 1:]
