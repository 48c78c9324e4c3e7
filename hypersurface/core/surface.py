"""
Sparse storage for values living on a hypercube skeleton.

``HyperSurface`` allocates one dense numpy array per face of the
skeleton described by a ``HyperSurfaceMeta`` and provides read and
write access by coordinate. It does not implement any dynamics; a
simulation reads neighbors through the metadata (or a
``NeighborCache``) and writes the updated values back.

Access resolves the coordinate's face pattern, looks up that face's
array and indexes it with the coordinate's dense index. A coordinate
that does not belong to the skeleton is a programming error on the
caller's side and raises ``InvalidCoordinateError``.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional, Tuple

import numpy as np

from .config import SkeletonConfig
from .dense import DenseArray
from .extent import Coordinate, face_of
from .meta import HyperSurfaceMeta

logger = logging.getLogger(__name__)


class InvalidCoordinateError(LookupError):
    """Raised when a coordinate is not part of the storage's skeleton."""


class HyperSurface:
    """Per-face value storage for a skeleton.

    Each face holds ``side_len ** free_axes`` values in a flat numpy
    array of ``dtype``, initialised to zero. Face arrays are kept in the
    order of ``meta.enumerate_faces()`` so that ``flatten`` lines up with
    ``meta.all_coordinates()`` and with ``NeighborCache`` flat indices.
    """

    def __init__(self, meta: HyperSurfaceMeta, dtype=np.float64):
        self._meta = meta
        self.dtype = np.dtype(dtype)
        self.planes: Dict[Coordinate, np.ndarray] = {
            face: np.zeros(meta.face_size(face), dtype=self.dtype)
            for face in meta.enumerate_faces()
        }
        logger.debug(
            "Allocated %d planes holding %d values (full volume %d)",
            len(self.planes), len(self), meta.volume(),
        )

    @classmethod
    def from_config(cls, config: SkeletonConfig) -> "HyperSurface":
        return cls(HyperSurfaceMeta.from_config(config), dtype=config.dtype)

    @property
    def meta(self) -> HyperSurfaceMeta:
        return self._meta

    def __len__(self) -> int:
        return sum(arr.size for arr in self.planes.values())

    def _locate(self, coord: Coordinate) -> Tuple[np.ndarray, int]:
        plane = self.planes.get(face_of(coord))
        if plane is None:
            raise InvalidCoordinateError(f"{coord!r} does not lie on any face of {self._meta!r}")
        idx: Optional[int] = self._meta.dense_index(coord)
        if idx is None or not self._meta.is_valid(coord):
            raise InvalidCoordinateError(f"{coord!r} is not a valid point of {self._meta!r}")
        return plane, idx

    def __getitem__(self, coord: Coordinate):
        plane, idx = self._locate(coord)
        return plane[idx]

    def __setitem__(self, coord: Coordinate, value) -> None:
        plane, idx = self._locate(coord)
        plane[idx] = value

    def face_data(self, face: Coordinate) -> np.ndarray:
        """Return the array backing ``face`` (a view, not a copy)."""
        try:
            return self.planes[face_of(face)]
        except KeyError:
            raise InvalidCoordinateError(f"{face!r} is not a face of {self._meta!r}") from None

    def items(self) -> Iterator[Tuple[Coordinate, object]]:
        """Yield ``(coordinate, value)`` pairs in ``all_coordinates`` order."""
        flat = self.flatten()
        for coord, value in zip(self._meta.all_coordinates(), flat):
            yield coord, value

    def fill(self, value) -> None:
        for arr in self.planes.values():
            arr.fill(value)

    def copy(self) -> "HyperSurface":
        out = HyperSurface.__new__(HyperSurface)
        out._meta = self._meta
        out.dtype = self.dtype
        out.planes = {face: arr.copy() for face, arr in self.planes.items()}
        return out

    def flatten(self) -> np.ndarray:
        """Concatenate all faces into one vector in ``all_coordinates`` order."""
        if not self.planes:
            return np.zeros(0, dtype=self.dtype)
        return np.concatenate(list(self.planes.values()))

    def load_flat(self, values) -> None:
        """Inverse of ``flatten``: overwrite every face from one vector."""
        values = np.asarray(values, dtype=self.dtype)
        if values.shape != (len(self),):
            raise ValueError(f"Expected a vector of {len(self)} values, got shape {values.shape}")
        offset = 0
        for arr in self.planes.values():
            arr[:] = values[offset:offset + arr.size]
            offset += arr.size

    def to_dense(self) -> DenseArray:
        """Scatter the skeleton into the full ``(side_len + 2) ** n_dims`` grid.

        Each value lands at its coordinate's Euclidean position; points
        off the skeleton stay zero.
        """
        width = self._meta.side_len + 2
        dense = DenseArray((width,) * self._meta.n_dims, dtype=self.dtype)
        for coord, value in self.items():
            dense[self._meta.coordinate_to_euclidean(coord)] = value
        return dense
