"""
Precomputed neighbor table for a skeleton.

Enumerating neighbors through ``HyperSurfaceMeta.neighbors`` rebuilds
every candidate coordinate on each call. A simulation visits every point
once per step, many times per second, so ``NeighborCache`` pays that
cost once: it numbers every valid coordinate and stores each point's
neighbors as indices into the same numbering.

The numbering follows ``meta.all_coordinates()``, which is also the
order of ``HyperSurface.flatten()``. A consumer can therefore run an
update on flat numpy vectors with ``neighbor_sum`` instead of going
through coordinates at all.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List, Sequence, Tuple

import numpy as np

from .extent import Coordinate
from .meta import HyperSurfaceMeta

logger = logging.getLogger(__name__)


class NeighborCache:
    """Flat index and neighbor index list for every skeleton point.

    Attributes:
        meta: Metadata the cache was built from.
        coordinates: Every valid coordinate, position = flat index.
        offsets: CSR row pointer; neighbors of point ``i`` are
            ``indices[offsets[i]:offsets[i + 1]]``.
        indices: Concatenated neighbor flat indices.
    """

    def __init__(self, meta: HyperSurfaceMeta):
        t0 = time.perf_counter()
        self.meta = meta
        self.coordinates: Tuple[Coordinate, ...] = tuple(meta.all_coordinates())
        self._index: Dict[Coordinate, int] = {c: i for i, c in enumerate(self.coordinates)}
        self._neighbors: List[Tuple[int, ...]] = [
            tuple(self._index[n] for n in meta.neighbors(c)) for c in self.coordinates
        ]

        counts = np.fromiter((len(n) for n in self._neighbors), dtype=np.int64, count=len(self._neighbors))
        self.offsets = np.zeros(len(self._neighbors) + 1, dtype=np.int64)
        np.cumsum(counts, out=self.offsets[1:])
        self.indices = np.fromiter(
            (j for row in self._neighbors for j in row), dtype=np.int64, count=int(self.offsets[-1])
        )
        self.offsets.setflags(write=False)
        self.indices.setflags(write=False)
        logger.debug(
            "Neighbor cache: %d points, %d links in %.3fs",
            len(self.coordinates), len(self.indices), time.perf_counter() - t0,
        )

    def __len__(self) -> int:
        return len(self.coordinates)

    def index_of(self, coord: Coordinate) -> int:
        return self._index[coord]

    def neighbors_of(self, index: int) -> Tuple[int, ...]:
        return self._neighbors[index]

    def for_each(self, callback: Callable[[int, Sequence[int]], None]) -> None:
        """Call ``callback(flat_index, neighbor_indices)`` once per point.

        Points are visited in flat index order, which is the same on
        every call.
        """
        for i, neighbors in enumerate(self._neighbors):
            callback(i, neighbors)

    def neighbor_count(self) -> np.ndarray:
        """Number of neighbors of each point."""
        return np.diff(self.offsets)

    def neighbor_sum(self, values) -> np.ndarray:
        """Sum ``values`` over the neighbors of each point.

        ``values`` is a flat vector indexed like ``coordinates`` (for
        example ``HyperSurface.flatten()``). Points without neighbors
        get zero.
        """
        values = np.asarray(values)
        if values.shape[0] != len(self):
            raise ValueError(f"Expected {len(self)} values, got {values.shape[0]}")
        out = np.zeros(values.shape, dtype=np.result_type(values.dtype, np.float64))
        if len(self.indices) == 0:
            return out
        gathered = values[self.indices]
        counts = self.neighbor_count()
        has = counts > 0
        # reduceat needs strictly valid starts; rows with no neighbors are masked out
        sums = np.add.reduceat(gathered, self.offsets[:-1][has], axis=0)
        out[has] = sums
        return out
