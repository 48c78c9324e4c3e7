"""
Read/write/previous buffer triple for time-stepping consumers.

Second-order schemes read the current state, read the previous one and
write the next. ``SurfaceBuffers`` holds the three storages and rotates
them by swapping references after each step; no values are copied.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .adjacency import NeighborCache
from .config import SkeletonConfig
from .meta import HyperSurfaceMeta
from .surface import HyperSurface

logger = logging.getLogger(__name__)


class SurfaceBuffers:
    """Three storages sharing one skeleton.

    Attributes:
        read: State at the current step.
        write: Destination of the step being computed.
        prev: State at the previous step.
        first: True until the first ``rotate``; schemes use it to take a
            first-order start step.
        cache: Optional neighbor table for ``meta``.
    """

    def __init__(self, meta: HyperSurfaceMeta, dtype=np.float64, cache: Optional[NeighborCache] = None):
        self.meta = meta
        self.read = HyperSurface(meta, dtype)
        self.write = HyperSurface(meta, dtype)
        self.prev = HyperSurface(meta, dtype)
        self.first = True
        self.cache = cache
        logger.debug("Buffers ready for %r (cache=%s)", meta, cache is not None)

    @classmethod
    def from_config(cls, config: SkeletonConfig) -> "SurfaceBuffers":
        meta = HyperSurfaceMeta.from_config(config)
        cache = NeighborCache(meta) if config.build_cache else None
        return cls(meta, dtype=config.dtype, cache=cache)

    def rotate(self) -> None:
        """Advance one step: the written state becomes current.

        After the call ``prev`` is the old ``read``, ``read`` is the old
        ``write`` and ``write`` reuses the old ``prev`` storage.
        """
        self.read, self.prev = self.prev, self.read
        self.read, self.write = self.write, self.read
        self.first = False
