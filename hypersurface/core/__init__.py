"""
Core indexing engine for hypercube skeletons.

Exposes the extent/coordinate model, the combinatorics helper, the
skeleton metadata, the sparse storage container and the precomputed
neighbor cache.
"""

from .adjacency import NeighborCache
from .buffers import SurfaceBuffers
from .combinatorics import choose, indicator
from .config import SkeletonConfig
from .dense import DenseArray
from .extent import (
    NEGATIVE,
    POSITIVE,
    Extent,
    ExtentKind,
    face_of,
    free_axes,
    make_coordinate,
    to_euclidean,
)
from .meta import HyperSurfaceMeta
from .surface import HyperSurface, InvalidCoordinateError

__all__ = [
    # Coordinates
    'NEGATIVE', 'POSITIVE', 'Extent', 'ExtentKind',
    'face_of', 'free_axes', 'make_coordinate', 'to_euclidean',
    # Combinatorics
    'choose', 'indicator',
    # Configuration
    'SkeletonConfig',
    # Metadata and storage
    'HyperSurfaceMeta', 'HyperSurface', 'InvalidCoordinateError',
    'NeighborCache', 'SurfaceBuffers', 'DenseArray',
]
