"""
Hypersurface: sparse storage and traversal for hypercube skeletons.

This package addresses the k-skeleton of an N-dimensional hypercube
lattice, that is, the points lying on faces of dimension at most ``k``,
without allocating the enclosing N-volume. It is intended for
simulations (finite differences, cellular automata) that only need the
"surface" of a 3 or 4 dimensional cube.

The major subpackages are:

``hypersurface.core``            Coordinate model, face enumeration,
                                 sparse storage, neighbor cache and the
                                 dense full-volume array.
``hypersurface.logging_config``  Logger setup for the package namespace.

Please see the individual modules for further documentation.
"""

from .core import (
    NEGATIVE,
    POSITIVE,
    DenseArray,
    Extent,
    ExtentKind,
    HyperSurface,
    HyperSurfaceMeta,
    InvalidCoordinateError,
    NeighborCache,
    SkeletonConfig,
    SurfaceBuffers,
    choose,
)

__all__ = [
    "core",
    "logging_config",
    "NEGATIVE",
    "POSITIVE",
    "DenseArray",
    "Extent",
    "ExtentKind",
    "HyperSurface",
    "HyperSurfaceMeta",
    "InvalidCoordinateError",
    "NeighborCache",
    "SkeletonConfig",
    "SurfaceBuffers",
    "choose",
]
