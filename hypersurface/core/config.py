"""
Skeleton configuration definitions.

This module defines the configuration dataclass used to parameterise a
hypersurface session. Fields carry explicit defaults so that test runs
and small demonstrations can be created without supplying every value.
See ``SkeletonConfig`` for the configuration consumed by
``HyperSurfaceMeta.from_config`` and ``HyperSurface.from_config``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SkeletonConfig:
    """Top level configuration for a skeleton-structured simulation.

    ``n_dims`` is the number of axes of the enclosing hypercube,
    ``side_len`` the number of interior lattice values per free axis and
    ``max_dim`` the largest face dimension that is stored (the ``k`` of
    the k-skeleton). The defaults describe the 2-dimensional square
    faces of a 3-cube with 20 interior points per side.
    """

    # Hypercube shape
    n_dims: int = 3
    side_len: int = 20
    max_dim: int = 2

    # Storage
    dtype: str = "float64"

    # Precompute the flat neighbor table when a session is created
    build_cache: bool = True

    # Free-form options for callers (left empty to allow extension via
    # dataclass fields without rewriting defaults)
    extras: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Return a dict representation of the configuration."""
        return self.__dict__.copy()
