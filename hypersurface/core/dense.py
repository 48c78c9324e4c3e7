"""
Dense N-dimensional array over the full enclosing volume.

``DenseArray`` stores every point of a ``dims[0] x ... x dims[N-1]``
grid in one flat numpy vector addressed by a mixed-radix index whose
first axis varies fastest, the same convention ``HyperSurfaceMeta``
uses inside a face. It is the baseline a skeleton is compared against
and a plain grid for callers that need the whole volume, e.g. to splat
a ``HyperSurface`` into Euclidean space for drawing.
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np


class DenseArray:
    """Flat storage for a full N-dimensional grid."""

    def __init__(self, dims: Sequence[int], dtype=np.float64):
        dims = tuple(int(d) for d in dims)
        self._init(dims, np.zeros(int(np.prod(dims, dtype=np.int64)), dtype=dtype))

    @classmethod
    def from_array(cls, dims: Sequence[int], data) -> "DenseArray":
        """Wrap an existing flat vector; its length must equal ``prod(dims)``."""
        dims = tuple(int(d) for d in dims)
        data = np.asarray(data).ravel()
        if data.size != int(np.prod(dims, dtype=np.int64)):
            raise ValueError(f"Data of size {data.size} does not fit dims {dims}")
        out = cls.__new__(cls)
        out._init(dims, data)
        return out

    def _init(self, dims: Tuple[int, ...], data: np.ndarray) -> None:
        if any(d < 0 for d in dims):
            raise ValueError(f"Negative dimension in {dims}")
        self._dims = dims
        self._data = data

    @property
    def dims(self) -> Tuple[int, ...]:
        return self._dims

    @property
    def data(self) -> np.ndarray:
        return self._data

    def calc_index(self, pos: Sequence[int]) -> int:
        """Linear index of ``pos``; the first axis has stride 1."""
        if len(pos) != len(self._dims):
            raise IndexError(f"Position {tuple(pos)} has {len(pos)} axes, expected {len(self._dims)}")
        linear = 0
        stride = 1
        for dim, p in zip(self._dims, pos):
            if not 0 <= p < dim:
                raise IndexError(f"Position {tuple(pos)} out of bounds for dims {self._dims}")
            linear += stride * p
            stride *= dim
        return linear

    def __getitem__(self, pos: Sequence[int]):
        return self._data[self.calc_index(pos)]

    def __setitem__(self, pos: Sequence[int], value) -> None:
        self._data[self.calc_index(pos)] = value

    def __len__(self) -> int:
        return self._data.size
