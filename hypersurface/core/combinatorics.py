"""
Subset enumeration used to pick the free axes of each face.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple


def choose(n: int, m: int) -> List[Tuple[int, ...]]:
    """Return every strictly increasing ``m``-element subset of ``range(n)``.

    Subsets are built recursively: each ``(m - 1)``-subset of ``range(i)``
    is extended with ``i`` for every admissible ``i``. The result holds
    ``math.comb(n, m)`` pairwise distinct tuples; ``choose(n, 0)`` is
    ``[()]`` and ``m > n`` gives an empty list.
    """
    if n < 0 or m < 0:
        raise ValueError(f"choose() needs non-negative arguments, got n={n}, m={m}")
    if m == 0:
        return [()]
    out = []
    for i in range(m - 1, n):
        for sub in choose(i, m - 1):
            out.append(sub + (i,))
    return out


def indicator(subset: Sequence[int], n: int) -> List[int]:
    """Return the 0/1 membership vector of ``subset`` over ``range(n)``."""
    v = [0] * n
    for k in subset:
        v[k] = 1
    return v
