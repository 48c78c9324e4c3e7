"""
Tests for the core.meta module.

This module tests face enumeration, dense indexing, the Euclidean
mapping and neighbor generation of HyperSurfaceMeta.
"""

import itertools
import math
import unittest
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hypersurface.core.config import SkeletonConfig
from hypersurface.core.extent import (
    NEGATIVE,
    POSITIVE,
    Extent,
    face_of,
    free_axes,
    make_coordinate,
)
from hypersurface.core.meta import HyperSurfaceMeta


def every_coordinate(n_dims, side_len):
    """All N-tuples of extents with interior values in range, valid or not."""
    extents = [NEGATIVE, POSITIVE] + [Extent.interior(v) for v in range(side_len)]
    return itertools.product(extents, repeat=n_dims)


class TestConstruction(unittest.TestCase):
    """Tests for HyperSurfaceMeta construction."""

    def test_fields(self):
        meta = HyperSurfaceMeta(side_len=5, max_dim=2, n_dims=4)
        self.assertEqual(meta.side_len, 5)
        self.assertEqual(meta.max_dim, 2)
        self.assertEqual(meta.n_dims, 4)

    def test_rejects_cap_above_axes(self):
        with self.assertRaises(ValueError):
            HyperSurfaceMeta(side_len=3, max_dim=4, n_dims=3)

    def test_rejects_negative(self):
        with self.assertRaises(ValueError):
            HyperSurfaceMeta(side_len=-1, max_dim=1, n_dims=3)

    def test_from_config(self):
        cfg = SkeletonConfig(n_dims=4, side_len=6, max_dim=2)
        meta = HyperSurfaceMeta.from_config(cfg)
        self.assertEqual(meta, HyperSurfaceMeta(6, 2, 4))

    def test_equal_metas_hash_equal(self):
        """Metadata is a value: equal parameters compare and hash equal."""
        a = HyperSurfaceMeta(3, 1, 3)
        b = HyperSurfaceMeta(3, 1, 3)
        a.enumerate_faces()
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))


class TestFaces(unittest.TestCase):
    """Tests for face enumeration."""

    def test_face_count_formula(self):
        for n_dims in range(5):
            for max_dim in range(n_dims + 1):
                meta = HyperSurfaceMeta(side_len=2, max_dim=max_dim, n_dims=n_dims)
                expected = sum(
                    math.comb(n_dims, k) * 2 ** (n_dims - k) for k in range(max_dim + 1)
                )
                self.assertEqual(len(meta.enumerate_faces()), expected, (n_dims, max_dim))
                self.assertEqual(meta.num_faces(), expected)

    def test_faces_distinct_and_canonical(self):
        meta = HyperSurfaceMeta(side_len=3, max_dim=2, n_dims=4)
        faces = meta.enumerate_faces()
        self.assertEqual(len(set(faces)), len(faces))
        for face in faces:
            self.assertEqual(face_of(face), face)
            self.assertLessEqual(free_axes(face), meta.max_dim)

    def test_square_faces_of_tesseract(self):
        """A 4-cube has 24 square faces."""
        meta = HyperSurfaceMeta(side_len=3, max_dim=2, n_dims=4)
        squares = [f for f in meta.enumerate_faces() if free_axes(f) == 2]
        self.assertEqual(len(squares), 24)

    def test_returned_list_is_a_copy(self):
        meta = HyperSurfaceMeta(side_len=2, max_dim=1, n_dims=2)
        meta.enumerate_faces().clear()
        self.assertEqual(meta.num_faces(), 8)


class TestScenarios(unittest.TestCase):
    """Concrete small skeletons."""

    def test_square_outline(self):
        """N=2, side_len=1, max_dim=1: 4 corners plus 4 edges, 8 points."""
        meta = HyperSurfaceMeta(side_len=1, max_dim=1, n_dims=2)
        faces = meta.enumerate_faces()
        self.assertEqual(len(faces), 8)
        self.assertEqual(sum(1 for f in faces if free_axes(f) == 0), 4)
        self.assertEqual(sum(1 for f in faces if free_axes(f) == 1), 4)
        self.assertEqual(meta.num_points(), 8)
        self.assertEqual(len(list(meta.all_coordinates())), 8)

    def test_corners_only(self):
        """N=3, side_len=2, max_dim=0: 8 one-point corners without neighbors."""
        meta = HyperSurfaceMeta(side_len=2, max_dim=0, n_dims=3)
        faces = meta.enumerate_faces()
        self.assertEqual(len(faces), 8)
        for face in faces:
            self.assertEqual(meta.face_size(face), 1)
        coords = list(meta.all_coordinates())
        self.assertEqual(len(coords), 8)
        for coord in coords:
            self.assertEqual(list(meta.neighbors(coord)), [])

    def test_zero_width(self):
        """With side_len 0 only corners hold points and they connect directly."""
        meta = HyperSurfaceMeta(side_len=0, max_dim=1, n_dims=2)
        self.assertEqual(meta.num_faces(), 8)
        self.assertEqual(meta.num_points(), 4)
        corner = make_coordinate("-", "-")
        self.assertEqual(
            list(meta.neighbors(corner)),
            [make_coordinate("+", "-"), make_coordinate("-", "+")],
        )


class TestCoordinates(unittest.TestCase):
    """Tests for coordinate enumeration and dense indexing."""

    def setUp(self):
        self.meta = HyperSurfaceMeta(side_len=3, max_dim=2, n_dims=3)

    def test_point_count(self):
        coords = list(self.meta.all_coordinates())
        self.assertEqual(len(coords), self.meta.num_points())
        self.assertEqual(len(set(coords)), len(coords))
        # 8 corners, 12 edges of 3, 6 squares of 9
        self.assertEqual(len(coords), 8 + 12 * 3 + 6 * 9)
        self.assertLessEqual(len(coords), self.meta.volume())

    def test_full_cap_covers_volume(self):
        """With max_dim == n_dims every lattice point is stored."""
        meta = HyperSurfaceMeta(side_len=3, max_dim=3, n_dims=3)
        self.assertEqual(meta.num_points(), meta.volume())

    def test_all_coordinates_restartable(self):
        self.assertEqual(list(self.meta.all_coordinates()), list(self.meta.dense_coordinates()))

    def test_dense_index_defined_within_cap(self):
        meta = HyperSurfaceMeta(side_len=2, max_dim=1, n_dims=3)
        for coord in every_coordinate(3, 2):
            idx = meta.dense_index(coord)
            if free_axes(coord) <= meta.max_dim:
                self.assertIsNotNone(idx, coord)
            else:
                self.assertIsNone(idx, coord)

    def test_dense_index_bijective_per_face(self):
        by_face = {}
        for coord in self.meta.all_coordinates():
            by_face.setdefault(face_of(coord), []).append(self.meta.dense_index(coord))
        for face, indices in by_face.items():
            self.assertEqual(sorted(indices), list(range(self.meta.face_size(face))), face)

    def test_enumeration_follows_dense_index(self):
        """Inside each face, coordinates come out in dense index order."""
        seen = {}
        for coord in self.meta.all_coordinates():
            face = face_of(coord)
            expected = seen.get(face, 0)
            self.assertEqual(self.meta.dense_index(coord), expected)
            seen[face] = expected + 1

    def test_dense_index_mixed_radix(self):
        coord = make_coordinate(2, "+", 1)
        self.assertEqual(self.meta.dense_index(coord), 2 + 1 * 3)

    def test_is_valid(self):
        self.assertTrue(self.meta.is_valid(make_coordinate(0, 2, "-")))
        self.assertFalse(self.meta.is_valid(make_coordinate(0, 2, 1)))
        self.assertFalse(self.meta.is_valid(make_coordinate(3, "+", "-")))
        self.assertFalse(self.meta.is_valid(make_coordinate("+", "-")))

    def test_euclidean(self):
        coord = make_coordinate("-", 0, "+")
        self.assertEqual(self.meta.coordinate_to_euclidean(coord), (0, 1, 4))

    def test_euclidean_range_and_injective(self):
        positions = set()
        for coord in self.meta.all_coordinates():
            pos = self.meta.coordinate_to_euclidean(coord)
            self.assertTrue(all(0 <= p <= self.meta.side_len + 1 for p in pos))
            positions.add(pos)
        self.assertEqual(len(positions), self.meta.num_points())


class TestNeighbors(unittest.TestCase):
    """Tests for neighbor generation."""

    def test_order_interleaves_low_high(self):
        meta = HyperSurfaceMeta(side_len=3, max_dim=2, n_dims=2)
        coord = make_coordinate(1, 1)
        self.assertEqual(
            list(meta.neighbors(coord)),
            [make_coordinate(0, 1), make_coordinate(2, 1), make_coordinate(1, 0), make_coordinate(1, 2)],
        )

    def test_cap_blocks_freeing_axes(self):
        meta = HyperSurfaceMeta(side_len=3, max_dim=1, n_dims=3)
        coord = make_coordinate(1, "-", "-")
        self.assertEqual(
            list(meta.neighbors(coord)),
            [make_coordinate(0, "-", "-"), make_coordinate(2, "-", "-")],
        )

    def test_corner_enters_edges(self):
        meta = HyperSurfaceMeta(side_len=3, max_dim=1, n_dims=3)
        corner = make_coordinate("-", "-", "-")
        self.assertEqual(
            list(meta.neighbors(corner)),
            [make_coordinate(0, "-", "-"), make_coordinate("-", 0, "-"), make_coordinate("-", "-", 0)],
        )

    def test_edge_end_reaches_corner(self):
        meta = HyperSurfaceMeta(side_len=3, max_dim=1, n_dims=2)
        self.assertIn(make_coordinate("+", "-"), list(meta.neighbors(make_coordinate(2, "-"))))

    def test_neighbors_valid_and_bounded(self):
        for n_dims, side_len, max_dim in [(3, 3, 1), (3, 2, 2), (4, 2, 2), (2, 0, 1)]:
            meta = HyperSurfaceMeta(side_len=side_len, max_dim=max_dim, n_dims=n_dims)
            for coord in meta.all_coordinates():
                neighbors = list(meta.neighbors(coord))
                self.assertLessEqual(len(neighbors), 2 * n_dims)
                for n in neighbors:
                    self.assertLessEqual(free_axes(n), max_dim)
                    self.assertTrue(meta.is_valid(n), (coord, n))

    def test_adjacency_symmetric(self):
        """Each neighbor steps back to the original along the same axis."""
        for n_dims, side_len, max_dim in [(3, 3, 1), (3, 2, 2), (4, 2, 2), (2, 0, 1), (2, 1, 2)]:
            meta = HyperSurfaceMeta(side_len=side_len, max_dim=max_dim, n_dims=n_dims)
            for coord in meta.all_coordinates():
                for n in meta.neighbors(coord):
                    changed = [axis for axis in range(n_dims) if coord[axis] != n[axis]]
                    self.assertEqual(len(changed), 1)
                    self.assertIn(coord, list(meta.neighbors(n)))

    def test_neighbors_restartable(self):
        meta = HyperSurfaceMeta(side_len=3, max_dim=2, n_dims=3)
        coord = make_coordinate(0, "+", 2)
        self.assertEqual(list(meta.neighbors(coord)), list(meta.neighbors(coord)))


if __name__ == "__main__":
    unittest.main()
