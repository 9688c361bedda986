"""Tests for the fixed cube model."""

import math
from collections import Counter

import pytest

from hexcube.model import (
    CUBE_EDGES,
    CUBE_VERTICES,
    EDGE_NUMBER_MAP,
    TARGET_ROTATION,
    Point3D,
    Rotation3D,
    edge_label,
)


class TestCubeVertices:
    def test_eight_vertices(self):
        assert len(CUBE_VERTICES) == 8

    def test_all_corners_present_once(self):
        corners = {(p.x, p.y, p.z) for p in CUBE_VERTICES}
        assert corners == {
            (sx * 50.0, sy * 50.0, sz * 50.0)
            for sx in (-1, 1) for sy in (-1, 1) for sz in (-1, 1)
        }

    def test_enumeration_order(self):
        assert CUBE_VERTICES[0] == Point3D(-50.0, -50.0, -50.0)
        assert CUBE_VERTICES[2] == Point3D(50.0, 50.0, -50.0)
        assert CUBE_VERTICES[6] == Point3D(50.0, 50.0, 50.0)
        assert CUBE_VERTICES[7] == Point3D(-50.0, 50.0, 50.0)

    def test_points_are_immutable(self):
        with pytest.raises(AttributeError):
            CUBE_VERTICES[0].x = 1.0


class TestCubeEdges:
    def test_twelve_edges(self):
        assert len(CUBE_EDGES) == 12

    def test_every_vertex_has_degree_three(self):
        degree = Counter(v for edge in CUBE_EDGES for v in edge)
        assert all(degree[v] == 3 for v in range(8))

    def test_edges_join_adjacent_corners(self):
        """Each edge differs in exactly one coordinate."""
        for i, j in CUBE_EDGES:
            a, b = CUBE_VERTICES[i], CUBE_VERTICES[j]
            diffs = [a.x != b.x, a.y != b.y, a.z != b.z]
            assert sum(diffs) == 1

    def test_face_grouping(self):
        """Edges 0-3 and 4-7 are face cycles; 8-11 connect them."""
        for start in (0, 4):
            cycle = CUBE_EDGES[start:start + 4]
            for k in range(4):
                assert cycle[k][1] == cycle[(k + 1) % 4][0]
        for i, j in CUBE_EDGES[8:]:
            assert j == i + 4

    def test_no_duplicate_edges(self):
        assert len({frozenset(e) for e in CUBE_EDGES}) == 12


class TestRotation:
    def test_target_rotation_values(self):
        assert TARGET_ROTATION.x == math.atan(1 / math.sqrt(2))
        assert TARGET_ROTATION.y == math.pi / 4
        assert TARGET_ROTATION.z == 0.0

    def test_lerp_endpoints(self):
        start = Rotation3D(1.0, 2.0, 3.0)
        end = Rotation3D(-1.0, 0.0, 1.0)
        assert start.lerp(end, 0.0) == start
        assert start.lerp(end, 1.0) == end

    def test_lerp_midpoint(self):
        mid = Rotation3D(0.0, 0.0, 0.0).lerp(Rotation3D(2.0, -4.0, 1.0), 0.5)
        assert mid == Rotation3D(1.0, -2.0, 0.5)


class TestEdgeLabels:
    def test_labels_are_a_permutation(self):
        assert sorted(EDGE_NUMBER_MAP) == list(range(1, 13))

    def test_edge_label(self):
        assert edge_label(0) == 11
        assert edge_label(11) == 12

    @pytest.mark.parametrize("index", [-1, 12])
    def test_out_of_range(self, index):
        with pytest.raises(IndexError):
            edge_label(index)
