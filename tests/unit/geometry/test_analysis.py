"""
Tests for bounding boxes and solid analysis.
"""

import math

import pytest

from openmanifold.geometry import BoundingBox, Solid, analyze_solid, cube, union


@pytest.mark.unit
class TestBoundingBox:

    def test_from_extents(self):
        box = BoundingBox.from_extents((0, 1, 2, 3, 5, 7))
        assert box.min == (0.0, 1.0, 2.0)
        assert box.max == (3.0, 5.0, 7.0)
        assert box.dimensions() == (3.0, 4.0, 5.0)
        assert box.center() == (1.5, 3.0, 4.5)

    def test_empty(self):
        box = BoundingBox.empty()
        assert box.is_empty()
        assert box.min == (math.inf,) * 3
        assert box.dimensions() == (0.0, 0.0, 0.0)

    def test_contains(self):
        outer = BoundingBox((0.0, 0.0, 0.0), (2.0, 2.0, 2.0))
        inner = BoundingBox((0.5, 0.5, 0.5), (1.0, 1.0, 1.0))
        assert outer.contains(inner)
        assert not inner.contains(outer)
        assert outer.contains(BoundingBox.empty())
        assert not BoundingBox.empty().contains(inner)

    def test_contains_tolerance(self):
        box = BoundingBox((0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
        nudged = BoundingBox((0.0, 0.0, 0.0), (1.001, 1.0, 1.0))
        assert not box.contains(nudged)
        assert box.contains(nudged, tolerance=0.01)


@pytest.mark.geometry
class TestAnalyzeSolid:

    def test_cube_report(self):
        report = analyze_solid(cube(1.0, 2.0, 3.0))
        assert report["vertex_count"] == 8
        assert report["triangle_count"] == 12
        assert report["is_empty"] is False
        assert report["genus"] == 0
        assert report["volume"] == pytest.approx(6.0)
        assert report["surface_area"] == pytest.approx(22.0)
        assert report["bounds_min"] == pytest.approx([0.0, 0.0, 0.0])
        assert report["bounds_max"] == pytest.approx([1.0, 2.0, 3.0])
        assert report["size"] == pytest.approx([1.0, 2.0, 3.0])

    def test_empty_report(self):
        report = analyze_solid(Solid())
        assert report["is_empty"] is True
        assert report["volume"] == 0.0
        assert report["bounds_min"] is None
        assert report["bounds_max"] is None
        assert report["size"] == [0.0, 0.0, 0.0]

    def test_union_of_disjoint_cubes(self, unit_cube):
        pair = union(unit_cube, unit_cube.translate(3.0, 0.0, 0.0))
        report = analyze_solid(pair)
        assert report["volume"] == pytest.approx(2.0)
        assert report["size"] == pytest.approx([4.0, 1.0, 1.0])
