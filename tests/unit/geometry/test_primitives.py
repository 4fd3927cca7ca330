"""
Tests for the primitive factory.
"""

import math

import pytest

from openmanifold.core.config import QualityProfile
from openmanifold.core.exceptions import InvalidInputError
from openmanifold.geometry import Solid, cube, cylinder, sphere, tetrahedron


@pytest.mark.geometry
class TestTetrahedron:

    def test_shape(self):
        tet = tetrahedron()
        assert isinstance(tet, Solid)
        assert not tet.is_empty()
        assert tet.num_vert() == 4
        assert tet.num_tri() == 4
        assert tet.status() == "NoError"


@pytest.mark.geometry
class TestCube:

    def test_unit_cube(self, unit_cube):
        assert unit_cube.num_vert() == 8
        assert unit_cube.num_tri() == 12
        assert unit_cube.volume() == pytest.approx(1.0)

    def test_spans_origin_to_size(self):
        box = cube(2.0, 3.0, 4.0).bounding_box()
        assert box.min == pytest.approx((0.0, 0.0, 0.0))
        assert box.max == pytest.approx((2.0, 3.0, 4.0))

    def test_negative_size_is_empty(self):
        assert cube(-1.0, 1.0, 1.0).is_empty()

    def test_non_finite_size_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            cube(math.inf, 1.0, 1.0)
        assert exc_info.value.parameter == "x_size"


@pytest.mark.geometry
class TestSphere:

    def test_inscribed_in_true_sphere(self):
        ball = sphere(1.0, 32)
        assert not ball.is_empty()
        assert ball.volume() < 4.0 / 3.0 * math.pi
        assert ball.volume() > 0.9 * 4.0 / 3.0 * math.pi

    def test_segments_control_density(self):
        assert sphere(1.0, 64).num_tri() > sphere(1.0, 8).num_tri()

    def test_zero_segments_uses_kernel_default(self):
        ball = sphere(1.0, 0)
        assert not ball.is_empty()
        assert ball.status() == "NoError"

    def test_profile_supplies_segments(self):
        coarse = QualityProfile(circular_segments=8)
        assert sphere(1.0, profile=coarse).num_tri() == sphere(1.0, 8).num_tri()

    def test_explicit_segments_override_profile(self):
        coarse = QualityProfile(circular_segments=8)
        assert sphere(1.0, 32, profile=coarse).num_tri() == sphere(1.0, 32).num_tri()

    def test_negative_segments_rejected(self):
        with pytest.raises(InvalidInputError):
            sphere(1.0, -3)


@pytest.mark.geometry
class TestCylinder:

    def test_cylinder_bounds(self):
        box = cylinder(1.0, 1.0, 2.0, 32).bounding_box()
        assert box.min[2] == pytest.approx(0.0)
        assert box.max[2] == pytest.approx(2.0)
        assert box.max[0] == pytest.approx(1.0)

    def test_frustum_smaller_than_cylinder(self):
        full = cylinder(1.0, 1.0, 2.0, 32)
        frustum = cylinder(1.0, 0.5, 2.0, 32)
        assert 0.0 < frustum.volume() < full.volume()

    def test_cone(self):
        cone = cylinder(1.0, 0.0, 3.0, 64)
        assert not cone.is_empty()
        assert cone.volume() == pytest.approx(math.pi / 3.0 * 3.0, rel=0.01)

    def test_non_finite_height_rejected(self):
        with pytest.raises(InvalidInputError):
            cylinder(1.0, 1.0, math.nan)
