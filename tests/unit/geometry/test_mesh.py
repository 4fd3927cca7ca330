"""
Tests for Mesh and mesh_from_vertices.
"""

import numpy as np
import pytest

from openmanifold.core.exceptions import InvalidInputError
from openmanifold.geometry.mesh import Mesh, mesh_from_vertices


@pytest.mark.unit
class TestMeshFromVertices:

    def test_cube_buffers(self, cube_buffers):
        vertices, indices = cube_buffers
        mesh = mesh_from_vertices(vertices, indices)
        assert mesh.num_props() == 3
        assert mesh.vertex_count() == 8
        assert mesh.triangle_count() == 12
        assert mesh.vertices().tolist() == [float(v) for v in vertices]
        assert mesh.indices().tolist() == indices

    def test_dtypes(self, cube_buffers):
        mesh = mesh_from_vertices(*cube_buffers)
        assert mesh.vertices().dtype == np.float32
        assert mesh.indices().dtype == np.uint32

    def test_vertex_length_not_multiple_of_three(self):
        with pytest.raises(InvalidInputError, match="vertices"):
            mesh_from_vertices([0, 0, 0, 1], [0, 0, 0])

    def test_index_length_not_multiple_of_three(self):
        with pytest.raises(InvalidInputError, match="indices"):
            mesh_from_vertices([0, 0, 0, 1, 0, 0, 0, 1, 0], [0, 1])

    def test_index_out_of_range(self, cube_buffers):
        vertices, indices = cube_buffers
        bad = list(indices)
        bad[-1] = 8
        with pytest.raises(InvalidInputError, match="do not exist"):
            mesh_from_vertices(vertices, bad)

    def test_empty(self):
        mesh = mesh_from_vertices([], [])
        assert mesh.is_empty()
        assert mesh.vertex_count() == 0


@pytest.mark.unit
class TestMeshOwnership:

    def test_caller_arrays_are_copied(self, cube_buffers):
        vertices = np.array(cube_buffers[0], dtype=np.float32)
        indices = np.array(cube_buffers[1], dtype=np.uint32)
        mesh = mesh_from_vertices(vertices, indices)

        vertices[:] = -1.0
        indices[:] = 0

        assert mesh.positions().min() == 0.0
        assert mesh.indices().tolist() == cube_buffers[1]

    def test_accessors_return_copies(self, cube_buffers):
        mesh = mesh_from_vertices(*cube_buffers)
        out = mesh.vertices()
        out[:] = 5.0
        assert mesh.vertices()[0] == 0.0

        tris = mesh.triangles()
        tris[:] = 0
        assert mesh.triangles()[0].tolist() == [0, 2, 1]


@pytest.mark.unit
class TestMeshViews:

    def test_positions_and_triangles(self, cube_buffers):
        mesh = mesh_from_vertices(*cube_buffers)
        assert mesh.positions().shape == (8, 3)
        assert mesh.triangles().shape == (12, 3)

    def test_extra_properties(self):
        vertices = [
            0, 0, 0, 0.5, 1.0,
            1, 0, 0, 0.6, 1.0,
            0, 1, 0, 0.7, 1.0,
        ]
        mesh = Mesh(vertices, [0, 1, 2], num_props=5)
        assert mesh.num_props() == 5
        np.testing.assert_allclose(mesh.properties(3).ravel(), [0.5, 0.6, 0.7], rtol=1e-6)
        assert mesh.properties(3, 2).shape == (3, 2)
        assert mesh.positions().shape == (3, 3)

    def test_properties_out_of_range(self, cube_buffers):
        mesh = mesh_from_vertices(*cube_buffers)
        with pytest.raises(InvalidInputError, match="num_props"):
            mesh.properties(3, 3)

    def test_repr(self, cube_buffers):
        mesh = mesh_from_vertices(*cube_buffers)
        assert repr(mesh) == "Mesh(vertices=8, triangles=12, num_props=3)"
