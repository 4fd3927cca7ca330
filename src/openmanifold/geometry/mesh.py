"""
Mesh: flat, indexed triangle mesh crossing the facade boundary.

A Mesh owns two buffers:

- vertex properties, ``num_props`` float32 values per vertex, the first three
  being the x, y, z position (extra channels hold e.g. normals written by
  :meth:`Solid.calculate_normals`);
- triangle indices, three uint32 values per triangle, each one a vertex index.

Both are copied in on construction and copied out by every accessor.
"""

import logging
from typing import TYPE_CHECKING, Any

import manifold3d
import numpy as np

from openmanifold.core.exceptions import InvalidInputError
from openmanifold.geometry.validation import (
    as_index_buffer,
    as_vertex_buffer,
    check_indices_in_range,
    require_non_negative_int,
    require_positive_int,
)

if TYPE_CHECKING:
    from openmanifold.geometry.solid import Solid

logger = logging.getLogger(__name__)


class Mesh:
    """
    Owned triangle mesh handle.

    Invariants (checked on construction):
        - ``len(vertices) % num_props == 0``
        - ``len(indices) % 3 == 0``
        - every index is ``< vertex_count``
    """

    __slots__ = ("_vertices", "_triangles")

    def __init__(self, vertices: Any, indices: Any, num_props: int = 3) -> None:
        self._vertices = as_vertex_buffer(vertices, num_props)
        self._triangles = as_index_buffer(indices)
        check_indices_in_range(self._triangles, len(self._vertices))

    @classmethod
    def _from_owned(cls, vertices: np.ndarray, triangles: np.ndarray) -> "Mesh":
        instance = cls.__new__(cls)
        instance._vertices = np.ascontiguousarray(vertices, dtype=np.float32)
        instance._triangles = np.ascontiguousarray(triangles, dtype=np.uint32).reshape(-1, 3)
        instance._vertices.flags.writeable = False
        instance._triangles.flags.writeable = False
        return instance

    @classmethod
    def from_kernel(cls, kernel_mesh: manifold3d.Mesh) -> "Mesh":
        """Copy a kernel mesh into a new handle."""
        vertices = np.array(kernel_mesh.vert_properties, dtype=np.float32)
        triangles = np.array(kernel_mesh.tri_verts, dtype=np.uint32)
        if vertices.ndim != 2:
            vertices = vertices.reshape(-1, 3)
        return cls._from_owned(vertices, triangles)

    def to_kernel(self) -> manifold3d.Mesh:
        """Copy this mesh into the kernel's native structure."""
        return manifold3d.Mesh(
            vert_properties=self._vertices.copy(),
            tri_verts=self._triangles.copy(),
        )

    def to_manifold(self) -> "Solid":
        """Reconstruct a Solid, see :func:`manifold_from_mesh`."""
        from openmanifold.geometry.solid import manifold_from_mesh

        return manifold_from_mesh(self)

    # ------------------------------------------------------------------
    # Flat buffer accessors
    # ------------------------------------------------------------------

    def num_props(self) -> int:
        """
        Number of properties per vertex, position included.

        Always at least 3. :meth:`Solid.num_props` counts only the channels
        past the position.
        """
        return int(self._vertices.shape[1])

    def vertices(self) -> np.ndarray:
        """Flat float32 copy of all vertex properties."""
        return self._vertices.reshape(-1).copy()

    def indices(self) -> np.ndarray:
        """Flat uint32 copy of the triangle indices."""
        return self._triangles.reshape(-1).copy()

    def vertex_count(self) -> int:
        return int(self._vertices.shape[0])

    def triangle_count(self) -> int:
        return int(self._triangles.shape[0])

    def is_empty(self) -> bool:
        return self.triangle_count() == 0

    # ------------------------------------------------------------------
    # Structured views
    # ------------------------------------------------------------------

    def positions(self) -> np.ndarray:
        """``(V, 3)`` copy of the vertex positions."""
        return self._vertices[:, :3].copy()

    def triangles(self) -> np.ndarray:
        """``(T, 3)`` copy of the triangle indices."""
        return self._triangles.copy()

    def properties(self, offset: int, width: int = 1) -> np.ndarray:
        """
        ``(V, width)`` copy of the per-vertex channels starting at ``offset``.

        Raises:
            InvalidInputError: If the channels are not present in this mesh.
        """
        offset = require_non_negative_int(offset, "offset")
        width = require_positive_int(width, "width")
        if offset + width > self.num_props():
            raise InvalidInputError(
                "requested properties exceed num_props",
                parameter="offset",
                details={"offset": offset, "width": width, "num_props": self.num_props()},
            )
        return self._vertices[:, offset:offset + width].copy()

    def __repr__(self) -> str:
        return (
            f"Mesh(vertices={self.vertex_count()}, triangles={self.triangle_count()}, "
            f"num_props={self.num_props()})"
        )


def mesh_from_vertices(vertices: Any, indices: Any) -> Mesh:
    """
    Build a position-only Mesh from flat caller buffers.

    Args:
        vertices: Flat ``[x0, y0, z0, x1, ...]`` positions; length must be a
            multiple of 3.
        indices: Flat triangle indices; length must be a multiple of 3 and
            every index must reference an existing vertex.

    Returns:
        A new Mesh with ``num_props == 3``.

    Raises:
        InvalidInputError: If either buffer breaks the layout contract.
    """
    mesh = Mesh(vertices, indices, num_props=3)
    logger.debug(
        "mesh_from_vertices: %d verts, %d tris",
        mesh.vertex_count(), mesh.triangle_count(),
    )
    return mesh
