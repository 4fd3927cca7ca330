"""
Bridge between facade meshes and trimesh.

Lets callers hand geometry to the trimesh ecosystem (inspection, export,
viewers) and bring trimesh geometry back in. Data is copied both ways; only
vertex positions cross over, extra per-vertex properties stay behind.
"""

import trimesh

from openmanifold.core.exceptions import GeometryError
from openmanifold.geometry.mesh import Mesh
from openmanifold.geometry.solid import Solid, manifold_from_mesh, mesh_from_manifold


class GeometryConverter:
    """
    Converter between facade meshes/solids and trimesh.
    """

    @staticmethod
    def mesh_to_trimesh(mesh: Mesh) -> trimesh.Trimesh:
        """
        Convert a Mesh to a Trimesh.

        Args:
            mesh: Facade Mesh

        Returns:
            Trimesh mesh object (vertices are not merged or reordered)

        Raises:
            GeometryError: If conversion fails
        """
        try:
            return trimesh.Trimesh(
                vertices=mesh.positions().astype(float),
                faces=mesh.triangles().astype(int),
                process=False,
            )
        except Exception as e:
            raise GeometryError(f"Failed to convert Mesh to Trimesh: {e}") from e

    @staticmethod
    def trimesh_to_mesh(tmesh: trimesh.Trimesh) -> Mesh:
        """
        Convert a Trimesh to a position-only Mesh.

        Raises:
            InvalidInputError: If the trimesh buffers break the Mesh contract
        """
        return Mesh(
            tmesh.vertices.reshape(-1),
            tmesh.faces.reshape(-1),
            num_props=3,
        )

    @staticmethod
    def solid_to_trimesh(solid: Solid) -> trimesh.Trimesh:
        """Flatten a Solid straight to a Trimesh."""
        return GeometryConverter.mesh_to_trimesh(mesh_from_manifold(solid))

    @staticmethod
    def trimesh_to_solid(tmesh: trimesh.Trimesh) -> Solid:
        """Rebuild a Solid from a Trimesh; non-manifold input gives an empty Solid."""
        return manifold_from_mesh(GeometryConverter.trimesh_to_mesh(tmesh))
