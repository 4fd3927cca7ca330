"""
OpenManifold - Boundary facade over a solid-modeling geometry kernel.

Construct, combine and query watertight 3D solids and 2D polygon sets while
the kernel (Manifold, via ``manifold3d``) does the geometry. Caller buffers are
copied at the boundary and every operation returns a new value.
"""

__version__ = "0.1.0"
__author__ = "OpenManifold Contributors"

from openmanifold.core.config import ConfigManager, QualityProfile
from openmanifold.core.exceptions import GeometryError, InvalidInputError, OpenManifoldError
from openmanifold.geometry import (
    BooleanOp,
    Mesh,
    PolygonSet,
    Solid,
    cube,
    cylinder,
    difference,
    extrude,
    intersection,
    manifold_from_mesh,
    mesh_from_manifold,
    mesh_from_vertices,
    revolve,
    sphere,
    tetrahedron,
    union,
)

__all__ = [
    "__version__",
    "ConfigManager",
    "QualityProfile",
    "OpenManifoldError",
    "InvalidInputError",
    "GeometryError",
    "Solid",
    "Mesh",
    "PolygonSet",
    "BooleanOp",
    "tetrahedron",
    "cube",
    "sphere",
    "cylinder",
    "union",
    "intersection",
    "difference",
    "extrude",
    "revolve",
    "mesh_from_manifold",
    "manifold_from_mesh",
    "mesh_from_vertices",
]
