"""
Geometry module: the facade over the solid-modeling kernel.

Provides Solids (watertight manifolds), Meshes (flat vertex/index buffers)
and Polygon Sets (2D multi-polygons), primitive factories, booleans, sweeps,
refinement/smoothing, slicing/projection and mesh conversion.
"""

from openmanifold.geometry.analysis import BoundingBox, analyze_solid
from openmanifold.geometry.booleans import (
    BooleanOp,
    boolean_op,
    difference,
    intersection,
    union,
    union_all,
)
from openmanifold.geometry.interop import GeometryConverter
from openmanifold.geometry.mesh import Mesh, mesh_from_vertices
from openmanifold.geometry.polygons import PolygonSet
from openmanifold.geometry.primitives import cube, cylinder, sphere, tetrahedron
from openmanifold.geometry.solid import Solid, manifold_from_mesh, mesh_from_manifold
from openmanifold.geometry.sweeps import extrude, revolve

__all__ = [
    # Handles
    "Solid",
    "Mesh",
    "PolygonSet",
    # Primitives
    "tetrahedron",
    "cube",
    "sphere",
    "cylinder",
    # Booleans
    "BooleanOp",
    "boolean_op",
    "union",
    "intersection",
    "difference",
    "union_all",
    # Sweeps
    "extrude",
    "revolve",
    # Mesh conversion
    "mesh_from_manifold",
    "manifold_from_mesh",
    "mesh_from_vertices",
    # Analysis and interop
    "BoundingBox",
    "analyze_solid",
    "GeometryConverter",
]
