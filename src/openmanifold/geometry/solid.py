"""
Solid: owned handle around a kernel manifold.

A Solid is either empty or a closed, consistently wound 2-manifold boundary.
The facade never builds one by hand; it only forwards kernel output. Every
operation here leaves the receiver untouched and returns a new handle.

Geometric degeneracy is not an error. A boolean of near-coplanar faces, a
zero scale or a plane that misses the body all come back as empty or flat
Solids, so callers check :meth:`Solid.is_empty` rather than catching.
"""

from typing import TYPE_CHECKING, Callable

import manifold3d

from openmanifold.core.config import DEFAULT_PROFILE, QualityProfile
from openmanifold.core.exceptions import GeometryError, InvalidInputError
from openmanifold.core.logging import get_logger
from openmanifold.geometry.analysis import BoundingBox
from openmanifold.geometry.mesh import Mesh
from openmanifold.geometry.polygons import PolygonSet
from openmanifold.geometry.validation import (
    require_finite,
    require_non_negative_int,
    require_positive,
    require_positive_int,
)

if TYPE_CHECKING:
    from openmanifold.geometry.booleans import BooleanOp

logger = get_logger(__name__)


def kernel_call(operation: str, call: Callable[[], object]):
    """
    Run one kernel call, wrapping kernel exceptions in GeometryError.

    Contract checks happen before this point, so anything raised here came
    from the kernel itself.
    """
    try:
        return call()
    except MemoryError:
        raise
    except Exception as e:
        raise GeometryError(f"Kernel {operation} failed: {e}", operation=operation) from e


class Solid:
    """
    Owned watertight solid.

    ``Solid()`` is the canonical empty Solid.

    Example:
        >>> box = cube(1.0, 1.0, 1.0)
        >>> moved = box.translate(2.0, 0.0, 0.0)
        >>> box.bounding_box().min
        (0.0, 0.0, 0.0)
    """

    __slots__ = ("_manifold",)

    def __init__(self, manifold: manifold3d.Manifold | None = None) -> None:
        self._manifold = manifold if manifold is not None else manifold3d.Manifold()

    @property
    def _kernel(self) -> manifold3d.Manifold:
        """
        The wrapped kernel manifold, for use inside the package only.

        Kernel manifolds are immutable, so sharing the handle is safe.
        """
        return self._manifold

    def _derive(self, operation: str, call: Callable[[manifold3d.Manifold], manifold3d.Manifold]) -> "Solid":
        result = Solid(kernel_call(operation, lambda: call(self._manifold)))
        logger.debug(
            "kernel_call",
            operation=operation,
            input_tris=self._manifold.num_tri(),
            output_tris=result._manifold.num_tri(),
        )
        return result

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        """Does the Solid contain no triangles?"""
        return self._manifold.is_empty()

    def num_vert(self) -> int:
        return self._manifold.num_vert()

    def num_tri(self) -> int:
        return self._manifold.num_tri()

    def num_props(self) -> int:
        """
        Number of extra per-vertex properties beyond the x, y, z position.

        This is 0 for a fresh Solid and 3 after ``calculate_normals(0)``.
        :meth:`Mesh.num_props` counts the position too, so the mesh of the
        same Solid reports ``num_props() + 3``.
        """
        return self._manifold.num_prop()

    def volume(self) -> float:
        return float(self._manifold.volume())

    def surface_area(self) -> float:
        return float(self._manifold.surface_area())

    def genus(self) -> int:
        return int(self._manifold.genus())

    def status(self) -> str:
        """Name of the kernel status code, ``"NoError"`` for a valid Solid."""
        return self._manifold.status().name

    def bounding_box(self) -> BoundingBox:
        if self.is_empty():
            return BoundingBox.empty()
        return BoundingBox.from_extents(self._manifold.bounding_box())

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def translate(self, x: float, y: float, z: float) -> "Solid":
        offset = (
            require_finite(x, "x"),
            require_finite(y, "y"),
            require_finite(z, "z"),
        )
        return self._derive("translate", lambda m: m.translate(offset))

    def scale(self, x: float, y: float, z: float) -> "Solid":
        """Component-wise scale. A zero factor flattens that axis."""
        factors = (
            require_finite(x, "x"),
            require_finite(y, "y"),
            require_finite(z, "z"),
        )
        return self._derive("scale", lambda m: m.scale(factors))

    def rotate(self, x_degrees: float, y_degrees: float = 0.0, z_degrees: float = 0.0) -> "Solid":
        """Rotate about X, then Y, then Z, angles in degrees."""
        angles = (
            require_finite(x_degrees, "x_degrees"),
            require_finite(y_degrees, "y_degrees"),
            require_finite(z_degrees, "z_degrees"),
        )
        return self._derive("rotate", lambda m: m.rotate(angles))

    def trim_by_plane(self, x: float, y: float, z: float, offset: float) -> "Solid":
        """
        Keep the half-space ``dot(normal, p) <= offset``.

        The normal ``(x, y, z)`` does not need to be unit length but must not
        be zero; it is normalized first, so ``offset`` is the plane's distance
        from the origin along the unit normal.
        """
        normal = (
            require_finite(x, "x"),
            require_finite(y, "y"),
            require_finite(z, "z"),
        )
        if normal == (0.0, 0.0, 0.0):
            raise InvalidInputError("plane normal must be non-zero", parameter="normal")
        offset = require_finite(offset, "offset")
        # The kernel keeps the side the normal points to; flip the plane.
        flipped = (-normal[0], -normal[1], -normal[2])
        return self._derive("trim_by_plane", lambda m: m.trim_by_plane(flipped, -offset))

    def hull(self) -> "Solid":
        """Convex hull."""
        return self._derive("hull", lambda m: m.hull())

    # ------------------------------------------------------------------
    # Refinement and smoothing
    # ------------------------------------------------------------------

    def refine(self, n: int) -> "Solid":
        """Split every triangle into ``n * n`` triangles without moving the surface."""
        n = require_positive_int(n, "n")
        return self._derive("refine", lambda m: m.refine(n))

    def refine_to_length(self, length: float) -> "Solid":
        """Refine until no edge is longer than ``length``."""
        length = require_positive(length, "length")
        return self._derive("refine_to_length", lambda m: m.refine_to_length(length))

    def refine_to_tolerance(
        self,
        tolerance: float | None = None,
        profile: QualityProfile | None = None,
    ) -> "Solid":
        """Refine until the curvature approximation error is below ``tolerance``."""
        profile = profile or DEFAULT_PROFILE
        if tolerance is None:
            tolerance = profile.refine_tolerance
        tolerance = require_positive(tolerance, "tolerance")
        return self._derive("refine_to_tolerance", lambda m: m.refine_to_tolerance(tolerance))

    def smooth_by_normals(self, normal_idx: int) -> "Solid":
        """
        Smooth using the vertex normals stored at property offset ``normal_idx``.

        Normals are normally written first with :meth:`calculate_normals`.
        """
        normal_idx = require_non_negative_int(normal_idx, "normal_idx")
        return self._derive("smooth_by_normals", lambda m: m.smooth_by_normals(normal_idx))

    def smooth_out(
        self,
        min_sharp_angle: float | None = None,
        min_smoothness: float | None = None,
        profile: QualityProfile | None = None,
    ) -> "Solid":
        """
        Smooth edges flatter than ``min_sharp_angle`` degrees.

        Sharper edges keep ``min_smoothness`` (0 = stay sharp, 1 = fully
        smooth).
        """
        profile = profile or DEFAULT_PROFILE
        angle = require_finite(
            profile.min_sharp_angle if min_sharp_angle is None else min_sharp_angle,
            "min_sharp_angle",
        )
        smoothness = require_finite(
            profile.min_smoothness if min_smoothness is None else min_smoothness,
            "min_smoothness",
        )
        return self._derive("smooth_out", lambda m: m.smooth_out(angle, smoothness))

    def calculate_normals(
        self,
        normal_idx: int,
        min_sharp_angle: float | None = None,
        profile: QualityProfile | None = None,
    ) -> "Solid":
        """
        Store per-vertex normals as properties starting at ``normal_idx``.

        Edges sharper than ``min_sharp_angle`` degrees are treated as creases.
        """
        profile = profile or DEFAULT_PROFILE
        normal_idx = require_non_negative_int(normal_idx, "normal_idx")
        angle = require_finite(
            profile.min_sharp_angle if min_sharp_angle is None else min_sharp_angle,
            "min_sharp_angle",
        )
        return self._derive(
            "calculate_normals", lambda m: m.calculate_normals(normal_idx, angle)
        )

    # ------------------------------------------------------------------
    # Derived 2D geometry
    # ------------------------------------------------------------------

    def slice(self, height: float) -> PolygonSet:
        """Cross-section contours at ``z = height``."""
        height = require_finite(height, "height")
        cross_section = kernel_call("slice", lambda: self._manifold.slice(height))
        return PolygonSet.from_cross_section(cross_section)

    def project(self) -> PolygonSet:
        """Outline of the orthographic projection onto the XY plane."""
        cross_section = kernel_call("project", lambda: self._manifold.project())
        return PolygonSet.from_cross_section(cross_section)

    # ------------------------------------------------------------------
    # Booleans
    # ------------------------------------------------------------------

    def union(self, other: "Solid") -> "Solid":
        from openmanifold.geometry.booleans import union

        return union(self, other)

    def intersection(self, other: "Solid") -> "Solid":
        from openmanifold.geometry.booleans import intersection

        return intersection(self, other)

    def difference(self, other: "Solid") -> "Solid":
        from openmanifold.geometry.booleans import difference

        return difference(self, other)

    def boolean_op(self, other: "Solid", op: "BooleanOp") -> "Solid":
        from openmanifold.geometry.booleans import boolean_op

        return boolean_op(self, other, op)

    def __add__(self, other: "Solid") -> "Solid":
        return self.union(other)

    def __sub__(self, other: "Solid") -> "Solid":
        return self.difference(other)

    def __xor__(self, other: "Solid") -> "Solid":
        return self.intersection(other)

    # ------------------------------------------------------------------
    # Mesh conversion
    # ------------------------------------------------------------------

    def to_mesh(self) -> Mesh:
        return mesh_from_manifold(self)

    @classmethod
    def from_mesh(cls, mesh: Mesh) -> "Solid":
        return manifold_from_mesh(mesh)

    def __repr__(self) -> str:
        return f"Solid(vertices={self.num_vert()}, triangles={self.num_tri()})"


def mesh_from_manifold(solid: Solid) -> Mesh:
    """
    Flatten a Solid into a Mesh.

    Vertex properties hold the position followed by any extra channels the
    Solid carries (for instance normals from :meth:`Solid.calculate_normals`).
    """
    kernel_mesh = kernel_call("to_mesh", lambda: solid._kernel.to_mesh())
    mesh = Mesh.from_kernel(kernel_mesh)
    logger.debug(
        "kernel_call",
        operation="to_mesh",
        vertices=mesh.vertex_count(),
        triangles=mesh.triangle_count(),
        num_props=mesh.num_props(),
    )
    return mesh


def manifold_from_mesh(mesh: Mesh) -> Solid:
    """
    Reconstruct a Solid from a Mesh.

    The mesh is copied into the kernel's own structure. Input the kernel
    cannot accept as a manifold (open edges, out-of-range data) yields the
    empty Solid; the kernel status is logged but not raised.
    """
    kernel_mesh = mesh.to_kernel()
    solid = Solid(kernel_call("from_mesh", lambda: manifold3d.Manifold(kernel_mesh)))
    status = solid.status()
    if status != "NoError":
        logger.warning(
            "mesh_not_manifold",
            status=status,
            vertices=mesh.vertex_count(),
            triangles=mesh.triangle_count(),
        )
    return solid
