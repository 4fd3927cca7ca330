"""
Primitive factory: canonical Solids built directly by the kernel.

Sizes are forwarded as given. Zero or negative dimensions produce an empty or
degenerate Solid, which is the kernel's call to make. Only non-finite values
and negative segment counts are rejected here.
"""

import manifold3d

from openmanifold.core.config import DEFAULT_PROFILE, QualityProfile
from openmanifold.core.logging import get_logger
from openmanifold.geometry.solid import Solid, kernel_call
from openmanifold.geometry.validation import require_finite, require_non_negative_int

logger = get_logger(__name__)


def _segments(circular_segments: int | None, profile: QualityProfile | None) -> int:
    profile = profile or DEFAULT_PROFILE
    return require_non_negative_int(profile.segments(circular_segments), "circular_segments")


def tetrahedron() -> Solid:
    """Unit tetrahedron."""
    return Solid(kernel_call("tetrahedron", manifold3d.Manifold.tetrahedron))


def cube(x_size: float, y_size: float, z_size: float) -> Solid:
    """
    Axis-aligned box spanning ``[0, size]`` on each axis.

    Args:
        x_size: Size along X.
        y_size: Size along Y.
        z_size: Size along Z.
    """
    size = (
        require_finite(x_size, "x_size"),
        require_finite(y_size, "y_size"),
        require_finite(z_size, "z_size"),
    )
    solid = Solid(kernel_call("cube", lambda: manifold3d.Manifold.cube(size)))
    logger.debug("primitive", kind="cube", size=size, empty=solid.is_empty())
    return solid


def sphere(
    radius: float,
    circular_segments: int | None = None,
    profile: QualityProfile | None = None,
) -> Solid:
    """
    Sphere centred on the origin.

    Args:
        radius: Sphere radius.
        circular_segments: Segments around the equator. ``0`` lets the kernel
            choose from its default angle/edge-length settings; ``None`` takes
            the profile's value.
        profile: Quality profile supplying defaults.
    """
    radius = require_finite(radius, "radius")
    segments = _segments(circular_segments, profile)
    solid = Solid(kernel_call("sphere", lambda: manifold3d.Manifold.sphere(radius, segments)))
    logger.debug("primitive", kind="sphere", radius=radius, segments=segments, tris=solid.num_tri())
    return solid


def cylinder(
    radius_low: float,
    radius_high: float,
    height: float,
    circular_segments: int | None = None,
    profile: QualityProfile | None = None,
) -> Solid:
    """
    Cylinder or cone frustum standing on the XY plane.

    Equal radii give a cylinder, different radii a frustum, a zero top radius
    a cone.

    Args:
        radius_low: Radius at ``z = 0``.
        radius_high: Radius at ``z = height``.
        height: Height along Z.
        circular_segments: Segments around the axis, see :func:`sphere`.
        profile: Quality profile supplying defaults.
    """
    radius_low = require_finite(radius_low, "radius_low")
    radius_high = require_finite(radius_high, "radius_high")
    height = require_finite(height, "height")
    segments = _segments(circular_segments, profile)
    solid = Solid(
        kernel_call(
            "cylinder",
            lambda: manifold3d.Manifold.cylinder(height, radius_low, radius_high, segments),
        )
    )
    logger.debug(
        "primitive",
        kind="cylinder",
        radius_low=radius_low,
        radius_high=radius_high,
        height=height,
        segments=segments,
        tris=solid.num_tri(),
    )
    return solid
