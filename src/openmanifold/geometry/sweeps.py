"""
Sweep construction: Solids from 2D Polygon Sets.

Polygons follow the kernel's positive fill rule: counter-clockwise outlines
enclose area, clockwise loops cut holes. Empty or self-intersecting input
gives whatever degenerate Solid the kernel produces, usually the empty one.
"""

from typing import Any, Sequence

import manifold3d

from openmanifold.core.config import DEFAULT_PROFILE, QualityProfile
from openmanifold.core.logging import get_logger
from openmanifold.geometry.polygons import PolygonSet
from openmanifold.geometry.solid import Solid, kernel_call
from openmanifold.geometry.validation import require_finite, require_non_negative_int

logger = get_logger(__name__)


def _as_polygon_set(polygons: PolygonSet | Sequence[Any]) -> PolygonSet:
    if isinstance(polygons, PolygonSet):
        return polygons
    return PolygonSet(polygons)


def extrude(
    polygons: PolygonSet | Sequence[Any],
    height: float,
    divisions: int = 0,
    twist_degrees: float = 0.0,
    scale_top_x: float = 1.0,
    scale_top_y: float = 1.0,
) -> Solid:
    """
    Sweep polygons linearly along +Z.

    Args:
        polygons: A PolygonSet or flat ``[x0, y0, x1, y1, ...]`` polygons.
            Caller buffers are copied before the kernel sees them.
        height: Extrusion length along Z.
        divisions: Extra intermediate layers; ``0`` gives a single prism.
        twist_degrees: Total twist of the top relative to the base.
        scale_top_x: Top face X scale relative to the base.
        scale_top_y: Top face Y scale relative to the base.

    Returns:
        New Solid; empty when there are no polygons.
    """
    polygon_set = _as_polygon_set(polygons)
    height = require_finite(height, "height")
    divisions = require_non_negative_int(divisions, "divisions")
    twist_degrees = require_finite(twist_degrees, "twist_degrees")
    scale_top = (
        require_finite(scale_top_x, "scale_top_x"),
        require_finite(scale_top_y, "scale_top_y"),
    )

    if polygon_set.is_empty():
        return Solid()

    cross_section = polygon_set.to_cross_section()
    solid = Solid(
        kernel_call(
            "extrude",
            lambda: manifold3d.Manifold.extrude(
                cross_section, height, divisions, twist_degrees, scale_top
            ),
        )
    )
    logger.debug(
        "sweep",
        kind="extrude",
        polygons=polygon_set.size(),
        height=height,
        divisions=divisions,
        tris=solid.num_tri(),
    )
    return solid


def revolve(
    polygons: PolygonSet | Sequence[Any],
    circular_segments: int | None = None,
    revolve_degrees: float = 360.0,
    profile: QualityProfile | None = None,
) -> Solid:
    """
    Sweep polygons around the Z axis.

    The polygon's X coordinate becomes the radius and its Y coordinate the
    height. Polygons are expected on the ``x >= 0`` side of the axis.

    Args:
        polygons: A PolygonSet or flat polygons, copied before use.
        circular_segments: Steps around the axis (``0`` = kernel default,
            ``None`` = profile default).
        revolve_degrees: Sweep angle, at most 360.
        profile: Quality profile supplying defaults.
    """
    polygon_set = _as_polygon_set(polygons)
    profile = profile or DEFAULT_PROFILE
    segments = require_non_negative_int(profile.segments(circular_segments), "circular_segments")
    revolve_degrees = require_finite(revolve_degrees, "revolve_degrees")

    if polygon_set.is_empty():
        return Solid()

    cross_section = polygon_set.to_cross_section()
    solid = Solid(
        kernel_call(
            "revolve",
            lambda: manifold3d.Manifold.revolve(cross_section, segments, revolve_degrees),
        )
    )
    logger.debug(
        "sweep",
        kind="revolve",
        polygons=polygon_set.size(),
        segments=segments,
        degrees=revolve_degrees,
        tris=solid.num_tri(),
    )
    return solid
