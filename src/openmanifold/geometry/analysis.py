"""
Solid diagnostics: bounding boxes and a summary report.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from openmanifold.core.exceptions import GeometryError

if TYPE_CHECKING:
    from openmanifold.geometry.solid import Solid


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned bounding box.

    An empty box (from the empty Solid) has ``min`` at +inf and ``max`` at
    -inf, the same convention the kernel uses.
    """

    min: tuple[float, float, float]
    max: tuple[float, float, float]

    @classmethod
    def empty(cls) -> "BoundingBox":
        return cls((math.inf,) * 3, (-math.inf,) * 3)

    @classmethod
    def from_extents(cls, extents: tuple[float, ...]) -> "BoundingBox":
        """Build from the kernel's ``(min_x, min_y, min_z, max_x, max_y, max_z)``."""
        values = tuple(float(v) for v in extents)
        return cls(values[:3], values[3:6])

    def is_empty(self) -> bool:
        return any(lo > hi for lo, hi in zip(self.min, self.max))

    def dimensions(self) -> tuple[float, float, float]:
        """Size along x, y and z (zeros for an empty box)."""
        if self.is_empty():
            return (0.0, 0.0, 0.0)
        return tuple(hi - lo for lo, hi in zip(self.min, self.max))

    def center(self) -> tuple[float, float, float]:
        if self.is_empty():
            return (0.0, 0.0, 0.0)
        return tuple((lo + hi) / 2 for lo, hi in zip(self.min, self.max))

    def contains(self, other: "BoundingBox", tolerance: float = 0.0) -> bool:
        """True when ``other`` lies inside this box (empty boxes are contained)."""
        if other.is_empty():
            return True
        if self.is_empty():
            return False
        return all(
            lo - tolerance <= olo and ohi <= hi + tolerance
            for lo, hi, olo, ohi in zip(self.min, self.max, other.min, other.max)
        )


def analyze_solid(solid: "Solid") -> dict[str, Any]:
    """
    Analyze a Solid and return a diagnostic report.

    Returns dict with: vertex_count, triangle_count, is_empty, genus, volume,
    surface_area, bounds_min, bounds_max, size. Bounds are ``None`` for the
    empty Solid.
    """
    try:
        bounds = solid.bounding_box()
        empty = solid.is_empty()
        return {
            "vertex_count": solid.num_vert(),
            "triangle_count": solid.num_tri(),
            "is_empty": empty,
            "genus": solid.genus(),
            "volume": solid.volume(),
            "surface_area": solid.surface_area(),
            "bounds_min": None if empty else list(bounds.min),
            "bounds_max": None if empty else list(bounds.max),
            "size": list(bounds.dimensions()),
        }
    except GeometryError:
        raise
    except Exception as e:
        raise GeometryError(f"Solid analysis failed: {e}", operation="analyze") from e
