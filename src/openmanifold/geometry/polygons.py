"""
Polygon Set: an ordered collection of closed 2D polygons.

Coordinates are held per polygon as owned ``(N, 2)`` float64 arrays and cross
the boundary as flat ``[x0, y0, x1, y1, ...]`` buffers. Closure is implicit:
the last point connects back to the first.
"""

from typing import Any, Iterator, Sequence

import numpy as np
from manifold3d import CrossSection, FillRule

from openmanifold.geometry.validation import as_polygon_buffers


class PolygonSet:
    """
    Owned multi-polygon handle.

    Produced by :meth:`Solid.slice` and :meth:`Solid.project`, or built by the
    caller as input to :func:`extrude` and :func:`revolve`. The caller's
    buffers are copied on construction, so later changes to them never show
    through.

    Example:
        >>> square = PolygonSet([[0, 0, 1, 0, 1, 1, 0, 1]])
        >>> square.size()
        1
        >>> square.get_as_slice(0)
        [0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0]
    """

    __slots__ = ("_polygons",)

    def __init__(self, polygons: Sequence[Any] | None = None) -> None:
        self._polygons = as_polygon_buffers(polygons)

    @classmethod
    def _from_owned(cls, polygons: Sequence[np.ndarray]) -> "PolygonSet":
        # Kernel output is already a private copy; skip the second pass.
        instance = cls.__new__(cls)
        frozen = []
        for polygon in polygons:
            array = np.ascontiguousarray(polygon, dtype=np.float64).reshape(-1, 2)
            array.flags.writeable = False
            frozen.append(array)
        instance._polygons = tuple(frozen)
        return instance

    @classmethod
    def from_cross_section(cls, cross_section: CrossSection) -> "PolygonSet":
        """Copy the contours of a kernel cross-section."""
        return cls._from_owned([np.array(p) for p in cross_section.to_polygons()])

    def to_cross_section(self) -> CrossSection:
        """Build a kernel cross-section (positive fill rule)."""
        return CrossSection([p.copy() for p in self._polygons], FillRule.Positive)

    def size(self) -> int:
        """Number of polygons."""
        return len(self._polygons)

    def is_empty(self) -> bool:
        return not self._polygons

    def get_as_slice(self, index: int) -> list[float]:
        """Return polygon ``index`` as a flat coordinate list."""
        return self._polygons[index].reshape(-1).tolist()

    def points(self, index: int) -> np.ndarray:
        """Return polygon ``index`` as a writable ``(N, 2)`` copy."""
        return self._polygons[index].copy()

    def point_count(self) -> int:
        """Total number of points over all polygons."""
        return sum(len(p) for p in self._polygons)

    def to_lists(self) -> list[list[float]]:
        """Nested flat lists, one per polygon."""
        return [p.reshape(-1).tolist() for p in self._polygons]

    def __len__(self) -> int:
        return len(self._polygons)

    def __iter__(self) -> Iterator[list[float]]:
        for i in range(len(self._polygons)):
            yield self.get_as_slice(i)

    def __repr__(self) -> str:
        return f"PolygonSet(polygons={self.size()}, points={self.point_count()})"
