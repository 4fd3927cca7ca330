"""
Boundary validation for caller-supplied buffers and scalars.

Every buffer handed to the facade is treated as borrowed for the duration of
one call. The helpers here copy it into freshly allocated, read-only numpy
storage and check the layout contracts (pairs for polygons, ``num_props``
multiples for vertices, triangles for indices) before anything reaches the
kernel. Violations raise :class:`InvalidInputError`.
"""

import math
from numbers import Integral, Real
from typing import Any, Sequence

import numpy as np

from openmanifold.core.exceptions import InvalidInputError

#: Upper bound for values that cross the boundary as 32-bit unsigned integers.
UINT32_MAX = 2**32 - 1


def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def require_finite(value: Any, name: str) -> float:
    """Return ``value`` as a float, rejecting NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(
            f"{name} must be a real number, got {type(value).__name__}",
            parameter=name,
        )
    result = float(value)
    if not math.isfinite(result):
        raise InvalidInputError(f"{name} must be finite, got {result}", parameter=name)
    return result


def require_positive(value: Any, name: str) -> float:
    """Finite and strictly greater than zero."""
    result = require_finite(value, name)
    if result <= 0.0:
        raise InvalidInputError(f"{name} must be positive, got {result}", parameter=name)
    return result


def require_non_negative_int(value: Any, name: str) -> int:
    """Return ``value`` as an int in the unsigned 32-bit range."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidInputError(
            f"{name} must be an integer, got {type(value).__name__}",
            parameter=name,
        )
    result = int(value)
    if result < 0 or result > UINT32_MAX:
        raise InvalidInputError(
            f"{name} must be between 0 and {UINT32_MAX}, got {result}",
            parameter=name,
        )
    return result


def require_positive_int(value: Any, name: str) -> int:
    """Like :func:`require_non_negative_int` but zero is rejected too."""
    result = require_non_negative_int(value, name)
    if result == 0:
        raise InvalidInputError(f"{name} must be at least 1, got 0", parameter=name)
    return result


def as_polygon_buffer(polygon: Any, index: int = 0) -> np.ndarray:
    """
    Copy one polygon into an owned ``(N, 2)`` float64 array.

    Accepts either a flat ``[x0, y0, x1, y1, ...]`` sequence or an ``(N, 2)``
    array-like of points.

    Raises:
        InvalidInputError: If the coordinate count is odd, the shape is not
            two-dimensional points, or a coordinate is not finite.
    """
    name = f"polygons[{index}]"
    try:
        data = np.array(polygon, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            f"{name} is not a numeric coordinate buffer", parameter=name
        ) from e

    if data.ndim == 1:
        if data.size % 2 != 0:
            raise InvalidInputError(
                f"{name} has an odd number of coordinates",
                parameter=name,
                details={"length": int(data.size)},
            )
        data = data.reshape(-1, 2)
    elif data.ndim != 2 or data.shape[1] != 2:
        raise InvalidInputError(
            f"{name} must hold (x, y) pairs",
            parameter=name,
            details={"shape": list(data.shape)},
        )

    if not np.isfinite(data).all():
        raise InvalidInputError(f"{name} contains non-finite coordinates", parameter=name)

    return _frozen(np.ascontiguousarray(data))


def as_polygon_buffers(polygons: Sequence[Any] | None) -> tuple[np.ndarray, ...]:
    """Copy a whole multi-polygon, see :func:`as_polygon_buffer`."""
    if polygons is None:
        return ()
    if isinstance(polygons, np.ndarray) and polygons.ndim == 2 and polygons.shape[1] == 2:
        # A single (N, 2) array is one polygon, not N polygons.
        polygons = [polygons]
    return tuple(as_polygon_buffer(p, i) for i, p in enumerate(polygons))


def as_vertex_buffer(vertices: Any, num_props: int = 3) -> np.ndarray:
    """
    Copy vertex properties into an owned ``(V, num_props)`` float32 array.

    Raises:
        InvalidInputError: If the buffer length is not a multiple of
            ``num_props`` or holds non-finite values.
    """
    num_props = require_positive_int(num_props, "num_props")
    if num_props < 3:
        raise InvalidInputError(
            f"num_props must be at least 3 (x, y, z), got {num_props}",
            parameter="num_props",
        )

    try:
        data = np.array(vertices, dtype=np.float32)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            "vertices is not a numeric buffer", parameter="vertices"
        ) from e

    if data.ndim == 2 and data.shape[1] == num_props:
        data = data.reshape(-1)
    if data.ndim != 1:
        raise InvalidInputError(
            "vertices must be a flat buffer",
            parameter="vertices",
            details={"shape": list(data.shape)},
        )
    if data.size % num_props != 0:
        raise InvalidInputError(
            f"vertices length must be a multiple of {num_props}",
            parameter="vertices",
            details={"length": int(data.size), "num_props": num_props},
        )
    if not np.isfinite(data).all():
        raise InvalidInputError("vertices contains non-finite values", parameter="vertices")

    return _frozen(np.ascontiguousarray(data.reshape(-1, num_props)))


def as_index_buffer(indices: Any) -> np.ndarray:
    """
    Copy triangle indices into an owned ``(T, 3)`` uint32 array.

    Raises:
        InvalidInputError: If the length is not a multiple of 3 or an index
            is negative, fractional or too large for 32 bits.
    """
    try:
        data = np.asarray(indices)
    except (TypeError, ValueError) as e:
        raise InvalidInputError("indices is not a numeric buffer", parameter="indices") from e

    if data.size == 0:
        return _frozen(np.zeros((0, 3), dtype=np.uint32))

    if data.dtype.kind not in "iu":
        raise InvalidInputError(
            "indices must be integers",
            parameter="indices",
            details={"dtype": str(data.dtype)},
        )
    if data.ndim == 2 and data.shape[1] == 3:
        data = data.reshape(-1)
    if data.ndim != 1:
        raise InvalidInputError(
            "indices must be a flat buffer",
            parameter="indices",
            details={"shape": list(data.shape)},
        )
    if data.size % 3 != 0:
        raise InvalidInputError(
            "indices length must be a multiple of 3",
            parameter="indices",
            details={"length": int(data.size)},
        )
    if data.min() < 0 or data.max() > UINT32_MAX:
        raise InvalidInputError("indices must fit in an unsigned 32-bit range", parameter="indices")

    return _frozen(data.astype(np.uint32).reshape(-1, 3))


def check_indices_in_range(triangles: np.ndarray, vertex_count: int) -> None:
    """Raise if any triangle references a vertex past ``vertex_count``."""
    if triangles.size == 0:
        return
    highest = int(triangles.max())
    if highest >= vertex_count:
        raise InvalidInputError(
            "indices reference vertices that do not exist",
            parameter="indices",
            details={"max_index": highest, "vertex_count": vertex_count},
        )
