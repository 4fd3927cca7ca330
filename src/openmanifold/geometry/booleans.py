"""
Boolean combination of Solids.

Each operation takes two Solids by reference and returns a new Solid:

- union (A ∪ B)
- intersection (A ∩ B)
- difference (A − B)

The kernel may return an empty Solid for ill-conditioned input (for example
near-coplanar faces). That is a valid result, not a failure.
"""

import logging
import operator
from enum import Enum
from typing import Iterable

import manifold3d

from openmanifold.core.exceptions import InvalidInputError
from openmanifold.geometry.solid import Solid, kernel_call

logger = logging.getLogger(__name__)


class BooleanOp(str, Enum):
    """Boolean operation on Solids."""

    UNION = "union"
    INTERSECTION = "intersection"
    DIFFERENCE = "difference"


_KERNEL_OPERATORS = {
    BooleanOp.UNION: operator.add,
    BooleanOp.INTERSECTION: operator.xor,
    BooleanOp.DIFFERENCE: operator.sub,
}


def _require_solid(value: object, name: str) -> Solid:
    if not isinstance(value, Solid):
        raise InvalidInputError(
            f"{name} must be a Solid, got {type(value).__name__}", parameter=name
        )
    return value


def union(a: Solid, b: Solid) -> Solid:
    """
    Boolean union of two Solids (A ∪ B).

    Args:
        a: First operand.
        b: Second operand.

    Returns:
        New Solid; the non-empty operand's volume if the other is empty.
    """
    return boolean_op(a, b, BooleanOp.UNION)


def intersection(a: Solid, b: Solid) -> Solid:
    """
    Boolean intersection (A ∩ B).

    Returns:
        New Solid; empty if either operand is empty.
    """
    return boolean_op(a, b, BooleanOp.INTERSECTION)


def difference(a: Solid, b: Solid) -> Solid:
    """
    Boolean subtraction (A − B).

    Args:
        a: Base Solid.
        b: Solid to subtract from *a*.

    Returns:
        New Solid; *a*'s volume if *b* is empty, empty if *a* is empty.
    """
    return boolean_op(a, b, BooleanOp.DIFFERENCE)


def boolean_op(a: Solid, b: Solid, op: BooleanOp | str) -> Solid:
    """Dispatch a boolean operation by :class:`BooleanOp`."""
    a = _require_solid(a, "a")
    b = _require_solid(b, "b")
    try:
        op = BooleanOp(op)
    except ValueError as e:
        raise InvalidInputError(f"Unknown boolean operation: {op}", parameter="op") from e

    combine = _KERNEL_OPERATORS[op]
    result = Solid(kernel_call(op.value, lambda: combine(a._kernel, b._kernel)))

    logger.debug(
        "Boolean %s: A(%d tris) op B(%d tris) -> %d tris",
        op.value, a.num_tri(), b.num_tri(), result.num_tri(),
    )
    return result


def union_all(solids: Iterable[Solid]) -> Solid:
    """
    Union any number of Solids. Empty Solids are skipped.

    Returns the empty Solid if nothing remains.
    """
    parts = [_require_solid(s, f"solids[{i}]") for i, s in enumerate(solids)]
    valid = [s._kernel for s in parts if not s.is_empty()]
    if not valid:
        return Solid()
    if len(valid) == 1:
        return Solid(valid[0])
    result = Solid(
        kernel_call("union_all", lambda: manifold3d.Manifold.batch_boolean(valid, manifold3d.OpType.Add))
    )
    logger.debug("Batch union of %d solids -> %d tris", len(valid), result.num_tri())
    return result
