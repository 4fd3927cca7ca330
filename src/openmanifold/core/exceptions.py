"""
Custom exceptions for OpenManifold.

All OpenManifold exceptions inherit from OpenManifoldError for easy catching.

Geometric degeneracy (self-intersections, zero volume, coplanar booleans) is
never reported through these classes: it shows up as an empty Solid or an
empty PolygonSet. Exceptions are reserved for contract violations at the
boundary and for failures raised by the kernel itself.
"""

from typing import Any


class OpenManifoldError(Exception):
    """Base exception for all OpenManifold errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(OpenManifoldError):
    """Raised when configuration is invalid or missing."""

    pass


class InvalidInputError(OpenManifoldError):
    """Raised when caller-supplied data breaks a boundary contract."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.parameter = parameter


class GeometryError(OpenManifoldError):
    """Raised when the geometry kernel itself fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.operation = operation
