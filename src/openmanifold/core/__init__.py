"""
Core module - Configuration, exceptions and logging shared by the facade.
"""

from openmanifold.core.config import DEFAULT_PROFILE, ConfigManager, QualityProfile
from openmanifold.core.exceptions import (
    OpenManifoldError,
    ConfigurationError,
    GeometryError,
    InvalidInputError,
)
from openmanifold.core.logging import configure_logging, get_logger

__all__ = [
    # Config
    "ConfigManager",
    "QualityProfile",
    "DEFAULT_PROFILE",
    # Exceptions
    "OpenManifoldError",
    "ConfigurationError",
    "GeometryError",
    "InvalidInputError",
    # Logging
    "configure_logging",
    "get_logger",
]
