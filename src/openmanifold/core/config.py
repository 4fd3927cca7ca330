"""
Configuration management for OpenManifold.

Handles loading and validation of tessellation/smoothing quality profiles.
Profiles only supply default values for facade calls; they never change
kernel-wide state.
"""

from dataclasses import dataclass, field
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from openmanifold.core.exceptions import ConfigurationError


class QualityProfile(BaseModel):
    """Tessellation and smoothing defaults."""

    model_config = ConfigDict(frozen=True)

    name: str = "default"
    circular_segments: int = Field(default=0, ge=0)
    min_sharp_angle: float = Field(default=60.0, ge=0.0, le=180.0)
    min_smoothness: float = Field(default=0.0, ge=0.0, le=1.0)
    refine_tolerance: float = Field(default=0.01, gt=0.0)

    def segments(self, circular_segments: int | None) -> int:
        """Resolve an optional segment count against this profile."""
        if circular_segments is None:
            return self.circular_segments
        return circular_segments


DEFAULT_PROFILE = QualityProfile()


def _section(data: dict, key: str, config_file: Path) -> dict:
    """Return ``data[key]``, which must be a mapping."""
    section = data[key]
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Section '{key}' must be a mapping: {config_file}",
            details={"section": key, "type": type(section).__name__},
        )
    return section


@dataclass
class ConfigManager:
    """
    Central configuration manager for OpenManifold.

    Loads and validates quality profiles from YAML files stored under
    ``<config_dir>/profiles``.

    Example:
        >>> config = ConfigManager(config_dir=Path("config"))
        >>> draft = config.get_profile("draft")
        >>> sphere(10.0, profile=draft)
    """

    config_dir: Path
    _profiles: dict[str, QualityProfile] = field(default_factory=dict, init=False)
    _loaded: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        """Initialize configuration manager."""
        self.config_dir = Path(self.config_dir)
        if not self.config_dir.exists():
            raise ConfigurationError(
                f"Configuration directory not found: {self.config_dir}"
            )

    def load(self) -> None:
        """Load all configurations from disk."""
        self._load_profiles()
        self._loaded = True

    def _load_profiles(self) -> None:
        """Load quality profile configurations."""
        profiles_dir = self.config_dir / "profiles"
        if not profiles_dir.exists():
            return

        for config_file in sorted(profiles_dir.glob("*.yaml")):
            try:
                with open(config_file) as f:
                    data = yaml.safe_load(f)

                if not data:
                    continue
                if not isinstance(data, dict):
                    raise ConfigurationError(
                        f"Quality profile file must contain a mapping: {config_file}",
                        details={"type": type(data).__name__},
                    )

                if "profile" in data:
                    profile_data = dict(_section(data, "profile", config_file))
                    profile_data.setdefault("name", config_file.stem)
                    if "smoothing" in data:
                        profile_data.update(_section(data, "smoothing", config_file))

                    self._profiles[config_file.stem] = QualityProfile.model_validate(profile_data)
            except (yaml.YAMLError, ValidationError) as e:
                raise ConfigurationError(
                    f"Failed to load quality profile: {config_file}",
                    details={"error": str(e)},
                ) from e

    def get_profile(self, name: str) -> QualityProfile:
        """
        Get quality profile by name.

        Args:
            name: Profile name (without .yaml extension)

        Returns:
            QualityProfile instance

        Raises:
            ConfigurationError: If profile not found
        """
        if not self._loaded:
            self.load()

        if name not in self._profiles:
            available = list(self._profiles.keys())
            raise ConfigurationError(
                f"Quality profile not found: {name}",
                details={"available": available},
            )
        return self._profiles[name]

    def list_profiles(self) -> list[str]:
        """List available quality profiles."""
        if not self._loaded:
            self.load()
        return list(self._profiles.keys())
