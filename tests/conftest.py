"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from openmanifold.geometry import cube


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_dir(temp_dir):
    """Create a sample configuration directory with two quality profiles."""
    config_dir = temp_dir / "config"
    (config_dir / "profiles").mkdir(parents=True)

    draft_config = """
profile:
  name: "Draft"
  circular_segments: 12

smoothing:
  min_sharp_angle: 45.0
  min_smoothness: 0.2
"""
    (config_dir / "profiles" / "draft.yaml").write_text(draft_config)

    fine_config = """
profile:
  circular_segments: 96
  refine_tolerance: 0.001
"""
    (config_dir / "profiles" / "fine.yaml").write_text(fine_config)

    return config_dir


@pytest.fixture
def unit_cube():
    """Unit cube spanning [0, 1] on every axis."""
    return cube(1.0, 1.0, 1.0)


@pytest.fixture
def cube_buffers():
    """Flat vertex/index buffers of a unit cube with outward winding."""
    vertices = [
        0, 0, 0,
        1, 0, 0,
        1, 1, 0,
        0, 1, 0,
        0, 0, 1,
        1, 0, 1,
        1, 1, 1,
        0, 1, 1,
    ]
    indices = [
        0, 2, 1, 0, 3, 2,  # bottom
        4, 5, 6, 4, 6, 7,  # top
        0, 1, 5, 0, 5, 4,  # front
        3, 7, 6, 3, 6, 2,  # back
        0, 4, 7, 0, 7, 3,  # left
        1, 2, 6, 1, 6, 5,  # right
    ]
    return vertices, indices


@pytest.fixture
def unit_square():
    """Counter-clockwise unit square as a flat coordinate buffer."""
    return [0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0]
