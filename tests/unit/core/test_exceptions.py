"""
Tests for the exception hierarchy.
"""

import pytest

from openmanifold.core.exceptions import (
    ConfigurationError,
    GeometryError,
    InvalidInputError,
    OpenManifoldError,
)


@pytest.mark.unit
class TestOpenManifoldError:
    """Tests for the base error."""

    def test_message_only(self):
        err = OpenManifoldError("boom")
        assert str(err) == "boom"
        assert err.details == {}

    def test_message_with_details(self):
        err = OpenManifoldError("boom", details={"length": 3})
        assert str(err) == "boom - Details: {'length': 3}"


@pytest.mark.unit
class TestSubclasses:
    """Every facade error can be caught through the base class."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("bad config"),
            InvalidInputError("bad buffer", parameter="vertices"),
            GeometryError("kernel failed", operation="union"),
        ],
    )
    def test_inherits_base(self, error):
        with pytest.raises(OpenManifoldError):
            raise error

    def test_invalid_input_parameter(self):
        err = InvalidInputError("odd length", parameter="polygons[0]", details={"length": 5})
        assert err.parameter == "polygons[0]"
        assert err.details["length"] == 5

    def test_geometry_error_operation(self):
        err = GeometryError("kernel failed", operation="hull")
        assert err.operation == "hull"
