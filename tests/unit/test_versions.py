"""Tests for version resolution"""

import pytest

from oaspec.core import (
    OpenAPIVersion,
    UnsupportedVersionError,
    get_version_module,
    resolve_version,
    supported_versions,
)
from oaspec.models import v2_0, v3_0, v3_1, v3_2


class TestResolveVersion:
    """Tests for resolve_version function"""

    def test_accepts_enum_members(self) -> None:
        """Test that enum members resolve to themselves"""
        assert resolve_version(OpenAPIVersion.OPENAPI_3_0) is OpenAPIVersion.OPENAPI_3_0

    def test_accepts_version_strings(self) -> None:
        """Test short and full version strings"""
        assert resolve_version("3.1") is OpenAPIVersion.OPENAPI_3_1
        assert resolve_version("3.2.0") is OpenAPIVersion.OPENAPI_3_2
        assert resolve_version("2.0") is OpenAPIVersion.SWAGGER_2_0

    @pytest.mark.parametrize("version", ["1.2", "3.9", "4.0.0", "latest", OpenAPIVersion.UNKNOWN])
    def test_rejects_unsupported_versions(self, version) -> None:
        """Test that versions without a model raise"""
        with pytest.raises(UnsupportedVersionError) as exc_info:
            resolve_version(version)

        assert exc_info.value.version == version


class TestGetVersionModule:
    """Tests for get_version_module function"""

    def test_modules(self) -> None:
        """Test that each version maps to its own model package"""
        assert get_version_module("2.0") is v2_0
        assert get_version_module("3.0.3") is v3_0
        assert get_version_module(OpenAPIVersion.OPENAPI_3_1) is v3_1
        assert get_version_module("3.2") is v3_2

    def test_version_modules_are_independent(self) -> None:
        """Test that versions do not share object classes"""
        assert v3_0.Operation is not v3_1.Operation
        assert v3_1.Operation is not v3_2.Operation


def test_supported_versions() -> None:
    """Test that supported versions are ordered oldest first"""
    assert [version.value for version in supported_versions()] == ["2.0", "3.0", "3.1", "3.2"]
