"""OpenAPI version detection and lookup of the per-version object models"""

import re
from enum import Enum
from types import ModuleType
from typing import Any

from oaspec.core.exceptions import UnsupportedVersionError
from oaspec.models import VERSION_MODULES

_VERSION_PREFIX = re.compile(r"^(\d+)\.(\d+)(?:\.|-|$)")


class OpenAPIVersion(str, Enum):
    """OpenAPI specification versions"""

    SWAGGER_2_0 = "2.0"
    OPENAPI_3_0 = "3.0"
    OPENAPI_3_1 = "3.1"
    OPENAPI_3_2 = "3.2"
    UNKNOWN = "unknown"


def get_openapi_version(spec: Any) -> OpenAPIVersion:
    """
    Detect the OpenAPI/Swagger version from a specification.

    Only the major and minor version are considered, so a malformed version
    string such as ``"3.1"`` is still attributed to 3.1 and then rejected by
    that version's validation document.

    Args:
        spec: OpenAPI specification dictionary

    Returns:
        Detected OpenAPI version

    Examples:
        >>> get_openapi_version({"openapi": "3.0.0"})
        <OpenAPIVersion.OPENAPI_3_0: '3.0'>
        >>> get_openapi_version({"swagger": "2.0"})
        <OpenAPIVersion.SWAGGER_2_0: '2.0'>
        >>> get_openapi_version({"openapi": "4.0.0"})
        <OpenAPIVersion.UNKNOWN: 'unknown'>
    """
    if not isinstance(spec, dict):
        return OpenAPIVersion.UNKNOWN

    # Check OpenAPI 3.x
    if "openapi" in spec:
        match = _VERSION_PREFIX.match(str(spec["openapi"]))
        if match and match.group(1) == "3":
            return _lookup(f"3.{match.group(2)}")
        return OpenAPIVersion.UNKNOWN

    # Check Swagger 2.0
    if "swagger" in spec:
        match = _VERSION_PREFIX.match(str(spec["swagger"]))
        if match and match.group(1) == "2":
            return OpenAPIVersion.SWAGGER_2_0

    return OpenAPIVersion.UNKNOWN


def _lookup(value: str) -> OpenAPIVersion:
    try:
        return OpenAPIVersion(value)
    except ValueError:
        return OpenAPIVersion.UNKNOWN


def resolve_version(version: OpenAPIVersion | str) -> OpenAPIVersion:
    """
    Normalize a version given as enum member, ``"3.1"`` or ``"3.1.0"``.

    Raises:
        UnsupportedVersionError: If the version has no object model
    """
    if isinstance(version, OpenAPIVersion):
        resolved = version
    else:
        match = _VERSION_PREFIX.match(str(version))
        resolved = _lookup(f"{match.group(1)}.{match.group(2)}") if match else OpenAPIVersion.UNKNOWN

    if resolved is OpenAPIVersion.UNKNOWN:
        raise UnsupportedVersionError(version)
    return resolved


def get_version_module(version: OpenAPIVersion | str) -> ModuleType:
    """
    Get the object model package of a version.

    Examples:
        >>> get_version_module("3.1").Specification.__module__
        'oaspec.models.v3_1.spec'
    """
    return VERSION_MODULES[resolve_version(version).value]


def supported_versions() -> list[OpenAPIVersion]:
    """Versions with an object model, oldest first"""
    return [version for version in OpenAPIVersion if version is not OpenAPIVersion.UNKNOWN]
