"""Exceptions raised by oaspec"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from oaspec.core.openapi_validator import ValidationIssue


class OASpecError(Exception):
    """Base class of every oaspec error"""


class UnsupportedVersionError(OASpecError, ValueError):
    """The version has no object model or validation document"""

    def __init__(self, version: object) -> None:
        self.version = version
        super().__init__(f"Unsupported OpenAPI version: {version!r}")


class UnknownSchemaError(OASpecError, KeyError):
    """The version publishes no validation document under this name"""

    def __init__(self, version: str, name: str, available: list[str]) -> None:
        self.version = version
        self.name = name
        self.available = available
        super().__init__(
            f"No schema named {name!r} for OpenAPI {version}; "
            f"available: {', '.join(available)}"
        )

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class DocumentValidationError(OASpecError, ValueError):
    """A document does not conform to its OpenAPI version"""

    def __init__(self, message: str, issues: list["ValidationIssue"]) -> None:
        self.issues = issues
        super().__init__(message)


class DocumentLoadError(OASpecError, ValueError):
    """Text or file that does not hold a JSON or YAML mapping"""
