"""Version detection and document validation"""

from .exceptions import (
    DocumentLoadError,
    DocumentValidationError,
    OASpecError,
    UnknownSchemaError,
    UnsupportedVersionError,
)
from .openapi_validator import (
    ValidationIssue,
    ValidationResult,
    classify_schema,
    compile_validator,
    dump_document,
    is_valid_openapi,
    json_pointer,
    parse_document,
    validate_component,
    validate_document,
)
from .versions import (
    OpenAPIVersion,
    get_openapi_version,
    get_version_module,
    resolve_version,
    supported_versions,
)

__all__ = [
    "OpenAPIVersion",
    "ValidationIssue",
    "ValidationResult",
    "is_valid_openapi",
    "get_openapi_version",
    "get_version_module",
    "resolve_version",
    "supported_versions",
    "compile_validator",
    "validate_document",
    "validate_component",
    "parse_document",
    "dump_document",
    "classify_schema",
    "json_pointer",
    "OASpecError",
    "UnsupportedVersionError",
    "UnknownSchemaError",
    "DocumentValidationError",
    "DocumentLoadError",
]
