"""oaspec - OpenAPI and Swagger object models with per-version JSON Schema validation

This library provides:
- Typed object models for Swagger 2.0 and OpenAPI 3.0, 3.1 and 3.2
- JSON Schema validation documents generated from those models
- Document validation reporting every issue as (path, keyword, message)
"""

from oaspec.core import (
    DocumentLoadError,
    DocumentValidationError,
    OASpecError,
    OpenAPIVersion,
    UnknownSchemaError,
    UnsupportedVersionError,
    ValidationIssue,
    ValidationResult,
    classify_schema,
    compile_validator,
    dump_document,
    get_openapi_version,
    is_valid_openapi,
    parse_document,
    validate_component,
    validate_document,
)
from oaspec.models import SchemaKind
from oaspec.schemas import available_schemas, build_schema, write_schemas
from oaspec.utils import load_document, load_document_file

__version__ = "0.1.0"

__all__ = [
    "OpenAPIVersion",
    "SchemaKind",
    "ValidationIssue",
    "ValidationResult",
    "get_openapi_version",
    "is_valid_openapi",
    "validate_document",
    "validate_component",
    "compile_validator",
    "parse_document",
    "dump_document",
    "classify_schema",
    "build_schema",
    "available_schemas",
    "write_schemas",
    "load_document",
    "load_document_file",
    "OASpecError",
    "UnsupportedVersionError",
    "UnknownSchemaError",
    "DocumentValidationError",
    "DocumentLoadError",
]
