"""OpenAPI/Swagger document validation

Documents are validated against the per-version JSON Schema documents with
``jsonschema``, and parsed into the typed object models with pydantic. Both
paths report problems the same way: a list of ``ValidationIssue`` triples of
JSON Pointer, JSON Schema keyword and message.
"""

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from typing import Any, NamedTuple

from jsonschema import Draft7Validator, Draft202012Validator
from jsonschema.exceptions import ValidationError as SchemaValidationError
from jsonschema.protocols import Validator
from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from oaspec.config import get_settings
from oaspec.core.exceptions import DocumentValidationError
from oaspec.core.versions import (
    OpenAPIVersion,
    get_openapi_version,
    get_version_module,
    resolve_version,
)
from oaspec.models.classification import SchemaKind
from oaspec.schemas.generator import DIALECTS, DRAFT_07, SPECIFICATION, build_schema

logger = logging.getLogger(__name__)

# JSON Schema keyword equivalent to each pydantic error type
_PYDANTIC_KEYWORDS: dict[str, str] = {
    "missing": "required",
    "missing_one_of": "required",
    "extra_forbidden": "additionalProperties",
    "pattern_mismatch": "additionalProperties",
    "mutually_exclusive": "not",
    "null_forbidden": "type",
    "path_parameter_required": "const",
    "file_parameter_location": "const",
    "literal_error": "const",
    "union_variant_not_found": "oneOf",
    "union_tag_not_found": "oneOf",
    "union_tag_invalid": "oneOf",
    "string_pattern_mismatch": "pattern",
    "too_short": "minItems",
    "too_long": "maxItems",
    "greater_than": "exclusiveMinimum",
    "greater_than_equal": "minimum",
    "unique_items": "uniqueItems",
    "type_mismatch": "contains",
}


class ValidationIssue(NamedTuple):
    """
    A single validation problem.

    ``instance_path`` is a JSON Pointer to the offending value (``""`` for the
    document root) and ``keyword`` the JSON Schema keyword that failed, e.g.
    ``required`` or ``additionalProperties``.
    """

    instance_path: str
    keyword: str
    message: str


class ValidationResult:
    """Result of OpenAPI validation"""

    def __init__(
        self,
        is_valid: bool,
        version: OpenAPIVersion = OpenAPIVersion.UNKNOWN,
        errors: list[ValidationIssue] | None = None,
    ) -> None:
        self.is_valid = is_valid
        self.version = version
        self.errors = errors or []

    def __repr__(self) -> str:
        return (
            f"ValidationResult(is_valid={self.is_valid}, "
            f"version={self.version}, errors={len(self.errors)})"
        )

    def __bool__(self) -> bool:
        return self.is_valid

    def raise_for_errors(self) -> None:
        """
        Raise if validation failed.

        Raises:
            DocumentValidationError: Carrying every issue of this result
        """
        if not self.is_valid:
            raise DocumentValidationError(
                f"Document is not a valid OpenAPI {self.version.value} document "
                f"({len(self.errors)} errors)",
                self.errors,
            )


def is_valid_openapi(spec: Any) -> bool:
    """
    Quick check if a dict looks like an OpenAPI specification.

    This only sniffs the version field and ``info.title``; use
    ``validate_document`` for a full structural check.

    Args:
        spec: Dictionary to validate

    Returns:
        True if appears to be valid OpenAPI spec

    Examples:
        >>> is_valid_openapi({"openapi": "3.0.0", "info": {"title": "API"}})
        True
        >>> is_valid_openapi({"swagger": "2.0", "info": {"title": "API"}})
        True
        >>> is_valid_openapi({"random": "data"})
        False
    """
    if not isinstance(spec, dict):
        return False

    # Check for version identifiers
    if "openapi" not in spec and "swagger" not in spec:
        return False

    # Validate info object has title
    info = spec.get("info")
    if not isinstance(info, dict) or "title" not in info:
        return False

    return True


def compile_validator(version: OpenAPIVersion | str, name: str = SPECIFICATION) -> Validator:
    """
    Compile the validator for a version's root document or one of its components.

    Validators are cached per (version, name) and safe to share.

    Raises:
        UnsupportedVersionError: If the version has no object model
        UnknownSchemaError: If the version publishes no document named ``name``
    """
    return _compile_validator(resolve_version(version), name.lower())


@lru_cache(maxsize=None)
def _compile_validator(resolved: OpenAPIVersion, name: str) -> Validator:
    schema = build_schema(resolved, name)
    validator_cls = Draft7Validator if DIALECTS[resolved] == DRAFT_07 else Draft202012Validator
    validator_cls.check_schema(schema)

    logger.debug(f"Compiled {validator_cls.__name__} for OpenAPI {resolved.value} {name}")
    return validator_cls(schema)


def validate_document(
    document: Any, version: OpenAPIVersion | str | None = None
) -> ValidationResult:
    """
    Validate a whole OpenAPI document.

    Every problem is reported, not just the first.

    Args:
        document: The decoded document
        version: Version to validate against; detected from the document by
            default, falling back to ``Settings.default_version``

    Returns:
        ValidationResult with the issues sorted by instance path

    Examples:
        >>> result = validate_document({"swagger": "2.0", "info": {"title": "API", "version": "1"}, "paths": {}})
        >>> result.is_valid
        True
    """
    resolved = _select_version(document, version)
    errors = _collect_issues(compile_validator(resolved).iter_errors(document))
    return ValidationResult(is_valid=not errors, version=resolved, errors=errors)


def validate_component(
    value: Any, version: OpenAPIVersion | str, name: str
) -> ValidationResult:
    """
    Validate a single object against one of a version's component documents.

    Examples:
        >>> validate_component({"type": "string", "minLength": 1}, "3.0", "schema").is_valid
        True
        >>> validate_component({"type": "object", "minLength": 1}, "3.0", "schema").is_valid
        False
    """
    resolved = resolve_version(version)
    errors = _collect_issues(compile_validator(resolved, name).iter_errors(value))
    return ValidationResult(is_valid=not errors, version=resolved, errors=errors)


def parse_document(document: Any, version: OpenAPIVersion | str | None = None) -> BaseModel:
    """
    Parse a document into the typed ``Specification`` model of its version.

    Args:
        document: The decoded document
        version: As for ``validate_document``

    Returns:
        The ``Specification`` instance of the version's object model

    Raises:
        DocumentValidationError: If the document does not fit the model
    """
    resolved = _select_version(document, version)
    specification = get_version_module(resolved).Specification
    try:
        return specification.model_validate(document)
    except ModelValidationError as e:
        issues = _issues_from_model_errors(e, document)
        raise DocumentValidationError(
            f"Document is not a valid OpenAPI {resolved.value} document ({len(issues)} errors)",
            issues,
        ) from e


def dump_document(model: BaseModel) -> dict[str, Any]:
    """Turn a parsed model back into a JSON-compatible document"""
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


def classify_schema(value: Any, version: OpenAPIVersion | str) -> SchemaKind:
    """
    Classify a raw schema object into the variant of the version's schema union.

    Examples:
        >>> classify_schema({"type": ["integer", "null"]}, "3.1")
        <SchemaKind.INTEGER: 'integer'>
        >>> classify_schema({"properties": {}}, "2.0")
        <SchemaKind.OBJECT: 'object'>
    """
    return get_version_module(version).classify_schema(value)


def _select_version(document: Any, version: OpenAPIVersion | str | None) -> OpenAPIVersion:
    if version is not None:
        return resolve_version(version)

    detected = get_openapi_version(document)
    if detected is not OpenAPIVersion.UNKNOWN:
        return detected

    fallback = get_settings().default_version
    logger.warning(f"Could not detect the OpenAPI version of the document, assuming {fallback}")
    return resolve_version(fallback)


def json_pointer(parts: Iterable[Any]) -> str:
    """
    Format path segments as a JSON Pointer (RFC 6901).

    Examples:
        >>> json_pointer(["paths", "/pets/{id}", "get"])
        '/paths/~1pets~1{id}/get'
        >>> json_pointer([])
        ''
    """
    return "".join(
        "/" + str(part).replace("~", "~0").replace("/", "~1") for part in parts
    )


def _collect_issues(errors: Iterable[SchemaValidationError]) -> list[ValidationIssue]:
    issues = {issue for error in errors for issue in _issues_from_schema_error(error)}
    return sorted(issues)


def _issues_from_schema_error(error: SchemaValidationError) -> Iterator[ValidationIssue]:
    yield ValidationIssue(json_pointer(error.absolute_path), str(error.validator), error.message)

    # Also report why the union branches the value was meant for failed
    if error.validator in ("anyOf", "oneOf") and error.context:
        for branch in _matching_branches(error.context):
            for sub in branch:
                yield from _issues_from_schema_error(sub)


def _matching_branches(
    context: list[SchemaValidationError],
) -> list[list[SchemaValidationError]]:
    """
    Group the errors of a union by branch and keep the branches whose shape
    fits the value: no unknown keys, no wrong ``type`` and no mismatched
    discriminating constant such as ``in`` or ``type``.
    """
    branches: dict[Any, list[SchemaValidationError]] = {}
    for sub in context:
        branches.setdefault(sub.relative_schema_path[0], []).append(sub)

    def _mismatch(sub: SchemaValidationError) -> bool:
        location = list(sub.relative_path)
        if not location:
            return sub.validator in ("additionalProperties", "type", "const")
        return location == ["type"] or (len(location) == 1 and sub.validator == "const")

    return [errors for errors in branches.values() if not any(map(_mismatch, errors))]


def _issues_from_model_errors(
    exc: ModelValidationError, document: Any
) -> list[ValidationIssue]:
    issues = set()
    for error in exc.errors():
        keyword = _PYDANTIC_KEYWORDS.get(error["type"], error["type"])
        issues.add(
            ValidationIssue(_locate(document, error["loc"]), keyword, error["msg"])
        )
    return sorted(issues)


def _locate(document: Any, loc: tuple[int | str, ...]) -> str:
    """
    Map a pydantic error location onto a JSON Pointer into ``document``.

    Location segments that are not keys or indexes of the document (union
    tags, the routed ``entries`` of patterned objects, missing keys) are
    skipped, so a missing field points at the object that lacks it.
    """
    parts: list[int | str] = []
    node = document
    for segment in loc:
        if isinstance(node, dict) and segment in node:
            node = node[segment]
        elif isinstance(node, list) and isinstance(segment, int) and 0 <= segment < len(node):
            node = node[segment]
        else:
            continue
        parts.append(segment)
    return json_pointer(parts)
