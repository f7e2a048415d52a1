"""Structural classification of schema objects into union variants"""

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any


class SchemaKind(str, Enum):
    """Variants of the schema union"""

    REFERENCE = "reference"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    COMPOSITION = "composition"
    FILE = "file"  # Swagger 2.0 only
    NULL = "null"  # OpenAPI 3.1+ only
    AMBIGUOUS = "ambiguous"
    INVALID = "invalid"


# Keywords that make a schema without "type" an object schema in Swagger 2.0
IMPLICIT_OBJECT_KEYWORDS = frozenset(
    {"properties", "required", "additionalProperties", "maxProperties", "minProperties"}
)


def classify(
    value: Any,
    type_names: Iterable[str],
    *,
    allow_type_lists: bool = False,
    implicit_object: bool = False,
) -> SchemaKind:
    """
    Classify an untyped schema value by the keys it carries.

    Args:
        value: Raw JSON value purporting to be a schema
        type_names: ``type`` values the version accepts
        allow_type_lists: Whether ``type`` may be a list (JSON Schema 2020-12)
        implicit_object: Whether object keywords imply ``type: object``

    Returns:
        The variant that must validate ``value``

    Examples:
        >>> classify({"$ref": "#/definitions/Pet"}, {"string"})
        <SchemaKind.REFERENCE: 'reference'>
        >>> classify({"type": ["string", "null"]}, {"string", "null"}, allow_type_lists=True)
        <SchemaKind.STRING: 'string'>
        >>> classify({"description": "anything"}, {"string"})
        <SchemaKind.COMPOSITION: 'composition'>
    """
    if not isinstance(value, dict):
        return SchemaKind.INVALID

    if "$ref" in value:
        return SchemaKind.REFERENCE

    known = set(type_names)

    if "type" in value:
        declared = value["type"]
        if isinstance(declared, list):
            if not allow_type_lists or not declared:
                return SchemaKind.INVALID
            if not all(isinstance(name, str) for name in declared):
                return SchemaKind.INVALID
            non_null = {name for name in declared if name != "null"}
            if not non_null:
                declared = "null"
            elif len(non_null) > 1:
                return SchemaKind.AMBIGUOUS
            else:
                declared = non_null.pop()
        if not isinstance(declared, str) or declared not in known:
            return SchemaKind.INVALID
        return SchemaKind(declared)

    if implicit_object and IMPLICIT_OBJECT_KEYWORDS.intersection(value):
        return SchemaKind.OBJECT

    return SchemaKind.COMPOSITION


def variant_discriminator(
    variants: dict[SchemaKind, type],
    classifier: Callable[[Any], SchemaKind],
) -> Callable[[Any], str | None]:
    """
    Adapt a classifier to a pydantic callable discriminator.

    Raw values are classified structurally; model instances are tagged by
    their own class. Returns None when no variant applies.
    """

    def _tag(value: Any) -> str | None:
        if isinstance(value, dict):
            variant = variants.get(classifier(value))
            return variant.__name__ if variant is not None else None
        for variant in variants.values():
            if type(value) is variant:
                return variant.__name__
        return None

    return _tag
