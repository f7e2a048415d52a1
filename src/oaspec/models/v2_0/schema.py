"""Swagger 2.0 schema objects

A schema is exactly one of the variants below. Swagger 2.0 has no
``anyOf``/``oneOf``/``not``; composition is limited to ``allOf``, and an object
schema may omit ``type`` when it carries object keywords.
"""

from typing import Any, ClassVar, Literal, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from oaspec.models.base import OpenAPIObject, tagged_union
from oaspec.models.classification import (
    IMPLICIT_OBJECT_KEYWORDS,
    SchemaKind,
    classify,
    variant_discriminator,
)


class ExternalDocumentation(OpenAPIObject):
    """Reference to external documentation"""

    description: str | None = None
    url: str


class XML(OpenAPIObject):
    """XML representation hints for a schema"""

    name: str | None = None
    namespace: str | None = None
    prefix: str | None = None
    attribute: StrictBool | None = None
    wrapped: StrictBool | None = None


class Reference(OpenAPIObject):
    """JSON Reference to a definition, parameter or response"""

    kind: ClassVar[SchemaKind] = SchemaKind.REFERENCE

    ref: str = Field(alias="$ref")


class _SchemaBase(OpenAPIObject):
    title: str | None = None
    description: str | None = None
    default: Any = None
    enum: list[Any] | None = Field(default=None, min_length=1)
    example: Any = None
    read_only: StrictBool | None = None
    xml: XML | None = None
    external_docs: ExternalDocumentation | None = None


class StringSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.STRING

    type: Literal["string"]
    format: str | None = None
    max_length: StrictInt | None = Field(default=None, ge=0)
    min_length: StrictInt | None = Field(default=None, ge=0)
    pattern: str | None = None


class NumberSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.NUMBER

    type: Literal["number"]
    format: str | None = None
    multiple_of: StrictFloat | None = Field(default=None, gt=0)
    maximum: StrictFloat | None = None
    exclusive_maximum: StrictBool | None = None
    minimum: StrictFloat | None = None
    exclusive_minimum: StrictBool | None = None


class IntegerSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.INTEGER

    type: Literal["integer"]
    format: str | None = None
    multiple_of: StrictFloat | None = Field(default=None, gt=0)
    maximum: StrictFloat | None = None
    exclusive_maximum: StrictBool | None = None
    minimum: StrictFloat | None = None
    exclusive_minimum: StrictBool | None = None


class BooleanSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.BOOLEAN

    type: Literal["boolean"]
    format: str | None = None


class FileSchema(_SchemaBase):
    """Uploaded file; only valid as a response schema or formData parameter"""

    kind: ClassVar[SchemaKind] = SchemaKind.FILE

    type: Literal["file"]
    format: str | None = None


class ArraySchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.ARRAY

    type: Literal["array"]
    items: "Schema"
    max_items: StrictInt | None = Field(default=None, ge=0)
    min_items: StrictInt | None = Field(default=None, ge=0)
    unique_items: StrictBool | None = None


class ObjectSchema(_SchemaBase):
    """
    Object schema.

    ``type`` may be omitted, in which case at least one object keyword
    (``properties``, ``required``, ``additionalProperties``,
    ``maxProperties``, ``minProperties``) must be present.
    """

    kind: ClassVar[SchemaKind] = SchemaKind.OBJECT
    required_one_of: ClassVar[tuple[tuple[str, ...], ...]] = (("type", *sorted(IMPLICIT_OBJECT_KEYWORDS)),)

    type: Literal["object"] | None = None
    properties: dict[str, "Schema"] | None = None
    required: list[str] | None = Field(default=None, min_length=1)
    additional_properties: "Union[StrictBool, Schema, None]" = None
    all_of: list["Schema"] | None = Field(default=None, min_length=1)
    max_properties: StrictInt | None = Field(default=None, ge=0)
    min_properties: StrictInt | None = Field(default=None, ge=0)
    discriminator: str | None = None


class CompositionSchema(_SchemaBase):
    """
    Schema without ``type``: either an ``allOf`` composition or a bare
    metadata-only schema that matches anything.
    """

    kind: ClassVar[SchemaKind] = SchemaKind.COMPOSITION

    all_of: list["Schema"] | None = Field(default=None, min_length=1)


def classify_schema(value: Any) -> SchemaKind:
    """Classify a raw Swagger 2.0 schema value into its variant"""
    return classify(
        value,
        {"string", "number", "integer", "boolean", "file", "array", "object"},
        implicit_object=True,
    )


SCHEMA_VARIANTS: dict[SchemaKind, type[OpenAPIObject]] = {
    SchemaKind.REFERENCE: Reference,
    SchemaKind.STRING: StringSchema,
    SchemaKind.NUMBER: NumberSchema,
    SchemaKind.INTEGER: IntegerSchema,
    SchemaKind.BOOLEAN: BooleanSchema,
    SchemaKind.FILE: FileSchema,
    SchemaKind.ARRAY: ArraySchema,
    SchemaKind.OBJECT: ObjectSchema,
    SchemaKind.COMPOSITION: CompositionSchema,
}

Schema = tagged_union(
    *SCHEMA_VARIANTS.values(),
    discriminator=variant_discriminator(SCHEMA_VARIANTS, classify_schema),
    label="Swagger 2.0 schema",
)

for _model in SCHEMA_VARIANTS.values():
    _model.model_rebuild()
