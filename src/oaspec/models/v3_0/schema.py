"""OpenAPI 3.0 schema objects

The schema dialect is an extended subset of JSON Schema Wright draft 00.
A schema is exactly one variant: a Reference, one of the six typed variants,
or a composition schema (``allOf``/``anyOf``/``oneOf``/``not``) that carries no
``type``. Composition keywords never mix with typed keywords.
"""

from typing import Any, ClassVar, Literal, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from oaspec.models.base import OpenAPIObject, tagged_union
from oaspec.models.classification import SchemaKind, classify, variant_discriminator


class ExternalDocumentation(OpenAPIObject):
    """Reference to external documentation"""

    description: str | None = None
    url: str


class XML(OpenAPIObject):
    name: str | None = None
    namespace: str | None = None
    prefix: str | None = None
    attribute: StrictBool | None = None
    wrapped: StrictBool | None = None


class Discriminator(OpenAPIObject):
    """
    Hint used to select among ``oneOf``/``anyOf`` alternatives.

    ``mapping`` maps payload values of ``propertyName`` to schema names or
    references.
    """

    property_name: str
    mapping: dict[str, str] | None = None


class Reference(OpenAPIObject):
    """JSON Reference to another component"""

    kind: ClassVar[SchemaKind] = SchemaKind.REFERENCE

    ref: str = Field(alias="$ref")
    description: str | None = None


class _SchemaBase(OpenAPIObject):
    title: str | None = None
    description: str | None = None
    default: Any = None
    example: Any = None
    enum: list[Any] | None = Field(default=None, min_length=1)
    nullable: StrictBool | None = None
    read_only: StrictBool | None = None
    write_only: StrictBool | None = None
    xml: XML | None = None
    external_docs: ExternalDocumentation | None = None
    deprecated: StrictBool | None = None


class StringSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.STRING

    type: Literal["string"]
    format: str | None = None
    default: str | None = None
    example: str | None = None
    enum: list[str] | None = Field(default=None, min_length=1)
    max_length: StrictInt | None = Field(default=None, ge=0)
    min_length: StrictInt | None = Field(default=None, ge=0)
    pattern: str | None = None


class NumberSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.NUMBER

    type: Literal["number"]
    format: str | None = None
    default: StrictFloat | None = None
    example: StrictFloat | None = None
    enum: list[StrictFloat] | None = Field(default=None, min_length=1)
    multiple_of: StrictFloat | None = Field(default=None, gt=0)
    maximum: StrictFloat | None = None
    exclusive_maximum: StrictBool | None = None
    minimum: StrictFloat | None = None
    exclusive_minimum: StrictBool | None = None


class IntegerSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.INTEGER

    type: Literal["integer"]
    format: str | None = None
    default: StrictInt | None = None
    example: StrictInt | None = None
    enum: list[StrictInt] | None = Field(default=None, min_length=1)
    multiple_of: StrictFloat | None = Field(default=None, gt=0)
    maximum: StrictFloat | None = None
    exclusive_maximum: StrictBool | None = None
    minimum: StrictFloat | None = None
    exclusive_minimum: StrictBool | None = None


class BooleanSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.BOOLEAN

    type: Literal["boolean"]
    default: StrictBool | None = None
    example: StrictBool | None = None
    enum: list[StrictBool] | None = Field(default=None, min_length=1)


class ArraySchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.ARRAY

    type: Literal["array"]
    default: list[Any] | None = None
    example: list[Any] | None = None
    enum: list[list[Any]] | None = Field(default=None, min_length=1)
    items: "Schema | None" = None
    max_items: StrictInt | None = Field(default=None, ge=0)
    min_items: StrictInt | None = Field(default=None, ge=0)
    unique_items: StrictBool | None = None


class ObjectSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.OBJECT

    type: Literal["object"]
    default: dict[str, Any] | None = None
    example: dict[str, Any] | None = None
    enum: list[dict[str, Any]] | None = Field(default=None, min_length=1)
    discriminator: Discriminator | None = None
    properties: dict[str, "Schema"] | None = None
    required: list[str] | None = Field(default=None, min_length=1)
    additional_properties: "Union[StrictBool, Schema, None]" = None
    max_properties: StrictInt | None = Field(default=None, ge=0)
    min_properties: StrictInt | None = Field(default=None, ge=0)


class CompositionSchema(_SchemaBase):
    """
    Schema combining other schemas, without a ``type`` of its own.

    With no composition keyword at all it is the empty schema, which accepts
    any value.
    """

    kind: ClassVar[SchemaKind] = SchemaKind.COMPOSITION

    discriminator: Discriminator | None = None
    all_of: list["Schema"] | None = Field(default=None, min_length=1)
    any_of: list["Schema"] | None = Field(default=None, min_length=1)
    one_of: list["Schema"] | None = Field(default=None, min_length=1)
    not_: "Schema | None" = Field(default=None, alias="not")


def classify_schema(value: Any) -> SchemaKind:
    """Classify a raw OpenAPI 3.0 schema value into its variant"""
    return classify(value, {"string", "number", "integer", "boolean", "array", "object"})


SCHEMA_VARIANTS: dict[SchemaKind, type[OpenAPIObject]] = {
    SchemaKind.REFERENCE: Reference,
    SchemaKind.STRING: StringSchema,
    SchemaKind.NUMBER: NumberSchema,
    SchemaKind.INTEGER: IntegerSchema,
    SchemaKind.BOOLEAN: BooleanSchema,
    SchemaKind.ARRAY: ArraySchema,
    SchemaKind.OBJECT: ObjectSchema,
    SchemaKind.COMPOSITION: CompositionSchema,
}

Schema = tagged_union(
    *SCHEMA_VARIANTS.values(),
    discriminator=variant_discriminator(SCHEMA_VARIANTS, classify_schema),
    label="OpenAPI 3.0 schema",
)

for _model in SCHEMA_VARIANTS.values():
    _model.model_rebuild()
