"""OpenAPI 3.2 schema objects

The schema dialect is JSON Schema draft 2020-12 with the OpenAPI vocabulary.
``nullable`` is gone: a nullable value lists ``"null"`` next to its type, as in
``type: ["string", "null"]``. Each typed variant therefore accepts its own type
name or a list holding it and ``"null"``; payload lists (``enum``,
``examples``) may contain null for the same reason.
"""

from typing import Any, ClassVar, Literal, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from oaspec.models.base import OpenAPIObject, tagged_union, type_keyword
from oaspec.models.classification import SchemaKind, classify, variant_discriminator


class ExternalDocumentation(OpenAPIObject):
    """Reference to external documentation"""

    description: str | None = None
    url: str


class XML(OpenAPIObject):
    """
    XML representation hints for a schema.

    ``nodeType`` supersedes the deprecated ``attribute`` and ``wrapped`` flags
    and cannot be combined with them.
    """

    exclusive_fields: ClassVar[tuple[tuple[str, ...], ...]] = (
        ("nodeType", "attribute"),
        ("nodeType", "wrapped"),
    )

    node_type: Literal["element", "attribute", "text", "cdata", "none"] | None = None
    name: str | None = None
    namespace: str | None = None
    prefix: str | None = None
    attribute: StrictBool | None = None
    wrapped: StrictBool | None = None


class Discriminator(OpenAPIObject):
    """
    Hint used to select among ``oneOf``/``anyOf`` alternatives.

    ``defaultMapping`` names the schema used when the payload value of
    ``propertyName`` is absent or not listed in ``mapping``.
    """

    property_name: str
    mapping: dict[str, str] | None = None
    default_mapping: str | None = None


class Reference(OpenAPIObject):
    """
    JSON Reference to another component.

    ``summary`` and ``description`` override those of the referenced object.
    """

    kind: ClassVar[SchemaKind] = SchemaKind.REFERENCE

    ref: str = Field(alias="$ref")
    summary: str | None = None
    description: str | None = None


class _SchemaBase(OpenAPIObject):
    title: str | None = None
    description: str | None = None
    comment: str | None = Field(default=None, alias="$comment")
    deprecated: StrictBool | None = None
    read_only: StrictBool | None = None
    write_only: StrictBool | None = None
    xml: XML | None = None
    external_docs: ExternalDocumentation | None = None


class StringSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.STRING

    type: type_keyword("string")
    format: str | None = None
    default: str | None = None
    const: str | None = None
    example: str | None = None
    examples: list[str | None] | None = None
    enum: list[str | None] | None = Field(default=None, min_length=1)
    max_length: StrictInt | None = Field(default=None, ge=0)
    min_length: StrictInt | None = Field(default=None, ge=0)
    pattern: str | None = None
    content_media_type: str | None = None
    content_encoding: str | None = None


class NumberSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.NUMBER

    type: type_keyword("number")
    format: str | None = None
    default: StrictFloat | None = None
    const: StrictFloat | None = None
    example: StrictFloat | None = None
    examples: list[StrictFloat | None] | None = None
    enum: list[StrictFloat | None] | None = Field(default=None, min_length=1)
    multiple_of: StrictFloat | None = Field(default=None, gt=0)
    maximum: StrictFloat | None = None
    exclusive_maximum: StrictFloat | None = None
    minimum: StrictFloat | None = None
    exclusive_minimum: StrictFloat | None = None


class IntegerSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.INTEGER

    type: type_keyword("integer")
    format: str | None = None
    default: StrictInt | None = None
    const: StrictInt | None = None
    example: StrictInt | None = None
    examples: list[StrictInt | None] | None = None
    enum: list[StrictInt | None] | None = Field(default=None, min_length=1)
    multiple_of: StrictFloat | None = Field(default=None, gt=0)
    maximum: StrictFloat | None = None
    exclusive_maximum: StrictFloat | None = None
    minimum: StrictFloat | None = None
    exclusive_minimum: StrictFloat | None = None


class BooleanSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.BOOLEAN

    type: type_keyword("boolean")
    default: StrictBool | None = None
    const: StrictBool | None = None
    example: StrictBool | None = None
    examples: list[StrictBool | None] | None = None
    enum: list[StrictBool | None] | None = Field(default=None, min_length=1)


class NullSchema(_SchemaBase):
    """Schema of the JSON ``null`` value; every payload keyword can only hold null"""

    kind: ClassVar[SchemaKind] = SchemaKind.NULL
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"default", "const", "example"})

    type: type_keyword("null")
    default: Literal[None] = None
    const: Literal[None] = None
    example: Literal[None] = None
    examples: list[Literal[None]] | None = None
    enum: list[Literal[None]] | None = Field(default=None, min_length=1)


class ArraySchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.ARRAY

    type: type_keyword("array")
    default: list[Any] | None = None
    const: list[Any] | None = None
    example: list[Any] | None = None
    examples: list[list[Any] | None] | None = None
    enum: list[list[Any] | None] | None = Field(default=None, min_length=1)
    items: "Schema | None" = None
    prefix_items: list["Schema"] | None = Field(default=None, min_length=1)
    contains: "Schema | None" = None
    min_contains: StrictInt | None = Field(default=None, ge=0)
    max_contains: StrictInt | None = Field(default=None, ge=0)
    max_items: StrictInt | None = Field(default=None, ge=0)
    min_items: StrictInt | None = Field(default=None, ge=0)
    unique_items: StrictBool | None = None


class ObjectSchema(_SchemaBase):
    kind: ClassVar[SchemaKind] = SchemaKind.OBJECT

    type: type_keyword("object")
    default: dict[str, Any] | None = None
    const: dict[str, Any] | None = None
    example: dict[str, Any] | None = None
    examples: list[dict[str, Any] | None] | None = None
    enum: list[dict[str, Any] | None] | None = Field(default=None, min_length=1)
    discriminator: Discriminator | None = None
    properties: dict[str, "Schema"] | None = None
    required: list[str] | None = None
    additional_properties: "Union[StrictBool, Schema, None]" = None
    pattern_properties: dict[str, "Schema"] | None = None
    property_names: "Schema | None" = None
    max_properties: StrictInt | None = Field(default=None, ge=0)
    min_properties: StrictInt | None = Field(default=None, ge=0)
    dependent_required: dict[str, list[str]] | None = None
    dependent_schemas: dict[str, "Schema"] | None = None


class CompositionSchema(_SchemaBase):
    """
    Schema combining other schemas, without a ``type`` of its own.

    Besides ``allOf``/``anyOf``/``oneOf``/``not`` it may apply a conditional
    ``if``/``then``/``else``. With no composition keyword at all it is the
    empty schema, which accepts any value.
    """

    kind: ClassVar[SchemaKind] = SchemaKind.COMPOSITION

    default: Any = None
    const: Any = None
    example: Any = None
    examples: list[Any] | None = None
    enum: list[Any] | None = Field(default=None, min_length=1)
    discriminator: Discriminator | None = None
    all_of: list["Schema"] | None = Field(default=None, min_length=1)
    any_of: list["Schema"] | None = Field(default=None, min_length=1)
    one_of: list["Schema"] | None = Field(default=None, min_length=1)
    not_: "Schema | None" = Field(default=None, alias="not")
    if_: "Schema | None" = Field(default=None, alias="if")
    then: "Schema | None" = None
    else_: "Schema | None" = Field(default=None, alias="else")


def classify_schema(value: Any) -> SchemaKind:
    """Classify a raw OpenAPI 3.2 schema value into its variant"""
    return classify(
        value,
        {"string", "number", "integer", "boolean", "null", "array", "object"},
        allow_type_lists=True,
    )


SCHEMA_VARIANTS: dict[SchemaKind, type[OpenAPIObject]] = {
    SchemaKind.REFERENCE: Reference,
    SchemaKind.STRING: StringSchema,
    SchemaKind.NUMBER: NumberSchema,
    SchemaKind.INTEGER: IntegerSchema,
    SchemaKind.BOOLEAN: BooleanSchema,
    SchemaKind.NULL: NullSchema,
    SchemaKind.ARRAY: ArraySchema,
    SchemaKind.OBJECT: ObjectSchema,
    SchemaKind.COMPOSITION: CompositionSchema,
}

Schema = tagged_union(
    *SCHEMA_VARIANTS.values(),
    discriminator=variant_discriminator(SCHEMA_VARIANTS, classify_schema),
    label="OpenAPI 3.2 schema",
)

for _model in SCHEMA_VARIANTS.values():
    _model.model_rebuild()
