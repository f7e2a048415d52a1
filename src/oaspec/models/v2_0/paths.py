"""Swagger 2.0 paths, operations, parameters and responses"""

from typing import Any, ClassVar, Literal

from pydantic import Field, StrictBool, StrictFloat, StrictInt, model_validator
from pydantic_core import PydanticCustomError

from oaspec.models.base import OpenAPIObject, PatternedObject, reference_or, tagged_union
from oaspec.models.v2_0.schema import ExternalDocumentation, Reference, Schema
from oaspec.models.v2_0.security import SecurityRequirement

Scheme = Literal["http", "https", "ws", "wss"]
SimpleType = Literal["string", "number", "integer", "boolean", "array"]
CollectionFormat = Literal["csv", "ssv", "tsv", "pipes"]


class _SimpleTypeFields(OpenAPIObject):
    """Validation keywords shared by Items, Header and non-body parameters"""

    format: str | None = None
    collection_format: CollectionFormat | None = None
    default: Any = None
    maximum: StrictFloat | None = None
    exclusive_maximum: StrictBool | None = None
    minimum: StrictFloat | None = None
    exclusive_minimum: StrictBool | None = None
    max_length: StrictInt | None = Field(default=None, ge=0)
    min_length: StrictInt | None = Field(default=None, ge=0)
    pattern: str | None = None
    max_items: StrictInt | None = Field(default=None, ge=0)
    min_items: StrictInt | None = Field(default=None, ge=0)
    unique_items: StrictBool | None = None
    enum: list[Any] | None = Field(default=None, min_length=1)
    multiple_of: StrictFloat | None = Field(default=None, gt=0)


class Items(_SimpleTypeFields):
    """Type of the items of an array parameter or header"""

    type: SimpleType
    items: "Items | None" = None


class Header(_SimpleTypeFields):
    description: str | None = None
    type: SimpleType
    items: Items | None = None


class BodyParameter(OpenAPIObject):
    """Parameter carried in the request payload"""

    name: str
    in_: Literal["body"] = Field(alias="in")
    description: str | None = None
    required: StrictBool | None = None
    schema_: Schema = Field(alias="schema")


class NonBodyParameter(_SimpleTypeFields):
    """
    Parameter carried in the query, a header, the path or form data.

    Path parameters must be marked ``required: true``, and only form data
    parameters can have type ``file``.
    """

    name: str
    in_: Literal["query", "header", "path", "formData"] = Field(alias="in")
    description: str | None = None
    required: StrictBool | None = None
    type: Literal["string", "number", "integer", "boolean", "array", "file"]
    allow_empty_value: StrictBool | None = None
    items: Items | None = None
    collection_format: Literal["csv", "ssv", "tsv", "pipes", "multi"] | None = None

    @model_validator(mode="after")
    def _path_parameters_are_required(self) -> "NonBodyParameter":
        if self.in_ == "path" and self.required is not True:
            raise PydanticCustomError(
                "path_parameter_required",
                "Path parameter '{name}' must set 'required: true'",
                {"name": self.name},
            )
        return self

    @model_validator(mode="after")
    def _file_parameters_are_form_data(self) -> "NonBodyParameter":
        if self.type == "file" and self.in_ != "formData":
            raise PydanticCustomError(
                "file_parameter_location",
                "Parameter '{name}' of type 'file' must be in 'formData'",
                {"name": self.name},
            )
        return self

    @classmethod
    def extend_json_schema(cls, schema: dict[str, Any]) -> None:
        schema.setdefault("allOf", []).extend(
            [
                {
                    "if": {"properties": {"in": {"const": "path"}}, "required": ["in"]},
                    "then": {"properties": {"required": {"const": True}}, "required": ["required"]},
                },
                {
                    "if": {"properties": {"type": {"const": "file"}}, "required": ["type"]},
                    "then": {"properties": {"in": {"const": "formData"}}},
                },
            ]
        )


def _parameter_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        if "$ref" in value:
            return Reference.__name__
        if value.get("in") == "body":
            return BodyParameter.__name__
        return NonBodyParameter.__name__
    if isinstance(value, (Reference, BodyParameter, NonBodyParameter)):
        return type(value).__name__
    return None


Parameter = tagged_union(
    BodyParameter,
    NonBodyParameter,
    discriminator=_parameter_tag,
    label="Swagger 2.0 parameter",
)
ParameterOrReference = tagged_union(
    Reference,
    BodyParameter,
    NonBodyParameter,
    discriminator=_parameter_tag,
    label="Swagger 2.0 parameter or Reference",
)


class Response(OpenAPIObject):
    description: str
    schema_: Schema | None = Field(default=None, alias="schema")
    headers: dict[str, Header] | None = None
    examples: dict[str, Any] | None = None


ResponseOrReference = reference_or(Reference, Response)


class Responses(PatternedObject):
    """Responses of an operation keyed by HTTP status code or ``default``"""

    key_pattern: ClassVar[str] = r"^([0-9]{3}|default)$"
    min_entries: ClassVar[int] = 1

    entries: dict[str, ResponseOrReference] = Field(default_factory=dict)


class Operation(OpenAPIObject):
    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
    operation_id: str | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    parameters: list[ParameterOrReference] | None = None
    responses: Responses
    schemes: list[Scheme] | None = None
    deprecated: StrictBool | None = None
    security: list[SecurityRequirement] | None = None


class PathItem(OpenAPIObject):
    """Operations available on a single path"""

    HTTP_METHODS: ClassVar[tuple[str, ...]] = ("get", "put", "post", "delete", "options", "head", "patch")

    ref: str | None = Field(default=None, alias="$ref")
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    parameters: list[ParameterOrReference] | None = None

    def operations(self) -> dict[str, Operation]:
        """Operations defined on this path keyed by lowercase HTTP method"""
        return {
            method: getattr(self, method)
            for method in self.HTTP_METHODS
            if getattr(self, method) is not None
        }


class Paths(PatternedObject):
    """Relative paths to the individual endpoints"""

    key_pattern: ClassVar[str] = r"^/"

    entries: dict[str, PathItem] = Field(default_factory=dict)


Items.model_rebuild()
