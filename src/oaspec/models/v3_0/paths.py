"""OpenAPI 3.0 paths, operations and the objects describing their payloads"""

from typing import Any, ClassVar, Literal

from pydantic import Field, StrictBool, model_validator
from pydantic_core import PydanticCustomError

from oaspec.models.base import OpenAPIObject, PatternedObject, reference_or
from oaspec.models.v3_0.info import Server
from oaspec.models.v3_0.schema import ExternalDocumentation, Reference, Schema
from oaspec.models.v3_0.security import SecurityRequirement

ParameterStyle = Literal[
    "matrix", "label", "form", "simple", "spaceDelimited", "pipeDelimited", "deepObject"
]


class Example(OpenAPIObject):
    """An inline ``value`` or an ``externalValue`` URL, never both"""

    exclusive_fields: ClassVar[tuple[tuple[str, ...], ...]] = (("value", "externalValue"),)

    summary: str | None = None
    description: str | None = None
    value: Any = None
    external_value: str | None = None


ExampleOrReference = reference_or(Reference, Example)


class Header(OpenAPIObject):
    """
    A response or encoding header.

    Exactly one of ``schema`` and ``content`` describes the value, and
    ``content`` holds a single media type.
    """

    exclusive_fields: ClassVar[tuple[tuple[str, ...], ...]] = (
        ("schema", "content"),
        ("example", "examples"),
    )
    required_one_of: ClassVar[tuple[tuple[str, ...], ...]] = (("schema", "content"),)

    description: str | None = None
    required: StrictBool | None = None
    deprecated: StrictBool | None = None
    allow_empty_value: StrictBool | None = None
    style: Literal["simple"] | None = None
    explode: StrictBool | None = None
    allow_reserved: StrictBool | None = None
    schema_: Schema | None = Field(default=None, alias="schema")
    content: dict[str, "MediaType"] | None = Field(default=None, min_length=1, max_length=1)
    example: Any = None
    examples: dict[str, ExampleOrReference] | None = None


HeaderOrReference = reference_or(Reference, Header)


class Encoding(OpenAPIObject):
    """Serialization of a single property of a multipart or form body"""

    content_type: str | None = None
    headers: dict[str, HeaderOrReference] | None = None
    style: ParameterStyle | None = None
    explode: StrictBool | None = None
    allow_reserved: StrictBool | None = None


class MediaType(OpenAPIObject):
    exclusive_fields: ClassVar[tuple[tuple[str, ...], ...]] = (("example", "examples"),)

    schema_: Schema | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict[str, ExampleOrReference] | None = None
    encoding: dict[str, Encoding] | None = None


class Parameter(OpenAPIObject):
    """
    A single operation parameter identified by ``name`` and ``in``.

    Path parameters must set ``required: true``. Like headers, a parameter is
    described by exactly one of ``schema`` and ``content``.
    """

    exclusive_fields: ClassVar[tuple[tuple[str, ...], ...]] = (
        ("schema", "content"),
        ("example", "examples"),
    )
    required_one_of: ClassVar[tuple[tuple[str, ...], ...]] = (("schema", "content"),)

    name: str
    in_: Literal["query", "header", "path", "cookie"] = Field(alias="in")
    description: str | None = None
    required: StrictBool | None = None
    deprecated: StrictBool | None = None
    allow_empty_value: StrictBool | None = None
    style: ParameterStyle | None = None
    explode: StrictBool | None = None
    allow_reserved: StrictBool | None = None
    schema_: Schema | None = Field(default=None, alias="schema")
    content: dict[str, MediaType] | None = Field(default=None, min_length=1, max_length=1)
    example: Any = None
    examples: dict[str, ExampleOrReference] | None = None

    @model_validator(mode="after")
    def _path_parameters_are_required(self) -> "Parameter":
        if self.in_ == "path" and self.required is not True:
            raise PydanticCustomError(
                "path_parameter_required",
                "Path parameter '{name}' must set 'required: true'",
                {"name": self.name},
            )
        return self

    @classmethod
    def extend_json_schema(cls, schema: dict[str, Any]) -> None:
        schema["if"] = {"properties": {"in": {"const": "path"}}, "required": ["in"]}
        schema["then"] = {"properties": {"required": {"const": True}}, "required": ["required"]}


ParameterOrReference = reference_or(Reference, Parameter)


class RequestBody(OpenAPIObject):
    description: str | None = None
    content: dict[str, MediaType]
    required: StrictBool | None = None


RequestBodyOrReference = reference_or(Reference, RequestBody)


class Link(OpenAPIObject):
    """
    A design-time link from a response to another operation.

    The target is named by ``operationRef`` or ``operationId``, not both.
    """

    exclusive_fields: ClassVar[tuple[tuple[str, ...], ...]] = (("operationRef", "operationId"),)

    operation_ref: str | None = None
    operation_id: str | None = None
    parameters: dict[str, Any] | None = None
    request_body: Any = None
    description: str | None = None
    server: Server | None = None


LinkOrReference = reference_or(Reference, Link)


class Response(OpenAPIObject):
    description: str
    headers: dict[str, HeaderOrReference] | None = None
    content: dict[str, MediaType] | None = None
    links: dict[str, LinkOrReference] | None = None


ResponseOrReference = reference_or(Reference, Response)


class Responses(PatternedObject):
    """Responses of an operation keyed by status code, status range (``2XX``) or ``default``"""

    key_pattern: ClassVar[str] = r"^([1-5][0-9X]{2}|default)$"
    min_entries: ClassVar[int] = 1

    entries: dict[str, ResponseOrReference] = Field(default_factory=dict)


class Callback(PatternedObject):
    """Out-of-band requests keyed by runtime expression"""

    entries: dict[str, "PathItem"] = Field(default_factory=dict)


CallbackOrReference = reference_or(Reference, Callback)


class Operation(OpenAPIObject):
    tags: list[str] | None = None
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
    operation_id: str | None = None
    parameters: list[ParameterOrReference] | None = None
    request_body: RequestBodyOrReference | None = None
    responses: Responses
    callbacks: dict[str, CallbackOrReference] | None = None
    deprecated: StrictBool | None = None
    security: list[SecurityRequirement] | None = None
    servers: list[Server] | None = None


class PathItem(OpenAPIObject):
    """Operations available on a single path"""

    HTTP_METHODS: ClassVar[tuple[str, ...]] = (
        "get", "put", "post", "delete", "options", "head", "patch", "trace",
    )

    ref: str | None = Field(default=None, alias="$ref")
    summary: str | None = None
    description: str | None = None
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] | None = None
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


for _model in (Header, Encoding, MediaType, Callback, Operation, PathItem):
    _model.model_rebuild()
