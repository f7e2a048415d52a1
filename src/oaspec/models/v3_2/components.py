"""OpenAPI 3.2 reusable components"""

from oaspec.models.base import OpenAPIObject
from oaspec.models.v3_2.paths import (
    CallbackOrReference,
    ExampleOrReference,
    HeaderOrReference,
    LinkOrReference,
    MediaTypeOrReference,
    ParameterOrReference,
    PathItemOrReference,
    RequestBodyOrReference,
    ResponseOrReference,
)
from oaspec.models.v3_2.schema import Schema
from oaspec.models.v3_2.security import SecuritySchemeOrReference


class Components(OpenAPIObject):
    """Named objects referenced from elsewhere in the document"""

    schemas: dict[str, Schema] | None = None
    responses: dict[str, ResponseOrReference] | None = None
    parameters: dict[str, ParameterOrReference] | None = None
    examples: dict[str, ExampleOrReference] | None = None
    request_bodies: dict[str, RequestBodyOrReference] | None = None
    headers: dict[str, HeaderOrReference] | None = None
    security_schemes: dict[str, SecuritySchemeOrReference] | None = None
    links: dict[str, LinkOrReference] | None = None
    callbacks: dict[str, CallbackOrReference] | None = None
    path_items: dict[str, PathItemOrReference] | None = None
    media_types: dict[str, MediaTypeOrReference] | None = None
