"""Swagger 2.0 root document"""

from typing import Literal

from pydantic import Field

from oaspec.models.base import OpenAPIObject
from oaspec.models.v2_0.info import Info, Tag
from oaspec.models.v2_0.paths import Parameter, Paths, Response, Scheme
from oaspec.models.v2_0.schema import ExternalDocumentation, Schema
from oaspec.models.v2_0.security import SecurityRequirement, SecurityScheme


class Specification(OpenAPIObject):
    """A complete Swagger 2.0 document"""

    swagger: Literal["2.0"]
    info: Info
    host: str | None = Field(default=None, pattern=r"^[^{}/ :\\]+(?::\d+)?$")
    base_path: str | None = Field(default=None, pattern=r"^/")
    schemes: list[Scheme] | None = None
    consumes: list[str] | None = None
    produces: list[str] | None = None
    paths: Paths
    definitions: dict[str, Schema] | None = None
    parameters: dict[str, Parameter] | None = None
    responses: dict[str, Response] | None = None
    security_definitions: dict[str, SecurityScheme] | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocumentation | None = None
