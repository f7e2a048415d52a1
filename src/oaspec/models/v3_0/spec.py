"""OpenAPI 3.0 root document"""

from pydantic import Field

from oaspec.models.base import OpenAPIObject
from oaspec.models.v3_0.components import Components
from oaspec.models.v3_0.info import Info, Server, Tag
from oaspec.models.v3_0.paths import Paths
from oaspec.models.v3_0.schema import ExternalDocumentation
from oaspec.models.v3_0.security import SecurityRequirement


class Specification(OpenAPIObject):
    """A complete OpenAPI 3.0.x document"""

    openapi: str = Field(pattern=r"^3\.0\.\d+(-.+)?$")
    info: Info
    servers: list[Server] | None = None
    paths: Paths
    components: Components | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocumentation | None = None
