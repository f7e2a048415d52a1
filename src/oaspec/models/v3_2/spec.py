"""OpenAPI 3.2 root document and webhooks"""

from typing import ClassVar

from pydantic import Field

from oaspec.models.base import OpenAPIObject, PatternedObject
from oaspec.models.v3_2.components import Components
from oaspec.models.v3_2.info import Info, Server, Tag
from oaspec.models.v3_2.paths import PathItemOrReference, Paths
from oaspec.models.v3_2.schema import ExternalDocumentation
from oaspec.models.v3_2.security import SecurityRequirement


class Webhooks(PatternedObject):
    """Incoming requests the API may send, keyed by webhook name"""

    entries: dict[str, PathItemOrReference] = Field(default_factory=dict)


class Specification(OpenAPIObject):
    """
    A complete OpenAPI 3.2.x document.

    ``$self`` is the URI of the document itself and the base URI for
    resolving relative references within it. ``paths`` is optional, but a
    document must describe at least one of ``paths``, ``components`` or
    ``webhooks``.
    """

    required_one_of: ClassVar[tuple[tuple[str, ...], ...]] = (("paths", "components", "webhooks"),)

    openapi: str = Field(pattern=r"^3\.2\.\d+(-.+)?$")
    self_: str | None = Field(default=None, alias="$self")
    info: Info
    json_schema_dialect: str | None = None
    servers: list[Server] | None = None
    paths: Paths | None = None
    webhooks: Webhooks | None = None
    components: Components | None = None
    security: list[SecurityRequirement] | None = None
    tags: list[Tag] | None = None
    external_docs: ExternalDocumentation | None = None
