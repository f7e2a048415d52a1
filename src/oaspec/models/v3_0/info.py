"""OpenAPI 3.0 metadata objects: Info, Server and Tag"""

from pydantic import Field

from oaspec.models.base import OpenAPIObject
from oaspec.models.v3_0.schema import ExternalDocumentation


class Contact(OpenAPIObject):
    name: str | None = None
    url: str | None = None
    email: str | None = None


class License(OpenAPIObject):
    name: str
    url: str | None = None


class Info(OpenAPIObject):
    """Metadata about the API"""

    title: str
    description: str | None = None
    terms_of_service: str | None = None
    contact: Contact | None = None
    license: License | None = None
    version: str


class ServerVariable(OpenAPIObject):
    """Variable substituted into a server URL template"""

    enum: list[str] | None = Field(default=None, min_length=1)
    default: str
    description: str | None = None


class Server(OpenAPIObject):
    url: str
    description: str | None = None
    variables: dict[str, ServerVariable] | None = None


class Tag(OpenAPIObject):
    name: str
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
