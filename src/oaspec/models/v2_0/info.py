"""Swagger 2.0 metadata objects"""

from oaspec.models.base import OpenAPIObject
from oaspec.models.v2_0.schema import ExternalDocumentation


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


class Tag(OpenAPIObject):
    name: str
    description: str | None = None
    external_docs: ExternalDocumentation | None = None
