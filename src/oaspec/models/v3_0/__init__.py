"""OpenAPI 3.0.x object model"""

from .components import Components
from .info import Contact, Info, License, Server, ServerVariable, Tag
from .paths import (
    Callback,
    CallbackOrReference,
    Encoding,
    Example,
    ExampleOrReference,
    Header,
    HeaderOrReference,
    Link,
    LinkOrReference,
    MediaType,
    Operation,
    Parameter,
    ParameterOrReference,
    ParameterStyle,
    PathItem,
    Paths,
    RequestBody,
    RequestBodyOrReference,
    Response,
    ResponseOrReference,
    Responses,
)
from .schema import (
    SCHEMA_VARIANTS,
    XML,
    ArraySchema,
    BooleanSchema,
    CompositionSchema,
    Discriminator,
    ExternalDocumentation,
    IntegerSchema,
    NumberSchema,
    ObjectSchema,
    Reference,
    Schema,
    StringSchema,
    classify_schema,
)
from .security import (
    ApiKeySecurityScheme,
    AuthorizationCodeOAuthFlow,
    ClientCredentialsOAuthFlow,
    HttpSecurityScheme,
    ImplicitOAuthFlow,
    OAuth2SecurityScheme,
    OAuthFlows,
    OpenIdConnectSecurityScheme,
    PasswordOAuthFlow,
    SecurityRequirement,
    SecurityScheme,
    SecuritySchemeOrReference,
)
from .spec import Specification

VERSION = "3.0"

# Objects published as standalone validation documents
COMPONENTS = {
    "schema": Schema,
    "response": Response,
    "parameter": Parameter,
    "example": Example,
    "requestbody": RequestBody,
    "header": Header,
    "securityscheme": SecurityScheme,
    "link": Link,
    "callback": Callback,
    "pathitem": PathItem,
    "mediatype": MediaType,
}

__all__ = [
    "VERSION",
    "COMPONENTS",
    "Specification",
    "Info",
    "Contact",
    "License",
    "Server",
    "ServerVariable",
    "Tag",
    "Components",
    "ExternalDocumentation",
    "XML",
    "Discriminator",
    "Reference",
    "Schema",
    "SCHEMA_VARIANTS",
    "StringSchema",
    "NumberSchema",
    "IntegerSchema",
    "BooleanSchema",
    "ArraySchema",
    "ObjectSchema",
    "CompositionSchema",
    "classify_schema",
    "Paths",
    "PathItem",
    "Operation",
    "Parameter",
    "ParameterOrReference",
    "ParameterStyle",
    "Header",
    "HeaderOrReference",
    "MediaType",
    "Encoding",
    "Example",
    "ExampleOrReference",
    "RequestBody",
    "RequestBodyOrReference",
    "Response",
    "ResponseOrReference",
    "Responses",
    "Link",
    "LinkOrReference",
    "Callback",
    "CallbackOrReference",
    "SecurityScheme",
    "SecuritySchemeOrReference",
    "ApiKeySecurityScheme",
    "HttpSecurityScheme",
    "OAuth2SecurityScheme",
    "OpenIdConnectSecurityScheme",
    "OAuthFlows",
    "ImplicitOAuthFlow",
    "PasswordOAuthFlow",
    "ClientCredentialsOAuthFlow",
    "AuthorizationCodeOAuthFlow",
    "SecurityRequirement",
]
