"""OpenAPI 3.2.x object model"""

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
    MediaTypeOrReference,
    Operation,
    Parameter,
    ParameterOrReference,
    ParameterStyle,
    PathItem,
    PathItemOrReference,
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
    NullSchema,
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
    DeviceAuthorizationOAuthFlow,
    HttpSecurityScheme,
    ImplicitOAuthFlow,
    MutualTlsSecurityScheme,
    OAuth2SecurityScheme,
    OAuthFlows,
    OpenIdConnectSecurityScheme,
    PasswordOAuthFlow,
    SecurityRequirement,
    SecurityScheme,
    SecuritySchemeOrReference,
)
from .spec import Specification, Webhooks

VERSION = "3.2"

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
    "Webhooks",
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
    "NullSchema",
    "ArraySchema",
    "ObjectSchema",
    "CompositionSchema",
    "classify_schema",
    "Paths",
    "PathItem",
    "PathItemOrReference",
    "Operation",
    "Parameter",
    "ParameterOrReference",
    "ParameterStyle",
    "Header",
    "HeaderOrReference",
    "MediaType",
    "MediaTypeOrReference",
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
    "MutualTlsSecurityScheme",
    "OAuthFlows",
    "ImplicitOAuthFlow",
    "PasswordOAuthFlow",
    "ClientCredentialsOAuthFlow",
    "AuthorizationCodeOAuthFlow",
    "DeviceAuthorizationOAuthFlow",
    "SecurityRequirement",
]
