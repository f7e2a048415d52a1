"""Swagger 2.0 object model"""

from .info import Contact, Info, License, Tag
from .paths import (
    BodyParameter,
    Header,
    Items,
    NonBodyParameter,
    Operation,
    Parameter,
    ParameterOrReference,
    PathItem,
    Paths,
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
    ExternalDocumentation,
    FileSchema,
    IntegerSchema,
    NumberSchema,
    ObjectSchema,
    Reference,
    Schema,
    StringSchema,
    classify_schema,
)
from .security import (
    AccessCodeOAuth2SecurityScheme,
    ApiKeySecurityScheme,
    ApplicationOAuth2SecurityScheme,
    BasicSecurityScheme,
    ImplicitOAuth2SecurityScheme,
    PasswordOAuth2SecurityScheme,
    Scopes,
    SecurityRequirement,
    SecurityScheme,
)
from .spec import Specification

VERSION = "2.0"

# Objects published as standalone validation documents
COMPONENTS = {
    "schema": Schema,
    "parameter": Parameter,
    "response": Response,
    "pathitem": PathItem,
    "securityscheme": SecurityScheme,
}

ReferenceSchema = Reference

__all__ = [
    "VERSION",
    "COMPONENTS",
    "Specification",
    "Info",
    "Contact",
    "License",
    "Tag",
    "ExternalDocumentation",
    "XML",
    "Reference",
    "ReferenceSchema",
    "Schema",
    "SCHEMA_VARIANTS",
    "StringSchema",
    "NumberSchema",
    "IntegerSchema",
    "BooleanSchema",
    "FileSchema",
    "ArraySchema",
    "ObjectSchema",
    "CompositionSchema",
    "classify_schema",
    "Paths",
    "PathItem",
    "Operation",
    "Parameter",
    "ParameterOrReference",
    "BodyParameter",
    "NonBodyParameter",
    "Items",
    "Header",
    "Response",
    "ResponseOrReference",
    "Responses",
    "SecurityScheme",
    "BasicSecurityScheme",
    "ApiKeySecurityScheme",
    "ImplicitOAuth2SecurityScheme",
    "PasswordOAuth2SecurityScheme",
    "ApplicationOAuth2SecurityScheme",
    "AccessCodeOAuth2SecurityScheme",
    "Scopes",
    "SecurityRequirement",
]
