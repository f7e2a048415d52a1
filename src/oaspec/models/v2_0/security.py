"""Swagger 2.0 security definitions"""

from typing import Any, Literal

from pydantic import Field

from oaspec.models.base import OpenAPIObject, tagged_union

Scopes = dict[str, str]
SecurityRequirement = dict[str, list[str]]


class BasicSecurityScheme(OpenAPIObject):
    type: Literal["basic"]
    description: str | None = None


class ApiKeySecurityScheme(OpenAPIObject):
    type: Literal["apiKey"]
    description: str | None = None
    name: str
    in_: Literal["query", "header"] = Field(alias="in")


class _OAuth2Base(OpenAPIObject):
    type: Literal["oauth2"]
    description: str | None = None
    scopes: Scopes


class ImplicitOAuth2SecurityScheme(_OAuth2Base):
    flow: Literal["implicit"]
    authorization_url: str


class PasswordOAuth2SecurityScheme(_OAuth2Base):
    flow: Literal["password"]
    token_url: str


class ApplicationOAuth2SecurityScheme(_OAuth2Base):
    flow: Literal["application"]
    token_url: str


class AccessCodeOAuth2SecurityScheme(_OAuth2Base):
    flow: Literal["accessCode"]
    authorization_url: str
    token_url: str


_OAUTH2_FLOWS: dict[str, type[OpenAPIObject]] = {
    "implicit": ImplicitOAuth2SecurityScheme,
    "password": PasswordOAuth2SecurityScheme,
    "application": ApplicationOAuth2SecurityScheme,
    "accessCode": AccessCodeOAuth2SecurityScheme,
}

_SCHEMES: dict[str, type[OpenAPIObject]] = {
    "basic": BasicSecurityScheme,
    "apiKey": ApiKeySecurityScheme,
}


def _security_scheme_tag(value: Any) -> str | None:
    """Pick the scheme variant from ``type`` and, for OAuth2, ``flow``"""
    if isinstance(value, dict):
        scheme_type, flow = value.get("type"), value.get("flow")
        if scheme_type == "oauth2":
            variant = _OAUTH2_FLOWS.get(flow) if isinstance(flow, str) else None
        else:
            variant = _SCHEMES.get(scheme_type) if isinstance(scheme_type, str) else None
        return variant.__name__ if variant is not None else None
    if isinstance(value, OpenAPIObject):
        return type(value).__name__
    return None


SecurityScheme = tagged_union(
    BasicSecurityScheme,
    ApiKeySecurityScheme,
    *_OAUTH2_FLOWS.values(),
    discriminator=_security_scheme_tag,
    label="Swagger 2.0 security scheme",
)
