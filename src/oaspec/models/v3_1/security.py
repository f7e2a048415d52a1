"""OpenAPI 3.1 security schemes and OAuth flows

``type`` selects one of five closed scheme variants. Each OAuth flow is its own
record so that the URLs a flow needs are required fields of that flow.
"""

from typing import Any, Literal

from pydantic import Field

from oaspec.models.base import OpenAPIObject, tagged_union
from oaspec.models.v3_1.schema import Reference

SecurityRequirement = dict[str, list[str]]


class _OAuthFlow(OpenAPIObject):
    refresh_url: str | None = None
    scopes: dict[str, str]


class ImplicitOAuthFlow(_OAuthFlow):
    authorization_url: str


class PasswordOAuthFlow(_OAuthFlow):
    token_url: str


class ClientCredentialsOAuthFlow(_OAuthFlow):
    token_url: str


class AuthorizationCodeOAuthFlow(_OAuthFlow):
    authorization_url: str
    token_url: str


class OAuthFlows(OpenAPIObject):
    implicit: ImplicitOAuthFlow | None = None
    password: PasswordOAuthFlow | None = None
    client_credentials: ClientCredentialsOAuthFlow | None = None
    authorization_code: AuthorizationCodeOAuthFlow | None = None


class ApiKeySecurityScheme(OpenAPIObject):
    type: Literal["apiKey"]
    description: str | None = None
    name: str
    in_: Literal["query", "header", "cookie"] = Field(alias="in")


class HttpSecurityScheme(OpenAPIObject):
    """HTTP authentication, e.g. ``scheme: bearer`` with a ``bearerFormat`` hint"""

    type: Literal["http"]
    description: str | None = None
    scheme: str
    bearer_format: str | None = None


class OAuth2SecurityScheme(OpenAPIObject):
    type: Literal["oauth2"]
    description: str | None = None
    flows: OAuthFlows


class OpenIdConnectSecurityScheme(OpenAPIObject):
    type: Literal["openIdConnect"]
    description: str | None = None
    open_id_connect_url: str


class MutualTlsSecurityScheme(OpenAPIObject):
    """Client authentication by TLS certificate"""

    type: Literal["mutualTLS"]
    description: str | None = None


_SCHEMES: dict[str, type[OpenAPIObject]] = {
    "apiKey": ApiKeySecurityScheme,
    "http": HttpSecurityScheme,
    "oauth2": OAuth2SecurityScheme,
    "openIdConnect": OpenIdConnectSecurityScheme,
    "mutualTLS": MutualTlsSecurityScheme,
}


def _security_scheme_tag(value: Any) -> str | None:
    if isinstance(value, dict):
        if "$ref" in value:
            return Reference.__name__
        scheme_type = value.get("type")
        variant = _SCHEMES.get(scheme_type) if isinstance(scheme_type, str) else None
        return variant.__name__ if variant is not None else None
    if isinstance(value, OpenAPIObject):
        return type(value).__name__
    return None


SecurityScheme = tagged_union(
    *_SCHEMES.values(),
    discriminator=_security_scheme_tag,
    label="OpenAPI 3.1 security scheme",
)
SecuritySchemeOrReference = tagged_union(
    Reference,
    *_SCHEMES.values(),
    discriminator=_security_scheme_tag,
    label="OpenAPI 3.1 security scheme or Reference",
)
