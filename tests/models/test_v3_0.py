"""Tests for the OpenAPI 3.0 object model"""

import pytest
from pydantic import TypeAdapter, ValidationError

from oaspec.models import v3_0


def _error_types(exc_info: pytest.ExceptionInfo[ValidationError]) -> list[str]:
    return [error["type"] for error in exc_info.value.errors()]


def test_parse_petstore(load_fixture) -> None:
    """Test parsing the petstore fixture"""
    spec = v3_0.Specification.model_validate(load_fixture("3.0", "petstore.yaml"))

    operation = spec.paths["/pets"].get
    assert operation.operation_id == "listPets"
    assert isinstance(operation.parameters[0].schema_, v3_0.IntegerSchema)
    assert operation.parameters[0].schema_.maximum == 100

    media = operation.responses["200"].content["application/json"]
    assert media.schema_.ref == "#/components/schemas/Pets"


def test_parse_links(load_fixture) -> None:
    """Test links and their references"""
    spec = v3_0.Specification.model_validate(load_fixture("3.0", "link-example.yaml"))

    link = spec.components.links["UserRepository"]
    assert link.operation_id == "getPullRequestsByRepository"
    assert link.parameters == {"username": "$response.body#/owner/username", "slug": "$response.body#/slug"}

    response = spec.paths["/2.0/users/{username}"].get.responses["200"]
    assert isinstance(response.links["userRepositories"], v3_0.Reference)


def test_parse_callbacks(load_fixture) -> None:
    """Test callbacks keyed by runtime expression"""
    spec = v3_0.Specification.model_validate(load_fixture("3.0", "callback-example.yaml"))

    callback = spec.paths["/streams"].post.callbacks["onData"]
    assert isinstance(callback, v3_0.Callback)
    assert "{$request.query.callbackUrl}/data" in callback
    assert spec.servers[0].variables["region"].enum == ["eu", "us"]
    assert isinstance(spec.components.security_schemes["oauth"], v3_0.OAuth2SecurityScheme)


def test_openapi_version_pattern() -> None:
    """Test that only 3.0.x versions are accepted"""
    document = {"info": {"title": "T", "version": "1"}, "paths": {}}

    assert v3_0.Specification.model_validate({**document, "openapi": "3.0.3"})
    for version in ("3.0", "3.1.0", "2.0"):
        with pytest.raises(ValidationError):
            v3_0.Specification.model_validate({**document, "openapi": version})


def test_paths_are_required() -> None:
    """Test that 3.0 documents require paths"""
    with pytest.raises(ValidationError) as exc_info:
        v3_0.Specification.model_validate({"openapi": "3.0.0", "info": {"title": "T", "version": "1"}})

    assert _error_types(exc_info) == ["missing"]


def test_parameter_schema_or_content() -> None:
    """Test that a parameter has exactly one of schema and content"""
    parameter = {"name": "q", "in": "query"}

    with pytest.raises(ValidationError) as exc_info:
        v3_0.Parameter.model_validate(parameter)
    assert _error_types(exc_info) == ["missing_one_of"]

    with pytest.raises(ValidationError) as exc_info:
        v3_0.Parameter.model_validate(
            {**parameter, "schema": {"type": "string"}, "content": {"text/plain": {}}}
        )
    assert _error_types(exc_info) == ["mutually_exclusive"]


def test_parameter_content_holds_one_media_type() -> None:
    """Test that parameter content maps have a single entry"""
    with pytest.raises(ValidationError) as exc_info:
        v3_0.Parameter.model_validate(
            {"name": "q", "in": "query", "content": {"text/plain": {}, "application/json": {}}}
        )

    assert _error_types(exc_info) == ["too_long"]


def test_parameter_location() -> None:
    """Test that querystring parameters do not exist before 3.2"""
    with pytest.raises(ValidationError):
        v3_0.Parameter.model_validate({"name": "q", "in": "querystring", "schema": {"type": "string"}})


def test_media_type_example_or_examples() -> None:
    """Test that example and examples are mutually exclusive"""
    with pytest.raises(ValidationError):
        v3_0.MediaType.model_validate({"example": 1, "examples": {"one": {"value": 1}}})


def test_link_target() -> None:
    """Test that a link names its target once"""
    with pytest.raises(ValidationError) as exc_info:
        v3_0.Link.model_validate({"operationId": "getPet", "operationRef": "#/paths/~1pets/get"})

    assert _error_types(exc_info) == ["mutually_exclusive"]


def test_responses_allow_ranges() -> None:
    """Test status code ranges and extensions in Responses"""
    responses = v3_0.Responses.model_validate(
        {"2XX": {"description": "Success"}, "x-generated": True}
    )
    assert "2XX" in responses

    with pytest.raises(ValidationError):
        v3_0.Responses.model_validate({"600": {"description": "Out of range"}})


def test_path_item_operations() -> None:
    """Test that operations() lists the methods present"""
    response = {"responses": {"200": {"description": "ok"}}}
    item = v3_0.PathItem.model_validate({"get": response, "trace": response, "summary": "Pets"})

    assert list(item.operations()) == ["get", "trace"]


def test_server_variable_requires_default() -> None:
    """Test that server variables have a default"""
    with pytest.raises(ValidationError):
        v3_0.ServerVariable.model_validate({"enum": ["a", "b"]})


def test_nullable_keyword() -> None:
    """Test that 3.0 uses nullable instead of type lists"""
    adapter = TypeAdapter(v3_0.Schema)

    assert adapter.validate_python({"type": "string", "nullable": True}).nullable is True
    with pytest.raises(ValidationError):
        adapter.validate_python({"type": ["string", "null"]})


def test_typed_payloads() -> None:
    """Test that default and enum follow the schema type"""
    adapter = TypeAdapter(v3_0.Schema)

    assert adapter.validate_python({"type": "integer", "enum": [1, 2]}).enum == [1, 2]
    with pytest.raises(ValidationError):
        adapter.validate_python({"type": "integer", "default": "one"})


def test_reference_allows_description() -> None:
    """Test that references carry only description besides $ref"""
    adapter = TypeAdapter(v3_0.Schema)

    assert adapter.validate_python({"$ref": "#/components/schemas/Pet", "description": "A pet"})
    with pytest.raises(ValidationError):
        adapter.validate_python({"$ref": "#/components/schemas/Pet", "nullable": True})


@pytest.mark.parametrize(
    ("scheme", "expected"),
    [
        ({"type": "apiKey", "name": "key", "in": "cookie"}, v3_0.ApiKeySecurityScheme),
        ({"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}, v3_0.HttpSecurityScheme),
        ({"type": "openIdConnect", "openIdConnectUrl": "https://id"}, v3_0.OpenIdConnectSecurityScheme),
        ({"$ref": "#/components/securitySchemes/other"}, v3_0.Reference),
    ],
)
def test_security_schemes(scheme, expected) -> None:
    """Test that type selects the security scheme variant"""
    assert isinstance(TypeAdapter(v3_0.SecuritySchemeOrReference).validate_python(scheme), expected)


def test_mutual_tls_is_not_in_3_0() -> None:
    """Test that mutualTLS arrived with 3.1"""
    with pytest.raises(ValidationError):
        TypeAdapter(v3_0.SecurityScheme).validate_python({"type": "mutualTLS"})


def test_oauth_flows() -> None:
    """Test that each flow requires its URLs"""
    flows = v3_0.OAuthFlows.model_validate(
        {
            "implicit": {"authorizationUrl": "https://a", "scopes": {"read": "Read"}},
            "password": {"tokenUrl": "https://t", "scopes": {}},
        }
    )
    assert flows.implicit.scopes == {"read": "Read"}

    with pytest.raises(ValidationError):
        v3_0.OAuthFlows.model_validate({"authorizationCode": {"tokenUrl": "https://t", "scopes": {}}})
