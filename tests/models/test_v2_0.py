"""Tests for the Swagger 2.0 object model"""

import pytest
from pydantic import TypeAdapter, ValidationError

from oaspec.models import v2_0


def test_parse_petstore(load_fixture) -> None:
    """Test parsing the petstore fixture"""
    spec = v2_0.Specification.model_validate(load_fixture("2.0", "petstore.yaml"))

    assert spec.swagger == "2.0"
    assert spec.host == "petstore.swagger.io"
    assert spec.base_path == "/v1"
    assert set(spec.paths["/pets"].operations()) == {"get", "post"}
    assert isinstance(spec.definitions["Pets"], v2_0.ArraySchema)


def test_parse_security_definitions(load_fixture) -> None:
    """Test that security schemes are discriminated by type and flow"""
    spec = v2_0.Specification.model_validate(load_fixture("2.0", "uploads.yaml"))

    schemes = spec.security_definitions
    assert isinstance(schemes["basicAuth"], v2_0.BasicSecurityScheme)
    assert isinstance(schemes["apiKey"], v2_0.ApiKeySecurityScheme)
    assert isinstance(schemes["oauth"], v2_0.AccessCodeOAuth2SecurityScheme)
    assert schemes["oauth"].token_url == "https://auth.example.com/token"


def test_parse_parameters(load_fixture) -> None:
    """Test body, form data and referenced parameters"""
    spec = v2_0.Specification.model_validate(load_fixture("2.0", "uploads.yaml"))

    upload = spec.paths["/documents"].post
    assert [type(parameter) for parameter in upload.parameters] == [
        v2_0.NonBodyParameter,
        v2_0.NonBodyParameter,
    ]
    assert upload.parameters[0].type == "file"
    assert isinstance(spec.paths["/documents/{documentId}"].parameters[0], v2_0.Reference)


def test_body_parameter_requires_schema() -> None:
    """Test that body parameters carry a schema"""
    with pytest.raises(ValidationError):
        TypeAdapter(v2_0.Parameter).validate_python({"name": "pet", "in": "body"})


def test_body_parameter_rejects_simple_type_keywords() -> None:
    """Test that body parameters cannot use non-body keywords"""
    with pytest.raises(ValidationError):
        TypeAdapter(v2_0.Parameter).validate_python(
            {"name": "pet", "in": "body", "schema": {"type": "string"}, "type": "string"}
        )


def test_path_parameter_must_be_required() -> None:
    """Test that path parameters set required: true"""
    with pytest.raises(ValidationError) as exc_info:
        TypeAdapter(v2_0.Parameter).validate_python({"name": "id", "in": "path", "type": "string"})

    assert exc_info.value.errors()[0]["type"] == "path_parameter_required"


@pytest.mark.parametrize("location", ["query", "header", "path"])
def test_file_parameter_must_be_form_data(location) -> None:
    """Test that only formData parameters can have type file"""
    parameter = {"name": "upload", "in": location, "type": "file", "required": True}
    with pytest.raises(ValidationError) as exc_info:
        TypeAdapter(v2_0.Parameter).validate_python(parameter)

    assert exc_info.value.errors()[0]["type"] == "file_parameter_location"


def test_file_parameter_in_form_data() -> None:
    """Test that formData parameters accept type file"""
    parameter = TypeAdapter(v2_0.Parameter).validate_python({"name": "upload", "in": "formData", "type": "file"})
    assert parameter.type == "file"


@pytest.mark.parametrize(
    ("scheme", "expected"),
    [
        ({"type": "oauth2", "flow": "implicit", "authorizationUrl": "https://a", "scopes": {}},
         v2_0.ImplicitOAuth2SecurityScheme),
        ({"type": "oauth2", "flow": "password", "tokenUrl": "https://t", "scopes": {}},
         v2_0.PasswordOAuth2SecurityScheme),
        ({"type": "oauth2", "flow": "application", "tokenUrl": "https://t", "scopes": {}},
         v2_0.ApplicationOAuth2SecurityScheme),
    ],
)
def test_oauth2_flows(scheme, expected) -> None:
    """Test that the OAuth2 flow selects the variant"""
    assert isinstance(TypeAdapter(v2_0.SecurityScheme).validate_python(scheme), expected)


def test_oauth2_flow_requires_its_urls() -> None:
    """Test that the access code flow needs both URLs"""
    with pytest.raises(ValidationError) as exc_info:
        TypeAdapter(v2_0.SecurityScheme).validate_python(
            {"type": "oauth2", "flow": "accessCode", "authorizationUrl": "https://a", "scopes": {}}
        )

    assert exc_info.value.errors()[0]["type"] == "missing"


def test_implicit_object_schema() -> None:
    """Test that object keywords imply an object schema"""
    schema = TypeAdapter(v2_0.Schema).validate_python({"properties": {"id": {"type": "integer"}}})

    assert isinstance(schema, v2_0.ObjectSchema)
    assert schema.type is None
    assert isinstance(schema.properties["id"], v2_0.IntegerSchema)


def test_object_schema_needs_type_or_object_keyword() -> None:
    """Test that an ObjectSchema without type carries an object keyword"""
    with pytest.raises(ValidationError) as exc_info:
        v2_0.ObjectSchema.model_validate({"description": "empty"})

    assert exc_info.value.errors()[0]["type"] == "missing_one_of"


def test_array_schema_requires_items() -> None:
    """Test that Swagger 2.0 arrays declare their items"""
    with pytest.raises(ValidationError):
        TypeAdapter(v2_0.Schema).validate_python({"type": "array"})


def test_no_any_of_in_swagger() -> None:
    """Test that anyOf does not exist in Swagger 2.0"""
    with pytest.raises(ValidationError):
        TypeAdapter(v2_0.Schema).validate_python({"anyOf": [{"type": "string"}]})


def test_responses_keys() -> None:
    """Test that Swagger 2.0 status codes have no wildcards"""
    assert "404" in v2_0.Responses.model_validate({"404": {"description": "Not found"}})

    with pytest.raises(ValidationError):
        v2_0.Responses.model_validate({"4XX": {"description": "Client error"}})


def test_host_pattern() -> None:
    """Test that host excludes scheme and path"""
    document = {"swagger": "2.0", "info": {"title": "T", "version": "1"}, "paths": {}}

    assert v2_0.Specification.model_validate({**document, "host": "localhost:8080"}).host == "localhost:8080"
    with pytest.raises(ValidationError):
        v2_0.Specification.model_validate({**document, "host": "https://example.com"})


def test_swagger_version_is_exact() -> None:
    """Test that only "2.0" is a Swagger 2.0 version"""
    with pytest.raises(ValidationError):
        v2_0.Specification.model_validate(
            {"swagger": "2.0.0", "info": {"title": "T", "version": "1"}, "paths": {}}
        )
