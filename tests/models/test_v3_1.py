"""Tests for the OpenAPI 3.1 object model"""

import pytest
from pydantic import TypeAdapter, ValidationError

from oaspec.models import v3_1

schema_adapter = TypeAdapter(v3_1.Schema)


def _error_types(exc_info: pytest.ExceptionInfo[ValidationError]) -> list[str]:
    return [error["type"] for error in exc_info.value.errors()]


def test_parse_webhooks(load_fixture) -> None:
    """Test a document describing only webhooks"""
    spec = v3_1.Specification.model_validate(load_fixture("3.1", "webhook-example.yaml"))

    assert spec.paths is None
    assert isinstance(spec.webhooks["newPet"], v3_1.PathItem)
    assert spec.info.license.identifier == "Apache-2.0"

    tag = spec.components.schemas["Pet"].properties["tag"]
    assert isinstance(tag, v3_1.StringSchema)
    assert tag.type == ["string", "null"]
    assert tag.examples == ["friendly", None]


def test_parse_tictactoe(load_fixture) -> None:
    """Test parsing the tic tac toe fixture"""
    spec = v3_1.Specification.model_validate(load_fixture("3.1", "tictactoe.yaml"))

    assert spec.json_schema_dialect == "https://spec.openapis.org/oas/3.1/dialect/base"
    schemes = spec.components.security_schemes
    assert isinstance(schemes["clientCertificate"], v3_1.MutualTlsSecurityScheme)
    assert isinstance(schemes["user2AppOauth"].flows.authorization_code, v3_1.AuthorizationCodeOAuthFlow)

    square = spec.paths["/board/{row}/{column}"]
    assert set(square.operations()) == {"get", "put"}
    assert all(isinstance(parameter, v3_1.Reference) for parameter in square.parameters)


def test_requires_paths_components_or_webhooks() -> None:
    """Test that a document must describe something"""
    with pytest.raises(ValidationError) as exc_info:
        v3_1.Specification.model_validate({"openapi": "3.1.0", "info": {"title": "T", "version": "1"}})

    assert _error_types(exc_info) == ["missing_one_of"]


def test_openapi_version_pattern() -> None:
    """Test that only 3.1.x versions are accepted"""
    document = {"info": {"title": "T", "version": "1"}, "paths": {}}

    assert v3_1.Specification.model_validate({**document, "openapi": "3.1.1"})
    for version in ("3.1", "3.0.3", "2.0.0"):
        with pytest.raises(ValidationError):
            v3_1.Specification.model_validate({**document, "openapi": version})


def test_operation_responses_are_optional() -> None:
    """Test that 3.1 operations may omit responses"""
    assert v3_1.Operation.model_validate({"operationId": "ping"}).responses is None


def test_license_identifier_or_url() -> None:
    """Test that a license has an SPDX identifier or a URL, not both"""
    assert v3_1.License.model_validate({"name": "MIT", "identifier": "MIT"})

    with pytest.raises(ValidationError) as exc_info:
        v3_1.License.model_validate(
            {"name": "MIT", "identifier": "MIT", "url": "https://opensource.org/license/mit"}
        )
    assert _error_types(exc_info) == ["mutually_exclusive"]


def test_type_lists() -> None:
    """Test that nullable values list null next to their type"""
    assert isinstance(schema_adapter.validate_python({"type": ["integer", "null"]}), v3_1.IntegerSchema)
    assert isinstance(schema_adapter.validate_python({"type": "null"}), v3_1.NullSchema)
    assert isinstance(schema_adapter.validate_python({"type": ["null"]}), v3_1.NullSchema)


def test_type_list_items_are_unique() -> None:
    """Test that type lists do not repeat names"""
    with pytest.raises(ValidationError) as exc_info:
        schema_adapter.validate_python({"type": ["string", "string"]})

    assert _error_types(exc_info) == ["unique_items"]


def test_type_list_with_several_types_is_rejected() -> None:
    """Test that a type list names a single variant besides null"""
    with pytest.raises(ValidationError) as exc_info:
        schema_adapter.validate_python({"type": ["string", "integer"]})

    assert _error_types(exc_info) == ["union_variant_not_found"]


def test_nullable_keyword_is_gone() -> None:
    """Test that nullable no longer exists"""
    with pytest.raises(ValidationError):
        schema_adapter.validate_python({"type": "string", "nullable": True})


def test_null_payloads() -> None:
    """Test where null may appear in payload keywords"""
    null = schema_adapter.validate_python({"type": "null", "const": None, "default": None})
    assert null.to_document() == {"type": "null", "const": None, "default": None}

    assert schema_adapter.validate_python({"type": ["string", "null"], "enum": ["a", None]})
    with pytest.raises(ValidationError) as exc_info:
        schema_adapter.validate_python({"type": ["string", "null"], "default": None})
    assert _error_types(exc_info) == ["null_forbidden"]


def test_numeric_exclusive_bounds() -> None:
    """Test that exclusive bounds are numbers in 3.1"""
    schema = schema_adapter.validate_python({"type": "number", "exclusiveMinimum": 0})
    assert schema.exclusive_minimum == 0

    with pytest.raises(ValidationError):
        schema_adapter.validate_python({"type": "number", "exclusiveMinimum": True, "minimum": 0})


def test_json_schema_2020_12_keywords() -> None:
    """Test keywords new to the 2020-12 dialect"""
    array = schema_adapter.validate_python(
        {"type": "array", "prefixItems": [{"type": "integer"}], "contains": {"const": 1}, "minContains": 1}
    )
    assert isinstance(array.prefix_items[0], v3_1.IntegerSchema)

    obj = schema_adapter.validate_python(
        {
            "type": "object",
            "patternProperties": {"^S_": {"type": "string"}},
            "dependentRequired": {"credit_card": ["billing_address"]},
            "$comment": "Legacy payload",
        }
    )
    assert obj.comment == "Legacy payload"


def test_conditional_composition() -> None:
    """Test if/then/else on a composition schema"""
    schema = schema_adapter.validate_python(
        {
            "if": {"type": "object", "required": ["country"]},
            "then": {"type": "object", "required": ["postcode"]},
            "else": {},
        }
    )

    assert isinstance(schema, v3_1.CompositionSchema)
    assert schema.to_document()["else"] == {}


def test_reference_summary() -> None:
    """Test that references may override summary and description"""
    reference = schema_adapter.validate_python(
        {"$ref": "#/components/schemas/Pet", "summary": "A pet", "description": "Any pet"}
    )
    assert reference.summary == "A pet"


def test_components_path_items() -> None:
    """Test reusable path items"""
    components = v3_1.Components.model_validate(
        {"pathItems": {"health": {"get": {"responses": {"200": {"description": "ok"}}}}}}
    )
    assert "get" in components.path_items["health"].operations()


def test_callbacks_accept_path_item_references() -> None:
    """Test that callback entries may be references"""
    callback = v3_1.Callback.model_validate(
        {"{$request.body#/url}": {"$ref": "#/components/pathItems/health"}}
    )
    assert isinstance(callback["{$request.body#/url}"], v3_1.Reference)
