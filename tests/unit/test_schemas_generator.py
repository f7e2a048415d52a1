"""Tests for the generated JSON Schema validation documents"""

import json

import pytest
from jsonschema import Draft7Validator, Draft202012Validator

from oaspec.core import UnknownSchemaError, UnsupportedVersionError
from oaspec.schemas import (
    DRAFT_07,
    DRAFT_2020_12,
    available_schemas,
    build_schema,
    write_schemas,
)


class TestAvailableSchemas:
    """Tests for available_schemas function"""

    def test_swagger_components(self) -> None:
        """Test the Swagger 2.0 document names"""
        assert available_schemas("2.0") == [
            "specification",
            "parameter",
            "pathitem",
            "response",
            "schema",
            "securityscheme",
        ]

    def test_openapi_3_components(self) -> None:
        """Test that 3.x versions publish their richer component set"""
        for version in ("3.0", "3.1", "3.2"):
            names = available_schemas(version)
            assert names[0] == "specification"
            assert {"link", "callback", "requestbody", "header", "example", "mediatype"} <= set(names)


class TestBuildSchema:
    """Tests for build_schema function"""

    @pytest.mark.parametrize("version", ["2.0", "3.0"])
    def test_draft_07_documents(self, version) -> None:
        """Test that 2.0 and 3.0 use draft-07 definitions"""
        schema = build_schema(version)

        assert schema["$schema"] == DRAFT_07
        assert "definitions" in schema
        assert "$defs" not in schema
        assert "#/definitions/" in json.dumps(schema)
        Draft7Validator.check_schema(schema)

    @pytest.mark.parametrize("version", ["3.1", "3.2"])
    def test_draft_2020_12_documents(self, version) -> None:
        """Test that 3.1 and 3.2 use draft 2020-12 $defs"""
        schema = build_schema(version)

        assert schema["$schema"] == DRAFT_2020_12
        assert "$defs" in schema
        assert "definitions" not in schema
        Draft202012Validator.check_schema(schema)

    def test_root_is_closed(self) -> None:
        """Test that the root object only allows its fields and extensions"""
        schema = build_schema("3.0")

        assert schema["additionalProperties"] is False
        assert schema["patternProperties"] == {"^x-": {}}
        assert set(schema["required"]) == {"openapi", "info", "paths"}

    def test_fields_use_document_names(self) -> None:
        """Test that properties are named as in OpenAPI documents"""
        properties = build_schema("2.0")["properties"]
        assert {"basePath", "securityDefinitions", "externalDocs"} <= set(properties)

    def test_optional_fields_are_not_nullable(self) -> None:
        """Test that absent fields are allowed but explicit nulls are not"""
        info = build_schema("3.1")["$defs"]["Info"]

        assert info["properties"]["summary"]["type"] == "string"
        assert "default" not in info["properties"]["summary"]
        assert "anyOf" not in json.dumps(info["properties"]["description"])

    def test_patterned_objects(self) -> None:
        """Test that Responses render their key pattern"""
        responses = build_schema("3.0")["definitions"]["Responses"]

        assert set(responses["patternProperties"]) == {"^([1-5][0-9X]{2}|default)$", "^x-"}
        assert responses["minProperties"] == 1
        assert "properties" not in responses

    def test_exclusive_fields(self) -> None:
        """Test that mutually exclusive fields render as not-required pairs"""
        example = build_schema("3.0", "example")
        assert {"not": {"required": ["value", "externalValue"]}} in example["allOf"]

    def test_schema_union_is_one_of(self) -> None:
        """Test that the schema component is a oneOf without discriminator"""
        schema = build_schema("3.1", "schema")

        assert len(schema["oneOf"]) == 9
        assert "discriminator" not in schema

    def test_returns_fresh_copies(self) -> None:
        """Test that callers may modify the returned document"""
        build_schema("3.2")["properties"].clear()
        assert build_schema("3.2")["properties"]

    def test_unknown_name(self) -> None:
        """Test that unknown component names raise"""
        with pytest.raises(UnknownSchemaError):
            build_schema("3.0", "webhooks")

    def test_unknown_version(self) -> None:
        """Test that unknown versions raise"""
        with pytest.raises(UnsupportedVersionError):
            build_schema("1.2")


class TestWriteSchemas:
    """Tests for write_schemas function"""

    def test_writes_layout(self, tmp_path) -> None:
        """Test the main/ and components/ layout"""
        written = write_schemas(tmp_path, versions=["3.1"])

        assert tmp_path / "3.1" / "main" / "specification.json" in written
        assert tmp_path / "3.1" / "components" / "schema.json" in written
        assert len(written) == len(available_schemas("3.1"))

        document = json.loads((tmp_path / "3.1" / "main" / "specification.json").read_text())
        assert document == build_schema("3.1")

    def test_writes_all_versions(self, tmp_path) -> None:
        """Test that every version is written by default"""
        write_schemas(tmp_path)
        assert sorted(path.name for path in tmp_path.iterdir()) == ["2.0", "3.0", "3.1", "3.2"]

    def test_uses_configured_directory(self, tmp_path, monkeypatch) -> None:
        """Test that the output directory defaults to the settings"""
        monkeypatch.setenv("OASPEC_SCHEMA_OUTPUT_DIR", str(tmp_path / "out"))

        written = write_schemas(versions=["2.0"])

        assert all(path.is_relative_to(tmp_path / "out") for path in written)
