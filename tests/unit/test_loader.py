"""Tests for loading OpenAPI documents from JSON and YAML

Tests the loader module that:
- Parses JSON first and falls back to YAML
- Normalizes YAML integer keys such as status codes to strings
- Rejects text that does not hold a mapping
"""

import json

import pytest

from oaspec.core import DocumentLoadError
from oaspec.utils import load_document, load_document_file

# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def sample_swagger_yaml():
    """Swagger 2.0 document with unquoted status codes"""
    return """
swagger: "2.0"
info:
  title: Pet Store API
  version: 1.0.0
paths:
  /pets:
    get:
      responses:
        200:
          description: Successful response
"""


# ============================================================================
# load_document
# ============================================================================

class TestLoadDocument:
    """Tests for load_document function"""

    def test_loads_json(self) -> None:
        """Test parsing JSON text"""
        document = load_document('{"openapi": "3.1.0", "info": {"title": "T"}}')
        assert document == {"openapi": "3.1.0", "info": {"title": "T"}}

    def test_loads_yaml(self, sample_swagger_yaml) -> None:
        """Test parsing YAML text"""
        document = load_document(sample_swagger_yaml)

        assert document["swagger"] == "2.0"
        assert document["info"]["version"] == "1.0.0"

    def test_stringifies_status_codes(self, sample_swagger_yaml) -> None:
        """Test that integer keys become strings"""
        document = load_document(sample_swagger_yaml)
        assert list(document["paths"]["/pets"]["get"]["responses"]) == ["200"]

    def test_loads_bytes(self) -> None:
        """Test that bytes are decoded as UTF-8"""
        assert load_document('{"title": "Café"}'.encode("utf-8")) == {"title": "Café"}

    def test_rejects_invalid_utf8_bytes(self) -> None:
        """Test that undecodable bytes raise DocumentLoadError"""
        with pytest.raises(DocumentLoadError, match="not valid UTF-8"):
            load_document(b"\xff\xfe openapi: 3")

    def test_rejects_non_mapping(self) -> None:
        """Test that a top-level list is rejected"""
        with pytest.raises(DocumentLoadError, match="does not hold a mapping"):
            load_document("[1, 2, 3]")

    def test_rejects_invalid_text(self) -> None:
        """Test that text that is neither JSON nor YAML is rejected"""
        with pytest.raises(DocumentLoadError, match="inline.yaml"):
            load_document("key: [unclosed", source="inline.yaml")

    def test_load_error_is_value_error(self) -> None:
        """Test that load errors can be caught as ValueError"""
        with pytest.raises(ValueError):
            load_document("just a string")


# ============================================================================
# load_document_file
# ============================================================================

class TestLoadDocumentFile:
    """Tests for load_document_file function"""

    def test_loads_yaml_file(self, tmp_path, sample_swagger_yaml) -> None:
        """Test reading a .yaml file"""
        path = tmp_path / "swagger.yaml"
        path.write_text(sample_swagger_yaml, encoding="utf-8")

        assert load_document_file(path)["info"]["title"] == "Pet Store API"

    def test_loads_json_file(self, tmp_path) -> None:
        """Test reading a .json file"""
        path = tmp_path / "openapi.json"
        path.write_text(json.dumps({"openapi": "3.0.0"}), encoding="utf-8")

        assert load_document_file(str(path)) == {"openapi": "3.0.0"}

    def test_missing_file(self, tmp_path) -> None:
        """Test that unreadable files raise DocumentLoadError"""
        with pytest.raises(DocumentLoadError, match="Failed to read"):
            load_document_file(tmp_path / "missing.yaml")

    def test_invalid_utf8_file(self, tmp_path) -> None:
        """Test that files that are not UTF-8 raise DocumentLoadError"""
        path = tmp_path / "openapi.yaml"
        path.write_bytes(b"\xff\xfe openapi: 3")

        with pytest.raises(DocumentLoadError, match="not valid UTF-8"):
            load_document_file(path)
