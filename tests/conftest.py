"""Shared fixtures for the oaspec test suite"""

from pathlib import Path
from typing import Any

import pytest

from oaspec.config import get_settings
from oaspec.utils import load_document_file

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Run tests asking for ``fixture_document`` once per fixture file"""
    if "fixture_document" in metafunc.fixturenames:
        paths = sorted(FIXTURES_DIR.glob("*/*.yaml"))
        metafunc.parametrize(
            "fixture_document",
            paths,
            ids=[f"{path.parent.name}/{path.stem}" for path in paths],
            indirect=True,
        )


@pytest.fixture
def fixture_document(request: pytest.FixtureRequest) -> tuple[str, dict[str, Any]]:
    """A (version, document) pair loaded from tests/fixtures/<version>/"""
    path: Path = request.param
    return path.parent.name, load_document_file(path)


@pytest.fixture
def load_fixture():
    """Load a fixture document by version and file name"""

    def _load(version: str, name: str) -> dict[str, Any]:
        return load_document_file(FIXTURES_DIR / version / name)

    return _load


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Clear the settings cache so environment changes in a test take effect"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def minimal_swagger() -> dict[str, Any]:
    """The smallest valid Swagger 2.0 document"""
    return {
        "swagger": "2.0",
        "info": {"title": "Test API", "version": "1.0.0"},
        "paths": {},
    }


@pytest.fixture
def minimal_openapi_31() -> dict[str, Any]:
    """A minimal OpenAPI 3.1 document with a single operation"""
    return {
        "openapi": "3.1.0",
        "info": {"title": "T", "version": "1"},
        "paths": {"/x": {"get": {"responses": {"200": {"description": "ok"}}}}},
    }


@pytest.fixture
def petstore_30() -> dict[str, Any]:
    """The OpenAPI 3.0 petstore fixture, safe to modify"""
    return load_document_file(FIXTURES_DIR / "3.0" / "petstore.yaml")
