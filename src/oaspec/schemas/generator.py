"""JSON Schema validation documents generated from the object models

Swagger 2.0 and OpenAPI 3.0 documents are rendered in JSON Schema draft-07
(``definitions``), OpenAPI 3.1 and 3.2 in draft 2020-12 (``$defs``).
"""

import copy
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic.json_schema import GenerateJsonSchema, JsonSchemaValue
from pydantic_core import core_schema

from oaspec.config import get_settings
from oaspec.core.exceptions import UnknownSchemaError
from oaspec.core.versions import (
    OpenAPIVersion,
    get_version_module,
    resolve_version,
    supported_versions,
)

logger = logging.getLogger(__name__)

SPECIFICATION = "specification"

DRAFT_07 = "http://json-schema.org/draft-07/schema#"
DRAFT_2020_12 = "https://json-schema.org/draft/2020-12/schema"

DIALECTS: dict[OpenAPIVersion, str] = {
    OpenAPIVersion.SWAGGER_2_0: DRAFT_07,
    OpenAPIVersion.OPENAPI_3_0: DRAFT_07,
    OpenAPIVersion.OPENAPI_3_1: DRAFT_2020_12,
    OpenAPIVersion.OPENAPI_3_2: DRAFT_2020_12,
}


class OpenAPISchemaGenerator(GenerateJsonSchema):
    """
    Renders the object models as validation documents.

    Optional fields are rendered as their value schema alone: a key that is
    absent is allowed, an explicit null is not. Tagged unions are plain
    ``oneOf`` without pydantic's OpenAPI ``discriminator`` hint.
    """

    def default_schema(self, schema: core_schema.WithDefaultSchema) -> JsonSchemaValue:
        if "default" in schema and schema["default"] is None:
            inner = schema["schema"]
            if inner["type"] == "nullable":
                inner = inner["schema"]
            return self.generate_inner(inner)
        return super().default_schema(schema)

    def tagged_union_schema(self, schema: core_schema.TaggedUnionSchema) -> JsonSchemaValue:
        json_schema = super().tagged_union_schema(schema)
        json_schema.pop("discriminator", None)
        return json_schema


def available_schemas(version: OpenAPIVersion | str) -> list[str]:
    """
    Names of the validation documents published for a version.

    Examples:
        >>> available_schemas("2.0")
        ['specification', 'parameter', 'pathitem', 'response', 'schema', 'securityscheme']
    """
    module = get_version_module(version)
    return [SPECIFICATION, *sorted(module.COMPONENTS)]


def build_schema(version: OpenAPIVersion | str, name: str = SPECIFICATION) -> dict[str, Any]:
    """
    Build the validation document of the root object or of a component.

    Args:
        version: OpenAPI version, e.g. ``"3.1"`` or ``OpenAPIVersion.OPENAPI_3_1``
        name: ``"specification"`` or a component name from ``available_schemas``

    Returns:
        A fresh JSON Schema dictionary the caller may modify

    Raises:
        UnsupportedVersionError: If the version has no object model
        UnknownSchemaError: If the version publishes no document named ``name``
    """
    return copy.deepcopy(_build_schema(resolve_version(version), name.lower()))


@lru_cache(maxsize=None)
def _build_schema(version: OpenAPIVersion, name: str) -> dict[str, Any]:
    module = get_version_module(version)
    if name == SPECIFICATION:
        target = module.Specification
    elif name in module.COMPONENTS:
        target = module.COMPONENTS[name]
    else:
        raise UnknownSchemaError(version.value, name, available_schemas(version))

    logger.debug(f"Generating {name} schema for OpenAPI {version.value}")

    dialect = DIALECTS[version]
    if dialect == DRAFT_07:
        generated = TypeAdapter(target).json_schema(
            ref_template="#/definitions/{model}",
            schema_generator=OpenAPISchemaGenerator,
        )
        definitions = generated.pop("$defs", None)
        if definitions is not None:
            generated["definitions"] = definitions
    else:
        generated = TypeAdapter(target).json_schema(schema_generator=OpenAPISchemaGenerator)

    return {"$schema": dialect, **generated}


def write_schemas(
    output_dir: str | Path | None = None,
    versions: list[OpenAPIVersion | str] | None = None,
) -> list[Path]:
    """
    Write every validation document to disk.

    Files are laid out as ``<output_dir>/<version>/main/specification.json``
    and ``<output_dir>/<version>/components/<name>.json``.

    Args:
        output_dir: Target directory; ``Settings.schema_output_dir`` by default
        versions: Versions to write; all supported versions by default

    Returns:
        Paths of the written files
    """
    root = Path(output_dir if output_dir is not None else get_settings().schema_output_dir)
    selected = [resolve_version(version) for version in versions] if versions else supported_versions()

    written: list[Path] = []
    for version in selected:
        for name in available_schemas(version):
            folder = "main" if name == SPECIFICATION else "components"
            path = root / version.value / folder / f"{name}.json"
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(build_schema(version, name), indent=2) + "\n", encoding="utf-8")
            written.append(path)

        logger.info(f"Wrote {len(available_schemas(version))} schemas for OpenAPI {version.value} to {root}")

    return written
