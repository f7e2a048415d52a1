"""Per-version JSON Schema validation documents"""

from .generator import (
    DIALECTS,
    DRAFT_07,
    DRAFT_2020_12,
    SPECIFICATION,
    OpenAPISchemaGenerator,
    available_schemas,
    build_schema,
    write_schemas,
)

__all__ = [
    "DIALECTS",
    "DRAFT_07",
    "DRAFT_2020_12",
    "SPECIFICATION",
    "OpenAPISchemaGenerator",
    "available_schemas",
    "build_schema",
    "write_schemas",
]
