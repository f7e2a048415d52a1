"""Shared building blocks for every OpenAPI version

Every specification object is a closed record: declared fields plus any number
of ``x-*`` extension keys. Map-like objects (Paths, Responses, Callbacks,
Webhooks) are patterned objects whose keys follow a pattern instead of being
fixed field names.
"""

import re
from collections.abc import Callable
from itertools import combinations
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    SerializerFunctionWrapHandler,
    Tag,
    WithJsonSchema,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

EXTENSION_PREFIX = "x-"
EXTENSION_PATTERN = "^x-"


def _render_closed_object(schema: dict[str, Any], model: type["OpenAPIObject"]) -> None:
    """Close the rendered JSON Schema of a model to its fields and extensions"""
    schema["additionalProperties"] = False
    schema["patternProperties"] = {EXTENSION_PATTERN: {}}

    rules: list[dict[str, Any]] = []
    for group in model.exclusive_fields:
        rules.extend({"not": {"required": list(pair)}} for pair in combinations(group, 2))
    for group in model.required_one_of:
        rules.append({"anyOf": [{"required": [key]} for key in group]})
    if rules:
        schema["allOf"] = rules

    model.extend_json_schema(schema)


class OpenAPIObject(BaseModel):
    """Base class of every specification object"""

    model_config = ConfigDict(
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra=_render_closed_object,
    )

    # Groups of document keys of which at most one may be present
    exclusive_fields: ClassVar[tuple[tuple[str, ...], ...]] = ()
    # Groups of document keys of which at least one must be present
    required_one_of: ClassVar[tuple[tuple[str, ...], ...]] = ()
    # Declared fields that accept an explicit null
    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _reject_null_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        for name, field in cls.model_fields.items():
            if field.annotation is Any or name in cls.nullable_fields:
                continue
            key = field.alias or name
            if data.get(key, ...) is None or data.get(name, ...) is None:
                raise PydanticCustomError(
                    "null_forbidden",
                    "'{field}' must not be null",
                    {"field": key},
                )
        return data

    @model_validator(mode="after")
    def _check_extensions(self) -> "OpenAPIObject":
        unknown = sorted(
            key for key in (self.model_extra or {}) if not key.startswith(EXTENSION_PREFIX)
        )
        if unknown:
            raise PydanticCustomError(
                "extra_forbidden",
                "Unexpected field(s) {fields}; only declared fields and 'x-' extensions are allowed",
                {"fields": ", ".join(repr(key) for key in unknown)},
            )
        return self

    @model_validator(mode="after")
    def _check_field_groups(self) -> "OpenAPIObject":
        present = self.present_fields()
        for group in self.exclusive_fields:
            found = [key for key in group if key in present]
            if len(found) > 1:
                raise PydanticCustomError(
                    "mutually_exclusive",
                    "Fields {fields} are mutually exclusive",
                    {"fields": ", ".join(repr(key) for key in found)},
                )
        for group in self.required_one_of:
            if not present.intersection(group):
                raise PydanticCustomError(
                    "missing_one_of",
                    "At least one of {fields} is required",
                    {"fields": ", ".join(repr(key) for key in group)},
                )
        return self

    def present_fields(self) -> set[str]:
        """Document keys of the declared fields that were given a value"""
        fields = type(self).model_fields
        return {fields[name].alias or name for name in self.model_fields_set if name in fields}

    @property
    def extensions(self) -> dict[str, Any]:
        """The ``x-*`` entries carried by this object"""
        return dict(self.model_extra or {})

    @classmethod
    def extend_json_schema(cls, schema: dict[str, Any]) -> None:
        """Hook for subclasses adding keywords to their rendered JSON Schema"""

    def to_document(self) -> dict[str, Any]:
        """Dump the object the way it appears in an OpenAPI document"""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class PatternedObject(OpenAPIObject):
    """
    An object whose field names are patterns rather than fixed names.

    Subclasses declare a single ``entries`` field mapping keys to values and set
    ``key_pattern``. Every non-extension key of the input is routed into
    ``entries`` during validation and flattened back on serialization.
    """

    key_pattern: ClassVar[str] = r"^(?!x-)"
    min_entries: ClassVar[int] = 0

    entries: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _route_entries(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        routed: dict[str, Any] = {"entries": {}}
        for key, value in data.items():
            if isinstance(key, str) and key.startswith(EXTENSION_PREFIX):
                routed[key] = value
            else:
                routed["entries"][key] = value
        return routed

    @model_validator(mode="after")
    def _check_entry_keys(self) -> "PatternedObject":
        invalid = [key for key in self.entries if not re.search(self.key_pattern, key)]
        if invalid:
            raise PydanticCustomError(
                "pattern_mismatch",
                "Key(s) {keys} do not match '{pattern}'",
                {"keys": ", ".join(repr(key) for key in invalid), "pattern": self.key_pattern},
            )
        if len(self.entries) + len(self.model_extra or {}) < self.min_entries:
            raise PydanticCustomError(
                "too_short",
                "Object must have at least {min_entries} entries",
                {"min_entries": self.min_entries},
            )
        return self

    @model_serializer(mode="wrap")
    def _flatten_entries(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        entries = data.pop("entries", {})
        return {**entries, **data}

    @classmethod
    def extend_json_schema(cls, schema: dict[str, Any]) -> None:
        properties = schema.pop("properties", {})
        entry_schema = properties.get("entries", {}).get("additionalProperties", {})
        schema.pop("required", None)
        schema["patternProperties"] = {
            cls.key_pattern: entry_schema,
            EXTENSION_PATTERN: {},
        }
        if cls.min_entries:
            schema["minProperties"] = cls.min_entries

    def __getitem__(self, key: str) -> Any:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


def tagged_union(*members: type[BaseModel], discriminator: Callable[[Any], str | None], label: str) -> Any:
    """
    Build a structurally discriminated union over ``members``.

    ``discriminator`` inspects the raw value (or a model instance) and returns
    the class name of the member that must validate it, or None when no
    member applies. Renders as ``oneOf`` in JSON Schema.
    """
    choices = tuple(Annotated[member, Tag(member.__name__)] for member in members)
    return Annotated[
        Union[choices],
        Discriminator(
            discriminator,
            custom_error_type="union_variant_not_found",
            custom_error_message=f"Value is not a valid {label}",
        ),
    ]


def reference_or(reference: type[BaseModel], model: type[BaseModel]) -> Any:
    """A ``Reference | model`` union discriminated by the presence of ``$ref``"""

    def _tag(value: Any) -> str | None:
        if isinstance(value, dict):
            return reference.__name__ if "$ref" in value else model.__name__
        if isinstance(value, reference):
            return reference.__name__
        if isinstance(value, model):
            return model.__name__
        return None

    return tagged_union(reference, model, discriminator=_tag, label=f"{model.__name__} or Reference")


def type_keyword(name: str) -> Any:
    """
    The ``type`` keyword of a JSON Schema 2020-12 variant.

    Accepts the bare type name, or a list holding it and optionally ``"null"``
    (the replacement for ``nullable``).
    """
    allowed = tuple(sorted({name, "null"}))

    def _check(value: Any) -> Any:
        if isinstance(value, list):
            if name not in value:
                raise PydanticCustomError(
                    "type_mismatch", "'type' list must contain '{name}'", {"name": name}
                )
            if len(set(value)) != len(value):
                raise PydanticCustomError("unique_items", "'type' list items must be unique")
        return value

    return Annotated[
        Union[Literal[name], list[Literal[allowed]]],
        AfterValidator(_check),
        WithJsonSchema(
            {
                "anyOf": [
                    {"const": name},
                    {
                        "type": "array",
                        "items": {"enum": list(allowed)},
                        "contains": {"const": name},
                        "uniqueItems": True,
                        "minItems": 1,
                    },
                ]
            }
        ),
    ]
