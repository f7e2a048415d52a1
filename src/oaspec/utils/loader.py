"""Loading OpenAPI documents from JSON or YAML text and local files"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from oaspec.core.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def load_document(text: str | bytes, *, source: str = "<string>") -> dict[str, Any]:
    """
    Parse an OpenAPI document from JSON or YAML text.

    JSON is tried first, then YAML. Mapping keys are converted to strings, so
    unquoted YAML status codes such as ``200:`` become ``"200"`` as they would
    in JSON.

    Args:
        text: Document text
        source: Name of the document used in error messages

    Returns:
        The document as a JSON-compatible dictionary

    Raises:
        DocumentLoadError: If the text is neither JSON nor YAML, or does not
            hold a mapping

    Examples:
        >>> load_document('{"openapi": "3.1.0"}')
        {'openapi': '3.1.0'}
        >>> load_document("swagger: '2.0'")
        {'swagger': '2.0'}
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocumentLoadError(f"{source} is not valid UTF-8: {e}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError:
        document = _load_yaml(text, source)

    return _as_mapping(document, source)


def load_document_file(path: str | Path) -> dict[str, Any]:
    """
    Read an OpenAPI document from a local ``.json``, ``.yaml`` or ``.yml`` file.

    Files with a YAML suffix are parsed as YAML only; anything else goes
    through ``load_document``.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(f"Failed to read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DocumentLoadError(f"{path} is not valid UTF-8: {e}") from e

    logger.debug(f"Loading OpenAPI document from {path}")

    if path.suffix.lower() in YAML_SUFFIXES:
        return _as_mapping(_load_yaml(text, str(path)), str(path))
    return load_document(text, source=str(path))


def _load_yaml(text: str, source: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentLoadError(f"Failed to parse {source} as JSON or YAML: {e}") from e


def _as_mapping(document: Any, source: str) -> dict[str, Any]:
    if not isinstance(document, dict):
        raise DocumentLoadError(
            f"{source} does not hold a mapping (got {type(document).__name__})"
        )
    return _stringify_keys(document)


def _stringify_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(key): _stringify_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_stringify_keys(item) for item in value]
    return value
