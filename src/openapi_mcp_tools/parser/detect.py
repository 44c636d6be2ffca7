"""Load OpenAPI/Swagger documents and check they are usable."""

import json
from pathlib import Path
from typing import Any

import yaml

from openapi_mcp_tools.errors import DocumentParseError, InvalidDocumentError

BOM = "\ufeff"


def load_document(text: str) -> dict[str, Any]:
    """Parse OpenAPI JSON or YAML text into a mapping.

    JSON is tried first; anything JSON rejects goes through the YAML loader.
    """
    cleaned = text.lstrip(BOM).strip()
    if not cleaned:
        raise DocumentParseError("OpenAPI document is empty")

    try:
        data = json.loads(cleaned)
    except (json.JSONDecodeError, ValueError):
        try:
            data = yaml.safe_load(cleaned)
        except yaml.YAMLError as e:
            raise DocumentParseError(f"Failed to parse OpenAPI document: {e}") from e

    if not isinstance(data, dict):
        raise DocumentParseError("Invalid OpenAPI document: top level is not a mapping")
    return data


def load_document_file(file_path: Path) -> dict[str, Any]:
    """Read and parse an OpenAPI JSON/YAML file."""
    return load_document(file_path.read_text(encoding="utf-8"))


def is_openapi_document(doc: Any) -> bool:
    return isinstance(doc, dict) and bool(doc.get("openapi") or doc.get("swagger"))


def detect_version(doc: dict[str, Any]) -> str:
    """Return the declared version marker, e.g. '3.1.0' or '2.0'."""
    return str(doc.get("openapi") or doc.get("swagger") or "")


def ensure_openapi_document(doc: Any) -> dict[str, Any]:
    """Reject anything that is not an OpenAPI/Swagger mapping."""
    if not is_openapi_document(doc):
        raise InvalidDocumentError("Not a valid OpenAPI/Swagger document.")
    return doc
