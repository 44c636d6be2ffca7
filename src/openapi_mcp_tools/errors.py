"""Exceptions raised before synthesis starts.

Synthesis itself never raises for an incomplete document: missing fields
degrade to defaults. Only document-level problems are errors.
"""


class OpenApiToolsError(Exception):
    """Base class for openapi-mcp-tools errors."""


class DocumentParseError(OpenApiToolsError, ValueError):
    """The input text is empty or is not a JSON/YAML mapping."""


class InvalidDocumentError(OpenApiToolsError, ValueError):
    """The mapping carries neither an `openapi` nor a `swagger` marker."""
