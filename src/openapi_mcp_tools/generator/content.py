"""Pick the JSON Schema out of request-body and response content maps."""

from typing import Any

PREFERRED_CONTENT_TYPE = "application/json"
PREFERRED_RESPONSE_CODES = ("200", "201", "202", "204")


def get_content_schema(content: Any) -> dict | None:
    """application/json schema if present, else the first media type with one.

    An empty schema `{}` accepts anything and still counts as a schema.
    """
    if not isinstance(content, dict):
        return None

    preferred = content.get(PREFERRED_CONTENT_TYPE)
    if isinstance(preferred, dict) and isinstance(preferred.get("schema"), dict):
        return preferred["schema"]

    for media in content.values():
        if isinstance(media, dict) and isinstance(media.get("schema"), dict):
            return media["schema"]
    return None


def get_request_body_schema(request_body: Any) -> dict | None:
    if not isinstance(request_body, dict):
        return None
    return get_content_schema(request_body.get("content"))


def get_response_schema(responses: Any) -> dict | None:
    """Schema of the first successful response, else of the first response with content."""
    if not isinstance(responses, dict):
        return None

    for code in PREFERRED_RESPONSE_CODES:
        resp = responses.get(code)
        if isinstance(resp, dict):
            schema = get_content_schema(resp.get("content"))
            if schema is not None:
                return schema

    for resp in responses.values():
        if isinstance(resp, dict) and isinstance(resp.get("content"), dict):
            return get_content_schema(resp["content"])
    return None
