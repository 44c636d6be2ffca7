"""MCP tool annotations derived from HTTP method semantics."""

from openapi_mcp_tools.parser.base import ToolAnnotations

READ_ONLY_METHODS = {"get", "head", "options"}
IDEMPOTENT_METHODS = {"get", "head", "options", "put", "delete"}
DESTRUCTIVE_METHODS = {"post", "put", "patch", "delete"}


def build_http_annotations(method: str) -> ToolAnnotations:
    m = (method or "").lower()
    read_only = m in READ_ONLY_METHODS
    return ToolAnnotations(
        readOnlyHint=read_only,
        destructiveHint=False if read_only else m in DESTRUCTIVE_METHODS,
        idempotentHint=m in IDEMPOTENT_METHODS,
        # Generated tools always call out to a real, external API.
        openWorldHint=True,
    )
