"""Tool naming: sanitized, and unique within one synthesis run."""

import logging
import re
from collections.abc import Iterable

from openapi_mcp_tools.parser.base import Operation

logger = logging.getLogger(__name__)

_BRACES = re.compile(r"[{}]")
_NON_WORD = re.compile(r"\W+", re.ASCII)


def sanitize_tool_name(raw: str, method: str) -> str:
    cleaned = _BRACES.sub("", str(raw).lower())
    cleaned = _NON_WORD.sub("_", cleaned).strip("_")
    return cleaned or f"tool_{method}"


def build_tool_name(op: Operation) -> str:
    """operationId, or '{method}_{path}', sanitized."""
    raw = op.operation_id or f"{op.method}_{op.path}"
    return sanitize_tool_name(raw, op.method)


class ToolNameRegistry:
    """Hands out names first-come-first-served, suffixing _2, _3, ... on collision."""

    def __init__(self, existing: Iterable[str] = ()):
        self._used: set[str] = set(existing)

    def __contains__(self, name: str) -> bool:
        return name in self._used

    def claim(self, name: str) -> str:
        candidate = name
        idx = 2
        while candidate in self._used:
            candidate = f"{name}_{idx}"
            idx += 1
        if candidate != name:
            logger.debug("Tool name %r taken, using %r", name, candidate)
        self._used.add(candidate)
        return candidate
