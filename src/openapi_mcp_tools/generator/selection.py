"""Operation filtering and default selection for endpoint pickers."""

from openapi_mcp_tools.parser.base import Operation

DEFAULT_SELECTION_LIMIT = 20


def filter_operations(
    operations: list[Operation],
    tag: str | None = None,
    method: str | None = None,
    search: str | None = None,
) -> list[Operation]:
    """Narrow operations by tag, HTTP method and a free-text search."""
    method = method.lower() if method else None
    needle = search.strip().lower() if search else ""

    result = []
    for op in operations:
        if tag and tag not in op.tags:
            continue
        if method and op.method != method:
            continue
        if needle:
            hay = f"{op.method} {op.path} {op.operation_id} {op.summary}".lower()
            if needle not in hay:
                continue
        result.append(op)
    return result


def count_tags(operations: list[Operation]) -> dict[str, int]:
    """Operations per tag, in first-seen tag order."""
    counts: dict[str, int] = {}
    for op in operations:
        for tag in op.tags:
            counts[tag] = counts.get(tag, 0) + 1
    return counts


def default_selection(operations: list[Operation], limit: int = DEFAULT_SELECTION_LIMIT) -> list[str]:
    """Preselect everything for small documents, nothing for large ones."""
    if 0 < len(operations) <= limit:
        return [op.id for op in operations]
    return []


def has_only_webhooks(operations: list[Operation]) -> bool:
    sources = {op.source for op in operations}
    return "webhook" in sources and "path" not in sources
