"""OpenAPI / Swagger operation extraction.

Walks `paths` then `webhooks` and flattens every method handler into an
Operation record, in document key order.
"""

from typing import Any

from .base import Operation

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "options", "head")

# Swagger 2 keeps these on the parameter itself instead of under `schema`.
INLINE_SCHEMA_KEYS = (
    "type",
    "format",
    "items",
    "enum",
    "default",
    "minimum",
    "maximum",
    "exclusiveMinimum",
    "exclusiveMaximum",
    "minLength",
    "maxLength",
    "pattern",
    "minItems",
    "maxItems",
    "uniqueItems",
    "collectionFormat",
)


def build_operations(doc: dict[str, Any]) -> list[Operation]:
    """Extract every path and webhook operation from an OpenAPI document."""
    operations: list[Operation] = []
    _collect(doc.get("paths"), "path", operations)
    _collect(doc.get("webhooks"), "webhook", operations)
    return operations


def _collect(path_map: Any, kind: str, operations: list[Operation]) -> None:
    if not isinstance(path_map, dict):
        return

    for path, path_item in path_map.items():
        if not isinstance(path_item, dict):
            continue
        common_params = _as_list(path_item.get("parameters"))

        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue
            operations.append(_build_operation(kind, method, path, common_params, operation))


def _build_operation(
    kind: str, method: str, path: str, common_params: list, operation: dict
) -> Operation:
    raw_params = common_params + _as_list(operation.get("parameters"))
    params, body_params = _split_body_params(raw_params)

    request_body = operation.get("requestBody")
    if request_body is None and body_params:
        request_body = _body_param_to_request_body(body_params[0])

    tags = operation.get("tags")
    if not isinstance(tags, list) or not tags:
        tags = ["default"]
    op_path = f"/webhooks/{path}" if kind == "webhook" else path
    security = None
    if "security" in operation:
        # Present but malformed (e.g. null) still overrides the global requirement.
        security = _as_list(operation["security"])

    return Operation(
        id=f"{kind.upper()} {method.upper()} {op_path}",
        method=method,
        path=op_path,
        tags=[str(t) for t in tags],
        summary=str(operation.get("summary") or operation.get("description") or ""),
        operation_id=str(operation.get("operationId") or ""),
        parameters=params,
        request_body=request_body if isinstance(request_body, dict) else None,
        security=security,
        responses=_normalize_responses(operation.get("responses")),
        source=kind,
    )


def _as_list(value: Any) -> list:
    return list(value) if isinstance(value, list) else []


def _split_body_params(params: list) -> tuple[list[dict], list[dict]]:
    """Separate Swagger 2 `in: body` params and give the rest a schema."""
    regular, body = [], []
    for p in params:
        if not isinstance(p, dict):
            continue
        if p.get("in") == "body":
            body.append(p)
        elif "schema" not in p and any(k in p for k in INLINE_SCHEMA_KEYS):
            inline = {k: p[k] for k in INLINE_SCHEMA_KEYS if k in p}
            regular.append({**p, "schema": inline})
        else:
            regular.append(p)
    return regular, body


def _body_param_to_request_body(param: dict) -> dict:
    request_body: dict[str, Any] = {"required": bool(param.get("required"))}
    if param.get("description"):
        request_body["description"] = param["description"]
    schema = param.get("schema")
    if isinstance(schema, dict):
        request_body["content"] = {"application/json": {"schema": schema}}
    return request_body


def _normalize_responses(responses: Any) -> dict:
    """Stringify status codes and wrap Swagger 2 response schemas in `content`."""
    if not isinstance(responses, dict):
        return {}

    result = {}
    for status_code, resp in responses.items():
        if isinstance(resp, dict) and "content" not in resp and isinstance(resp.get("schema"), dict):
            resp = {**resp, "content": {"application/json": {"schema": resp["schema"]}}}
        result[str(status_code)] = resp
    return result
