"""Tool parameter list and input schema assembly."""

from typing import Any

from openapi_mcp_tools.parser.base import Operation, ParamLocation, ToolParam

PARAM_TYPES = {"string", "number", "boolean", "object", "array"}


def build_tool_params(op: Operation) -> list[ToolParam]:
    """Deduplicated params for an operation, plus the synthetic `body` param.

    Path-level params come first in `op.parameters`, so they win over an
    operation-level param with the same location and name.
    """
    params: list[ToolParam] = []
    seen: set[str] = set()

    for p in op.parameters:
        if not isinstance(p, dict) or not p.get("name"):
            continue
        location = ParamLocation(p.get("in") or "query")
        key = f"{location.value}:{p['name']}"
        if key in seen:
            continue
        seen.add(key)

        schema = p.get("schema")
        if not isinstance(schema, dict):
            schema = {}
        params.append(
            ToolParam(
                name=str(p["name"]),
                type=_param_type(schema),
                # Path params are always required, whatever the document says.
                required=True if location is ParamLocation.PATH else bool(p.get("required")),
                location=location,
                description=str(p.get("description") or ""),
                param_schema=schema,
            )
        )

    if op.request_body is not None:
        params.append(
            ToolParam(name="body", type="object", required=bool(op.request_body.get("required")))
        )
    return params


def _param_type(schema: dict) -> str:
    schema_type = schema.get("type")
    if isinstance(schema_type, list):
        # OpenAPI 3.1 style ["integer", "null"]
        schema_type = next((t for t in schema_type if t != "null"), None)
    if schema_type == "integer":
        return "number"
    if schema_type in PARAM_TYPES:
        return schema_type
    return "string"


def build_input_schema(params: list[ToolParam], body_schema: Any = None) -> dict[str, Any]:
    """JSON Schema object describing the tool's arguments.

    A resolved request-body schema replaces whatever the `body` param put in
    `properties`; the param only contributes the required flag.
    """
    properties: dict[str, Any] = {}
    required: list[str] = []

    for param in params:
        if isinstance(param.param_schema, dict):
            prop = dict(param.param_schema)
        else:
            prop = {"type": param.type}
        if param.description:
            prop["description"] = param.description
        properties[param.name] = prop
        if param.required:
            required.append(param.name)

    if isinstance(body_schema, dict):
        properties["body"] = body_schema

    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema
