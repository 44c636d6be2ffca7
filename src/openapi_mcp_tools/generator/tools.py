"""Tool synthesizer — turns an OpenAPI document into MCP tool definitions."""

import logging
from collections.abc import Iterable
from typing import Any

from openapi_mcp_tools.generator.annotations import build_http_annotations
from openapi_mcp_tools.generator.content import get_request_body_schema, get_response_schema
from openapi_mcp_tools.generator.naming import ToolNameRegistry, build_tool_name
from openapi_mcp_tools.generator.params import build_input_schema, build_tool_params
from openapi_mcp_tools.generator.security import resolve_auth
from openapi_mcp_tools.parser.base import Endpoint, Operation, SynthesisResult, ToolDefinition
from openapi_mcp_tools.parser.detect import ensure_openapi_document
from openapi_mcp_tools.parser.operations import build_operations
from openapi_mcp_tools.parser.servers import get_security_schemes, get_servers

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "OpenAPI Spec"


class ToolSynthesizer:
    """Builds ToolDefinitions for the operations of one OpenAPI document.

    Every `synthesize` call starts a fresh name registry seeded with
    `existing_names`, so repeated runs give identical results.
    """

    def __init__(self, doc: dict[str, Any], existing_names: Iterable[str] = ()):
        self.doc = ensure_openapi_document(doc)
        self.existing_names = tuple(existing_names)

    def build_tool(self, op: Operation, names: ToolNameRegistry) -> ToolDefinition:
        name = names.claim(build_tool_name(op))
        params = build_tool_params(op)
        auth = resolve_auth(self.doc, op)
        body_schema = get_request_body_schema(op.request_body)
        output_schema = get_response_schema(op.responses)
        input_schema = build_input_schema(params, body_schema)

        logger.debug("Synthesized %s as %r (%d params)", op.id, name, len(params))
        return ToolDefinition(
            id=op.id,
            name=name,
            description=op.summary or op.operation_id or f"{op.method.upper()} {op.path}",
            params=params,
            auth=auth,
            input_schema=input_schema,
            output_schema=output_schema if isinstance(output_schema, dict) else None,
            annotations=build_http_annotations(op.method),
            endpoint=Endpoint(
                method=op.method,
                path=op.path,
                tags=op.tags,
                operation_id=op.operation_id,
                source=op.source,
            ),
        )

    def synthesize(
        self,
        selected: Iterable[str] | None = None,
        operations: list[Operation] | None = None,
    ) -> SynthesisResult:
        """Build tools for all (or the selected) operations, in document order.

        `operations` lets callers pass a pre-filtered or pre-sorted list;
        `selected` narrows it further to the given operation ids.
        """
        ops = build_operations(self.doc) if operations is None else operations
        if selected is not None:
            wanted = set(selected)
            ops = [op for op in ops if op.id in wanted]

        names = ToolNameRegistry(self.existing_names)
        tools = [self.build_tool(op, names) for op in ops]
        servers = get_servers(self.doc)
        schemes = get_security_schemes(self.doc)

        info = self.doc.get("info")
        title = (info.get("title") if isinstance(info, dict) else None) or DEFAULT_TITLE

        logger.info(
            "Synthesized %d tools from %r (%d servers, %d security schemes)",
            len(tools),
            title,
            len(servers),
            len(schemes),
        )
        return SynthesisResult(title=title, tools=tools, servers=servers, schemes=schemes)


def synthesize(
    doc: dict[str, Any],
    selected: Iterable[str] | None = None,
    existing_names: Iterable[str] = (),
) -> SynthesisResult:
    """Synthesize tool definitions for an OpenAPI/Swagger document.

    Raises InvalidDocumentError before producing anything if `doc` has
    neither an `openapi` nor a `swagger` marker.
    """
    return ToolSynthesizer(doc, existing_names=existing_names).synthesize(selected=selected)
