"""CLI entry point for openapi-mcp-tools."""

import json
import logging
from pathlib import Path

import click

from openapi_mcp_tools.errors import OpenApiToolsError
from openapi_mcp_tools.generator.security import format_auth_summary
from openapi_mcp_tools.generator.selection import (
    default_selection,
    filter_operations,
    has_only_webhooks,
)
from openapi_mcp_tools.generator.tools import ToolSynthesizer
from openapi_mcp_tools.parser.detect import load_document_file
from openapi_mcp_tools.parser.operations import build_operations
from openapi_mcp_tools.parser.servers import format_scheme_summary

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _load_synthesizer(doc_path: Path) -> ToolSynthesizer:
    """Parse and validate a document, turning failures into one CLI error."""
    try:
        return ToolSynthesizer(load_document_file(doc_path))
    except OpenApiToolsError as e:
        raise click.ClickException(f"Failed to load {doc_path}: {e}") from e


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    envvar="OPENAPI_MCP_TOOLS_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity.",
)
def main(log_level: str):
    """OpenAPI MCP Tools — synthesize MCP tool definitions from OpenAPI docs."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output JSON file (default: stdout).")
@click.option("--tag", default=None, help="Only operations with this tag.")
@click.option("--method", default=None, type=click.Choice(["get", "post", "put", "patch", "delete", "options", "head"], case_sensitive=False), help="Only operations with this HTTP method.")
@click.option("--search", default=None, help="Only operations whose method, path, operationId or summary contains this text.")
@click.option("--select", "selected", multiple=True, help="Operation id to include, e.g. 'PATH GET /pets'. Repeatable.")
def tools(doc_path: Path, output: Path | None, tag: str | None, method: str | None, search: str | None, selected: tuple[str, ...]):
    """Synthesize MCP tool definitions and write them as JSON."""
    synth = _load_synthesizer(doc_path)

    operations = filter_operations(build_operations(synth.doc), tag=tag, method=method, search=search)
    result = synth.synthesize(selected=selected or None, operations=operations)

    payload = json.dumps(result.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)
    if output is None:
        click.echo(payload)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    click.echo(f"Wrote {len(result.tools)} tools to {output}", err=True)


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
def summary(doc_path: Path):
    """Show endpoints, servers and security schemes of an OpenAPI document."""
    synth = _load_synthesizer(doc_path)

    operations = build_operations(synth.doc)
    result = synth.synthesize(operations=operations)

    endpoint_note = f"{len(operations)} endpoints" if operations else "No endpoints found"
    preselected = default_selection(operations)
    selection_note = f"{len(preselected)} selected" if preselected else "Select endpoints to import"
    webhook_note = " • Webhooks only" if has_only_webhooks(operations) else ""
    click.echo(f"{result.title} • {endpoint_note} • {selection_note}{webhook_note}")

    if result.servers:
        click.echo("Servers: " + ", ".join(result.servers))
    else:
        click.echo("No server URL detected in spec.")
    click.echo(format_scheme_summary(result.schemes))

    for tool in result.tools:
        auth = format_auth_summary(tool.auth)
        line = f"  {tool.endpoint.method.upper():7} {tool.endpoint.path}  ->  {tool.name}"
        click.echo(f"{line}  [{auth}]" if auth else line)
