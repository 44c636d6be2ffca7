"""Server URL and security-scheme extraction.

Handles both OpenAPI 3 (`servers`, `components.securitySchemes`) and
Swagger 2 (`host`/`basePath`/`schemes`, `securityDefinitions`).
"""

from typing import Any

from .base import SchemeSummary, SchemeType


def get_servers(doc: dict[str, Any]) -> list[str]:
    """Return base server URLs in document order."""
    servers = doc.get("servers")
    if isinstance(servers, list):
        urls = [s.get("url") for s in servers if isinstance(s, dict)]
        urls = [u for u in urls if u]
        if urls:
            return urls

    if doc.get("swagger") and doc.get("host"):
        schemes = doc.get("schemes")
        if not isinstance(schemes, list) or not schemes:
            schemes = ["https"]
        base_path = doc.get("basePath") or ""
        return [f"{scheme}://{doc['host']}{base_path}" for scheme in schemes]

    return []


def get_scheme_definitions(doc: dict[str, Any]) -> dict[str, Any]:
    """Raw name -> scheme definition mapping (v3 first, then v2)."""
    components = doc.get("components")
    if isinstance(components, dict) and components.get("securitySchemes"):
        schemes = components["securitySchemes"]
    else:
        schemes = doc.get("securityDefinitions")
    return schemes if isinstance(schemes, dict) else {}


def flow_names(scheme: dict[str, Any]) -> list[str]:
    """OAuth2 flow names: v3 `flows` keys, or the single v2 `flow`."""
    flows = scheme.get("flows")
    if isinstance(flows, dict):
        return list(flows)
    if isinstance(scheme.get("flow"), str):
        return [scheme["flow"]]
    return []


def get_security_schemes(doc: dict[str, Any]) -> list[SchemeSummary]:
    summaries = []
    for name, scheme in get_scheme_definitions(doc).items():
        if not isinstance(scheme, dict):
            scheme = {}
        summaries.append(
            SchemeSummary(
                name=name,
                type=SchemeType(scheme.get("type")),
                in_=scheme.get("in") or None,
                scheme=scheme.get("scheme") or None,
                bearer_format=scheme.get("bearerFormat") or None,
                open_id_connect_url=scheme.get("openIdConnectUrl") or None,
                flows=flow_names(scheme),
            )
        )
    return summaries


def format_scheme_summary(schemes: list[SchemeSummary]) -> str:
    """One-line human summary of the document's security schemes."""
    if not schemes:
        return "No security schemes detected."

    parts = []
    for s in schemes:
        if s.type is SchemeType.API_KEY:
            parts.append(f"{s.name} (apiKey in {s.in_ or 'header'})")
        elif s.type is SchemeType.HTTP:
            parts.append(f"{s.name} (http {s.scheme or 'auth'})")
        elif s.type is SchemeType.OAUTH2:
            flow = f" {'/'.join(s.flows)}" if s.flows else ""
            parts.append(f"{s.name} (oauth2{flow})")
        elif s.type is SchemeType.OPEN_ID_CONNECT:
            parts.append(f"{s.name} (oidc)")
        else:
            parts.append(f"{s.name} ({s.type.value})")
    return "Security: " + " • ".join(parts)
