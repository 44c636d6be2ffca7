"""Security requirement resolution.

OpenAPI `security` is an OR-list of AND-maps. An operation's effective
requirement is reduced to a required flag plus the schemes it mentions.
"""

from typing import Any

from openapi_mcp_tools.parser.base import AuthRequirement, Operation, ResolvedScheme, SchemeType
from openapi_mcp_tools.parser.servers import flow_names, get_scheme_definitions


def resolve_auth(doc: dict[str, Any], op: Operation) -> AuthRequirement | None:
    """Resolve the authentication an operation needs.

    Returns None when the operation models no authentication at all, or when
    it is fully anonymous. An empty `{}` alternative anywhere in the OR-list
    makes authentication optional. When a scheme shows up in several
    alternatives only its first scopes are kept.
    """
    security = op.security if op.security is not None else doc.get("security")
    if not isinstance(security, list) or not security:
        return None

    definitions = get_scheme_definitions(doc)
    found: list[ResolvedScheme] = []
    seen: set[str] = set()
    allow_anonymous = False

    for requirement in security:
        if not isinstance(requirement, dict):
            continue
        if not requirement:
            allow_anonymous = True
            continue

        for name, scopes in requirement.items():
            if name in seen:
                continue
            seen.add(name)
            found.append(_resolve_scheme(name, scopes, definitions.get(name)))

    if not found and allow_anonymous:
        return None
    return AuthRequirement(required=not allow_anonymous, schemes=found)


def _resolve_scheme(name: str, scopes: Any, scheme: Any) -> ResolvedScheme:
    if not isinstance(scheme, dict):
        scheme = {}
    scheme_type = SchemeType(scheme.get("type"))

    flows = None
    if scheme_type is SchemeType.OAUTH2 and (scheme.get("flows") or scheme.get("flow")):
        flows = flow_names(scheme)

    return ResolvedScheme(
        name=name,
        type=scheme_type,
        in_=scheme.get("in") or None,
        scheme=scheme.get("scheme") or None,
        bearer_format=scheme.get("bearerFormat") or None,
        open_id_connect_url=scheme.get("openIdConnectUrl") or None,
        scopes=[str(s) for s in scopes] if isinstance(scopes, list) else [],
        description=scheme.get("description") or "",
        flows=flows,
    )


def format_auth_summary(auth: AuthRequirement | None) -> str:
    """Short label such as 'apiKey(header:ApiKeyAuth) (optional)'."""
    if auth is None:
        return ""
    if not auth.schemes:
        return "required" if auth.required else "optional"

    parts = []
    for s in auth.schemes:
        if s.type is SchemeType.API_KEY:
            parts.append(f"apiKey({s.in_ or 'header'}:{s.name})")
        elif s.type is SchemeType.HTTP:
            parts.append(f"http({s.scheme or 'auth'})")
        elif s.type is SchemeType.OAUTH2:
            flow = f":{','.join(s.flows)}" if s.flows else ""
            parts.append(f"oauth2{flow}")
        elif s.type is SchemeType.OPEN_ID_CONNECT:
            parts.append("oidc")
        else:
            parts.append(s.name)

    label = ", ".join(parts)
    return label if auth.required else f"{label} (optional)"
