from openapi_mcp_tools.generator.security import format_auth_summary, resolve_auth
from openapi_mcp_tools.parser.base import AuthRequirement, Operation, ResolvedScheme, SchemeType

API_KEY_SCHEMES = {
    "components": {
        "securitySchemes": {
            "ApiKeyAuth": {"type": "apiKey", "in": "header", "name": "X-Key"},
            "BearerAuth": {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"},
            "OAuth": {
                "type": "oauth2",
                "description": "OAuth login",
                "flows": {"authorizationCode": {}, "clientCredentials": {}},
            },
        }
    }
}


def _op(security=None) -> Operation:
    return Operation(id="PATH GET /x", method="get", path="/x", tags=["default"], security=security)


def _doc(security=None) -> dict:
    doc = {"openapi": "3.0.0", **API_KEY_SCHEMES}
    if security is not None:
        doc["security"] = security
    return doc


class TestResolveAuth:
    def test_anonymous_alternative_makes_auth_optional(self):
        auth = resolve_auth(_doc([{}, {"ApiKeyAuth": []}]), _op())
        assert auth.required is False
        assert len(auth.schemes) == 1
        scheme = auth.schemes[0]
        assert scheme.name == "ApiKeyAuth"
        assert scheme.type is SchemeType.API_KEY
        assert scheme.in_ == "header"
        assert scheme.scopes == []

    def test_no_security_anywhere(self):
        assert resolve_auth(_doc(), _op()) is None

    def test_explicit_empty_operation_security(self):
        assert resolve_auth(_doc([{"ApiKeyAuth": []}]), _op(security=[])) is None

    def test_operation_security_overrides_global(self):
        auth = resolve_auth(_doc([{"ApiKeyAuth": []}]), _op(security=[{"BearerAuth": []}]))
        assert [s.name for s in auth.schemes] == ["BearerAuth"]
        assert auth.schemes[0].bearer_format == "JWT"
        assert auth.required is True

    def test_only_anonymous_is_none(self):
        assert resolve_auth(_doc([{}]), _op()) is None

    def test_first_occurrence_wins(self):
        security = [{"OAuth": ["read"]}, {"OAuth": ["read", "write"], "ApiKeyAuth": []}]
        auth = resolve_auth(_doc(security), _op())
        assert [s.name for s in auth.schemes] == ["OAuth", "ApiKeyAuth"]
        assert auth.schemes[0].scopes == ["read"]

    def test_oauth_flows_and_description(self):
        auth = resolve_auth(_doc([{"OAuth": ["read"]}]), _op())
        scheme = auth.schemes[0]
        assert scheme.flows == ["authorizationCode", "clientCredentials"]
        assert scheme.description == "OAuth login"

    def test_flows_only_for_oauth2(self):
        auth = resolve_auth(_doc([{"ApiKeyAuth": []}]), _op())
        assert auth.schemes[0].flows is None

    def test_undefined_scheme_is_custom(self):
        auth = resolve_auth(_doc([{"Mystery": "not-a-list"}]), _op())
        assert auth.schemes[0].type is SchemeType.CUSTOM
        assert auth.schemes[0].in_ is None
        assert auth.schemes[0].scopes == []

    def test_swagger2_definitions_resolve(self):
        doc = {"swagger": "2.0", "securityDefinitions": {"key": {"type": "apiKey", "in": "query"}}}
        auth = resolve_auth(doc, _op(security=[{"key": []}]))
        assert auth.schemes[0].in_ == "query"

    def test_malformed_global_security(self):
        doc = _doc()
        doc["security"] = {"ApiKeyAuth": []}
        assert resolve_auth(doc, _op()) is None

    def test_non_mapping_alternatives_ignored(self):
        auth = resolve_auth(_doc(["oops", {"ApiKeyAuth": []}]), _op())
        assert auth.required is True
        assert [s.name for s in auth.schemes] == ["ApiKeyAuth"]


class TestFormatAuthSummary:
    def test_none(self):
        assert format_auth_summary(None) == ""

    def test_without_schemes(self):
        assert format_auth_summary(AuthRequirement(required=True, schemes=[])) == "required"
        assert format_auth_summary(AuthRequirement(required=False, schemes=[])) == "optional"

    def test_labels(self):
        auth = AuthRequirement(
            required=False,
            schemes=[
                ResolvedScheme(name="key", type=SchemeType.API_KEY, in_="query"),
                ResolvedScheme(name="jwt", type=SchemeType.HTTP, scheme="bearer"),
                ResolvedScheme(name="o", type=SchemeType.OAUTH2, flows=["implicit"]),
                ResolvedScheme(name="id", type=SchemeType.OPEN_ID_CONNECT),
                ResolvedScheme(name="Other", type=SchemeType.CUSTOM),
            ],
        )
        assert format_auth_summary(auth) == (
            "apiKey(query:key), http(bearer), oauth2:implicit, oidc, Other (optional)"
        )
