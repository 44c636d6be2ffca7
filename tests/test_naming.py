from openapi_mcp_tools.generator.naming import ToolNameRegistry, build_tool_name, sanitize_tool_name
from openapi_mcp_tools.parser.base import Operation


def _op(method="get", path="/pets", operation_id="") -> Operation:
    return Operation(
        id=f"PATH {method.upper()} {path}",
        method=method,
        path=path,
        tags=["default"],
        operation_id=operation_id,
    )


class TestBuildToolName:
    def test_uses_operation_id(self):
        assert build_tool_name(_op(operation_id="listPets")) == "listpets"

    def test_falls_back_to_method_and_path(self):
        assert build_tool_name(_op(path="/pets/{id}")) == "get__pets_id"

    def test_sanitizes_punctuation(self):
        assert build_tool_name(_op(operation_id="List-Items (v2)!")) == "list_items_v2"

    def test_empty_result_falls_back(self):
        assert sanitize_tool_name("{}/--", "get") == "tool_get"

    def test_non_ascii_is_replaced(self):
        assert sanitize_tool_name("café_list", "get") == "caf_list"


class TestToolNameRegistry:
    def test_collision_gets_suffix(self):
        names = ToolNameRegistry()
        assert names.claim("list_items") == "list_items"
        assert names.claim("list_items") == "list_items_2"
        assert names.claim("list_items") == "list_items_3"

    def test_skips_taken_suffixes(self):
        names = ToolNameRegistry(["list_items", "list_items_2"])
        assert names.claim("list_items") == "list_items_3"
        assert "list_items_3" in names

    def test_independent_registries(self):
        assert ToolNameRegistry().claim("a") == "a"
        assert ToolNameRegistry().claim("a") == "a"
