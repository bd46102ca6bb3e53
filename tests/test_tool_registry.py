"""
Tests for tool base class, registry and auto-discovery.
"""

import pytest

from core.theory.errors import InvalidDegree
from tools.base import TheoryTool, ToolParameter, ToolResult
from tools.registry import ToolRegistry, UnknownTool, get_registry


class SimpleTool(TheoryTool):
    """Simple tool for testing registry."""

    @property
    def name(self) -> str:
        return "simple_tool"

    @property
    def description(self) -> str:
        return "A simple test tool"

    @property
    def parameters(self) -> list[ToolParameter]:
        return [ToolParameter(name="key_name", type=str, description="Key name")]

    def execute(self, **kwargs) -> ToolResult:
        return ToolResult(success=True, data={"result": kwargs["key_name"]})


class FailingTool(TheoryTool):
    """Tool whose execute raises a theory error."""

    @property
    def name(self) -> str:
        return "failing_tool"

    @property
    def description(self) -> str:
        return "Always rejects its degree"

    @property
    def parameters(self) -> list[ToolParameter]:
        return []

    def execute(self, **kwargs) -> ToolResult:
        raise InvalidDegree("Chord degree must be in [1, 7], got 9", 9)


class TestTheoryTool:
    """Test validate-then-execute behaviour of TheoryTool.__call__."""

    def test_call_executes(self):
        result = SimpleTool()(key_name="C")
        assert result.success
        assert result.data == {"result": "C"}

    def test_missing_required_parameter(self):
        result = SimpleTool()()
        assert not result.success
        assert "missing" in result.error

    def test_wrong_parameter_type(self):
        result = SimpleTool()(key_name=5)
        assert not result.success
        assert "must be str" in result.error

    def test_theory_error_becomes_failed_result(self):
        result = FailingTool()()
        assert not result.success
        assert result.error == "Chord degree must be in [1, 7], got 9"
        assert result.metadata == {"error_kind": "InvalidDegree", "value": 9}

    def test_invalid_parameter_metadata(self):
        result = SimpleTool()(key_name=5)
        assert result.metadata == {"error_kind": "InvalidToolParameter", "value": None}

    def test_to_dict(self):
        spec = SimpleTool().to_dict()
        assert spec["name"] == "simple_tool"
        assert spec["parameters"][0] == {
            "name": "key_name",
            "type": "str",
            "description": "Key name",
            "required": True,
            "default": None,
        }


class TestToolParameter:
    """Test single and union parameter types."""

    def test_single_type_name(self):
        assert ToolParameter(name="k", type=str, description="").type_name == "str"

    def test_union_type_name(self):
        param = ToolParameter(name="degree", type=(str, int), description="")
        assert param.type_name == "str | int"

    def test_union_accepts_each_member(self):
        param = ToolParameter(name="degree", type=(str, int), description="")
        assert param.validate("vi") == (True, None)
        assert param.validate(6) == (True, None)

    def test_union_rejects_other_types(self):
        param = ToolParameter(name="degree", type=(str, int), description="")
        is_valid, error = param.validate(6.0)
        assert not is_valid
        assert error == "Parameter 'degree' must be str | int, got float"

    def test_optional_parameter_may_be_missing(self):
        param = ToolParameter(name="k", type=str, description="", required=False)
        assert param.validate(None) == (True, None)


class TestToolRegistry:
    """Test ToolRegistry registration and lookup."""

    def test_register_tool(self):
        """Should register a tool instance."""
        registry = ToolRegistry()
        registry.register(SimpleTool())

        assert len(registry) == 1
        assert "simple_tool" in registry

    def test_register_duplicate_raises(self):
        """Registering duplicate tool name should raise ValueError."""
        registry = ToolRegistry()
        registry.register(SimpleTool())

        with pytest.raises(ValueError, match="already registered"):
            registry.register(SimpleTool())

    def test_get_tool(self):
        """Should retrieve registered tool by name."""
        registry = ToolRegistry()
        registry.register(SimpleTool())

        retrieved = registry.get("simple_tool")

        assert retrieved is not None
        assert retrieved.name == "simple_tool"

    def test_get_nonexistent_tool(self):
        """Getting non-existent tool should return None."""
        assert ToolRegistry().get("nonexistent") is None

    def test_list_tools(self):
        """Should list all registered tools."""
        registry = ToolRegistry()
        registry.register(SimpleTool())
        registry.register(FailingTool())

        names = [t["name"] for t in registry.list_tools()]

        assert names == ["simple_tool", "failing_tool"]

    def test_names_in_registration_order(self):
        registry = ToolRegistry()
        registry.register(FailingTool())
        registry.register(SimpleTool())

        assert registry.names() == ["failing_tool", "simple_tool"]

    def test_call_runs_tool(self):
        registry = ToolRegistry()
        registry.register(SimpleTool())

        result = registry.call("simple_tool", key_name="Eb")

        assert result.success
        assert result.data == {"result": "Eb"}

    def test_call_accepts_name_parameter(self):
        """A tool parameter called ``name`` does not clash with the tool name."""
        registry = ToolRegistry()
        registry.register(SimpleTool())

        result = registry.call("simple_tool", key_name="C", name="ignored")

        assert result.success

    def test_call_returns_failed_result(self):
        registry = ToolRegistry()
        registry.register(FailingTool())

        result = registry.call("failing_tool")

        assert not result.success
        assert result.metadata["error_kind"] == "InvalidDegree"

    def test_call_unknown_tool_raises(self):
        registry = ToolRegistry()
        registry.register(SimpleTool())

        with pytest.raises(UnknownTool) as exc_info:
            registry.call("nope")

        assert exc_info.value.name == "nope"
        assert exc_info.value.available == ["simple_tool"]
        assert "simple_tool" in str(exc_info.value)

    def test_contains(self):
        """Should check if tool is registered."""
        registry = ToolRegistry()
        registry.register(SimpleTool())

        assert "simple_tool" in registry
        assert "nonexistent" not in registry


class TestToolRegistryDiscovery:
    """Test auto-discovery of tools."""

    def test_discover_real_tools(self):
        """Should discover the four theory tools in tools/music/."""
        registry = ToolRegistry()

        count = registry.discover()

        assert count == 4
        for name in ("notes_in_key", "notes_in_chord", "major_keys", "minor_keys"):
            assert name in registry

    def test_discover_skips_non_tool_modules(self):
        """Scanning the top-level package finds no tools defined there."""
        registry = ToolRegistry()

        assert registry.discover("tools") == 0

    def test_discover_nonexistent_package(self):
        """Discovery on non-existent package should return 0."""
        registry = ToolRegistry()

        count = registry.discover("nonexistent_package")

        assert count == 0
        assert len(registry) == 0

    def test_global_registry_is_singleton(self):
        assert get_registry() is get_registry()
        assert "notes_in_chord" in get_registry()
