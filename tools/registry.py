"""
Tool registry for the theory tools.

Concrete TheoryTool subclasses living under ``tools.music`` are found by
walking the package, instantiated once, and looked up by name. ``call``
is the single entry point the HTTP layer uses: it raises UnknownTool for
a name nobody registered and otherwise returns the tool's ToolResult.
"""

import importlib
import inspect
import logging
import pkgutil

from tools.base import TheoryTool, ToolResult

logger = logging.getLogger(__name__)

TOOLS_PACKAGE = "tools.music"


class UnknownTool(LookupError):
    """No tool is registered under the requested name."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown tool {name!r}, available: {', '.join(available)}")


class ToolRegistry:
    """
    Name → TheoryTool lookup.

    Usage:
        registry = ToolRegistry()
        registry.discover()
        result = registry.call("notes_in_chord", key_name="C", degree="vi")
    """

    def __init__(self) -> None:
        self._tools: dict[str, TheoryTool] = {}

    def register(self, tool: TheoryTool) -> None:
        """
        Register a tool instance.

        Raises:
            ValueError: If tool with same name already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> TheoryTool | None:
        return self._tools.get(name)

    def names(self) -> list[str]:
        """Registered tool names in registration order."""
        return list(self._tools)

    def list_tools(self) -> list[dict]:
        return [tool.to_dict() for tool in self._tools.values()]

    def call(self, name: str, /, **params) -> ToolResult:
        """
        Run the named tool with keyword parameters.

        Raises:
            UnknownTool: if ``name`` is not registered
        """
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownTool(name, self.names())
        result = tool(**params)
        if not result.success:
            logger.debug("Tool %s failed: %s", name, result.error)
        return result

    def discover(self, package_name: str = TOOLS_PACKAGE) -> int:
        """
        Register every concrete TheoryTool defined in ``package_name``.

        Classes imported into a module from elsewhere are skipped, so a
        tool is registered once, by the module that defines it.

        Returns:
            Number of tools discovered
        """
        try:
            package = importlib.import_module(package_name)
        except ImportError:
            logger.warning("Tool package %r could not be imported", package_name)
            return 0

        count = 0
        search_path = getattr(package, "__path__", [])
        for module_info in pkgutil.iter_modules(search_path, prefix=f"{package_name}."):
            module = importlib.import_module(module_info.name)
            for _name, obj in inspect.getmembers(module, inspect.isclass):
                if (
                    issubclass(obj, TheoryTool)
                    and obj.__module__ == module_info.name
                    and not inspect.isabstract(obj)
                ):
                    self.register(obj())
                    count += 1

        logger.debug("Discovered %d tool(s) in %s", count, package_name)
        return count

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools


_registry: ToolRegistry | None = None


def get_registry() -> ToolRegistry:
    """Process-wide registry, discovered on first use."""
    global _registry
    if _registry is None:
        _registry = ToolRegistry()
        _registry.discover()
    return _registry
