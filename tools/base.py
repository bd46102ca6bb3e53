"""
Tool base class and common types.

Every theory tool inherits from TheoryTool and implements execute().
This keeps one calling convention for the registry and the /tools HTTP
endpoints.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from core.theory.errors import TheoryError

# error_kind reported when a parameter is missing or has the wrong type
INVALID_PARAMETER = "InvalidToolParameter"


@dataclass(frozen=True)
class ToolParameter:
    """
    Tool parameter specification.

    Attributes:
        name: Parameter name
        type: Python type, or a tuple of accepted types, e.g. (str, int)
        description: Human-readable description
        required: Whether parameter is required
        default: Default value if not required
    """

    name: str
    type: type | tuple[type, ...]
    description: str
    required: bool = True
    default: Any = None

    @property
    def type_name(self) -> str:
        """Accepted type name(s), e.g. 'str' or 'str | int'."""
        types = self.type if isinstance(self.type, tuple) else (self.type,)
        return " | ".join(t.__name__ for t in types)

    def validate(self, value: Any) -> tuple[bool, str | None]:
        """
        Validate parameter value.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if value is None:
            if self.required:
                return False, f"Required parameter '{self.name}' is missing"
            return True, None

        if not isinstance(value, self.type):
            return (
                False,
                f"Parameter '{self.name}' must be {self.type_name}, got {type(value).__name__}",
            )

        return True, None


@dataclass(frozen=True)
class ToolResult:
    """
    Result from tool execution.

    Attributes:
        success: Whether execution succeeded
        data: Result data (dict, list, str, etc.)
        error: Error message if success=False
        metadata: Optional metadata; on a theory error this carries
            ``error_kind`` and the offending ``value``
    """

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] | None = None


class TheoryTool(ABC):
    """
    Abstract base class for all theory tools.

    Theory tools are deterministic wrappers around core/theory: they take
    plain strings, call the engine, and return JSON-friendly data.

    Subclasses must implement:
        - name: Unique tool identifier
        - description: What the tool computes
        - parameters: List of ToolParameter specs
        - execute(): Core tool logic

    Example:
        class NotesInKey(TheoryTool):
            @property
            def name(self) -> str:
                return "notes_in_key"

            def execute(self, **kwargs) -> ToolResult:
                return ToolResult(success=True, data={"notes": [...]})
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool identifier (lowercase, underscores)."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool computes."""

    @property
    @abstractmethod
    def parameters(self) -> list[ToolParameter]:
        """
        List of parameters this tool accepts.

        Order matters: GET /tools reports parameters in this order.
        """

    def validate_inputs(self, **kwargs) -> tuple[bool, str | None]:
        """
        Validate all input parameters.

        Returns:
            Tuple of (is_valid, error_message)
        """
        for param in self.parameters:
            value = kwargs.get(param.name)
            is_valid, error = param.validate(value)
            if not is_valid:
                return False, error

        return True, None

    @abstractmethod
    def execute(self, **kwargs) -> ToolResult:
        """
        Execute tool with validated parameters.

        May raise TheoryError; __call__ turns it into a failed ToolResult.
        """

    def __call__(self, **kwargs) -> ToolResult:
        """
        Execute tool with automatic validation.

        Parameter and theory errors are reported in the result rather than
        raised, with the error kind and offending value in ``metadata``.
        """
        is_valid, error = self.validate_inputs(**kwargs)
        if not is_valid:
            return ToolResult(
                success=False,
                error=error,
                metadata={"error_kind": INVALID_PARAMETER, "value": None},
            )

        try:
            return self.execute(**kwargs)
        except TheoryError as e:
            return ToolResult(
                success=False,
                error=e.message,
                metadata={"error_kind": e.kind, "value": e.value},
            )

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize tool for the GET /tools endpoint.

        Returns dict with name, description, parameters.
        """
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [
                {
                    "name": p.name,
                    "type": p.type_name,
                    "description": p.description,
                    "required": p.required,
                    "default": p.default,
                }
                for p in self.parameters
            ],
        }
