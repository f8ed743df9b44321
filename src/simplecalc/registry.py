"""Global registry for calculator tools."""

import logging
from collections import OrderedDict
from collections.abc import Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from pydantic import BaseModel, Field, ValidationError

from simplecalc.function_schema import FunctionDescription, JSONSchema

logger = logging.getLogger(__name__)


class ToolError(BaseModel):
    """Failure reported by Registry.call in place of a result."""

    error: str = Field(description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Extra error context")


class Registry:
    """Registry of tools with validated execution."""

    def __init__(self):
        self._tools: dict[str, FunctionDescription] = OrderedDict()

    def register(
        self,
        func: Callable,
        name: str | None = None,
        doc_override: str | None = None,
        description: str = "",
        tags: list[str] | None = None,
    ) -> None:
        """Register a tool function and generate its schema.

        Args:
            func: Function to register
            name: Override for the tool name
            doc_override: Optional documentation override
            description: Tool description
            tags: List of tags for categorization
        """
        name = name or func.__name__

        if name in self._tools:
            logger.debug(f"Tool {name} already registered, skipping")
            return

        self._tools[name] = FunctionDescription(
            func,
            name=name,
            doc_override=doc_override,
            description=description,
            tags=tags,
        )
        logger.debug(f"Registered tool: {name}")

    @property
    def functions(self) -> list[FunctionDescription]:
        """Get all registered tool descriptions."""
        return list(self._tools.values())

    def get_description(self, name: str) -> FunctionDescription | None:
        """Get a tool description by name."""
        return self._tools.get(name)

    def get_function(self, name: str) -> Callable[..., Any]:
        """Get the raw function by name."""
        func_desc = self._tools.get(name)
        if func_desc is None:
            raise KeyError(f"Tool '{name}' not found")
        return func_desc.function

    def get_schemas(self) -> list[JSONSchema]:
        """Get OpenAI-format schemas for all tools."""
        return [func_desc.function_schema for func_desc in self._tools.values()]

    def call(self, name: str, arguments: dict[str, Any]) -> Any:
        """Validate arguments and execute a tool.

        Args:
            name: Registered tool name
            arguments: JSON-style argument object

        Returns:
            The tool's result, or a ToolError describing why the call failed
        """
        func_desc = self._tools.get(name)
        if func_desc is None:
            logger.warning(f"Call to unknown tool: {name}")
            return ToolError(error=f"Tool '{name}' not found")

        try:
            parsed_args = func_desc.validate_and_parse_args(arguments)
        except ValidationError as e:
            logger.warning(f"Invalid arguments for {name}: {e}")
            return ToolError(
                error=f"Invalid arguments: {e}",
                details={"errors": e.errors(include_url=False, include_context=False)},
            )

        try:
            return func_desc.call(**parsed_args)
        except Exception as e:
            logger.warning(f"Tool {name} failed: {e}")
            return ToolError(error=str(e), details={"type": type(e).__name__})


# Global registry instance
REGISTRY = Registry()

P = ParamSpec("P")
T = TypeVar("T")


def register(
    *,
    doc: str | None = None,
    name: str | None = None,
    description: str = "",
    tags: list[str] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Register a function as a tool in the global REGISTRY.

    Usage:
        @register()
        def my_tool(...): ...

        @register(name="custom_name", description="Tool description", tags=["arithmetic"])
        def my_tool(...): ...

    Args:
        doc: Override docstring
        name: Override tool name
        description: Tool description
        tags: List of tags for categorization
    """
    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return func(*args, **kwargs)

        if name:
            wrapper.__name__ = name
        REGISTRY.register(wrapper, name=name, doc_override=doc, description=description, tags=tags)
        return wrapper

    return decorator
