"""Calculator operations exposed as registered tools."""

from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel, Field

from simplecalc.calculator import Number, add, divide, multiply, subtract
from simplecalc.registry import REGISTRY, register

Operation = Literal["add", "subtract", "multiply", "divide"]

OPERATIONS: dict[str, tuple[str, Callable[[Number, Number], Number]]] = {
    "add": ("+", add),
    "subtract": ("-", subtract),
    "multiply": ("*", multiply),
    "divide": ("/", divide),
}


class CalculationResult(BaseModel):
    """Result of a calculator operation."""

    result: int | float = Field(description="The calculated result")
    operation: Operation = Field(description="The operation that was performed")
    expression: str = Field(description="Human-readable expression (e.g., '5 + 3 = 8')")


def perform_calculation(operation: str, left: Number, right: Number) -> CalculationResult:
    """Perform the requested operation and describe it.

    Args:
        operation: Operation to perform
        left: Left operand
        right: Right operand

    Returns:
        CalculationResult with the computed value

    Raises:
        ValueError: For an unknown operation
        DivisionByZero: When dividing by zero
    """
    if operation not in OPERATIONS:
        raise ValueError(f"Unknown operation: {operation}")

    symbol, func = OPERATIONS[operation]
    result = func(left, right)
    return CalculationResult(
        result=result,
        operation=operation,
        expression=f"{left} {symbol} {right} = {result}",
    )


REGISTRY.register(add, tags=["arithmetic"])
REGISTRY.register(subtract, tags=["arithmetic"])
REGISTRY.register(multiply, tags=["arithmetic"])
REGISTRY.register(divide, tags=["arithmetic"])


@register(tags=["arithmetic"])
def calculator(operation: Operation, left: Number, right: Number) -> CalculationResult:
    """Perform a basic arithmetic operation on two numbers.

    Args:
        operation: Operation to perform (add, subtract, multiply, divide)
        left: Left operand (first number)
        right: Right operand (second number)

    Example usage: calculator("add", 5, 3) or calculator("divide", 20, 4)
    """
    return perform_calculation(operation, left, right)
