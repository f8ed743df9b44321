"""SimpleCalc - basic arithmetic with a tool registry and CLI."""

# Core arithmetic
from simplecalc.calculator import DivisionByZero, Number, add, divide, multiply, subtract

# Tool registry and schemas
from simplecalc.function_schema import FunctionDescription
from simplecalc.registry import REGISTRY, Registry, ToolError, register

# Importing tools populates REGISTRY
from simplecalc.tools import CalculationResult, calculator, perform_calculation

__all__ = [
    # Core arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "DivisionByZero",
    "Number",
    # Registry
    "register",
    "REGISTRY",
    "Registry",
    "ToolError",
    "FunctionDescription",
    # Tools
    "calculator",
    "perform_calculation",
    "CalculationResult",
]
