"""Basic arithmetic over two numeric operands."""

Number = int | float


class DivisionByZero(ZeroDivisionError):
    """Raised by divide() when the divisor is zero."""


def add(a: Number, b: Number) -> Number:
    """Add two numbers.

    Args:
        a: Left operand
        b: Right operand

    Returns:
        The sum a + b
    """
    return a + b


def subtract(a: Number, b: Number) -> Number:
    """Subtract one number from another.

    Args:
        a: Number to subtract from
        b: Number to subtract

    Returns:
        The difference a - b
    """
    return a - b


def multiply(a: Number, b: Number) -> Number:
    """Multiply two numbers.

    Args:
        a: Left operand
        b: Right operand

    Returns:
        The product a * b
    """
    return a * b


def divide(a: Number, b: Number) -> float:
    """Divide one number by another.

    The quotient is always a float, even when the division is exact.

    Args:
        a: Dividend
        b: Divisor, must be nonzero

    Returns:
        The quotient a / b

    Raises:
        DivisionByZero: If b is zero
    """
    if b == 0:
        raise DivisionByZero(f"Cannot divide {a} by zero")
    return float(a / b)
