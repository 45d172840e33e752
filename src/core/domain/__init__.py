"""
Domain models and value objects.

Целое со знаком (Zero | Positive | Negative) и исключения.
"""

from src.core.domain.errors import (
    DivisionByZero,
    IntBase10Error,
    MalformedInput,
    OutOfRange,
)
from src.core.domain.signed_integer import (
    NEG_ONE,
    ONE,
    ZERO,
    DivMod,
    Negative,
    Positive,
    SignedInteger,
    Zero,
    absolute,
    add,
    compare,
    decrement,
    divide,
    divide_with_remainder,
    equals,
    greater,
    greater_equal,
    increment,
    is_negative,
    is_non_negative,
    is_positive,
    is_zero,
    less,
    less_equal,
    magnitude_of,
    make,
    modulo,
    multiply,
    negate,
    sign,
    signum,
    subtract,
)

__all__ = [
    # Exceptions
    "IntBase10Error",
    "DivisionByZero",
    "MalformedInput",
    "OutOfRange",
    # Models
    "SignedInteger",
    "Zero",
    "Positive",
    "Negative",
    "DivMod",
    # Constants
    "ZERO",
    "ONE",
    "NEG_ONE",
    # Constructors
    "make",
    "magnitude_of",
    # Sign
    "negate",
    "absolute",
    "sign",
    "signum",
    "is_positive",
    "is_negative",
    "is_zero",
    "is_non_negative",
    # Increment / decrement
    "increment",
    "decrement",
    # Comparison
    "compare",
    "equals",
    "greater",
    "greater_equal",
    "less",
    "less_equal",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide_with_remainder",
    "divide",
    "modulo",
]
