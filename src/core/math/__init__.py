"""
Core math modules для intbase10

Арифметика десятичных последовательностей цифр (модулей).
"""

from src.core.math.digit_sequence import (
    BASE,
    DIGIT_MAX,
    DIGIT_MIN,
    EMPTY,
    MUL_TABLE,
    PLUS_TABLE,
    Digits,
    Ordering,
    add,
    compare,
    complement,
    decrement,
    decrement_at,
    divmod_digits,
    from_int,
    increment,
    is_normalized,
    multiply,
    multiply_digit,
    normalize,
    parse_digits,
    serialize_digits,
    subtract,
    to_int,
)

__all__ = [
    # Constants
    "BASE",
    "DIGIT_MIN",
    "DIGIT_MAX",
    "EMPTY",
    "PLUS_TABLE",
    "MUL_TABLE",
    # Types
    "Digits",
    "Ordering",
    # Normalization
    "normalize",
    "is_normalized",
    "parse_digits",
    "serialize_digits",
    "from_int",
    "to_int",
    # Comparison
    "compare",
    # Arithmetic
    "increment",
    "decrement",
    "decrement_at",
    "add",
    "complement",
    "subtract",
    "multiply_digit",
    "multiply",
    "divmod_digits",
]
