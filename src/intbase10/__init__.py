"""
IntBase10 — десятичная арифметика целых произвольной точности

Публичный API: конверсия, предикаты, сравнения и арифметика над операндами
в любом поддерживаемом представлении.
"""

from src.codec import CodecConfig, Encoding
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
)
from src.core.math.digit_sequence import Ordering
from src.intbase10.operations import (
    abs_,
    add,
    cmp,
    dec,
    div,
    divmod_,
    eq,
    gt,
    gte,
    inc,
    int_base10,
    is_neg,
    is_non_neg,
    is_pos,
    is_zero,
    lt,
    lte,
    mod,
    mul,
    neg,
    sgn,
    sub,
    to_int,
    to_native,
    to_record,
    to_text,
)

__all__ = [
    # Types
    "SignedInteger",
    "Zero",
    "Positive",
    "Negative",
    "DivMod",
    "Ordering",
    "Encoding",
    "CodecConfig",
    # Constants
    "ZERO",
    "ONE",
    "NEG_ONE",
    # Exceptions
    "IntBase10Error",
    "DivisionByZero",
    "MalformedInput",
    "OutOfRange",
    # Conversion
    "int_base10",
    "to_text",
    "to_int",
    "to_native",
    "to_record",
    # Unary
    "neg",
    "abs_",
    "sgn",
    "inc",
    "dec",
    # Predicates
    "is_pos",
    "is_neg",
    "is_zero",
    "is_non_neg",
    # Comparison
    "cmp",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "divmod_",
    "div",
    "mod",
]
