"""
IntBase10 — публичный API

Каждый операнд может быть в любом поддерживаемом представлении (str, int,
numpy целое, запись {"p","n"}, SignedInteger). Результат возвращается в
представлении выбранного операнда:

- like=<значение>   — представление берётся у этого значения
                      (по умолчанию — первый операнд)
- encoding=Encoding — явное представление результата

Для Encoding.NATIVE dtype результата совпадает с dtype выбранного операнда.

Examples:
    >>> add("999999999999999999", "1")
    '1000000000000000000'
    >>> mul(568942, 1734982)
    987104129044
    >>> divmod_(-34, 5)
    DivMod(quotient=-7, remainder=1)
"""

import logging
from typing import Any, Optional

import numpy as np

from src.codec import (
    DEFAULT_CODEC_CONFIG,
    CodecConfig,
    Encoding,
    decode,
    detect_encoding,
    encode,
)
from src.core.domain import signed_integer as si
from src.core.domain.errors import DivisionByZero
from src.core.domain.signed_integer import DivMod, SignedInteger
from src.core.math.digit_sequence import Ordering

logger = logging.getLogger(__name__)

_FIRST = object()


def _output(
    result: SignedInteger,
    like: Any,
    encoding: Optional[Encoding],
    config: CodecConfig,
) -> Any:
    """
    Перекодирование результата в представление выбранного операнда.

    dtype для NATIVE берётся у like, если like — numpy целое, в том числе
    при явном encoding=Encoding.NATIVE; иначе config.default_native_dtype.
    """
    if encoding is None:
        encoding = detect_encoding(like)

    dtype = None
    if encoding is Encoding.NATIVE and isinstance(like, np.integer):
        dtype = like.dtype

    return encode(result, encoding, dtype=dtype, config=config)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def int_base10(
    value: Any,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> SignedInteger:
    """Конверсия значения любого представления в SignedInteger"""
    return decode(value, config)


def to_text(value: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> str:
    return encode(decode(value, config), Encoding.TEXT, config=config)


def to_int(value: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> int:
    return encode(decode(value, config), Encoding.BIGINT, config=config)


def to_native(
    value: Any,
    dtype: Optional[type] = None,
    *,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> np.integer:
    return encode(decode(value, config), Encoding.NATIVE, dtype=dtype, config=config)


def to_record(value: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> dict:
    return encode(decode(value, config), Encoding.RECORD, config=config)


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def _unary(
    op,
    x: Any,
    like: Any,
    encoding: Optional[Encoding],
    config: CodecConfig,
) -> Any:
    result = op(decode(x, config))
    return _output(result, x if like is _FIRST else like, encoding, config)


def neg(
    x: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """-x"""
    return _unary(si.negate, x, like, encoding, config)


def abs_(
    x: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """|x|"""
    return _unary(si.absolute, x, like, encoding, config)


def sgn(
    x: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """Знак x (-1, 0, 1) в представлении операнда"""
    return _unary(si.signum, x, like, encoding, config)


def inc(
    x: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """x + 1"""
    return _unary(si.increment, x, like, encoding, config)


def dec(
    x: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """x - 1"""
    return _unary(si.decrement, x, like, encoding, config)


# =============================================================================
# ПРЕДИКАТЫ И СРАВНЕНИЯ
# =============================================================================


def is_pos(x: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bool:
    return si.is_positive(decode(x, config))


def is_neg(x: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bool:
    return si.is_negative(decode(x, config))


def is_zero(x: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bool:
    return si.is_zero(decode(x, config))


def is_non_neg(x: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bool:
    return si.is_non_negative(decode(x, config))


def cmp(x: Any, y: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> Ordering:
    """Сравнение: Ordering.LT / EQ / GT"""
    return si.compare(decode(x, config), decode(y, config))


def eq(x: Any, y: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bool:
    return cmp(x, y, config=config) is Ordering.EQ


def gt(x: Any, y: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bool:
    return cmp(x, y, config=config) is Ordering.GT


def gte(x: Any, y: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bool:
    return cmp(x, y, config=config) is not Ordering.LT


def lt(x: Any, y: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bool:
    return cmp(x, y, config=config) is Ordering.LT


def lte(x: Any, y: Any, *, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> bool:
    return cmp(x, y, config=config) is not Ordering.GT


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def _binary(
    op,
    x: Any,
    y: Any,
    like: Any,
    encoding: Optional[Encoding],
    config: CodecConfig,
) -> Any:
    result = op(decode(x, config), decode(y, config))
    return _output(result, x if like is _FIRST else like, encoding, config)


def add(
    x: Any,
    y: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """x + y"""
    return _binary(si.add, x, y, like, encoding, config)


def sub(
    x: Any,
    y: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """x - y"""
    return _binary(si.subtract, x, y, like, encoding, config)


def mul(
    x: Any,
    y: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """x * y"""
    return _binary(si.multiply, x, y, like, encoding, config)


def divmod_(
    x: Any,
    y: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> DivMod:
    """
    Деление с остатком.

    Остаток всегда в [0, |y|). Оба компонента DivMod возвращаются в
    представлении выбранного операнда.

    Raises:
        DivisionByZero: Если y == 0
        MalformedInput: Невалидный операнд
    """
    dividend, divisor = decode(x, config), decode(y, config)
    try:
        quotient, remainder = si.divide_with_remainder(dividend, divisor)
    except DivisionByZero:
        logger.debug("division by zero: %s / %s", dividend, divisor)
        raise

    target = x if like is _FIRST else like
    return DivMod(
        _output(quotient, target, encoding, config),
        _output(remainder, target, encoding, config),
    )


def div(
    x: Any,
    y: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """Частное x / y (см. divmod_)"""
    return divmod_(x, y, like=like, encoding=encoding, config=config).quotient


def mod(
    x: Any,
    y: Any,
    *,
    like: Any = _FIRST,
    encoding: Optional[Encoding] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """Остаток x mod y (см. divmod_)"""
    return divmod_(x, y, like=like, encoding=encoding, config=config).remainder
