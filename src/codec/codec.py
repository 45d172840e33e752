"""
Codec — Конверсия между SignedInteger и внешними представлениями

Поддерживаемые представления (Encoding):
- TEXT       — десятичная строка с необязательным ведущим '+'/'-'
- NATIVE     — numpy целое фиксированной ширины (np.int8 ... np.uint64)
- BIGINT     — int Python (произвольная точность)
- RECORD     — запись {"p": [...], "n": [...]} (контракт int_base10)
- INTBASE10  — сам SignedInteger (тождественная конверсия)

Каноническая строка: '-' только для отрицательных, без ведущих нулей,
ровно "0" для нуля, никогда '+'.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

import numpy as np

from src.codec.config import DEFAULT_CODEC_CONFIG, CodecConfig
from src.core.contracts import validate_int_record
from src.core.domain.errors import MalformedInput, OutOfRange
from src.core.domain.signed_integer import (
    Negative,
    Positive,
    SignedInteger,
    Zero,
    magnitude_of,
    make,
    sign,
)
from src.core.math import digit_sequence as ds

logger = logging.getLogger(__name__)


class Encoding(str, Enum):
    """Внешнее представление целого"""

    TEXT = "text"
    NATIVE = "native"
    BIGINT = "bigint"
    RECORD = "record"
    INTBASE10 = "intbase10"


# =============================================================================
# ОПРЕДЕЛЕНИЕ ПРЕДСТАВЛЕНИЯ
# =============================================================================


def detect_encoding(value: Any) -> Encoding:
    """
    Определение внешнего представления операнда.

    Raises:
        MalformedInput: Для bool и неподдерживаемых типов
    """
    if isinstance(value, (bool, np.bool_)):
        logger.debug("rejected boolean operand %r", value)
        raise MalformedInput(f"boolean is not an integer operand: {value!r}")
    if isinstance(value, (Zero, Positive, Negative)):
        return Encoding.INTBASE10
    if isinstance(value, np.integer):
        return Encoding.NATIVE
    if isinstance(value, int):
        return Encoding.BIGINT
    if isinstance(value, str):
        return Encoding.TEXT
    if isinstance(value, Mapping):
        return Encoding.RECORD

    logger.debug("rejected operand of unsupported type %s", type(value).__name__)
    raise MalformedInput(f"unsupported operand type: {type(value).__name__}")


# =============================================================================
# TEXT
# =============================================================================


def parse_text(
    text: str,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> SignedInteger:
    """
    Разбор десятичной строки.

    Args:
        text: Необязательный знак и хотя бы одна ASCII-цифра
        config: Конфигурация кодека

    Returns:
        SignedInteger; "-0", "+0", "0", "000" → Zero

    Raises:
        MalformedInput: Пустая строка, только знак, пробелы, не-ASCII цифры
            или любые другие символы

    Examples:
        >>> str(parse_text("-0042"))
        '-42'
    """
    body = text
    negative = False

    if body[:1] == "-":
        negative, body = True, body[1:]
    elif body[:1] == "+" and config.accept_leading_plus:
        body = body[1:]

    if not body:
        logger.debug("rejected text %r: no digits", text)
        raise MalformedInput(f"no digits in decimal text: {text!r}")

    try:
        digits = ds.parse_digits(body)
    except ValueError as e:
        logger.debug("rejected text %r: %s", text, e)
        raise MalformedInput(f"malformed decimal text {text!r}: {e}") from e

    return make(negative, digits)


def to_text(x: SignedInteger) -> str:
    """Каноническая десятичная строка"""
    return str(x)


# =============================================================================
# BIGINT / NATIVE
# =============================================================================


def from_int(n: int) -> SignedInteger:
    """Конверсия int Python (точная)"""
    return make(n < 0, ds.from_int(abs(n)))


def to_int(x: SignedInteger) -> int:
    """Конверсия в int Python (точная)"""
    return sign(x) * ds.to_int(magnitude_of(x))


def from_native(value: np.integer) -> SignedInteger:
    """Конверсия numpy целого фиксированной ширины (точная)"""
    return from_int(int(value))


def to_native(
    x: SignedInteger,
    dtype: Optional[type] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> np.integer:
    """
    Конверсия в numpy целое фиксированной ширины.

    Args:
        x: Значение
        dtype: numpy целочисленный тип (default: config.default_native_dtype)

    Raises:
        OutOfRange: Если значение вне диапазона np.iinfo(dtype)
    """
    dtype = np.dtype(dtype if dtype is not None else config.default_native_dtype)
    info = np.iinfo(dtype)
    value = to_int(x)

    if not info.min <= value <= info.max:
        logger.debug("value %s does not fit %s", x, dtype.name)
        raise OutOfRange(
            f"{x} is out of range for {dtype.name} [{info.min}, {info.max}]"
        )

    return dtype.type(value)


# =============================================================================
# RECORD
# =============================================================================


def _plain_digits(value: Any) -> Any:
    """Список цифр с numpy целыми, приведёнными к int; прочее без изменений"""
    if isinstance(value, (list, tuple)):
        return [int(d) if isinstance(d, np.integer) else d for d in value]
    return value


def from_record(record: Mapping) -> SignedInteger:
    """
    Конверсия записи {"p": [...], "n": [...]}.

    Цифры могут быть int или numpy целыми; списки и кортежи равноправны.

    Raises:
        MalformedInput: Если запись нарушает контракт int_base10 (в сообщении
            перечислены все нарушения)
    """
    data = {key: _plain_digits(value) for key, value in record.items()}

    problems = validate_int_record(data)
    if problems:
        logger.debug("rejected record %r: %s", data, problems)
        raise MalformedInput(f"malformed int_base10 record: {'; '.join(problems)}")

    if data["n"]:
        return make(True, tuple(int(d) for d in data["n"]))
    return make(False, tuple(int(d) for d in data["p"]))


def to_record(x: SignedInteger) -> dict:
    """Запись {"p": [...], "n": [...]}"""
    if isinstance(x, Zero):
        return {"p": [], "n": []}
    if isinstance(x, Positive):
        return {"p": list(x.magnitude), "n": []}
    if isinstance(x, Negative):
        return {"p": [], "n": list(x.magnitude)}
    raise TypeError(f"unknown SignedInteger variant: {type(x).__name__}")


# =============================================================================
# DECODE / ENCODE
# =============================================================================


def decode(
    value: Any,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> SignedInteger:
    """
    Конверсия операнда любого поддерживаемого представления в SignedInteger.

    Raises:
        MalformedInput: Невалидный или неподдерживаемый операнд
    """
    encoding = detect_encoding(value)

    if encoding is Encoding.INTBASE10:
        return value
    if encoding is Encoding.TEXT:
        return parse_text(value, config)
    if encoding is Encoding.BIGINT:
        return from_int(value)
    if encoding is Encoding.NATIVE:
        return from_native(value)
    if encoding is Encoding.RECORD:
        return from_record(value)
    raise AssertionError(f"unhandled encoding: {encoding}")


def encode(
    x: SignedInteger,
    encoding: Encoding,
    *,
    dtype: Optional[type] = None,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> Any:
    """
    Конверсия SignedInteger в заданное представление.

    Args:
        x: Значение
        encoding: Целевое представление
        dtype: numpy тип для Encoding.NATIVE

    Raises:
        OutOfRange: Значение не помещается в dtype (только NATIVE)
    """
    if encoding is Encoding.INTBASE10:
        return x
    if encoding is Encoding.TEXT:
        return to_text(x)
    if encoding is Encoding.BIGINT:
        return to_int(x)
    if encoding is Encoding.NATIVE:
        return to_native(x, dtype, config)
    if encoding is Encoding.RECORD:
        return to_record(x)
    raise AssertionError(f"unhandled encoding: {encoding}")
