"""
DigitSequence — Десятичные последовательности цифр

Модуль реализует арифметику над модулями (magnitude) произвольной длины,
представленными как big-endian кортежи десятичных цифр:
- Нормализация (удаление ведущих нулей)
- Сравнение, инкремент/декремент
- Сложение и вычитание через дополнение до 10 (ten's complement)
- Умножение столбиком (schoolbook)
- Деление столбиком с остатком (long division)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность либо пуста (модуль 0), либо начинается с ненулевой цифры
2. Все функции чистые: вход не модифицируется, возвращается новый кортеж
3. Все результаты нормализованы
4. Нарушение предусловий (subtract при a < b, деление на пустую
   последовательность) — ошибка программиста → ValueError
"""

from enum import IntEnum
from typing import Final

Digits = tuple[int, ...]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

BASE: Final[int] = 10
DIGIT_MIN: Final[int] = 0
DIGIT_MAX: Final[int] = 9

EMPTY: Final[Digits] = ()

# Таблица сложения: PLUS_TABLE[x][y] = (carry, digit) для x in [0, 10], y in [0, 9]
# Строка 10 используется, когда к цифре x=9 уже прибавлен входящий перенос
PLUS_TABLE: Final[tuple[tuple[tuple[int, int], ...], ...]] = tuple(
    tuple(divmod(x + y, BASE) for y in range(BASE)) for x in range(BASE + 1)
)

# Таблица умножения: MUL_TABLE[x][y] = (high, low) для x, y in [0, 9]
MUL_TABLE: Final[tuple[tuple[tuple[int, int], ...], ...]] = tuple(
    tuple(divmod(x * y, BASE) for y in range(BASE)) for x in range(BASE)
)


class Ordering(IntEnum):
    """Результат сравнения"""

    LT = -1
    EQ = 0
    GT = 1


# =============================================================================
# НОРМАЛИЗАЦИЯ И ВАЛИДАЦИЯ
# =============================================================================


def normalize(seq: Digits) -> Digits:
    """
    Удаление ведущих нулей.

    Args:
        seq: Последовательность цифр (возможно с ведущими нулями)

    Returns:
        Нормализованная последовательность; () если все цифры нулевые

    Examples:
        >>> normalize((0, 0, 1, 2))
        (1, 2)
        >>> normalize((0, 0))
        ()
    """
    for index, digit in enumerate(seq):
        if digit != 0:
            return tuple(seq[index:])
    return EMPTY


def is_normalized(seq: Digits) -> bool:
    """Проверка инварианта: только цифры 0-9 и нет ведущего нуля"""
    if any(not DIGIT_MIN <= d <= DIGIT_MAX for d in seq):
        return False
    return len(seq) == 0 or seq[0] != 0


def parse_digits(text: str) -> Digits:
    """
    Разбор строки из ASCII-цифр в последовательность (без нормализации).

    Raises:
        ValueError: Если строка содержит что-то кроме '0'-'9'
    """
    digits = []
    for ch in text:
        if not "0" <= ch <= "9":
            raise ValueError(f"not a decimal digit: {ch!r}")
        digits.append(ord(ch) - ord("0"))
    return tuple(digits)


def serialize_digits(seq: Digits) -> str:
    """Сериализация последовательности цифр в строку (() → '')"""
    return "".join(str(d) for d in seq)


# Размер блока для конверсии int <-> digits; блоками обходим лимит
# sys.get_int_max_str_digits() на str(int) / int(str)
_CHUNK_DIGITS: Final[int] = 18
_CHUNK_BASE: Final[int] = BASE**_CHUNK_DIGITS


def from_int(n: int) -> Digits:
    """
    Модуль неотрицательного int как последовательность цифр.

    Raises:
        ValueError: Если n < 0
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    chunks = []
    while n:
        n, chunk = divmod(n, _CHUNK_BASE)
        chunks.append(f"{chunk:0{_CHUNK_DIGITS}d}")

    return normalize(parse_digits("".join(reversed(chunks))))


def to_int(seq: Digits) -> int:
    """Значение последовательности цифр как int (() → 0)"""
    value = 0
    head = len(seq) % _CHUNK_DIGITS
    if head:
        value = int(serialize_digits(seq[:head]))
    for start in range(head, len(seq), _CHUNK_DIGITS):
        chunk = serialize_digits(seq[start : start + _CHUNK_DIGITS])
        value = value * _CHUNK_BASE + int(chunk)
    return value


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare(a: Digits, b: Digits) -> Ordering:
    """
    Сравнение двух нормализованных последовательностей.

    Более длинная последовательность больше. При равной длине решает первая
    различающаяся цифра начиная со старшей.

    Examples:
        >>> compare((1, 0), (9,))
        <Ordering.GT: 1>
        >>> compare((1, 2), (1, 3))
        <Ordering.LT: -1>
    """
    if len(a) != len(b):
        return Ordering.GT if len(a) > len(b) else Ordering.LT

    for x, y in zip(a, b):
        if x != y:
            return Ordering.GT if x > y else Ordering.LT

    return Ordering.EQ


# =============================================================================
# ИНКРЕМЕНТ / ДЕКРЕМЕНТ
# =============================================================================


def increment(seq: Digits) -> Digits:
    """
    Прибавление 1.

    Перенос распространяется от младшей цифры (9 → 0); если перенос выходит
    за старшую цифру, в начало добавляется 1.

    Examples:
        >>> increment(())
        (1,)
        >>> increment((9, 9))
        (1, 0, 0)
    """
    digits = list(seq)
    index = len(digits) - 1

    while index >= 0 and digits[index] == DIGIT_MAX:
        digits[index] = 0
        index -= 1

    if index < 0:
        return (1, *digits)

    digits[index] += 1
    return tuple(digits)


def decrement(seq: Digits) -> Digits:
    """
    Вычитание 1.

    decrement(()) == () — переход через ноль обрабатывается уровнем выше
    (SignedInteger), здесь это no-op.

    Examples:
        >>> decrement((1, 0, 0))
        (9, 9)
        >>> decrement((1,))
        ()
    """
    if not seq:
        return EMPTY

    digits = list(seq)
    index = len(digits) - 1

    while index >= 0 and digits[index] == 0:
        digits[index] = DIGIT_MAX
        index -= 1

    digits[index] -= 1
    return normalize(tuple(digits))


def decrement_at(seq: Digits, position: int) -> Digits:
    """
    Вычитание 10**position (заём у цифры на позиции position от младшей).

    Args:
        seq: Нормализованная последовательность, seq >= 10**position
        position: Позиция от младшего разряда (0 = единицы)

    Returns:
        Нормализованный результат
    """
    if position < 0:
        raise ValueError(f"position must be non-negative, got {position}")

    if position == 0:
        return decrement(seq)

    high, low = seq[:-position], seq[-position:]
    return normalize(decrement(high) + low)


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add(a: Digits, b: Digits) -> Digits:
    """
    Сложение модулей столбиком (коммутативно).

    Цифры выравниваются по младшему разряду, каждая пара складывается
    через PLUS_TABLE с учётом переноса.

    Examples:
        >>> add((9, 9), (1,))
        (1, 0, 0)
    """
    if len(a) < len(b):
        a, b = b, a

    result = []
    carry = 0
    offset = len(a) - len(b)

    for index in range(len(a) - 1, -1, -1):
        y = b[index - offset] if index >= offset else 0
        carry, digit = PLUS_TABLE[a[index] + carry][y]
        result.append(digit)

    if carry:
        result.append(carry)

    result.reverse()
    return normalize(tuple(result))


def complement(seq: Digits) -> Digits:
    """Дополнение до 9 каждой цифры (длина сохраняется, без нормализации)"""
    return tuple(DIGIT_MAX - d for d in seq)


def subtract(a: Digits, b: Digits) -> Digits:
    """
    Вычитание модулей a - b через дополнение до 10.

    Алгоритм:
        C = complement(b)                  # 10**n - 1 - b, n = len(b)
        S = add(increment(a), C)           # a + 10**n - b
        result = decrement_at(S, n)        # убираем лишнее 10**n

    Args:
        a: Уменьшаемое
        b: Вычитаемое, b <= a

    Raises:
        ValueError: Если a < b (нарушение предусловия)

    Examples:
        >>> subtract((1, 0, 0), (1,))
        (9, 9)
        >>> subtract((4, 2), (4, 2))
        ()
    """
    if compare(a, b) is Ordering.LT:
        raise ValueError(
            f"subtract requires a >= b, got a={serialize_digits(a) or '0'}, "
            f"b={serialize_digits(b) or '0'}"
        )

    total = add(increment(a), complement(b))
    return decrement_at(total, len(b))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_digit(seq: Digits, d: int) -> Digits:
    """
    Умножение последовательности на одну цифру.

    Для каждой цифры (от младшей) берётся двузначное произведение из
    MUL_TABLE, к нему прибавляется перенос; младшая цифра идёт в результат,
    старшая — в перенос.

    Examples:
        >>> multiply_digit((9, 9), 9)
        (8, 9, 1)
    """
    if not DIGIT_MIN <= d <= DIGIT_MAX:
        raise ValueError(f"d must be a decimal digit, got {d}")

    result = []
    carry = 0

    for digit in reversed(seq):
        high, low = MUL_TABLE[digit][d]
        extra, low = PLUS_TABLE[low][carry]
        result.append(low)
        carry = high + extra

    if carry:
        result.append(carry)

    result.reverse()
    return normalize(tuple(result))


def multiply(a: Digits, b: Digits) -> Digits:
    """
    Умножение столбиком.

    Для каждой цифры b от младшей: частичное произведение
    multiply_digit(a, digit), сдвинутое на позицию цифры, накапливается
    через add. Сложность O(len(a) * len(b)).

    Examples:
        >>> multiply((1, 2), (1, 2))
        (1, 4, 4)
    """
    product = EMPTY

    for position, digit in enumerate(reversed(b)):
        partial = multiply_digit(a, digit)
        if partial:
            product = add(product, partial + (0,) * position)

    return product


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divmod_digits(a: Digits, b: Digits) -> tuple[Digits, Digits]:
    """
    Деление столбиком с остатком.

    Цифры a обрабатываются от старшей к младшей. Окно r получает очередную
    цифру; цифра частного q определяется повторным вычитанием b из r
    (не более 9 итераций, так как r < 10 * b после каждого сдвига).

    Args:
        a: Делимое
        b: Делитель (непустой)

    Returns:
        (quotient, remainder), оба нормализованы

    Raises:
        ValueError: Если b пуст (деление на ноль на уровне модулей)

    Examples:
        >>> divmod_digits((3, 4), (5,))
        ((6,), (4,))
    """
    if not b:
        raise ValueError("divisor magnitude must be non-empty")

    quotient = []
    window = EMPTY

    for digit in a:
        window = normalize(window + (digit,))
        q = 0
        while compare(window, b) is not Ordering.LT:
            window = subtract(window, b)
            q += 1
        quotient.append(q)

    return normalize(tuple(quotient)), window
