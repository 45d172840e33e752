"""
SignedInteger — Целое со знаком (sign-magnitude)

Immutable Pydantic модели, образующие tagged union:
- Zero                 — ноль, без модуля
- Positive(magnitude)  — положительное число
- Negative(magnitude)  — отрицательное число

Операции диспетчеризуются по варианту и делегируют арифметику модулей
в src.core.math.digit_sequence.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude у Positive/Negative непуст и нормализован (нет ведущего нуля)
2. Пустой модуль всегда представлен как Zero (конструктор make)
3. Все операции чистые: новые значения, без мутаций (frozen=True)
4. Остаток от деления всегда в [0, |y|)
"""

from typing import Final, Literal, NamedTuple, Union

from pydantic import BaseModel, field_validator

from src.core.domain.errors import DivisionByZero
from src.core.math import digit_sequence as ds
from src.core.math.digit_sequence import Digits, Ordering


# =============================================================================
# МОДЕЛИ
# =============================================================================


class _SignedIntegerBase(BaseModel):
    """Общий базовый класс: протокол операторов Python"""

    model_config = {"frozen": True}

    def __neg__(self) -> "SignedInteger":
        return negate(self)

    def __pos__(self) -> "SignedInteger":
        return self

    def __abs__(self) -> "SignedInteger":
        return absolute(self)

    def __bool__(self) -> bool:
        return not isinstance(self, Zero)

    def __add__(self, other):
        if not isinstance(other, _SignedIntegerBase):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, _SignedIntegerBase):
            return NotImplemented
        return subtract(self, other)

    def __mul__(self, other):
        if not isinstance(other, _SignedIntegerBase):
            return NotImplemented
        return multiply(self, other)

    def __floordiv__(self, other):
        if not isinstance(other, _SignedIntegerBase):
            return NotImplemented
        return divide(self, other)

    def __mod__(self, other):
        if not isinstance(other, _SignedIntegerBase):
            return NotImplemented
        return modulo(self, other)

    def __divmod__(self, other):
        if not isinstance(other, _SignedIntegerBase):
            return NotImplemented
        return divide_with_remainder(self, other)

    def __lt__(self, other):
        if not isinstance(other, _SignedIntegerBase):
            return NotImplemented
        return less(self, other)

    def __le__(self, other):
        if not isinstance(other, _SignedIntegerBase):
            return NotImplemented
        return less_equal(self, other)

    def __gt__(self, other):
        if not isinstance(other, _SignedIntegerBase):
            return NotImplemented
        return greater(self, other)

    def __ge__(self, other):
        if not isinstance(other, _SignedIntegerBase):
            return NotImplemented
        return greater_equal(self, other)

    def __str__(self) -> str:
        if isinstance(self, Zero):
            return "0"
        if isinstance(self, Positive):
            return ds.serialize_digits(self.magnitude)
        if isinstance(self, Negative):
            return "-" + ds.serialize_digits(self.magnitude)
        raise TypeError(f"unknown SignedInteger variant: {type(self).__name__}")

    def __int__(self) -> int:
        return sign(self) * ds.to_int(magnitude_of(self))


class Zero(_SignedIntegerBase):
    """Ноль"""

    sign: Literal["zero"] = "zero"


class _NonZero(_SignedIntegerBase):
    magnitude: Digits

    @field_validator("magnitude")
    @classmethod
    def validate_magnitude(cls, v: Digits) -> Digits:
        """
        Проверка инварианта модуля.

        Пустой модуль допустим только как Zero; ведущий ноль или цифра
        вне [0, 9] — ошибка программиста.
        """
        if len(v) == 0:
            raise ValueError("magnitude of a non-zero value must be non-empty")
        if not ds.is_normalized(v):
            raise ValueError(f"magnitude {v!r} is not a normalized digit sequence")
        return v


class Positive(_NonZero):
    """Положительное число"""

    sign: Literal["positive"] = "positive"


class Negative(_NonZero):
    """Отрицательное число"""

    sign: Literal["negative"] = "negative"


SignedInteger = Union[Zero, Positive, Negative]


class DivMod(NamedTuple):
    """Результат деления с остатком"""

    quotient: SignedInteger
    remainder: SignedInteger


def _unknown(x: object) -> TypeError:
    return TypeError(f"unknown SignedInteger variant: {type(x).__name__}")


# =============================================================================
# КОНСТРУКТОРЫ И КОНСТАНТЫ
# =============================================================================


def make(negative: bool, magnitude: Digits) -> SignedInteger:
    """
    Канонический конструктор.

    Args:
        negative: Знак (True → отрицательное)
        magnitude: Модуль (нормализуется)

    Returns:
        Zero при нулевом модуле, иначе Positive/Negative
    """
    magnitude = ds.normalize(magnitude)
    if not magnitude:
        return Zero()
    if negative:
        return Negative(magnitude=magnitude)
    return Positive(magnitude=magnitude)


ZERO: Final[Zero] = Zero()
ONE: Final[Positive] = Positive(magnitude=(1,))
NEG_ONE: Final[Negative] = Negative(magnitude=(1,))


def magnitude_of(x: SignedInteger) -> Digits:
    """Модуль как последовательность цифр (() для Zero)"""
    if isinstance(x, Zero):
        return ds.EMPTY
    if isinstance(x, (Positive, Negative)):
        return x.magnitude
    raise _unknown(x)


# =============================================================================
# ЗНАК
# =============================================================================


def negate(x: SignedInteger) -> SignedInteger:
    """Смена знака: Zero ↦ Zero, Positive(m) ↦ Negative(m), Negative(m) ↦ Positive(m)"""
    if isinstance(x, Zero):
        return x
    if isinstance(x, Positive):
        return Negative(magnitude=x.magnitude)
    if isinstance(x, Negative):
        return Positive(magnitude=x.magnitude)
    raise _unknown(x)


def absolute(x: SignedInteger) -> SignedInteger:
    """Абсолютное значение"""
    if isinstance(x, Negative):
        return Positive(magnitude=x.magnitude)
    if isinstance(x, (Zero, Positive)):
        return x
    raise _unknown(x)


def sign(x: SignedInteger) -> int:
    """Знак числа: -1, 0 или 1"""
    if isinstance(x, Zero):
        return 0
    if isinstance(x, Positive):
        return 1
    if isinstance(x, Negative):
        return -1
    raise _unknown(x)


def signum(x: SignedInteger) -> SignedInteger:
    """Знак числа как SignedInteger: ONE, ZERO или NEG_ONE"""
    return {1: ONE, 0: ZERO, -1: NEG_ONE}[sign(x)]


def is_positive(x: SignedInteger) -> bool:
    return sign(x) == 1


def is_negative(x: SignedInteger) -> bool:
    return sign(x) == -1


def is_zero(x: SignedInteger) -> bool:
    return sign(x) == 0


def is_non_negative(x: SignedInteger) -> bool:
    return sign(x) >= 0


# =============================================================================
# ИНКРЕМЕНТ / ДЕКРЕМЕНТ
# =============================================================================


def increment(x: SignedInteger) -> SignedInteger:
    """
    x + 1.

    Zero → Positive(1); Negative(m) → Negative(m - 1), при m == 1 → Zero.
    """
    if isinstance(x, Zero):
        return ONE
    if isinstance(x, Positive):
        return Positive(magnitude=ds.increment(x.magnitude))
    if isinstance(x, Negative):
        return make(True, ds.decrement(x.magnitude))
    raise _unknown(x)


def decrement(x: SignedInteger) -> SignedInteger:
    """
    x - 1.

    Zero → Negative(1); Positive(m) → Positive(m - 1), при m == 1 → Zero.
    """
    if isinstance(x, Zero):
        return NEG_ONE
    if isinstance(x, Positive):
        return make(False, ds.decrement(x.magnitude))
    if isinstance(x, Negative):
        return Negative(magnitude=ds.increment(x.magnitude))
    raise _unknown(x)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare(x: SignedInteger, y: SignedInteger) -> Ordering:
    """
    Сравнение целых (строгий полный порядок).

    - оба Positive → сравнение модулей
    - оба Negative → сравнение модулей с переставленными операндами
    - разные знаки/ноль → решает знак
    """
    if isinstance(x, Positive) and isinstance(y, Positive):
        return ds.compare(x.magnitude, y.magnitude)
    if isinstance(x, Negative) and isinstance(y, Negative):
        return ds.compare(y.magnitude, x.magnitude)

    sx, sy = sign(x), sign(y)
    if sx == sy:
        return Ordering.EQ
    return Ordering.GT if sx > sy else Ordering.LT


def equals(x: SignedInteger, y: SignedInteger) -> bool:
    return compare(x, y) is Ordering.EQ


def greater(x: SignedInteger, y: SignedInteger) -> bool:
    return compare(x, y) is Ordering.GT


def greater_equal(x: SignedInteger, y: SignedInteger) -> bool:
    return compare(x, y) is not Ordering.LT


def less(x: SignedInteger, y: SignedInteger) -> bool:
    return compare(x, y) is Ordering.LT


def less_equal(x: SignedInteger, y: SignedInteger) -> bool:
    return compare(x, y) is not Ordering.GT


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(x: SignedInteger, y: SignedInteger) -> SignedInteger:
    """
    Сложение.

    Одинаковые знаки → сумма модулей с общим знаком. Разные знаки → из
    большего модуля вычитается меньший, знак берётся у большего; равные
    модули дают Zero.
    """
    if isinstance(x, Zero):
        return y
    if isinstance(y, Zero):
        return x

    negative_x = isinstance(x, Negative)
    negative_y = isinstance(y, Negative)

    if negative_x == negative_y:
        return make(negative_x, ds.add(x.magnitude, y.magnitude))

    order = ds.compare(x.magnitude, y.magnitude)
    if order is Ordering.EQ:
        return ZERO
    if order is Ordering.GT:
        return make(negative_x, ds.subtract(x.magnitude, y.magnitude))
    return make(negative_y, ds.subtract(y.magnitude, x.magnitude))


def subtract(x: SignedInteger, y: SignedInteger) -> SignedInteger:
    """x - y == add(x, negate(y))"""
    return add(x, negate(y))


def multiply(x: SignedInteger, y: SignedInteger) -> SignedInteger:
    """Умножение: Zero поглощает, знак положителен при совпадении знаков"""
    if isinstance(x, Zero) or isinstance(y, Zero):
        return ZERO
    if isinstance(x, (Positive, Negative)) and isinstance(y, (Positive, Negative)):
        negative = isinstance(x, Negative) != isinstance(y, Negative)
        return make(negative, ds.multiply(x.magnitude, y.magnitude))
    raise _unknown(y if isinstance(x, (Positive, Negative)) else x)


def divide_with_remainder(x: SignedInteger, y: SignedInteger) -> DivMod:
    """
    Деление с остатком.

    Остаток всегда в [0, |y|). Для отрицательного делимого частное
    округляется в сторону -inf (floor); для отрицательного делителя
    результат выводится сменой знака частного.

    Args:
        x: Делимое
        y: Делитель

    Returns:
        DivMod(quotient, remainder)

    Raises:
        DivisionByZero: Если y == Zero

    Examples:
        >>> divide_with_remainder(-34, 5)  # doctest: +SKIP
        DivMod(quotient=-7, remainder=1)
    """
    if isinstance(y, Zero):
        raise DivisionByZero(f"division of {x} by zero")

    if isinstance(y, Negative):
        quotient, remainder = divide_with_remainder(x, negate(y))
        return DivMod(negate(quotient), remainder)

    if not isinstance(y, Positive):
        raise _unknown(y)

    if isinstance(x, Zero):
        return DivMod(ZERO, ZERO)

    if isinstance(x, Positive):
        d, m = ds.divmod_digits(x.magnitude, y.magnitude)
        return DivMod(make(False, d), make(False, m))

    if isinstance(x, Negative):
        d, m = ds.divmod_digits(x.magnitude, y.magnitude)
        if not m:
            # точное деление: без коррекции
            return DivMod(make(True, d), ZERO)
        return DivMod(
            make(True, ds.increment(d)),
            make(False, ds.subtract(y.magnitude, m)),
        )

    raise _unknown(x)


def divide(x: SignedInteger, y: SignedInteger) -> SignedInteger:
    """Частное divide_with_remainder"""
    return divide_with_remainder(x, y).quotient


def modulo(x: SignedInteger, y: SignedInteger) -> SignedInteger:
    """Остаток divide_with_remainder"""
    return divide_with_remainder(x, y).remainder
