"""
Тесты для модели SignedInteger

Проверяет:
1. Создание и валидацию моделей Pydantic (инвариант модуля)
2. Immutability (frozen=True)
3. Знак, инкремент/декремент с переходом через ноль
4. Сравнение (полный порядок)
5. Сложение, вычитание, умножение
6. Деление с остатком во всех комбинациях знаков
"""

import itertools

import pytest
from pydantic import ValidationError

from src.core.domain import (
    NEG_ONE,
    ONE,
    ZERO,
    DivisionByZero,
    DivMod,
    Negative,
    Positive,
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
    make,
    modulo,
    multiply,
    negate,
    sign,
    signum,
    subtract,
)
from src.core.math import Ordering, from_int


def v(n: int):
    """SignedInteger из int (хелпер для тестов)"""
    return make(n < 0, from_int(abs(n)))


SAMPLES = [0, 1, -1, 2, -2, 9, -9, 10, -10, 34, -34, 99, -100, 12345, -98765, 10**25, -(10**25) + 7]


# =============================================================================
# МОДЕЛИ
# =============================================================================


class TestModels:
    """Тесты для Zero / Positive / Negative"""

    def test_make_canonical(self) -> None:
        assert make(False, ()) == ZERO
        assert make(True, ()) == ZERO
        assert make(True, (0, 0)) == ZERO
        assert make(False, (0, 4, 2)) == Positive(magnitude=(4, 2))
        assert make(True, (7,)) == Negative(magnitude=(7,))

    def test_empty_magnitude_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Positive(magnitude=())
        with pytest.raises(ValidationError):
            Negative(magnitude=())

    def test_leading_zero_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Positive(magnitude=(0, 1))
        assert "normalized" in str(exc_info.value)

    def test_non_digit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Negative(magnitude=(1, 12))

    def test_list_magnitude_coerced_to_tuple(self) -> None:
        assert Positive(magnitude=[1, 2]).magnitude == (1, 2)

    def test_immutability(self) -> None:
        x = Positive(magnitude=(1,))
        with pytest.raises(ValidationError):
            x.magnitude = (2,)

    def test_value_equality_and_hash(self) -> None:
        assert Positive(magnitude=(4, 2)) == Positive(magnitude=(4, 2))
        assert Positive(magnitude=(4, 2)) != Negative(magnitude=(4, 2))
        assert len({Zero(), ZERO, v(42), v(42), v(-42)}) == 3

    def test_sign_tags(self) -> None:
        assert ZERO.sign == "zero"
        assert ONE.sign == "positive"
        assert NEG_ONE.sign == "negative"

    def test_str_and_int(self) -> None:
        assert str(ZERO) == "0"
        assert str(v(-120)) == "-120"
        assert int(v(-120)) == -120
        assert int(ZERO) == 0

    def test_json_round_trip(self) -> None:
        x = v(-305)
        assert Negative.model_validate_json(x.model_dump_json()) == x


# =============================================================================
# ЗНАК
# =============================================================================


class TestSign:
    """Тесты для negate / absolute / sign / signum / предикатов"""

    def test_negate(self) -> None:
        assert negate(ZERO) == ZERO
        assert negate(v(5)) == v(-5)
        assert negate(v(-5)) == v(5)

    def test_double_negation(self) -> None:
        for n in SAMPLES:
            assert negate(negate(v(n))) == v(n)

    def test_absolute(self) -> None:
        for n in SAMPLES:
            assert absolute(v(n)) == v(abs(n))

    def test_sign(self) -> None:
        for n in SAMPLES:
            assert sign(v(n)) == (n > 0) - (n < 0)
            assert (sign(v(n)) == 0) == (v(n) == ZERO)

    def test_signum(self) -> None:
        assert signum(v(-42)) == NEG_ONE
        assert signum(ZERO) == ZERO
        assert signum(v(42)) == ONE

    def test_predicates(self) -> None:
        assert is_positive(ONE) and not is_positive(ZERO)
        assert is_negative(NEG_ONE) and not is_negative(ZERO)
        assert is_zero(ZERO) and not is_zero(ONE)
        assert is_non_negative(ZERO) and is_non_negative(ONE)
        assert not is_non_negative(NEG_ONE)


# =============================================================================
# ИНКРЕМЕНТ / ДЕКРЕМЕНТ
# =============================================================================


class TestIncrementDecrement:
    """Тесты для increment / decrement"""

    def test_zero(self) -> None:
        assert increment(ZERO) == ONE
        assert decrement(ZERO) == NEG_ONE

    def test_crossing_zero(self) -> None:
        assert increment(NEG_ONE) == ZERO
        assert decrement(ONE) == ZERO

    def test_magnitude_changes(self) -> None:
        assert increment(v(-100)) == v(-99)
        assert decrement(v(-99)) == v(-100)
        assert increment(v(999)) == v(1000)
        assert decrement(v(1000)) == v(999)

    def test_inverses(self) -> None:
        for n in SAMPLES:
            assert decrement(increment(v(n))) == v(n)
            assert increment(decrement(v(n))) == v(n)
            assert increment(v(n)) == v(n + 1)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


class TestCompare:
    """Тесты для compare и производных"""

    def test_negative_ordering(self) -> None:
        assert compare(v(-20), v(-30)) is Ordering.GT

    def test_zero(self) -> None:
        assert compare(ZERO, ZERO) is Ordering.EQ
        assert compare(ZERO, v(-1)) is Ordering.GT
        assert compare(ZERO, v(1)) is Ordering.LT

    def test_mixed_signs(self) -> None:
        assert compare(v(-1000), v(1)) is Ordering.LT
        assert compare(v(1), v(-1000)) is Ordering.GT

    def test_matches_int_order(self) -> None:
        for a, b in itertools.product(SAMPLES, repeat=2):
            expected = (a > b) - (a < b)
            assert compare(v(a), v(b)) == expected
            assert equals(v(a), v(b)) == (a == b)
            assert greater(v(a), v(b)) == (a > b)
            assert greater_equal(v(a), v(b)) == (a >= b)
            assert less(v(a), v(b)) == (a < b)
            assert less_equal(v(a), v(b)) == (a <= b)

    def test_transitive(self) -> None:
        ordered = sorted(SAMPLES)
        for a, b, c in zip(ordered, ordered[1:], ordered[2:]):
            assert less(v(a), v(b)) and less(v(b), v(c)) and less(v(a), v(c))

    def test_operators(self) -> None:
        assert v(-3) < v(2) <= v(2) < v(10)
        assert sorted([v(3), v(-7), ZERO]) == [v(-7), ZERO, v(3)]


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestAddSubtract:
    """Тесты для add / subtract"""

    def test_zero_identity(self) -> None:
        assert add(ZERO, v(-5)) == v(-5)
        assert add(v(5), ZERO) == v(5)

    def test_mixed_signs(self) -> None:
        assert add(v(5), v(-8)) == v(-3)
        assert add(v(-5), v(8)) == v(3)
        assert add(v(-5), v(5)) == ZERO

    def test_matches_int(self) -> None:
        for a, b in itertools.product(SAMPLES, repeat=2):
            assert add(v(a), v(b)) == v(a + b)
            assert subtract(v(a), v(b)) == v(a - b)

    def test_commutative(self) -> None:
        for a, b in itertools.product(SAMPLES, repeat=2):
            assert add(v(a), v(b)) == add(v(b), v(a))

    def test_associative(self) -> None:
        for a, b, c in [(1, -2, 3), (-999, 1, 10**25), (0, -34, 34), (12345, -98765, 7)]:
            assert add(add(v(a), v(b)), v(c)) == add(v(a), add(v(b), v(c)))

    def test_additive_inverse(self) -> None:
        for n in SAMPLES:
            assert add(v(n), negate(v(n))) == ZERO

    def test_operators(self) -> None:
        assert v(7) + v(-10) == v(-3)
        assert v(7) - v(-10) == v(17)
        assert -v(7) == v(-7)
        assert abs(v(-7)) == v(7)


class TestMultiply:
    """Тесты для multiply"""

    def test_scenario(self) -> None:
        assert multiply(v(568942), v(1734982)) == v(987104129044)

    def test_signs(self) -> None:
        assert multiply(v(-3), v(4)) == v(-12)
        assert multiply(v(3), v(-4)) == v(-12)
        assert multiply(v(-3), v(-4)) == v(12)
        assert multiply(ZERO, v(-4)) == ZERO

    def test_matches_int(self) -> None:
        for a, b in itertools.product(SAMPLES, repeat=2):
            assert multiply(v(a), v(b)) == v(a * b)

    def test_commutative_and_associative(self) -> None:
        for a, b, c in [(2, -3, 5), (-99, -101, 7), (10**25, -34, 0)]:
            assert multiply(v(a), v(b)) == multiply(v(b), v(a))
            assert multiply(multiply(v(a), v(b)), v(c)) == multiply(v(a), multiply(v(b), v(c)))

    def test_operator(self) -> None:
        assert v(-6) * v(7) == v(-42)


class TestDivideWithRemainder:
    """Тесты для divide_with_remainder / divide / modulo"""

    @pytest.mark.parametrize(
        "x, y, q, r",
        [
            (34, 5, 6, 4),
            (-34, 5, -7, 1),
            (34, -5, -6, 4),
            (-34, -5, 7, 1),
            (85749283, 6547820, 13, 627623),
            (85749283, -6547820, -13, 627623),
            (-85749283, 6547820, -14, 5920197),
            (-85749283, -6547820, 14, 5920197),
            (420, 2, 210, 0),
            (10000, 2, 5000, 0),
            (0, 7689524, 0, 0),
            (0, -7689524, 0, 0),
        ],
    )
    def test_known_values(self, x: int, y: int, q: int, r: int) -> None:
        assert divide_with_remainder(v(x), v(y)) == DivMod(v(q), v(r))

    @pytest.mark.parametrize("x, y, q", [(-10, 5, -2), (-10, -5, 2), (-420, 2, -210)])
    def test_exact_negative_dividend(self, x: int, y: int, q: int) -> None:
        """Точное деление отрицательного: остаток Zero, без коррекции частного"""
        quotient, remainder = divide_with_remainder(v(x), v(y))
        assert quotient == v(q)
        assert remainder == ZERO

    def test_division_identity_and_remainder_bound(self) -> None:
        for x, y in itertools.product(SAMPLES, repeat=2):
            if y == 0:
                continue
            quotient, remainder = divide_with_remainder(v(x), v(y))
            assert add(multiply(quotient, v(y)), remainder) == v(x)
            assert is_non_negative(remainder)
            assert less(remainder, absolute(v(y)))

    def test_division_by_zero(self) -> None:
        for x in SAMPLES:
            with pytest.raises(DivisionByZero):
                divide_with_remainder(v(x), ZERO)

    def test_division_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divide(ONE, ZERO)

    def test_divide_and_modulo(self) -> None:
        assert divide(v(-34), v(5)) == v(-7)
        assert modulo(v(-34), v(5)) == v(1)

    def test_operators(self) -> None:
        assert v(-34) // v(5) == v(-7)
        assert v(-34) % v(5) == v(1)
        assert divmod(v(34), v(-5)) == (v(-6), v(4))
