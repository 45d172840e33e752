"""
Исключения intbase10

Иерархия восстановимых ошибок. Нарушения внутренних инвариантов
(ненормализованный модуль, пустой модуль у Positive/Negative) сюда не входят:
это ошибки программиста, они проявляются как pydantic.ValidationError или
ValueError.
"""


class IntBase10Error(Exception):
    """Базовое исключение библиотеки"""

    pass


class DivisionByZero(IntBase10Error, ZeroDivisionError):
    """
    Деление на ноль.

    Возбуждается divide_with_remainder (и производными div/mod), если
    делитель равен Zero. Ошибка локальна: ранее созданные значения не
    затрагиваются.
    """

    pass


class MalformedInput(IntBase10Error, ValueError):
    """
    Невалидный внешний ввод.

    Пустая строка, символы кроме цифр и одного ведущего знака, запись,
    нарушающая контракт int_base10, или неподдерживаемый тип операнда.
    """

    pass


class OutOfRange(IntBase10Error, OverflowError):
    """Результат не помещается в запрошенный ограниченный целочисленный тип"""

    pass
