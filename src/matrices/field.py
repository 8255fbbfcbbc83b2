"""
Field — Общие абстракции для матриц и векторов

Модуль содержит:
- Field: структурный протокол «поле с формой»
- RandomSource: протокол внешнего источника случайных чисел
- number_len: число цифр целой части (только для ширины колонок при выводе)
- validate_dimension: проверка размеров при создании полей
"""

from typing import Protocol, runtime_checkable

from src.matrices.errors import DimensionMismatch


# =============================================================================
# ПРОТОКОЛЫ
# =============================================================================


@runtime_checkable
class Field(Protocol):
    """
    Любой объект, описывающий свою форму.

    shape — кортеж неотрицательных целых, протяжённость по каждому измерению:
    (length,) для Vector, (rows, cols) для Matrix.
    """

    @property
    def shape(self) -> tuple[int, ...]: ...


@runtime_checkable
class RandomSource(Protocol):
    """
    Внешний источник случайных чисел.

    Должен возвращать float в [0, 1). random.Random удовлетворяет протоколу.
    Библиотека никогда не создаёт и не инициализирует (seed) источник сама.
    """

    def random(self) -> float: ...


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def number_len(value: float) -> int:
    """
    Количество цифр слева от десятичной точки сверх первой.

    Используется только для расчёта ширины колонки при выводе.
    Для значений < 10 (включая отрицательные) возвращает 0.

    Examples:
        >>> number_len(5.0)
        0
        >>> number_len(10.0)
        1
        >>> number_len(12345.6)
        4
        >>> number_len(-500.0)
        0
    """
    result = 0
    while value >= 10:
        value /= 10
        result += 1
    return result


def validate_dimension(value: int, name: str) -> int:
    """
    Проверка размера поля.

    Args:
        value: Размер (rows, cols или length)
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не целое число
        DimensionMismatch: Если value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise DimensionMismatch(f"{name} must be non-negative, got {value}")

    return value


def validate_index(value: int, name: str) -> int:
    """
    Проверка типа индекса (диапазон проверяет сам тип поля).

    Raises:
        TypeError: Если value не целое число
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value
