"""
Buffer — Общий вычислительный движок над плоскими буферами

Matrix и Vector — тонкие обёртки, знающие свою форму. Вся арифметика
выполняется здесь, над плоскими списками float в порядке хранения.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая операция выделяет новый буфер для результата
2. Входные буферы никогда не изменяются
3. Порядок обхода и суммирования — по возрастанию индекса
4. Функции не проверяют формы: это обязанность вызывающего типа
"""

from typing import Callable, Final, Sequence

from src.matrices.errors import EmptyField
from src.matrices.field import RandomSource

BinaryOp = Callable[[float, float], float]
UnaryOp = Callable[[float], float]

# Нейтральный элемент суммы для dot / матричного умножения
SUM_SEED: Final[float] = 0.0


# =============================================================================
# АЛЛОКАЦИЯ
# =============================================================================


def zeros(size: int) -> list[float]:
    """Новый буфер из size нулей."""
    return [0.0] * size


def random_fill(size: int, rng: RandomSource) -> list[float]:
    """
    Новый буфер из size значений, полученных от rng.random().

    Значения запрашиваются строго в порядке хранения, поэтому одинаково
    инициализированный источник даёт одинаковый буфер.
    """
    return [float(rng.random()) for _ in range(size)]


def from_sequence(values: Sequence[float]) -> list[float]:
    """Копия входной последовательности как список float."""
    return [float(v) for v in values]


# =============================================================================
# ПОЭЛЕМЕНТНЫЕ ОПЕРАЦИИ
# =============================================================================


def combine(lhs: Sequence[float], rhs: Sequence[float], operation: BinaryOp) -> list[float]:
    """
    Поэлементное объединение двух буферов одинаковой длины.

    result[i] = operation(lhs[i], rhs[i])

    Args:
        lhs: Левый операнд
        rhs: Правый операнд (той же длины)
        operation: Бинарная числовая операция

    Returns:
        Новый буфер
    """
    return [operation(x, y) for x, y in zip(lhs, rhs)]


def apply(values: Sequence[float], operation: UnaryOp) -> list[float]:
    """Новый буфер, где каждый элемент равен operation(values[i])."""
    return [operation(v) for v in values]


def dot(lhs: Sequence[float], rhs: Sequence[float]) -> float:
    """Сумма lhs[i] * rhs[i] по возрастанию i."""
    total = SUM_SEED
    for x, y in zip(lhs, rhs):
        total += x * y
    return total


# =============================================================================
# РЕДУКЦИЯ
# =============================================================================


def reduce_max(values: Sequence[float], kind: str = "field") -> float:
    """
    Максимальный элемент в порядке хранения, первый элемент как seed.

    Raises:
        EmptyField: Если буфер пуст
    """
    if not values:
        raise EmptyField(f"can't return max value in empty {kind}")

    result = values[0]
    for value in values:
        if value > result:
            result = value
    return result


def reduce_min(values: Sequence[float], kind: str = "field") -> float:
    """
    Минимальный элемент в порядке хранения, первый элемент как seed.

    Raises:
        EmptyField: Если буфер пуст
    """
    if not values:
        raise EmptyField(f"can't return min value in empty {kind}")

    result = values[0]
    for value in values:
        if value < result:
            result = value
    return result
