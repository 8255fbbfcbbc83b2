"""
Vector — Одномерное поле float64

Структурно повторяет Matrix с одним измерением: длина + плоский буфер.
Как вектор-строка имеет rows == 1 и cols == length.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(values) == length всегда
2. Длина не меняется после создания
3. Все арифметические операции возвращают новый Vector
4. Изменение на месте — только через set()
"""

import logging
import operator
from typing import Iterator, Optional, Sequence

from src.matrices import buffer
from src.matrices.errors import DimensionMismatch, OutOfBounds
from src.matrices.field import RandomSource, validate_dimension, validate_index
from src.matrices.formatting import DEFAULT_RENDER_OPTIONS, RenderOptions, render_vector
from src.matrices.tolerance import EPS_FLOAT_COMPARE_ABS, EPS_FLOAT_COMPARE_REL, all_close

logger = logging.getLogger(__name__)


class Vector:
    """Вектор фиксированной длины из значений float."""

    __slots__ = ("_values",)

    def __init__(self, length: int, values: Optional[Sequence[float]] = None):
        validate_dimension(length, "length")

        if values is None:
            data = buffer.zeros(length)
        else:
            if len(values) != length:
                raise DimensionMismatch(
                    f"bad dimensions of vector: {len(values)} values for length {length}"
                )
            data = buffer.from_sequence(values)

        self._values = data

    @classmethod
    def _wrap(cls, data: list[float]) -> "Vector":
        result = cls.__new__(cls)
        result._values = data
        return result

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls, length: int) -> "Vector":
        """Вектор длины length из нулей."""
        return cls(length)

    @classmethod
    def random(cls, length: int, rng: RandomSource) -> "Vector":
        """Вектор длины length со значениями rng.random() по порядку."""
        validate_dimension(length, "length")
        logger.debug("Random init of vector with length %d", length)
        return cls._wrap(buffer.random_fill(length, rng))

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "Vector":
        """Вектор из копии values; длина равна len(values)."""
        return cls._wrap(buffer.from_sequence(values))

    # =========================================================================
    # ФОРМА И ДОСТУП
    # =========================================================================

    @property
    def length(self) -> int:
        return len(self._values)

    @property
    def rows(self) -> int:
        """Количество строк вектора-строки (всегда 1)."""
        return 1

    @property
    def cols(self) -> int:
        """Количество столбцов вектора-строки (== length)."""
        return len(self._values)

    @property
    def shape(self) -> tuple[int]:
        return (len(self._values),)

    def values(self) -> list[float]:
        """Копия буфера."""
        return list(self._values)

    def copy(self) -> "Vector":
        return self._wrap(list(self._values))

    def _checked(self, index: int, action: str) -> int:
        validate_index(index, "index")
        if not 0 <= index < len(self._values):
            raise OutOfBounds(
                f"cannot {action} value outside of vector: "
                f"{index} not in [0, {len(self._values)})"
            )
        return index

    def at(self, index: int) -> float:
        """
        Значение по индексу.

        Raises:
            OutOfBounds: Если index ∉ [0, length)
        """
        return self._values[self._checked(index, "get")]

    def set(self, index: int, value: float) -> None:
        """
        Установка значения на месте.

        Raises:
            OutOfBounds: Если index ∉ [0, length) (буфер не меняется)
        """
        self._values[self._checked(index, "set")] = float(value)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _check_same_length(self, other: "Vector", what: str) -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"expected Vector, got {type(other).__name__}")
        if len(self._values) != len(other._values):
            raise DimensionMismatch(
                f"{what} of vectors with different lengths: "
                f"{len(self._values)} and {len(other._values)}"
            )

    def combine(self, other: "Vector", operation: buffer.BinaryOp) -> "Vector":
        """
        Поэлементное объединение с вектором той же длины.

        Raises:
            DimensionMismatch: Если длины различаются
        """
        self._check_same_length(other, "operating on two")
        return self._wrap(buffer.combine(self._values, other._values, operation))

    def add(self, other: "Vector") -> "Vector":
        return self.combine(other, operator.add)

    def sub(self, other: "Vector") -> "Vector":
        return self.combine(other, operator.sub)

    def apply(self, operation: buffer.UnaryOp) -> "Vector":
        """Новый вектор с operation(x) для каждого элемента."""
        return self._wrap(buffer.apply(self._values, operation))

    def dot(self, other: "Vector") -> float:
        """
        Скалярное произведение Σ self[i] * other[i] по возрастанию i.

        Raises:
            DimensionMismatch: Если длины различаются
        """
        self._check_same_length(other, "cannot do dot product")
        return buffer.dot(self._values, other._values)

    # =========================================================================
    # РЕДУКЦИЯ
    # =========================================================================

    def max(self) -> float:
        """
        Raises:
            EmptyField: Если length == 0
        """
        return buffer.reduce_max(self._values, "vector")

    def min(self) -> float:
        """
        Raises:
            EmptyField: Если length == 0
        """
        return buffer.reduce_min(self._values, "vector")

    # =========================================================================
    # СРАВНЕНИЕ И ВЫВОД
    # =========================================================================

    def is_close(
        self,
        other: "Vector",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Поэлементная близость; False при разной длине."""
        if not isinstance(other, Vector):
            return False
        return all_close(self._values, other._values, rel_tol, abs_tol)

    def render(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        if not self._values:
            return options.empty_vector
        return render_vector(self._values, self.max(), options)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Vector(length={len(self._values)}, values={self._values!r})"

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.sub(other)

    def __matmul__(self, other: object) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)
