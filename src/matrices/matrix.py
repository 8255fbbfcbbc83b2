"""
Matrix — Двумерное поле float64

Хранение: плоский буфер row-major, ячейка (r, c) ↔ смещение r * cols + c.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(values) == rows * cols всегда (нарушение отвергается при создании)
2. Размеры не меняются после создания
3. Все арифметические операции возвращают новую Matrix, операнды не меняются
4. Изменение на месте — только через set()
"""

import logging
import operator
from typing import Optional, Sequence

from src.matrices import buffer
from src.matrices.errors import DimensionMismatch, OutOfBounds
from src.matrices.field import RandomSource, validate_dimension, validate_index
from src.matrices.formatting import DEFAULT_RENDER_OPTIONS, RenderOptions, render_matrix
from src.matrices.tolerance import EPS_FLOAT_COMPARE_ABS, EPS_FLOAT_COMPARE_REL, all_close

logger = logging.getLogger(__name__)


class Matrix:
    """
    Матрица rows × cols значений float.

    Создание через конструкторы класса: zero, random, from_values,
    from_rows, identity. Прямой вызов Matrix(rows, cols, values) эквивалентен
    from_values (или zero, если values не передан).
    """

    __slots__ = ("_rows", "_cols", "_values")

    def __init__(self, rows: int, cols: int, values: Optional[Sequence[float]] = None):
        validate_dimension(rows, "rows")
        validate_dimension(cols, "cols")

        if values is None:
            data = buffer.zeros(rows * cols)
        else:
            if len(values) != rows * cols:
                raise DimensionMismatch(
                    f"bad dimensions of matrix: {len(values)} values for {rows}x{cols}"
                )
            data = buffer.from_sequence(values)

        self._rows = rows
        self._cols = cols
        self._values = data

    @classmethod
    def _wrap(cls, rows: int, cols: int, data: list[float]) -> "Matrix":
        # Результат операции: буфер уже свежий и нужной длины
        result = cls.__new__(cls)
        result._rows = rows
        result._cols = cols
        result._values = data
        return result

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls, rows: int, cols: int) -> "Matrix":
        """Матрица rows × cols, заполненная 0.0."""
        return cls(rows, cols)

    @classmethod
    def random(cls, rows: int, cols: int, rng: RandomSource) -> "Matrix":
        """
        Матрица rows × cols со значениями rng.random() в порядке хранения.

        Args:
            rows: Количество строк
            cols: Количество столбцов
            rng: Внешний источник случайных чисел в [0, 1)
        """
        validate_dimension(rows, "rows")
        validate_dimension(cols, "cols")
        logger.debug("Random init of %dx%d matrix", rows, cols)
        return cls._wrap(rows, cols, buffer.random_fill(rows * cols, rng))

    @classmethod
    def from_values(cls, rows: int, cols: int, values: Sequence[float]) -> "Matrix":
        """
        Матрица из плоской последовательности row-major.

        Raises:
            DimensionMismatch: Если len(values) != rows * cols
        """
        return cls(rows, cols, values)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Матрица из вложенной последовательности строк.

        Пустая последовательность даёт матрицу 0×0.

        Raises:
            DimensionMismatch: Если строки разной длины
        """
        if not rows:
            return cls(0, 0)

        cols = len(rows[0])
        flat: list[float] = []
        for index, row in enumerate(rows):
            if len(row) != cols:
                raise DimensionMismatch(
                    f"ragged rows: row {index} has {len(row)} values, expected {cols}"
                )
            flat.extend(row)
        return cls(len(rows), cols, flat)

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Единичная матрица size × size."""
        result = cls(size, size)
        for i in range(size):
            result._values[i * size + i] = 1.0
        return result

    # =========================================================================
    # ФОРМА И ДОСТУП
    # =========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """Размеры матрицы (rows, cols)."""
        return (self._rows, self._cols)

    def values(self) -> list[float]:
        """Копия плоского буфера row-major."""
        return list(self._values)

    def to_rows(self) -> list[list[float]]:
        """Копия значений как список строк."""
        return [
            self._values[r * self._cols : (r + 1) * self._cols] for r in range(self._rows)
        ]

    def copy(self) -> "Matrix":
        return self._wrap(self._rows, self._cols, list(self._values))

    def _offset(self, row: int, col: int, action: str) -> int:
        validate_index(row, "row")
        validate_index(col, "col")
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise OutOfBounds(
                f"cannot {action} value outside of matrix: "
                f"({row}, {col}) not in {self._rows}x{self._cols}"
            )
        return row * self._cols + col

    def at(self, row: int, col: int) -> float:
        """
        Значение в ячейке (row, col).

        Raises:
            OutOfBounds: Если row ∉ [0, rows) или col ∉ [0, cols)
        """
        return self._values[self._offset(row, col, "get")]

    def set(self, row: int, col: int, value: float) -> None:
        """
        Установка значения в ячейке (row, col) на месте.

        Raises:
            OutOfBounds: Если координаты вне матрицы (буфер не меняется)
        """
        self._values[self._offset(row, col, "set")] = float(value)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _check_same_shape(self, other: "Matrix") -> None:
        if not isinstance(other, Matrix):
            raise TypeError(f"expected Matrix, got {type(other).__name__}")
        if self.shape != other.shape:
            raise DimensionMismatch(
                f"operating on two matrices with different dimensions: "
                f"{self._rows}x{self._cols} and {other._rows}x{other._cols}"
            )

    def combine(self, other: "Matrix", operation: buffer.BinaryOp) -> "Matrix":
        """
        Поэлементное объединение с матрицей той же формы.

        Raises:
            DimensionMismatch: Если формы различаются
        """
        self._check_same_shape(other)
        return self._wrap(
            self._rows, self._cols, buffer.combine(self._values, other._values, operation)
        )

    def add(self, other: "Matrix") -> "Matrix":
        return self.combine(other, operator.add)

    def sub(self, other: "Matrix") -> "Matrix":
        return self.combine(other, operator.sub)

    def apply(self, operation: buffer.UnaryOp) -> "Matrix":
        """Новая матрица той же формы с operation(x) для каждого элемента."""
        return self._wrap(self._rows, self._cols, buffer.apply(self._values, operation))

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Матричное произведение self × other.

        result[i][j] = Σ_k self[i][k] * other[k][j], k по возрастанию.

        Raises:
            DimensionMismatch: Если self.cols != other.rows
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"expected Matrix, got {type(other).__name__}")
        if self._cols != other._rows:
            raise DimensionMismatch(
                f"for matrix multiplication, first matrix cols == second matrix rows: "
                f"{self._rows}x{self._cols} and {other._rows}x{other._cols}"
            )

        rows, inner, cols = self._rows, self._cols, other._cols
        logger.debug("Multiplying %dx%d by %dx%d", rows, inner, inner, cols)

        lhs, rhs = self._values, other._values
        result = buffer.zeros(rows * cols)
        for i in range(rows):
            for j in range(cols):
                total = buffer.SUM_SEED
                for k in range(inner):
                    total += lhs[i * inner + k] * rhs[k * cols + j]
                result[i * cols + j] = total
        return self._wrap(rows, cols, result)

    def transpose(self) -> "Matrix":
        """Новая матрица cols × rows: result[j][i] = self[i][j]."""
        rows, cols = self._rows, self._cols
        result = buffer.zeros(rows * cols)
        for i in range(rows):
            for j in range(cols):
                result[j * rows + i] = self._values[i * cols + j]
        return self._wrap(cols, rows, result)

    # =========================================================================
    # РЕДУКЦИЯ
    # =========================================================================

    def max(self) -> float:
        """
        Наибольшее значение матрицы.

        Raises:
            EmptyField: Если rows == 0 или cols == 0
        """
        return buffer.reduce_max(self._values, "matrix")

    def min(self) -> float:
        """
        Наименьшее значение матрицы.

        Raises:
            EmptyField: Если rows == 0 или cols == 0
        """
        return buffer.reduce_min(self._values, "matrix")

    # =========================================================================
    # СРАВНЕНИЕ И ВЫВОД
    # =========================================================================

    def is_close(
        self,
        other: "Matrix",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Поэлементная близость; False при разной форме."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        return all_close(self._values, other._values, rel_tol, abs_tol)

    def render(self, options: RenderOptions = DEFAULT_RENDER_OPTIONS) -> str:
        """Текстовое представление (см. formatting.render_matrix)."""
        if self._rows == 0 or self._cols == 0:
            return options.empty_matrix
        return render_matrix(self._rows, self._cols, self._values, self.max(), options)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, values={self._values!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __matmul__(self, other: object) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)
