"""
Formatting — Текстовое представление полей

Строка предназначена для вывода в консоль/лог, это не формат сериализации
и он не гарантированно стабилен между версиями.

Ширина колонки = number_len(max) + padding. Ширина выбирается только по
максимальному значению: при отрицательных значениях или сильно разных
порядках величин колонки могут «поехать». Это известное ограничение.
"""

from typing import Sequence

from pydantic import BaseModel, Field

from src.matrices.field import number_len


# =============================================================================
# RENDER OPTIONS
# =============================================================================


class RenderOptions(BaseModel):
    """
    Параметры текстового вывода.

    Immutable модель (frozen=True): один экземпляр разделяется между
    всеми вызовами render() по умолчанию.
    """

    padding: int = Field(6, ge=0, description="Добавка к числу цифр максимума")
    precision: int = Field(2, ge=0, description="Количество знаков после точки")

    empty_matrix: str = Field("empty Matrix", description="Вывод пустой матрицы")
    empty_vector: str = Field("empty Vector", description="Вывод пустого вектора")

    row_open: str = Field("| ", description="Начало строки матрицы")
    row_close: str = Field(" |", description="Конец строки матрицы")
    vector_open: str = Field("[ ", description="Начало вектора")
    vector_close: str = Field(" ]", description="Конец вектора")

    model_config = {"frozen": True}  # Immutable

    def width_for(self, max_value: float) -> int:
        """Ширина колонки для поля с данным максимумом."""
        return number_len(max_value) + self.padding


DEFAULT_RENDER_OPTIONS = RenderOptions()


# =============================================================================
# RENDERING
# =============================================================================


def format_values(values: Sequence[float], width: int, precision: int) -> str:
    """Значения, выровненные вправо по ширине width, без разделителей."""
    return "".join(f"{value:{width}.{precision}f}" for value in values)


def render_matrix(
    rows: int,
    cols: int,
    values: Sequence[float],
    max_value: float,
    options: RenderOptions = DEFAULT_RENDER_OPTIONS,
) -> str:
    """
    Матрица построчно, каждая строка в ограничителях, строки через "\\n".

    Args:
        rows: Количество строк
        cols: Количество столбцов
        values: Плоский буфер row-major
        max_value: Максимум матрицы (определяет ширину колонки)
        options: Параметры вывода
    """
    width = options.width_for(max_value)
    lines = []
    for row in range(rows):
        chunk = values[row * cols : (row + 1) * cols]
        lines.append(
            options.row_open + format_values(chunk, width, options.precision) + options.row_close
        )
    return "\n".join(lines)


def render_vector(
    values: Sequence[float],
    max_value: float,
    options: RenderOptions = DEFAULT_RENDER_OPTIONS,
) -> str:
    """Вектор одной строкой в ограничителях."""
    width = options.width_for(max_value)
    return options.vector_open + format_values(values, width, options.precision) + options.vector_close
