"""
Тесты для Formatting

Проверяет:
1. RenderOptions: значения по умолчанию, валидация, immutability
2. Выравнивание по ширине максимума
3. Переопределение параметров вывода
"""

import pytest
from pydantic import ValidationError

from src.matrices import DEFAULT_RENDER_OPTIONS, Matrix, RenderOptions, Vector
from src.matrices.formatting import format_values, render_matrix, render_vector


class TestRenderOptions:
    """Тесты модели RenderOptions"""

    def test_defaults(self) -> None:
        assert DEFAULT_RENDER_OPTIONS.padding == 6
        assert DEFAULT_RENDER_OPTIONS.precision == 2
        assert DEFAULT_RENDER_OPTIONS.empty_matrix == "empty Matrix"
        assert DEFAULT_RENDER_OPTIONS.empty_vector == "empty Vector"

    def test_negative_padding_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RenderOptions(padding=-1)

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_RENDER_OPTIONS.padding = 3  # type: ignore[misc]

    def test_width_for(self) -> None:
        assert DEFAULT_RENDER_OPTIONS.width_for(5.0) == 6
        assert DEFAULT_RENDER_OPTIONS.width_for(250.0) == 8


class TestRendering:
    """Тесты функций вывода"""

    def test_format_values(self) -> None:
        assert format_values([1.0, 2.5], 6, 2) == "  1.00  2.50"

    def test_render_matrix_rows(self) -> None:
        text = render_matrix(2, 1, [1.0, 100.0], 100.0)
        assert text.split("\n") == ["|     1.00 |", "|   100.00 |"]

    def test_render_vector(self) -> None:
        assert render_vector([0.5], 0.5) == "[   0.50 ]"

    def test_negative_values_use_max_width(self) -> None:
        """Ширина берётся только из максимума, даже если минимум длиннее"""
        assert str(Vector.from_values([-1000.0, 1.0])) == "[ -1000.00  1.00 ]"

    def test_custom_options(self) -> None:
        options = RenderOptions(padding=4, precision=1, empty_matrix="<>")
        assert Matrix.from_values(1, 2, [1, 2]).render(options) == "|  1.0 2.0 |"
        assert Matrix.zero(0, 0).render(options) == "<>"
