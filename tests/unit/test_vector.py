"""
Тесты для Vector

Проверяет:
1. Конструкторы и отказ при неверной длине
2. Доступ к элементам и OutOfBounds
3. Поэлементную арифметику и скалярное произведение
4. Редукцию min/max и EmptyField
5. Текстовый вывод
"""

import math
import random

import pytest

from src.matrices import DimensionMismatch, EmptyField, Field, Matrix, OutOfBounds, Vector


@pytest.fixture
def v123() -> Vector:
    return Vector.from_values([1, 2, 3])


@pytest.fixture
def rng() -> random.Random:
    return random.Random(99)


# =============================================================================
# КОНСТРУКТОРЫ И ФОРМА
# =============================================================================


class TestConstruction:
    """Тесты конструкторов Vector"""

    def test_zero(self) -> None:
        v = Vector.zero(4)
        assert v.length == 4
        assert v.values() == [0.0] * 4

    def test_from_values(self, v123: Vector) -> None:
        assert v123.values() == [1.0, 2.0, 3.0]
        assert len(v123) == 3

    def test_init_wrong_count(self) -> None:
        with pytest.raises(DimensionMismatch, match="bad dimensions of vector"):
            Vector(3, [1.0, 2.0])

    def test_negative_length(self) -> None:
        with pytest.raises(DimensionMismatch):
            Vector.zero(-2)
        with pytest.raises(DimensionMismatch):
            Vector.random(-1, random.Random(0))

    def test_random(self, rng: random.Random) -> None:
        v = Vector.random(10, rng)
        assert v.length == 10
        assert all(0.0 <= x < 1.0 for x in v)

    def test_random_reproducible(self) -> None:
        assert Vector.random(5, random.Random(3)) == Vector.random(5, random.Random(3))

    def test_shape_rows_cols(self, v123: Vector) -> None:
        assert v123.shape == (3,)
        assert v123.rows == 1
        assert v123.cols == 3
        assert isinstance(v123, Field)

    def test_from_values_copies_input(self) -> None:
        source = [1.0, 2.0]
        v = Vector.from_values(source)
        source[1] = -1.0
        assert v.at(1) == 2.0


# =============================================================================
# ДОСТУП К ЭЛЕМЕНТАМ
# =============================================================================


class TestElementAccess:
    """Тесты at/set"""

    def test_set_then_at(self) -> None:
        v = Vector.zero(3)
        v.set(2, 7.5)
        assert v.at(2) == 7.5

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_out_of_bounds(self, v123: Vector, index: int) -> None:
        with pytest.raises(OutOfBounds, match="outside of vector"):
            v123.at(index)
        with pytest.raises(OutOfBounds):
            v123.set(index, 0.0)
        assert v123.values() == [1.0, 2.0, 3.0]

    def test_non_int_index(self, v123: Vector) -> None:
        with pytest.raises(TypeError):
            v123.at(1.0)  # type: ignore[arg-type]


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Тесты add/sub/apply/dot"""

    def test_add_sub(self, v123: Vector) -> None:
        w = Vector.from_values([10, 20, 30])
        assert v123.add(w).values() == [11.0, 22.0, 33.0]
        assert w.sub(v123).values() == [9.0, 18.0, 27.0]

    def test_length_mismatch(self, v123: Vector) -> None:
        with pytest.raises(DimensionMismatch, match="different lengths"):
            v123.add(Vector.zero(2))
        with pytest.raises(DimensionMismatch):
            v123.dot(Vector.zero(4))

    def test_add_sub_inverse(self, rng: random.Random) -> None:
        a = Vector.random(8, rng)
        b = Vector.random(8, rng)
        assert (a + b - b).is_close(a)

    def test_apply(self, v123: Vector) -> None:
        assert v123.apply(lambda x: x * x).values() == [1.0, 4.0, 9.0]
        assert v123.values() == [1.0, 2.0, 3.0]

    def test_dot(self, v123: Vector) -> None:
        """[1,2,3] · [4,5,6] = 32"""
        assert v123.dot(Vector.from_values([4, 5, 6])) == 32.0

    def test_dot_symmetric(self, rng: random.Random) -> None:
        a = Vector.random(6, rng)
        b = Vector.random(6, rng)
        assert a.dot(b) == pytest.approx(b.dot(a))

    def test_dot_empty(self) -> None:
        assert Vector.zero(0).dot(Vector.zero(0)) == 0.0

    def test_matmul_is_dot(self, v123: Vector) -> None:
        assert v123 @ v123 == 14.0

    def test_operator_with_matrix_rejected(self, v123: Vector) -> None:
        with pytest.raises(TypeError):
            v123 + Matrix.zero(1, 3)  # type: ignore[operator]

    def test_method_with_matrix_rejected(self, v123: Vector) -> None:
        with pytest.raises(TypeError, match="expected Vector"):
            v123.add(Matrix.zero(1, 3))  # type: ignore[arg-type]


# =============================================================================
# РЕДУКЦИЯ И ВЫВОД
# =============================================================================


class TestReductionAndRendering:
    """Тесты max/min и str"""

    def test_max_min(self) -> None:
        v = Vector.from_values([2, -5, 9, 0])
        assert v.max() == 9.0
        assert v.min() == -5.0

    def test_nan_seed_kept(self) -> None:
        """NaN в первой позиции остаётся seed: сравнения с NaN ложны"""
        v = Vector.from_values([math.nan, 1.0])
        assert math.isnan(v.max())

    def test_empty(self) -> None:
        with pytest.raises(EmptyField, match="empty vector"):
            Vector.zero(0).max()
        with pytest.raises(EmptyField, match="empty vector"):
            Vector.zero(0).min()

    def test_empty_sentinel(self) -> None:
        assert str(Vector.zero(0)) == "empty Vector"

    def test_render(self, v123: Vector) -> None:
        assert str(v123) == "[   1.00  2.00  3.00 ]"

    def test_repr(self, v123: Vector) -> None:
        assert repr(v123) == "Vector(length=3, values=[1.0, 2.0, 3.0])"

    def test_iter_does_not_alias(self, v123: Vector) -> None:
        assert list(v123) == [1.0, 2.0, 3.0]
