"""
matrices — Плотные матрицы и векторы float64

Два типа полей (Matrix, Vector) с доступом к элементам, поэлементной
арифметикой, матричным умножением, транспонированием, редукцией min/max,
функциональным map и текстовым выводом.
"""

# Errors
from src.matrices.errors import (
    DimensionMismatch,
    EmptyField,
    MatricesError,
    OutOfBounds,
)

# Shared abstractions
from src.matrices.field import Field, RandomSource, number_len

# Formatting
from src.matrices.formatting import DEFAULT_RENDER_OPTIONS, RenderOptions

# Tolerance
from src.matrices.tolerance import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    all_close,
    is_close,
)

# Field types
from src.matrices.matrix import Matrix
from src.matrices.vector import Vector

__all__ = [
    # Errors
    "MatricesError",
    "OutOfBounds",
    "DimensionMismatch",
    "EmptyField",
    # Shared abstractions
    "Field",
    "RandomSource",
    "number_len",
    # Formatting
    "RenderOptions",
    "DEFAULT_RENDER_OPTIONS",
    # Tolerance
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "all_close",
    "is_close",
    # Field types
    "Matrix",
    "Vector",
]
