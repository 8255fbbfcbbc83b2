"""
Tolerance — Сравнение float с учётом машинной точности

Используется для is_close у Matrix и Vector: проверки свойств вида
a + b - b == a выполняются с толерантностью, а не точным равенством.
"""

import math
from typing import Final, Sequence

# Относительная толерантность (по умолчанию для is_close)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность (по умолчанию для is_close)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def all_close(
    lhs: Sequence[float],
    rhs: Sequence[float],
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Поэлементное is_close для двух буферов.

    Returns:
        False при разной длине, иначе True если все пары близки
    """
    if len(lhs) != len(rhs):
        return False
    return all(is_close(x, y, rel_tol, abs_tol) for x, y in zip(lhs, rhs))
