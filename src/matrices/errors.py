"""
Errors — Иерархия исключений пакета matrices

Все ошибочные операции сообщают о сбое непосредственному вызывающему коду
через исключение. Операнды при этом не изменяются.

Таксономия:
- OutOfBounds: индекс/координата вне допустимого диапазона (at/set)
- DimensionMismatch: несовместимые формы операндов или размеров при создании
- EmptyField: редукция (min/max) над пустым полем
"""


class MatricesError(Exception):
    """Базовое исключение для всех ошибок пакета."""

    pass


class OutOfBounds(MatricesError, IndexError):
    """
    Обращение к элементу вне поля.

    Наследуется от IndexError, чтобы вызывающий код мог обрабатывать
    ошибку как обычный выход за границы последовательности.
    """

    pass


class DimensionMismatch(MatricesError, ValueError):
    """
    Несовместимые размеры.

    Возникает при:
    1. Поэлементной операции над полями разной формы
    2. Матричном умножении при lhs.cols != rhs.rows
    3. Скалярном произведении векторов разной длины
    4. Создании поля с отрицательным размером или неверным числом значений
    """

    pass


class EmptyField(MatricesError, ValueError):
    """Редукция (min/max) запрошена для поля нулевого размера."""

    pass
