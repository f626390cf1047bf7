"""
Algebra Errors — Иерархия исключений matrix engine и arithmetic elements

Все ошибки локальные, детерминированные и синхронные:
- Ни одна не является transient (повтор не имеет смысла)
- Частичных результатов не бывает: операция либо возвращает валидную Matrix,
  либо поднимает исключение

ИЕРАРХИЯ:
    AlgebraError
    ├── MatrixError
    │   ├── InvalidShape            (ValueError)
    │   ├── NullSource              (ValueError)
    │   ├── MissingRow              (ValueError)
    │   ├── RaggedShape             (ValueError)
    │   ├── IndexOutOfRange         (IndexError)
    │   ├── ShapeMismatch           (ValueError)
    │   └── InvalidArgument         (ValueError)
    └── ElementError
        ├── TypeMismatch            (TypeError)
        └── DomainError             (ArithmeticError)
"""


class AlgebraError(Exception):
    """Корневое исключение для всех ошибок алгебры."""

    pass


# =============================================================================
# MATRIX ERRORS
# =============================================================================


class MatrixError(AlgebraError):
    """Корневое исключение matrix engine."""

    pass


class InvalidShape(MatrixError, ValueError):
    """
    Неположительное число строк или столбцов при создании матрицы.

    Инвариант: rows >= 1 и cols >= 1 всегда.
    """

    pass


class NullSource(MatrixError, ValueError):
    """Источник данных (или его первая строка) отсутствует (None)."""

    pass


class MissingRow(MatrixError, ValueError):
    """
    Одна из строк источника отсутствует (None).

    Отличается от строки, содержащей absent-ячейки: отсутствующая строка
    всегда ошибка конструирования.
    """

    pass


class RaggedShape(MatrixError, ValueError):
    """Строки источника имеют разную длину."""

    pass


class IndexOutOfRange(MatrixError, IndexError):
    """
    Индекс строки или столбца вне диапазона [0, dimension).

    Граница строгая: индекс, равный размерности, недопустим.
    """

    pass


class ShapeMismatch(MatrixError, ValueError):
    """Несовместимые размерности для add/subtract/multiply/dot product."""

    pass


class InvalidArgument(MatrixError, ValueError):
    """
    Аргумент недопустимого вида.

    Absent-значение там, где требуется конкретный элемент, или строка-источник,
    которая не является последовательностью ячеек.
    """

    pass


# =============================================================================
# ELEMENT ERRORS
# =============================================================================


class ElementError(AlgebraError):
    """Корневое исключение arithmetic elements."""

    pass


class TypeMismatch(ElementError, TypeError):
    """Операнд не является элементом того же конкретного кольца."""

    pass


class DomainError(ElementError, ArithmeticError):
    """
    Операция не определена для данных операндов.

    Примеры:
    - деление на аддитивный ноль
    - деление в кольце без обратных, когда частное не лежит в кольце
    - результат вне области значений элемента (NaN/Inf для float)
    - dot product по пустому измерению (нет первого слагаемого)
    """

    pass
