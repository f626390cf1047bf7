"""
Numerical Safeguards — Float-примитивы для RealElement

Модуль обеспечивает численную корректность float-элементов кольца:
- NaN/Inf детекция: невалидное значение никогда не становится элементом
- Epsilon-сравнения float с учётом машинной точности (для диагностики и тестов)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют (операция поднимает DomainError)
2. Точное равенство элементов не подменяется приближённым:
   is_close используется только явно
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from src.core.math.errors import DomainError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def require_finite(value: float, operation: str) -> float:
    """
    Проверка результата float-операции.

    Args:
        value: Результат операции
        operation: Имя операции (для сообщения об ошибке)

    Returns:
        value если валидное

    Raises:
        DomainError: Если value NaN или Inf (переполнение и т.п.)

    Examples:
        >>> require_finite(1.5, "add")
        1.5
        >>> require_finite(float('inf'), "multiply_by")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DomainError: ...
    """
    if not is_valid_float(value):
        raise DomainError(f"{operation} produced a non-finite result: {value}")
    return value


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


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

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.1 + 0.2, 0.3)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare_exact(a: float, b: float) -> int:
    """
    Точное трёхзначное сравнение двух float.

    В отличие от сравнения с толерантностью, согласовано с ==,
    поэтому годится как полный порядок для элементов кольца.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0
