"""
ArithmeticElement — Контракт элемента кольца для matrix engine

Минимальная алгебра, которую должен реализовать тип ячейки Matrix:
- add / subtract / multiply_by / divide_by: замкнуты над собственным типом
- compare: полный порядок, согласованный с равенством

Immutable Pydantic модель (frozen=True): равенство и hash структурные,
поэтому равенство и hash Matrix корректно композируются через ячейки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операции чистые: возвращают новые значения, операнды не изменяются
2. Операнд другого кольца → TypeMismatch
3. Неопределённая операция (деление на необратимый элемент) → DomainError,
   а не "тихо" невалидный элемент
"""

from abc import ABC, abstractmethod
from typing import TypeVar

from pydantic import BaseModel

from src.core.math.errors import TypeMismatch

E = TypeVar("E", bound="ArithmeticElement")


class ArithmeticElement(BaseModel, ABC):
    """
    Абстрактный элемент кольца.

    Подклассы объявляют поля значения (pydantic) и реализуют пять
    абстрактных методов. Python-операторы (+, -, *, /, <, <=, >, >=)
    делегируют в эти методы.
    """

    model_config = {"frozen": True}  # Immutable

    # =========================================================================
    # CONTRACT
    # =========================================================================

    @abstractmethod
    def add(self: E, other: E) -> E:
        """Сумма self + other."""

    @abstractmethod
    def subtract(self: E, other: E) -> E:
        """Разность self - other."""

    @abstractmethod
    def multiply_by(self: E, other: E) -> E:
        """Произведение self * other."""

    @abstractmethod
    def divide_by(self: E, other: E) -> E:
        """
        Частное self / other.

        Raises:
            DomainError: Если other необратим (или частное вне кольца)
        """

    @abstractmethod
    def compare(self: E, other: E) -> int:
        """
        Полный порядок.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """

    # =========================================================================
    # OPERAND CHECK
    # =========================================================================

    def require_same_ring(self: E, other: object) -> E:
        """
        Проверка, что other — элемент того же конкретного кольца.

        Args:
            other: Второй операнд

        Returns:
            other (для удобства цепочки)

        Raises:
            TypeMismatch: Если other другого типа (включая None)
        """
        if type(other) is not type(self):
            raise TypeMismatch(
                f"Cannot operate on {type(self).__name__} and {type(other).__name__}"
            )
        return other

    # =========================================================================
    # OPERATORS
    # =========================================================================

    def __add__(self, other):
        if not isinstance(other, ArithmeticElement):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, ArithmeticElement):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, ArithmeticElement):
            return NotImplemented
        return self.multiply_by(other)

    def __truediv__(self, other):
        if not isinstance(other, ArithmeticElement):
            return NotImplemented
        return self.divide_by(other)

    def __lt__(self, other):
        if not isinstance(other, ArithmeticElement):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, ArithmeticElement):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, ArithmeticElement):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, ArithmeticElement):
            return NotImplemented
        return self.compare(other) >= 0
