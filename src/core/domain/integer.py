"""
IntegerElement — Кольцо целых чисел ℤ

Immutable Pydantic модель, точная арифметика произвольной разрядности.

ℤ — кольцо без мультипликативных обратных: divide_by определён только для
точного частного. Деление на ноль или неточное частное → DomainError.
"""

from pydantic import Field

from src.core.math.arithmetic import ArithmeticElement
from src.core.math.errors import DomainError


class IntegerElement(ArithmeticElement):
    """
    Элемент кольца ℤ.

    Strict int: bool, float и str не принимаются (ValidationError).
    """

    value: int = Field(..., strict=True, description="Целое значение")

    @classmethod
    def of(cls, value: int) -> "IntegerElement":
        return cls(value=value)

    @classmethod
    def zero(cls) -> "IntegerElement":
        return cls(value=0)

    @classmethod
    def one(cls) -> "IntegerElement":
        return cls(value=1)

    def add(self, other: "IntegerElement") -> "IntegerElement":
        other = self.require_same_ring(other)
        return IntegerElement(value=self.value + other.value)

    def subtract(self, other: "IntegerElement") -> "IntegerElement":
        other = self.require_same_ring(other)
        return IntegerElement(value=self.value - other.value)

    def multiply_by(self, other: "IntegerElement") -> "IntegerElement":
        other = self.require_same_ring(other)
        return IntegerElement(value=self.value * other.value)

    def divide_by(self, other: "IntegerElement") -> "IntegerElement":
        """
        Точное деление в ℤ.

        Raises:
            TypeMismatch: Если other не IntegerElement
            DomainError: Если other == 0 или other не делит self нацело
        """
        other = self.require_same_ring(other)
        if other.value == 0:
            raise DomainError("Cannot divide by zero")

        quotient, remainder = divmod(self.value, other.value)
        if remainder != 0:
            raise DomainError(f"{self.value} is not divisible by {other.value} in the integers")
        return IntegerElement(value=quotient)

    def compare(self, other: "IntegerElement") -> int:
        other = self.require_same_ring(other)
        return (self.value > other.value) - (self.value < other.value)

    def __str__(self) -> str:
        return str(self.value)
