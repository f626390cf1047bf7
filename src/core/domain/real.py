"""
RealElement — Поле вещественных чисел (конечные float)

Immutable Pydantic модель над IEEE-754 double.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value всегда finite: NaN/Inf отклоняются при создании (ValidationError)
2. Strict: bool и строки не приводятся к float, int продвигается до float
3. Операция с NaN/Inf результатом (переполнение) → DomainError
4. Деление на 0.0 → DomainError
5. Равенство точное; приближённое сравнение только через is_close
"""

from pydantic import Field, field_validator

from src.core.math.arithmetic import ArithmeticElement
from src.core.math.errors import DomainError
from src.core.math.numerical_safeguards import (
    compare_exact,
    is_close,
    is_valid_float,
    require_finite,
)

class RealElement(ArithmeticElement):
    """Элемент поля ℝ, представленный конечным float."""

    value: float = Field(..., strict=True, description="Конечное float значение")

    @field_validator("value", mode="before")
    @classmethod
    def promote_int(cls, v):
        """int продвигается до float; bool и строки не принимаются."""
        if isinstance(v, bool):
            raise ValueError(f"RealElement value must be a number, got {v!r}")
        if isinstance(v, int):
            try:
                return float(v)
            except OverflowError:
                raise ValueError(f"RealElement value must be finite, got {v}") from None
        return v

    @field_validator("value")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        """Проверка, что значение не NaN и не Inf."""
        if not is_valid_float(v):
            raise ValueError(f"RealElement value must be finite, got {v}")
        return v

    @classmethod
    def of(cls, value: float) -> "RealElement":
        return cls(value=value)

    @classmethod
    def zero(cls) -> "RealElement":
        return cls(value=0.0)

    @classmethod
    def one(cls) -> "RealElement":
        return cls(value=1.0)

    def add(self, other: "RealElement") -> "RealElement":
        other = self.require_same_ring(other)
        return RealElement(value=require_finite(self.value + other.value, "add"))

    def subtract(self, other: "RealElement") -> "RealElement":
        other = self.require_same_ring(other)
        return RealElement(value=require_finite(self.value - other.value, "subtract"))

    def multiply_by(self, other: "RealElement") -> "RealElement":
        other = self.require_same_ring(other)
        return RealElement(value=require_finite(self.value * other.value, "multiply_by"))

    def divide_by(self, other: "RealElement") -> "RealElement":
        """
        Деление в ℝ.

        Raises:
            TypeMismatch: Если other не RealElement
            DomainError: Если other == 0.0 или результат не finite
        """
        other = self.require_same_ring(other)
        if other.value == 0.0:
            raise DomainError("Cannot divide by zero")
        return RealElement(value=require_finite(self.value / other.value, "divide_by"))

    def compare(self, other: "RealElement") -> int:
        other = self.require_same_ring(other)
        return compare_exact(self.value, other.value)

    def is_close(self, other: "RealElement") -> bool:
        """Приближённое равенство с толерантностью numerical_safeguards."""
        other = self.require_same_ring(other)
        return is_close(self.value, other.value)

    def __str__(self) -> str:
        return str(self.value)
