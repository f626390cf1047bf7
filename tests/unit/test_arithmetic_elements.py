"""
Тесты для ArithmeticElement и конкретных колец: IntegerElement, RealElement

Проверяет:
1. Замкнутость операций и чистоту (операнды не изменяются)
2. TypeMismatch для операндов другого кольца
3. DomainError для неопределённых операций (деление на ноль, неточное деление)
4. Полный порядок, согласованный с равенством
5. Структурное равенство и hash (frozen=True)
6. Валидацию полей Pydantic (strict int, finite float)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import IntegerElement, RealElement
from src.core.math.arithmetic import ArithmeticElement
from src.core.math.errors import DomainError, ElementError, TypeMismatch


# =============================================================================
# CONTRACT
# =============================================================================


class TestArithmeticElementContract:
    """Тесты абстрактного контракта"""

    def test_cannot_instantiate_abstract(self) -> None:
        """Абстрактный элемент не создаётся"""
        with pytest.raises(TypeError):
            ArithmeticElement()

    def test_incomplete_subclass_is_abstract(self) -> None:
        """Подкласс без всех пяти операций остаётся абстрактным"""

        class OnlyAdd(ArithmeticElement):
            value: int

            def add(self, other):
                return OnlyAdd(value=self.value + other.value)

        with pytest.raises(TypeError):
            OnlyAdd(value=1)

    def test_error_hierarchy(self) -> None:
        """TypeMismatch и DomainError совместимы со стандартными исключениями"""
        assert issubclass(TypeMismatch, ElementError)
        assert issubclass(TypeMismatch, TypeError)
        assert issubclass(DomainError, ElementError)
        assert issubclass(DomainError, ArithmeticError)


# =============================================================================
# INTEGER ELEMENT
# =============================================================================


class TestIntegerElement:
    """Тесты для IntegerElement"""

    def test_operations(self) -> None:
        a, b = IntegerElement.of(12), IntegerElement.of(4)
        assert a.add(b) == IntegerElement.of(16)
        assert a.subtract(b) == IntegerElement.of(8)
        assert a.multiply_by(b) == IntegerElement.of(48)
        assert a.divide_by(b) == IntegerElement.of(3)

    def test_operators_delegate(self) -> None:
        a, b = IntegerElement.of(12), IntegerElement.of(4)
        assert a + b == IntegerElement.of(16)
        assert a - b == IntegerElement.of(8)
        assert a * b == IntegerElement.of(48)
        assert a / b == IntegerElement.of(3)

    def test_arbitrary_precision(self) -> None:
        big = IntegerElement.of(2**127 - 1)
        assert big.multiply_by(big).value == (2**127 - 1) ** 2

    def test_operands_unchanged(self) -> None:
        """Операции чистые"""
        a, b = IntegerElement.of(5), IntegerElement.of(7)
        a.add(b)
        a.multiply_by(b)
        assert a.value == 5
        assert b.value == 7

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DomainError, match="divide by zero"):
            IntegerElement.of(5).divide_by(IntegerElement.zero())

    def test_inexact_division(self) -> None:
        """ℤ без обратных: неточное частное → DomainError"""
        with pytest.raises(DomainError, match="not divisible"):
            IntegerElement.of(7).divide_by(IntegerElement.of(2))

    def test_exact_negative_division(self) -> None:
        assert IntegerElement.of(-9).divide_by(IntegerElement.of(3)) == IntegerElement.of(-3)

    def test_type_mismatch(self) -> None:
        """Операнд другого кольца → TypeMismatch"""
        with pytest.raises(TypeMismatch, match="IntegerElement and RealElement"):
            IntegerElement.of(1).add(RealElement.of(1.0))

    def test_none_operand(self) -> None:
        with pytest.raises(TypeMismatch, match="NoneType"):
            IntegerElement.of(1).multiply_by(None)

    def test_operator_with_plain_int_unsupported(self) -> None:
        with pytest.raises(TypeError):
            IntegerElement.of(1) + 1

    def test_compare(self) -> None:
        a, b = IntegerElement.of(1), IntegerElement.of(2)
        assert a.compare(b) == -1
        assert b.compare(a) == 1
        assert a.compare(IntegerElement.of(1)) == 0
        assert a < b
        assert b >= a
        assert sorted([b, a]) == [a, b]

    def test_zero_one(self) -> None:
        assert IntegerElement.zero().add(IntegerElement.one()) == IntegerElement.one()

    def test_strict_value(self) -> None:
        """strict int: float, str и bool отклоняются"""
        with pytest.raises(ValidationError):
            IntegerElement(value=1.5)
        with pytest.raises(ValidationError):
            IntegerElement(value="3")
        with pytest.raises(ValidationError):
            IntegerElement(value=True)

    def test_immutable(self) -> None:
        a = IntegerElement.of(1)
        with pytest.raises(ValidationError):
            a.value = 2

    def test_structural_equality_and_hash(self) -> None:
        """Равенство и hash по значению, не по identity"""
        a, b = IntegerElement.of(42), IntegerElement.of(42)
        assert a is not b
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_str(self) -> None:
        assert str(IntegerElement.of(-7)) == "-7"


# =============================================================================
# REAL ELEMENT
# =============================================================================


class TestRealElement:
    """Тесты для RealElement"""

    def test_operations(self) -> None:
        a, b = RealElement.of(3.0), RealElement.of(1.5)
        assert a.add(b) == RealElement.of(4.5)
        assert a.subtract(b) == RealElement.of(1.5)
        assert a.multiply_by(b) == RealElement.of(4.5)
        assert a.divide_by(b) == RealElement.of(2.0)

    def test_int_input_coerced(self) -> None:
        assert RealElement.of(2) == RealElement.of(2.0)
        assert isinstance(RealElement.of(2).value, float)

    def test_rejects_bool(self) -> None:
        """bool не приводится к 1.0/0.0"""
        with pytest.raises(ValidationError, match="must be a number"):
            RealElement(value=True)
        with pytest.raises(ValidationError, match="must be a number"):
            RealElement.of(False)

    @pytest.mark.parametrize("raw", ["1.5", b"1.5", "nan"])
    def test_rejects_strings(self, raw) -> None:
        """Strict mode: строки не парсятся в float"""
        with pytest.raises(ValidationError):
            RealElement(value=raw)

    def test_huge_int_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be finite"):
            RealElement.of(10**400)

    def test_rejects_nan_and_inf(self) -> None:
        with pytest.raises(ValidationError, match="must be finite"):
            RealElement.of(float("nan"))
        with pytest.raises(ValidationError, match="must be finite"):
            RealElement.of(float("inf"))

    def test_overflow_is_domain_error(self) -> None:
        """Результат Inf не становится элементом"""
        big = RealElement.of(1e308)
        with pytest.raises(DomainError, match="multiply_by"):
            big.multiply_by(RealElement.of(10.0))
        with pytest.raises(DomainError, match="add"):
            big.add(big)

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DomainError, match="divide by zero"):
            RealElement.of(1.0).divide_by(RealElement.zero())

    def test_type_mismatch(self) -> None:
        with pytest.raises(TypeMismatch):
            RealElement.of(1.0).subtract(IntegerElement.of(1))

    def test_compare_exact(self) -> None:
        a, b = RealElement.of(0.1 + 0.2), RealElement.of(0.3)
        assert a != b
        assert a.compare(b) == 1
        assert a.compare(a) == 0

    def test_is_close(self) -> None:
        assert RealElement.of(0.1 + 0.2).is_close(RealElement.of(0.3))
        assert not RealElement.of(1.0).is_close(RealElement.of(1.1))

    def test_equality_and_hash(self) -> None:
        assert RealElement.of(1.5) == RealElement.of(1.5)
        assert hash(RealElement.of(1.5)) == hash(RealElement.of(1.5))

    def test_different_rings_never_equal(self) -> None:
        assert RealElement.of(1.0) != IntegerElement.of(1)
