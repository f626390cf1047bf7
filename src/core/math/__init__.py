"""
Core math modules для DeathRay crypto

Generic matrix engine, контракт элемента кольца и численные примитивы.
"""

# Errors
from src.core.math.errors import (
    AlgebraError,
    DomainError,
    ElementError,
    IndexOutOfRange,
    InvalidArgument,
    InvalidShape,
    MatrixError,
    MissingRow,
    NullSource,
    RaggedShape,
    ShapeMismatch,
    TypeMismatch,
)

# Arithmetic Element contract
from src.core.math.arithmetic import ArithmeticElement

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    compare_exact,
    is_close,
    is_valid_float,
    require_finite,
)

# Matrix engine
from src.core.math.matrix import Matrix, dot_product

__all__ = [
    # Errors — roots
    "AlgebraError",
    "MatrixError",
    "ElementError",
    # Errors — matrix
    "InvalidShape",
    "NullSource",
    "MissingRow",
    "RaggedShape",
    "IndexOutOfRange",
    "ShapeMismatch",
    "InvalidArgument",
    # Errors — element
    "TypeMismatch",
    "DomainError",
    # Arithmetic Element
    "ArithmeticElement",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Functions
    "compare_exact",
    "is_close",
    "is_valid_float",
    "require_finite",
    # Matrix engine
    "Matrix",
    "dot_product",
]
