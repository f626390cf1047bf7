"""
Concrete arithmetic element types.

Contains the ordinary-number rings shipped with the matrix engine.
"""

from src.core.domain.integer import IntegerElement
from src.core.domain.real import RealElement

__all__ = [
    "IntegerElement",
    "RealElement",
]
