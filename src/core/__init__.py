"""
Core algebra primitives and element types.

This package contains the foundational building blocks that are independent
of the cipher and provider layers: the generic immutable Matrix engine and
the ArithmeticElement contract it is parameterized over.
"""
