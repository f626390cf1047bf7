"""
Test suite for DeathRay crypto core

Contains:
- tests/unit/          : Unit tests for the matrix engine and element types
"""
