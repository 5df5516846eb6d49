"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the algebra:
integer n-ary primitives, unit number value objects and JSON contracts.
"""
