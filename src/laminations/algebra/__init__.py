"""
Base-bound lamination algebra.

Typed entry point that parses textual expansions into unit numbers and
applies the forward (shift) map.
"""

from laminations.algebra.config import AlgebraConfig, Representation
from laminations.algebra.lamination_algebra import LaminationAlgebra

__all__ = [
    "AlgebraConfig",
    "Representation",
    "LaminationAlgebra",
]
