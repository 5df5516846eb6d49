"""
Lamination Algebra

Algebra of real numbers in the unit interval [0, 1) given by their
eventually-periodic n-ary digit expansions: parsing, canonical comparison
and the forward (shift) map.
"""

from laminations.algebra import AlgebraConfig, LaminationAlgebra, Representation
from laminations.core.domain import DigitExpansion, Ordering, UnitFraction, UnitNumber
from laminations.dynamics import ForwardOrbit, OrbitLimitExceeded, forward_orbit
from laminations.parsing import InvalidDigitError, ParseError, TooManySeparatorsError

__version__ = "0.1.0"

__all__ = [
    # Algebra
    "AlgebraConfig",
    "LaminationAlgebra",
    "Representation",
    # Values
    "DigitExpansion",
    "Ordering",
    "UnitFraction",
    "UnitNumber",
    # Dynamics
    "ForwardOrbit",
    "OrbitLimitExceeded",
    "forward_orbit",
    # Errors
    "ParseError",
    "TooManySeparatorsError",
    "InvalidDigitError",
]
