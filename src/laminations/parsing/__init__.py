"""
Parsing of textual n-ary expansions.

Splits `[exact]_[repeating]` text into digit runs and reports malformed input
through the ParseError taxonomy.
"""

from laminations.parsing.digit_parser import (
    parse_digit,
    parse_nary,
    split_parts,
    tokenize_digits,
)
from laminations.parsing.errors import (
    REASON_NOT_NUMERICAL,
    REASON_OUT_OF_RANGE,
    InvalidDigitError,
    ParseError,
    TooManySeparatorsError,
)

__all__ = [
    # Parser
    "parse_nary",
    "split_parts",
    "tokenize_digits",
    "parse_digit",
    # Errors
    "ParseError",
    "TooManySeparatorsError",
    "InvalidDigitError",
    "REASON_NOT_NUMERICAL",
    "REASON_OUT_OF_RANGE",
]
