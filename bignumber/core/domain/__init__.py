"""
Domain models and value objects.

Contains the BigNumber value type and its error hierarchy.
"""

from bignumber.core.domain.big_number import (
    ZERO,
    BigNumber,
    BigNumberError,
    DivisionByZero,
    DivModResult,
    InvalidFormat,
    parse,
)

__all__ = [
    "ZERO",
    "BigNumber",
    "BigNumberError",
    "DivisionByZero",
    "DivModResult",
    "InvalidFormat",
    "parse",
]
