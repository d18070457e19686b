"""
bignumber: arbitrary-precision signed integer arithmetic.

Base 2^32 magnitudes, truncating division, magnitude-only bitwise AND/OR,
logical shifts and decimal text conversion.
"""

from bignumber.core.domain import (
    ZERO,
    BigNumber,
    BigNumberError,
    DivisionByZero,
    DivModResult,
    InvalidFormat,
    parse,
)

__version__ = "1.0.0"

__all__ = [
    "ZERO",
    "BigNumber",
    "BigNumberError",
    "DivisionByZero",
    "DivModResult",
    "InvalidFormat",
    "parse",
    "__version__",
]
