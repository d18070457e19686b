"""
Core math modules для bignumber

Примитивы над магнитудами в base 2^32 и нормализованное длинное деление.
Знак здесь не обрабатывается: только абсолютные значения.
"""

# Word Arithmetic
from bignumber.core.math.words import (
    # Word constants
    DECIMAL_BASE,
    WORD_BASE,
    WORD_BITS,
    WORD_MASK,
    # Normalization & comparison
    bit_length,
    compare_magnitudes,
    join_words,
    split_words,
    trim,
    # Add / subtract
    add_magnitudes,
    add_word,
    subtract_magnitudes,
    # Multiply
    multiply_magnitudes,
    multiply_word,
    # Short division
    divmod_word,
    # Shifts
    leading_zero_bits,
    shift_left,
    shift_right,
    # Bitwise
    and_magnitudes,
    or_magnitudes,
)

# Long Division
from bignumber.core.math.division import (
    LongDivisionResult,
    divmod_magnitudes,
    estimate_quotient_word,
)

__all__ = [
    # Word Arithmetic: Constants
    "DECIMAL_BASE",
    "WORD_BASE",
    "WORD_BITS",
    "WORD_MASK",
    # Word Arithmetic: Normalization & comparison
    "bit_length",
    "compare_magnitudes",
    "join_words",
    "split_words",
    "trim",
    # Word Arithmetic: Add / subtract
    "add_magnitudes",
    "add_word",
    "subtract_magnitudes",
    # Word Arithmetic: Multiply
    "multiply_magnitudes",
    "multiply_word",
    # Word Arithmetic: Short division
    "divmod_word",
    # Word Arithmetic: Shifts
    "leading_zero_bits",
    "shift_left",
    "shift_right",
    # Word Arithmetic: Bitwise
    "and_magnitudes",
    "or_magnitudes",
    # Long Division
    "LongDivisionResult",
    "divmod_magnitudes",
    "estimate_quotient_word",
]
