"""
Long Division: нормализованное деление многословных магнитуд

Деление в стиле Knuth (Algorithm D) над абсолютными значениями:

1. Нормализация: делитель и делимое сдвигаются влево на norm бит, где norm =
   число ведущих нулевых бит старшего слова делителя. После сдвига старший
   бит делителя установлен, что ограничивает ошибку оценки цифры частного.
2. Для каждой позиции i от (n - m) до 0:
   - оценка qguess = (rem[i+m] * 2^32 + rem[i+m-1]) // divisor_top,
     с clamp до WORD_MASK
   - trial = divisor * qguess, выровненный на слово i
   - коррекция: пока remainder < trial → qguess -= 1, пересчёт trial
   - quotient[i] = qguess, remainder -= trial
3. Денормализация: remainder >>= norm (частное не требует коррекции)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Перед шагом i выполняется remainder < divisor * 2^(32*(i+1)),
   поэтому истинная цифра частного помещается в слово
2. Оценка qguess никогда не меньше истинной цифры; коррекция только вниз
3. Делимое и делитель вызывающего не модифицируются (scratch-копии)

Сложность: O((n - m) * m) операций над словами.
"""

from typing import NamedTuple, Sequence

from bignumber.core.math.words import (
    WORD_BITS,
    WORD_MASK,
    compare_magnitudes,
    leading_zero_bits,
    multiply_word,
    shift_left,
    shift_right,
    subtract_magnitudes,
)


class LongDivisionResult(NamedTuple):
    """Результат деления магнитуд."""

    quotient: list[int]
    remainder: list[int]


# =============================================================================
# ОЦЕНКА ЦИФРЫ ЧАСТНОГО
# =============================================================================


def estimate_quotient_word(
    remainder: Sequence[int], divisor_top: int, position: int, divisor_len: int
) -> int:
    """
    Оценка цифры частного по 64-битному окну остатка.

    Args:
        remainder: Текущий (нормализованный) остаток
        divisor_top: Старшее слово нормализованного делителя
        position: Позиция цифры частного i
        divisor_len: Количество слов делителя m

    Returns:
        qguess в [0, WORD_MASK]; слова за пределами остатка читаются как 0
    """
    hi_index = position + divisor_len
    lo_index = hi_index - 1

    r_hi = remainder[hi_index] if hi_index < len(remainder) else 0
    r_lo = remainder[lo_index] if lo_index < len(remainder) else 0

    numerator = (r_hi << WORD_BITS) | r_lo
    qguess = numerator // divisor_top

    if qguess > WORD_MASK:
        qguess = WORD_MASK

    return qguess


def _aligned_trial(divisor: Sequence[int], qguess: int, position: int) -> list[int]:
    return shift_left(multiply_word(divisor, qguess), WORD_BITS * position)


# =============================================================================
# ДЕЛЕНИЕ МАГНИТУД
# =============================================================================


def divmod_magnitudes(
    dividend: Sequence[int], divisor: Sequence[int]
) -> LongDivisionResult:
    """
    Деление магнитуд с остатком.

    Args:
        dividend: Делимое (каноническая магнитуда)
        divisor: Делитель (каноническая ненулевая магнитуда)

    Returns:
        LongDivisionResult(quotient, remainder) в канонической форме

    Raises:
        ZeroDivisionError: Если делитель равен нулю

    Examples:
        >>> divmod_magnitudes([100], [7])
        LongDivisionResult(quotient=[14], remainder=[2])
        >>> divmod_magnitudes([3], [7])
        LongDivisionResult(quotient=[], remainder=[3])
    """
    if not divisor:
        raise ZeroDivisionError("division of magnitude by zero")

    if not dividend:
        return LongDivisionResult(quotient=[], remainder=[])

    if compare_magnitudes(dividend, divisor) < 0:
        return LongDivisionResult(quotient=[], remainder=list(dividend))

    # 1. Нормализация
    norm = leading_zero_bits(divisor[-1])
    norm_divisor = shift_left(divisor, norm)
    remainder = shift_left(dividend, norm)

    n = len(remainder)
    m = len(norm_divisor)
    divisor_top = norm_divisor[-1]

    quotient = [0] * (n - m + 1)

    # 2. Цифры частного от старшей к младшей
    for i in range(n - m, -1, -1):
        qguess = estimate_quotient_word(remainder, divisor_top, i, m)
        trial = _aligned_trial(norm_divisor, qguess, i)

        while compare_magnitudes(remainder, trial) < 0:
            qguess -= 1
            trial = _aligned_trial(norm_divisor, qguess, i)

        quotient[i] = qguess
        remainder = subtract_magnitudes(remainder, trial)

    # 3. Денормализация остатка
    remainder = shift_right(remainder, norm)

    while quotient and quotient[-1] == 0:
        quotient.pop()

    return LongDivisionResult(quotient=quotient, remainder=remainder)
