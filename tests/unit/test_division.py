"""
Юнит-тесты для нормализованного длинного деления

Проверяемые инварианты:
1. dividend == divisor * quotient + remainder, remainder < divisor
2. Оценка цифры частного не меньше истинной и ограничена WORD_MASK
3. Коррекция оценки (делители с малым старшим словом)
4. Короткие пути: нулевое делимое, делимое меньше делителя
5. Входные магнитуды не модифицируются
"""

import random

import pytest

from bignumber.core.math.division import (
    LongDivisionResult,
    divmod_magnitudes,
    estimate_quotient_word,
)
from bignumber.core.math.words import WORD_BASE, WORD_MASK, join_words, split_words


def _check(dividend: int, divisor: int) -> LongDivisionResult:
    result = divmod_magnitudes(split_words(dividend), split_words(divisor))
    assert join_words(result.quotient) == dividend // divisor
    assert join_words(result.remainder) == dividend % divisor
    # Каноническая форма
    assert not result.quotient or result.quotient[-1] != 0
    assert not result.remainder or result.remainder[-1] != 0
    return result


# =============================================================================
# ТЕСТЫ: Оценка цифры частного
# =============================================================================


class TestEstimateQuotientWord:
    """Тесты estimate_quotient_word"""

    def test_basic_window(self) -> None:
        """Окно из двух слов делится на старшее слово делителя"""
        # remainder = 2^64, окно (1, 0) / 2^31 = 2
        assert estimate_quotient_word([0, 0, 1], 0x80000000, 1, 1) == 2

    def test_clamped_to_word_max(self) -> None:
        """Переполнение оценки ограничивается WORD_MASK"""
        remainder = [0, 5, 0x80000000]
        assert estimate_quotient_word(remainder, 0x80000000, 1, 1) == WORD_MASK

    def test_missing_words_read_as_zero(self) -> None:
        """Слова за пределами остатка читаются как 0"""
        assert estimate_quotient_word([7], 0x80000000, 0, 2) == 0
        assert estimate_quotient_word([], 0x80000000, 0, 1) == 0


# =============================================================================
# ТЕСТЫ: Деление магнитуд
# =============================================================================


class TestDivmodMagnitudes:
    """Тесты divmod_magnitudes"""

    def test_small_values(self) -> None:
        """Деление однословных значений"""
        assert divmod_magnitudes([100], [7]) == LongDivisionResult(quotient=[14], remainder=[2])

    def test_zero_dividend(self) -> None:
        """0 / b == 0, остаток 0"""
        assert divmod_magnitudes([], [5]) == LongDivisionResult(quotient=[], remainder=[])

    def test_dividend_less_than_divisor(self) -> None:
        """a < b: частное 0, остаток a"""
        result = divmod_magnitudes([3], [0, 1])
        assert result.quotient == []
        assert result.remainder == [3]

    def test_equal_magnitudes(self) -> None:
        """a == b: частное 1, остаток 0"""
        value = split_words(2**100 + 99)
        result = divmod_magnitudes(value, value)
        assert result.quotient == [1]
        assert result.remainder == []

    def test_zero_divisor_raises(self) -> None:
        """Деление на ноль"""
        with pytest.raises(ZeroDivisionError):
            divmod_magnitudes([1], [])

    def test_single_word_divisor(self) -> None:
        """Однословный делитель через общий алгоритм"""
        _check(10**40 + 3, 7)
        _check(10**40 + 3, WORD_MASK)
        _check(2**96, 1)

    def test_top_bit_set_divisor(self) -> None:
        """Делитель уже нормализован (norm = 0)"""
        _check(2**200 - 1, 2**63 + 1)
        _check(2**128, WORD_MASK * WORD_BASE + WORD_MASK)

    def test_correction_loop_cases(self) -> None:
        """Делители с малым старшим словом (оценка требует коррекции)"""
        _check(2**96 - 1, 2**32 + 1)
        _check(2**128 - 1, 2**64 + WORD_MASK)
        _check(WORD_MASK * 2**64 + 1, 2**32 + WORD_MASK)
        _check(2**95, 2**63 - 1)

    def test_multiword_quotient(self) -> None:
        """Многословное частное и остаток"""
        dividend = 123456789012345678901234567890**3
        divisor = 987654321987654321
        result = _check(dividend, divisor)
        assert len(result.quotient) > 1

    def test_exact_division(self) -> None:
        """Точное деление даёт нулевой остаток"""
        divisor = 3**80
        result = _check(divisor * (2**70 + 5), divisor)
        assert result.remainder == []

    def test_inputs_not_mutated(self) -> None:
        """Делимое и делитель не изменяются (scratch-копии)"""
        dividend = split_words(2**150 + 12345)
        divisor = split_words(2**40 + 3)
        dividend_copy = list(dividend)
        divisor_copy = list(divisor)
        divmod_magnitudes(dividend, divisor)
        assert dividend == dividend_copy
        assert divisor == divisor_copy

    def test_randomized_against_int(self) -> None:
        """Случайные операнды разной длины (детерминированный seed)"""
        rng = random.Random(20240601)
        for _ in range(300):
            divisor = rng.getrandbits(rng.randint(1, 200)) or 1
            dividend = rng.getrandbits(rng.randint(1, 400))
            _check(dividend, divisor)
