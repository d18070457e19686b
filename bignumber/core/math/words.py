"""
Word Arithmetic: примитивы над магнитудами в base 2^32

Магнитуда: список беззнаковых 32-битных слов, младшее слово первым.
Все функции модуля работают только с абсолютными значениями: знак
обрабатывается уровнем выше (BigNumber).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждое слово результата лежит в [0, WORD_MASK]
2. Результаты возвращаются в канонической форме (без старших нулевых слов,
   ноль = пустой список)
3. Входные списки никогда не модифицируются: всегда новый список
4. Нет глобального изменяемого состояния (thread-safe)
"""

from typing import Final, Sequence

# =============================================================================
# WORD-ПАРАМЕТРЫ
# =============================================================================

# Разрядность одного слова
WORD_BITS: Final[int] = 32

# Основание системы счисления магнитуды
WORD_BASE: Final[int] = 1 << WORD_BITS

# Маска младших WORD_BITS бит
WORD_MASK: Final[int] = WORD_BASE - 1

# Основание для десятичного ввода/вывода
DECIMAL_BASE: Final[int] = 10


# =============================================================================
# НОРМАЛИЗАЦИЯ И СРАВНЕНИЕ
# =============================================================================


def trim(words: list[int]) -> list[int]:
    """
    Удаление старших нулевых слов (in-place).

    Args:
        words: Scratch-список слов, принадлежащий вызывающему

    Returns:
        Тот же список в канонической форме
    """
    while words and words[-1] == 0:
        words.pop()
    return words


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение двух канонических магнитуд.

    Сначала по количеству слов, затем пословно от старшего к младшему.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b

    Examples:
        >>> compare_magnitudes([1, 1], [5])
        1
        >>> compare_magnitudes([3], [3])
        0
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def split_words(value: int) -> list[int]:
    """
    Разложение неотрицательного int на слова (little-endian).

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    words = []
    while value:
        words.append(value & WORD_MASK)
        value >>= WORD_BITS
    return words


def join_words(words: Sequence[int]) -> int:
    """Сборка неотрицательного int из слов (little-endian)."""
    value = 0
    for word in reversed(words):
        value = (value << WORD_BITS) | word
    return value


def bit_length(words: Sequence[int]) -> int:
    """Количество значащих бит магнитуды (0 для нуля)."""
    if not words:
        return 0
    return (len(words) - 1) * WORD_BITS + words[-1].bit_length()


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение магнитуд с переносом.

    Проход по длине большего операнда; если после последнего слова остался
    перенос, он добавляется отдельным словом.

    Examples:
        >>> add_magnitudes([WORD_MASK], [1])
        [0, 1]
    """
    if len(a) < len(b):
        a, b = b, a

    result = []
    carry = 0

    for i in range(len(a)):
        total = a[i] + carry
        if i < len(b):
            total += b[i]
        result.append(total & WORD_MASK)
        carry = total >> WORD_BITS

    if carry:
        result.append(carry)

    return result


def subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Вычитание магнитуд с заёмом: a - b.

    Args:
        a: Уменьшаемое (должно быть >= b)
        b: Вычитаемое

    Returns:
        Каноническая магнитуда a - b

    Raises:
        ValueError: Если a < b (результат был бы отрицательным)

    Examples:
        >>> subtract_magnitudes([0, 1], [1])
        [4294967295]
    """
    if compare_magnitudes(a, b) < 0:
        raise ValueError("subtract_magnitudes requires a >= b")

    result = []
    borrow = 0

    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += WORD_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return trim(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Школьное умножение магнитуд, O(len(a) * len(b)).

    Аккумулирует a[i] * b[j] + buffer[i + j] + carry в позицию i + j.
    Промежуточная сумма не превышает (2^32 - 1)^2 + 2 * (2^32 - 1) < 2^64,
    т.е. укладывается в 64 бита, как в word-level реализации.
    """
    if not a or not b:
        return []

    result = [0] * (len(a) + len(b))

    for i, a_word in enumerate(a):
        if a_word == 0:
            continue
        carry = 0
        for j, b_word in enumerate(b):
            total = result[i + j] + a_word * b_word + carry
            result[i + j] = total & WORD_MASK
            carry = total >> WORD_BITS
        k = i + len(b)
        while carry:
            total = result[k] + carry
            result[k] = total & WORD_MASK
            carry = total >> WORD_BITS
            k += 1

    return trim(result)


def multiply_word(a: Sequence[int], word: int) -> list[int]:
    """Умножение магнитуды на одно слово."""
    if not 0 <= word <= WORD_MASK:
        raise ValueError(f"word out of range: {word}")
    if word == 0:
        return []

    result = []
    carry = 0
    for a_word in a:
        total = a_word * word + carry
        result.append(total & WORD_MASK)
        carry = total >> WORD_BITS
    if carry:
        result.append(carry)

    return result


def add_word(a: Sequence[int], word: int) -> list[int]:
    """Прибавление одного слова к магнитуде."""
    if not 0 <= word <= WORD_MASK:
        raise ValueError(f"word out of range: {word}")

    result = list(a)
    carry = word
    i = 0
    while carry:
        if i == len(result):
            result.append(carry)
            break
        total = result[i] + carry
        result[i] = total & WORD_MASK
        carry = total >> WORD_BITS
        i += 1

    return result


# =============================================================================
# КОРОТКОЕ ДЕЛЕНИЕ
# =============================================================================


def divmod_word(a: Sequence[int], divisor: int) -> tuple[list[int], int]:
    """
    Деление магнитуды на одно слово (fast path).

    Проход от старшего слова к младшему: current = (remainder << 32) + word.

    Args:
        a: Делимое
        divisor: Делитель, 1 <= divisor <= WORD_MASK

    Returns:
        (quotient, remainder)

    Raises:
        ZeroDivisionError: Если divisor == 0
        ValueError: Если divisor не помещается в слово

    Examples:
        >>> divmod_word([123], 10)
        ([12], 3)
    """
    if divisor == 0:
        raise ZeroDivisionError("division of magnitude by zero word")
    if not 0 < divisor <= WORD_MASK:
        raise ValueError(f"divisor out of word range: {divisor}")

    quotient = [0] * len(a)
    remainder = 0

    for i in range(len(a) - 1, -1, -1):
        current = (remainder << WORD_BITS) + a[i]
        quotient[i] = current // divisor
        remainder = current % divisor

    return trim(quotient), remainder


# =============================================================================
# СДВИГИ
# =============================================================================


def shift_left(a: Sequence[int], bits: int) -> list[int]:
    """
    Логический сдвиг магнитуды влево.

    Сначала сдвиг на bits // 32 слов, затем на bits % 32 бит с переносом
    вверх; остаток переноса добавляется новым словом.
    """
    if bits < 0:
        raise ValueError(f"shift count must be non-negative, got {bits}")
    if not a or bits == 0:
        return list(a)

    word_shift, bit_shift = divmod(bits, WORD_BITS)
    result = [0] * word_shift

    if bit_shift == 0:
        result.extend(a)
        return result

    carry = 0
    for word in a:
        current = (word << bit_shift) | carry
        result.append(current & WORD_MASK)
        carry = current >> WORD_BITS
    if carry:
        result.append(carry)

    return result


def shift_right(a: Sequence[int], bits: int) -> list[int]:
    """
    Логический сдвиг магнитуды вправо.

    Если сдвиг на слова не меньше длины магнитуды: результат ноль.
    Биты, выдвинутые из слова, переходят в старшие разряды младшего слова.
    """
    if bits < 0:
        raise ValueError(f"shift count must be non-negative, got {bits}")
    if not a or bits == 0:
        return list(a)

    word_shift, bit_shift = divmod(bits, WORD_BITS)
    if word_shift >= len(a):
        return []

    result = list(a[word_shift:])
    if bit_shift == 0:
        return result

    low_mask = (1 << bit_shift) - 1
    carry = 0
    for i in range(len(result) - 1, -1, -1):
        current = (carry << WORD_BITS) | result[i]
        result[i] = (current >> bit_shift) & WORD_MASK
        carry = current & low_mask

    return trim(result)


def leading_zero_bits(word: int) -> int:
    """Количество ведущих нулевых бит в слове (32 для нуля)."""
    return WORD_BITS - word.bit_length()


# =============================================================================
# ПОБИТОВЫЕ ОПЕРАЦИИ
# =============================================================================


def and_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """AND по пересечению диапазонов слов (длина меньшего операнда)."""
    return trim([x & y for x, y in zip(a, b)])


def or_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """OR по объединению диапазонов; недостающие слова считаются нулями."""
    n = max(len(a), len(b))
    result = []
    for i in range(n):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        result.append(x | y)
    return trim(result)
