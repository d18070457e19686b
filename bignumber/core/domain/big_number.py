"""
BigNumber: Знаковое целое произвольной точности

Immutable Pydantic модель: магнитуда в base 2^32 (младшее слово первым)
и флаг знака. Все операции возвращают новый экземпляр.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каноническая форма: нет старших нулевых слов, ноль = пустой tuple
2. Знак нуля всегда положительный (negative=False)
3. Каждое слово магнитуды в [0, 2^32 - 1]
4. Деление: усечённое: частное округляется к нулю, знак остатка
   совпадает со знаком делимого (a == b * q + r, |r| < |b|)
5. Побитовые AND/OR работают только с магнитудами; результат неотрицателен
6. Сдвиги: логические сдвиги магнитуды, знак сохраняется
"""

from typing import NamedTuple, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictInt, ValidationInfo, field_validator

from bignumber.core.math.division import divmod_magnitudes
from bignumber.core.math.words import (
    DECIMAL_BASE,
    WORD_MASK,
    add_magnitudes,
    add_word,
    and_magnitudes,
    bit_length as words_bit_length,
    compare_magnitudes,
    divmod_word,
    join_words,
    multiply_magnitudes,
    multiply_word,
    or_magnitudes,
    shift_left as shift_words_left,
    shift_right as shift_words_right,
    split_words,
    subtract_magnitudes,
    trim,
)

# Допустимые символы десятичной записи (только ASCII)
DECIMAL_DIGITS = "0123456789"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigNumberError(Exception):
    """Базовая ошибка арифметики произвольной точности."""


class InvalidFormat(BigNumberError, ValueError):
    """
    Некорректная десятичная запись.

    Допустимый формат: необязательный ведущий '-', затем одна или более
    ASCII-цифр. Пробелы, '+', '_' и пустая строка не допускаются.
    """


class DivisionByZero(BigNumberError, ZeroDivisionError):
    """Деление или остаток с нулевым делителем."""


# =============================================================================
# RESULT TYPES
# =============================================================================


class DivModResult(NamedTuple):
    """Результат усечённого деления: частное и остаток."""

    quotient: "BigNumber"
    remainder: "BigNumber"


Operand = Union["BigNumber", int]


# =============================================================================
# BIGNUMBER MODEL
# =============================================================================


class BigNumber(BaseModel):
    """
    Знаковое целое произвольной точности.

    Публичный конструктор валидирует слова и нормализует представление:
    BigNumber(magnitude=(5, 0, 0), negative=True) == BigNumber(magnitude=(5,), negative=True)
    BigNumber(magnitude=(0,), negative=True) == ноль (знак сброшен)

    Результаты операций строятся через _from_words (без повторной валидации).
    """

    magnitude: tuple[StrictInt, ...] = Field(
        default=(), description="Слова base 2^32, младшее первым"
    )
    negative: StrictBool = Field(default=False, description="True для отрицательных чисел")

    model_config = {"frozen": True}  # Immutable

    @field_validator("magnitude")
    @classmethod
    def validate_words(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка диапазона слов и удаление старших нулей."""
        for index, word in enumerate(v):
            if not 0 <= word <= WORD_MASK:
                raise ValueError(f"word {index} out of range [0, {WORD_MASK}]: {word}")
        return tuple(trim(list(v)))

    @field_validator("negative")
    @classmethod
    def validate_zero_sign(cls, v: bool, info: ValidationInfo) -> bool:
        """Ноль не имеет знака."""
        if not info.data.get("magnitude", ()):
            return False
        return v

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def _from_words(cls, words: list[int], negative: bool) -> "BigNumber":
        trim(words)
        return cls.model_construct(magnitude=tuple(words), negative=negative and bool(words))

    @classmethod
    def parse(cls, text: str) -> "BigNumber":
        """
        Разбор десятичной строки.

        Ведущие нули отбрасываются; цифры сворачиваются слева направо
        через result = result * 10 + digit, поэтому длина ввода не ограничена.

        Args:
            text: Десятичная запись с необязательным ведущим '-'

        Returns:
            BigNumber в канонической форме ("-0" → ноль без знака)

        Raises:
            InvalidFormat: Если строка пустая или содержит недопустимые символы
            TypeError: Если text не str

        Examples:
            >>> str(BigNumber.parse("-007"))
            '-7'
            >>> BigNumber.parse("-0").negative
            False
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        negative = text.startswith("-")
        digits = text[1:] if negative else text

        if not digits:
            raise InvalidFormat(f"empty decimal string: {text!r}")

        for ch in digits:
            if ch not in DECIMAL_DIGITS:
                raise InvalidFormat(f"invalid character {ch!r} in decimal string {text!r}")

        words: list[int] = []
        for ch in digits.lstrip("0"):
            words = add_word(multiply_word(words, DECIMAL_BASE), ord(ch) - ord("0"))

        return cls._from_words(words, negative)

    @classmethod
    def from_int(cls, value: int) -> "BigNumber":
        """
        Конверсия знакового int.

        Знак фиксируется до взятия модуля; модуль раскладывается на слова.

        Raises:
            TypeError: Если value не int (bool отвергается)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return cls._from_words(split_words(abs(value)), value < 0)

    @classmethod
    def from_unsigned(cls, value: int) -> "BigNumber":
        """
        Конверсия беззнакового int.

        Raises:
            TypeError: Если value не int
            ValueError: Если value < 0
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"unsigned value must be non-negative, got {value}")
        return cls._from_words(split_words(value), False)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return not self.magnitude

    @property
    def word_count(self) -> int:
        """Количество слов магнитуды (0 для нуля)."""
        return len(self.magnitude)

    def bit_length(self) -> int:
        """Количество значащих бит модуля."""
        return words_bit_length(self.magnitude)

    def to_int(self) -> int:
        value = join_words(self.magnitude)
        return -value if self.negative else value

    def to_decimal_string(self) -> str:
        """
        Десятичная запись.

        Модуль многократно делится на 10 коротким делением; остатки дают
        цифры от младшей к старшей.

        Examples:
            >>> BigNumber.from_int(-1200).to_decimal_string()
            '-1200'
            >>> BigNumber().to_decimal_string()
            '0'
        """
        if self.is_zero():
            return "0"

        digits = []
        words = list(self.magnitude)
        while words:
            words, digit = divmod_word(words, DECIMAL_BASE)
            digits.append(DECIMAL_DIGITS[digit])

        if self.negative:
            digits.append("-")

        return "".join(reversed(digits))

    # -------------------------------------------------------------------------
    # Sign
    # -------------------------------------------------------------------------

    def negate(self) -> "BigNumber":
        """Смена знака; ноль остаётся нулём."""
        if self.is_zero():
            return self
        return self._from_words(list(self.magnitude), not self.negative)

    def abs(self) -> "BigNumber":
        if not self.negative:
            return self
        return self._from_words(list(self.magnitude), False)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Operand) -> "BigNumber":
        """
        Сложение.

        Нулевой операнд возвращает другой операнд.
        Одинаковые знаки: сложение магнитуд, знак общий.
        Разные знаки: a + b == a - (-b).
        """
        other = _require(other)
        if other.is_zero():
            return self
        if self.is_zero():
            return other
        if self.negative == other.negative:
            return self._from_words(
                add_magnitudes(self.magnitude, other.magnitude), self.negative
            )
        return self.subtract(other.negate())

    def subtract(self, other: Operand) -> "BigNumber":
        """
        Вычитание.

        b == 0 возвращает a; a == 0 возвращает -b.
        Разные знаки: a - b == a + (-b).
        Одинаковые знаки: из большей магнитуды вычитается меньшая;
        если |a| < |b|, результат -(b - a).
        """
        other = _require(other)
        if other.is_zero():
            return self
        if self.is_zero():
            return other.negate()
        if self.negative != other.negative:
            return self.add(other.negate())

        if compare_magnitudes(self.magnitude, other.magnitude) >= 0:
            return self._from_words(
                subtract_magnitudes(self.magnitude, other.magnitude), self.negative
            )
        return other.subtract(self).negate()

    def multiply(self, other: Operand) -> "BigNumber":
        """Умножение; знак = XOR знаков операндов."""
        other = _require(other)
        return self._from_words(
            multiply_magnitudes(self.magnitude, other.magnitude),
            self.negative != other.negative,
        )

    def divmod(self, other: Operand) -> DivModResult:
        """
        Усечённое деление с остатком.

        Частное округляется к нулю; остаток имеет знак делимого.

        Args:
            other: Делитель

        Returns:
            DivModResult(quotient, remainder)

        Raises:
            DivisionByZero: Если делитель равен нулю

        Examples:
            >>> q, r = BigNumber.from_int(-5).divmod(3)
            >>> (q.to_int(), r.to_int())
            (-1, -2)
        """
        other = _require(other)
        if other.is_zero():
            raise DivisionByZero(f"division of {self} by zero")

        if self.is_zero():
            return DivModResult(quotient=ZERO, remainder=ZERO)

        # |a| < |b|: частное ноль, остаток: само делимое
        if compare_magnitudes(self.magnitude, other.magnitude) < 0:
            return DivModResult(quotient=ZERO, remainder=self)

        result = divmod_magnitudes(self.magnitude, other.magnitude)
        return DivModResult(
            quotient=self._from_words(result.quotient, self.negative != other.negative),
            remainder=self._from_words(result.remainder, self.negative),
        )

    def div(self, other: Operand) -> "BigNumber":
        """Усечённое частное (см. divmod)."""
        return self.divmod(other).quotient

    def mod(self, other: Operand) -> "BigNumber":
        """Остаток усечённого деления, знак как у делимого (см. divmod)."""
        return self.divmod(other).remainder

    # -------------------------------------------------------------------------
    # Bitwise / shifts
    # -------------------------------------------------------------------------

    def bitwise_and(self, other: Operand) -> "BigNumber":
        """AND магнитуд; знаки операндов игнорируются, результат >= 0."""
        other = _require(other)
        return self._from_words(and_magnitudes(self.magnitude, other.magnitude), False)

    def bitwise_or(self, other: Operand) -> "BigNumber":
        """OR магнитуд; знаки операндов игнорируются, результат >= 0."""
        other = _require(other)
        return self._from_words(or_magnitudes(self.magnitude, other.magnitude), False)

    def shift_left(self, bits: int) -> "BigNumber":
        """Логический сдвиг модуля влево на bits бит; знак сохраняется."""
        bits = _require_shift(bits)
        if self.is_zero() or bits == 0:
            return self
        return self._from_words(shift_words_left(self.magnitude, bits), self.negative)

    def shift_right(self, bits: int) -> "BigNumber":
        """
        Логический сдвиг модуля вправо на bits бит.

        Знак сохраняется, кроме случая, когда все значащие биты выдвинуты
        (результат: ноль без знака). Это не арифметический сдвиг:
        (-5) >> 1 == -2, а не -3.
        """
        bits = _require_shift(bits)
        if self.is_zero() or bits == 0:
            return self
        return self._from_words(shift_words_right(self.magnitude, bits), self.negative)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: Operand) -> int:
        """
        Полный порядок: -1, 0 или 1.

        Отрицательные меньше неотрицательных; при одинаковом знаке
        сравниваются магнитуды, для отрицательных: в обратном направлении.
        """
        other = _require(other)
        if self.negative != other.negative:
            return -1 if self.negative else 1

        order = compare_magnitudes(self.magnitude, other.magnitude)
        return -order if self.negative else order

    def equals(self, other: Operand) -> bool:
        other = _require(other)
        return self.negative == other.negative and self.magnitude == other.magnitude

    def less_than(self, other: Operand) -> bool:
        return self.compare(other) < 0

    def greater_or_equal(self, other: Operand) -> bool:
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __hash__(self) -> int:
        # Совпадает с hash(int), так как BigNumber == int того же значения
        return hash(self.to_int())

    def __eq__(self, other: object) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.equals(coerced)

    def __ne__(self, other: object) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return not self.equals(coerced)

    def __lt__(self, other: object) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) < 0

    def __le__(self, other: object) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) <= 0

    def __gt__(self, other: object) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) > 0

    def __ge__(self, other: object) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) >= 0

    def __neg__(self) -> "BigNumber":
        return self.negate()

    def __pos__(self) -> "BigNumber":
        return self

    def __abs__(self) -> "BigNumber":
        return self.abs()

    def __add__(self, other: object) -> "BigNumber":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.add(coerced)

    def __radd__(self, other: object) -> "BigNumber":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.add(self)

    def __sub__(self, other: object) -> "BigNumber":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.subtract(coerced)

    def __rsub__(self, other: object) -> "BigNumber":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.subtract(self)

    def __mul__(self, other: object) -> "BigNumber":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.multiply(coerced)

    def __rmul__(self, other: object) -> "BigNumber":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.multiply(self)

    def __and__(self, other: object) -> "BigNumber":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.bitwise_and(coerced)

    __rand__ = __and__

    def __or__(self, other: object) -> "BigNumber":
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.bitwise_or(coerced)

    __ror__ = __or__

    def __lshift__(self, bits: int) -> "BigNumber":
        return self.shift_left(bits)

    def __rshift__(self, bits: int) -> "BigNumber":
        return self.shift_right(bits)


# Канонический ноль
ZERO: BigNumber = BigNumber()


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value: object) -> Optional[BigNumber]:
    if isinstance(value, BigNumber):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigNumber.from_int(value)
    return None


def _require(value: object) -> BigNumber:
    coerced = _coerce(value)
    if coerced is None:
        raise TypeError(f"unsupported operand type: {type(value).__name__}")
    return coerced


def _require_shift(bits: object) -> int:
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError(f"shift count must be int, got {type(bits).__name__}")
    if bits < 0:
        raise ValueError(f"shift count must be non-negative, got {bits}")
    return bits


def parse(text: str) -> BigNumber:
    """Разбор десятичной строки (см. BigNumber.parse)."""
    return BigNumber.parse(text)
