"""
N-ary Expansions — Integer Primitives for Eventually-Periodic Digit Strings

Модуль содержит целочисленные примитивы, на которых строится алгебра
unit fractions:
- Валидация основания системы счисления (base ≥ 2)
- Значение последовательности цифр (most significant first)
- Знаменатель периодической части (base^k − 1, либо 1 при k = 0)
- Приведение дроби к несократимому виду по модулю 1
- Обратное преобразование: рациональное число → (exact, repeating) цифры
  через деление столбиком с детекцией цикла остатков
- Форматирование цифр обратно в текстовое представление

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все вычисления целочисленные (Python int, без переполнения)
2. Результат reduce_mod_one всегда в [0, 1) и в несократимом виде
3. Деление на ноль структурно невозможно: знаменатели ≥ 1
4. Все операции детерминированы и не имеют состояния

ФОРМУЛЫ:
    rd          = base^k − 1          (k = len(repeating), rd = 1 при k = 0)
    denominator = rd × base^m         (m = len(exact))
    numerator   = rd × value(exact) + value(repeating)
    x           = (numerator mod denominator) / denominator
"""

import math
from typing import Final, NamedTuple, Sequence

# =============================================================================
# КОНСТАНТЫ ТЕКСТОВОГО ФОРМАТА
# =============================================================================

# Минимальное допустимое основание
BASE_MIN: Final[int] = 2

# Разделитель exact / repeating частей: "1_100"
DEFAULT_SEPARATOR: Final[str] = "_"

# Разделитель цифр внутри части для оснований ≥ DELIMITED_BASE_THRESHOLD: "11,9,2"
DEFAULT_DIGIT_DELIMITER: Final[str] = ","

# Начиная с этого основания цифра может занимать больше одного символа
DELIMITED_BASE_THRESHOLD: Final[int] = 10


# =============================================================================
# TYPES
# =============================================================================


class DigitRuns(NamedTuple):
    """Пара последовательностей цифр: pre-periodic (exact) и periodic (repeating)."""

    exact: tuple[int, ...]
    repeating: tuple[int, ...]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_base(base: int) -> int:
    """
    Проверка основания системы счисления.

    Args:
        base: Основание (radix)

    Returns:
        base без изменений

    Raises:
        ValueError: Если base не целое число или base < BASE_MIN

    Examples:
        >>> validate_base(3)
        3
        >>> validate_base(1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ValueError: base must be an integer >= 2, got 1
    """
    if isinstance(base, bool) or not isinstance(base, int) or base < BASE_MIN:
        raise ValueError(f"base must be an integer >= {BASE_MIN}, got {base!r}")
    return base


def validate_digit(digit: int, base: int) -> int:
    """
    Проверка, что цифра лежит в [0, base).

    Raises:
        ValueError: Если цифра вне диапазона
    """
    if digit < 0 or digit >= base:
        raise ValueError(f"digit {digit} out of range for base {base}")
    return digit


# =============================================================================
# ЗНАЧЕНИЯ ПОСЛЕДОВАТЕЛЬНОСТЕЙ ЦИФР
# =============================================================================


def value_from_digits(digits: Sequence[int], base: int) -> int:
    """
    Значение последовательности цифр как числа в системе base.

    Старшая цифра первая: каждая следующая цифра умножает аккумулятор
    на base и прибавляется к нему.

    Args:
        digits: Последовательность цифр (каждая в [0, base))
        base: Основание

    Returns:
        Целое значение (0 для пустой последовательности)

    Examples:
        >>> value_from_digits([1, 0, 0], 3)
        9
        >>> value_from_digits([11, 9, 2], 12)
        1694
        >>> value_from_digits([], 7)
        0
    """
    value = 0
    for digit in digits:
        value = value * base + digit
    return value


def digits_from_value(value: int, length: int, base: int) -> tuple[int, ...]:
    """
    Обратное к value_from_digits при известной длине.

    Ведущие нули восстанавливаются из length.

    Raises:
        ValueError: Если value не помещается в length цифр

    Examples:
        >>> digits_from_value(9, 3, 3)
        (1, 0, 0)
        >>> digits_from_value(2, 4, 3)
        (0, 0, 0, 2)
    """
    if value < 0 or length < 0:
        raise ValueError(f"value and length must be non-negative, got {value}, {length}")
    if value >= base**length:
        raise ValueError(f"value {value} does not fit into {length} base-{base} digits")

    digits = [0] * length
    for i in range(length - 1, -1, -1):
        value, digits[i] = divmod(value, base)
    return tuple(digits)


def repeating_denominator(repeating_length: int, base: int) -> int:
    """
    Знаменатель периодической части: base^k − 1.

    При k = 0 периодического вклада нет, знаменатель равен 1.

    Examples:
        >>> repeating_denominator(3, 3)
        26
        >>> repeating_denominator(0, 3)
        1
    """
    result = base**repeating_length - 1
    if result == 0:
        return 1
    return result


# =============================================================================
# РАЦИОНАЛЬНОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def reduce_mod_one(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение дроби к [0, 1) и несократимому виду.

    numerator ≥ denominator (или отрицательный) заворачивается по модулю 1:
    алгебра моделирует точки окружности, а не неограниченные рациональные.

    Args:
        numerator: Числитель (любое целое)
        denominator: Знаменатель (> 0)

    Returns:
        (p, q) с 0 ≤ p < q, gcd(p, q) = 1; ноль представлен как (0, 1)

    Raises:
        ValueError: Если denominator ≤ 0

    Examples:
        >>> reduce_mod_one(2, 4)
        (1, 2)
        >>> reduce_mod_one(3, 2)
        (1, 2)
        >>> reduce_mod_one(26, 26)
        (0, 1)
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    numerator %= denominator
    divisor = math.gcd(numerator, denominator)
    return (numerator // divisor, denominator // divisor)


def rational_from_parts(
    exact_value: int,
    exact_length: int,
    repeating_value: int,
    repeating_length: int,
    base: int,
) -> tuple[int, int]:
    """
    Канонический рациональный вид из четвёрки (value, length) двух частей.

    Args:
        exact_value: Значение exact цифр
        exact_length: Количество exact цифр (m)
        repeating_value: Значение repeating цифр
        repeating_length: Количество repeating цифр (k)
        base: Основание

    Returns:
        (p, q) — несократимая дробь в [0, 1)

    Examples:
        >>> rational_from_parts(0, 0, 9, 3, 3)  # "_100"
        (9, 26)
        >>> rational_from_parts(1, 1, 9, 3, 3)  # "1_100"
        (35, 78)
    """
    rd = repeating_denominator(repeating_length, base)
    denominator = rd * base**exact_length
    numerator = rd * exact_value + repeating_value
    return reduce_mod_one(numerator, denominator)


def rational_from_digits(
    exact: Sequence[int],
    repeating: Sequence[int],
    base: int,
) -> tuple[int, int]:
    """
    Канонический рациональный вид из двух последовательностей цифр.

    Examples:
        >>> rational_from_digits([1, 0, 0], [], 3)
        (1, 3)
        >>> rational_from_digits([], [2], 3)  # 0.222...₃ = 1 ≡ 0
        (0, 1)
    """
    return rational_from_parts(
        value_from_digits(exact, base),
        len(exact),
        value_from_digits(repeating, base),
        len(repeating),
        base,
    )


def shift_rational(numerator: int, denominator: int, base: int) -> tuple[int, int]:
    """
    Forward (shift) map: x → base·x mod 1.

    Examples:
        >>> shift_rational(35, 78, 3)
        (9, 26)
        >>> shift_rational(1, 2, 2)
        (0, 1)
    """
    return reduce_mod_one(numerator * base, denominator)


def leading_digit(numerator: int, denominator: int, base: int) -> int:
    """
    Первая цифра разложения x = numerator/denominator ∈ [0, 1): ⌊base·x⌋.

    Examples:
        >>> leading_digit(35, 78, 3)
        1
    """
    return (numerator * base) // denominator


def expand_rational(numerator: int, denominator: int, base: int) -> DigitRuns:
    """
    Каноническое разложение дроби в (exact, repeating) цифры.

    Деление столбиком с детекцией цикла остатков: pre-period и period
    получаются минимальными, хвост из (base − 1) никогда не возникает.
    Конечное разложение возвращается с пустой repeating частью.

    Args:
        numerator: Числитель (0 ≤ numerator < denominator)
        denominator: Знаменатель (> 0)
        base: Основание

    Returns:
        DigitRuns(exact, repeating)

    Examples:
        >>> expand_rational(35, 78, 3)
        DigitRuns(exact=(1,), repeating=(1, 0, 0))
        >>> expand_rational(1, 3, 3)
        DigitRuns(exact=(1,), repeating=())
        >>> expand_rational(0, 1, 3)
        DigitRuns(exact=(), repeating=())
    """
    if not 0 <= numerator < denominator:
        raise ValueError(
            f"expected 0 <= numerator < denominator, got {numerator}/{denominator}"
        )

    digits: list[int] = []
    seen: dict[int, int] = {}  # остаток -> индекс цифры

    remainder = numerator
    while remainder != 0 and remainder not in seen:
        seen[remainder] = len(digits)
        digit, remainder = divmod(remainder * base, denominator)
        digits.append(digit)

    if remainder == 0:
        return DigitRuns(exact=tuple(digits), repeating=())

    start = seen[remainder]
    return DigitRuns(exact=tuple(digits[:start]), repeating=tuple(digits[start:]))


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_digits(
    exact: Sequence[int],
    repeating: Sequence[int],
    base: int,
    separator: str = DEFAULT_SEPARATOR,
    digit_delimiter: str = DEFAULT_DIGIT_DELIMITER,
    delimited_base_threshold: int = DELIMITED_BASE_THRESHOLD,
) -> str:
    """
    Текстовое представление [exact][separator repeating].

    Для base < delimited_base_threshold цифры склеиваются, иначе разделяются
    digit_delimiter. Ноль (обе части пустые) записывается как separator.

    Examples:
        >>> format_digits((1,), (1, 0, 0), 3)
        '1_100'
        >>> format_digits((11, 9, 2), (), 12)
        '11,9,2'
        >>> format_digits((), (), 3)
        '_'
    """
    joiner = "" if base < delimited_base_threshold else digit_delimiter

    exact_text = joiner.join(str(digit) for digit in exact)
    if not repeating:
        return exact_text if exact_text else separator

    repeating_text = joiner.join(str(digit) for digit in repeating)
    return f"{exact_text}{separator}{repeating_text}"
