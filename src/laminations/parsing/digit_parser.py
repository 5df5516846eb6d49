"""
Digit-String Parser — разбор текстового n-ary разложения

Грамматика:
    [exact-digits][separator[repeating-digits]]

- Текст делится по separator (по умолчанию "_") максимум на две части
- Любая часть может быть пустой; отсутствие separator = пустая repeating часть
- base < delimited_base_threshold: каждый символ части — одна цифра
- base ≥ delimited_base_threshold: цифры разделяются digit_delimiter (","),
  т.к. цифра может занимать больше одного символа
- Пустые токены (подряд идущие разделители) пропускаются, а не считаются нулём

Примеры (base 3):  "100", "_100", "1_100", "_"
Примеры (base 12): "11,9,2_", "_11,9,2", "11_11,9,2"

Разбор all-or-nothing: при ошибке частичный результат не возвращается.
"""

import re
from typing import Final

from laminations.core.math.nary import (
    DEFAULT_DIGIT_DELIMITER,
    DEFAULT_SEPARATOR,
    DELIMITED_BASE_THRESHOLD,
    DigitRuns,
    validate_base,
)
from laminations.parsing.errors import (
    REASON_NOT_NUMERICAL,
    REASON_OUT_OF_RANGE,
    InvalidDigitError,
    TooManySeparatorsError,
)

# Токен цифры: только ASCII цифры, без знака и пробелов
_DIGIT_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


def split_parts(text: str, separator: str = DEFAULT_SEPARATOR) -> tuple[str, str]:
    """
    Деление текста на (exact_part, repeating_part).

    Raises:
        TooManySeparatorsError: Если separator встречается больше одного раза

    Examples:
        >>> split_parts("1_100")
        ('1', '100')
        >>> split_parts("100")
        ('100', '')
    """
    parts = text.split(separator)
    if len(parts) > 2:
        raise TooManySeparatorsError(text, separator)

    exact_part = parts[0]
    repeating_part = parts[1] if len(parts) == 2 else ""
    return (exact_part, repeating_part)


def tokenize_digits(
    part: str,
    base: int,
    digit_delimiter: str = DEFAULT_DIGIT_DELIMITER,
    delimited_base_threshold: int = DELIMITED_BASE_THRESHOLD,
) -> list[str]:
    """
    Токены цифр одной части (пустые токены пропускаются).

    Examples:
        >>> tokenize_digits("102", 3)
        ['1', '0', '2']
        >>> tokenize_digits("11,,9,2", 12)
        ['11', '9', '2']
    """
    if base < delimited_base_threshold:
        return list(part)
    return [token for token in part.split(digit_delimiter) if token]


def parse_digit(token: str, base: int, text: str) -> int:
    """
    Разбор одного токена цифры.

    Args:
        token: Токен цифры
        base: Основание
        text: Исходный текст (для сообщения об ошибке)

    Raises:
        InvalidDigitError: Если токен не число или значение ≥ base
    """
    if not _DIGIT_TOKEN_RE.fullmatch(token):
        raise InvalidDigitError(text, token, REASON_NOT_NUMERICAL, base)

    digit = int(token)
    if digit >= base:
        raise InvalidDigitError(text, token, REASON_OUT_OF_RANGE, base)
    return digit


def parse_nary(
    text: str,
    base: int,
    separator: str = DEFAULT_SEPARATOR,
    digit_delimiter: str = DEFAULT_DIGIT_DELIMITER,
    delimited_base_threshold: int = DELIMITED_BASE_THRESHOLD,
) -> DigitRuns:
    """
    Разбор текстового разложения в (exact, repeating) последовательности цифр.

    Args:
        text: Текстовое разложение
        base: Основание (≥ 2)
        separator: Разделитель exact/repeating частей
        digit_delimiter: Разделитель цифр для больших оснований
        delimited_base_threshold: Основание, начиная с которого нужен digit_delimiter

    Returns:
        DigitRuns(exact, repeating)

    Raises:
        ValueError: Если base < 2
        TooManySeparatorsError: Больше одного separator
        InvalidDigitError: Токен не число или вне [0, base)

    Examples:
        >>> parse_nary("1_100", 3)
        DigitRuns(exact=(1,), repeating=(1, 0, 0))
        >>> parse_nary("11,9,2_", 12)
        DigitRuns(exact=(11, 9, 2), repeating=())
    """
    validate_base(base)
    exact_part, repeating_part = split_parts(text, separator)

    def parse_part(part: str) -> tuple[int, ...]:
        tokens = tokenize_digits(part, base, digit_delimiter, delimited_base_threshold)
        return tuple(parse_digit(token, base, text) for token in tokens)

    return DigitRuns(exact=parse_part(exact_part), repeating=parse_part(repeating_part))
