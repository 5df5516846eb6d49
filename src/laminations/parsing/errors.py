"""
Parse Errors — Таксономия ошибок разбора текстовых разложений

Все ошибки синхронные и детерминированные: они вызваны некорректным
входным текстом, а не временными условиями, поэтому retry не имеет смысла.

- TooManySeparatorsError: больше одного разделителя exact/repeating
- InvalidDigitError: токен не число ("not_numerical") или ≥ base ("out_of_range")
"""

from typing import Final

# Причины InvalidDigitError
REASON_NOT_NUMERICAL: Final[str] = "not_numerical"
REASON_OUT_OF_RANGE: Final[str] = "out_of_range"


class ParseError(ValueError):
    """Базовая ошибка разбора текстового разложения."""

    def __init__(self, text: str, message: str):
        super().__init__(message)
        self.text = text


class TooManySeparatorsError(ParseError):
    """Во входном тексте больше одного разделителя."""

    def __init__(self, text: str, separator: str):
        super().__init__(text, f"`{text}` contains more than one `{separator}` separator")
        self.separator = separator


class InvalidDigitError(ParseError):
    """
    Токен цифры не является неотрицательным целым числом или ≥ base.

    Attributes:
        token: Токен, вызвавший ошибку
        reason: REASON_NOT_NUMERICAL или REASON_OUT_OF_RANGE
    """

    def __init__(self, text: str, token: str, reason: str, base: int):
        if reason == REASON_OUT_OF_RANGE:
            message = f"{text}: `{token}` is out of range for base {base}"
        else:
            message = f"{text}: `{token}` is not numerical"
        super().__init__(text, message)
        self.token = token
        self.reason = reason
        self.base = base
