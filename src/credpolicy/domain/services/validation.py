"""Validation primitives.

Small, stateless checks shared by every policy. Each primitive returns None
when the value passes and raises the matching ``CredentialError`` otherwise.
Lengths are measured in characters, not encoded bytes.
"""

import string

from credpolicy.core.errors import (
    Category,
    InvalidCharsetError,
    InvalidLengthError,
    MissingCategoryError,
    PinFormatError,
    RangeViolationError,
)

ASCII_DIGITS = frozenset(string.digits)
ASCII_UPPERCASE = frozenset(string.ascii_uppercase)
ASCII_LOWERCASE = frozenset(string.ascii_lowercase)


def check_length(value: str, min_length: int, max_length: int) -> None:
    """Check that ``value`` has between ``min_length`` and ``max_length`` characters.

    Raises:
        InvalidLengthError: With the expected bounds and the actual length.
    """
    length = len(value)
    if length < min_length or length > max_length:
        raise InvalidLengthError(min_length, max_length, length)


def contains_only_digits(value: str, expected_len: int) -> None:
    """Check that ``value`` is exactly ``expected_len`` ASCII digits.

    A wrong length and a non-digit character are the same failure.

    Raises:
        PinFormatError: If either condition does not hold.
    """
    if len(value) != expected_len:
        raise PinFormatError(expected_len)
    if not all(c in ASCII_DIGITS for c in value):
        raise PinFormatError(expected_len)


def contains_only_charset(value: str, charset: str) -> None:
    """Check that every character of ``value`` belongs to ``charset``.

    Raises:
        InvalidCharsetError: If any character is outside ``charset``.
    """
    allowed = frozenset(charset)
    if not all(c in allowed for c in value):
        raise InvalidCharsetError(charset)


def contains_categories(
    value: str,
    require_upper: bool,
    require_lower: bool,
    require_digit: bool,
    special_charset: str | None = None,
) -> None:
    """Check that ``value`` contains each required character category.

    Categories are checked in a fixed order: uppercase, lowercase, digit,
    special. Only the first missing category is reported.

    Args:
        value: The value to inspect.
        require_upper: Require an ASCII uppercase letter.
        require_lower: Require an ASCII lowercase letter.
        require_digit: Require an ASCII digit.
        special_charset: If given, require at least one of these characters.

    Raises:
        MissingCategoryError: For the first unmet requirement.
    """
    if require_upper and not any(c in ASCII_UPPERCASE for c in value):
        raise MissingCategoryError(Category.UPPERCASE)
    if require_lower and not any(c in ASCII_LOWERCASE for c in value):
        raise MissingCategoryError(Category.LOWERCASE)
    if require_digit and not any(c in ASCII_DIGITS for c in value):
        raise MissingCategoryError(Category.DIGIT)
    if special_charset is not None:
        specials = frozenset(special_charset)
        if not any(c in specials for c in value):
            raise MissingCategoryError(Category.SPECIAL)


def check_range(value: int, min_value: int, max_value: int, field: str) -> None:
    """Check that ``min_value <= value <= max_value``.

    Raises:
        RangeViolationError: Naming ``field`` and the violated bounds.
    """
    if value < min_value or value > max_value:
        raise RangeViolationError(field, min_value, max_value, value)
