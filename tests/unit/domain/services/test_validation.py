"""Unit tests for validation primitives."""

import pytest

from credpolicy.core.errors import (
    Category,
    InvalidCharsetError,
    InvalidLengthError,
    MissingCategoryError,
    PinFormatError,
    RangeViolationError,
)
from credpolicy.domain.services.validation import (
    check_length,
    check_range,
    contains_categories,
    contains_only_charset,
    contains_only_digits,
)


class TestCheckLength:
    """Tests for check_length."""

    def test_within_bounds(self):
        assert check_length("abc", 2, 5) is None
        assert check_length("ab", 2, 5) is None
        assert check_length("abcde", 2, 5) is None

    @pytest.mark.parametrize("value", ["", "a", "abcdef", "a" * 100])
    def test_out_of_bounds_reports_exact_values(self, value):
        with pytest.raises(InvalidLengthError) as exc_info:
            check_length(value, 2, 5)

        error = exc_info.value
        assert (error.min, error.max, error.actual) == (2, 5, len(value))

    def test_counts_characters_not_bytes(self):
        # 4 characters, 8 bytes in UTF-8
        assert check_length("éèêë", 4, 4) is None


class TestContainsOnlyDigits:
    """Tests for contains_only_digits."""

    @pytest.mark.parametrize("value", ["0", "1234", "000000", "9876543210"])
    def test_exact_digits_accepted(self, value):
        assert contains_only_digits(value, len(value)) is None

    @pytest.mark.parametrize("value", ["12a4", "123", "12345", "", "12 4", "١٢٣٤", "１２３４"])
    def test_wrong_length_or_non_digit_rejected_identically(self, value):
        with pytest.raises(PinFormatError) as exc_info:
            contains_only_digits(value, 4)

        assert exc_info.value.length == 4
        assert exc_info.value.code == "pin_format"


class TestContainsOnlyCharset:
    """Tests for contains_only_charset."""

    def test_subset_accepted(self):
        assert contains_only_charset("abc", "abc") is None
        assert contains_only_charset("cab", "abc") is None
        assert contains_only_charset("", "abc") is None

    def test_outside_charset_rejected(self):
        with pytest.raises(InvalidCharsetError) as exc_info:
            contains_only_charset("abcd", "abc")

        assert exc_info.value.charset == "abc"

    def test_membership_is_per_character(self):
        # "ba" is not a substring of the charset but both characters are members
        assert contains_only_charset("ba", "abc") is None


class TestContainsCategories:
    """Tests for contains_categories."""

    def test_all_present(self):
        assert contains_categories("Aa1!", True, True, True, "!@#") is None

    def test_uppercase_reported_first(self):
        with pytest.raises(MissingCategoryError) as exc_info:
            contains_categories("aa1!", True, True, True, "!@#")

        assert exc_info.value.category is Category.UPPERCASE

    def test_lowercase_missing(self):
        with pytest.raises(MissingCategoryError) as exc_info:
            contains_categories("AA1!", True, True, True, "!@#")

        assert exc_info.value.category is Category.LOWERCASE

    def test_digit_missing(self):
        with pytest.raises(MissingCategoryError) as exc_info:
            contains_categories("Aa!!", True, True, True, "!@#")

        assert exc_info.value.category is Category.DIGIT

    def test_special_missing(self):
        with pytest.raises(MissingCategoryError) as exc_info:
            contains_categories("Aa11", True, True, True, "!@#")

        assert exc_info.value.category is Category.SPECIAL

    def test_order_is_upper_lower_digit_special(self):
        """With everything missing, only uppercase is reported."""
        with pytest.raises(MissingCategoryError) as exc_info:
            contains_categories("    ", True, True, True, "!@#")

        assert exc_info.value.category is Category.UPPERCASE

    def test_disabled_requirements_are_skipped(self):
        assert contains_categories("abc", False, True, False, None) is None

    def test_non_ascii_letters_do_not_count(self):
        with pytest.raises(MissingCategoryError) as exc_info:
            contains_categories("Ébc1!", True, True, True, "!")

        assert exc_info.value.category is Category.UPPERCASE


class TestCheckRange:
    """Tests for check_range."""

    def test_inclusive_bounds(self):
        assert check_range(1, 1, 10, "count") is None
        assert check_range(10, 1, 10, "count") is None

    @pytest.mark.parametrize("value", [0, 11, -5])
    def test_out_of_range(self, value):
        with pytest.raises(RangeViolationError) as exc_info:
            check_range(value, 1, 10, "count")

        assert exc_info.value.field == "count"
        assert exc_info.value.actual == value


def test_primitives_are_idempotent():
    for _ in range(2):
        with pytest.raises(InvalidLengthError) as exc_info:
            check_length("abc", 5, 10)
        assert exc_info.value.to_dict()["details"] == {"min": 5, "max": 10, "actual": 3}
