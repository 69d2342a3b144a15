"""Unit tests for ValidationOutcome."""

import pytest

from credpolicy.core.errors import ErrorKind, InvalidLengthError
from credpolicy.domain.entities import ValidationOutcome


def test_accept_without_score():
    outcome = ValidationOutcome.accept()

    assert outcome.accepted is True
    assert outcome.error is None
    assert outcome.kind is None
    assert outcome.to_dict() == {"accepted": True}


def test_accept_with_score_rounds_in_dict():
    outcome = ValidationOutcome.accept(strength_bits=75.123456)

    assert outcome.strength_bits == 75.123456
    assert outcome.to_dict() == {"accepted": True, "strength_bits": 75.12}


def test_reject_carries_error():
    error = InvalidLengthError(8, 64, 5)
    outcome = ValidationOutcome.reject(error)

    assert outcome.accepted is False
    assert outcome.kind is ErrorKind.INVALID_LENGTH
    assert outcome.to_dict()["error"]["details"] == {"min": 8, "max": 64, "actual": 5}


def test_raise_for_error():
    error = InvalidLengthError(8, 64, 5)

    ValidationOutcome.accept().raise_for_error()
    with pytest.raises(InvalidLengthError) as exc_info:
        ValidationOutcome.reject(error).raise_for_error()

    assert exc_info.value is error
