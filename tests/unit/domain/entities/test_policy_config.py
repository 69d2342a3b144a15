"""Unit tests for policy configuration models."""

import pytest
from pydantic import ValidationError

from credpolicy.domain.entities import (
    DegeneratePatternPenalty,
    PassphrasePolicyConfig,
    PasswordPolicyConfig,
    PinPolicyConfig,
)


class TestPasswordPolicyConfig:
    """Tests for PasswordPolicyConfig."""

    def test_defaults(self):
        config = PasswordPolicyConfig()

        assert config.min_length == 8
        assert config.max_length == 128
        assert config.require_upper and config.require_lower and config.require_digit
        assert config.special_charset

    def test_min_greater_than_max_rejected(self):
        with pytest.raises(ValidationError):
            PasswordPolicyConfig(min_length=20, max_length=10)

    def test_empty_special_charset_rejected(self):
        with pytest.raises(ValidationError):
            PasswordPolicyConfig(special_charset="")

    def test_special_charset_can_be_disabled(self):
        assert PasswordPolicyConfig(special_charset=None).special_charset is None

    def test_is_immutable(self):
        config = PasswordPolicyConfig()

        with pytest.raises(ValidationError):
            config.min_length = 1

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            PasswordPolicyConfig(min_entropy_bits=40)

    def test_is_hashable_and_comparable(self):
        assert PasswordPolicyConfig() == PasswordPolicyConfig()
        assert hash(PasswordPolicyConfig()) == hash(PasswordPolicyConfig())


class TestPassphrasePolicyConfig:
    """Tests for PassphrasePolicyConfig and its penalty."""

    def test_defaults(self):
        config = PassphrasePolicyConfig()

        assert config.min_length == 12
        assert config.min_entropy_bits == 60.0
        assert config.penalty == DegeneratePatternPenalty(multiplier=0.5, min_run_length=3, max_period=4)

    def test_zero_min_length_rejected(self):
        with pytest.raises(ValidationError):
            PassphrasePolicyConfig(min_length=0)

    @pytest.mark.parametrize("multiplier", [0.0, -0.5, 1.5])
    def test_penalty_multiplier_bounds(self, multiplier):
        with pytest.raises(ValidationError):
            DegeneratePatternPenalty(multiplier=multiplier)

    def test_penalty_run_length_must_be_at_least_two(self):
        with pytest.raises(ValidationError):
            DegeneratePatternPenalty(min_run_length=1)

    def test_multiplier_of_one_disables_penalty(self):
        assert DegeneratePatternPenalty(multiplier=1.0).multiplier == 1.0


class TestPinPolicyConfig:
    """Tests for PinPolicyConfig."""

    def test_length_bounds_follow_exact_length(self):
        config = PinPolicyConfig(exact_length=6)

        assert config.min_length == 6
        assert config.max_length == 6

    def test_zero_length_rejected(self):
        with pytest.raises(ValidationError):
            PinPolicyConfig(exact_length=0)
