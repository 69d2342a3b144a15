"""Unit tests for the passphrase policy."""

import pytest

from credpolicy.core.errors import EntropyError, ErrorKind, InvalidLengthError
from credpolicy.domain.entities import DegeneratePatternPenalty, PassphrasePolicyConfig
from credpolicy.domain.services.passphrase_policy import PassphrasePolicy


class FixedEstimator:
    """Estimator returning a constant and recording its calls."""

    def __init__(self, bits: float) -> None:
        self.bits = bits
        self.calls = 0

    def estimate(self, candidate: str) -> float:
        self.calls += 1
        return self.bits


class TestPassphrasePolicy:
    """Tests for PassphrasePolicy.validate."""

    def test_strong_passphrase_accepted_with_score(self):
        outcome = PassphrasePolicy().validate("correct-horse-battery")

        assert outcome.accepted is True
        assert outcome.strength_bits > 60.0

    def test_empty_passphrase_rejected_before_estimation(self):
        estimator = FixedEstimator(1000.0)
        outcome = PassphrasePolicy(estimator=estimator).validate("")

        assert isinstance(outcome.error, InvalidLengthError)
        assert outcome.error.actual == 0
        assert estimator.calls == 0

    def test_too_long_rejected_before_estimation(self):
        estimator = FixedEstimator(1000.0)
        config = PassphrasePolicyConfig(min_length=12, max_length=20)
        outcome = PassphrasePolicy(config, estimator).validate("x" * 21)

        assert outcome.kind is ErrorKind.INVALID_LENGTH
        assert estimator.calls == 0

    def test_single_class_passphrase_rejected_for_entropy(self):
        outcome = PassphrasePolicy().validate("1234567890123")

        assert isinstance(outcome.error, EntropyError)
        assert outcome.error.required == 60.0
        assert outcome.error.measured < 60.0
        assert outcome.strength_bits is None

    def test_penalty_can_decide_the_outcome(self):
        """Sixteen identical letters pass on raw bits but fail once halved."""
        candidate = "a" * 16
        no_penalty = PassphrasePolicyConfig(penalty=DegeneratePatternPenalty(multiplier=1.0))

        assert PassphrasePolicy(no_penalty).validate(candidate).accepted is True
        assert PassphrasePolicy().validate(candidate).kind is ErrorKind.ENTROPY

    def test_threshold_is_inclusive(self):
        config = PassphrasePolicyConfig(min_entropy_bits=70.0)
        outcome = PassphrasePolicy(config, FixedEstimator(70.0)).validate("any-passphrase")

        assert outcome.accepted is True
        assert outcome.strength_bits == 70.0

    def test_custom_estimator_is_used(self):
        estimator = FixedEstimator(10.0)
        outcome = PassphrasePolicy(estimator=estimator).validate("correct-horse-battery")

        assert outcome.kind is ErrorKind.ENTROPY
        assert outcome.error.measured == 10.0
        assert estimator.calls == 1

    def test_check_returns_bits(self):
        bits = PassphrasePolicy().check("correct-horse-battery")

        assert bits > 60.0

    def test_check_raises(self):
        with pytest.raises(EntropyError):
            PassphrasePolicy().check("aaaaaaaaaaaaaaaa")

    def test_idempotent(self):
        policy = PassphrasePolicy()

        assert policy.validate("abcabcabcabc").to_dict() == policy.validate("abcabcabcabc").to_dict()
        assert policy.validate("Tr0ub4dor&3-x").to_dict() == policy.validate("Tr0ub4dor&3-x").to_dict()
