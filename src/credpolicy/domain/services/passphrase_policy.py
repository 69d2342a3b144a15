"""Passphrase policy.

Passphrases are checked in two stages. The structural length check runs
first, so an empty or oversized candidate never reaches the estimator.
Then the candidate's entropy is estimated and compared with the
configured minimum.
"""

from credpolicy.core.errors import CredentialError, EntropyError
from credpolicy.core.logging import get_logger
from credpolicy.domain.entities.policy_config import PassphrasePolicyConfig
from credpolicy.domain.entities.validation_outcome import ValidationOutcome
from credpolicy.domain.services.entropy_estimator import (
    CharacterClassEntropyEstimator,
    EntropyEstimator,
)
from credpolicy.domain.services.validation import check_length

logger = get_logger(__name__)


class PassphrasePolicy:
    """Validates and scores passphrases against a ``PassphrasePolicyConfig``.

    The entropy model is pluggable: pass any ``EntropyEstimator`` to replace
    the default character-class estimator.
    """

    name = "passphrase"

    def __init__(
        self,
        config: PassphrasePolicyConfig | None = None,
        estimator: EntropyEstimator | None = None,
    ) -> None:
        self.config = config or PassphrasePolicyConfig()
        self.estimator = estimator or CharacterClassEntropyEstimator(self.config.penalty)

    def check(self, passphrase: str) -> float:
        """Validate a passphrase, raising the first violation found.

        Returns:
            The estimated strength in bits.

        Raises:
            InvalidLengthError: If the passphrase is too short or too long.
            EntropyError: If the estimated strength is below the threshold.
        """
        check_length(passphrase, self.config.min_length, self.config.max_length)

        bits = self.estimator.estimate(passphrase)
        if bits < self.config.min_entropy_bits:
            raise EntropyError(measured=bits, required=self.config.min_entropy_bits)
        return bits

    def validate(self, passphrase: str) -> ValidationOutcome:
        """Validate a passphrase against the policy.

        Returns:
            Accepted outcome carrying ``strength_bits``, or a rejected outcome.
        """
        try:
            bits = self.check(passphrase)
        except CredentialError as e:
            logger.debug("Credential rejected", policy=self.name, kind=e.kind.value, code=e.code)
            return ValidationOutcome.reject(e)
        return ValidationOutcome.accept(strength_bits=bits)

    def is_valid(self, passphrase: str) -> bool:
        """Check if a passphrase is valid."""
        return self.validate(passphrase).accepted
