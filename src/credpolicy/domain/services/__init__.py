"""Domain services for credpolicy.

Validation primitives, credential policies, entropy estimation and
secret generation. Services have no dependencies on infrastructure.
"""

from credpolicy.domain.services.entropy_estimator import (
    CharacterClassEntropyEstimator,
    EntropyEstimate,
    EntropyEstimator,
    estimate_entropy,
)
from credpolicy.domain.services.passphrase_policy import PassphrasePolicy
from credpolicy.domain.services.password_policy import (
    PasswordPolicy,
    default_password_policy,
)
from credpolicy.domain.services.pin_policy import PinPolicy, detect_weak_pattern
from credpolicy.domain.services.secret_generator import (
    generate_passphrase,
    generate_password,
    generate_pin,
)
from credpolicy.domain.services.validation import (
    check_length,
    check_range,
    contains_categories,
    contains_only_charset,
    contains_only_digits,
)

__all__ = [
    "CharacterClassEntropyEstimator",
    "EntropyEstimate",
    "EntropyEstimator",
    "PassphrasePolicy",
    "PasswordPolicy",
    "PinPolicy",
    "check_length",
    "check_range",
    "contains_categories",
    "contains_only_charset",
    "contains_only_digits",
    "default_password_policy",
    "detect_weak_pattern",
    "estimate_entropy",
    "generate_passphrase",
    "generate_password",
    "generate_pin",
]
