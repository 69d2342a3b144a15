"""Domain entities for credpolicy.

Entities here are immutable value objects: policy configurations and
validation outcomes.
"""

from credpolicy.domain.entities.policy_config import (
    DEFAULT_SPECIAL_CHARSET,
    DegeneratePatternPenalty,
    PassphrasePolicyConfig,
    PasswordPolicyConfig,
    PinPolicyConfig,
)
from credpolicy.domain.entities.validation_outcome import ValidationOutcome

__all__ = [
    "DEFAULT_SPECIAL_CHARSET",
    "DegeneratePatternPenalty",
    "PassphrasePolicyConfig",
    "PasswordPolicyConfig",
    "PinPolicyConfig",
    "ValidationOutcome",
]
