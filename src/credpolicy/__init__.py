"""credpolicy - credential policy engine.

Validates and scores passwords, passphrases and PINs against configurable
strength rules, and reports structured failure reasons.
"""

__version__ = "0.1.0"

from credpolicy.core.errors import CredentialError, ErrorKind
from credpolicy.domain.entities import (
    DegeneratePatternPenalty,
    PassphrasePolicyConfig,
    PasswordPolicyConfig,
    PinPolicyConfig,
    ValidationOutcome,
)
from credpolicy.domain.services import PassphrasePolicy, PasswordPolicy, PinPolicy

__all__ = [
    "CredentialError",
    "DegeneratePatternPenalty",
    "ErrorKind",
    "PassphrasePolicy",
    "PassphrasePolicyConfig",
    "PasswordPolicy",
    "PasswordPolicyConfig",
    "PinPolicy",
    "PinPolicyConfig",
    "ValidationOutcome",
    "__version__",
]
