"""Secure secret generation.

Generates passwords, passphrases and PINs from the ``secrets`` module.
Every generated value is validated through the same policy that checks
user-supplied secrets before it is returned.
"""

import secrets
import string
from collections.abc import Sequence

from credpolicy.core.errors import CredentialError, InternalError
from credpolicy.core.logging import get_logger
from credpolicy.domain.entities.policy_config import (
    PassphrasePolicyConfig,
    PasswordPolicyConfig,
    PinPolicyConfig,
)
from credpolicy.domain.services.passphrase_policy import PassphrasePolicy
from credpolicy.domain.services.password_policy import PasswordPolicy
from credpolicy.domain.services.pin_policy import PinPolicy
from credpolicy.domain.services.validation import check_range
from credpolicy.domain.services.wordlist import DEFAULT_WORDLIST

logger = get_logger(__name__)

MAX_ATTEMPTS = 32
DEFAULT_PASSWORD_LENGTH = 20
DEFAULT_PASSPHRASE_WORDS = 6
MIN_PASSPHRASE_WORDS = 1
MAX_PASSPHRASE_WORDS = 64

_random = secrets.SystemRandom()


def _validated(generate, policy, kind: str) -> str:
    """Draw candidates until one passes ``policy``."""
    last_error: CredentialError | None = None
    for _ in range(MAX_ATTEMPTS):
        candidate = generate()
        outcome = policy.validate(candidate)
        if outcome.accepted:
            return candidate
        last_error = outcome.error

    logger.error(
        "Secret generation exhausted attempts",
        kind=kind,
        attempts=MAX_ATTEMPTS,
        code=last_error.code if last_error else None,
    )
    raise InternalError(f"could not generate a {kind} satisfying the policy")


def generate_password(
    config: PasswordPolicyConfig | None = None,
    length: int | None = None,
) -> str:
    """Generate a random password satisfying ``config``.

    One character from every required category is always included and the
    result is shuffled.

    Args:
        config: Password policy configuration.
        length: Desired length. Defaults to 20, clamped to the policy bounds.

    Returns:
        A password accepted by ``PasswordPolicy(config)``.

    Raises:
        RangeViolationError: If ``length`` is outside the policy bounds.
        InternalError: If the policy cannot be satisfied.
    """
    config = config or PasswordPolicyConfig()

    pools: list[str] = []
    if config.require_upper:
        pools.append(string.ascii_uppercase)
    if config.require_lower:
        pools.append(string.ascii_lowercase)
    if config.require_digit:
        pools.append(string.digits)
    if config.special_charset:
        pools.append(config.special_charset)
    alphabet = "".join(pools) or string.ascii_letters + string.digits

    if length is None:
        length = min(max(DEFAULT_PASSWORD_LENGTH, config.min_length), config.max_length)
    check_range(length, max(config.min_length, len(pools)), config.max_length, "length")

    def draw() -> str:
        chars = [secrets.choice(pool) for pool in pools]
        chars += [secrets.choice(alphabet) for _ in range(length - len(chars))]
        _random.shuffle(chars)
        return "".join(chars)

    return _validated(draw, PasswordPolicy(config), "password")


def generate_passphrase(
    config: PassphrasePolicyConfig | None = None,
    words: int = DEFAULT_PASSPHRASE_WORDS,
    separator: str = "-",
    wordlist: Sequence[str] = DEFAULT_WORDLIST,
) -> str:
    """Generate a random passphrase of ``words`` words.

    Raises:
        RangeViolationError: If ``words`` is not between 1 and 64.
        InternalError: If the wordlist is empty or the policy cannot be satisfied.
    """
    config = config or PassphrasePolicyConfig()
    check_range(words, MIN_PASSPHRASE_WORDS, MAX_PASSPHRASE_WORDS, "words")
    if not wordlist:
        raise InternalError("wordlist must not be empty")

    def draw() -> str:
        return separator.join(secrets.choice(wordlist) for _ in range(words))

    return _validated(draw, PassphrasePolicy(config), "passphrase")


def generate_pin(config: PinPolicyConfig | None = None) -> str:
    """Generate a random PIN, skipping weak patterns when the policy rejects them."""
    config = config or PinPolicyConfig()

    def draw() -> str:
        return "".join(secrets.choice(string.digits) for _ in range(config.exact_length))

    return _validated(draw, PinPolicy(config), "pin")
