"""PIN policy.

A PIN must be exactly ``exact_length`` ASCII digits. When weak-pattern
rejection is enabled, well-formed PINs are additionally rejected if all
digits are equal or the digits step up or down by one ("1234", "4321").
"""

from credpolicy.core.errors import CredentialError, WeakPinError
from credpolicy.core.logging import get_logger
from credpolicy.domain.entities.policy_config import PinPolicyConfig
from credpolicy.domain.entities.validation_outcome import ValidationOutcome
from credpolicy.domain.services.validation import contains_only_digits

logger = get_logger(__name__)


def detect_weak_pattern(pin: str) -> str | None:
    """Return the name of the weak pattern ``pin`` follows, if any.

    Args:
        pin: A string of ASCII digits.

    Returns:
        ``"repeated"``, ``"ascending"``, ``"descending"`` or None.
    """
    if len(pin) < 2:
        return None

    steps = {int(b) - int(a) for a, b in zip(pin, pin[1:])}
    if steps == {0}:
        return "repeated"
    if steps == {1}:
        return "ascending"
    if steps == {-1}:
        return "descending"
    return None


class PinPolicy:
    """Validates numeric PINs against a ``PinPolicyConfig``."""

    name = "pin"

    def __init__(self, config: PinPolicyConfig | None = None) -> None:
        self.config = config or PinPolicyConfig()

    def check(self, pin: str) -> None:
        """Validate a PIN, raising the first violation found.

        Raises:
            PinFormatError: If the PIN is not exactly ``exact_length`` digits.
            WeakPinError: If weak patterns are rejected and the PIN follows one.
        """
        contains_only_digits(pin, self.config.exact_length)

        if self.config.reject_weak_patterns:
            pattern = detect_weak_pattern(pin)
            if pattern is not None:
                raise WeakPinError(self.config.exact_length, pattern)

    def validate(self, pin: str) -> ValidationOutcome:
        """Validate a PIN against the policy."""
        try:
            self.check(pin)
        except CredentialError as e:
            logger.debug("Credential rejected", policy=self.name, kind=e.kind.value, code=e.code)
            return ValidationOutcome.reject(e)
        return ValidationOutcome.accept()

    def is_valid(self, pin: str) -> bool:
        """Check if a PIN is valid."""
        return self.validate(pin).accepted
