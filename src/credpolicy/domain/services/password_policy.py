"""Password policy.

Validates password strength according to configurable rules. Checks run
in a fixed order and stop at the first failure:

1. Length bounds
2. Uppercase letter requirement
3. Lowercase letter requirement
4. Digit requirement
5. Special character requirement
"""

from credpolicy.core.errors import CredentialError
from credpolicy.core.logging import get_logger
from credpolicy.domain.entities.policy_config import PasswordPolicyConfig
from credpolicy.domain.entities.validation_outcome import ValidationOutcome
from credpolicy.domain.services.validation import check_length, contains_categories

logger = get_logger(__name__)


class PasswordPolicy:
    """Validates passwords against a ``PasswordPolicyConfig``."""

    name = "password"

    def __init__(self, config: PasswordPolicyConfig | None = None) -> None:
        """Initialize the password policy.

        Args:
            config: Policy configuration. Defaults to ``PasswordPolicyConfig()``.
        """
        self.config = config or PasswordPolicyConfig()

    def check(self, password: str) -> None:
        """Validate a password, raising the first violation found.

        Raises:
            InvalidLengthError: If the password is too short or too long.
            MissingCategoryError: If a required character category is missing.
        """
        config = self.config
        check_length(password, config.min_length, config.max_length)
        contains_categories(
            password,
            config.require_upper,
            config.require_lower,
            config.require_digit,
            config.special_charset,
        )

    def validate(self, password: str) -> ValidationOutcome:
        """Validate a password against the policy.

        Args:
            password: The password to validate.

        Returns:
            Accepted outcome, or a rejected outcome carrying the first violation.
        """
        try:
            self.check(password)
        except CredentialError as e:
            logger.debug("Credential rejected", policy=self.name, kind=e.kind.value, code=e.code)
            return ValidationOutcome.reject(e)
        return ValidationOutcome.accept()

    def is_valid(self, password: str) -> bool:
        """Check if a password is valid."""
        return self.validate(password).accepted


# Default policy instance
default_password_policy = PasswordPolicy()
