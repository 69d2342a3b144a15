"""Credential service.

Orchestrates the policy engine with its collaborators: a candidate is
validated first and only then handed to the hasher or the token builder.
Policies, the hasher and the token builder are all injected, so two
services with different configurations never interfere.
"""

from credpolicy.core.config import Settings, get_settings
from credpolicy.core.errors import PasswordError
from credpolicy.core.logging import get_logger
from credpolicy.domain.services.passphrase_policy import PassphrasePolicy
from credpolicy.domain.services.password_policy import PasswordPolicy
from credpolicy.domain.services.pin_policy import PinPolicy
from credpolicy.infrastructure.auth.jwt_service import JwtBuilder, builder_from_settings
from credpolicy.infrastructure.auth.password_hasher import PasswordHasher, get_password_hasher

logger = get_logger(__name__)


class CredentialService:
    """Validate-then-hash and validate-then-issue workflows."""

    def __init__(
        self,
        password_policy: PasswordPolicy,
        passphrase_policy: PassphrasePolicy,
        pin_policy: PinPolicy,
        hasher: PasswordHasher,
        token_builder: JwtBuilder,
    ) -> None:
        self.password_policy = password_policy
        self.passphrase_policy = passphrase_policy
        self.pin_policy = pin_policy
        self.hasher = hasher
        # Shared template; issue_token works on a copy of it
        self.token_builder = token_builder.ensure_key()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "CredentialService":
        """Build a service with every component configured from settings."""
        settings = settings or get_settings()
        return cls(
            password_policy=PasswordPolicy(settings.password_policy_config()),
            passphrase_policy=PassphrasePolicy(settings.passphrase_policy_config()),
            pin_policy=PinPolicy(settings.pin_policy_config()),
            hasher=get_password_hasher(settings),
            token_builder=builder_from_settings(settings),
        )

    def register_password(self, password: str) -> str:
        """Validate a password and return its hash.

        Raises:
            CredentialError: The first policy violation, or a hashing failure.
        """
        self.password_policy.check(password)
        return self.hasher.hash(password)

    def register_passphrase(self, passphrase: str) -> tuple[str, float]:
        """Validate a passphrase and return its hash with its strength in bits."""
        bits = self.passphrase_policy.check(passphrase)
        return self.hasher.hash(passphrase), bits

    def register_pin(self, pin: str) -> str:
        """Validate a PIN and return its hash."""
        self.pin_policy.check(pin)
        return self.hasher.hash(pin)

    def issue_token(self, password: str, hashed: str, subject: str) -> str:
        """Issue a JWT for a subject whose password matches ``hashed``.

        The password is re-validated against the current policy before it is
        compared with the stored hash.

        Raises:
            CredentialError: If the password violates the policy.
            PasswordError: If the password does not match the hash.
            JWTError: If token issuance fails.
        """
        self.password_policy.check(password)
        if not self.hasher.verify(password, hashed):
            logger.info("Token refused: credential mismatch", subject=subject)
            raise PasswordError("credential does not match")

        return self.token_builder.copy().subject(subject).count(1).generate()[0]
