"""Unit tests for the credential service."""

import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from credpolicy.application.services.credential_service import CredentialService
from credpolicy.core.config import Settings
from credpolicy.core.errors import (
    EntropyError,
    InvalidLengthError,
    MissingCategoryError,
    PasswordError,
    WeakPinError,
)
from credpolicy.domain.services.passphrase_policy import PassphrasePolicy
from credpolicy.domain.services.password_policy import PasswordPolicy
from credpolicy.domain.services.pin_policy import PinPolicy
from credpolicy.infrastructure.auth.jwt_keys import JwtKey
from credpolicy.infrastructure.auth.jwt_service import JwtBuilder
from credpolicy.infrastructure.auth.password_hasher import (
    Argon2PasswordHasher,
    BcryptPasswordHasher,
)


class RecordingHasher:
    """Hasher double that records every call."""

    def __init__(self):
        self.hashed: list[str] = []

    def hash(self, password: str) -> str:
        self.hashed.append(password)
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"

    def needs_rehash(self, hashed: str) -> bool:
        return False


@pytest.fixture
def hasher():
    return RecordingHasher()


@pytest.fixture
def service(password_config, hasher):
    return CredentialService(
        password_policy=PasswordPolicy(password_config),
        passphrase_policy=PassphrasePolicy(),
        pin_policy=PinPolicy(),
        hasher=hasher,
        token_builder=JwtBuilder().key(JwtKey.from_hmac_secret(b"k" * 32)),
    )


class TestRegistration:
    def test_register_password(self, service, hasher):
        assert service.register_password("Abcdef1!") == "hashed:Abcdef1!"
        assert hasher.hashed == ["Abcdef1!"]

    def test_rejected_password_is_never_hashed(self, service, hasher):
        with pytest.raises(MissingCategoryError):
            service.register_password("abcdef1!")

        with pytest.raises(InvalidLengthError):
            service.register_password("Ab1!")

        assert hasher.hashed == []

    def test_register_passphrase_returns_strength(self, service):
        hashed, bits = service.register_passphrase("correct-horse-battery")

        assert hashed == "hashed:correct-horse-battery"
        assert bits > 60.0

    def test_weak_passphrase_is_never_hashed(self, service, hasher):
        with pytest.raises(EntropyError):
            service.register_passphrase("aaaaaaaaaaaaaaaa")

        assert hasher.hashed == []

    def test_register_pin(self, service, hasher):
        assert service.register_pin("1357") == "hashed:1357"

        with pytest.raises(WeakPinError):
            service.register_pin("1111")
        assert hasher.hashed == ["1357"]


class TestIssueToken:
    def test_issue_token(self, service):
        hashed = service.register_password("Abcdef1!")
        token = service.issue_token("Abcdef1!", hashed, subject="user-42")

        assert service.token_builder.verify(token)["sub"] == "user-42"

    def test_mismatch(self, service):
        hashed = service.register_password("Abcdef1!")

        with pytest.raises(PasswordError, match="does not match"):
            service.issue_token("Abcdef2!", hashed, subject="user-42")

    def test_password_revalidated(self, service):
        with pytest.raises(MissingCategoryError):
            service.issue_token("abcdef1!", "hashed:abcdef1!", subject="user-42")

    def test_subject_does_not_leak_into_shared_builder(self, service):
        hashed = service.register_password("Abcdef1!")
        service.issue_token("Abcdef1!", hashed, subject="user-42")

        later = service.token_builder.generate()[0]
        assert service.token_builder.verify(later)["sub"] != "user-42"

    def test_concurrent_issuance_keeps_subjects_apart(self, service, monkeypatch):
        """Each caller gets a token for its own subject even when signing overlaps."""
        resolve_key = JwtBuilder._resolve_key

        def slow_resolve_key(builder):
            time.sleep(0.05)
            return resolve_key(builder)

        monkeypatch.setattr(JwtBuilder, "_resolve_key", slow_resolve_key)
        hashed = service.register_password("Abcdef1!")
        subjects = ["alice", "bob"] * 4

        with ThreadPoolExecutor(max_workers=len(subjects)) as pool:
            tokens = list(
                pool.map(lambda s: service.issue_token("Abcdef1!", hashed, subject=s), subjects)
            )

        issued = [service.token_builder.verify(t)["sub"] for t in tokens]
        assert issued == subjects

    def test_generated_key_verifies_issued_tokens(self, password_config, hasher):
        service = CredentialService(
            password_policy=PasswordPolicy(password_config),
            passphrase_policy=PassphrasePolicy(),
            pin_policy=PinPolicy(),
            hasher=hasher,
            token_builder=JwtBuilder(),
        )
        hashed = service.register_password("Abcdef1!")
        token = service.issue_token("Abcdef1!", hashed, subject="user-42")

        assert service.token_builder.verify(token)["sub"] == "user-42"


class TestFromSettings:
    def test_defaults(self):
        service = CredentialService.from_settings(Settings())

        assert isinstance(service.hasher, Argon2PasswordHasher)
        assert service.pin_policy.config.exact_length == 4

    def test_configured(self):
        settings = Settings(
            password_min_length=12,
            pin_length=6,
            hash_scheme="bcrypt",
            bcrypt_rounds=4,
        )
        service = CredentialService.from_settings(settings)

        assert isinstance(service.hasher, BcryptPasswordHasher)
        assert service.password_policy.config.min_length == 12
        assert service.pin_policy.is_valid("135790")

        hashed = service.register_password("Abcdefghij1!")
        assert service.hasher.verify("Abcdefghij1!", hashed)

    def test_independent_services(self):
        strict = CredentialService.from_settings(Settings(password_min_length=16))
        lenient = CredentialService.from_settings(Settings(password_min_length=8))

        assert strict.password_policy.is_valid("Abcdef1!") is False
        assert lenient.password_policy.is_valid("Abcdef1!") is True

    @pytest.mark.parametrize("algorithm", ["HS384", "HS512"])
    def test_default_secret_fits_longer_hmac_digests(self, algorithm):
        service = CredentialService.from_settings(Settings(jwt_algorithm=algorithm))

        assert service.token_builder.verify(service.token_builder.generate()[0])
