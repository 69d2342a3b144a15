"""Configuration management for credpolicy.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Settings are only read to build policy
configuration objects; policies never consult them implicitly.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from credpolicy.domain.entities.policy_config import (
    DEFAULT_SPECIAL_CHARSET,
    DegeneratePatternPenalty,
    PassphrasePolicyConfig,
    PasswordPolicyConfig,
    PinPolicyConfig,
)

DEFAULT_SECRET = "change-me-in-production-use-openssl-rand-hex-64-for-an-hs512-sized-secret"


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables prefixed with
    ``CREDPOLICY_`` and from a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CREDPOLICY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "credpolicy"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Password Policy Defaults
    password_min_length: int = 8
    password_max_length: int = 128
    password_require_upper: bool = True
    password_require_lower: bool = True
    password_require_digit: bool = True
    password_special_charset: str | None = DEFAULT_SPECIAL_CHARSET

    # Passphrase Policy Defaults
    passphrase_min_length: int = 12
    passphrase_max_length: int = 256
    passphrase_min_entropy_bits: float = 60.0
    passphrase_penalty_multiplier: float = 0.5
    passphrase_min_run_length: int = 3
    passphrase_max_period: int = 4

    # PIN Policy Defaults
    pin_length: int = 4
    pin_reject_weak_patterns: bool = True

    # Hashing Settings
    hash_scheme: Literal["argon2", "bcrypt"] = "argon2"
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Token Settings
    jwt_algorithm: Literal["HS256", "HS384", "HS512", "RS256", "RS384", "RS512"] = "HS256"
    jwt_secret_key: str = Field(
        default=DEFAULT_SECRET,
        description="Secret key for HMAC JWT signing",
    )
    jwt_issuer: str = "credpolicy"
    jwt_expires_in_seconds: int = 3600
    api_key_secret: str = Field(
        default=DEFAULT_SECRET,
        description="Secret key for API key signing",
    )

    @field_validator("password_special_charset", mode="before")
    @classmethod
    def parse_special_charset(cls, v: str | None) -> str | None:
        """Treat an empty value as 'no special character required'."""
        if isinstance(v, str) and not v:
            return None
        return v

    @model_validator(mode="after")
    def validate_jwt_expiry(self) -> "Settings":
        """Token lifetimes must be positive."""
        if self.jwt_expires_in_seconds <= 0:
            raise ValueError(
                f"jwt_expires_in_seconds must be positive, got {self.jwt_expires_in_seconds}"
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    def password_policy_config(self) -> PasswordPolicyConfig:
        """Build the password policy configuration from settings."""
        return PasswordPolicyConfig(
            min_length=self.password_min_length,
            max_length=self.password_max_length,
            require_upper=self.password_require_upper,
            require_lower=self.password_require_lower,
            require_digit=self.password_require_digit,
            special_charset=self.password_special_charset,
        )

    def passphrase_policy_config(self) -> PassphrasePolicyConfig:
        """Build the passphrase policy configuration from settings."""
        return PassphrasePolicyConfig(
            min_length=self.passphrase_min_length,
            max_length=self.passphrase_max_length,
            min_entropy_bits=self.passphrase_min_entropy_bits,
            penalty=DegeneratePatternPenalty(
                multiplier=self.passphrase_penalty_multiplier,
                min_run_length=self.passphrase_min_run_length,
                max_period=self.passphrase_max_period,
            ),
        )

    def pin_policy_config(self) -> PinPolicyConfig:
        """Build the PIN policy configuration from settings."""
        return PinPolicyConfig(
            exact_length=self.pin_length,
            reject_weak_patterns=self.pin_reject_weak_patterns,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
