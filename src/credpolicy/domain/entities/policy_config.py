"""Immutable policy configuration objects.

One configuration model exists per credential kind. Configurations are
validated when they are built and frozen afterwards, so a single instance
can be shared between any number of concurrent validations.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Printable ASCII punctuation
DEFAULT_SPECIAL_CHARSET = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?`~"


class _FrozenConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class _LengthBounds(_FrozenConfig):
    min_length: int = Field(..., ge=0, description="Minimum length in characters")
    max_length: int = Field(..., ge=1, description="Maximum length in characters")

    @model_validator(mode="after")
    def validate_bounds(self) -> "_LengthBounds":
        """Reject bounds that can never be satisfied."""
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) must not exceed max_length ({self.max_length})"
            )
        return self


class PasswordPolicyConfig(_LengthBounds):
    """Configuration for general password validation.

    Attributes:
        min_length: Minimum password length.
        max_length: Maximum password length.
        require_upper: Require at least one ASCII uppercase letter.
        require_lower: Require at least one ASCII lowercase letter.
        require_digit: Require at least one ASCII digit.
        special_charset: Characters that count as special. When set, at least
            one of them is required. ``None`` disables the requirement.
    """

    min_length: int = Field(default=8, ge=0)
    max_length: int = Field(default=128, ge=1)
    require_upper: bool = True
    require_lower: bool = True
    require_digit: bool = True
    special_charset: str | None = DEFAULT_SPECIAL_CHARSET

    @field_validator("special_charset")
    @classmethod
    def validate_special_charset(cls, v: str | None) -> str | None:
        """An empty charset could never be satisfied."""
        if v is not None and not v:
            raise ValueError("special_charset must be None or a non-empty string")
        return v


class DegeneratePatternPenalty(_FrozenConfig):
    """How the entropy estimator punishes degenerate patterns.

    Attributes:
        multiplier: Factor applied to the raw estimate when a pattern is found.
        min_run_length: Identical consecutive characters that count as a run.
        max_period: Longest substring checked for full repetition
            (e.g. ``"abcabcabc"`` has period 3).
    """

    multiplier: float = Field(default=0.5, gt=0.0, le=1.0)
    min_run_length: int = Field(default=3, ge=2)
    max_period: int = Field(default=4, ge=1, le=64)


class PassphrasePolicyConfig(_LengthBounds):
    """Configuration for passphrase validation and entropy scoring."""

    min_length: int = Field(default=12, ge=1)
    max_length: int = Field(default=256, ge=1)
    min_entropy_bits: float = Field(default=60.0, ge=0.0)
    penalty: DegeneratePatternPenalty = Field(default_factory=DegeneratePatternPenalty)


class PinPolicyConfig(_FrozenConfig):
    """Configuration for numeric PIN validation.

    A PIN has a single exact length, so ``min_length`` and ``max_length``
    are both derived from ``exact_length``.
    """

    exact_length: int = Field(default=4, ge=1, le=64)
    reject_weak_patterns: bool = True

    @property
    def min_length(self) -> int:
        return self.exact_length

    @property
    def max_length(self) -> int:
        return self.exact_length
