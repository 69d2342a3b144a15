"""Entropy estimation for passphrases.

The default estimator is a closed-form character-class model:

    bits = length * log2(effective_alphabet)

The effective alphabet is the sum of the sizes of the character classes
present in the candidate. When the candidate contains a degenerate pattern
(a run of identical characters, or a short substring repeated across the
whole candidate) the estimate is multiplied by a configurable penalty.

The estimator makes a single pass over the candidate and keeps only a
fixed number of flags, so it runs in O(length) time with O(max_period)
extra space.
"""

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from credpolicy.domain.entities.policy_config import DegeneratePatternPenalty

LOWERCASE_CLASS_SIZE = 26
UPPERCASE_CLASS_SIZE = 26
DIGIT_CLASS_SIZE = 10
SYMBOL_CLASS_SIZE = 32


@dataclass(frozen=True)
class EntropyEstimate:
    """Detailed result of an entropy estimation.

    Attributes:
        bits: Final estimate after any penalty.
        raw_bits: Estimate before the penalty.
        alphabet_size: Effective alphabet size used by the candidate.
        degenerate: Whether a degenerate pattern was detected.
    """

    bits: float
    raw_bits: float
    alphabet_size: int
    degenerate: bool


@runtime_checkable
class EntropyEstimator(Protocol):
    """Strategy interface for entropy estimators.

    Implementations must be deterministic, run in O(length) time and be
    monotonic in alphabet size and length.
    """

    def estimate(self, candidate: str) -> float: ...


class CharacterClassEntropyEstimator:
    """Character-class entropy model with a degenerate-pattern penalty."""

    def __init__(self, penalty: DegeneratePatternPenalty | None = None) -> None:
        self.penalty = penalty or DegeneratePatternPenalty()

    def analyze(self, candidate: str) -> EntropyEstimate:
        """Estimate entropy and report how the estimate was reached."""
        length = len(candidate)
        if length == 0:
            return EntropyEstimate(bits=0.0, raw_bits=0.0, alphabet_size=0, degenerate=False)

        has_lower = has_upper = has_digit = has_symbol = False

        min_run = self.penalty.min_run_length
        run_length = 0
        has_run = False
        previous = ""

        # periodic[p - 1] stays True while candidate[i] == candidate[i - p]
        max_period = self.penalty.max_period
        periodic = [True] * max_period

        for i, char in enumerate(candidate):
            if "a" <= char <= "z":
                has_lower = True
            elif "A" <= char <= "Z":
                has_upper = True
            elif "0" <= char <= "9":
                has_digit = True
            else:
                has_symbol = True

            if char == previous:
                run_length += 1
            else:
                run_length = 1
                previous = char
            if run_length >= min_run:
                has_run = True

            for p in range(1, min(i, max_period) + 1):
                if periodic[p - 1] and char != candidate[i - p]:
                    periodic[p - 1] = False

        alphabet = (
            (LOWERCASE_CLASS_SIZE if has_lower else 0)
            + (UPPERCASE_CLASS_SIZE if has_upper else 0)
            + (DIGIT_CLASS_SIZE if has_digit else 0)
            + (SYMBOL_CLASS_SIZE if has_symbol else 0)
        )
        repeated = any(periodic[p - 1] and length >= 2 * p for p in range(1, max_period + 1))
        degenerate = has_run or repeated

        raw_bits = length * math.log2(alphabet)
        bits = raw_bits * self.penalty.multiplier if degenerate else raw_bits
        return EntropyEstimate(
            bits=bits,
            raw_bits=raw_bits,
            alphabet_size=alphabet,
            degenerate=degenerate,
        )

    def estimate(self, candidate: str) -> float:
        """Estimate the entropy of ``candidate`` in bits."""
        return self.analyze(candidate).bits


def estimate_entropy(candidate: str, penalty: DegeneratePatternPenalty | None = None) -> float:
    """Estimate entropy in bits with the default character-class model."""
    return CharacterClassEntropyEstimator(penalty).estimate(candidate)
