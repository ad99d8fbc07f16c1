"""Generic weighted-modulus checksum engine.

A scheme is described by a :class:`ChecksumSpec`: one weight per payload
digit, a modulus, and whether the check digit is the remainder itself or
its complement to the modulus. The last character of a number is always
the check digit, so the expected length is ``len(weights) + 1``.

INVARIANT: length is checked before characters, and characters before
the checksum. The first failure wins.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field

from plident.domain.errors import (
    InvalidCharactersError,
    InvalidChecksumError,
    InvalidLengthError,
)
from plident.domain.messages import ErrorKind

_ASCII_DIGITS = frozenset("0123456789")


class ChecksumSpec(BaseModel):
    """Configuration of one weighted-modulus checksum scheme."""

    model_config = {"frozen": True}

    weights: tuple[int, ...] = Field(min_length=1)
    modulus: int = Field(gt=1)
    reverse: bool = False

    @property
    def length(self) -> int:
        """Total number length, payload plus the check digit."""
        return len(self.weights) + 1


PESEL_CHECKSUM = ChecksumSpec(weights=(1, 3, 7, 9, 1, 3, 7, 9, 1, 3), modulus=10, reverse=True)
NIP_CHECKSUM = ChecksumSpec(weights=(6, 5, 7, 2, 3, 4, 5, 6, 7), modulus=11)


def has_valid_length(spec: ChecksumSpec, number: str) -> bool:
    return len(number) == spec.length


def contains_only_digits(number: str) -> bool:
    """True for a non-empty string of ASCII ``0-9`` only.

    ``str.isdigit`` is not enough: it accepts superscripts and digits from
    other scripts.
    """
    return bool(number) and all(ch in _ASCII_DIGITS for ch in number)


def compute_check_digit(spec: ChecksumSpec, payload: str) -> int:
    """Compute the expected check digit for *payload*.

    *payload* must be exactly ``len(spec.weights)`` ASCII digits. The result
    can be 10 or more when the modulus exceeds 10; no single digit matches
    it, so such payloads have no valid number.
    """
    if len(payload) != len(spec.weights):
        msg = f"Payload must have {len(spec.weights)} digits, got {len(payload)}"
        raise ValueError(msg)
    total = sum(w * int(d) for w, d in zip(spec.weights, payload, strict=True))
    remainder = total % spec.modulus
    if spec.reverse:
        return 0 if remainder == 0 else spec.modulus - remainder
    return remainder


def has_valid_checksum(spec: ChecksumSpec, number: str) -> bool:
    """Check the last digit of a structurally valid *number*."""
    return compute_check_digit(spec, number[:-1]) == int(number[-1])


def verify(spec: ChecksumSpec, number: str, messages: Mapping[ErrorKind, str]) -> None:
    """Raise the first violated rule for *number*, or return None.

    Raises:
        InvalidLengthError: length differs from ``spec.length``.
        InvalidCharactersError: any character is not an ASCII digit.
        InvalidChecksumError: the check digit does not match.
    """
    if not has_valid_length(spec, number):
        raise InvalidLengthError(messages[ErrorKind.INVALID_LENGTH])
    if not contains_only_digits(number):
        raise InvalidCharactersError(messages[ErrorKind.INVALID_CHARACTERS])
    if not has_valid_checksum(spec, number):
        raise InvalidChecksumError(messages[ErrorKind.INVALID_CHECKSUM])
