"""Typed validation failures.

An identifier either satisfies every invariant or construction raises one
of these. They subclass ValueError so callers can treat any malformed
input uniformly.
"""

from __future__ import annotations

from typing import ClassVar

from plident.domain.messages import ErrorKind


class IdentifierError(ValueError):
    """Base class for every rejection of a malformed identifier."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidLengthError(IdentifierError):
    kind = ErrorKind.INVALID_LENGTH


class InvalidCharactersError(IdentifierError):
    kind = ErrorKind.INVALID_CHARACTERS


class InvalidChecksumError(IdentifierError):
    kind = ErrorKind.INVALID_CHECKSUM


class InvalidBirthDateError(IdentifierError):
    kind = ErrorKind.INVALID_BIRTH_DATE


class InvalidGenderInputError(IdentifierError):
    kind = ErrorKind.INVALID_GENDER_INPUT

