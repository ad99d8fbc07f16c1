"""plident: validation and decoding of Polish PESEL and NIP numbers."""

from plident.domain.birthdate import BirthInfo
from plident.domain.checksum import NIP_CHECKSUM, PESEL_CHECKSUM, ChecksumSpec
from plident.domain.errors import (
    IdentifierError,
    InvalidBirthDateError,
    InvalidCharactersError,
    InvalidChecksumError,
    InvalidGenderInputError,
    InvalidLengthError,
)
from plident.domain.gender import Gender, GenderInputPolicy
from plident.domain.identifiers import Nip, NumericIdentifier, Pesel
from plident.domain.messages import ErrorKind

__version__ = "1.0.0"

__all__ = [
    "NIP_CHECKSUM",
    "PESEL_CHECKSUM",
    "BirthInfo",
    "ChecksumSpec",
    "ErrorKind",
    "Gender",
    "GenderInputPolicy",
    "IdentifierError",
    "InvalidBirthDateError",
    "InvalidCharactersError",
    "InvalidChecksumError",
    "InvalidGenderInputError",
    "InvalidLengthError",
    "Nip",
    "NumericIdentifier",
    "Pesel",
    "__version__",
]
