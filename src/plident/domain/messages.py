"""Error kinds and per-scheme message catalogs.

Messages are presentation only: callers may override any of them with a
partial mapping. Polish is the default locale; English is the only other one.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Literal, get_args


class ErrorKind(StrEnum):
    """Machine-readable kind of a validation failure."""

    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTERS = "invalid_characters"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_BIRTH_DATE = "invalid_birth_date"
    INVALID_GENDER_INPUT = "invalid_gender_input"


Locale = Literal["pl", "en"]
LOCALES: tuple[str, ...] = get_args(Locale)

_CATALOGS: dict[tuple[str, str], dict[ErrorKind, str]] = {
    ("pesel", "pl"): {
        ErrorKind.INVALID_LENGTH: "Nieprawidłowa długość numeru PESEL.",
        ErrorKind.INVALID_CHARACTERS: "Numer PESEL może zawierać tylko cyfry.",
        ErrorKind.INVALID_CHECKSUM: "Numer PESEL posiada niepoprawną sumę kontrolną.",
        ErrorKind.INVALID_BIRTH_DATE: "Numer PESEL zawiera nieprawidłową datę urodzenia.",
        ErrorKind.INVALID_GENDER_INPUT: "Podano płeć w niepoprawnym formacie",
    },
    ("pesel", "en"): {
        ErrorKind.INVALID_LENGTH: "Invalid PESEL number length.",
        ErrorKind.INVALID_CHARACTERS: "PESEL number may contain digits only.",
        ErrorKind.INVALID_CHECKSUM: "PESEL number has an invalid checksum.",
        ErrorKind.INVALID_BIRTH_DATE: "PESEL number contains an invalid birth date.",
        ErrorKind.INVALID_GENDER_INPUT: "Gender was given in an invalid format",
    },
    ("nip", "pl"): {
        ErrorKind.INVALID_LENGTH: "Nieprawidłowa długość NIP.",
        ErrorKind.INVALID_CHARACTERS: "NIP może zawierać tylko cyfry.",
        ErrorKind.INVALID_CHECKSUM: "NIP posiada niepoprawną sumę kontrolną.",
    },
    ("nip", "en"): {
        ErrorKind.INVALID_LENGTH: "Invalid NIP length.",
        ErrorKind.INVALID_CHARACTERS: "NIP may contain digits only.",
        ErrorKind.INVALID_CHECKSUM: "NIP has an invalid checksum.",
    },
}

# camelCase keys accepted for compatibility with older message mappings
_LEGACY_KEYS: dict[str, ErrorKind] = {
    "invalidLength": ErrorKind.INVALID_LENGTH,
    "invalidCharacters": ErrorKind.INVALID_CHARACTERS,
    "invalidChecksum": ErrorKind.INVALID_CHECKSUM,
    "invalidBirthDate": ErrorKind.INVALID_BIRTH_DATE,
    "invalidGenderInput": ErrorKind.INVALID_GENDER_INPUT,
}


def _coerce_kind(key: str) -> ErrorKind:
    if key in _LEGACY_KEYS:
        return _LEGACY_KEYS[key]
    try:
        return ErrorKind(key)
    except ValueError:
        msg = f"Unknown error message key: {key!r}"
        raise ValueError(msg) from None


def default_messages(scheme: str, locale: str = "pl") -> dict[ErrorKind, str]:
    """Return a fresh copy of the default catalog for *scheme* and *locale*."""
    try:
        return dict(_CATALOGS[(scheme, locale)])
    except KeyError:
        msg = f"No messages for scheme {scheme!r} in locale {locale!r}"
        raise ValueError(msg) from None


def resolve_messages(
    scheme: str,
    overrides: Mapping[str, str] | None = None,
    *,
    locale: str = "pl",
) -> dict[ErrorKind, str]:
    """Merge caller *overrides* on top of the default catalog.

    Keys may be :class:`ErrorKind` members, their string values, or the
    camelCase names (``invalidLength``, ...). Unknown keys raise ValueError.
    """
    messages = default_messages(scheme, locale)
    for key, text in (overrides or {}).items():
        messages[_coerce_kind(key)] = text
    return messages
