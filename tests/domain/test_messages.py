"""Tests for error kinds, message catalogs and overrides."""

from __future__ import annotations

import pytest

from plident.domain.errors import (
    IdentifierError,
    InvalidBirthDateError,
    InvalidCharactersError,
    InvalidChecksumError,
    InvalidGenderInputError,
    InvalidLengthError,
)
from plident.domain.messages import (
    LOCALES,
    ErrorKind,
    default_messages,
    resolve_messages,
)

ERROR_CLASSES = (
    InvalidLengthError,
    InvalidCharactersError,
    InvalidChecksumError,
    InvalidBirthDateError,
    InvalidGenderInputError,
)


def test_error_kind_values() -> None:
    assert {k.value for k in ErrorKind} == {
        "invalid_length",
        "invalid_characters",
        "invalid_checksum",
        "invalid_birth_date",
        "invalid_gender_input",
    }


class TestDefaultMessages:
    def test_polish_is_default(self) -> None:
        messages = default_messages("pesel")
        assert messages[ErrorKind.INVALID_LENGTH] == "Nieprawidłowa długość numeru PESEL."
        assert messages[ErrorKind.INVALID_GENDER_INPUT] == "Podano płeć w niepoprawnym formacie"

    def test_nip_polish(self) -> None:
        assert default_messages("nip")[ErrorKind.INVALID_CHECKSUM] == (
            "NIP posiada niepoprawną sumę kontrolną."
        )

    @pytest.mark.parametrize("locale", LOCALES)
    def test_pesel_catalog_complete(self, locale: str) -> None:
        assert set(default_messages("pesel", locale)) == set(ErrorKind)

    @pytest.mark.parametrize("locale", LOCALES)
    def test_nip_catalog_has_structural_kinds(self, locale: str) -> None:
        assert set(default_messages("nip", locale)) == {
            ErrorKind.INVALID_LENGTH,
            ErrorKind.INVALID_CHARACTERS,
            ErrorKind.INVALID_CHECKSUM,
        }

    def test_returns_copy(self) -> None:
        default_messages("nip")[ErrorKind.INVALID_LENGTH] = "changed"
        assert default_messages("nip")[ErrorKind.INVALID_LENGTH] != "changed"

    @pytest.mark.parametrize("scheme,locale", [("regon", "pl"), ("pesel", "de")])
    def test_unknown_catalog(self, scheme: str, locale: str) -> None:
        with pytest.raises(ValueError, match="No messages"):
            default_messages(scheme, locale)


class TestResolveMessages:
    def test_no_overrides(self) -> None:
        assert resolve_messages("nip") == default_messages("nip")

    def test_enum_value_key(self) -> None:
        messages = resolve_messages("nip", {"invalid_length": "too short"})
        assert messages[ErrorKind.INVALID_LENGTH] == "too short"
        assert messages[ErrorKind.INVALID_CHECKSUM] == default_messages("nip")[
            ErrorKind.INVALID_CHECKSUM
        ]

    def test_enum_member_key(self) -> None:
        messages = resolve_messages("nip", {ErrorKind.INVALID_CHECKSUM: "bad sum"})
        assert messages[ErrorKind.INVALID_CHECKSUM] == "bad sum"

    def test_camel_case_key(self) -> None:
        messages = resolve_messages("pesel", {"invalidBirthDate": "bad date"})
        assert messages[ErrorKind.INVALID_BIRTH_DATE] == "bad date"

    def test_overrides_on_english(self) -> None:
        messages = resolve_messages("pesel", {"invalidLength": "x"}, locale="en")
        assert messages[ErrorKind.INVALID_LENGTH] == "x"
        assert messages[ErrorKind.INVALID_CHECKSUM] == "PESEL number has an invalid checksum."

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="Unknown error message key"):
            resolve_messages("nip", {"invalidColour": "x"})


class TestErrors:
    def test_every_kind_has_an_error_class(self) -> None:
        assert {cls.kind for cls in ERROR_CLASSES} == set(ErrorKind)

    @pytest.mark.parametrize("cls", ERROR_CLASSES)
    def test_errors_are_value_errors(self, cls: type[IdentifierError]) -> None:
        exc = cls("msg")
        assert isinstance(exc, IdentifierError)
        assert isinstance(exc, ValueError)
        assert exc.kind is cls.kind
        assert exc.message == "msg"
        assert str(exc) == "msg"

    def test_catchable_as_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise InvalidLengthError("short")
