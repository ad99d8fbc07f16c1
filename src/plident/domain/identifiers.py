"""Validated identifier value objects: PESEL and NIP.

INVARIANT: an instance exists only if its number passed every rule of its
scheme. There is no "invalid identifier" state; invalidity is a
construction failure raising an :class:`IdentifierError` subclass.

The checksum itself is the free function :func:`verify`; the classes only
bind a scheme to it and, for PESEL, layer decoding on top.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, ClassVar, Self

from plident.domain.birthdate import (
    BirthInfo,
    as_calendar_date,
    decode_birth_info,
    validate_birth_info,
)
from plident.domain.checksum import NIP_CHECKSUM, PESEL_CHECKSUM, ChecksumSpec, verify
from plident.domain.errors import IdentifierError
from plident.domain.gender import (
    GENDER_DIGIT,
    Gender,
    GenderInputPolicy,
    gender_from_digit,
    normalize_gender,
)
from plident.domain.messages import ErrorKind, resolve_messages


@dataclass(frozen=True)
class NumericIdentifier:
    """Immutable, checksum-valid digit string.

    Non-string input is coerced with ``str()`` before validation, so
    ``Nip(1234)`` fails on length rather than on type.

    Attributes:
        number: The canonical digit string, exactly as given.
        messages: Optional partial override of the error messages.
        locale: Locale of the default messages (``"pl"`` or ``"en"``).
    """

    scheme: ClassVar[str]
    checksum: ClassVar[ChecksumSpec]

    number: str
    messages: Mapping[str, str] | None = field(default=None, repr=False, compare=False, kw_only=True)
    locale: str = field(default="pl", repr=False, compare=False, kw_only=True)
    error_messages: dict[ErrorKind, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "number", str(self.number))
        resolved = resolve_messages(self.scheme, self.messages, locale=self.locale)
        object.__setattr__(self, "error_messages", resolved)
        self._validate()

    def _validate(self) -> None:
        verify(self.checksum, self.number, self.error_messages)

    @classmethod
    def create(cls, number: object, **kwargs: Any) -> Self:
        """Construct a validated identifier; raises on invalid input."""
        return cls(number, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def is_valid(cls, number: object) -> bool:
        """Return whether *number* would construct. Never raises."""
        try:
            cls(number)  # type: ignore[arg-type]
        except IdentifierError:
            return False
        return True

    def get_number(self) -> str:
        return self.number

    def to_display_string(self) -> str:
        return self.number

    def __str__(self) -> str:
        return self.number


@dataclass(frozen=True)
class Nip(NumericIdentifier):
    """Polish tax identification number (10 digits, checksum only)."""

    scheme: ClassVar[str] = "nip"
    checksum: ClassVar[ChecksumSpec] = NIP_CHECKSUM


@dataclass(frozen=True)
class Pesel(NumericIdentifier):
    """Polish personal identification number (11 digits).

    Validation order: length, characters, checksum, birth date. The
    decoded birth date is cached on the instance.

    Attributes:
        gender_policy: Which inputs :meth:`has_gender` accepts.
        birth_info: Decoded year, month and day (always a real date).
    """

    scheme: ClassVar[str] = "pesel"
    checksum: ClassVar[ChecksumSpec] = PESEL_CHECKSUM

    GENDER_FEMALE: ClassVar[Gender] = Gender.FEMALE
    GENDER_MALE: ClassVar[Gender] = Gender.MALE

    gender_policy: GenderInputPolicy = field(
        default=GenderInputPolicy.STRICT, repr=False, compare=False, kw_only=True
    )
    birth_info: BirthInfo = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # "extended" and GenderInputPolicy.EXTENDED must behave the same
        object.__setattr__(self, "gender_policy", GenderInputPolicy(self.gender_policy))
        super().__post_init__()

    def _validate(self) -> None:
        super()._validate()
        info = decode_birth_info(self.number)
        validate_birth_info(info, self.error_messages[ErrorKind.INVALID_BIRTH_DATE])
        object.__setattr__(self, "birth_info", info)

    def get_birth_date(self) -> date:
        return self.birth_info.as_date()

    def has_birth_date(self, birth_date: date | datetime) -> bool:
        """Compare calendar dates only; any time of day is ignored."""
        return self.get_birth_date() == as_calendar_date(birth_date)

    def has_date_of_birth(self, birth_date: date | datetime) -> bool:
        """Alias for :meth:`has_birth_date`."""
        return self.has_birth_date(birth_date)

    def get_gender(self) -> Gender:
        return gender_from_digit(self.number[GENDER_DIGIT])

    def has_gender(self, gender: object) -> bool:
        """Check *gender* against the encoded one.

        Raises:
            InvalidGenderInputError: *gender* is not accepted under
                :attr:`gender_policy`.
        """
        expected = normalize_gender(
            gender,
            self.gender_policy,
            message=self.error_messages[ErrorKind.INVALID_GENDER_INPUT],
        )
        return self.get_gender() == expected
