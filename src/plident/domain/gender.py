"""Gender decoding and accepted gender inputs.

Two historical variants of the PESEL API disagree on which inputs
``has_gender`` accepts, so the choice is a policy:

- STRICT: ``0``, ``1``, ``"0"``, ``"1"`` (and Gender members).
- EXTENDED: STRICT plus the letter codes K/W/F (female) and M (male),
  case-insensitive.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

from plident.domain.errors import InvalidGenderInputError


class Gender(IntEnum):
    """Gender encoded by the parity of PESEL digit 9."""

    FEMALE = 0
    MALE = 1


class GenderInputPolicy(StrEnum):
    """Which caller inputs are accepted as a gender."""

    STRICT = "strict"
    EXTENDED = "extended"


GENDER_DIGIT = 9

_STRICT_INPUTS: dict[object, Gender] = {
    0: Gender.FEMALE,
    1: Gender.MALE,
    "0": Gender.FEMALE,
    "1": Gender.MALE,
}

_LETTER_CODES: dict[str, Gender] = {
    "K": Gender.FEMALE,  # kobieta
    "W": Gender.FEMALE,  # woman
    "F": Gender.FEMALE,
    "M": Gender.MALE,
}


def gender_from_digit(digit: str) -> Gender:
    return Gender(int(digit) % 2)


def normalize_gender(
    value: object,
    policy: GenderInputPolicy = GenderInputPolicy.STRICT,
    *,
    message: str | None = None,
) -> Gender:
    """Map an accepted gender input to :class:`Gender`.

    Raises:
        InvalidGenderInputError: *value* is not accepted under *policy*.
            Booleans are always rejected even though they compare equal
            to 0 and 1.
    """
    policy = GenderInputPolicy(policy)
    if isinstance(value, bool):
        raise InvalidGenderInputError(message or f"Invalid gender: {value!r}")
    if isinstance(value, (int, str)) and value in _STRICT_INPUTS:
        return _STRICT_INPUTS[value]
    if policy == GenderInputPolicy.EXTENDED and isinstance(value, str):
        gender = _LETTER_CODES.get(value.upper())
        if gender is not None and len(value) == 1:
            return gender
    raise InvalidGenderInputError(message or f"Invalid gender: {value!r}")
