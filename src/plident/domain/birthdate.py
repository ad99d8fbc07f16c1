"""PESEL birth date decoding.

Digits 0-5 are ``YYMMDD``. The tens digit of the month field selects the
century; the real month is the field modulo 20:

    month field   century
    01-12         1900
    21-32         2000
    41-52         2100
    61-72         2200
    81-92         1800

Leap years follow the proleptic Gregorian rule for the whole range.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime

from plident.domain.errors import InvalidBirthDateError

MIN_YEAR = 1800
MAX_YEAR = 2299


@dataclass(frozen=True)
class BirthInfo:
    """Year, month and day as decoded; not necessarily a real date."""

    year: int
    month: int
    day: int

    def as_date(self) -> date:
        return date(self.year, self.month, self.day)


def century_from_selector(selector: int) -> int:
    """Map the month tens digit (0-9) to a century (18-22)."""
    return 18 + ((selector + 2) % 10) // 2


def decode_birth_info(number: str) -> BirthInfo:
    """Decode the birth date fields of an all-digit PESEL *number*."""
    century = century_from_selector(int(number[2]))
    return BirthInfo(
        year=century * 100 + int(number[0:2]),
        month=int(number[2:4]) % 20,
        day=int(number[4:6]),
    )


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def is_calendar_date(info: BirthInfo) -> bool:
    if not MIN_YEAR <= info.year <= MAX_YEAR:
        return False
    if not 1 <= info.month <= 12:
        return False
    return 1 <= info.day <= days_in_month(info.year, info.month)


def validate_birth_info(info: BirthInfo, message: str) -> None:
    if not is_calendar_date(info):
        raise InvalidBirthDateError(message)


def as_calendar_date(value: date | datetime) -> date:
    """Drop any time-of-day component."""
    if isinstance(value, datetime):
        return value.date()
    return value
