"""ValidationService: construct identifiers and report typed outcomes.

The domain raises on invalid input; this layer turns construction into a
:class:`ServiceResult` so callers (the CLI, or any other front end) can
inspect the failure kind without catching exceptions.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from plident.config.models import ValidationConfig
from plident.domain.errors import IdentifierError
from plident.domain.identifiers import Nip, Pesel
from plident.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def mask_number(raw: str) -> str:
    """Hide all but the last four characters of *raw* for logging."""
    if len(raw) <= 4:
        return "*" * len(raw)
    return "*" * (len(raw) - 4) + raw[-4:]


class ValidationService:
    """Validate PESEL and NIP numbers under one :class:`ValidationConfig`."""

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config = config or ValidationConfig()

    def validate_pesel(
        self,
        raw: object,
        *,
        birth_date: date | None = None,
        gender: object | None = None,
    ) -> ServiceResult:
        """Validate a PESEL, optionally matching a birth date and gender.

        On success ``data`` holds ``number``, ``birth_date`` (ISO),
        ``gender`` and, when requested, ``birth_date_matches`` and
        ``gender_matches``.
        """
        op = "validate_pesel"
        try:
            pesel = Pesel(
                raw,  # type: ignore[arg-type]
                messages=self._config.messages.pesel,
                locale=self._config.locale,
                gender_policy=self._config.gender_policy,
            )
        except IdentifierError as exc:
            return self._failure(op, Pesel.scheme, raw, exc)

        data: dict[str, Any] = {
            "number": pesel.get_number(),
            "birth_date": pesel.get_birth_date().isoformat(),
            "gender": pesel.get_gender().name.lower(),
        }
        if birth_date is not None:
            data["birth_date_matches"] = pesel.has_birth_date(birth_date)
        if gender is not None:
            try:
                data["gender_matches"] = pesel.has_gender(gender)
            except IdentifierError as exc:
                return self._failure(op, Pesel.scheme, raw, exc)

        logger.debug("Valid %s %s", Pesel.scheme, mask_number(pesel.number))
        return ServiceResult(ok=True, op=op, data=data)

    def validate_nip(self, raw: object) -> ServiceResult:
        """Validate a NIP; on success ``data`` holds ``number``."""
        op = "validate_nip"
        try:
            nip = Nip(
                raw,  # type: ignore[arg-type]
                messages=self._config.messages.nip,
                locale=self._config.locale,
            )
        except IdentifierError as exc:
            return self._failure(op, Nip.scheme, raw, exc)

        logger.debug("Valid %s %s", Nip.scheme, mask_number(nip.number))
        return ServiceResult(ok=True, op=op, data={"number": nip.get_number()})

    @staticmethod
    def _failure(op: str, scheme: str, raw: object, exc: IdentifierError) -> ServiceResult:
        logger.debug("Rejected %s %s: %s", scheme, mask_number(str(raw)), exc.kind)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=exc.kind.value,
                message=exc.message,
                detail={"scheme": scheme},
            ),
        )
