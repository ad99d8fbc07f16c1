"""Tests for ValidationService."""

from __future__ import annotations

import json
import logging
from datetime import date

import pytest

from plident.config.models import MessagesConfig, ValidationConfig
from plident.domain.gender import GenderInputPolicy
from plident.services.validation import ValidationService, mask_number


@pytest.fixture
def svc() -> ValidationService:
    return ValidationService()


class TestValidatePesel:
    def test_valid(self, svc: ValidationService) -> None:
        result = svc.validate_pesel("83082317338")
        assert result.ok is True
        assert result.op == "validate_pesel"
        assert result.data == {
            "number": "83082317338",
            "birth_date": "1983-08-23",
            "gender": "male",
        }

    def test_female(self, svc: ValidationService) -> None:
        result = svc.validate_pesel("93080611761")
        assert result.data["gender"] == "female"
        assert result.data["birth_date"] == "1993-08-06"

    @pytest.mark.parametrize(
        "raw,code",
        [
            ("1234", "invalid_length"),
            ("aaaaaaaaaaa", "invalid_characters"),
            ("11111111111", "invalid_checksum"),
            ("44444444444", "invalid_birth_date"),
            (1234, "invalid_length"),
        ],
    )
    def test_invalid(self, svc: ValidationService, raw: object, code: str) -> None:
        result = svc.validate_pesel(raw)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == code
        assert result.error.detail == {"scheme": "pesel"}
        assert result.data == {}

    def test_birth_date_match(self, svc: ValidationService) -> None:
        result = svc.validate_pesel("83082317338", birth_date=date(1983, 8, 23))
        assert result.data["birth_date_matches"] is True

    def test_birth_date_mismatch_is_still_ok(self, svc: ValidationService) -> None:
        result = svc.validate_pesel("83082317338", birth_date=date(1983, 8, 22))
        assert result.ok is True
        assert result.data["birth_date_matches"] is False

    def test_gender_match(self, svc: ValidationService) -> None:
        result = svc.validate_pesel("83082317338", gender="1")
        assert result.data["gender_matches"] is True

    def test_gender_mismatch(self, svc: ValidationService) -> None:
        result = svc.validate_pesel("83082317338", gender=0)
        assert result.data["gender_matches"] is False

    def test_gender_input_rejected_under_strict(self, svc: ValidationService) -> None:
        result = svc.validate_pesel("83082317338", gender="M")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "invalid_gender_input"

    def test_extended_policy_from_config(self) -> None:
        svc = ValidationService(ValidationConfig(gender_policy=GenderInputPolicy.EXTENDED))
        result = svc.validate_pesel("83082317338", gender="M")
        assert result.data["gender_matches"] is True

    def test_message_overrides_from_config(self) -> None:
        config = ValidationConfig(messages=MessagesConfig(pesel={"invalidChecksum": "zła suma"}))
        result = ValidationService(config).validate_pesel("11111111111")
        assert result.error is not None
        assert result.error.message == "zła suma"

    def test_english_locale(self) -> None:
        result = ValidationService(ValidationConfig(locale="en")).validate_pesel("1234")
        assert result.error is not None
        assert result.error.message == "Invalid PESEL number length."


class TestValidateNip:
    def test_valid(self, svc: ValidationService) -> None:
        result = svc.validate_nip("5272944982")
        assert result.ok is True
        assert result.op == "validate_nip"
        assert result.data == {"number": "5272944982"}

    def test_integer_input(self, svc: ValidationService) -> None:
        assert svc.validate_nip(5272944982).ok is True

    def test_checksum_mismatch(self, svc: ValidationService) -> None:
        result = svc.validate_nip("1234567890")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "invalid_checksum"
        assert result.error.message == "NIP posiada niepoprawną sumę kontrolną."

    def test_result_serializes(self, svc: ValidationService) -> None:
        parsed = json.loads(svc.validate_nip("1234").model_dump_json())
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "invalid_length"
        assert parsed["error"]["detail"] == {"scheme": "nip"}


class TestLogging:
    def test_number_is_masked(
        self, svc: ValidationService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="plident"):
            svc.validate_pesel("83082317338")
            svc.validate_nip("1234567890")
        assert "*******7338" in caplog.text
        assert "83082317338" not in caplog.text
        assert "invalid_checksum" in caplog.text


@pytest.mark.parametrize(
    "raw,masked",
    [("83082317338", "*******7338"), ("1234", "****"), ("", ""), ("12345", "*2345")],
)
def test_mask_number(raw: str, masked: str) -> None:
    assert mask_number(raw) == masked
