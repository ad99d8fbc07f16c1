"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the config file only contains
overrides. An empty file (or none at all) validates with Polish messages
and the strict gender policy.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from plident.domain.gender import GenderInputPolicy
from plident.domain.messages import Locale, resolve_messages


class MessagesConfig(BaseModel):
    """[validation.messages] section: per-scheme message overrides.

    Keys are checked on load, so a misspelled key fails with the config
    file rather than on the first validation.
    """

    model_config = {"frozen": True}

    pesel: dict[str, str] = Field(default_factory=dict)
    nip: dict[str, str] = Field(default_factory=dict)

    @field_validator("pesel", "nip")
    @classmethod
    def _known_keys(cls, v: dict[str, str], info: ValidationInfo) -> dict[str, str]:
        resolve_messages(info.field_name, v)
        return v


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    locale: Locale = "pl"
    gender_policy: GenderInputPolicy = GenderInputPolicy.STRICT
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
