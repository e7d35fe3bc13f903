"""Typed models for secret create requests."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .common import ResourceBody

DEFAULT_SECRET_MANAGER = "harnessSecretManager"


class SecretType(str, Enum):
    SECRET_FILE = "SecretFile"
    SECRET_TEXT = "SecretText"
    SSH_KEY = "SSHKey"
    WINRM_CREDENTIALS = "WinRmCredentials"


class SecretValueType(str, Enum):
    INLINE = "Inline"
    REFERENCE = "Reference"
    CUSTOM_SECRET_MANAGER_VALUES = "CustomSecretManagerValues"


class SecretSpec(BaseModel):
    """Type specific part of a secret payload."""

    error_message_for_invalid_yaml: str | None = Field(
        default=None, alias="errorMessageForInvalidYaml"
    )
    secret_manager_identifier: str = Field(
        default=DEFAULT_SECRET_MANAGER, alias="secretManagerIdentifier"
    )
    value: str | None = None
    value_type: SecretValueType | None = Field(default=None, alias="valueType")
    type: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class Secret(ResourceBody):
    envelope_key: ClassVar[str] = "secret"

    type: SecretType
    private_secret: bool = Field(default=False, alias="privateSecret")
    spec: SecretSpec = Field(default_factory=SecretSpec)

    @property
    def is_file_backed(self) -> bool:
        """Every type except ``SecretText`` uploads its content as a file."""

        return self.type is not SecretType.SECRET_TEXT


__all__ = [
    "DEFAULT_SECRET_MANAGER",
    "Secret",
    "SecretSpec",
    "SecretType",
    "SecretValueType",
]
