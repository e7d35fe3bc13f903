"""Decode response documents into typed operation results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from .errors import DecodeError

STATUS_SUCCESS = "SUCCESS"
STATUS_ERROR = "ERROR"
CODE_DUPLICATE_FIELD = "DUPLICATE_FIELD"


@dataclass(frozen=True)
class Success:
    identifier: str


@dataclass(frozen=True)
class Deleted:
    identifier: str
    deleted: bool


@dataclass(frozen=True)
class Duplicate:
    name: str


@dataclass(frozen=True)
class RemoteFailure:
    code: str | None
    message: str | None
    document: Mapping[str, Any] = field(default_factory=dict, compare=False)


CreateResult = Union[Success, Duplicate, RemoteFailure]
DeleteResult = Union[Deleted, RemoteFailure]


def is_success(document: Mapping[str, Any]) -> bool:
    return document.get("status") == STATUS_SUCCESS


def remote_failure(document: Mapping[str, Any]) -> RemoteFailure:
    code = document.get("code")
    message = document.get("message")
    return RemoteFailure(
        code=str(code) if code is not None else None,
        message=str(message) if message is not None else None,
        document=document,
    )


def decode_create(document: Mapping[str, Any], response_key: str, name: str) -> CreateResult:
    """Interpret the reply to a create call.

    Args:
        document: Decoded response body.
        response_key: Key under ``data`` holding the created resource.
        name: Display name the caller asked for, echoed in :class:`Duplicate`.

    Raises:
        DecodeError: When a ``SUCCESS`` reply lacks ``data.<key>.identifier``.
    """

    if is_success(document):
        data = document.get("data")
        resource = data.get(response_key) if isinstance(data, Mapping) else None
        identifier = resource.get("identifier") if isinstance(resource, Mapping) else None
        if not isinstance(identifier, str):
            raise DecodeError(
                f"successful response has no data.{response_key}.identifier", body=document
            )
        return Success(identifier)
    if document.get("code") == CODE_DUPLICATE_FIELD:
        return Duplicate(name)
    return remote_failure(document)


def decode_delete(document: Mapping[str, Any], identifier: str) -> DeleteResult:
    """Interpret the reply to a delete call, whose ``data`` is a boolean flag."""

    if is_success(document):
        data = document.get("data")
        if not isinstance(data, bool):
            raise DecodeError("successful delete response has no boolean data flag", body=document)
        return Deleted(identifier, data)
    return remote_failure(document)


__all__ = [
    "CODE_DUPLICATE_FIELD",
    "STATUS_ERROR",
    "STATUS_SUCCESS",
    "CreateResult",
    "DeleteResult",
    "Deleted",
    "Duplicate",
    "RemoteFailure",
    "Success",
    "decode_create",
    "decode_delete",
    "is_success",
    "remote_failure",
]
