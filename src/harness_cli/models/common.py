"""Fields shared by every resource request body."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..scope import Scope, ScopeContext


class ResourceBody(BaseModel):
    """Base payload for create calls.

    Subclasses set :attr:`envelope_key`, the key the API expects the payload to
    be wrapped in. ``scope`` travels with the body but is never serialized.
    """

    envelope_key: ClassVar[str]

    account_identifier: str = Field(alias="accountIdentifier")
    org_identifier: str | None = Field(default=None, alias="orgIdentifier")
    project_identifier: str | None = Field(default=None, alias="projectIdentifier")
    identifier: str
    name: str
    description: str | None = None
    tags: dict[str, str] | None = None
    scope: Scope = Field(default=Scope.PROJECT, exclude=True)

    model_config = ConfigDict(populate_by_name=True)

    def scope_context(self) -> ScopeContext:
        return ScopeContext(self.scope, self.org_identifier, self.project_identifier)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def envelope(self) -> dict[str, Any]:
        return {self.envelope_key: self.to_payload()}


__all__ = ["ResourceBody"]
