"""Scope handling shared by every resource operation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

QUERY_PARAM_ORG_ID = "orgIdentifier"
QUERY_PARAM_PROJECT_ID = "projectIdentifier"


class Scope(str, Enum):
    """Organizational level a resource is created at or looked up from."""

    ACCOUNT = "account"
    ORG = "org"
    PROJECT = "project"

    @classmethod
    def coerce(cls, value: Scope | str | None) -> Scope | None:
        """Return the matching member, or ``None`` for unknown values."""

        if isinstance(value, Scope):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


def apply_scope(scope: Scope | str | None, org_id: str, project_id: str) -> dict[str, str]:
    """Return the identifying query parameters for ``scope``.

    ``project`` always sends both identifiers, even an empty project id, and
    ``org`` sends the org identifier only. Any other value, ``account``
    included, sends whichever identifiers are non-empty, which lets deletes and
    lists run without naming a scope at all.
    """

    value = Scope.coerce(scope)
    if value is Scope.PROJECT:
        return {QUERY_PARAM_ORG_ID: org_id, QUERY_PARAM_PROJECT_ID: project_id}
    if value is Scope.ORG:
        return {QUERY_PARAM_ORG_ID: org_id}
    params: dict[str, str] = {}
    if org_id:
        params[QUERY_PARAM_ORG_ID] = org_id
    if project_id:
        params[QUERY_PARAM_PROJECT_ID] = project_id
    return params


@dataclass(frozen=True)
class ScopeContext:
    """Scope plus the org/project identifiers a resource carries at that scope."""

    scope: Scope
    org_id: str | None = None
    project_id: str | None = None

    @classmethod
    def build(
        cls, scope: Scope | str, org_id: str | None, project_id: str | None
    ) -> ScopeContext:
        value = Scope.coerce(scope) or Scope.ACCOUNT
        if value is Scope.PROJECT:
            return cls(value, org_id or "", project_id or "")
        if value is Scope.ORG:
            return cls(value, org_id or "", None)
        return cls(value, None, None)

    def query_params(self) -> dict[str, str]:
        return apply_scope(self.scope, self.org_id or "", self.project_id or "")


__all__ = [
    "QUERY_PARAM_ORG_ID",
    "QUERY_PARAM_PROJECT_ID",
    "Scope",
    "ScopeContext",
    "apply_scope",
]
