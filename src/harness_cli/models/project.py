"""Typed model for project create requests."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from pydantic import Field

from ..scope import Scope
from .common import ResourceBody


class ProjectModule(str, Enum):
    """Modules the CLI allows attaching to a new project."""

    CI = "CI"
    CD = "CD"


class Project(ResourceBody):
    """A project always lives inside an organization."""

    envelope_key: ClassVar[str] = "project"

    modules: list[ProjectModule] = Field(default_factory=lambda: [ProjectModule.CI])
    scope: Scope = Field(default=Scope.ORG, exclude=True)


__all__ = ["Project", "ProjectModule"]
