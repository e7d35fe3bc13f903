"""Typed models for delegate group lookups."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DelegateGroupFilter(BaseModel):
    """Request body selecting delegate groups by tag."""

    tags: list[str] = Field(default_factory=list)


class DelegateGroup(BaseModel):
    """Summary of a delegate group returned by the tag lookup."""

    identifier: str
    name: str

    model_config = ConfigDict(extra="allow")


__all__ = ["DelegateGroup", "DelegateGroupFilter"]
